"""Configuration management for Drillo."""

from .config import DrilloConfig
from .config_manager import ConfigManager
from .defaults import create_default_config

__all__ = ["DrilloConfig", "ConfigManager", "create_default_config"]
