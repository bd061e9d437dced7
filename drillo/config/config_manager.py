"""Configuration persistence manager."""

import json
import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any

from .config import DrilloConfig
from .defaults import create_default_config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path.home() / ".drillo" / "config.json"


class ConfigManager:
    """Manager for configuration persistence.

    Saves and loads user configuration to/from a JSON file. Path objects are
    serialized as strings, and a missing or invalid file falls back to the
    default configuration.
    """

    def __init__(self, config_file: Path = DEFAULT_CONFIG_FILE):
        self.config_file = Path(config_file)

    def save_config(self, config: DrilloConfig) -> None:
        """Save configuration to the JSON file.

        Args:
            config: Configuration to save

        Raises:
            OSError: If unable to create directory or write file
        """
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        config_dict = self._paths_to_strings(asdict(config))

        with self.config_file.open("w", encoding="utf-8") as f:
            json.dump(config_dict, f, indent=2, ensure_ascii=False)

    def load_config(self, **overrides) -> DrilloConfig:
        """Load configuration from the JSON file.

        Args:
            **overrides: Values that take precedence over the file contents

        Returns:
            Loaded configuration, or default configuration if the file
            doesn't exist or is invalid
        """
        if not self.config_exists():
            return create_default_config(**overrides)

        try:
            with self.config_file.open("r", encoding="utf-8") as f:
                config_dict = json.load(f)

            if not isinstance(config_dict, dict):
                raise ValueError("top-level JSON value must be an object")

            known = {f.name for f in fields(DrilloConfig)}
            unknown = set(config_dict) - known
            if unknown:
                logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}")
            config_dict = {k: v for k, v in config_dict.items() if k in known}
            config_dict.update(overrides)

            return DrilloConfig(**config_dict)

        except (json.JSONDecodeError, TypeError, ValueError) as e:
            logger.warning(f"Invalid config file, using defaults: {e}")
            return create_default_config(**overrides)

    def config_exists(self) -> bool:
        """Check if the configuration file exists."""
        return self.config_file.exists()

    @staticmethod
    def _paths_to_strings(data: dict[str, Any]) -> dict[str, Any]:
        """Convert Path values in a dict to strings."""
        return {key: str(value) if isinstance(value, Path) else value for key, value in data.items()}
