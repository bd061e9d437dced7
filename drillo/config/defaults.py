"""Default configuration values for Drillo."""

from .config import DrilloConfig


def create_default_config(**overrides) -> DrilloConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        DrilloConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            noise_amplitude=0.0,
            staleness_days=14
        )
    """
    return DrilloConfig(**overrides)
