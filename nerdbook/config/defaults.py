"""Default configuration values for NerdBook."""

from .config import NerdBookConfig


def create_default_config(**overrides) -> NerdBookConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        NerdBookConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            debounce_delay=0.25,
            max_results=20
        )
    """
    return NerdBookConfig(**overrides)
