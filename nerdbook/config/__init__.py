"""Configuration management for NerdBook."""

from .config import NerdBookConfig
from .defaults import create_default_config

__all__ = ["NerdBookConfig", "create_default_config"]
