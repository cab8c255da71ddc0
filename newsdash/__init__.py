"""Configuration tooling for the news dashboard analytics engine."""
from __future__ import annotations

from .config_manager import Config, ConfigError, explain, load_config
from .config_schema import DEFAULT_CONFIG

__all__ = [
    "Config",
    "ConfigError",
    "DEFAULT_CONFIG",
    "explain",
    "load_config",
]
