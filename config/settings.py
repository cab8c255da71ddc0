"""Process-wide settings used when no explicit configuration is passed in."""
from __future__ import annotations

from typing import Any, Dict

from newsdash.config_manager import Config, load_config

CONFIG: Config = load_config()

DEBUG: bool = CONFIG.app.debug
LOGGING_CONFIG: Dict[str, Any] = CONFIG.logging.sink_options()

__all__ = ["CONFIG", "DEBUG", "LOGGING_CONFIG"]
