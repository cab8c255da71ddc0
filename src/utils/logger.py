# src/utils/logger.py
# Logging setup for the news dashboard
# ====================================

"""
Central loguru configuration for the dashboard.

Library modules log through ``from loguru import logger`` and never configure
sinks themselves; entry points call :func:`setup_logging` once so console and
file output follow the active configuration.
"""

import sys
import time
from functools import wraps
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger


class DashboardLogger:
    """
    Centralized logging configurator for the whole dashboard.

    Installs a console sink and, when a file path is configured, a rotating
    file sink. Reconfiguration is a no-op unless ``force`` is given.
    """

    def __init__(self):
        self.is_configured = False
        self.log_file_path: Optional[Path] = None

    def configure_logging(
        self,
        config: Optional[Dict[str, Any]] = None,
        *,
        debug: Optional[bool] = None,
        force: bool = False,
    ):
        """
        Configure loguru sinks from a logging config mapping.

        Args:
            config: Logging settings (level, file_path, max_file_size,
                   retention, format). Defaults to config.settings.LOGGING_CONFIG.
            debug: Verbose colorized console output. Defaults to config.settings.DEBUG.
            force: Reconfigure even when sinks were already installed.
        """
        if self.is_configured and not force:
            logger.debug("Logger already configured, skipping reconfiguration")
            return

        if config is None or debug is None:
            from config.settings import DEBUG, LOGGING_CONFIG

            config = LOGGING_CONFIG if config is None else config
            debug = DEBUG if debug is None else debug

        logger.remove()
        self._configure_console_handler(config, debug)
        if config.get("file_path"):
            self._configure_file_handler(config)

        self.is_configured = True
        logger.debug(f"Logging configured: {config}")

    def _configure_console_handler(self, config: Dict[str, Any], debug: bool):
        if debug:
            console_format = (
                "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
                "<level>{message}</level>"
            )
            console_level = "DEBUG"
        else:
            console_format = config.get(
                "format", "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"
            )
            console_level = config.get("level", "INFO")

        # stderr keeps stdout free for JSON output of the CLI runner
        logger.add(
            sys.stderr,
            format=console_format,
            level=console_level,
            colorize=debug,
            backtrace=debug,
            diagnose=debug,
        )

    def _configure_file_handler(self, config: Dict[str, Any]):
        self.log_file_path = Path(config["file_path"])
        self.log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_format = (
            "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
            "{level: <8} | "
            "{process.id: <6} | "
            "{name}:{function}:{line} | "
            "{message}"
        )

        logger.add(
            str(self.log_file_path),
            format=file_format,
            level=config.get("level", "INFO"),
            rotation=config.get("max_file_size", "10 MB"),
            retention=config.get("retention", "30 days"),
            compression="gz",
            enqueue=True,
            backtrace=True,
            diagnose=False,
        )


_logger_instance: Optional[DashboardLogger] = None


def get_logger() -> DashboardLogger:
    """Return the process-wide logging configurator, configuring it on first use."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = DashboardLogger()
        _logger_instance.configure_logging()
    return _logger_instance


def setup_logging(
    config: Optional[Dict[str, Any]] = None, *, debug: Optional[bool] = None
) -> DashboardLogger:
    """
    Configure logging at program start.

    Args:
        config: Optional logging config overriding config.settings.LOGGING_CONFIG

    Returns:
        The configured DashboardLogger instance
    """
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = DashboardLogger()
    _logger_instance.configure_logging(config, debug=debug, force=config is not None)
    return _logger_instance


def log_function_calls(func):
    """Log entry, duration and failures of the decorated function at DEBUG level."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            duration = time.perf_counter() - start_time
            logger.error(f"{func.__name__} failed after {duration:.3f}s: {e}")
            raise
        duration = time.perf_counter() - start_time
        logger.debug(f"{func.__name__} completed in {duration:.3f}s")
        return result

    return wrapper
