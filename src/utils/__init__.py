"""
Shared utilities for the news dashboard.
"""

from .logger import get_logger, log_function_calls, setup_logging

__all__ = [
    "get_logger",
    "log_function_calls",
    "setup_logging",
]
