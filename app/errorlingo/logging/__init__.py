"""Structured logging built on structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module

Formatters:
    - add_app_info(): Processor to add app name/version
    - truncate_large_values(): Processor to limit string lengths
"""

from errorlingo.logging.setup import configure_logging, get_module_logger
from errorlingo.logging.formatters import add_app_info, truncate_large_values

__all__ = [
    "configure_logging",
    "get_module_logger",
    "add_app_info",
    "truncate_large_values",
]
