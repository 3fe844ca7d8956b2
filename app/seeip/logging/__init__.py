"""Structured logging for the seeip library.

Public API:
    - configure_logging(): Opt-in structlog configuration for applications
    - get_module_logger(): Get a logger for the calling module
    - truncate_large_values(): Processor to limit string lengths
"""

from seeip.logging.formatters import add_library_info, truncate_large_values
from seeip.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
    "truncate_large_values",
    "add_library_info",
]
