"""Custom structlog processors.

Usage:
    from seeip.logging.formatters import truncate_large_values
"""

from typing import Any


def truncate_large_values(max_length: int = 500):
    """Create a processor that truncates overly large string values.

    Response bodies are logged on failure; this keeps a misbehaving endpoint
    from flooding the log.

    Args:
        max_length: Maximum string length before truncation.

    Returns:
        A structlog processor function.

    Example:
        configure_logging(
            extra_processors=[truncate_large_values(max_length=1000)]
        )
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor


def add_library_info(name: str, version: str = "unknown"):
    """Create a processor that adds library name/version to log entries.

    Args:
        name: Name of the library.
        version: Version string.

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["library"] = name
        event_dict["library_version"] = version
        return event_dict

    return processor
