"""Structlog configuration and logger setup.

The library never configures logging on import. Applications that want the
seeip log format call ``configure_logging()`` once at startup. Module loggers
write through stdlib ``logging`` under the ``seeip`` logger, which carries a
NullHandler, so nothing is printed unless the host application configures
logging.

Usage:
    from seeip.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Callable, Optional, Sequence

import structlog
from structlog.stdlib import BoundLogger

from seeip.configuration import get_settings
from seeip.logging.formatters import add_library_info, truncate_large_values

LIBRARY_LOGGER_NAME = "seeip"

logging.getLogger(LIBRARY_LOGGER_NAME).addHandler(logging.NullHandler())


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def configure_logging(
    log_level: Optional[str] = None,
    json_output: Optional[bool] = None,
    extra_processors: Optional[Sequence[Callable[..., Any]]] = None,
) -> BoundLogger:
    """Configure structured logging.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.logging.LOG_LEVEL.
        json_output: Optional override for JSON rendering. Defaults to
            settings.logging.LOG_JSON.
        extra_processors: Processors inserted before the renderer.

    Returns:
        Configured logger instance
    """
    # Suppress all logging during tests
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    settings = get_settings().logging
    use_json = json_output if json_output is not None else settings.LOG_JSON

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        add_library_info("seeip", _library_version()),
        truncate_large_values(),
    ]
    if extra_processors:
        processors.extend(extra_processors)

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def _library_version() -> str:
    try:
        return version("seeip")
    except PackageNotFoundError:
        return "unknown"


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    Automatically detects the calling module and binds component
    and module_path context for structured logging.

    Returns:
        Logger instance with module context

    Example:
        # In seeip/clients/http.py
        logger = get_module_logger()
        # logger has context: {"component": "http", "module_path": "seeip.clients.http"}
    """
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(frame) if frame is not None else None
    if module is None:
        return _stdlib_backed(LIBRARY_LOGGER_NAME, component="unknown")

    module_name = module.__name__
    return _stdlib_backed(
        module_name, component=module_name.split(".")[-1], module_path=module_name
    )


def _stdlib_backed(name: str, **initial_values: Any) -> BoundLogger:
    # Lazy proxy: processors are resolved on first use, output goes through
    # stdlib logging so the host application's handlers decide what is shown
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        **initial_values,
    )
