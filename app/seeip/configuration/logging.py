"""Logging settings."""

from pydantic import Field

from seeip.configuration.base import SeeIPBaseSettings


class LoggingSettings(SeeIPBaseSettings):
    """Logging configuration.

    Environment Variables:
        SEEIP_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        SEEIP_LOG_JSON: Render logs as JSON instead of console output

    Example:
        ```python
        from seeip.configuration import get_settings

        level = get_settings().logging.LOG_LEVEL
        ```
    """

    LOG_LEVEL: str = Field(default="INFO")
    LOG_JSON: bool = Field(default=False)
