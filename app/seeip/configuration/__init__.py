"""Configuration module - public API.

Exports:
    get_settings: Cached Settings instance
    Settings: Main settings class (for testing/overrides)
    LoggingSettings: Logging section settings
"""

from seeip.configuration.logging import LoggingSettings
from seeip.configuration.settings import Settings, get_settings

__all__ = ["Settings", "LoggingSettings", "get_settings"]
