"""seeip configuration settings - main aggregator."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from seeip.configuration.logging import LoggingSettings


class Settings(BaseSettings):
    """seeip configuration settings.

    Aggregates the section settings into a single configuration object.
    Endpoint URLs are deliberately absent: they are fixed, see
    ``seeip.endpoints``.

    Example:
        ```python
        from seeip.configuration import get_settings

        settings = get_settings()
        if settings.logging.LOG_JSON:
            ...
        ```
    """

    logging: LoggingSettings

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "logging": LoggingSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get process-wide settings singleton.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()
