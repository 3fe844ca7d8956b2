"""Shared base classes for settings modules."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class SeeIPBaseSettings(BaseSettings):
    """Base class for seeip settings sections.

    All sections read ``SEEIP_``-prefixed environment variables and ignore
    unknown keys.
    """

    model_config = SettingsConfigDict(
        env_prefix="SEEIP_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
