"""Hub settings using Pydantic Settings."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HubSettings(BaseSettings):
    """Hub settings loaded from ``NEXUS_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="NEXUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Emit logging applied to every new hub
    debug: bool = False
    debug_channels: list[str] = []

    # Logging
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def is_debug_enabled(self) -> bool:
        return self.debug or bool(self.debug_channels)


@lru_cache
def get_settings() -> HubSettings:
    """Get cached settings instance."""
    return HubSettings()
