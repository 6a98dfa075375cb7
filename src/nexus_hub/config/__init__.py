"""Configuration module for nexus-hub."""

from nexus_hub.config.logging import (
    HubLogger,
    configure_from_settings,
    configure_logging,
    get_logger,
)
from nexus_hub.config.settings import HubSettings, get_settings

__all__ = [
    "HubSettings",
    "configure_from_settings",
    "configure_logging",
    "HubLogger",
    "get_logger",
    "get_settings",
]
