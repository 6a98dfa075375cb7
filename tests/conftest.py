"""Shared fixtures for nexus-hub tests."""

from __future__ import annotations

import pytest
import structlog

from nexus_hub import EventHub, HubSettings
from nexus_hub.config.settings import get_settings


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    """Keep NEXUS_* variables and cached settings from leaking between tests."""
    for key in ("NEXUS_DEBUG", "NEXUS_DEBUG_CHANNELS", "NEXUS_LOG_LEVEL", "NEXUS_LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    structlog.reset_defaults()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def quiet_settings() -> HubSettings:
    return HubSettings(_env_file=None)


@pytest.fixture
def hub(quiet_settings) -> EventHub:
    return EventHub(["click", "change", "submit"], settings=quiet_settings)
