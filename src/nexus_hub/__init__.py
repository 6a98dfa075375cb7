"""nexus-hub: a small synchronous event hub with declared channels."""

from nexus_hub.config import HubSettings, configure_logging, get_settings
from nexus_hub.core import (
    ConfigurationError,
    DebugConfig,
    InvalidArgumentError,
    NexusError,
    UnknownChannelError,
)
from nexus_hub.hub import EventHub, create_hub, default_emit_logger

__version__ = "1.0.0"

__all__ = [
    "EventHub",
    "create_hub",
    "default_emit_logger",
    "DebugConfig",
    "HubSettings",
    "configure_logging",
    "get_settings",
    "NexusError",
    "InvalidArgumentError",
    "UnknownChannelError",
    "ConfigurationError",
]
