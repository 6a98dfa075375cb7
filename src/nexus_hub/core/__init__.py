"""Core value objects and errors for nexus-hub."""

from nexus_hub.core.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    NexusError,
    UnknownChannelError,
)
from nexus_hub.core.models import DebugConfig, EmitLogger, Listener

__all__ = [
    # Models
    "DebugConfig",
    "EmitLogger",
    "Listener",
    # Exceptions
    "NexusError",
    "InvalidArgumentError",
    "UnknownChannelError",
    "ConfigurationError",
]
