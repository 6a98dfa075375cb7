"""Value objects shared by the hub."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

Listener = Callable[[Any], None]
EmitLogger = Callable[[str, Any], None]


@dataclass(frozen=True)
class DebugConfig:
    """Which channels have emit logging switched on.

    Three states: disabled (the default), enabled for every channel, or
    enabled only for the channels in ``channels``.
    """

    enabled_for_all: bool = False
    channels: frozenset[str] | None = None

    @classmethod
    def disabled(cls) -> DebugConfig:
        return cls()

    @classmethod
    def all_channels(cls) -> DebugConfig:
        return cls(enabled_for_all=True)

    @classmethod
    def only(cls, channels: frozenset[str]) -> DebugConfig:
        return cls(channels=frozenset(channels))

    @property
    def is_enabled(self) -> bool:
        return self.enabled_for_all or bool(self.channels)

    def covers(self, channel: str) -> bool:
        """Return True if emits on *channel* should be logged."""
        if self.enabled_for_all:
            return True
        return self.channels is not None and channel in self.channels
