"""In-process event hub.

Publish/subscribe over a closed set of channels declared up front.
Listeners are keyed by a string id per channel and are called
synchronously in registration order.  A listener that raises is logged
and skipped; the emitter and the remaining listeners are unaffected.
"""

from __future__ import annotations

import threading
import weakref
from collections import Counter
from datetime import datetime, timezone
from typing import Any, Callable, Generic, Iterable, TypeVar

from nexus_hub.config.logging import get_logger
from nexus_hub.config.settings import HubSettings, get_settings
from nexus_hub.core.exceptions import InvalidArgumentError, UnknownChannelError
from nexus_hub.core.models import DebugConfig, EmitLogger, Listener

logger = get_logger(__name__)

ChannelT = TypeVar("ChannelT", bound=str)

_DEBUG_COLLECTIONS = (list, tuple, set, frozenset)


def default_emit_logger(channel: str, payload: Any) -> None:
    """Write a timestamped ``nexus.emit`` line to the diagnostic sink."""
    logger.info(
        "nexus.emit",
        channel=channel,
        payload=payload,
        emitted_at=datetime.now(timezone.utc).isoformat(),
    )


def _validate_channels(channels: object) -> tuple[str, ...]:
    if not isinstance(channels, (list, tuple)):
        raise InvalidArgumentError(
            "Channel names must be a list or tuple",
            {"type": type(channels).__name__},
        )
    if not channels:
        raise InvalidArgumentError("At least one channel name must be provided")

    for name in channels:
        if not isinstance(name, str):
            raise InvalidArgumentError(
                f"Channel name must be a string, got {type(name).__name__}",
                {"channel": name},
            )
        if not name.strip():
            raise InvalidArgumentError("Channel name must be a non-empty string")

    if len(set(channels)) != len(channels):
        duplicates = sorted(name for name, count in Counter(channels).items() if count > 1)
        raise InvalidArgumentError(
            "Duplicate channel names are not allowed",
            {"duplicates": duplicates},
        )
    return tuple(channels)


class EventHub(Generic[ChannelT]):
    """Synchronous publish/subscribe hub over a fixed set of channels.

    Mutating methods return the hub so calls can be chained::

        hub = EventHub(["click", "change"])
        hub.on("click", "counter", handle_click).on("change", "form", handle_change)
        hub.emit("click", {"x": 10})
    """

    def __init__(
        self,
        channels: list[ChannelT] | tuple[ChannelT, ...],
        *,
        settings: HubSettings | None = None,
    ) -> None:
        self._channels: tuple[ChannelT, ...] = _validate_channels(channels)  # type: ignore[assignment]
        self._channel_set = frozenset(self._channels)
        self._callbacks: dict[str, dict[str, Listener]] = {name: {} for name in self._channels}
        self._debug = DebugConfig.disabled()
        self._emit_logger: EmitLogger = default_emit_logger
        # original callback -> weakref to its once wrapper; both sides weak since
        # the wrapper closes over the callback
        self._once_wrappers: weakref.WeakKeyDictionary[
            Callable[..., Any], weakref.ReferenceType[Listener]
        ] = weakref.WeakKeyDictionary()
        self._lock = threading.RLock()

        settings = settings if settings is not None else get_settings()
        if settings.is_debug_enabled:
            self.set_debug(True if settings.debug else settings.debug_channels)

        logger.debug("hub.created", channels=list(self._channels))

    def __repr__(self) -> str:
        return f"EventHub(channels={list(self._channels)!r}, listeners={self.listener_count()})"

    # ------------------------------------------------------------------
    # Validation helpers
    # ------------------------------------------------------------------

    def _require_channel(self, channel: object) -> None:
        if not isinstance(channel, str) or channel not in self._channel_set:
            raise UnknownChannelError(channel, self._channels)

    @staticmethod
    def _require_callable(fn: object, what: str) -> None:
        if not callable(fn):
            raise InvalidArgumentError(
                f"{what} must be callable",
                {"type": type(fn).__name__},
            )

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------

    def on(self, channel: ChannelT, listener_id: str, callback: Listener) -> EventHub[ChannelT]:
        """Register *callback* on *channel* under *listener_id*.

        An existing listener with the same id on the same channel is
        replaced.  Ids on different channels never collide.
        """
        self._require_channel(channel)
        if not isinstance(listener_id, str) or not listener_id.strip():
            raise InvalidArgumentError(
                "Listener ID must be a non-empty string",
                {"listener_id": listener_id},
            )
        self._require_callable(callback, "Callback")

        with self._lock:
            self._callbacks[channel][listener_id] = callback
        return self

    def once(self, channel: ChannelT, listener_id: str, callback: Listener) -> EventHub[ChannelT]:
        """Register *callback* to run on the next emit only.

        The listener removes itself after *callback* returns.  If
        *callback* raises, removal does not happen and the listener stays
        registered for the following emit.
        """
        self._require_channel(channel)
        self._require_callable(callback, "Callback")

        def wrapper(payload: Any = None) -> None:
            callback(payload)
            self.off(channel, listener_id)

        self.on(channel, listener_id, wrapper)

        with self._lock:
            try:
                self._once_wrappers[callback] = weakref.ref(wrapper)
            except TypeError:
                # not weakly referenceable (e.g. __slots__ without __weakref__); left untracked
                pass
        return self

    def off(self, channel: ChannelT, listener_id: str | None = None) -> EventHub[ChannelT]:
        """Remove one listener, or every listener on *channel* if no id is given.

        Removing an id that is not registered is a no-op.
        """
        self._require_channel(channel)
        if listener_id is not None and not isinstance(listener_id, str):
            raise InvalidArgumentError(
                "Listener ID must be a string",
                {"listener_id": listener_id},
            )

        with self._lock:
            if listener_id is None:
                self._callbacks[channel] = {}
            else:
                self._callbacks[channel].pop(listener_id, None)
        return self

    def clear(self, channel: ChannelT | None = None) -> EventHub[ChannelT]:
        """Remove listeners from *channel*, or from every channel."""
        if channel is not None:
            self._require_channel(channel)

        with self._lock:
            names = self._channels if channel is None else (channel,)
            for name in names:
                self._callbacks[name] = {}
        return self

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def emit(self, channel: ChannelT, payload: Any = None) -> bool:
        """Call every listener on *channel* with *payload*.

        Listeners are taken from a snapshot made before dispatch, so
        listeners added or removed while emitting only see later emits.

        Returns:
            True if the channel had at least one listener, whether or not
            any of them raised.
        """
        self._require_channel(channel)

        with self._lock:
            snapshot = list(self._callbacks[channel].items())
            emit_logger = self._emit_logger
            debug = self._debug.covers(channel)

        if debug:
            emit_logger(channel, payload)

        error_count = 0
        for listener_id, callback in snapshot:
            try:
                callback(payload)
            except Exception as e:
                error_count += 1
                logger.error(
                    "nexus.listener_error",
                    channel=channel,
                    listener_id=listener_id,
                    error=str(e),
                    exc_info=e,
                )

        if error_count and self._debug_covers(channel):
            logger.error("nexus.emit_errors", channel=channel, error_count=error_count)

        return bool(snapshot)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def listener_count(self, channel: ChannelT | None = None) -> int:
        """Number of listeners on *channel*, or across all channels."""
        if channel is not None:
            self._require_channel(channel)
            with self._lock:
                return len(self._callbacks[channel])

        with self._lock:
            return sum(len(self._callbacks[name]) for name in self._channels)

    def listeners(self, channel: ChannelT | None = None) -> list[Listener]:
        """Registered callbacks in insertion order.

        Without *channel*, callbacks of all channels are concatenated in
        declaration order.
        """
        if channel is not None:
            self._require_channel(channel)
            with self._lock:
                return list(self._callbacks[channel].values())

        with self._lock:
            return [cb for name in self._channels for cb in self._callbacks[name].values()]

    def event_names(self) -> list[ChannelT]:
        """Declared channel names, in declaration order."""
        return list(self._channels)

    def once_wrapper(self, callback: Callable[..., Any]) -> Listener | None:
        """Return the wrapper ``once`` registered for *callback*, if tracked."""
        with self._lock:
            try:
                ref = self._once_wrappers.get(callback)
            except TypeError:
                return None
        return ref() if ref is not None else None

    # ------------------------------------------------------------------
    # Debugging
    # ------------------------------------------------------------------

    @property
    def debug_config(self) -> DebugConfig:
        with self._lock:
            return self._debug

    def _debug_covers(self, channel: str) -> bool:
        with self._lock:
            return self._debug.covers(channel)

    def set_debug(self, enabled: bool | Iterable[ChannelT]) -> EventHub[ChannelT]:
        """Switch emit logging on for all channels, off, or for a subset.

        Args:
            enabled: ``True`` for every channel, ``False`` to disable, or a
                list/tuple/set of declared channel names.
        """
        if enabled is True:
            config = DebugConfig.all_channels()
        elif enabled is False:
            config = DebugConfig.disabled()
        elif isinstance(enabled, _DEBUG_COLLECTIONS):
            for name in enabled:
                self._require_channel(name)
            config = DebugConfig.only(frozenset(enabled))
        else:
            raise InvalidArgumentError(
                "Debug must be a bool or a collection of channel names",
                {"type": type(enabled).__name__},
            )

        with self._lock:
            self._debug = config
        logger.debug(
            "hub.debug_changed",
            enabled=config.is_enabled,
            enabled_for_all=config.enabled_for_all,
            channels=sorted(config.channels) if config.channels is not None else None,
        )
        return self

    def set_logger(self, fn: EmitLogger) -> EventHub[ChannelT]:
        """Replace the function called with ``(channel, payload)`` on debug emits."""
        self._require_callable(fn, "Logger")
        with self._lock:
            self._emit_logger = fn
        return self


def create_hub(
    channels: list[ChannelT] | tuple[ChannelT, ...],
    *,
    settings: HubSettings | None = None,
) -> EventHub[ChannelT]:
    """Create an :class:`EventHub` for the given channel names.

    Raises:
        InvalidArgumentError: If *channels* is not a list or tuple, is
            empty, contains a non-string or blank name, or has duplicates.
        UnknownChannelError: If ``settings.debug_channels`` names a channel
            not in *channels*.
    """
    return EventHub(channels, settings=settings)
