"""structlog configuration for nexus-hub."""

import logging
import sys

import structlog

from nexus_hub.config.settings import HubSettings, get_settings
from nexus_hub.core.exceptions import ConfigurationError

_RENDERERS = {
    "console": lambda: structlog.dev.ConsoleRenderer(colors=False),
    "json": lambda: structlog.processors.JSONRenderer(default=repr),
}


def configure_logging(level: str = "INFO", fmt: str = "console") -> None:
    """Route structlog output to stderr with timestamps.

    Args:
        level: Minimum level name, e.g. ``"DEBUG"``.
        fmt: ``"console"`` for human readable lines, ``"json"`` for one
            JSON object per line.
    """
    levelno = logging.getLevelNamesMapping().get(level.upper())
    if levelno is None:
        raise ConfigurationError(f"Unknown log level: {level}", {"level": level})
    if fmt not in _RENDERERS:
        raise ConfigurationError(f"Unknown log format: {fmt}", {"format": fmt})

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    # ConsoleRenderer formats exc_info itself
    if fmt == "json":
        processors.append(structlog.processors.format_exc_info)
    processors.append(_RENDERERS[fmt]())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(levelno),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def configure_from_settings(settings: HubSettings | None = None) -> None:
    """Apply ``log_level``/``log_format`` from *settings* or the cached settings."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_format)


class HubLogger:
    """Logger for the hub's own events.

    Defers to the application's structlog configuration when there is one.
    Until then, INFO and above go to stderr through a private logger and
    the global structlog configuration is left untouched.
    """

    def __init__(self, name: str) -> None:
        self._name = name

    def _resolve(self):
        if structlog.is_configured():
            return structlog.get_logger(self._name)
        return structlog.wrap_logger(
            structlog.PrintLogger(file=sys.stderr),
            processors=[
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                structlog.dev.ConsoleRenderer(colors=False),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
            cache_logger_on_first_use=False,
        )

    def __getattr__(self, method: str):
        return getattr(self._resolve(), method)


def get_logger(name: str) -> HubLogger:
    """Return the hub logger bound to *name*."""
    return HubLogger(name)
