"""Custom exceptions for nexus-hub."""


class NexusError(Exception):
    """Base exception for all nexus-hub errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(NexusError, TypeError):
    """Raised when a call receives malformed input."""

    pass


class UnknownChannelError(NexusError, KeyError):
    """Raised when an operation references an undeclared channel."""

    def __init__(self, channel: object, valid_channels: tuple[str, ...]) -> None:
        super().__init__(
            f'Channel "{channel}" is not registered. '
            f"Valid channels: {', '.join(valid_channels)}",
            details={"channel": channel, "valid_channels": list(valid_channels)},
        )
        self.channel = channel

    def __reduce__(self):
        return (self.__class__, (self.channel, tuple(self.details["valid_channels"])))


class ConfigurationError(NexusError):
    """Raised when there's a configuration problem."""

    pass
