"""Tests for core value objects and errors."""

import pickle

import pytest

from nexus_hub.core.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    NexusError,
    UnknownChannelError,
)
from nexus_hub.core.models import DebugConfig


@pytest.mark.unit
class TestDebugConfig:
    """Tests for DebugConfig."""

    def test_disabled_covers_nothing(self) -> None:
        config = DebugConfig.disabled()

        assert not config.is_enabled
        assert not config.covers("anything")

    def test_all_channels(self) -> None:
        config = DebugConfig.all_channels()

        assert config.is_enabled
        assert config.covers("a")
        assert config.covers("b")

    def test_only(self) -> None:
        config = DebugConfig.only(frozenset({"a"}))

        assert config.covers("a")
        assert not config.covers("b")

    def test_empty_filter_is_disabled(self) -> None:
        assert not DebugConfig.only(frozenset()).is_enabled

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DebugConfig().enabled_for_all = True  # type: ignore[misc]


@pytest.mark.unit
class TestExceptions:
    """Tests for the error hierarchy."""

    def test_details_default(self) -> None:
        err = InvalidArgumentError("bad")

        assert err.message == "bad"
        assert err.details == {}
        assert isinstance(err, NexusError)
        assert isinstance(err, TypeError)

    def test_unknown_channel_message(self) -> None:
        err = UnknownChannelError("x", ("a", "b"))

        assert str(err) == 'Channel "x" is not registered. Valid channels: a, b'
        assert err.details == {"channel": "x", "valid_channels": ["a", "b"]}
        assert isinstance(err, KeyError)

    def test_unknown_channel_pickles(self) -> None:
        """Test the error survives a pickle round trip with its details."""
        err = pickle.loads(pickle.dumps(UnknownChannelError("x", ("a", "b"))))

        assert isinstance(err, UnknownChannelError)
        assert err.channel == "x"
        assert str(err) == 'Channel "x" is not registered. Valid channels: a, b'
        assert err.details["valid_channels"] == ["a", "b"]

    def test_configuration_error(self) -> None:
        err = ConfigurationError("broken", {"key": "value"})
        assert err.details == {"key": "value"}
