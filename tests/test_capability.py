"""Tests for the capability predicate."""
import datetime
import enum
from collections.abc import Hashable
from decimal import Decimal
from typing import Protocol, runtime_checkable

import numpy as np
import pytest

from validation import Serializable, is_capable, require_capable, is_serializable, require_serializable
from utils.exceptions import InvariantViolationError, MissingValueError


class Color(enum.Enum):
    RED = 1


class Payload(Serializable):
    """Application class opting in by subclassing."""


class Registered:
    """Application class opting in by registration."""


Serializable.register(Registered)


class Plain:
    """Class with no capability."""

    def __str__(self):
        return "Plain()"


@runtime_checkable
class Closeable(Protocol):
    def close(self) -> None:
        ...


class Resource:
    def close(self) -> None:
        pass


class TestIsSerializable:
    """Tests for the designated serializable capability."""

    @pytest.mark.parametrize("value", [
        1, 1.5, True, "text", b"bytes", (1, 2), [1], {'a': 1}, {1}, frozenset(),
        Decimal("56.74"), datetime.date(2024, 1, 1), datetime.timedelta(seconds=1),
        Color.RED, np.float32(1.0), np.arange(3),
    ])
    def test_registered_types(self, value):
        """Test builtin and numpy values are serializable."""
        assert is_serializable(value)

    def test_plain_object(self):
        """Test an arbitrary object is not serializable."""
        assert not is_serializable(object())
        assert not is_serializable(Plain())

    def test_subclass_opt_in(self):
        """Test subclassing Serializable grants the capability."""
        assert is_serializable(Payload())

    def test_register_opt_in(self):
        """Test registering a class grants the capability."""
        assert is_serializable(Registered())

    def test_none_is_missing(self):
        """Test None is a missing value."""
        with pytest.raises(MissingValueError, match="value cannot be null"):
            is_serializable(None)


class TestIsCapable:
    """Tests for arbitrary capabilities."""

    def test_abc_capability(self):
        """Test an ABC from the standard library works as a capability."""
        assert is_capable("text", Hashable)
        assert not is_capable([], Hashable)

    def test_protocol_capability(self):
        """Test runtime-checkable protocols work as capabilities."""
        assert is_capable(Resource(), Closeable)
        assert not is_capable(Plain(), Closeable)

    def test_default_is_serializable(self):
        """Test the capability defaults to Serializable."""
        assert is_capable(1)
        assert not is_capable(Plain())


class TestRequireCapable:
    """Tests for the capability accessors."""

    def test_identity(self):
        """Test capable values are returned unchanged."""
        value = Payload()
        assert require_serializable(value) is value
        assert require_capable(value, Serializable) is value

    def test_serializable_message(self):
        """Test the default message names the capability."""
        with pytest.raises(InvariantViolationError) as exc_info:
            require_serializable(Plain())
        assert exc_info.value.message == "Plain() must be serializable."

    def test_other_capability_message(self):
        """Test capabilities without a name are described by class."""
        with pytest.raises(InvariantViolationError) as exc_info:
            require_capable([], Hashable)
        assert exc_info.value.message == "[] must be an instance of Hashable."

    def test_override(self):
        """Test explicit messages are used verbatim."""
        with pytest.raises(InvariantViolationError, match="^payload must be storable$"):
            require_serializable(Plain(), "payload must be storable")

    def test_none_is_missing(self):
        """Test None raises a missing-value failure, not a violation."""
        with pytest.raises(MissingValueError):
            require_capable(None, Hashable)
