"""
Capability predicate: does a value's runtime type carry a marker capability?

The designated default capability is ``Serializable``, an ABC marker. Builtin
scalars and containers, ``Decimal``, dates and times, enums and numpy values
are registered; application classes opt in by subclassing ``Serializable`` or
calling ``Serializable.register``. Any other class, ABC or
``runtime_checkable`` protocol can be used as the capability instead.
"""
import datetime
import enum
import fractions
from abc import ABC
from decimal import Decimal
from typing import Any, Optional

import numpy as np

from utils.exceptions import MissingValueError

from .accessors import raise_violation
from .messages import null_message


class Serializable(ABC):
    """Marker for values whose type can be serialized."""

    capability_name = "serializable"


for _cls in (
    int, float, complex, bool, str, bytes, bytearray,
    tuple, list, dict, set, frozenset,
    Decimal, fractions.Fraction,
    datetime.date, datetime.time, datetime.timedelta, datetime.timezone,
    enum.Enum,
    np.generic, np.ndarray,
):
    Serializable.register(_cls)


def describe_capability(capability: type) -> str:
    """Human-readable name of a capability, used in default messages."""
    name = getattr(capability, 'capability_name', None)
    if name:
        return name
    return f"an instance of {capability.__name__}"


def is_capable(value: Any, capability: type = Serializable) -> bool:
    """
    Check whether ``value``'s type satisfies ``capability``.

    Raises:
        MissingValueError: If ``value`` is ``None``
    """
    if value is None:
        raise MissingValueError(
            null_message(),
            details={'parameter': 'value', 'capability': capability.__name__}
        )
    return isinstance(value, capability)


def require_capable(value: Any, capability: type = Serializable, message: Optional[str] = None) -> Any:
    """
    Return ``value`` if its type satisfies ``capability``, else raise.

    Raises:
        MissingValueError: If ``value`` is ``None``
        InvariantViolationError: If the capability is absent
    """
    if not is_capable(value, capability):
        raise_violation('capable', message, value=value, capability=describe_capability(capability))
    return value


def is_serializable(value: Any) -> bool:
    return is_capable(value, Serializable)


def require_serializable(value: Any, message: Optional[str] = None) -> Any:
    return require_capable(value, Serializable, message)
