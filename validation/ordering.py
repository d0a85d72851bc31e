"""
Ordering predicates.

Each predicate takes ``(base, value)`` and answers a question about ``value``
relative to ``base``: ``is_greater_than(base, value)`` is true when ``value``
strictly exceeds ``base``. All comparisons run through the total order of the
resolved kind (see ``validation.kinds``).
"""
from typing import Any, Optional

from .kinds import KindLike, resolve


def compare(base: Any, value: Any, *, kind: Optional[KindLike] = None) -> int:
    """
    Compare ``value`` against ``base`` under the resolved kind's total order.

    Returns:
        -1, 0 or 1 as ``value`` is less than, equal to or greater than ``base``

    Raises:
        MissingValueError: If either operand is ``None``
        UnsupportedValueError: If an operand does not fit the kind
    """
    resolved, (base_value, checked_value) = resolve(
        base, value, kind=kind, names=("baseValue", "value")
    )
    return resolved.compare(checked_value, base_value)


def is_equal_to(base: Any, value: Any, *, kind: Optional[KindLike] = None) -> bool:
    """Check that ``value`` equals ``base``."""
    return compare(base, value, kind=kind) == 0


def is_greater_than(base: Any, value: Any, *, kind: Optional[KindLike] = None) -> bool:
    """Check that ``value`` is strictly greater than ``base``."""
    return compare(base, value, kind=kind) > 0


def is_greater_than_or_equal_to(base: Any, value: Any, *, kind: Optional[KindLike] = None) -> bool:
    """Check that ``value`` is greater than or equal to ``base``."""
    return compare(base, value, kind=kind) >= 0


def is_less_than(base: Any, value: Any, *, kind: Optional[KindLike] = None) -> bool:
    """Check that ``value`` is strictly less than ``base``."""
    return compare(base, value, kind=kind) < 0


def is_less_than_or_equal_to(base: Any, value: Any, *, kind: Optional[KindLike] = None) -> bool:
    """Check that ``value`` is less than or equal to ``base``."""
    return compare(base, value, kind=kind) <= 0


def is_negative(value: Any, *, kind: Optional[KindLike] = None) -> bool:
    """
    Check that ``value`` is below zero.

    ``-0.0`` is not negative, and neither is ``NaN``.
    """
    return is_less_than(0, value, kind=kind)
