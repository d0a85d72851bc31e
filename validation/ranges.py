"""
Half-open range predicate: ``min_value`` inclusive, ``max_value`` exclusive.
"""
from typing import Any, Optional

from utils.exceptions import InvariantViolationError

from .kinds import KindLike, OrderedKind, resolve
from .messages import default_message


def check_bounds(kind: OrderedKind, low: Any, high: Any, min_value: Any, max_value: Any) -> None:
    """
    Raise if the coerced upper bound ``high`` is below ``low``.

    Equal bounds are legal and describe an empty range. The message shows the
    caller's original ``min_value`` and ``max_value``.
    """
    if kind.compare(high, low) < 0:
        raise InvariantViolationError(
            default_message('range_bounds', min_value=min_value, max_value=max_value),
            details={'operation': 'in_range', 'min_value': str(min_value), 'max_value': str(max_value)}
        )


def in_range(min_value: Any, max_value: Any, value: Any, *, kind: Optional[KindLike] = None) -> bool:
    """
    Check that ``min_value <= value < max_value``.

    Args:
        min_value: Lower bound (inclusive)
        max_value: Upper bound (exclusive)
        value: Value to test
        kind: Ordered kind to compare in; inferred from the operands if omitted

    Returns:
        True if ``value`` lies in the half-open range

    Raises:
        MissingValueError: If any operand is ``None``
        InvariantViolationError: If ``max_value < min_value``
    """
    resolved, (low, high, checked) = resolve(
        min_value, max_value, value, kind=kind, names=("minValue", "maxValue", "value")
    )
    check_bounds(resolved, low, high, min_value, max_value)
    return resolved.compare(checked, low) >= 0 and resolved.compare(checked, high) < 0
