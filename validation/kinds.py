"""
Ordered kinds: the comparable value families and their total orders.

Every comparison in the toolkit goes through ``OrderedKind.compare``. The five
kinds are ``INT32``, ``INT64``, ``FLOAT32``, ``FLOAT64`` and ``DECIMAL``.
Operands are coerced into a single kind before they are compared, either the
kind the caller names or the one inferred from the operands themselves.

Float kinds use a total order rather than the IEEE ``<``/``>`` operators:
``NaN`` sorts above every other value and equals itself, and ``-0.0`` equals
``0.0``.
"""
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, Optional, Sequence, Union

import numpy as np

from utils.exceptions import MissingValueError, UnsupportedValueError


_INT32_INFO = np.iinfo(np.int32)
_INT64_INFO = np.iinfo(np.int64)


def _sign(a: Any, b: Any) -> int:
    return int(a > b) - int(a < b)


def compare_integers(a: int, b: int) -> int:
    """Compare two integers exactly."""
    return _sign(a, b)


def compare_floats(a: Union[float, np.floating], b: Union[float, np.floating]) -> int:
    """
    Total-order comparison of two floats.

    ``NaN`` is greater than any non-NaN value (including ``inf``) and equal to
    any other ``NaN``. Signed zeros compare equal.
    """
    a_nan = bool(np.isnan(a))
    b_nan = bool(np.isnan(b))
    if a_nan or b_nan:
        return int(a_nan) - int(b_nan)
    return _sign(a, b)


def compare_decimals(a: Decimal, b: Decimal) -> int:
    """Numeric comparison of two decimals (``2.0`` equals ``2.00``)."""
    return int(a.compare(b))


class OrderedKind:
    """A family of comparable values with a single total order."""

    def __init__(
        self,
        name: str,
        coerce: Callable[[Any, str], Any],
        compare: Callable[[Any, Any], int],
        rank: int
    ):
        self.name = name
        self._coerce = coerce
        self._compare = compare
        self.rank = rank

    def coerce(self, value: Any, name: str = "value") -> Any:
        """Convert ``value`` into this kind's canonical representation."""
        if value is None:
            raise MissingValueError(
                f"{name} cannot be null.",
                details={'parameter': name, 'kind': self.name}
            )
        if isinstance(value, (bool, np.bool_)):
            raise UnsupportedValueError(
                f"{name}({value}) is a boolean, not a {self.name} value.",
                details={'parameter': name, 'kind': self.name, 'actual': type(value).__name__}
            )
        return self._coerce(value, name)

    def compare(self, a: Any, b: Any) -> int:
        """Return -1, 0 or 1 as ``a`` is less than, equal to or greater than ``b``."""
        return self._compare(a, b)

    def __repr__(self) -> str:
        return f"OrderedKind({self.name!r})"


def _unsupported(value: Any, name: str, kind: str, reason: Optional[str] = None) -> UnsupportedValueError:
    message = reason or f"{name}({value}) cannot be represented as {kind}."
    return UnsupportedValueError(
        message,
        details={'parameter': name, 'kind': kind, 'actual': type(value).__name__}
    )


def _integer_coercer(kind_name: str, info) -> Callable[[Any, str], int]:
    def coerce(value: Any, name: str) -> int:
        if isinstance(value, (int, np.integer)):
            result = int(value)
        elif isinstance(value, Decimal) and value.is_finite() and value == value.to_integral_value():
            result = int(value)
        else:
            raise _unsupported(value, name, kind_name)
        if not info.min <= result <= info.max:
            raise _unsupported(value, name, kind_name, f"{name}({value}) is out of range for {kind_name}.")
        return result
    return coerce


def _float_coercer(kind_name: str, dtype) -> Callable[[Any, str], Any]:
    def coerce(value: Any, name: str):
        if not isinstance(value, (int, float, Decimal, np.integer, np.floating)):
            raise _unsupported(value, name, kind_name)
        try:
            with np.errstate(over='ignore'):
                result = dtype(float(value) if isinstance(value, Decimal) else value)
        except (OverflowError, ValueError) as e:
            raise _unsupported(value, name, kind_name, f"{name}({value}) cannot be represented as {kind_name}: {e}")
        if np.isinf(result) and _is_finite(value):
            raise _unsupported(value, name, kind_name, f"{name}({value}) is out of range for {kind_name}.")
        return result
    return coerce


def _is_finite(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, (float, np.floating)):
        return bool(np.isfinite(value))
    return True


def _coerce_decimal(value: Any, name: str) -> Decimal:
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, np.integer)):
        result = Decimal(int(value))
    elif isinstance(value, (float, np.floating)):
        result = Decimal(float(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value)
        except InvalidOperation:
            raise _unsupported(value, name, "decimal")
    else:
        raise _unsupported(value, name, "decimal")
    if result.is_nan():
        raise _unsupported(value, name, "decimal", f"{name}({value}) is NaN and has no decimal ordering.")
    return result


INT32 = OrderedKind("int32", _integer_coercer("int32", _INT32_INFO), compare_integers, rank=0)
INT64 = OrderedKind("int64", _integer_coercer("int64", _INT64_INFO), compare_integers, rank=1)
FLOAT32 = OrderedKind("float32", _float_coercer("float32", np.float32), compare_floats, rank=2)
FLOAT64 = OrderedKind("float64", _float_coercer("float64", np.float64), compare_floats, rank=3)
DECIMAL = OrderedKind("decimal", _coerce_decimal, compare_decimals, rank=4)

KINDS: Dict[str, OrderedKind] = {kind.name: kind for kind in (INT32, INT64, FLOAT32, FLOAT64, DECIMAL)}

_TYPE_ALIASES: Dict[Any, OrderedKind] = {
    np.int32: INT32,
    np.int64: INT64,
    int: INT64,
    np.float32: FLOAT32,
    np.float64: FLOAT64,
    float: FLOAT64,
    Decimal: DECIMAL,
}

KindLike = Union[OrderedKind, str, type]


def get_kind(kind: KindLike) -> OrderedKind:
    """Resolve an ``OrderedKind`` from a kind, its name, or a Python/numpy type."""
    if isinstance(kind, OrderedKind):
        return kind
    if isinstance(kind, str) and kind.lower() in KINDS:
        return KINDS[kind.lower()]
    if kind in _TYPE_ALIASES:
        return _TYPE_ALIASES[kind]
    raise UnsupportedValueError(
        f"Unknown ordered kind: {kind!r}",
        details={'kind': repr(kind), 'known': sorted(KINDS)}
    )


def kind_of(value: Any, name: str = "value") -> OrderedKind:
    """Infer the ordered kind of a single value."""
    if value is None:
        raise MissingValueError(f"{name} cannot be null.", details={'parameter': name})
    if isinstance(value, (bool, np.bool_)):
        raise _unsupported(value, name, "any ordered kind", f"{name}({value}) is a boolean, not a comparable value.")
    if isinstance(value, Decimal):
        return DECIMAL
    if isinstance(value, np.integer):
        if np.can_cast(value.dtype, np.int32):
            return INT32
        if np.can_cast(value.dtype, np.int64) or int(value) <= _INT64_INFO.max:
            return INT64
        return DECIMAL
    if isinstance(value, int):
        return INT64 if _INT64_INFO.min <= value <= _INT64_INFO.max else DECIMAL
    if isinstance(value, np.floating):
        if value.dtype.itemsize <= 4:
            return FLOAT32
        if value.dtype.itemsize == 8:
            return FLOAT64
        raise _unsupported(value, name, "any ordered kind", f"{name}({value}) has unsupported precision {value.dtype}.")
    if isinstance(value, float):
        return FLOAT64
    raise _unsupported(value, name, "any ordered kind", f"{name}({value!r}) of type {type(value).__name__} is not comparable.")


def infer_kind(*values: Any, names: Optional[Sequence[str]] = None) -> OrderedKind:
    """
    Infer the common kind of several operands.

    Any decimal wins. Among floats, ``FLOAT32`` is kept only when every
    operand is ``FLOAT32``; mixing it with anything wider promotes to
    ``FLOAT64``. Among integers, ``INT32`` is kept only when every operand is
    ``INT32``.
    """
    names = names or ["value"] * len(values)
    kinds = {kind_of(value, name) for value, name in zip(values, names)}
    if DECIMAL in kinds:
        return DECIMAL
    if FLOAT64 in kinds or (FLOAT32 in kinds and len(kinds) > 1):
        return FLOAT64
    if FLOAT32 in kinds:
        return FLOAT32
    if INT64 in kinds:
        return INT64
    return INT32


def resolve(*values: Any, kind: Optional[KindLike] = None, names: Optional[Sequence[str]] = None):
    """
    Resolve the kind for ``values`` and coerce each operand into it.

    Returns:
        Tuple of the resolved ``OrderedKind`` and the list of coerced operands
    """
    names = list(names) if names else ["value"] * len(values)
    for value, name in zip(values, names):
        if value is None:
            raise MissingValueError(f"{name} cannot be null.", details={'parameter': name})
    resolved = get_kind(kind) if kind is not None else infer_kind(*values, names=names)
    return resolved, [resolved.coerce(value, name) for value, name in zip(values, names)]
