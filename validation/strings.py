"""
String length predicates and their validating accessors.

Length is ``len(value)``: the number of code points. Character counts are
compared as ``INT64`` values through the ordering predicates, and must be
non-negative. ``has_more_than_chars`` is exclusive: ``"abc"`` has more than
two characters but not more than three.
"""
from typing import Optional

from utils.exceptions import MissingValueError, UnsupportedValueError

from .accessors import raise_violation
from .kinds import INT64
from .messages import empty_message as _empty_message, null_message as _null_message
from .ordering import is_greater_than, is_less_than, is_negative
from .ranges import in_range


def _length(value: Optional[str], message: Optional[str] = None) -> int:
    if value is None:
        raise MissingValueError(
            message if message is not None else _null_message(),
            details={'parameter': 'value'}
        )
    if not isinstance(value, str):
        raise UnsupportedValueError(
            f"value({value!r}) is a {type(value).__name__}, not a string.",
            details={'parameter': 'value', 'actual': type(value).__name__}
        )
    return len(value)


def _check_count(count: int, name: str) -> int:
    if count is None:
        raise MissingValueError(_null_message(name), details={'parameter': name})
    if is_negative(count, kind=INT64):
        raise_violation('negative_count', None, name=name, value=count)
    return count


def has_less_than_chars(max_chars: int, value: str) -> bool:
    """
    Check that ``value`` has fewer than ``max_chars`` characters.

    Raises:
        MissingValueError: If ``value`` is ``None``
        InvariantViolationError: If ``max_chars`` is negative
    """
    length = _length(value)
    return is_less_than(_check_count(max_chars, "maxChars"), length, kind=INT64)


def has_more_than_chars(min_chars: int, value: str) -> bool:
    """
    Check that ``value`` has strictly more than ``min_chars`` characters.

    Raises:
        MissingValueError: If ``value`` is ``None``
        InvariantViolationError: If ``min_chars`` is negative
    """
    length = _length(value)
    return is_greater_than(_check_count(min_chars, "minChars"), length, kind=INT64)


def has_chars_in_range(min_chars: int, max_chars: int, value: str) -> bool:
    """
    Check that ``min_chars <= len(value) < max_chars``.

    Unlike ``in_range``, equal bounds are rejected: a zero-width character
    range can never match.

    Raises:
        MissingValueError: If ``value`` is ``None``
        InvariantViolationError: If a bound is negative or
            ``max_chars <= min_chars``
    """
    length = _length(value)
    _check_count(min_chars, "minChars")
    _check_count(max_chars, "maxChars")
    if not is_greater_than(min_chars, max_chars, kind=INT64):
        raise_violation('char_bounds', None, min_chars=min_chars, max_chars=max_chars)
    return in_range(min_chars, max_chars, length, kind=INT64)


def require_less_than_chars(max_chars: int, value: str, message: Optional[str] = None) -> str:
    """Return ``value`` if it has fewer than ``max_chars`` characters, else raise."""
    if not has_less_than_chars(max_chars, value):
        raise_violation('less_than_chars', message, length=len(value), max_chars=max_chars)
    return value


def require_more_than_chars(min_chars: int, value: str, message: Optional[str] = None) -> str:
    """Return ``value`` if it has more than ``min_chars`` characters, else raise."""
    if not has_more_than_chars(min_chars, value):
        raise_violation('more_than_chars', message, length=len(value), min_chars=min_chars)
    return value


def require_chars_in_range(min_chars: int, max_chars: int, value: str, message: Optional[str] = None) -> str:
    """Return ``value`` if its length is in ``[min_chars, max_chars)``, else raise."""
    if not has_chars_in_range(min_chars, max_chars, value):
        raise_violation(
            'chars_in_range', message,
            length=len(value), min_chars=min_chars, max_chars=max_chars
        )
    return value


def require_non_empty_string(
    value: Optional[str],
    name: Optional[str] = None,
    *,
    null_message: Optional[str] = None,
    empty_message: Optional[str] = None
) -> str:
    """
    Validate that ``value`` is present and not empty.

    Presence is checked before emptiness. Default messages are derived from
    ``name`` (``"value"`` when omitted)::

        >>> require_non_empty_string("", "firstName")
        Traceback (most recent call last):
        ...
        utils.exceptions.InvariantViolationError: firstName cannot be empty.

    Args:
        value: String to check
        name: Name used in the default messages
        null_message: Overrides the missing-value message
        empty_message: Overrides the empty-string message

    Returns:
        ``value`` unchanged

    Raises:
        MissingValueError: If ``value`` is ``None``
        InvariantViolationError: If ``value`` is empty
    """
    if null_message is None:
        null_message = _null_message(name)
    if empty_message is None:
        empty_message = _empty_message(name)

    if _length(value, null_message) == 0:
        raise_violation('empty', empty_message, name=name if name is not None else "value")
    return value
