"""
Validating accessors for the ordering and range predicates.

Every ``require_*`` returns the caller's ``value`` unchanged when its predicate
holds, so it can be used inline::

    self.quantity = require_greater_than(0, quantity)

and raises ``InvariantViolationError`` otherwise. An explicit ``message`` is
used verbatim; without one a default is built from the operands.
"""
from typing import Any, NoReturn, Optional

from utils.exceptions import InvariantViolationError
from utils.logging_config import get_logger

from .kinds import KindLike
from .messages import format_operand, resolve_message
from .ordering import (
    is_equal_to,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_less_than,
    is_less_than_or_equal_to,
    is_negative,
)
from .ranges import in_range

logger = get_logger(__name__)


def _log_failures() -> bool:
    from config.config_manager import get_config
    return bool(get_config('validation.log_failures', False))


def raise_violation(operation: str, message: Optional[str], **operands: Any) -> NoReturn:
    """
    Raise ``InvariantViolationError`` for a failed ``operation``.

    Args:
        operation: Message template key, also recorded in ``details``
        message: Caller override, used verbatim when not ``None``
        **operands: Operands for the default message and ``details``
    """
    text = resolve_message(message, operation, **operands)
    details = {'operation': operation}
    details.update({key: format_operand(value) for key, value in operands.items()})
    if _log_failures():
        logger.debug(f"Precondition {operation} failed: {text}", extra={'details': details})
    raise InvariantViolationError(text, details=details)


def require_equal_to(base: Any, value: Any, message: Optional[str] = None, *, kind: Optional[KindLike] = None) -> Any:
    """Return ``value`` if it equals ``base``, else raise."""
    if not is_equal_to(base, value, kind=kind):
        raise_violation('equal_to', message, value=value, base=base)
    return value


def require_greater_than(base: Any, value: Any, message: Optional[str] = None, *, kind: Optional[KindLike] = None) -> Any:
    """Return ``value`` if it is strictly greater than ``base``, else raise."""
    if not is_greater_than(base, value, kind=kind):
        raise_violation('greater_than', message, value=value, base=base)
    return value


def require_greater_than_or_equal_to(
    base: Any,
    value: Any,
    message: Optional[str] = None,
    *,
    kind: Optional[KindLike] = None
) -> Any:
    """Return ``value`` if it is greater than or equal to ``base``, else raise."""
    if not is_greater_than_or_equal_to(base, value, kind=kind):
        raise_violation('greater_than_or_equal_to', message, value=value, base=base)
    return value


def require_less_than(base: Any, value: Any, message: Optional[str] = None, *, kind: Optional[KindLike] = None) -> Any:
    """Return ``value`` if it is strictly less than ``base``, else raise."""
    if not is_less_than(base, value, kind=kind):
        raise_violation('less_than', message, value=value, base=base)
    return value


def require_less_than_or_equal_to(
    base: Any,
    value: Any,
    message: Optional[str] = None,
    *,
    kind: Optional[KindLike] = None
) -> Any:
    """Return ``value`` if it is less than or equal to ``base``, else raise."""
    if not is_less_than_or_equal_to(base, value, kind=kind):
        raise_violation('less_than_or_equal_to', message, value=value, base=base)
    return value


def require_in_range(
    min_value: Any,
    max_value: Any,
    value: Any,
    message: Optional[str] = None,
    *,
    kind: Optional[KindLike] = None
) -> Any:
    """
    Return ``value`` if ``min_value <= value < max_value``, else raise.

    A malformed range (``max_value < min_value``) raises with the bounds
    message regardless of ``message``.
    """
    if not in_range(min_value, max_value, value, kind=kind):
        raise_violation('in_range', message, value=value, min_value=min_value, max_value=max_value)
    return value


def require_non_negative(value: Any, message: Optional[str] = None, *, kind: Optional[KindLike] = None) -> Any:
    """Return ``value`` if it is not below zero, else raise."""
    if is_negative(value, kind=kind):
        raise_violation('non_negative', message, value=value)
    return value


ACCESSORS = {
    'equal_to': require_equal_to,
    'greater_than': require_greater_than,
    'greater_than_or_equal_to': require_greater_than_or_equal_to,
    'less_than': require_less_than,
    'less_than_or_equal_to': require_less_than_or_equal_to,
}
