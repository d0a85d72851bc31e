"""
Reusable validator objects built on the validating accessors.

A validator captures a rule once and applies it to many values::

    percentage = RangeValidator(0, 101, name="percentage")
    percentage(42)      # -> 42
    percentage(250)     # raises "percentage: value(250) should be ..."
"""
from typing import Any, Callable, Optional

from utils.exceptions import InvariantViolationError

from .accessors import ACCESSORS, raise_violation, require_in_range
from .capability import Serializable, require_capable
from .kinds import KindLike
from .strings import (
    require_chars_in_range,
    require_less_than_chars,
    require_more_than_chars,
    require_non_empty_string,
)


class Validator:
    """Base validator class."""

    def __init__(self, name: str = "value", message: Optional[str] = None):
        self.name = name
        self.message = message

    def validate(self, value: Any) -> Any:
        """Validate and return the value."""
        return value

    def __call__(self, value: Any) -> Any:
        """Allow validator to be called as a function."""
        return self.validate(value)

    def _named(self, check: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """
        Run an accessor, prefixing default failure messages with the validator's name.

        An explicit ``message`` is left untouched, as is the default name ``"value"``.
        """
        try:
            return check(*args, **kwargs)
        except InvariantViolationError as e:
            if self.message is not None or self.name == "value":
                raise
            raise InvariantViolationError(
                f"{self.name}: {e.message}",
                details={**e.details, 'name': self.name}
            ) from e


class ComparisonValidator(Validator):
    """Validates ``value`` against a base value with one of the ordering operations."""

    def __init__(
        self,
        operation: str,
        base: Any,
        kind: Optional[KindLike] = None,
        name: str = "value",
        message: Optional[str] = None
    ):
        super().__init__(name, message)
        if operation not in ACCESSORS:
            raise InvariantViolationError(
                f"Unknown comparison operation: {operation}",
                details={'operation': operation, 'allowed': sorted(ACCESSORS)}
            )
        self.operation = operation
        self.base = base
        self.kind = kind

    def validate(self, value: Any) -> Any:
        """Validate comparison."""
        return self._named(ACCESSORS[self.operation], self.base, value, self.message, kind=self.kind)


class RangeValidator(Validator):
    """Validates a value lies in the half-open range ``[min_value, max_value)``."""

    def __init__(
        self,
        min_value: Any,
        max_value: Any,
        kind: Optional[KindLike] = None,
        name: str = "value",
        message: Optional[str] = None
    ):
        super().__init__(name, message)
        self.min_value = min_value
        self.max_value = max_value
        self.kind = kind

    def validate(self, value: Any) -> Any:
        """Validate range."""
        return self._named(require_in_range, self.min_value, self.max_value, value, self.message, kind=self.kind)


class LengthValidator(Validator):
    """
    Validates the length of a string.

    With both bounds the length must fall in ``[min_chars, max_chars)``; with
    only ``min_chars`` it must exceed it; with only ``max_chars`` it must be
    below it.
    """

    def __init__(
        self,
        min_chars: Optional[int] = None,
        max_chars: Optional[int] = None,
        name: str = "value",
        message: Optional[str] = None
    ):
        super().__init__(name, message)
        self.min_chars = min_chars
        self.max_chars = max_chars

    def validate(self, value: str) -> str:
        """Validate length."""
        if self.min_chars is not None and self.max_chars is not None:
            return self._named(require_chars_in_range, self.min_chars, self.max_chars, value, self.message)
        if self.min_chars is not None:
            return self._named(require_more_than_chars, self.min_chars, value, self.message)
        if self.max_chars is not None:
            return self._named(require_less_than_chars, self.max_chars, value, self.message)
        return value


class NonEmptyStringValidator(Validator):
    """Validates a string is present and not empty."""

    def validate(self, value: str) -> str:
        return require_non_empty_string(value, self.name)


class CapabilityValidator(Validator):
    """Validates a value's type carries a capability."""

    def __init__(self, capability: type = Serializable, name: str = "value", message: Optional[str] = None):
        super().__init__(name, message)
        self.capability = capability

    def validate(self, value: Any) -> Any:
        return self._named(require_capable, value, self.capability, self.message)


class CompositeValidator(Validator):
    """Combines multiple validators."""

    def __init__(self, *validators: Validator, name: str = "value"):
        super().__init__(name)
        self.validators = validators

    def validate(self, value: Any) -> Any:
        """Apply all validators in sequence."""
        for validator in self.validators:
            value = validator.validate(value)
        return value


class CustomValidator(Validator):
    """Validator using custom predicate."""

    def __init__(self, func: Callable[[Any], bool], error_message: str, name: str = "value"):
        super().__init__(name, error_message)
        self.func = func

    def validate(self, value: Any) -> Any:
        """Validate using custom predicate."""
        if not self.func(value):
            raise_violation('custom', f"{self.name}: {self.message}", value=value)
        return value
