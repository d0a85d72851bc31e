"""
Exception hierarchy for the preconditions toolkit.
"""
from typing import Any, Dict, Optional


class PreconditionError(Exception):
    """Base exception for all precondition failures."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'details': self.details
        }


class MissingValueError(PreconditionError, TypeError):
    """Raised when a required argument is absent (``None``)."""
    pass


class InvariantViolationError(PreconditionError, ValueError):
    """Raised when a present value fails the predicate it was checked against."""
    pass


class UnsupportedValueError(PreconditionError, TypeError):
    """Raised when an operand cannot be placed in an ordered kind."""
    pass


class SchemaValidationError(InvariantViolationError):
    """Raised when a dictionary fails schema validation."""
    pass


class ConfigurationError(PreconditionError):
    """Raised when configuration is invalid."""
    pass
