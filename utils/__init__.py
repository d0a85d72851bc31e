"""
Utility modules for the preconditions toolkit.
"""
from .logging_config import get_logger, LoggerFactory, LogContext, StructuredFormatter
from .exceptions import *
from .error_handlers import (
    Result,
    attempt,
    collect_failures,
    returns_result
)

__all__ = [
    'get_logger',
    'LoggerFactory',
    'LogContext',
    'StructuredFormatter',
    'PreconditionError',
    'MissingValueError',
    'InvariantViolationError',
    'UnsupportedValueError',
    'SchemaValidationError',
    'ConfigurationError',
    'Result',
    'attempt',
    'collect_failures',
    'returns_result',
]
