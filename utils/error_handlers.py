"""
Value-returning wrappers around the raising accessors.

``attempt`` turns a precondition failure into a ``Result`` instead of an
exception; ``collect_failures`` runs several checks and reports every one
that failed. Exceptions other than ``PreconditionError`` always propagate.
"""
import functools
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, TypeVar

from .exceptions import PreconditionError
from .logging_config import get_logger


logger = get_logger(__name__)

T = TypeVar('T')


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a check: either a value or the failure that prevented it."""

    value: Optional[T] = None
    error: Optional[PreconditionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, re-raising the failure if there is one."""
        if self.error is not None:
            raise self.error
        return self.value


def attempt(func: Callable[..., T], *args, **kwargs) -> Result[T]:
    """
    Run ``func`` and capture a precondition failure as a ``Result``.

    Args:
        func: Usually a ``require_*`` accessor
        *args: Positional arguments for function
        **kwargs: Keyword arguments for function

    Returns:
        ``Result(value=...)`` on success, ``Result(error=...)`` on failure
    """
    try:
        return Result(value=func(*args, **kwargs))
    except PreconditionError as e:
        logger.debug(f"{getattr(func, '__name__', func)} failed: {e.message}")
        return Result(error=e)


def collect_failures(*checks: Callable[[], Any]) -> List[PreconditionError]:
    """
    Run every zero-argument check and return the failures in order.

    Example:
        failures = collect_failures(
            lambda: require_non_empty_string(first_name, "firstName"),
            lambda: require_in_range(0, 150, age),
        )
    """
    failures = []
    for check in checks:
        result = attempt(check)
        if not result.ok:
            failures.append(result.error)
    return failures


def returns_result(func: Callable[..., T]) -> Callable[..., Result[T]]:
    """Decorator form of ``attempt``."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Result[T]:
        return attempt(func, *args, **kwargs)

    return wrapper
