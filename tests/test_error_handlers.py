"""Tests for exceptions, result helpers and logging utilities."""
import json
import logging
import sys

import pytest

from utils import (
    Result,
    attempt,
    collect_failures,
    returns_result,
    get_logger,
    LogContext,
    StructuredFormatter
)
from utils.exceptions import (
    PreconditionError,
    MissingValueError,
    InvariantViolationError,
    UnsupportedValueError,
    SchemaValidationError,
    ConfigurationError
)
from validation import require_greater_than, require_non_empty_string, require_in_range


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_to_dict(self):
        """Test exceptions serialize for logging."""
        error = InvariantViolationError("value(3) should be greater than 5.", details={'value': '3'})
        assert error.to_dict() == {
            'error_type': 'InvariantViolationError',
            'error_code': 'InvariantViolationError',
            'message': "value(3) should be greater than 5.",
            'details': {'value': '3'}
        }

    def test_custom_error_code(self):
        """Test an explicit error code is kept."""
        assert PreconditionError("boom", error_code="E42").error_code == "E42"

    def test_hierarchy(self):
        """Test every failure is a PreconditionError with the matching builtin."""
        assert issubclass(MissingValueError, TypeError)
        assert issubclass(UnsupportedValueError, TypeError)
        assert issubclass(InvariantViolationError, ValueError)
        assert issubclass(SchemaValidationError, InvariantViolationError)
        for cls in (MissingValueError, InvariantViolationError, UnsupportedValueError, ConfigurationError):
            assert issubclass(cls, PreconditionError)


class TestAttempt:
    """Tests for attempt and Result."""

    def test_success(self):
        """Test a passing check yields its value."""
        result = attempt(require_greater_than, 0, 5)
        assert result.ok
        assert result.value == 5
        assert result.unwrap() == 5

    def test_failure(self):
        """Test a failing check yields the error."""
        result = attempt(require_greater_than, 5, 0)
        assert not result.ok
        assert isinstance(result.error, InvariantViolationError)
        with pytest.raises(InvariantViolationError):
            result.unwrap()

    def test_missing_value_captured(self):
        """Test missing values are captured too."""
        result = attempt(require_non_empty_string, None, "firstName")
        assert isinstance(result.error, MissingValueError)

    def test_other_exceptions_propagate(self):
        """Test non-precondition errors are not swallowed."""
        def broken():
            raise RuntimeError("bug")

        with pytest.raises(RuntimeError):
            attempt(broken)

    def test_result_is_immutable(self):
        """Test results cannot be modified."""
        result = Result(value=1)
        with pytest.raises(AttributeError):
            result.value = 2


class TestCollectFailures:
    """Tests for collect_failures."""

    def test_collects_in_order(self):
        """Test every failure is reported in call order."""
        failures = collect_failures(
            lambda: require_non_empty_string("", "firstName"),
            lambda: require_in_range(0, 150, 36),
            lambda: require_in_range(0, 150, 200),
        )
        assert [f.message for f in failures] == [
            "firstName cannot be empty.",
            "value(200) should be more than or equal to 0 and less than 150.",
        ]

    def test_no_failures(self):
        """Test passing checks give an empty list."""
        assert collect_failures(lambda: require_greater_than(0, 1)) == []


class TestReturnsResult:
    """Tests for the returns_result decorator."""

    def test_decorated(self):
        """Test the decorated function returns results."""
        @returns_result
        def positive(value):
            return require_greater_than(0, value)

        assert positive(3).value == 3
        assert not positive(-3).ok
        assert positive.__name__ == "positive"


class TestLogging:
    """Tests for logger naming and structured output."""

    def test_logger_namespace(self):
        """Test loggers live under the toolkit's root logger."""
        assert get_logger("validation.kinds").name == "preconditions.validation.kinds"
        assert get_logger("preconditions.custom").name == "preconditions.custom"

    def test_structured_formatter(self):
        """Test JSON output includes details and context fields."""
        logger = get_logger("test_error_handlers")
        with LogContext(logger, request_id="abc"):
            record = logger.makeRecord(
                logger.name, logging.INFO, __file__, 1, "checked %s", ("age",), None,
                extra={'details': {'operation': 'in_range'}}
            )

        data = json.loads(StructuredFormatter().format(record))
        assert data['message'] == "checked age"
        assert data['level'] == "INFO"
        assert data['details'] == {'operation': 'in_range'}
        assert data['request_id'] == "abc"

    def test_structured_formatter_exception(self):
        """Test exceptions are serialized."""
        try:
            raise InvariantViolationError("bad")
        except InvariantViolationError:
            exc_info = sys.exc_info()

        record = logging.LogRecord("preconditions", logging.ERROR, __file__, 1, "failed", (), exc_info)
        data = json.loads(StructuredFormatter().format(record))
        assert data['exception']['type'] == "InvariantViolationError"
        assert data['exception']['message'] == "bad"

    def test_library_installs_no_output_handlers(self):
        """Test importing the toolkit only attaches a NullHandler."""
        root = logging.getLogger("preconditions")
        assert all(isinstance(h, logging.NullHandler) for h in root.handlers)
