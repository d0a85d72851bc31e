"""Tests for string length predicates and accessors."""
import pytest
from validation import (
    has_less_than_chars,
    has_more_than_chars,
    has_chars_in_range,
    require_less_than_chars,
    require_more_than_chars,
    require_chars_in_range,
    require_non_empty_string
)
from utils.exceptions import InvariantViolationError, MissingValueError, UnsupportedValueError


class TestHasLessThanChars:
    """Tests for has_less_than_chars."""

    def test_shorter(self):
        """Test strings shorter than the limit."""
        assert has_less_than_chars(5, "Hi")
        assert has_less_than_chars(1, "")

    def test_limit_is_exclusive(self):
        """Test a string of exactly max_chars fails."""
        assert not has_less_than_chars(2, "Hi")
        assert not has_less_than_chars(0, "")

    def test_negative_limit(self):
        """Test a negative limit is rejected."""
        with pytest.raises(InvariantViolationError) as exc_info:
            has_less_than_chars(-1, "Hi")
        assert exc_info.value.message == "maxChars(-1) cannot be negative."

    def test_missing_value(self):
        """Test None strings are missing values."""
        with pytest.raises(MissingValueError, match="value cannot be null"):
            has_less_than_chars(5, None)

    def test_code_points(self):
        """Test length counts characters, not bytes."""
        assert has_less_than_chars(6, "héllo")
        assert not has_less_than_chars(5, "héllo")


class TestHasMoreThanChars:
    """Tests for has_more_than_chars (exclusive minimum)."""

    def test_longer(self):
        """Test strings longer than the minimum."""
        assert has_more_than_chars(1, "Hi")
        assert has_more_than_chars(0, "a")

    def test_minimum_is_exclusive(self):
        """Test a string of exactly min_chars fails."""
        assert not has_more_than_chars(2, "Hi")
        assert not has_more_than_chars(0, "")

    def test_negative_minimum(self):
        """Test a negative minimum is rejected."""
        with pytest.raises(InvariantViolationError) as exc_info:
            has_more_than_chars(-1, "Hi")
        assert exc_info.value.message == "minChars(-1) cannot be negative."

    def test_missing_value(self):
        """Test None strings are missing values."""
        with pytest.raises(MissingValueError):
            has_more_than_chars(0, None)


class TestHasCharsInRange:
    """Tests for has_chars_in_range."""

    def test_inside(self):
        """Test lengths inside [min, max)."""
        assert has_chars_in_range(2, 3, "Hi")
        assert has_chars_in_range(0, 1, "")
        assert has_chars_in_range(1, 100, "Hello, world")

    def test_outside(self):
        """Test lengths outside [min, max)."""
        assert not has_chars_in_range(3, 4, "Hi")
        assert not has_chars_in_range(0, 2, "Hi")

    def test_equal_bounds_rejected(self):
        """Test a zero-width character range is an error."""
        with pytest.raises(InvariantViolationError) as exc_info:
            has_chars_in_range(2, 2, "Hi")
        assert exc_info.value.message == "maxChars(2) cannot be less than or equal to minChars(2)."

    def test_inverted_bounds_rejected(self):
        """Test max_chars below min_chars is an error."""
        with pytest.raises(InvariantViolationError, match="cannot be less than or equal to"):
            has_chars_in_range(3, 2, "Hi")

    @pytest.mark.parametrize("min_chars,max_chars,name", [(-1, 5, "minChars"), (0, -5, "maxChars")])
    def test_negative_bounds_rejected(self, min_chars, max_chars, name):
        """Test negative bounds are errors."""
        with pytest.raises(InvariantViolationError, match=f"{name}\\(-"):
            has_chars_in_range(min_chars, max_chars, "Hi")

    def test_missing_value_checked_first(self):
        """Test a None string is reported before bad bounds."""
        with pytest.raises(MissingValueError):
            has_chars_in_range(-1, -5, None)

    def test_non_string_rejected(self):
        """Test non-string values are unsupported."""
        with pytest.raises(UnsupportedValueError):
            has_chars_in_range(0, 5, 1234)


class TestLengthAccessors:
    """Tests for the string length accessors."""

    def test_identity(self):
        """Test passing strings are returned unchanged."""
        value = "Hello"
        assert require_less_than_chars(6, value) is value
        assert require_more_than_chars(4, value) is value
        assert require_chars_in_range(5, 6, value) is value

    def test_less_than_chars_message(self):
        """Test the default message of require_less_than_chars."""
        with pytest.raises(InvariantViolationError) as exc_info:
            require_less_than_chars(2, "Hi")
        assert exc_info.value.message == "value's length (2) must be less than 2."

    def test_more_than_chars_message(self):
        """Test the default message of require_more_than_chars."""
        with pytest.raises(InvariantViolationError) as exc_info:
            require_more_than_chars(2, "Hi")
        assert exc_info.value.message == "value's length (2) must be greater than 2."

    def test_chars_in_range_message(self):
        """Test the default message of require_chars_in_range."""
        with pytest.raises(InvariantViolationError) as exc_info:
            require_chars_in_range(3, 4, "Hi")
        assert exc_info.value.message == (
            "The length of value(2) must be greater than or equal to 3 and less than 4."
        )

    def test_override(self):
        """Test explicit messages are used verbatim."""
        with pytest.raises(InvariantViolationError, match="^username is too long$"):
            require_less_than_chars(3, "kennedy", "username is too long")

    def test_missing_value(self):
        """Test None strings are missing values in accessors too."""
        with pytest.raises(MissingValueError):
            require_chars_in_range(0, 5, None)


class TestRequireNonEmptyString:
    """Tests for require_non_empty_string."""

    @pytest.mark.parametrize("value", ["a", "Hello", " ", "héllo"])
    def test_identity(self, value):
        """Test non-empty strings are returned unchanged."""
        assert require_non_empty_string(value) is value

    def test_none(self):
        """Test None raises a missing-value failure."""
        with pytest.raises(MissingValueError) as exc_info:
            require_non_empty_string(None)
        assert exc_info.value.message == "value cannot be null."

    def test_empty(self):
        """Test an empty string raises an invariant violation."""
        with pytest.raises(InvariantViolationError) as exc_info:
            require_non_empty_string("")
        assert exc_info.value.message == "value cannot be empty."

    def test_named_empty(self):
        """Test the name is used in the empty message."""
        with pytest.raises(InvariantViolationError) as exc_info:
            require_non_empty_string("", "firstName")
        assert exc_info.value.message == "firstName cannot be empty."

    def test_named_none(self):
        """Test the name is used in the null message."""
        with pytest.raises(MissingValueError) as exc_info:
            require_non_empty_string(None, "firstName")
        assert exc_info.value.message == "firstName cannot be null."

    def test_none_name_defaults_to_value(self):
        """Test an absent name falls back to 'value'."""
        with pytest.raises(InvariantViolationError, match="^value cannot be empty"):
            require_non_empty_string("", None)

    def test_explicit_messages(self):
        """Test explicit messages override the name-derived ones."""
        with pytest.raises(MissingValueError, match="^no name given$"):
            require_non_empty_string(None, null_message="no name given")
        with pytest.raises(InvariantViolationError, match="^name is blank$"):
            require_non_empty_string("", "firstName", empty_message="name is blank")

    def test_missing_is_not_invariant_violation(self):
        """Test the two failure kinds are not conflated."""
        with pytest.raises(MissingValueError) as exc_info:
            require_non_empty_string(None)
        assert not isinstance(exc_info.value, InvariantViolationError)
