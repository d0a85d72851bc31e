"""
Precondition predicates and validating accessors.

Predicates (``is_*``, ``has_*``, ``in_range``) return booleans. Accessors
(``require_*``) return their input unchanged or raise
``InvariantViolationError``; absent arguments raise ``MissingValueError``.
"""
from .kinds import (
    OrderedKind,
    INT32,
    INT64,
    FLOAT32,
    FLOAT64,
    DECIMAL,
    KINDS,
    get_kind,
    kind_of,
    infer_kind,
    compare_floats
)
from .ordering import (
    compare,
    is_equal_to,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_less_than,
    is_less_than_or_equal_to,
    is_negative
)
from .ranges import in_range
from .accessors import (
    require_equal_to,
    require_greater_than,
    require_greater_than_or_equal_to,
    require_less_than,
    require_less_than_or_equal_to,
    require_in_range,
    require_non_negative
)
from .strings import (
    has_less_than_chars,
    has_more_than_chars,
    has_chars_in_range,
    require_less_than_chars,
    require_more_than_chars,
    require_chars_in_range,
    require_non_empty_string
)
from .capability import (
    Serializable,
    is_capable,
    require_capable,
    is_serializable,
    require_serializable
)
from .messages import default_message
from .validators import (
    Validator,
    ComparisonValidator,
    RangeValidator,
    LengthValidator,
    NonEmptyStringValidator,
    CapabilityValidator,
    CompositeValidator,
    CustomValidator
)
from .schema import (
    Schema,
    SettingsSchema
)

__all__ = [
    'OrderedKind',
    'INT32',
    'INT64',
    'FLOAT32',
    'FLOAT64',
    'DECIMAL',
    'KINDS',
    'get_kind',
    'kind_of',
    'infer_kind',
    'compare_floats',
    'compare',
    'is_equal_to',
    'is_greater_than',
    'is_greater_than_or_equal_to',
    'is_less_than',
    'is_less_than_or_equal_to',
    'is_negative',
    'in_range',
    'require_equal_to',
    'require_greater_than',
    'require_greater_than_or_equal_to',
    'require_less_than',
    'require_less_than_or_equal_to',
    'require_in_range',
    'require_non_negative',
    'has_less_than_chars',
    'has_more_than_chars',
    'has_chars_in_range',
    'require_less_than_chars',
    'require_more_than_chars',
    'require_chars_in_range',
    'require_non_empty_string',
    'Serializable',
    'is_capable',
    'require_capable',
    'is_serializable',
    'require_serializable',
    'default_message',
    'Validator',
    'ComparisonValidator',
    'RangeValidator',
    'LengthValidator',
    'NonEmptyStringValidator',
    'CapabilityValidator',
    'CompositeValidator',
    'CustomValidator',
    'Schema',
    'SettingsSchema',
]
