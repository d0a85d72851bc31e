"""
Schema validation for dictionaries, driven by validator objects.
"""
from copy import deepcopy
from typing import Any, Dict, List

from utils.exceptions import PreconditionError, SchemaValidationError
from utils.logging_config import get_logger

from .validators import ComparisonValidator, LengthValidator

logger = get_logger(__name__)


class Schema:
    """Schema for validating dictionaries."""

    def __init__(self, schema: Dict[str, Any], strict: bool = False):
        """
        Initialize schema.

        Args:
            schema: Mapping of field name to a type, a nested ``Schema``, or a
                dict of rules (``type``, ``required``, ``default``,
                ``validator``, ``choices``, ``schema``)
            strict: If True, reject extra keys not in schema
        """
        self.schema = schema
        self.strict = strict

    def validate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate data against schema, returning the validated copy."""
        if not isinstance(data, dict):
            raise SchemaValidationError(
                f"Expected dict, got {type(data).__name__}",
                details={'actual_type': type(data).__name__}
            )

        validated = {}
        errors: List[str] = []

        for key, spec in self.schema.items():
            if key not in data:
                if isinstance(spec, dict) and not spec.get('required', True):
                    if 'default' in spec:
                        validated[key] = deepcopy(spec['default'])
                    continue
                errors.append(f"Missing required field: {key}")
                continue

            try:
                validated[key] = self._validate_field(data[key], spec)
            except SchemaValidationError as e:
                errors.extend(f"Field '{key}': {error}" for error in e.details.get('errors', [e.message]))
            except PreconditionError as e:
                errors.append(f"Field '{key}': {e.message}")

        if self.strict:
            extra_keys = sorted(set(data) - set(self.schema))
            if extra_keys:
                errors.append(f"Unexpected fields: {extra_keys}")
        else:
            for key in data:
                if key not in validated:
                    validated[key] = data[key]

        if errors:
            logger.debug(f"Schema validation failed with {len(errors)} error(s)")
            raise SchemaValidationError(
                "Schema validation failed",
                details={'errors': errors}
            )

        return validated

    def _validate_field(self, value: Any, spec: Any) -> Any:
        """Validate a single field."""
        if isinstance(spec, Schema):
            return spec.validate(value)

        if isinstance(spec, type):
            self._check_type(value, spec)
            return value

        if isinstance(spec, dict):
            expected_type = spec.get('type')
            if expected_type:
                self._check_type(value, expected_type)

            if 'schema' in spec:
                value = spec['schema'].validate(value)

            if 'validator' in spec:
                value = spec['validator'].validate(value)

            if 'choices' in spec and value not in spec['choices']:
                raise SchemaValidationError(
                    f"Must be one of {spec['choices']}, got {value}",
                    details={'allowed': spec['choices'], 'actual': value}
                )

        return value

    @staticmethod
    def _check_type(value: Any, expected_type: Any) -> None:
        if not isinstance(value, expected_type):
            raise SchemaValidationError(
                f"Expected {expected_type}, got {type(value).__name__}",
                details={'expected': str(expected_type), 'actual': type(value).__name__}
            )


class SettingsSchema(Schema):
    """Schema for the toolkit's own settings."""

    LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

    def __init__(self):
        schema = {
            'validation': {
                'type': dict,
                'required': False,
                'default': {'log_failures': False},
                'schema': Schema({
                    'log_failures': {
                        'type': bool,
                        'required': False,
                        'default': False
                    }
                }),
            },
            'logging': {
                'type': dict,
                'required': False,
                'schema': Schema({
                    'log_level': {
                        'type': str,
                        'required': False,
                        'default': 'INFO',
                        'choices': self.LOG_LEVELS
                    },
                    'log_dir': {
                        'type': str,
                        'required': False,
                        'default': 'logs',
                        'validator': LengthValidator(min_chars=0, name='log_dir')
                    },
                    'enable_console': {'type': bool, 'required': False, 'default': True},
                    'enable_file': {'type': bool, 'required': False, 'default': False},
                    'enable_structured': {'type': bool, 'required': False, 'default': False},
                    'max_bytes': {
                        'type': int,
                        'required': False,
                        'default': 10 * 1024 * 1024,
                        'validator': ComparisonValidator('greater_than', 0, name='max_bytes')
                    },
                    'backup_count': {
                        'type': int,
                        'required': False,
                        'default': 5,
                        'validator': ComparisonValidator('greater_than_or_equal_to', 0, name='backup_count')
                    },
                }),
            },
        }
        super().__init__(schema, strict=False)
