"""
Default failure messages for the validating accessors.

Formatting is pure and deterministic: operands are rendered with ``str()``
so ``Decimal("56.74")`` prints as ``56.74`` and ``-0.0`` as ``-0.0``.
"""
from typing import Any, Dict, Optional


TEMPLATES: Dict[str, str] = {
    'equal_to': "value({value}) should be equal to {base}.",
    'greater_than': "value({value}) should be greater than {base}.",
    'greater_than_or_equal_to': "value({value}) should be greater than or equal to {base}.",
    'less_than': "value({value}) should be less than {base}.",
    'less_than_or_equal_to': "value({value}) should be less than or equal to {base}.",
    'in_range': "value({value}) should be more than or equal to {min_value} and less than {max_value}.",
    'non_negative': "value({value}) cannot be negative.",
    'range_bounds': "maxValue({max_value}) cannot be less than minValue({min_value}).",
    'char_bounds': "maxChars({max_chars}) cannot be less than or equal to minChars({min_chars}).",
    'negative_count': "{name}({value}) cannot be negative.",
    'chars_in_range': (
        "The length of value({length}) must be greater than or equal to "
        "{min_chars} and less than {max_chars}."
    ),
    'less_than_chars': "value's length ({length}) must be less than {max_chars}.",
    'more_than_chars': "value's length ({length}) must be greater than {min_chars}.",
    'capable': "{value} must be {capability}.",
    'null': "{name} cannot be null.",
    'empty': "{name} cannot be empty.",
}


def format_operand(value: Any) -> str:
    """Render an operand for inclusion in a message."""
    return str(value)


def default_message(operation: str, **operands: Any) -> str:
    """
    Build the default message for ``operation``.

    Args:
        operation: Template key, e.g. ``'greater_than'``
        **operands: Values substituted into the template

    Returns:
        The formatted message

    Raises:
        KeyError: If ``operation`` has no template
    """
    template = TEMPLATES[operation]
    return template.format(**{key: format_operand(value) for key, value in operands.items()})


def resolve_message(message: Optional[str], operation: str, **operands: Any) -> str:
    """Return ``message`` verbatim when given, else the default for ``operation``."""
    if message is not None:
        return message
    return default_message(operation, **operands)


def null_message(name: Optional[str] = None) -> str:
    return default_message('null', name=name if name is not None else "value")


def empty_message(name: Optional[str] = None) -> str:
    return default_message('empty', name=name if name is not None else "value")
