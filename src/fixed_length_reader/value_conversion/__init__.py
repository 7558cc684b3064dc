"""Value conversion exports."""

from .converter_registry import TRUE_TOKENS, Converter, ConverterRegistry
from .date_patterns import (
    DEFAULT_DATE_PATTERN,
    DEFAULT_DATETIME_PATTERN,
    to_input_pattern,
    to_strptime_format,
)
from .field_types import FieldType, zero_value

__all__ = [
    "Converter",
    "ConverterRegistry",
    "DEFAULT_DATE_PATTERN",
    "DEFAULT_DATETIME_PATTERN",
    "FieldType",
    "TRUE_TOKENS",
    "to_input_pattern",
    "to_strptime_format",
    "zero_value",
]
