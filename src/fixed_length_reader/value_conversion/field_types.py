"""Field type tags and their zero values."""

from __future__ import annotations

from collections.abc import Hashable
from enum import Enum


class FieldType(Enum):
    """Built-in target types a field can be decoded into."""

    STR = "str"
    CHAR = "char"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    BOOL = "bool"
    OPTIONAL_INT32 = "optional_int32"
    OPTIONAL_INT64 = "optional_int64"
    OPTIONAL_FLOAT32 = "optional_float32"
    OPTIONAL_FLOAT64 = "optional_float64"
    OPTIONAL_BOOL = "optional_bool"
    DECIMAL = "decimal"
    DATE = "date"
    DATETIME = "datetime"


_ZERO_VALUES: dict[FieldType, object] = {
    FieldType.INT32: 0,
    FieldType.INT64: 0,
    FieldType.FLOAT32: 0.0,
    FieldType.FLOAT64: 0.0,
    FieldType.BOOL: False,
    FieldType.CHAR: "\x00",
}


def zero_value(field_type: Hashable | None) -> object:
    """Return the value a field of ``field_type`` holds when it is not decoded."""
    if isinstance(field_type, FieldType):
        return _ZERO_VALUES.get(field_type)
    return None
