"""Conversion of raw field text into typed values."""

from __future__ import annotations

import logging
import re
import struct
from collections.abc import Callable, Hashable
from datetime import date, datetime
from decimal import Decimal

from fixed_length_reader.byte_slicing import trim_field
from fixed_length_reader.errors import ArgumentError

from .date_patterns import (
    DEFAULT_DATE_PATTERN,
    DEFAULT_DATETIME_PATTERN,
    to_input_pattern,
    to_strptime_format,
)
from .field_types import FieldType

LOGGER = logging.getLogger(__name__)

Converter = Callable[[str, str | None], object]

TRUE_TOKENS = frozenset({"1", "true", "yes", "y"})

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INT32_RANGE = (-(2**31), 2**31 - 1)
_INT64_RANGE = (-(2**63), 2**63 - 1)


class ConverterRegistry:
    """Maps type tags to ``(raw_text, format) -> value`` converters.

    Built-in converters are registered on construction. ``register`` is meant
    to be called during setup; it is not synchronized against concurrent
    ``convert`` calls.
    """

    def __init__(self) -> None:
        self._converters: dict[Hashable, Converter] = {}
        self._register_standard_converters()

    def register(self, field_type: Hashable | None, converter: Converter | None) -> None:
        """Register ``converter`` for ``field_type``; the last registration wins."""
        if field_type is None:
            raise ArgumentError("field_type must not be None.")
        if converter is None:
            raise ArgumentError("converter must not be None.")
        if field_type in self._converters:
            LOGGER.debug("Replacing converter for %s", field_type)
        self._converters[field_type] = converter

    def supports(self, field_type: Hashable) -> bool:
        """Return True when a converter is registered for ``field_type``."""
        return field_type in self._converters

    def convert(
        self, field_type: Hashable, value: str, format_string: str | None = None
    ) -> object:
        """Convert ``value`` using the converter registered for ``field_type``."""
        converter = self._converters.get(field_type)
        if converter is None:
            raise ArgumentError(f"Unsupported type: {field_type}")
        try:
            return converter(value, format_string)
        except Exception as exc:
            raise ArgumentError(
                f"Failed to convert value '{value}' with format '{format_string}': {exc}"
            ) from exc

    def _register_standard_converters(self) -> None:
        self.register(FieldType.STR, lambda value, _format: value)
        self.register(FieldType.INT32, _integer_converter(_INT32_RANGE, blank=0))
        self.register(FieldType.INT64, _integer_converter(_INT64_RANGE, blank=0))
        self.register(FieldType.OPTIONAL_INT32, _integer_converter(_INT32_RANGE, blank=None))
        self.register(FieldType.OPTIONAL_INT64, _integer_converter(_INT64_RANGE, blank=None))
        self.register(FieldType.FLOAT32, _float_converter(single_precision=True, blank=0.0))
        self.register(FieldType.FLOAT64, _float_converter(single_precision=False, blank=0.0))
        self.register(
            FieldType.OPTIONAL_FLOAT32, _float_converter(single_precision=True, blank=None)
        )
        self.register(
            FieldType.OPTIONAL_FLOAT64, _float_converter(single_precision=False, blank=None)
        )
        self.register(FieldType.BOOL, _bool_converter(blank=False))
        self.register(FieldType.OPTIONAL_BOOL, _bool_converter(blank=None))
        self.register(FieldType.DECIMAL, _convert_decimal)
        self.register(FieldType.DATE, _convert_date)
        self.register(FieldType.DATETIME, _convert_datetime)


def _is_blank(value: str | None) -> bool:
    return value is None or not trim_field(value)


def _integer_converter(bounds: tuple[int, int], *, blank: int | None) -> Converter:
    minimum, maximum = bounds

    def convert(value: str, _format: str | None) -> int | None:
        if _is_blank(value):
            return blank
        text = trim_field(value)
        if not _INTEGER_PATTERN.fullmatch(text):
            raise ValueError(f"not a base-10 integer: '{text}'")
        number = int(text)
        if not minimum <= number <= maximum:
            raise ValueError(f"integer out of range [{minimum}, {maximum}]: {number}")
        return number

    return convert


def _float_converter(*, single_precision: bool, blank: float | None) -> Converter:
    def convert(value: str, _format: str | None) -> float | None:
        if _is_blank(value):
            return blank
        number = float(_decimal_text(value))
        if single_precision:
            number = struct.unpack("f", struct.pack("f", number))[0]
        return number

    return convert


def _bool_converter(*, blank: bool | None) -> Converter:
    # Unrecognized tokens map to False rather than failing.
    def convert(value: str, _format: str | None) -> bool | None:
        if _is_blank(value):
            return blank
        return trim_field(value).lower() in TRUE_TOKENS

    return convert


def _decimal_text(value: str) -> str:
    text = trim_field(value)
    if not _DECIMAL_PATTERN.fullmatch(text):
        raise ValueError(f"not a decimal number: '{text}'")
    return text


def _convert_decimal(value: str, _format: str | None) -> Decimal | None:
    if _is_blank(value):
        return None
    return Decimal(_decimal_text(value))


def _parse_temporal(text: str, pattern: str) -> datetime:
    expected = to_input_pattern(pattern)
    if expected is not None and not expected.fullmatch(text):
        raise ValueError(f"'{text}' does not match pattern '{pattern}'")
    return datetime.strptime(text, to_strptime_format(pattern))


def _convert_date(value: str, format_string: str | None) -> date | None:
    if _is_blank(value):
        return None
    pattern = format_string or DEFAULT_DATE_PATTERN
    try:
        return _parse_temporal(trim_field(value), pattern).date()
    except ValueError as exc:
        raise ArgumentError(f"Invalid date format: {pattern}") from exc


def _convert_datetime(value: str, format_string: str | None) -> datetime | None:
    if _is_blank(value):
        return None
    pattern = format_string or DEFAULT_DATETIME_PATTERN
    text = trim_field(value)
    try:
        return _parse_temporal(text, pattern)
    except ValueError as exc:
        raise ArgumentError(
            f"Failed to parse datetime '{text}' with format '{pattern}'"
        ) from exc
