"""Decoding of one fixed-length line into one target value."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from fixed_length_reader.byte_slicing import resolve_encoding, slice_field, trim_field
from fixed_length_reader.errors import ArgumentError, FixedLengthError
from fixed_length_reader.schema_management.schema_models import (
    ConstructionStyle,
    ShapeField,
    ShapeSchema,
)
from fixed_length_reader.value_conversion import ConverterRegistry, zero_value


class RecordDecoder:
    """Slices, trims and converts every field of a shape, then builds the target."""

    def __init__(self, encoding: str | None, registry: ConverterRegistry | None) -> None:
        if encoding is None:
            raise ArgumentError("encoding must not be None.")
        if registry is None:
            raise ArgumentError("registry must not be None.")
        self.encoding = resolve_encoding(encoding)
        self.registry = registry

    def decode(self, line: str | None, shape: ShapeSchema | None, line_number: int) -> object:
        """Decode ``line`` into an instance of ``shape.target``.

        Raises:
          ArgumentError: If ``line`` or ``shape`` is missing.
          FixedLengthError: If any field cannot be sliced or converted, or the
            target cannot be constructed.
        """
        if line is None:
            raise ArgumentError("line must not be None.")
        if shape is None:
            raise ArgumentError("shape must not be None.")
        try:
            values = [
                (
                    item.name,
                    zero_value(item.field_type)
                    if item.is_passthrough
                    else self._extract_and_convert(line, item, line_number),
                )
                for item in shape.fields
            ]
            decoded_names = frozenset(
                item.name for item in shape.fields if not item.is_passthrough
            )
            return build_value(shape.target, shape.construction, values, decoded_names)
        except FixedLengthError:
            raise
        except Exception as exc:
            raise FixedLengthError(
                f"Failed to process {shape.name}: {exc}",
                line_number=line_number,
                original_line=line,
            ) from exc

    def _extract_and_convert(self, line: str, item: ShapeField, line_number: int) -> object:
        schema = item.schema
        try:
            if schema is None:
                raise ArgumentError("field has no byte window")
            raw_value = slice_field(line, schema.offset, schema.length, self.encoding)
            if schema.trim:
                raw_value = trim_field(raw_value)
            return self.registry.convert(item.field_type, raw_value, schema.format)
        except Exception as exc:
            raise FixedLengthError(
                f"Failed to analyze field: {exc}",
                line_number=line_number,
                field_name=item.name,
                original_line=line,
            ) from exc


def build_value(
    target: Callable[..., object],
    construction: ConstructionStyle,
    values: Sequence[tuple[str, object]],
    assigned: frozenset[str] | None = None,
) -> object:
    """Assemble ``target`` from ordered ``(name, value)`` pairs.

    Immutable construction passes every value positionally. Mutable
    construction default-constructs ``target`` and assigns the names listed in
    ``assigned`` (all names when omitted).
    """
    if construction is ConstructionStyle.IMMUTABLE:
        return target(*(value for _name, value in values))
    instance = target()
    for name, value in values:
        if assigned is None or name in assigned:
            setattr(instance, name, value)
    return instance
