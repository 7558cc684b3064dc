"""Layout file loader service."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

import yaml

from fixed_length_reader.byte_slicing import resolve_encoding
from fixed_length_reader.errors import ArgumentError
from fixed_length_reader.schema_management import (
    DEFAULT_IDENTIFIERS,
    ConstructionStyle,
    FieldSchema,
    SectionField,
    SectionKind,
    ShapeField,
    ShapeSchema,
    StructureSchema,
    define_shape,
    define_structure,
)
from fixed_length_reader.value_conversion import FieldType, zero_value

from .runtime_settings import LayoutConfiguration

DEFAULT_LAYOUT_ENCODING = "utf-8"

_SECTION_CLASS_NAMES: dict[SectionKind, str] = {
    SectionKind.HEADER: "HeaderRecord",
    SectionKind.DATA: "DataRecord",
    SectionKind.TRAILER: "TrailerRecord",
    SectionKind.END: "EndRecord",
}

_ANNOTATIONS: dict[FieldType, Any] = {
    FieldType.STR: str | None,
    FieldType.CHAR: str,
    FieldType.INT32: int,
    FieldType.INT64: int,
    FieldType.FLOAT32: float,
    FieldType.FLOAT64: float,
    FieldType.BOOL: bool,
    FieldType.OPTIONAL_INT32: int | None,
    FieldType.OPTIONAL_INT64: int | None,
    FieldType.OPTIONAL_FLOAT32: float | None,
    FieldType.OPTIONAL_FLOAT64: float | None,
    FieldType.OPTIONAL_BOOL: bool | None,
    FieldType.DECIMAL: Decimal | None,
    FieldType.DATE: date | None,
    FieldType.DATETIME: datetime | None,
}


class ConfigurationError(Exception):
    """Raised when the layout file is invalid."""


def load_layout(layout_path: Path | str) -> LayoutConfiguration:
    """Load and validate a YAML or JSON layout file."""
    path = Path(layout_path)
    if not path.exists():
        raise ConfigurationError(f"Layout file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse layout file: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Layout root must be a mapping.")

    return parse_layout(parsed, path)


def parse_layout(parsed: Mapping[str, Any], path: Path) -> LayoutConfiguration:
    """Validate an already parsed layout mapping."""
    encoding = _parse_encoding(parsed.get("encoding", DEFAULT_LAYOUT_ENCODING))
    record_section = parsed.get("record")
    structure_section = parsed.get("structure")
    if record_section is None and structure_section is None:
        raise ConfigurationError("Layout requires a 'record' or 'structure' section.")

    record = (
        None
        if record_section is None
        else _parse_shape(record_section, "record", class_name="Record")
    )
    structure = None if structure_section is None else _parse_structure(structure_section)
    return LayoutConfiguration(path=path, encoding=encoding, record=record, structure=structure)


def _parse_encoding(value: Any) -> str:
    name = _require_non_empty_string(value, "encoding")
    try:
        return resolve_encoding(name)
    except ArgumentError as exc:
        raise ConfigurationError(f"encoding '{name}' is not supported.") from exc


def _parse_structure(value: Any) -> StructureSchema:
    section = _require_mapping(value, "structure")
    identifier_field = _optional_string(
        section.get("identifier_field"), "structure.identifier_field"
    )
    identifiers = _parse_identifiers(section.get("identifiers"))

    section_fields: list[SectionField] = []
    for kind in SectionKind:
        shape_section = section.get(kind.value)
        if shape_section is None:
            continue
        shape = _parse_shape(
            shape_section, f"structure.{kind.value}", class_name=_SECTION_CLASS_NAMES[kind]
        )
        section_fields.append(
            SectionField(
                name=kind.value,
                kind=kind,
                shape=shape,
                repeated=kind is SectionKind.DATA,
            )
        )
    if not section_fields:
        raise ConfigurationError("structure must define at least one section.")
    if identifier_field and not any(
        item.shape is not None and item.shape.find_field(identifier_field) is not None
        for item in section_fields
    ):
        raise ConfigurationError(
            f"structure.identifier_field '{identifier_field}' does not exist in any section."
        )

    target = dataclasses.make_dataclass(
        "FileStructure",
        [
            (
                item.name,
                list if item.repeated else Any,
                dataclasses.field(default_factory=list) if item.repeated else None,
            )
            for item in section_fields
        ],
    )
    try:
        return define_structure(
            target,
            section_fields,
            identifier_field=identifier_field or "",
            header_identifier=identifiers[SectionKind.HEADER],
            data_identifier=identifiers[SectionKind.DATA],
            trailer_identifier=identifiers[SectionKind.TRAILER],
            end_identifier=identifiers[SectionKind.END],
        )
    except ArgumentError as exc:
        raise ConfigurationError(f"structure: {exc}") from exc


def _parse_identifiers(value: Any) -> dict[SectionKind, str]:
    identifiers = dict(DEFAULT_IDENTIFIERS)
    if value is None:
        return identifiers
    section = _require_mapping(value, "structure.identifiers")
    for key in section:
        if key not in {kind.value for kind in SectionKind}:
            raise ConfigurationError(f"structure.identifiers has unknown section '{key}'.")
    for kind in SectionKind:
        if kind.value in section:
            identifiers[kind] = _require_non_empty_string(
                _stringify_scalar(section[kind.value]), f"structure.identifiers.{kind.value}"
            )
    return identifiers


def _parse_shape(value: Any, label: str, *, class_name: str) -> ShapeSchema:
    section = _require_mapping(value, label)
    raw_fields = section.get("fields")
    if not isinstance(raw_fields, Sequence) or isinstance(raw_fields, str) or not raw_fields:
        raise ConfigurationError(f"{label}.fields must be a non-empty list.")
    immutable = section.get("immutable", False)
    if not isinstance(immutable, bool):
        raise ConfigurationError(f"{label}.immutable must be a boolean.")

    shape_fields = [
        _parse_field(item, f"{label}.fields[{index}]") for index, item in enumerate(raw_fields)
    ]
    names = [item.name for item in shape_fields]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ConfigurationError(f"{label}.fields has duplicate names: {', '.join(duplicates)}")

    target = dataclasses.make_dataclass(
        class_name,
        [
            (item.name, _ANNOTATIONS[item.field_type], zero_value(item.field_type))
            for item in shape_fields
        ],
        frozen=immutable,
    )
    style = ConstructionStyle.IMMUTABLE if immutable else ConstructionStyle.MUTABLE
    try:
        return define_shape(target, shape_fields, style)
    except ArgumentError as exc:
        raise ConfigurationError(f"{label}: {exc}") from exc


def _parse_field(value: Any, label: str) -> ShapeField:
    entry = _require_mapping(value, label)
    name = _require_non_empty_string(entry.get("name"), f"{label}.name")
    if not name.isidentifier():
        raise ConfigurationError(f"{label}.name '{name}' must be a valid identifier.")
    type_name = _require_non_empty_string(entry.get("type", FieldType.STR.value), f"{label}.type")
    try:
        field_type = FieldType(type_name.lower())
    except ValueError as exc:
        raise ConfigurationError(f"{label}.type '{type_name}' is not a supported type.") from exc

    has_offset = entry.get("offset") is not None
    has_length = entry.get("length") is not None
    if has_offset != has_length:
        raise ConfigurationError(f"{label} must set both offset and length, or neither.")
    if not has_offset:
        return ShapeField(name=name, field_type=field_type)
    if field_type is FieldType.CHAR:
        raise ConfigurationError(f"{label}.type 'char' is only valid without offset and length.")

    fill_char = entry.get("fill_char", " ")
    if not isinstance(fill_char, str) or len(fill_char) != 1:
        raise ConfigurationError(f"{label}.fill_char must be a single character.")
    trim = entry.get("trim", True)
    if not isinstance(trim, bool):
        raise ConfigurationError(f"{label}.trim must be a boolean.")

    schema = FieldSchema(
        offset=_require_non_negative_int(entry.get("offset"), f"{label}.offset"),
        length=_require_non_negative_int(entry.get("length"), f"{label}.length"),
        format=_optional_string(entry.get("format"), f"{label}.format"),
        trim=trim,
        fill_char=fill_char,
    )
    return ShapeField(name=name, field_type=field_type, schema=schema)


def _stringify_scalar(value: Any) -> Any:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Layout section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
