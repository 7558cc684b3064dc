"""Construction and validation of shape and structure schemas."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterable

from fixed_length_reader.errors import ArgumentError

from .schema_models import (
    ConstructionStyle,
    SectionField,
    SectionKind,
    ShapeField,
    ShapeSchema,
    StructureSchema,
)

LOGGER = logging.getLogger(__name__)


def define_shape(
    target: Callable[..., object] | None,
    fields: Iterable[ShapeField],
    construction: ConstructionStyle | None = None,
) -> ShapeSchema:
    """Describe how ``target`` is decoded from a line.

    The construction style is fixed here, once: immutable when ``target``
    cannot be called without arguments or cannot be mutated afterwards,
    mutable otherwise. Requesting ``MUTABLE`` for a target without a
    no-argument constructor falls back to ``IMMUTABLE``.
    """
    if target is None or not callable(target):
        raise ArgumentError("target must be a callable type.")
    shape_fields = tuple(fields)
    _ensure_unique_names(field.name for field in shape_fields)
    for shape_field in shape_fields:
        if shape_field.field_type is None:
            raise ArgumentError(f"Field '{shape_field.name}' requires a field_type.")
    style = resolve_construction_style(target, construction)
    return ShapeSchema(target=target, fields=shape_fields, construction=style)


def define_structure(  # pylint: disable=too-many-arguments
    target: Callable[..., object] | None,
    fields: Iterable[SectionField],
    *,
    identifier_field: str = "",
    header_identifier: str = "H",
    data_identifier: str = "D",
    trailer_identifier: str = "T",
    end_identifier: str = "E",
    construction: ConstructionStyle | None = None,
) -> StructureSchema:
    """Describe a header/data/trailer/end file and the composite it decodes into.

    ``target=None`` makes the decoder return a ``DecodedStructure``.
    """
    section_fields = tuple(fields)
    validate_sections(section_fields)

    if target is None:
        style = ConstructionStyle.IMMUTABLE
    elif not callable(target):
        raise ArgumentError("target must be a callable type.")
    else:
        style = resolve_construction_style(target, construction)

    return StructureSchema(
        target=target,
        fields=section_fields,
        construction=style,
        identifier_field=identifier_field or "",
        identifiers={
            SectionKind.HEADER: header_identifier,
            SectionKind.DATA: data_identifier,
            SectionKind.TRAILER: trailer_identifier,
            SectionKind.END: end_identifier,
        },
    )


def resolve_construction_style(
    target: Callable[..., object], requested: ConstructionStyle | None = None
) -> ConstructionStyle:
    """Return the construction style ``target`` supports, honoring ``requested`` when possible."""
    if requested is ConstructionStyle.IMMUTABLE:
        return requested
    if _is_immutable_type(target) or not _accepts_no_arguments(target):
        if requested is ConstructionStyle.MUTABLE:
            LOGGER.debug(
                "%s has no no-argument constructor; using immutable construction",
                getattr(target, "__name__", target),
            )
        return ConstructionStyle.IMMUTABLE
    return ConstructionStyle.MUTABLE


def _is_immutable_type(target: Callable[..., object]) -> bool:
    if isinstance(target, type) and issubclass(target, tuple):
        return True
    params = getattr(target, "__dataclass_params__", None)
    return bool(params is not None and params.frozen)


def _accepts_no_arguments(target: Callable[..., object]) -> bool:
    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError):
        return True
    try:
        signature.bind()
    except TypeError:
        return False
    return True


def _ensure_unique_names(names: Iterable[str]) -> None:
    seen: set[str] = set()
    for name in names:
        if not name:
            raise ArgumentError("Field names must not be empty.")
        if name in seen:
            raise ArgumentError(f"Duplicate field name: {name}")
        seen.add(name)


def validate_sections(fields: Iterable[SectionField]) -> None:
    """Check the section fields of a composite structure type.

    The data section must be a list of one element shape; header, trailer and
    end sections hold single records. Each kind may appear only once.
    """
    section_fields = tuple(fields)
    _ensure_unique_names(section.name for section in section_fields)
    seen_kinds: set[SectionKind] = set()
    for section in section_fields:
        if section.kind is None:
            continue
        if section.kind in seen_kinds:
            raise ArgumentError(f"Section '{section.kind.value}' is declared more than once.")
        seen_kinds.add(section.kind)
        if section.shape is None:
            raise ArgumentError(f"Section field '{section.name}' requires a shape.")
        if section.kind is SectionKind.DATA and not section.repeated:
            raise ArgumentError(
                f"Data field '{section.name}' must be a list of '{section.shape.name}' records."
            )
        if section.kind is not SectionKind.DATA and section.repeated:
            raise ArgumentError(
                f"Section field '{section.name}' must hold a single "
                f"{section.kind.value} record, not a list."
            )
