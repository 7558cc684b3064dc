"""Schema entities describing where fields live and how targets are built."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from dataclasses import dataclass, field
from enum import Enum

from fixed_length_reader.errors import ArgumentError


class ConstructionStyle(Enum):
    """How a decoded value is assembled."""

    MUTABLE = "mutable"
    IMMUTABLE = "immutable"


class SectionKind(Enum):
    """Structural role of a line inside a multi-section file."""

    HEADER = "header"
    DATA = "data"
    TRAILER = "trailer"
    END = "end"


DEFAULT_IDENTIFIERS: Mapping[SectionKind, str] = {
    SectionKind.HEADER: "H",
    SectionKind.DATA: "D",
    SectionKind.TRAILER: "T",
    SectionKind.END: "E",
}


@dataclass(frozen=True)
class FieldSchema:
    """Byte window and interpretation settings of one field.

    With ``trim`` set, spaces and control characters up to U+0020 (NUL fill
    included) are stripped from both ends before conversion; U+3000 is kept.
    ``fill_char`` is recorded but not used for decoding.
    """

    offset: int
    length: int
    format: str | None = None
    trim: bool = True
    fill_char: str = " "

    def __post_init__(self) -> None:
        for name, value in (("offset", self.offset), ("length", self.length)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ArgumentError(f"{name} must be an integer: {value!r}")
            if value < 0:
                raise ArgumentError(f"{name} must be non-negative: {value}")


@dataclass(frozen=True)
class ShapeField:
    """One named field of a target shape; without a schema it is a passthrough field."""

    name: str
    field_type: Hashable
    schema: FieldSchema | None = None

    @property
    def is_passthrough(self) -> bool:
        return self.schema is None


@dataclass(frozen=True)
class ShapeSchema:
    """Ordered field layout of one target type."""

    target: Callable[..., object]
    fields: tuple[ShapeField, ...]
    construction: ConstructionStyle

    @property
    def name(self) -> str:
        return getattr(self.target, "__name__", repr(self.target))

    def find_field(self, name: str) -> ShapeField | None:
        return next((item for item in self.fields if item.name == name), None)


@dataclass(frozen=True)
class SectionField:
    """One field of a composite structure type.

    Tagged fields (``kind`` set) receive a decoded section; untagged fields
    receive the zero value of ``field_type``.
    """

    name: str
    kind: SectionKind | None = None
    shape: ShapeSchema | None = None
    repeated: bool = False
    field_type: Hashable | None = None


@dataclass(frozen=True)
class StructureSchema:  # pylint: disable=too-many-instance-attributes
    """Layout of a header/data/trailer/end file and of the composite result."""

    target: Callable[..., object] | None
    fields: tuple[SectionField, ...]
    construction: ConstructionStyle
    identifier_field: str = ""
    identifiers: Mapping[SectionKind, str] = field(default_factory=dict)

    def section(self, kind: SectionKind) -> SectionField | None:
        return next((item for item in self.fields if item.kind is kind), None)

    def section_shape(self, kind: SectionKind) -> ShapeSchema | None:
        section = self.section(kind)
        return section.shape if section else None

    def identifier_for(self, kind: SectionKind) -> str:
        return self.identifiers.get(kind, DEFAULT_IDENTIFIERS[kind])
