"""Structure decoding entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from fixed_length_reader.schema_management.schema_models import SectionKind


@dataclass(frozen=True)
class DecodedStructure:
    """Sections decoded from one header/data/trailer/end file."""

    header: object | None = None
    data: list[object] = field(default_factory=list)
    trailer: object | None = None
    end: object | None = None

    def section_value(self, kind: SectionKind) -> object:
        """Return the decoded value for ``kind``; the data section is a new list."""
        if kind is SectionKind.HEADER:
            return self.header
        if kind is SectionKind.DATA:
            return list(self.data)
        if kind is SectionKind.TRAILER:
            return self.trailer
        return self.end
