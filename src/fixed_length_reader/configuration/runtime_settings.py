"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fixed_length_reader.schema_management.schema_models import ShapeSchema, StructureSchema


@dataclass(frozen=True)
class LayoutConfiguration:
    """Schemas and encoding loaded from one layout file."""

    path: Path
    encoding: str
    record: ShapeSchema | None
    structure: StructureSchema | None
