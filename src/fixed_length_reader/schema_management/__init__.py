"""Schema management exports."""

from .schema_definition import (
    define_shape,
    define_structure,
    resolve_construction_style,
    validate_sections,
)
from .schema_models import (
    DEFAULT_IDENTIFIERS,
    ConstructionStyle,
    FieldSchema,
    SectionField,
    SectionKind,
    ShapeField,
    ShapeSchema,
    StructureSchema,
)

__all__ = [
    "DEFAULT_IDENTIFIERS",
    "ConstructionStyle",
    "FieldSchema",
    "SectionField",
    "SectionKind",
    "ShapeField",
    "ShapeSchema",
    "StructureSchema",
    "define_shape",
    "define_structure",
    "resolve_construction_style",
    "validate_sections",
]
