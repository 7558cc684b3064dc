"""Schema-driven decoding of fixed-length text records."""

import logging

from .decoding_engine import FixedLengthEngine, create_engine
from .errors import ArgumentError, FixedLengthError
from .schema_management import (
    ConstructionStyle,
    FieldSchema,
    SectionField,
    SectionKind,
    ShapeField,
    define_shape,
    define_structure,
)
from .structure_decoding import DecodedStructure
from .value_conversion import ConverterRegistry, FieldType

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArgumentError",
    "ConstructionStyle",
    "ConverterRegistry",
    "DecodedStructure",
    "FieldSchema",
    "FieldType",
    "FixedLengthEngine",
    "FixedLengthError",
    "SectionField",
    "SectionKind",
    "ShapeField",
    "create_engine",
    "define_shape",
    "define_structure",
]
