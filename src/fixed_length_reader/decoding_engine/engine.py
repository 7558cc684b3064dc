"""Decoding engine facade and factory."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping

from fixed_length_reader.errors import ArgumentError
from fixed_length_reader.record_decoding import RecordDecoder
from fixed_length_reader.schema_management.schema_models import ShapeSchema, StructureSchema
from fixed_length_reader.structure_decoding import StructureDecoder
from fixed_length_reader.value_conversion import Converter, ConverterRegistry

DEFAULT_ENCODING = "utf-8"


class FixedLengthEngine:
    """Decodes single records and header/data/trailer/end files under one encoding.

    Example:
      engine = create_engine("cp932")
      person = engine.process(line, person_shape, 1)
      transactions = engine.process_structure(lines, transaction_structure)
    """

    def __init__(self, encoding: str | None, registry: ConverterRegistry | None) -> None:
        self.record_decoder = RecordDecoder(encoding, registry)
        self.structure_decoder = StructureDecoder(self.record_decoder)

    @property
    def encoding(self) -> str:
        return self.record_decoder.encoding

    @property
    def registry(self) -> ConverterRegistry:
        return self.record_decoder.registry

    def process(self, line: str, shape: ShapeSchema, line_number: int = 1) -> object:
        """Decode one line; ``line_number`` is reported in errors."""
        return self.record_decoder.decode(line, shape, line_number)

    def process_lines(self, lines: Iterable[str], shape: ShapeSchema) -> Iterator[object]:
        """Decode every line with ``shape``, numbering lines from 1."""
        for line_number, line in enumerate(lines, start=1):
            yield self.record_decoder.decode(line, shape, line_number)

    def process_structure(self, lines: Iterable[str], structure: StructureSchema) -> object:
        """Decode a header/data/trailer/end file."""
        return self.structure_decoder.decode_structure(lines, structure)


def create_engine(
    encoding: str | None = DEFAULT_ENCODING,
    converters: Mapping[Hashable, Converter] | None = None,
) -> FixedLengthEngine:
    """Build an engine with the standard converters plus ``converters``."""
    if encoding is None:
        raise ArgumentError("encoding must not be None.")
    registry = ConverterRegistry()
    for field_type, converter in (converters or {}).items():
        registry.register(field_type, converter)
    return FixedLengthEngine(encoding, registry)
