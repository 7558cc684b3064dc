"""Line identifier lookup for multi-section files."""

from __future__ import annotations

from fixed_length_reader.byte_slicing import trim_field
from fixed_length_reader.errors import FixedLengthError
from fixed_length_reader.record_decoding import RecordDecoder
from fixed_length_reader.schema_management.schema_models import (
    SectionKind,
    ShapeSchema,
    StructureSchema,
)

# Lines up to this many bytes are first probed as end records. The threshold
# is a compatibility heuristic, not part of any file format.
END_PROBE_MAX_BYTES = 400

CANDIDATE_ORDER: tuple[SectionKind, ...] = (
    SectionKind.HEADER,
    SectionKind.DATA,
    SectionKind.TRAILER,
    SectionKind.END,
)


class LineClassifier:
    """Derives the line identifier of each line by trial-decoding section shapes.

    Without an identifier field the identifier is the first character of the
    line. Otherwise short lines are first probed as end records, then the
    header, data, trailer and end shapes are tried in that order and the first
    decoded identifier value wins. When no shape decodes, the first character
    is used.
    """

    def __init__(self, decoder: RecordDecoder, structure: StructureSchema) -> None:
        self.decoder = decoder
        self.structure = structure

    def classify(self, line: str) -> str:
        if not self.structure.identifier_field:
            return line[:1]

        end_shape = self.structure.section_shape(SectionKind.END)
        if end_shape is not None and self._byte_length(line) <= END_PROBE_MAX_BYTES:
            identifier = self._probe(line, end_shape)
            if identifier == self.structure.identifier_for(SectionKind.END):
                return identifier

        for kind in CANDIDATE_ORDER:
            shape = self.structure.section_shape(kind)
            if shape is None:
                continue
            identifier = self._probe(line, shape)
            if identifier is not None:
                return identifier

        return line[:1]

    def _probe(self, line: str, shape: ShapeSchema) -> str | None:
        field_name = self.structure.identifier_field
        if shape.find_field(field_name) is None:
            return None
        try:
            section = self.decoder.decode(line, shape, 1)
        except FixedLengthError:
            return None
        value = getattr(section, field_name, None)
        if value is None:
            return None
        return trim_field(str(value))

    def _byte_length(self, line: str) -> int:
        return len(line.encode(self.decoder.encoding, errors="replace"))
