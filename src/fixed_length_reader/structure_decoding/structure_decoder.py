"""Decoding of header/data/trailer/end files into a composite value."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fixed_length_reader.errors import ArgumentError, FixedLengthError
from fixed_length_reader.record_decoding import RecordDecoder, build_value
from fixed_length_reader.schema_management import validate_sections
from fixed_length_reader.schema_management.schema_models import SectionKind, StructureSchema
from fixed_length_reader.value_conversion import zero_value

from .line_classifier import CANDIDATE_ORDER, LineClassifier
from .structure_models import DecodedStructure

LOGGER = logging.getLogger(__name__)

_SINGLE_SECTIONS: tuple[SectionKind, ...] = (
    SectionKind.HEADER,
    SectionKind.TRAILER,
    SectionKind.END,
)


class StructureDecoder:
    """Routes classified lines to their section shapes and enforces cardinality."""

    def __init__(self, record_decoder: RecordDecoder | None) -> None:
        if record_decoder is None:
            raise ArgumentError("record_decoder must not be None.")
        self.record_decoder = record_decoder

    def decode_structure(
        self, lines: Iterable[str] | None, structure: StructureSchema | None
    ) -> object:
        """Decode ``lines`` into the composite described by ``structure``.

        Returns the structure's target built from the decoded sections, or the
        ``DecodedStructure`` itself when the structure has no target.

        Raises:
          ArgumentError: If ``lines`` is empty or ``structure`` is missing or malformed.
          FixedLengthError: For any data error; duplicate or missing sections and
            unknown identifiers included.
        """
        line_list = list(lines) if lines is not None else []
        if not line_list:
            raise ArgumentError("lines must not be None or empty.")
        if structure is None:
            raise ArgumentError("structure must not be None.")
        if not isinstance(structure, StructureSchema):
            raise ArgumentError(f"structure must be a StructureSchema, got {type(structure)}.")
        validate_sections(structure.fields)

        try:
            decoded = self._decode_sections(line_list, structure)
            return self._assemble(structure, decoded)
        except FixedLengthError:
            raise
        except Exception as exc:
            raise FixedLengthError(f"Failed to process structure: {exc}", line_number=0) from exc

    def _decode_sections(self, lines: list[str], structure: StructureSchema) -> DecodedStructure:
        classifier = LineClassifier(self.record_decoder, structure)
        singles: dict[SectionKind, object] = {}
        data: list[object] = []

        for line_number, line in enumerate(lines, start=1):
            identifier = classifier.classify(line)
            kind = _section_for(identifier, structure)
            LOGGER.debug("Line %d identifier %r -> %s", line_number, identifier, kind)
            if kind is None:
                raise FixedLengthError(
                    f"Unknown line identifier: {identifier}",
                    line_number=line_number,
                    original_line=line,
                )
            shape = structure.section_shape(kind)
            if shape is None:
                raise FixedLengthError(
                    f"No {kind.value} section is configured for line identifier: {identifier}",
                    line_number=line_number,
                    original_line=line,
                )
            if kind is SectionKind.DATA:
                data.append(self.record_decoder.decode(line, shape, line_number))
                continue
            if kind in singles:
                raise FixedLengthError(
                    f"Multiple {kind.value} records found",
                    line_number=line_number,
                    original_line=line,
                )
            singles[kind] = self.record_decoder.decode(line, shape, line_number)

        for kind in _SINGLE_SECTIONS:
            if structure.section_shape(kind) is not None and kind not in singles:
                raise FixedLengthError(
                    f"{kind.value.capitalize()} record is required but not found",
                    line_number=0,
                )

        return DecodedStructure(
            header=singles.get(SectionKind.HEADER),
            data=data,
            trailer=singles.get(SectionKind.TRAILER),
            end=singles.get(SectionKind.END),
        )

    @staticmethod
    def _assemble(structure: StructureSchema, decoded: DecodedStructure) -> object:
        if structure.target is None:
            return decoded
        values = [
            (
                section.name,
                zero_value(section.field_type)
                if section.kind is None
                else decoded.section_value(section.kind),
            )
            for section in structure.fields
        ]
        tagged = frozenset(section.name for section in structure.fields if section.kind)
        return build_value(structure.target, structure.construction, values, tagged)


def _section_for(identifier: str, structure: StructureSchema) -> SectionKind | None:
    return next(
        (kind for kind in CANDIDATE_ORDER if identifier == structure.identifier_for(kind)),
        None,
    )
