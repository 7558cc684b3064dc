"""Structure decoding exports."""

from .line_classifier import END_PROBE_MAX_BYTES, LineClassifier
from .structure_decoder import StructureDecoder
from .structure_models import DecodedStructure

__all__ = [
    "DecodedStructure",
    "END_PROBE_MAX_BYTES",
    "LineClassifier",
    "StructureDecoder",
]
