"""Record decoding exports."""

from .record_decoder import RecordDecoder, build_value

__all__ = ["RecordDecoder", "build_value"]
