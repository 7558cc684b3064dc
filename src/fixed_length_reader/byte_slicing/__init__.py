"""Byte slicing exports."""

from .byte_slicer import resolve_encoding, slice_field, trim_field

__all__ = ["resolve_encoding", "slice_field", "trim_field"]
