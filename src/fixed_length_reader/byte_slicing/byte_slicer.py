"""Byte-accurate field extraction."""

from __future__ import annotations

import codecs

from fixed_length_reader.errors import ArgumentError

# Padding removed by trim_field: every code point up to and including U+0020.
_PADDING = "".join(chr(code) for code in range(0x21))


def resolve_encoding(encoding: str | None) -> str:
    """Return the canonical codec name for ``encoding``."""
    if not encoding:
        raise ArgumentError("encoding must not be empty.")
    try:
        return codecs.lookup(encoding).name
    except LookupError as exc:
        raise ArgumentError(f"Unknown encoding: {encoding}") from exc


def slice_field(line: str | None, offset: int, length: int, encoding: str) -> str:
    """Cut ``length`` bytes at ``offset`` out of ``line`` encoded with ``encoding``.

    Undecodable byte sequences, such as a multi-byte character cut in half,
    become U+FFFD instead of failing.

    Raises:
      ArgumentError: For negative offset/length, a missing line or an unknown encoding.
      IndexError: If the requested window does not fit inside the encoded line.
    """
    if offset < 0:
        raise ArgumentError(f"offset must be non-negative: {offset}")
    if length < 0:
        raise ArgumentError(f"length must be non-negative: {length}")
    if line is None:
        raise ArgumentError("line must not be None.")

    try:
        data = line.encode(encoding, errors="replace")
    except LookupError as exc:
        raise ArgumentError(f"Unknown encoding: {encoding}") from exc

    if offset > len(data):
        raise IndexError(f"offset {offset} exceeds line length {len(data)}")
    if offset + length > len(data):
        raise IndexError(f"range [{offset}, {offset + length}] exceeds line length {len(data)}")

    window = data[offset : offset + length]
    try:
        return window.decode(encoding, errors="replace")
    except LookupError as exc:
        raise ArgumentError(
            f"Failed to decode bytes at offset {offset}, length {length} with {encoding}"
        ) from exc


def trim_field(text: str) -> str:
    """Strip spaces and control characters, NUL fill included, from both ends.

    Other whitespace such as the ideographic space U+3000 is kept.
    """
    return text.strip(_PADDING)
