"""Byte slicer tests."""

from __future__ import annotations

import pytest
from fixed_length_reader.byte_slicing import resolve_encoding, slice_field, trim_field
from fixed_length_reader.errors import ArgumentError


def test_slices_ascii_window() -> None:
    assert slice_field("John      Doe       25 ", 10, 10, "utf-8") == "Doe       "


def test_slices_by_bytes_not_characters() -> None:
    line = "あいうABC"

    assert slice_field(line, 3, 3, "utf-8") == "い"
    assert slice_field(line, 9, 3, "utf-8") == "ABC"


def test_slices_multibyte_text_in_shift_jis() -> None:
    line = "山田太郎  042"

    assert slice_field(line, 0, 10, "cp932") == "山田太郎  "
    assert slice_field(line, 10, 3, "cp932") == "042"


def test_partial_multibyte_character_is_replaced() -> None:
    assert slice_field("あ", 0, 2, "utf-8") == "�"


def test_window_ending_at_line_end_is_allowed() -> None:
    assert slice_field("ABC", 0, 3, "utf-8") == "ABC"
    assert slice_field("ABC", 3, 0, "utf-8") == ""


@pytest.mark.parametrize(("offset", "length"), [(4, 0), (2, 2), (0, 4)])
def test_window_outside_line_raises_index_error(offset: int, length: int) -> None:
    with pytest.raises(IndexError):
        slice_field("ABC", offset, length, "utf-8")


@pytest.mark.parametrize(
    ("line", "offset", "length"),
    [("ABC", -1, 1), ("ABC", 0, -1), (None, 0, 1)],
)
def test_invalid_arguments_raise_argument_error(line, offset: int, length: int) -> None:
    with pytest.raises(ArgumentError):
        slice_field(line, offset, length, "utf-8")


def test_unknown_encoding_raises_argument_error() -> None:
    with pytest.raises(ArgumentError):
        slice_field("ABC", 0, 1, "no-such-codec")


def test_resolve_encoding_returns_canonical_name() -> None:
    assert resolve_encoding("UTF8") == "utf-8"
    with pytest.raises(ArgumentError):
        resolve_encoding("")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("  Doe  ", "Doe"),
        ("\x00\x00Doe\x00", "Doe"),
        ("\tDoe\r\n", "Doe"),
        ("\u3000Doe\u3000", "\u3000Doe\u3000"),
        ("\x00 \x1f", ""),
    ],
)
def test_trim_field_strips_padding_up_to_space(raw: str, expected: str) -> None:
    assert trim_field(raw) == expected
