"""Layout scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from fixed_length_reader.configuration import (
    build_placeholder_layout,
    load_layout,
    write_placeholder_layout,
)


def test_build_placeholder_layout_contains_record_and_structure() -> None:
    scaffold = build_placeholder_layout()

    assert "Layout template for fixed-length-reader" in scaffold
    assert "encoding:" in scaffold
    assert "record:" in scaffold
    assert "structure:" in scaffold
    assert "identifier_field:" in scaffold
    for section in ("header:", "data:", "trailer:", "end:"):
        assert section in scaffold


def test_written_placeholder_layout_loads(tmp_path: Path) -> None:
    output_path = tmp_path / "layout.yaml"

    written_path = write_placeholder_layout(output_path)

    assert written_path == output_path.resolve()
    layout = load_layout(written_path)
    assert layout.record is not None
    assert layout.structure is not None


def test_write_placeholder_layout_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "layout.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_layout(output_path)
