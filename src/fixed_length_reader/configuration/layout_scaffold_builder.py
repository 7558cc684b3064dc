"""Layout scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_LAYOUT_FILENAME = "layout.yaml"

_LAYOUT_SCAFFOLD_TEMPLATE = """# Layout template for fixed-length-reader.
# Offsets and lengths are counted in bytes of the configured encoding.
# Field types: str, char, int32, int64, float32, float64, bool, optional_int32,
# optional_int64, optional_float32, optional_float64, optional_bool, decimal, date, datetime.
# A field without offset/length is a passthrough field and keeps its default value.
# char has no built-in converter and is only valid on passthrough fields.

encoding: utf-8

# Single-record layout used by decode-records.
record:
  immutable: false
  fields:
    - {name: name, type: str, offset: 0, length: 10}
    - {name: surname, type: str, offset: 10, length: 10}
    - {name: age, type: int32, offset: 20, length: 3}
    - {name: birth_date, type: date, offset: 23, length: 8, format: yyyyMMdd}

# Header/data/trailer/end layout used by decode-structure.
structure:
  # Field holding the line identifier; leave empty to use the first character.
  identifier_field: type
  identifiers:
    header: H
    data: D
    trailer: T
    end: E
  header:
    fields:
      - {name: type, type: str, offset: 0, length: 1}
      - {name: transaction_id, type: str, offset: 1, length: 3}
      - {name: date, type: date, offset: 4, length: 8}
  data:
    fields:
      - {name: type, type: str, offset: 0, length: 1}
      - {name: item_id, type: str, offset: 1, length: 3}
      - {name: product_name, type: str, offset: 4, length: 10}
      - {name: price, type: decimal, offset: 14, length: 6}
  trailer:
    fields:
      - {name: type, type: str, offset: 0, length: 1}
      - {name: record_count, type: int32, offset: 1, length: 3}
  end:
    fields:
      - {name: type, type: str, offset: 0, length: 1}
"""


def build_placeholder_layout() -> str:
    """Build a YAML layout template with example fields and inline guidance."""
    return _LAYOUT_SCAFFOLD_TEMPLATE


def write_placeholder_layout(output_path: Path | str) -> Path:
    """Write the layout template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Layout file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_layout(), encoding="utf-8")
    return destination.resolve()
