"""Decoded structure workbook writer service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from fixed_length_reader.schema_management.schema_models import SectionKind
from fixed_length_reader.structure_decoding import DecodedStructure

from .record_serialization import to_plain_data

SECTION_SHEET_NAMES: Mapping[SectionKind, str] = {
    SectionKind.HEADER: "Header",
    SectionKind.DATA: "Data",
    SectionKind.TRAILER: "Trailer",
    SectionKind.END: "End",
}


def write_structure_workbook(structure: object, output_path: Path | str) -> Path:
    """Write one sheet per section with field names in the first row.

    ``structure`` is a ``DecodedStructure`` or a composite with ``header``,
    ``data``, ``trailer`` and ``end`` attributes. Absent sections get no sheet.
    """
    workbook = Workbook()
    default_sheet = workbook.active
    if default_sheet is not None:
        workbook.remove(default_sheet)

    for kind, sheet_name in SECTION_SHEET_NAMES.items():
        records = _section_records(structure, kind)
        if records is None:
            continue
        sheet = workbook.create_sheet(sheet_name)
        _write_records(sheet, records)

    if not workbook.sheetnames:
        raise ValueError("Decoded structure has no sections to write.")

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _section_records(structure: object, kind: SectionKind) -> list[Any] | None:
    if isinstance(structure, DecodedStructure):
        value = structure.section_value(kind)
    elif hasattr(structure, kind.value):
        value = getattr(structure, kind.value)
    else:
        return None
    if kind is SectionKind.DATA:
        return list(value or [])
    return None if value is None else [value]


def _write_records(sheet: Worksheet, records: Sequence[Any]) -> None:
    rows = [to_plain_data(record) for record in records]
    columns: list[str] = []
    for row in rows:
        if not isinstance(row, Mapping):
            raise ValueError(f"Cannot write record of type {type(row).__name__} to a sheet.")
        columns.extend(name for name in row if name not in columns)

    for column_index, name in enumerate(columns, start=1):
        sheet.cell(row=1, column=column_index, value=name)
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(len(name) + 6, 40)
        )
    for row_index, row in enumerate(rows, start=2):
        for column_index, name in enumerate(columns, start=1):
            sheet.cell(row=row_index, column=column_index, value=_cell_value(row.get(name)))


def _cell_value(value: Any) -> Any:
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value
