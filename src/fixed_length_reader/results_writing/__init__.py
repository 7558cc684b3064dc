"""Results writing exports."""

from .record_serialization import to_plain_data
from .structure_workbook_writer import SECTION_SHEET_NAMES, write_structure_workbook

__all__ = ["SECTION_SHEET_NAMES", "to_plain_data", "write_structure_workbook"]
