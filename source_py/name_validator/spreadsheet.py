"""
Spreadsheet report output for the name validator.
"""

import logging
import os
from typing import List

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from .types import DecisionRecord

REPORT_FILENAME = "name-validation-results.xlsx"

SHEET_TITLE = "Results"

HEADERS = [
    "Original Filename",
    "Extracted Name",
    "Matched Name",
    "Corrected Filename",
    "Match Distance",
    "Status",
]

COLUMN_WIDTHS = [40, 24, 24, 40, 16, 16]


def write_workbook(records: List[DecisionRecord], report_dir: str) -> str:
    """Write the records as a single-sheet workbook and return its path."""
    path = os.path.join(report_dir, REPORT_FILENAME)

    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE

    header_font = Font(bold=True)
    for column, (header, width) in enumerate(zip(HEADERS, COLUMN_WIDTHS), 1):
        cell = ws.cell(row=1, column=column, value=header)
        cell.font = header_font
        ws.column_dimensions[get_column_letter(column)].width = width
    ws.freeze_panes = "A2"

    for record in records:
        ws.append([
            record.original,
            record.extracted_name,
            record.matched_name,
            record.corrected_filename,
            record.distance,
            record.status.label,
        ])

    ws.auto_filter.ref = f"A1:{get_column_letter(len(HEADERS))}{len(records) + 1}"

    wb.save(path)
    logging.info(f"Excel file saved to {path}")
    return path
