"""Functions for exporting parsed subtitles to workbook files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from openpyxl import Workbook

from .models import Item

logger = logging.getLogger(__name__)

ITEM_HEADERS = ["Index", "Start", "End", "Duration (ms)", "Text"]
DEFAULT_SHEET_NAME = "ITEMS"


def _write_headers(sheet, headers: Iterable[str]) -> None:
    for col, header in enumerate(headers, start=1):
        sheet.cell(row=1, column=col, value=header)


def create_items_workbook(items: Iterable[Item], sheet_name: str = DEFAULT_SHEET_NAME) -> Workbook:
    """Create a workbook with one row per subtitle item below a header row."""

    wb = Workbook()
    sheet = wb.active
    sheet.title = sheet_name
    _write_headers(sheet, ITEM_HEADERS)

    count = 0
    for row_index, item in enumerate(items, start=2):
        sheet.cell(row=row_index, column=1, value=item.index)
        sheet.cell(row=row_index, column=2, value=item.start_time.to_string())
        sheet.cell(row=row_index, column=3, value=item.end_time.to_string())
        sheet.cell(row=row_index, column=4, value=item.duration)
        sheet.cell(row=row_index, column=5, value=item.text)
        count += 1
    logger.debug("Wrote %d subtitle rows to sheet %s", count, sheet_name)
    return wb


def save_workbook(workbook: Workbook, path: str | Path) -> None:
    path = Path(path); path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(path)
