"""Utilities for exporting article records to Excel workbooks."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Tuple

from openpyxl import Workbook  # type: ignore[import-untyped]
from openpyxl.cell.cell import (  # type: ignore[import-untyped]
    ILLEGAL_CHARACTERS_RE,
)
from openpyxl.styles import Alignment  # type: ignore[import-untyped]
from openpyxl.utils import get_column_letter  # type: ignore[import-untyped]
from openpyxl.worksheet.table import (  # type: ignore[import-untyped]
    Table,
    TableStyleInfo,
)

from cbaparse.json_utils import json_dumps

Sheets = Dict[str, List[Dict[str, Any]]]

# Column name and width of each sheet, in order.
Columns = List[Tuple[str, int]]


def _flatten(records: List[Dict[str, Any]]) -> Sheets:
    """Flatten article records into tabular sheet data.

    Args:
        records: Combined article records in document order.

    Returns:
        Mapping of sheet names to row dictionaries.
    """

    sheets: Sheets = {"Article": [], "Section": []}

    for position, record in enumerate(records, start=1):
        # Identifiers follow the document position so duplicates stay apart.
        article_id = f"article_{position:02d}"
        sections = record.get("sections", [])

        section_ids: List[str] = []
        for index, section in enumerate(sections, start=1):
            section_id = f"{article_id}_section_{index:03d}"
            section_ids.append(section_id)
            sheets["Section"].append(
                {
                    "section_id": section_id,
                    "parent_id": article_id,
                    "section_number": section.get("section_number"),
                    "section_title": section.get("section_title"),
                    "content": section.get("content"),
                }
            )

        sheets["Article"].append(
            {
                "article_id": article_id,
                "article_number": record.get("article_number"),
                "title": record.get("title"),
                "intro_content": record.get("intro_content"),
                "sections": section_ids,
            }
        )

    return sheets


ARTICLE_COLUMNS: Columns = [
    ("article_id", 14),
    ("article_number", 16),
    ("title", 40),
    ("intro_content", 100),
    ("sections", 50),
]

SECTION_COLUMNS: Columns = [
    ("section_id", 26),
    ("parent_id", 14),
    ("section_number", 16),
    ("section_title", 40),
    ("content", 100),
]

# Columns holding free text or JSON lists.
WRAPPED_COLUMNS = {
    "title",
    "intro_content",
    "sections",
    "section_title",
    "content",
}


def _cell_value(value: Any) -> Any:
    """Convert a record value into something a cell can hold."""

    if isinstance(value, list):
        value = json_dumps(value)

    # Control characters such as page breaks cannot be stored.
    if isinstance(value, str):
        value = ILLEGAL_CHARACTERS_RE.sub("", value)
    return value


def _write_sheet(
    workbook: Workbook,
    name: str,
    columns: Columns,
    rows: List[Dict[str, Any]],
) -> None:
    """Add one sheet holding ``rows`` laid out as ``columns``."""

    ws = workbook.create_sheet(title=name)
    headers = [header for header, _ in columns]
    ws.append(headers)

    for row in rows:
        ws.append([_cell_value(row.get(header)) for header in headers])

    wrap = Alignment(wrapText=True)
    for idx, (header, width) in enumerate(columns, start=1):
        col_letter = get_column_letter(idx)
        ws.column_dimensions[col_letter].width = width
        if header not in WRAPPED_COLUMNS:
            continue
        for (cell,) in ws.iter_rows(
            min_row=2, max_row=ws.max_row, min_col=idx, max_col=idx
        ):
            cell.alignment = wrap

    # Excel rejects a table without data rows.
    if not rows:
        return

    end_column = get_column_letter(len(columns))
    table = Table(displayName=name, ref=f"A1:{end_column}{len(rows) + 1}")
    table.tableStyleInfo = TableStyleInfo(
        name="TableStyleMedium9", showRowStripes=True
    )
    ws.add_table(table)


def write_workbook(records: List[Dict[str, Any]], path: Path) -> None:
    """Write article records into an Excel workbook.

    The workbook always holds an ``Article`` and a ``Section`` sheet; the
    section rows point back to their article through ``parent_id``.

    Args:
        records: Combined article records in document order.
        path: Destination file path for the workbook.
    """

    data = _flatten(records)

    workbook = Workbook()
    workbook.remove(workbook.active)

    _write_sheet(workbook, "Article", ARTICLE_COLUMNS, data["Article"])
    _write_sheet(workbook, "Section", SECTION_COLUMNS, data["Section"])

    workbook.save(path)
