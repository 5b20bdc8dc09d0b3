"""
EXCEL WRITER
------------
Writes merged rows to a single-sheet .xlsx workbook. Headers default to the
union of row keys in first-appearance order; cells missing from a row are left
empty.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

from openpyxl import Workbook

from config import EXPORT_SHEET_NAME
from domain.records import collect_headers

logger = logging.getLogger(__name__)


def _build_workbook(rows: Sequence[Mapping[str, Any]], headers: Optional[List[str]], sheet_name: str) -> Workbook:
    headers = headers or collect_headers(list(rows))

    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name

    ws.append(headers)
    for row in rows:
        ws.append([row.get(h, None) for h in headers])

    return wb


def write_rows_to_xlsx(
    output_path: Path,
    rows: Sequence[Mapping[str, Any]],
    headers: Optional[List[str]] = None,
    sheet_name: str = EXPORT_SHEET_NAME,
) -> Path:
    """Write rows to `output_path` and return the resolved path."""
    output_path = output_path.expanduser().resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)

    wb = _build_workbook(rows, headers, sheet_name)
    wb.save(output_path)
    wb.close()

    logger.info("Wrote %d rows to %s", len(rows), output_path.name)
    return output_path


def rows_to_xlsx_bytes(
    rows: Sequence[Mapping[str, Any]],
    headers: Optional[List[str]] = None,
    sheet_name: str = EXPORT_SHEET_NAME,
) -> bytes:
    """Same as write_rows_to_xlsx, but in memory (for download buttons)."""
    buffer = io.BytesIO()
    wb = _build_workbook(rows, headers, sheet_name)
    wb.save(buffer)
    wb.close()
    return buffer.getvalue()
