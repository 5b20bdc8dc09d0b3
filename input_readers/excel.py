"""
EXCEL READER
------------
Reads spreadsheet files into raw dict format with NO transformation.
Returns list of dicts with original supplier column names.
Numeric cells stay numeric; barcode/SKU text conversion happens in the merge.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd
from openpyxl import load_workbook

logger = logging.getLogger(__name__)


def read_excel(xlsx_path: Path, sheet_name: str | None = None) -> List[Dict[str, Any]]:
    """
    Read Excel file where row 1 = headers, rows 2+ = data.

    Args:
        xlsx_path: Path to Excel file
        sheet_name: Optional sheet name (uses first sheet if None)

    Returns:
        List of row dicts with original headers as keys

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file is not a valid Excel file
    """
    xlsx_path = xlsx_path.expanduser().resolve()

    if not xlsx_path.exists():
        raise FileNotFoundError(f"Excel file not found: {xlsx_path}")

    try:
        wb = load_workbook(xlsx_path, data_only=True, read_only=True)
    except Exception as e:
        raise ValueError(f"Cannot read Excel file (is it corrupted or wrong format?): {e}")

    try:
        ws = wb[sheet_name] if sheet_name else wb.worksheets[0]
        row_iter = ws.iter_rows(values_only=True)

        header_row = next(row_iter, None)
        if header_row is None:
            return []

        # Extract headers from row 1
        headers: List[str] = [
            str(h).strip() if h is not None else f"col_{c}"
            for c, h in enumerate(header_row, start=1)
        ]

        # Extract data rows (skip empty rows)
        rows: List[Dict[str, Any]] = []
        for values in row_iter:
            row: Dict[str, Any] = {}
            is_empty = True

            for header, value in zip(headers, values):
                if value not in (None, ""):
                    is_empty = False
                row[header] = value

            if not is_empty:
                rows.append(row)
    finally:
        wb.close()

    logger.info("Read %d rows from %s", len(rows), xlsx_path.name)
    return rows


def read_xls(xls_path: Path) -> List[Dict[str, Any]]:
    """Read a legacy .xls workbook (first sheet) through pandas/xlrd."""
    xls_path = xls_path.expanduser().resolve()

    if not xls_path.exists():
        raise FileNotFoundError(f"Excel file not found: {xls_path}")

    try:
        df = pd.read_excel(xls_path, sheet_name=0, engine="xlrd")
    except Exception as e:
        raise ValueError(f"Cannot read Excel file (is it corrupted or wrong format?): {e}")

    df = df.dropna(how="all")
    df = df.astype(object).where(pd.notna(df), None)
    rows = [{str(k).strip(): v for k, v in r.items()} for r in df.to_dict(orient="records")]

    logger.info("Read %d rows from %s", len(rows), xls_path.name)
    return rows
