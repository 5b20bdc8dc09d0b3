"""
Input readers: turn an uploaded CSV/XLSX/XLS file into a list of raw row dicts.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from config import SUPPORTED_EXTENSIONS

from .csv_reader import read_csv
from .excel import read_excel, read_xls


class UnsupportedFileTypeError(ValueError):
    """Raised when a file extension is not one of CSV, XLS or XLSX."""
    pass


def file_extension(path: Path | str) -> str:
    return Path(str(path)).suffix.lstrip(".").lower()


def read_table(path: Path) -> List[Dict[str, Any]]:
    """Read any supported table file, dispatching on its extension."""
    ext = file_extension(path)
    if ext not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFileTypeError("Please upload only CSV, XLS, or XLSX files")

    if ext == "csv":
        return read_csv(path)
    if ext == "xlsx":
        return read_excel(path)
    return read_xls(path)


__all__ = [
    "UnsupportedFileTypeError",
    "file_extension",
    "read_csv",
    "read_excel",
    "read_table",
    "read_xls",
]
