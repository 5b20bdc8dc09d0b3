"""
Record types shared by the readers, the merge and the writers.

A Record is one parsed spreadsheet row: a plain mapping from the header text
(taken verbatim from the source file) to the raw cell value. Column sets vary
per supplier file, so nothing here is a fixed struct; fields are read through
`get_field`, which degrades absent or empty cells to "".

MergedRecord describes the canonical output columns. It is a TypedDict with
total=False because the three merge cases populate different subsets, and
DE-only rows also carry whatever extra columns the DE file had.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, TypedDict, Union

from config import IMAGE_SLOTS
from fields.normalization import is_blank

CellValue = Union[str, int, float, None]
Record = Dict[str, Any]


MergedRecord = TypedDict(
    "MergedRecord",
    {
        "SKU": str,
        "EAN": CellValue,
        "Subcategory": CellValue,
        "Price": CellValue,
        "Stock": CellValue,
        "Material": CellValue,
        "Title": str,
        "Category": CellValue,
        "Brand": CellValue,
        "Product size": CellValue,
        "Package size Length": CellValue,
        "Package size Width": CellValue,
        "Package size Height": CellValue,
        "Net weight": CellValue,
        "Gross weight": CellValue,
        "Volume/CBM": CellValue,
        "Color": CellValue,
        "Description": str,
        "Barcode": str,
    },
    total=False,
)


IMAGE_COLUMNS: List[str] = [f"image{n}" for n in range(1, IMAGE_SLOTS + 1)]

MERGED_HEADERS: List[str] = [
    "SKU",
    "EAN",
    "Subcategory",
    "Price",
    "Stock",
    "Material",
    "Title",
    "Category",
    "Brand",
    "Product size",
    "Package size Length",
    "Package size Width",
    "Package size Height",
    "Net weight",
    "Gross weight",
    "Volume/CBM",
    "Color",
    "Description",
    "Barcode",
    *IMAGE_COLUMNS,
]


def get_field(record: Mapping[str, Any], name: str, default: Any = "") -> Any:
    """Return the raw cell for `name`, or `default` when the column is absent or blank."""
    value = record.get(name)
    if is_blank(value):
        return default
    return value


def collect_headers(rows: List[Mapping[str, Any]]) -> List[str]:
    """Union of the row keys in order of first appearance."""
    headers: Dict[str, None] = {}
    for row in rows:
        for key in row:
            headers.setdefault(key, None)
    return list(headers)
