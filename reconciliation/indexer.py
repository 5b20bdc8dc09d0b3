"""
Source indexing.

Each input source is turned into a dict keyed by normalized SKU. dicts keep
insertion order, and that order drives the merged output order. Duplicate SKUs
within one source are last-write-wins: the later row replaces the earlier one
but the key keeps its first position.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping

from config import BARCODE_KEY_PREFIX
from domain.records import Record, get_field
from fields.normalization import is_blank, to_text
from fields.sku import normalize_sku

logger = logging.getLogger(__name__)


def build_index(records: Iterable[Mapping[str, Any]], key_column: str = "SKU") -> Dict[str, Record]:
    """Index DE or Product rows by normalized SKU, skipping rows without one."""
    index: Dict[str, Record] = {}
    skipped = 0

    for row in records:
        key = normalize_sku(row.get(key_column))
        if not key:
            skipped += 1
            continue
        if key in index:
            logger.debug("Duplicate SKU %r, keeping the later row", key)
        index[key] = dict(row)

    if skipped:
        logger.debug("Skipped %d rows without a usable %s", skipped, key_column)
    return index


def clean_barcode_row(record: Mapping[str, Any]) -> Record:
    """
    Normalize the column names of a barcode file row.

    - any column containing "barcode" (any case) becomes `Barcode`; numeric cells
      are rendered as decimal text so 1.68071E+12 becomes "1680710000000"
    - a column named "sku" (any case) becomes `SKU`
    - everything else is copied as-is
    """
    clean: Record = {}
    for column, value in record.items():
        lowered = str(column).lower()
        if "barcode" in lowered:
            clean["Barcode"] = to_text(value)
        elif lowered == "sku":
            clean["SKU"] = value
        else:
            clean[column] = value
    return clean


def build_barcode_index(records: Iterable[Mapping[str, Any]]) -> Dict[str, Record]:
    """
    Index barcode rows by normalized SKU.

    Rows that have a barcode but no SKU land under a synthetic "barcode_<value>"
    key. Nothing looks those up yet; they are kept for matching by barcode value.
    """
    index: Dict[str, Record] = {}

    for raw in records:
        row = clean_barcode_row(raw)
        barcode = get_field(row, "Barcode")
        sku = row.get("SKU")

        if not barcode and is_blank(sku):
            continue

        if not is_blank(sku):
            key = normalize_sku(sku)
            if key:
                index[key] = {**row, "Barcode": barcode}
        elif barcode:
            index[f"{BARCODE_KEY_PREFIX}{barcode}"] = {**row, "Barcode": barcode}

    return index
