"""
Merge of the DE, product information and barcode datasets.

Output order:
1. every DE SKU, in DE file order (matched or DE-only)
2. every product SKU that has no DE row, in product file order

Barcodes are backfilled from the barcode index by normalized SKU and always
win over whatever the row builder set.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from domain.records import MergedRecord, Record

from .indexer import build_barcode_index, build_index
from .transform import handle_unique_de, handle_unique_product, merge_row

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MergeStats:
    matched: int = 0
    de_only: int = 0
    product_only: int = 0
    barcode_filled: int = 0

    @property
    def total(self) -> int:
        return self.matched + self.de_only + self.product_only


def _backfill_barcode(row: Dict[str, Any], barcode_index: Mapping[str, Record], sku: str) -> bool:
    barcode_row = barcode_index.get(sku)
    if barcode_row is None:
        return False
    row["Barcode"] = barcode_row.get("Barcode", "")
    return True


def merge_with_stats(
    de: Sequence[Mapping[str, Any]],
    product: Sequence[Mapping[str, Any]],
    barcode: Optional[Sequence[Mapping[str, Any]]] = None,
) -> Tuple[List[MergedRecord], MergeStats]:
    """
    Reconcile the three datasets into one list of rows keyed by normalized SKU.

    Args:
        de: DE (sales/pricing) rows
        product: product information rows
        barcode: optional barcode rows

    Returns:
        (merged rows, counts per merge case), one row per distinct normalized
        SKU across DE and product
    """
    de_index = build_index(de)
    product_index = build_index(product)
    barcode_index = build_barcode_index(barcode or [])

    merged: List[MergedRecord] = []
    matched = de_only = product_only = filled = 0

    for sku, de_row in de_index.items():
        product_row = product_index.get(sku)
        if product_row is not None:
            row = merge_row(de_row, product_row, sku)
            matched += 1
        else:
            row = handle_unique_de(de_row, sku)
            de_only += 1

        if _backfill_barcode(row, barcode_index, sku):
            filled += 1
        merged.append(row)  # type: ignore[arg-type]

    for sku, product_row in product_index.items():
        if sku in de_index:
            continue
        row = handle_unique_product(product_row, sku)
        product_only += 1

        if _backfill_barcode(row, barcode_index, sku):
            filled += 1
        merged.append(row)  # type: ignore[arg-type]

    stats = MergeStats(
        matched=matched,
        de_only=de_only,
        product_only=product_only,
        barcode_filled=filled,
    )
    logger.info(
        "Merged %d rows (%d matched, %d DE-only, %d product-only, %d with barcode)",
        stats.total,
        stats.matched,
        stats.de_only,
        stats.product_only,
        stats.barcode_filled,
    )
    return merged, stats


def merge_files(
    de: Sequence[Mapping[str, Any]],
    product: Sequence[Mapping[str, Any]],
    barcode: Optional[Sequence[Mapping[str, Any]]] = None,
) -> List[MergedRecord]:
    """Merged rows only; see merge_with_stats."""
    merged, _ = merge_with_stats(de, product, barcode)
    return merged


def summarize_merge(
    de: Sequence[Mapping[str, Any]],
    product: Sequence[Mapping[str, Any]],
    barcode: Optional[Sequence[Mapping[str, Any]]] = None,
) -> MergeStats:
    """Counts per merge case; see merge_with_stats."""
    _, stats = merge_with_stats(de, product, barcode)
    return stats
