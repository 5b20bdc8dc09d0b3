"""
SKU normalization.

Supplier files tag the same product differently: the DE export prefixes SKUs
with "B34" and may suffix "V1", the product information sheet does not. The
normalized SKU is the join key across all sources and the canonical SKU in the
merged output.
"""

from __future__ import annotations

from typing import Any

from config import SKU_PREFIX, SKU_SUFFIX

from .normalization import to_text


def normalize_sku(raw: Any) -> str:
    """
    Canonicalize a raw identifier into a join key.

    Example:
        normalize_sku("  b34ABC123v1 ") -> "ABC123"
    """
    normalized = to_text(raw).strip()
    if not normalized:
        return ""

    if normalized[: len(SKU_PREFIX)].upper() == SKU_PREFIX.upper():
        normalized = normalized[len(SKU_PREFIX):]

    if normalized and normalized[-len(SKU_SUFFIX):].upper() == SKU_SUFFIX.upper():
        normalized = normalized[: -len(SKU_SUFFIX)]

    return normalized.strip()
