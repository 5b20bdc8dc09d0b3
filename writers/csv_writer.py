"""
CSV WRITER
----------
Writes merged rows as UTF-8 CSV through pandas.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

import pandas as pd

from domain.records import collect_headers

logger = logging.getLogger(__name__)


def _to_frame(rows: Sequence[Mapping[str, Any]], headers: Optional[List[str]]) -> pd.DataFrame:
    headers = headers or collect_headers(list(rows))
    return pd.DataFrame([dict(r) for r in rows], columns=headers)


def write_rows_to_csv(
    output_path: Path,
    rows: Sequence[Mapping[str, Any]],
    headers: Optional[List[str]] = None,
) -> Path:
    """Write rows to `output_path` and return the resolved path."""
    output_path = output_path.expanduser().resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)

    _to_frame(rows, headers).to_csv(output_path, index=False, encoding="utf-8")

    logger.info("Wrote %d rows to %s", len(rows), output_path.name)
    return output_path


def rows_to_csv_bytes(rows: Sequence[Mapping[str, Any]], headers: Optional[List[str]] = None) -> bytes:
    """Serialize rows to CSV bytes (for download buttons)."""
    return _to_frame(rows, headers).to_csv(index=False).encode("utf-8")
