"""
CSV READER
----------
Reads CSV files into raw dict format. Every cell is kept as text, the way a
browser CSV parser hands it over; empty cells are "".
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

logger = logging.getLogger(__name__)


def read_csv(csv_path: Path) -> List[Dict[str, Any]]:
    """
    Read a CSV file where row 1 = headers, rows 2+ = data.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the file cannot be parsed as CSV
    """
    csv_path = csv_path.expanduser().resolve()

    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    try:
        df = pd.read_csv(
            csv_path,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8-sig",
        )
    except pd.errors.EmptyDataError:
        return []
    except Exception as e:
        raise ValueError(f"Cannot read CSV file: {e}")

    df.columns = [str(c).strip() for c in df.columns]
    rows: List[Dict[str, Any]] = df.to_dict(orient="records")

    logger.info("Read %d rows from %s", len(rows), csv_path.name)
    return rows
