"""
Central configuration for the product merge tool.

This module defines:
- SKU normalization markers and the synthetic barcode key prefix.
- Output shape constants (image slots, description separator).
- Upload limits and preview pagination used by the UI.
- Export file names and the session store location.

All values are constants and should be imported where needed (no runtime logic here).
`SESSION_STORE_PATH` and `LOG_LEVEL` can be overridden from the environment or a `.env` file.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


PROJECT_ROOT = Path(__file__).resolve().parents[1]

SKU_PREFIX = "B34"
SKU_SUFFIX = "V1"

BARCODE_KEY_PREFIX = "barcode_"

IMAGE_SLOTS = 12
DESCRIPTION_SEPARATOR = "\n\n"

SUPPORTED_EXTENSIONS = ("csv", "xls", "xlsx")
MAX_FILE_SIZE_MB = 50

PREVIEW_PAGE_SIZE = 10

EXPORT_SHEET_NAME = "MergedData"
CSV_EXPORT_NAME = "merged_data.csv"
XLSX_EXPORT_NAME = "merged_data.xlsx"

SESSION_STORE_PATH = Path(
    os.getenv("PRODUCT_MERGE_STORE", str(PROJECT_ROOT / "data" / "session_store.json"))
)

LOG_LEVEL = os.getenv("PRODUCT_MERGE_LOG_LEVEL", "INFO")
