from .logging_setup import configure_logging
from .settings import (
    BARCODE_KEY_PREFIX,
    CSV_EXPORT_NAME,
    DESCRIPTION_SEPARATOR,
    EXPORT_SHEET_NAME,
    IMAGE_SLOTS,
    LOG_LEVEL,
    MAX_FILE_SIZE_MB,
    PREVIEW_PAGE_SIZE,
    PROJECT_ROOT,
    SESSION_STORE_PATH,
    SKU_PREFIX,
    SKU_SUFFIX,
    SUPPORTED_EXTENSIONS,
    XLSX_EXPORT_NAME,
)

__all__ = [
    "BARCODE_KEY_PREFIX",
    "CSV_EXPORT_NAME",
    "DESCRIPTION_SEPARATOR",
    "EXPORT_SHEET_NAME",
    "IMAGE_SLOTS",
    "LOG_LEVEL",
    "MAX_FILE_SIZE_MB",
    "PREVIEW_PAGE_SIZE",
    "PROJECT_ROOT",
    "SESSION_STORE_PATH",
    "SKU_PREFIX",
    "SKU_SUFFIX",
    "SUPPORTED_EXTENSIONS",
    "XLSX_EXPORT_NAME",
    "configure_logging",
]
