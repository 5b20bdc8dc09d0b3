from .session_store import (
    DE_FILE_ID,
    PRODUCT_FILE_ID,
    SessionStoreError,
    clear,
    delete_file,
    get_file,
    save_file,
)

__all__ = [
    "DE_FILE_ID",
    "PRODUCT_FILE_ID",
    "SessionStoreError",
    "clear",
    "delete_file",
    "get_file",
    "save_file",
]
