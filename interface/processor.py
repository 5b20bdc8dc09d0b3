"""
File processing glue between the Streamlit UI and the merge.

Uploaded files are written to a per-call temp dir, parsed with the input readers,
merged, and remembered in the session store. Failures are reported back as an
error message instead of an exception so the UI can show them.
"""

from __future__ import annotations

import logging
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from config import MAX_FILE_SIZE_MB, SUPPORTED_EXTENSIONS
from input_readers import UnsupportedFileTypeError, file_extension, read_table
from persistence import session_store
from reconciliation import MergeStats, merge_with_stats

logger = logging.getLogger(__name__)

Rows = List[Dict[str, Any]]


@dataclass
class ProcessResult:
    de_rows: Rows = field(default_factory=list)
    product_rows: Rows = field(default_factory=list)
    barcode_rows: Rows = field(default_factory=list)
    merged: Rows = field(default_factory=list)
    stats: MergeStats = field(default_factory=MergeStats)


def check_upload(name: str, size: int) -> None:
    """Reject files the readers cannot handle before touching their content."""
    if file_extension(name) not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFileTypeError("Please upload only CSV, XLS, or XLSX files")
    if size > MAX_FILE_SIZE_MB * 1024 * 1024:
        raise ValueError(f"{name} is larger than {MAX_FILE_SIZE_MB} MB")


def save_upload_to_temp(uploaded_file, temp_dir: Path, role: str) -> Path:
    """
    Write an uploaded file (anything with .name and .getbuffer()) into `temp_dir`.

    The file name is prefixed with `role` ("de", "product", "barcode") so two
    uploads that share a name never overwrite each other.
    """
    path = temp_dir / f"{role}_{Path(uploaded_file.name).name}"
    with open(path, "wb") as f:
        f.write(uploaded_file.getbuffer())
    return path


def process_files(
    de_path: Path,
    product_path: Path,
    barcode_path: Optional[Path] = None,
) -> Tuple[bool, Optional[ProcessResult], Optional[str]]:
    """
    Parse and merge the input files.

    Returns:
        (success, result, error_message)
    """
    try:
        de_rows = read_table(de_path)
        product_rows = read_table(product_path)
        barcode_rows = read_table(barcode_path) if barcode_path else []
    except (FileNotFoundError, ValueError) as e:
        logger.warning("Could not read input files: %s", e)
        return False, None, str(e)

    merged, stats = merge_with_stats(de_rows, product_rows, barcode_rows)

    result = ProcessResult(
        de_rows=de_rows,
        product_rows=product_rows,
        barcode_rows=barcode_rows,
        merged=merged,  # type: ignore[arg-type]
        stats=stats,
    )
    return True, result, None


def process_uploaded_files(
    de_upload,
    product_upload,
    barcode_upload=None,
) -> Tuple[bool, Optional[ProcessResult], Optional[str]]:
    """Same as process_files, for Streamlit UploadedFile objects. Successful runs are persisted."""
    try:
        for upload in (de_upload, product_upload, barcode_upload):
            if upload is not None:
                check_upload(upload.name, upload.size)
    except ValueError as e:
        return False, None, str(e)

    # one private directory per call; removed once the files are parsed
    with tempfile.TemporaryDirectory(prefix="product_merge_") as tmp:
        temp_dir = Path(tmp)
        try:
            de_path = save_upload_to_temp(de_upload, temp_dir, "de")
            product_path = save_upload_to_temp(product_upload, temp_dir, "product")
            barcode_path = (
                save_upload_to_temp(barcode_upload, temp_dir, "barcode") if barcode_upload is not None else None
            )
        except OSError as e:
            return False, None, str(e)

        success, result, error = process_files(de_path, product_path, barcode_path)

    if success and result is not None:
        remember_files(de_upload, product_upload, result)
    return success, result, error


def _file_payload(upload, rows: Rows) -> Dict[str, Any]:
    return {
        "name": upload.name,
        "type": file_extension(upload.name),
        "size": upload.size,
        "content": rows,
    }


def remember_files(de_upload, product_upload, result: ProcessResult) -> None:
    """Persist both inputs and the merged rows (stored on the DE entry)."""
    try:
        de_payload = _file_payload(de_upload, result.de_rows)
        de_payload["mergedData"] = result.merged
        session_store.save_file(session_store.DE_FILE_ID, de_payload)
        session_store.save_file(session_store.PRODUCT_FILE_ID, _file_payload(product_upload, result.product_rows))
    except (OSError, session_store.SessionStoreError) as e:
        # the merge result is still usable without persistence
        logger.error("Failed to update session store: %s", e)


def restore_session() -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
    """Load the stored DE and product entries, or (None, None) if the store is unreadable."""
    try:
        return (
            session_store.get_file(session_store.DE_FILE_ID),
            session_store.get_file(session_store.PRODUCT_FILE_ID),
        )
    except session_store.SessionStoreError as e:
        logger.error("Failed to initialize session store: %s", e)
        return None, None


def forget_files() -> None:
    session_store.clear()
