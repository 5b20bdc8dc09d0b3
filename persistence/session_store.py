"""
Persistent session store for uploaded files.

Uploaded DE and product files (metadata + parsed rows) survive app restarts by
being kept in a JSON state file, by default `<project_root>/data/session_store.json`.
The merged rows are stored on the DE entry under "mergedData".

Key behaviors:
- Only the fixed ids "deFile" and "productFile" are accepted.
- If the state file does not exist, the store is empty.
- State is written via a temporary file and then replaced to reduce corruption risk.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from config import SESSION_STORE_PATH

logger = logging.getLogger(__name__)

DE_FILE_ID = "deFile"
PRODUCT_FILE_ID = "productFile"
FILE_IDS = (DE_FILE_ID, PRODUCT_FILE_ID)


class SessionStoreError(RuntimeError):
    """Raised when the store file is invalid or a file id is not recognised."""
    pass


def _state_path() -> Path:
    """Return the path of the JSON file that holds the stored files."""
    return SESSION_STORE_PATH


def _check_id(file_id: str) -> None:
    if file_id not in FILE_IDS:
        raise SessionStoreError(f"Unknown file id {file_id!r}, expected one of {FILE_IDS}")


def _load_state(state_path: Path) -> Dict[str, Any]:
    """Load and validate the persisted state."""
    if not state_path.exists():
        return {}

    try:
        raw = json.loads(state_path.read_text(encoding="utf-8"))
    except Exception as e:
        raise SessionStoreError(f"Failed to read/parse store file: {state_path}") from e

    if not isinstance(raw, dict):
        raise SessionStoreError(f"Invalid store format in {state_path}. Expected a JSON object")

    return raw


def _save_state(state_path: Path, state: Dict[str, Any]) -> None:
    """Persist the state to disk (write-temp-then-replace)."""
    state_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = state_path.with_suffix(".tmp")

    tmp_path.write_text(json.dumps(state, ensure_ascii=False, indent=2, default=str), encoding="utf-8")
    tmp_path.replace(state_path)


def save_file(file_id: str, payload: Dict[str, Any]) -> None:
    """Store `payload` (name, type, size, content, ...) under `file_id`."""
    _check_id(file_id)

    state_path = _state_path()
    state = _load_state(state_path)
    state[file_id] = {**payload, "id": file_id}
    _save_state(state_path, state)

    logger.debug("Saved %s to %s", file_id, state_path)


def get_file(file_id: str) -> Optional[Dict[str, Any]]:
    """Return the stored payload for `file_id`, or None."""
    _check_id(file_id)
    return _load_state(_state_path()).get(file_id)


def delete_file(file_id: str) -> None:
    _check_id(file_id)

    state_path = _state_path()
    state = _load_state(state_path)
    if state.pop(file_id, None) is not None:
        _save_state(state_path, state)


def clear() -> None:
    """Remove every stored file."""
    state_path = _state_path()
    if state_path.exists():
        _save_state(state_path, {})
