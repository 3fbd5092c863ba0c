"""
Process-local key-value store for parsed resumes.
A single key holds the JSON-serialized list, so a round trip keeps record shape and insertion order.
"""
from __future__ import annotations

import json
import threading
from typing import Any

from techprep.app.core.config import LOCAL_STORAGE_KEY
from techprep.app.core.logging_config import get_logger

logger = get_logger("services.local_resume_store")

_store: dict[str, str] = {}
_lock = threading.Lock()


def _read_unlocked() -> list[dict[str, Any]]:
    raw = _store.get(LOCAL_STORAGE_KEY)
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except ValueError as e:
        logger.error("Error reading stored resume data: %s", e)
        return []
    return data if isinstance(data, list) else []


def save_resume_data(resume_data: dict[str, Any]) -> None:
    """Append one resume record under the storage key."""
    with _lock:
        existing = _read_unlocked()
        existing.append(resume_data)
        _store[LOCAL_STORAGE_KEY] = json.dumps(existing)


def get_all_resumes() -> list[dict[str, Any]]:
    with _lock:
        return _read_unlocked()


def clear_all_resumes() -> None:
    """Drop the storage key (for tests)."""
    with _lock:
        _store.pop(LOCAL_STORAGE_KEY, None)
