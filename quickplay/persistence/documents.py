"""Best-effort JSON documents stored through a PersistencePort."""

from __future__ import annotations

import logging
from typing import Any

import orjson

from quickplay.persistence.port import PersistencePort

logger = logging.getLogger(__name__)


def dumps_text(payload: Any) -> str:
    """Serialize payload to JSON text."""
    return orjson.dumps(payload).decode("utf-8")


def loads_text(text: str) -> Any:
    """Parse JSON text."""
    return orjson.loads(text)


def load_document(port: PersistencePort, key: str) -> Any | None:
    """Load and parse a stored JSON value.

    Returns None when the key is absent, unreadable or not valid JSON, so the
    caller can substitute its defaults.
    """
    try:
        raw = port.get(key)
    except Exception:
        logger.warning("persistence_read_failed key=%s", key, exc_info=True)
        return None
    if raw is None:
        return None
    try:
        return loads_text(raw)
    except orjson.JSONDecodeError:
        logger.warning("persistence_malformed key=%s length=%d", key, len(raw))
        return None


def save_document(port: PersistencePort, key: str, payload: Any) -> bool:
    """Serialize and store a JSON value; failures are logged, never raised."""
    try:
        port.set(key, dumps_text(payload))
    except Exception:
        logger.exception("persistence_write_failed key=%s", key)
        return False
    return True


def remove_document(port: PersistencePort, key: str) -> bool:
    """Remove a stored value; failures are logged, never raised."""
    try:
        port.remove(key)
    except Exception:
        logger.exception("persistence_remove_failed key=%s", key)
        return False
    return True
