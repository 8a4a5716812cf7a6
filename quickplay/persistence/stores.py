"""PersistencePort implementations."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class MemoryStore:
    """Process-local store, used for tests and ephemeral sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(_validate_key(key))

    def set(self, key: str, value: str) -> None:
        self._values[_validate_key(key)] = value

    def remove(self, key: str) -> None:
        self._values.pop(_validate_key(key), None)

    def keys(self) -> list[str]:
        return sorted(self._values)


class JsonFileStore:
    """File-per-key store under a root directory.

    Each key maps to ``<root>/<key>.json`` holding the raw value. Keys are
    limited to letters, digits, ``-`` and ``_`` so no two keys share a file.
    """

    def __init__(self, root: Path) -> None:
        self._root = root
        self._root.mkdir(parents=True, exist_ok=True)

    @property
    def root(self) -> Path:
        return self._root

    def get(self, key: str) -> str | None:
        """Return the stored value, or None when absent or unreadable."""
        path = self._path_for_key(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            logger.warning("store_read_failed key=%s path=%s", key, path, exc_info=True)
            return None

    def set(self, key: str, value: str) -> None:
        """Write the value atomically via a temporary sibling file."""
        path = self._path_for_key(key)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(value, encoding="utf-8")
        tmp_path.replace(path)

    def remove(self, key: str) -> None:
        path = self._path_for_key(key)
        if path.exists():
            path.unlink()

    def keys(self) -> list[str]:
        return sorted(path.stem for path in self._root.glob("*.json"))

    def _path_for_key(self, key: str) -> Path:
        return self._root / f"{_filename_safe(_validate_key(key))}.json"


def _validate_key(key: str) -> str:
    cleaned = key.strip()
    if not cleaned:
        raise ValueError("Store key cannot be empty.")
    return cleaned


def _filename_safe(key: str) -> str:
    if not all(char.isalnum() or char in {"-", "_"} for char in key):
        raise ValueError(f"Store key is not filename-safe: {key!r}.")
    return key
