"""Persistence port, stores and JSON document helpers."""

from quickplay.persistence.documents import (
    dumps_text,
    load_document,
    loads_text,
    remove_document,
    save_document,
)
from quickplay.persistence.port import GAMES_KEY, HIGH_SCORES_KEY, PersistencePort
from quickplay.persistence.stores import JsonFileStore, MemoryStore

__all__ = [
    "GAMES_KEY",
    "HIGH_SCORES_KEY",
    "JsonFileStore",
    "MemoryStore",
    "PersistencePort",
    "dumps_text",
    "load_document",
    "loads_text",
    "remove_document",
    "save_document",
]
