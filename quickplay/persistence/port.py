"""Key/value persistence contract consumed by the game engines."""

from __future__ import annotations

from typing import Protocol

GAMES_KEY = "quickPlayGames"
HIGH_SCORES_KEY = "memoryGameHighScores"


class PersistencePort(Protocol):
    """String-keyed get/set/remove over a durable medium.

    Values are opaque strings; callers store JSON text.
    """

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...
