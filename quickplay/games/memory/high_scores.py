"""Per-difficulty high-score book backed by the persistence port."""

from __future__ import annotations

import logging

from quickplay.games.memory.models import Difficulty, HighScoreRecord
from quickplay.persistence.documents import load_document, remove_document, save_document
from quickplay.persistence.port import HIGH_SCORES_KEY, PersistencePort

logger = logging.getLogger(__name__)


class HighScoreBook:
    """One record per difficulty, stored as a single JSON object."""

    def __init__(self, port: PersistencePort, key: str = HIGH_SCORES_KEY) -> None:
        self._port = port
        self._key = key
        self._records: dict[Difficulty, HighScoreRecord] = _default_records()

    def load(self) -> None:
        """Read stored records; missing or malformed entries use the zero default."""
        self._records = _default_records()
        payload = load_document(self._port, self._key)
        if payload is None:
            return
        if not isinstance(payload, dict):
            logger.warning("high_scores_malformed key=%s type=%s", self._key, type(payload).__name__)
            return
        for difficulty in Difficulty:
            entry = payload.get(difficulty.value)
            if entry is None:
                continue
            try:
                self._records[difficulty] = HighScoreRecord.from_payload(entry, difficulty)
            except ValueError as exc:
                logger.warning(
                    "high_score_entry_malformed difficulty=%s reason=%s", difficulty.value, exc
                )

    def get(self, difficulty: Difficulty) -> HighScoreRecord:
        return self._records[difficulty]

    def all(self) -> dict[Difficulty, HighScoreRecord]:
        return dict(self._records)

    def submit(self, difficulty: Difficulty, record: HighScoreRecord) -> bool:
        """Store `record` when it beats the current one; return whether it did."""
        if not record.beats(self._records[difficulty]):
            return False
        self._records[difficulty] = record
        save_document(self._port, self._key, self.to_payload())
        logger.info(
            "high_score_new difficulty=%s score=%d moves=%d time=%d",
            difficulty.value,
            record.score,
            record.moves,
            record.time_seconds,
        )
        return True

    def clear(self) -> None:
        """Forget every record and drop the stored document."""
        self._records = _default_records()
        remove_document(self._port, self._key)

    def to_payload(self) -> dict[str, dict[str, int]]:
        return {
            difficulty.value: record.to_payload() for difficulty, record in self._records.items()
        }


def _default_records() -> dict[Difficulty, HighScoreRecord]:
    return {difficulty: HighScoreRecord() for difficulty in Difficulty}
