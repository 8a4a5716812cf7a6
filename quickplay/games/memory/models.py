"""Memory-match domain models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Difficulty(StrEnum):
    """Board size presets."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def symbols(self) -> tuple[str, ...]:
        return SYMBOL_SETS[self]

    @property
    def pair_count(self) -> int:
        return len(SYMBOL_SETS[self])

    @property
    def card_count(self) -> int:
        return 2 * self.pair_count

    @property
    def columns(self) -> int:
        return GRID_COLUMNS[self]

    @property
    def deduction_factor(self) -> int:
        return DEDUCTION_FACTORS[self]

    @classmethod
    def parse(cls, value: str) -> Difficulty:
        """Parse a difficulty name, case-insensitively."""
        try:
            return cls(value.strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unknown difficulty: {value!r}.") from exc


_EASY_SYMBOLS: tuple[str, ...] = ("🚀", "🌟", "🎸", "🍕", "🐱", "🌈")

SYMBOL_SETS: dict[Difficulty, tuple[str, ...]] = {
    Difficulty.EASY: _EASY_SYMBOLS,
    Difficulty.MEDIUM: _EASY_SYMBOLS + ("⚽", "🎈"),
    Difficulty.HARD: _EASY_SYMBOLS + ("⚽", "🎈", "🦄", "🍩"),
}

GRID_COLUMNS: dict[Difficulty, int] = {
    Difficulty.EASY: 4,
    Difficulty.MEDIUM: 4,
    Difficulty.HARD: 5,
}

DEDUCTION_FACTORS: dict[Difficulty, int] = {
    Difficulty.EASY: 5,
    Difficulty.MEDIUM: 3,
    Difficulty.HARD: 2,
}

MAX_SCORE = 100
MIN_SCORE = 30


class MemoryStatus(StrEnum):
    """Session status."""

    PLAYING = "PLAYING"
    WON = "WON"


class FlipOutcome(StrEnum):
    """Result of a single flip request."""

    REJECTED = "REJECTED"
    FLIPPED = "FLIPPED"
    MATCH_PENDING = "MATCH_PENDING"
    MISMATCH_PENDING = "MISMATCH_PENDING"


@dataclass(frozen=True, slots=True)
class Card:
    """Single card snapshot."""

    id: int
    symbol: str
    is_flipped: bool = False
    is_matched: bool = False


@dataclass(frozen=True, slots=True)
class HighScoreRecord:
    """Best result for one difficulty."""

    score: int = 0
    moves: int = 0
    time_seconds: int = 0

    @property
    def is_empty(self) -> bool:
        return self.score == 0

    def beats(self, other: HighScoreRecord) -> bool:
        """Return whether this result is strictly better than `other`.

        Higher score wins, then fewer moves, then less time.
        """
        return (-self.score, self.moves, self.time_seconds) < (
            -other.score,
            other.moves,
            other.time_seconds,
        )

    def to_payload(self) -> dict[str, int]:
        return {"score": self.score, "moves": self.moves, "timeSeconds": self.time_seconds}

    @classmethod
    def from_payload(cls, payload: object, difficulty: Difficulty) -> HighScoreRecord:
        """Build a record for `difficulty` from stored JSON.

        Raises ValueError when the entry is malformed or describes a result
        that cannot occur on that board. The all-zero record is accepted.
        """
        if not isinstance(payload, dict):
            raise ValueError("High score entry must be an object.")
        try:
            values = [payload["score"], payload["moves"], payload["timeSeconds"]]
        except KeyError as exc:
            raise ValueError(f"High score entry is missing {exc.args[0]!r}.") from exc
        for value in values:
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError("High score fields must be non-negative integers.")
        score, moves, time_seconds = values
        record = cls(score=score, moves=moves, time_seconds=time_seconds)
        if record == cls():
            return record
        if not MIN_SCORE <= score <= MAX_SCORE:
            raise ValueError(f"High score must be within {MIN_SCORE}..{MAX_SCORE}.")
        if moves < difficulty.pair_count:
            raise ValueError(
                f"High score moves cannot be below {difficulty.pair_count} on {difficulty.value}."
            )
        return record
