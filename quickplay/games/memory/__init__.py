"""Card-matching memory game."""

from quickplay.games.memory.engine import MemoryEngine
from quickplay.games.memory.high_scores import HighScoreBook
from quickplay.games.memory.models import (
    Card,
    Difficulty,
    FlipOutcome,
    HighScoreRecord,
    MemoryStatus,
)
from quickplay.games.memory.scoring import compute_score

__all__ = [
    "Card",
    "Difficulty",
    "FlipOutcome",
    "HighScoreBook",
    "HighScoreRecord",
    "MemoryEngine",
    "MemoryStatus",
    "compute_score",
]
