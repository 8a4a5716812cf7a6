"""Memory-match score formula."""

from __future__ import annotations

from quickplay.games.memory.models import MAX_SCORE, MIN_SCORE, Difficulty

MAX_DEDUCTION = MAX_SCORE - MIN_SCORE


def compute_score(difficulty: Difficulty, moves: int) -> int:
    """Score a finished board: 100 at the minimum move count, floored at 30."""
    extra_moves = moves - difficulty.pair_count
    deduction = _clamp(extra_moves * difficulty.deduction_factor, 0, MAX_DEDUCTION)
    return _clamp(MAX_SCORE - deduction, MIN_SCORE, MAX_SCORE)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))
