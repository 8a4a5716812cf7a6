"""Result tiering shared by result screens."""

from __future__ import annotations

import math
from enum import StrEnum


class ScoreTier(StrEnum):
    """Display tier for a percentage result."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


def percentage(score: int, total: int) -> int:
    """Whole percentage rounded half up; 0 when there is nothing to score."""
    if total <= 0:
        return 0
    return math.floor(100 * score / total + 0.5)


def score_tier(percent: int) -> ScoreTier:
    if percent >= 80:
        return ScoreTier.SUCCESS
    if percent >= 50:
        return ScoreTier.WARNING
    return ScoreTier.ERROR
