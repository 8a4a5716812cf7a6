from __future__ import annotations

import random

from quickplay.games.memory import MemoryEngine
from quickplay.runtime.scheduler import Scheduler

MATCH_DELAY = 0.5
MISMATCH_DELAY = 1.0


class FailingStore:
    """Store whose writes always fail, for write-failure paths."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.values = dict(initial or {})
        self.write_attempts = 0

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.write_attempts += 1
        raise OSError("medium unavailable")

    def remove(self, key: str) -> None:
        raise OSError("medium unavailable")


class QuotaExceededStore:
    """Store whose every call raises a non-OS error."""

    def __init__(self) -> None:
        self.calls = 0

    def get(self, key: str) -> str | None:
        self.calls += 1
        raise RuntimeError("quota exceeded")

    def set(self, key: str, value: str) -> None:
        self.calls += 1
        raise RuntimeError("quota exceeded")

    def remove(self, key: str) -> None:
        self.calls += 1
        raise RuntimeError("quota exceeded")


def pair_positions(engine: MemoryEngine) -> dict[str, list[int]]:
    """Map each symbol to the two board indexes holding it."""
    positions: dict[str, list[int]] = {}
    for index, card in enumerate(engine.cards):
        positions.setdefault(card.symbol, []).append(index)
    return positions


def mismatched_pair(engine: MemoryEngine) -> tuple[int, int]:
    cards = engine.cards
    for second in range(1, len(cards)):
        if cards[second].symbol != cards[0].symbol:
            return 0, second
    raise AssertionError("board has no mismatching pair")


def solve(engine: MemoryEngine, scheduler: Scheduler) -> None:
    """Match every pair with the minimum number of moves."""
    for first, second in pair_positions(engine).values():
        engine.flip(first)
        engine.flip(second)
        scheduler.advance(MATCH_DELAY)


class UnshuffledRandom(random.Random):
    """Always picks the upper bound, so Fisher-Yates keeps dealt order."""

    def randint(self, a: int, b: int) -> int:
        return b


class FirstSlotRandom(random.Random):
    """Always picks the lower bound."""

    def randint(self, a: int, b: int) -> int:
        return a
