"""Board construction and shuffling."""

from __future__ import annotations

import random
from collections.abc import MutableSequence
from typing import TypeVar

from quickplay.games.memory.models import Card, Difficulty

T = TypeVar("T")


def fisher_yates_shuffle(items: MutableSequence[T], rng: random.Random) -> None:
    """Shuffle in place with an unbiased Fisher-Yates permutation."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]


def build_board(difficulty: Difficulty, rng: random.Random) -> list[Card]:
    """Deal two copies of every symbol for `difficulty` in shuffled order."""
    symbols = [symbol for symbol in difficulty.symbols for _ in range(2)]
    fisher_yates_shuffle(symbols, rng)
    return [Card(id=index, symbol=symbol) for index, symbol in enumerate(symbols)]
