from __future__ import annotations

import random

import pytest

from quickplay.games.memory import Difficulty, MemoryEngine
from quickplay.persistence.stores import MemoryStore
from quickplay.runtime.scheduler import Scheduler
from tests.quickplay.helpers import MATCH_DELAY, MISMATCH_DELAY


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def scheduler() -> Scheduler:
    return Scheduler()


@pytest.fixture
def memory_engine_factory(memory_store: MemoryStore, scheduler: Scheduler):
    def _make(
        difficulty: Difficulty = Difficulty.EASY,
        seed: int = 1337,
        store=None,
        rng: random.Random | None = None,
        tick_interval_seconds: float = 1.0,
    ) -> MemoryEngine:
        return MemoryEngine(
            store if store is not None else memory_store,
            scheduler,
            rng=rng if rng is not None else random.Random(seed),
            difficulty=difficulty,
            match_delay_seconds=MATCH_DELAY,
            mismatch_delay_seconds=MISMATCH_DELAY,
            tick_interval_seconds=tick_interval_seconds,
        )

    return _make
