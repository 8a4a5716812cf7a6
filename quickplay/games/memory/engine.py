"""Memory-match state machine."""

from __future__ import annotations

import logging
import random
from dataclasses import replace

from quickplay.games.memory.board import build_board
from quickplay.games.memory.high_scores import HighScoreBook
from quickplay.games.memory.models import (
    Card,
    Difficulty,
    FlipOutcome,
    HighScoreRecord,
    MemoryStatus,
)
from quickplay.games.memory.scoring import compute_score
from quickplay.persistence.port import PersistencePort
from quickplay.runtime.scheduler import Scheduler, TaskHandle

logger = logging.getLogger(__name__)


class MemoryEngine:
    """Owns the card board, flip/match resolution, timing and high scores.

    Match and mismatch outcomes are applied by deferred tasks on the shared
    scheduler. Starting a new session cancels them, so a resolution scheduled
    for an old board never touches a new one.
    """

    def __init__(
        self,
        port: PersistencePort,
        scheduler: Scheduler,
        *,
        rng: random.Random | None = None,
        difficulty: Difficulty = Difficulty.EASY,
        match_delay_seconds: float = 0.5,
        mismatch_delay_seconds: float = 1.0,
        tick_interval_seconds: float = 1.0,
    ) -> None:
        self._scheduler = scheduler
        self._rng = rng or random.Random()
        self._match_delay_seconds = match_delay_seconds
        self._mismatch_delay_seconds = mismatch_delay_seconds
        self._tick_interval_seconds = tick_interval_seconds
        self._high_scores = HighScoreBook(port)
        self._high_scores.load()

        self._difficulty = difficulty
        self._cards: list[Card] = []
        self._flipped_indexes: list[int] = []
        self._matched_symbols: set[str] = set()
        self._moves = 0
        self._ticks = 0
        self._status = MemoryStatus.PLAYING
        self._started = False
        self._new_high_score = False
        self._pending: TaskHandle | None = None
        self._ticker: TaskHandle | None = None
        self.initialize(difficulty)

    # Observable state

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def pair_count(self) -> int:
        return self._difficulty.pair_count

    @property
    def columns(self) -> int:
        return self._difficulty.columns

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def flipped_indexes(self) -> tuple[int, ...]:
        return tuple(self._flipped_indexes)

    @property
    def matched_symbols(self) -> frozenset[str]:
        return frozenset(self._matched_symbols)

    @property
    def moves(self) -> int:
        return self._moves

    @property
    def elapsed_seconds(self) -> int:
        """Whole seconds on the session clock."""
        return int(round(self._ticks * self._tick_interval_seconds, 6))

    @property
    def status(self) -> MemoryStatus:
        return self._status

    @property
    def is_started(self) -> bool:
        return self._started

    @property
    def is_resolving(self) -> bool:
        """Return whether a match/mismatch outcome is still pending."""
        return self._pending is not None and self._pending.active

    @property
    def score(self) -> int:
        """Score for the current move count."""
        return compute_score(self._difficulty, self._moves)

    @property
    def is_new_high_score(self) -> bool:
        return self._new_high_score

    @property
    def high_score(self) -> HighScoreRecord:
        return self._high_scores.get(self._difficulty)

    @property
    def high_scores(self) -> dict[Difficulty, HighScoreRecord]:
        return self._high_scores.all()

    # Operations

    def initialize(self, difficulty: Difficulty) -> None:
        """Deal a fresh shuffled board for `difficulty` and reset the session."""
        self._cancel_scheduled()
        self._difficulty = difficulty
        self._cards = build_board(difficulty, self._rng)
        self._flipped_indexes = []
        self._matched_symbols = set()
        self._moves = 0
        self._ticks = 0
        self._status = MemoryStatus.PLAYING
        self._started = False
        self._new_high_score = False
        logger.info(
            "memory_session_started difficulty=%s cards=%d", difficulty.value, len(self._cards)
        )

    def restart(self) -> None:
        """Start over on the current difficulty."""
        self.initialize(self._difficulty)

    def set_difficulty(self, difficulty: Difficulty) -> None:
        """Switch difficulty; always deals a new board."""
        self.initialize(difficulty)

    def flip(self, index: int) -> FlipOutcome:
        """Turn a card face up; invalid requests are ignored."""
        if not self._can_flip(index):
            logger.debug("memory_flip_rejected index=%s", index)
            return FlipOutcome.REJECTED

        self._cards[index] = replace(self._cards[index], is_flipped=True)
        self._flipped_indexes.append(index)
        if not self._started:
            self._start_clock()
        if len(self._flipped_indexes) < 2:
            return FlipOutcome.FLIPPED

        self._moves += 1
        first, second = self._flipped_indexes
        if self._cards[first].symbol == self._cards[second].symbol:
            self._pending = self._scheduler.call_later(
                self._match_delay_seconds, lambda: self._resolve_match(first, second)
            )
            return FlipOutcome.MATCH_PENDING
        self._pending = self._scheduler.call_later(
            self._mismatch_delay_seconds, lambda: self._resolve_mismatch(first, second)
        )
        return FlipOutcome.MISMATCH_PENDING

    def clear_high_scores(self) -> None:
        """Forget stored records for every difficulty."""
        self._high_scores.clear()
        self._new_high_score = False

    def close(self) -> None:
        """Cancel any scheduled work owned by this engine."""
        self._cancel_scheduled()

    # Internals

    def _can_flip(self, index: int) -> bool:
        if self._status is not MemoryStatus.PLAYING:
            return False
        if len(self._flipped_indexes) >= 2:
            return False
        if not 0 <= index < len(self._cards):
            return False
        card = self._cards[index]
        return not (card.is_flipped or card.is_matched)

    def _start_clock(self) -> None:
        self._started = True
        self._ticker = self._scheduler.call_every(self._tick_interval_seconds, self._tick)

    def _tick(self) -> None:
        if self._status is MemoryStatus.PLAYING:
            self._ticks += 1

    def _resolve_match(self, first: int, second: int) -> None:
        self._pending = None
        for index in (first, second):
            self._cards[index] = replace(self._cards[index], is_matched=True)
        self._matched_symbols.add(self._cards[first].symbol)
        self._flipped_indexes.clear()
        if len(self._matched_symbols) == self._difficulty.pair_count:
            self._finish()

    def _resolve_mismatch(self, first: int, second: int) -> None:
        self._pending = None
        for index in (first, second):
            self._cards[index] = replace(self._cards[index], is_flipped=False)
        self._flipped_indexes.clear()

    def _finish(self) -> None:
        self._status = MemoryStatus.WON
        if self._ticker is not None:
            self._ticker.cancel()
            self._ticker = None
        result = HighScoreRecord(
            score=self.score, moves=self._moves, time_seconds=self.elapsed_seconds
        )
        self._new_high_score = self._high_scores.submit(self._difficulty, result)
        logger.info(
            "memory_session_won difficulty=%s score=%d moves=%d time=%d new_high_score=%s",
            self._difficulty.value,
            result.score,
            result.moves,
            result.time_seconds,
            self._new_high_score,
        )

    def _cancel_scheduled(self) -> None:
        for handle in (self._pending, self._ticker):
            if handle is not None:
                handle.cancel()
        self._pending = None
        self._ticker = None
