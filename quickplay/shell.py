"""Composition root hosting every mini-game over one store and scheduler."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from quickplay.games.memory import MemoryEngine
from quickplay.games.quiz import QuizEngine
from quickplay.games.tictactoe import TicTacToeEngine
from quickplay.infra.app_data import ensure_app_data_dirs
from quickplay.infra.config import GameSettings, load_default_env_files, load_settings
from quickplay.infra.logging import setup_logging
from quickplay.persistence.port import PersistencePort
from quickplay.persistence.stores import JsonFileStore, MemoryStore
from quickplay.registry import GameRegistry
from quickplay.runtime.scheduler import Scheduler

logger = logging.getLogger(__name__)

GameEngine = MemoryEngine | QuizEngine | TicTacToeEngine


@dataclass(slots=True)
class QuickPlayShell:
    """Engines plus the shared port and scheduler they were built on."""

    store: PersistencePort
    scheduler: Scheduler
    settings: GameSettings
    memory: MemoryEngine
    tictactoe: TicTacToeEngine
    quiz: QuizEngine
    registry: GameRegistry
    _engines: dict[str, GameEngine] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._engines = {
            "memory": self.memory,
            "quiz": self.quiz,
            "tictactoe": self.tictactoe,
        }

    def game(self, game_id: str) -> GameEngine | None:
        """Look up an engine by registry id."""
        return self._engines.get(game_id)

    def advance(self, delta_seconds: float) -> int:
        """Move the clock forward and run due deferred actions."""
        return self.scheduler.advance(delta_seconds)

    def close(self) -> None:
        self.memory.close()
        self.scheduler.cancel_all()


def create_shell(
    store: PersistencePort | None = None,
    *,
    settings: GameSettings | None = None,
    rng: random.Random | None = None,
) -> QuickPlayShell:
    """Wire all engines to one store and one scheduler."""
    resolved_store: PersistencePort = store if store is not None else MemoryStore()
    resolved_settings = settings or GameSettings()
    if rng is None:
        rng = random.Random(resolved_settings.shuffle_seed)
    scheduler = Scheduler()
    registry = GameRegistry(resolved_store)
    registry.load()
    return QuickPlayShell(
        store=resolved_store,
        scheduler=scheduler,
        settings=resolved_settings,
        memory=MemoryEngine(
            resolved_store,
            scheduler,
            rng=rng,
            difficulty=resolved_settings.default_difficulty,
            match_delay_seconds=resolved_settings.match_delay_seconds,
            mismatch_delay_seconds=resolved_settings.mismatch_delay_seconds,
            tick_interval_seconds=resolved_settings.tick_interval_seconds,
        ),
        tictactoe=TicTacToeEngine(),
        quiz=QuizEngine(),
        registry=registry,
    )


def bootstrap_shell() -> QuickPlayShell:
    """Load env, prepare app-data, configure logging and build a file-backed shell."""
    load_default_env_files()
    paths = ensure_app_data_dirs()
    setup_logging()
    logger.info(
        "app_data_paths root=%s logs=%s store=%s", paths["root"], paths["logs"], paths["store"]
    )
    shell = create_shell(JsonFileStore(paths["store"]), settings=load_settings())
    logger.info("games_available ids=%s", ",".join(game.id for game in shell.registry.games))
    return shell
