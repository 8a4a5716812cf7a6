"""Vote-ranked game registry."""

from __future__ import annotations

import logging
from dataclasses import replace

from quickplay.persistence.documents import load_document, save_document
from quickplay.persistence.port import GAMES_KEY, PersistencePort
from quickplay.registry.schema import (
    DEFAULT_GAMES,
    GameDescriptor,
    games_to_payload,
    payload_to_games,
)

logger = logging.getLogger(__name__)


class GameRegistry:
    """Available games with vote counts, kept sorted by votes."""

    def __init__(self, port: PersistencePort, key: str = GAMES_KEY) -> None:
        self._port = port
        self._key = key
        self._games: list[GameDescriptor] = list(DEFAULT_GAMES)

    @property
    def games(self) -> tuple[GameDescriptor, ...]:
        return tuple(self._games)

    @property
    def total_votes(self) -> int:
        return sum(game.votes for game in self._games)

    def load(self) -> None:
        """Read the stored registry, falling back to the defaults."""
        payload = load_document(self._port, self._key)
        if payload is None:
            self._games = list(DEFAULT_GAMES)
            return
        try:
            self._games = payload_to_games(payload)
        except ValueError as exc:
            logger.warning("game_registry_malformed key=%s reason=%s", self._key, exc)
            self._games = list(DEFAULT_GAMES)

    def get(self, game_id: str) -> GameDescriptor | None:
        for game in self._games:
            if game.id == game_id:
                return game
        return None

    def vote(self, game_id: str) -> bool:
        """Add one vote, re-rank and persist; unknown ids are ignored."""
        for position, game in enumerate(self._games):
            if game.id == game_id:
                votes = game.votes + 1
                self._games[position] = replace(game, votes=votes)
                break
        else:
            logger.debug("game_vote_rejected game_id=%s", game_id)
            return False
        # Stable sort: equal vote counts keep their previous relative order.
        self._games.sort(key=lambda entry: entry.votes, reverse=True)
        save_document(self._port, self._key, games_to_payload(self._games))
        logger.info("game_voted game_id=%s votes=%d", game_id, votes)
        return True

    def reset_votes(self) -> None:
        """Zero every vote and restore the default order."""
        self._games = list(DEFAULT_GAMES)
        save_document(self._port, self._key, games_to_payload(self._games))
