"""Game catalog with persisted votes."""

from quickplay.registry.schema import DEFAULT_GAMES, GameDescriptor
from quickplay.registry.service import GameRegistry

__all__ = ["DEFAULT_GAMES", "GameDescriptor", "GameRegistry"]
