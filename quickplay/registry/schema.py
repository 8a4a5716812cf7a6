"""Game descriptor model and stored payload conversion."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GameDescriptor:
    """Registry entry for one selectable game."""

    id: str
    name: str
    route: str
    votes: int = 0
    description: str = ""
    icon: str = ""


DEFAULT_GAMES: tuple[GameDescriptor, ...] = (
    GameDescriptor(
        id="memory",
        name="Memory Game",
        route="/memory",
        description="Test your memory by matching pairs of cards.",
        icon="🃏",
    ),
    GameDescriptor(
        id="quiz",
        name="Quiz Game",
        route="/quiz",
        description="Challenge your knowledge with fun quiz questions.",
        icon="❓",
    ),
    GameDescriptor(
        id="tictactoe",
        name="Tic-Tac-Toe",
        route="/tictactoe",
        description="The classic game of X and O. Play against a friend.",
        icon="⭕",
    ),
)

_DEFAULTS_BY_ID = {game.id: game for game in DEFAULT_GAMES}


def games_to_payload(games: list[GameDescriptor]) -> list[dict[str, object]]:
    """Convert descriptors to the stored JSON shape."""
    return [
        {"id": game.id, "name": game.name, "route": game.route, "votes": game.votes}
        for game in games
    ]


def payload_to_games(payload: object) -> list[GameDescriptor]:
    """Convert a stored payload into descriptors; raises ValueError when malformed."""
    if not isinstance(payload, list):
        raise ValueError("Game registry must be a list.")
    if not payload:
        raise ValueError("Game registry cannot be empty.")
    games: list[GameDescriptor] = []
    seen: set[str] = set()
    for item in payload:
        if not isinstance(item, dict):
            raise ValueError("Each game entry must be an object.")
        try:
            game_id = item["id"]
            name = item["name"]
            route = item["route"]
            votes = item["votes"]
        except KeyError as exc:
            raise ValueError(f"Game entry is missing {exc.args[0]!r}.") from exc
        if not all(isinstance(value, str) and value for value in (game_id, name, route)):
            raise ValueError("Game id, name and route must be non-empty strings.")
        if isinstance(votes, bool) or not isinstance(votes, int) or votes < 0:
            raise ValueError("Game votes must be a non-negative integer.")
        if game_id in seen:
            raise ValueError(f"Duplicate game id: {game_id}.")
        seen.add(game_id)
        known = _DEFAULTS_BY_ID.get(game_id)
        games.append(
            GameDescriptor(
                id=game_id,
                name=name,
                route=route,
                votes=votes,
                description=known.description if known else "",
                icon=known.icon if known else "",
            )
        )
    return games
