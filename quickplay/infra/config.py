"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from quickplay.games.memory.models import Difficulty

DEFAULT_ENV_FILES: tuple[str, ...] = (
    "appdata/config/.env",
    "appdata/config/.env.local",
    ".env",
    ".env.local",
)


@dataclass(frozen=True, slots=True)
class GameSettings:
    """Tunable timings and defaults for the game engines."""

    match_delay_seconds: float = 0.5
    mismatch_delay_seconds: float = 1.0
    tick_interval_seconds: float = 1.0
    default_difficulty: Difficulty = Difficulty.EASY
    shuffle_seed: int | None = None


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files in order; later files win."""
    for path in tuple(paths) if paths is not None else DEFAULT_ENV_FILES:
        load_env_file(path, override_existing=override_existing)


def load_settings() -> GameSettings:
    """Build game settings from env vars, keeping defaults for bad values."""
    defaults = GameSettings()
    raw_difficulty = os.getenv("QUICKPLAY_DEFAULT_DIFFICULTY")
    difficulty = (
        Difficulty.parse(raw_difficulty) if raw_difficulty else defaults.default_difficulty
    )
    return GameSettings(
        match_delay_seconds=_seconds(
            "QUICKPLAY_MATCH_DELAY_SECONDS", defaults.match_delay_seconds
        ),
        mismatch_delay_seconds=_seconds(
            "QUICKPLAY_MISMATCH_DELAY_SECONDS", defaults.mismatch_delay_seconds
        ),
        tick_interval_seconds=_seconds(
            "QUICKPLAY_TICK_INTERVAL_SECONDS", defaults.tick_interval_seconds, minimum=0.001
        ),
        default_difficulty=difficulty,
        shuffle_seed=_optional_int("QUICKPLAY_SHUFFLE_SEED"),
    )


def _seconds(name: str, default: float, *, minimum: float = 0.0) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, then project root."""
    candidate = Path(path)
    if candidate.exists():
        return candidate
    # Fallback for IDE run configs with different working directory.
    project_root = Path(__file__).resolve().parents[2]
    return project_root / path
