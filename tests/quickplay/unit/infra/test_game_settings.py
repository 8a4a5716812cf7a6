from __future__ import annotations

import os

import pytest

from quickplay.games.memory import Difficulty
from quickplay.infra.config import (
    GameSettings,
    load_default_env_files,
    load_env_file,
    load_settings,
)

_SETTINGS_VARS = (
    "QUICKPLAY_MATCH_DELAY_SECONDS",
    "QUICKPLAY_MISMATCH_DELAY_SECONDS",
    "QUICKPLAY_TICK_INTERVAL_SECONDS",
    "QUICKPLAY_DEFAULT_DIFFICULTY",
    "QUICKPLAY_SHUFFLE_SEED",
)


@pytest.fixture
def clean_settings_env(monkeypatch):
    for name in _SETTINGS_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_load_env_file_sets_values_with_overwrite_by_default(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "QP_A=1\nQP_B='two'\n#comment\nINVALID\nQP_C=three\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("QP_C", "already")
    monkeypatch.delenv("QP_A", raising=False)
    monkeypatch.delenv("QP_B", raising=False)
    load_env_file(str(env_file))
    assert os.environ.get("QP_A") == "1"
    assert os.environ.get("QP_B") == "two"
    assert os.environ.get("QP_C") == "three"


def test_load_env_file_can_preserve_existing_values(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("QP_C=three\n", encoding="utf-8")
    monkeypatch.setenv("QP_C", "already")
    load_env_file(str(env_file), override_existing=False)
    assert os.environ.get("QP_C") == "already"


def test_load_default_env_files_honors_order(tmp_path, monkeypatch) -> None:
    base = tmp_path / ".env"
    local = tmp_path / ".env.local"
    base.write_text("QP_A=base\nQP_B=base\n", encoding="utf-8")
    local.write_text("QP_B=local\n", encoding="utf-8")
    monkeypatch.delenv("QP_A", raising=False)
    monkeypatch.delenv("QP_B", raising=False)

    load_default_env_files(paths=(str(base), str(local), str(tmp_path / "missing")))
    assert os.environ.get("QP_A") == "base"
    assert os.environ.get("QP_B") == "local"


def test_load_settings_defaults(clean_settings_env) -> None:
    assert load_settings() == GameSettings()


def test_load_settings_reads_env(clean_settings_env) -> None:
    clean_settings_env.setenv("QUICKPLAY_MATCH_DELAY_SECONDS", "0.25")
    clean_settings_env.setenv("QUICKPLAY_MISMATCH_DELAY_SECONDS", "2")
    clean_settings_env.setenv("QUICKPLAY_DEFAULT_DIFFICULTY", "Medium")
    clean_settings_env.setenv("QUICKPLAY_SHUFFLE_SEED", "42")

    settings = load_settings()
    assert settings.match_delay_seconds == 0.25
    assert settings.mismatch_delay_seconds == 2.0
    assert settings.default_difficulty is Difficulty.MEDIUM
    assert settings.shuffle_seed == 42


def test_load_settings_ignores_bad_numbers(clean_settings_env) -> None:
    clean_settings_env.setenv("QUICKPLAY_MATCH_DELAY_SECONDS", "soon")
    clean_settings_env.setenv("QUICKPLAY_TICK_INTERVAL_SECONDS", "0")
    clean_settings_env.setenv("QUICKPLAY_SHUFFLE_SEED", "abc")

    settings = load_settings()
    assert settings.match_delay_seconds == 0.5
    assert settings.tick_interval_seconds == 1.0
    assert settings.shuffle_seed is None


def test_load_settings_rejects_unknown_difficulty(clean_settings_env) -> None:
    clean_settings_env.setenv("QUICKPLAY_DEFAULT_DIFFICULTY", "nightmare")
    with pytest.raises(ValueError):
        load_settings()
