# tests/test_config.py

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from taskdb.config import default_db_path, load_settings


def test_explicit_file_wins(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKDB_FILE", str(tmp_path / "mine.json"))
    assert default_db_path() == str(tmp_path / "mine.json")


def test_xdg_data_home_is_used(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert default_db_path() == os.path.join(str(tmp_path), "taskdb", "task_db.json")


def test_falls_back_to_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_db_path() == os.path.join(
        str(tmp_path), ".local", "share", "taskdb", "task_db.json"
    )


def test_blank_values_are_ignored(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKDB_FILE", "  ")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert default_db_path().startswith(str(tmp_path))


@pytest.mark.parametrize(
    "raw, expected",
    [("debug", logging.DEBUG), ("INFO", logging.INFO), ("10", 10), ("bogus", logging.WARNING)],
)
def test_log_level_from_env(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int) -> None:
    monkeypatch.setenv("TASKDB_LOG_LEVEL", raw)
    assert load_settings().log_level == expected


def test_default_log_level_is_warning() -> None:
    assert load_settings().log_level == logging.WARNING
