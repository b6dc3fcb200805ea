# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskdb.core import Database, TaskList
from taskdb.models import Task


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep tests away from the real user data dir and the caller's settings."""
    for name in ("TASKDB_FILE", "TASKDB_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "task_db.json"


@pytest.fixture()
def shopping_list() -> TaskList:
    tl = TaskList()
    tl.add_task(Task("Milk"))
    tl.add_task(Task("Frozen pizza"))
    tl.add_task(Task("Yoghurt"))
    return tl


@pytest.fixture()
def populated_db(shopping_list: TaskList) -> Database:
    db = Database()
    db.get_current_task_list().add_task(Task("Buy some milk"))
    db.add_task_list("Shopping List", shopping_list)
    return db


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging replaces root handlers; put the originals back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
