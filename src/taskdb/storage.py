"""JSON persistence for the task database."""

import datetime
import json
import logging
import os
import tempfile
from typing import Any, Dict

from .core import Database, TaskList
from .errors import CorruptDatabase, NonExistentTaskList, StorageError
from .models import MAX_TASK_ID, Status, Task

logger = logging.getLogger(__name__)


def task_to_dict(task: Task) -> Dict[str, Any]:
    return {
        "title": task.title,
        "status": task.status.value,
        "reminders": [d.isoformat() for d in task.reminders],
    }


def task_list_to_dict(task_list: TaskList) -> Dict[str, Any]:
    # JSON object keys are strings; IDs come back as ints in task_list_from_dict.
    return {"tasks": {str(i): task_to_dict(t) for i, t in task_list}}


def database_to_dict(db: Database) -> Dict[str, Any]:
    return {
        "task_lists": {
            name: task_list_to_dict(tl) for name, tl in db.task_lists.items()
        },
        "current_list": db.current_list,
    }


def _expect(value: Any, kind: type, what: str) -> Any:
    if not isinstance(value, kind):
        raise CorruptDatabase(f"{what}: expected {kind.__name__}, got {type(value).__name__}")
    return value


def task_from_dict(data: Any) -> Task:
    data = _expect(data, dict, "task")
    title = _expect(data.get("title"), str, "task title")
    raw_status = data.get("status")
    try:
        status = Status(raw_status)
    except ValueError:
        raise CorruptDatabase(f"unknown task status {raw_status!r}") from None
    reminders = []
    for raw in _expect(data.get("reminders", []), list, "task reminders"):
        try:
            reminders.append(datetime.date.fromisoformat(_expect(raw, str, "reminder")))
        except ValueError:
            raise CorruptDatabase(f"invalid reminder date {raw!r}") from None
    return Task(title=title, status=status, reminders=reminders)


def task_list_from_dict(data: Any) -> TaskList:
    data = _expect(data, dict, "task list")
    tasks: Dict[int, Task] = {}
    for key, raw_task in _expect(data.get("tasks"), dict, "tasks").items():
        if not (key.isascii() and key.isdigit() and 0 <= int(key) <= MAX_TASK_ID):
            raise CorruptDatabase(f"invalid task ID {key!r}")
        task_id = int(key)
        if task_id in tasks:
            raise CorruptDatabase(f"duplicate task ID {key!r}")
        tasks[task_id] = task_from_dict(raw_task)
    return TaskList(tasks)


def database_from_dict(data: Any) -> Database:
    data = _expect(data, dict, "database")
    raw_lists = _expect(data.get("task_lists"), dict, "task_lists")
    current = _expect(data.get("current_list"), str, "current_list")
    task_lists = {name: task_list_from_dict(raw) for name, raw in raw_lists.items()}
    try:
        return Database.from_parts(task_lists, current)
    except NonExistentTaskList:
        raise CorruptDatabase(f"current_list {current!r} names no task list") from None


def dumps(db: Database) -> str:
    return json.dumps(database_to_dict(db), ensure_ascii=False, indent=2)


def loads(text: str) -> Database:
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise CorruptDatabase(f"invalid JSON: {e}") from e
    return database_from_dict(data)


def read_db(path: str) -> Database:
    """Load the database stored at path."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(f"cannot read {path}: {e}") from e
    try:
        db = loads(text)
    except CorruptDatabase as e:
        raise CorruptDatabase(f"{path}: {e}") from e
    logger.info("loaded %d task list(s) from %s", len(db.task_lists), path)
    return db


def save_db(path: str, db: Database) -> None:
    """Rewrite the data file from in-memory state.

    Writes to a temporary file next to path and renames it into place, so a
    failed write leaves the previous contents untouched.
    """
    directory = os.path.dirname(os.path.abspath(path))
    text = dumps(db)
    try:
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix=".task_db.", suffix=".tmp", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
                f.write("\n")
            os.replace(tmp_path, path)
        except BaseException:
            os.unlink(tmp_path)
            raise
    except OSError as e:
        raise StorageError(f"cannot write {path}: {e}") from e
    logger.info("saved %d task list(s) to %s", len(db.task_lists), path)


def load_or_init(path: str) -> Database:
    """Read the database, creating a default one on disk if path is missing."""
    if not os.path.exists(path):
        logger.info("no database at %s, creating a new one", path)
        db = Database()
        save_db(path, db)
        return db
    return read_db(path)
