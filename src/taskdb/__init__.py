"""taskdb - named task lists kept on disk."""

__version__ = "0.1.0"

from .models import Status, Task, DEFAULT_LIST
from .core import TaskList, Database
from .errors import (
    TaskDbError,
    NonExistentTaskId,
    NonExistentTaskList,
    DuplicateTaskList,
    TaskListFull,
    StorageError,
    CorruptDatabase,
)
from .storage import read_db, save_db, load_or_init, dumps, loads

__all__ = [
    "Status",
    "Task",
    "DEFAULT_LIST",
    "TaskList",
    "Database",
    "TaskDbError",
    "NonExistentTaskId",
    "NonExistentTaskList",
    "DuplicateTaskList",
    "TaskListFull",
    "StorageError",
    "CorruptDatabase",
    "read_db",
    "save_db",
    "load_or_init",
    "dumps",
    "loads",
]
