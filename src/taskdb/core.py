"""Task list and database logic (pure, no I/O)."""

import datetime
import logging
import types
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from .errors import NonExistentTaskId, NonExistentTaskList, TaskListFull
from .models import DEFAULT_LIST, EMPTY_LIST_PLACEHOLDER, MAX_TASK_ID, Task

logger = logging.getLogger(__name__)


def _valid_id(task_id: object) -> bool:
    return type(task_id) is int and 0 <= task_id <= MAX_TASK_ID


class TaskList:
    """Tasks keyed by small integer IDs, kept in insertion order.

    IDs are allocated lowest-free-first, so an ID freed by removal is
    handed out again by the next add even while higher IDs are in use.
    """

    def __init__(self, tasks: Optional[Mapping[int, Task]] = None):
        self._tasks: Dict[int, Task] = {}
        for task_id, task in (tasks or {}).items():
            if not _valid_id(task_id):
                raise ValueError(f"task ID must be an int in 0..{MAX_TASK_ID}, got {task_id!r}")
            self._tasks[task_id] = task

    def _get(self, task_id: int) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise NonExistentTaskId(task_id)
        return task

    def add_task(self, task: Task) -> int:
        """Insert task under the lowest unused ID and return that ID."""
        for candidate in range(MAX_TASK_ID + 1):
            if candidate not in self._tasks:
                self._tasks[candidate] = task
                logger.debug("added task %d: %r", candidate, task.title)
                return candidate
        raise TaskListFull(MAX_TASK_ID + 1)

    def remove_task(self, task_id: int) -> None:
        self._get(task_id)
        del self._tasks[task_id]
        logger.debug("removed task %d", task_id)

    def rename_task(self, task_id: int, new_title: str) -> None:
        self._get(task_id).rename(new_title)

    def complete_task(self, task_id: int) -> None:
        self._get(task_id).complete()

    def add_reminder(self, task_id: int, date: datetime.date) -> None:
        self._get(task_id).add_reminder(date)

    def remove_completed_tasks(self) -> int:
        """Drop completed tasks, keeping survivors in order; return how many went."""
        before = len(self._tasks)
        self._tasks = {i: t for i, t in self._tasks.items() if not t.is_complete()}
        removed = before - len(self._tasks)
        logger.debug("removed %d completed task(s)", removed)
        return removed

    def is_empty(self) -> bool:
        return not self._tasks

    def get(self, task_id: int) -> Optional[Task]:
        return self._tasks.get(task_id)

    def items(self) -> List[Tuple[int, Task]]:
        return list(self._tasks.items())

    def __iter__(self) -> Iterator[Tuple[int, Task]]:
        return iter(self._tasks.items())

    def __len__(self) -> int:
        return len(self._tasks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"

    def __str__(self) -> str:
        return "\n".join(f"[{i:>3}] {t}" for i, t in self._tasks.items())


class Database:
    """Named task lists plus the name of the current one.

    A new database is seeded with an empty list named DEFAULT_LIST which is
    current, so the current name always refers to an existing list.
    """

    def __init__(self) -> None:
        self._task_lists: Dict[str, TaskList] = {DEFAULT_LIST: TaskList()}
        self._current: str = DEFAULT_LIST

    @classmethod
    def from_parts(cls, task_lists: Dict[str, TaskList], current_list: str) -> "Database":
        """Build a database from decoded parts, checking the current name."""
        if current_list not in task_lists:
            raise NonExistentTaskList(current_list)
        db = cls()
        db._task_lists = dict(task_lists)
        db._current = current_list
        return db

    @property
    def current_list(self) -> str:
        return self._current

    @property
    def task_lists(self) -> Mapping[str, TaskList]:
        """Read-only view of the lists by name, in insertion order."""
        return types.MappingProxyType(self._task_lists)

    def get_task_list(self, name: str) -> TaskList:
        task_list = self._task_lists.get(name)
        if task_list is None:
            raise NonExistentTaskList(name)
        return task_list

    def add_task_list(self, name: str, task_list: TaskList) -> None:
        """Insert or replace a named list; a replaced list keeps its position."""
        if name in self._task_lists:
            logger.info("replacing task list %r", name)
        self._task_lists[name] = task_list

    def set_current(self, name: str) -> None:
        if name not in self._task_lists:
            raise NonExistentTaskList(name)
        self._current = name
        logger.debug("current task list is now %r", name)

    def get_current_task_list(self) -> TaskList:
        return self._task_lists[self._current]

    def task_list_names(self) -> List[str]:
        return list(self._task_lists)

    def __contains__(self, name: object) -> bool:
        return name in self._task_lists

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Database):
            return NotImplemented
        return (
            list(self._task_lists.items()) == list(other._task_lists.items())
            and self._current == other._current
        )

    def __repr__(self) -> str:
        return f"Database(task_lists={self._task_lists!r}, current_list={self._current!r})"

    def __str__(self) -> str:
        blocks = []
        for name, task_list in self._task_lists.items():
            header = f"{name} (current)" if name == self._current else name
            body = str(task_list) if not task_list.is_empty() else EMPTY_LIST_PLACEHOLDER
            indented = "\n".join(f"  {line}" for line in body.split("\n"))
            blocks.append(f"{header}\n{indented}")
        return "\n\n".join(blocks)
