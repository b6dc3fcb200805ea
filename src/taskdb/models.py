"""Data models and constants for taskdb."""

import datetime
import enum
from dataclasses import dataclass, field
from typing import List

DEFAULT_LIST = "Tasks"
MAX_TASK_ID = 255
EMPTY_LIST_PLACEHOLDER = "No tasks have been added to this task list yet"


class Status(enum.Enum):
    """Completion status of a task; the value is the persisted name."""

    INCOMPLETE = "Incomplete"
    COMPLETE = "Complete"

    def __str__(self) -> str:
        return "•" if self is Status.INCOMPLETE else "–"


@dataclass
class Task:
    """A single task with a title, a status and optional reminder dates."""

    title: str
    status: Status = Status.INCOMPLETE
    reminders: List[datetime.date] = field(default_factory=list)

    def rename(self, new_title: str) -> None:
        self.title = new_title

    def complete(self) -> None:
        self.status = Status.COMPLETE

    def is_complete(self) -> bool:
        return self.status is Status.COMPLETE

    def add_reminder(self, date: datetime.date) -> None:
        self.reminders.append(date)

    def __str__(self) -> str:
        return f"{self.status} {self.title}"
