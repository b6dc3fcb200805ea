"""Exception hierarchy for taskdb."""


class TaskDbError(Exception):
    """Base class for every error taskdb raises on purpose."""


class NonExistentTaskId(TaskDbError):
    """Raised when a task ID is not present in a task list."""

    def __init__(self, task_id: int):
        super().__init__(f"task with ID {task_id} does not exist")
        self.id = task_id


class NonExistentTaskList(TaskDbError):
    """Raised when a task list name is not present in the database."""

    def __init__(self, name: str):
        super().__init__(f"task list with name {name!r} does not exist")
        self.name = name


class DuplicateTaskList(TaskDbError):
    def __init__(self, name: str):
        super().__init__(f"task list with name {name!r} already exists")
        self.name = name


class TaskListFull(TaskDbError):
    def __init__(self, capacity: int):
        super().__init__(f"task list is full (all {capacity} IDs are in use)")
        self.capacity = capacity


class StorageError(TaskDbError):
    """Raised when the data file cannot be read or written."""


class CorruptDatabase(StorageError):
    """Raised when the data file does not decode to a valid database."""
