"""taskdb command-line interface."""

import argparse
import datetime
import logging
import os
import sys
from typing import List, Optional

from .config import load_settings
from .core import Database, TaskList
from .errors import DuplicateTaskList, TaskDbError
from .logging_setup import setup_logging
from .models import MAX_TASK_ID, Task
from .storage import load_or_init, save_db

logger = logging.getLogger(__name__)


def task_id(value: str) -> int:
    """argparse type for a task ID in 0..MAX_TASK_ID."""
    try:
        i = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid task ID: {value!r}") from None
    if not 0 <= i <= MAX_TASK_ID:
        raise argparse.ArgumentTypeError(f"task ID must be between 0 and {MAX_TASK_ID}")
    return i


def iso_date(value: str) -> datetime.date:
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date (expected YYYY-MM-DD): {value!r}") from None


def cmd_show(db: Database, args: argparse.Namespace) -> None:
    print(db)


def cmd_add(db: Database, args: argparse.Namespace) -> None:
    new_id = db.get_current_task_list().add_task(Task(args.title))
    print(f"Added [{new_id}] {args.title}")


def cmd_remove(db: Database, args: argparse.Namespace) -> None:
    db.get_current_task_list().remove_task(args.id)
    print(f"Removed {args.id}.")


def cmd_rename(db: Database, args: argparse.Namespace) -> None:
    db.get_current_task_list().rename_task(args.id, args.title)
    print(f"Renamed {args.id}.")


def cmd_complete(db: Database, args: argparse.Namespace) -> None:
    db.get_current_task_list().complete_task(args.id)
    print(f"Completed {args.id}.")


def cmd_clean(db: Database, args: argparse.Namespace) -> None:
    """Remove completed tasks from the current list."""
    removed = db.get_current_task_list().remove_completed_tasks()
    print(f"Removed {removed} completed task(s).")


def cmd_remind(db: Database, args: argparse.Namespace) -> None:
    db.get_current_task_list().add_reminder(args.id, args.date)
    print(f"Reminder for {args.id} set on {args.date.isoformat()}.")


def cmd_new(db: Database, args: argparse.Namespace) -> None:
    """Create an empty list and make it current."""
    if args.name in db:
        raise DuplicateTaskList(args.name)
    db.add_task_list(args.name, TaskList())
    db.set_current(args.name)
    print(f"Created task list {args.name!r} (now current).")


def cmd_switch(db: Database, args: argparse.Namespace) -> None:
    db.set_current(args.name)
    print(f"Switched to {args.name!r}.")


def cmd_lists(db: Database, args: argparse.Namespace) -> None:
    for name in db.task_list_names():
        marker = "*" if name == db.current_list else " "
        print(f"{marker} {name}")


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    p = argparse.ArgumentParser(prog="t", description="Keep named task lists on disk.")
    p.add_argument(
        "-f",
        "--file",
        default=None,
        help="Path to the task database (default: $TASKDB_FILE or the user data dir)",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log more to stderr (-v info, -vv debug)",
    )
    p.set_defaults(func=cmd_show, mutates=False)
    sub = p.add_subparsers(dest="cmd")

    s_add = sub.add_parser("add", help="Add a task to the current list")
    s_add.add_argument("title", help="Task title, quoted if it has spaces")
    s_add.set_defaults(func=cmd_add, mutates=True)

    s_remove = sub.add_parser("remove", help="Remove a task by ID")
    s_remove.add_argument("id", type=task_id)
    s_remove.set_defaults(func=cmd_remove, mutates=True)

    s_rename = sub.add_parser("rename", help="Give a task a new title")
    s_rename.add_argument("id", type=task_id)
    s_rename.add_argument("title", help="New title")
    s_rename.set_defaults(func=cmd_rename, mutates=True)

    s_complete = sub.add_parser("complete", help="Mark a task complete")
    s_complete.add_argument("id", type=task_id)
    s_complete.set_defaults(func=cmd_complete, mutates=True)

    s_clean = sub.add_parser("clean", help="Remove completed tasks from the current list")
    s_clean.set_defaults(func=cmd_clean, mutates=True)

    s_remind = sub.add_parser("remind", help="Attach a reminder date to a task")
    s_remind.add_argument("id", type=task_id)
    s_remind.add_argument("date", type=iso_date, help="Date as YYYY-MM-DD")
    s_remind.set_defaults(func=cmd_remind, mutates=True)

    s_new = sub.add_parser("new", help="Create a task list and make it current")
    s_new.add_argument("name")
    s_new.set_defaults(func=cmd_new, mutates=True)

    s_switch = sub.add_parser("switch", help="Make another task list current")
    s_switch.add_argument("name")
    s_switch.set_defaults(func=cmd_switch, mutates=True)

    s_lists = sub.add_parser("lists", help="Show task list names (* marks current)")
    s_lists.set_defaults(func=cmd_lists)

    sub.add_parser("path", help="Show the absolute path to the database file")

    return p


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point. Prints the database if no subcommand is given."""
    settings = load_settings()
    parser = build_parser()
    args = parser.parse_args(argv)

    level = settings.log_level
    if args.verbose:
        level = logging.DEBUG if args.verbose > 1 else logging.INFO
    setup_logging(level)

    path = args.file or settings.db_path
    if args.cmd == "path":
        print(os.path.abspath(path))
        return

    try:
        db = load_or_init(path)
        args.func(db, args)
        if args.mutates:
            save_db(path, db)
    except TaskDbError as e:
        logger.debug("command %r failed", args.cmd, exc_info=True)
        sys.exit(f"t: error: {e}")


if __name__ == "__main__":
    main()
