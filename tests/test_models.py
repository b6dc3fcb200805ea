# tests/test_models.py

from __future__ import annotations

import datetime

from taskdb.models import Status, Task


def test_new_task_is_incomplete_without_reminders() -> None:
    task = Task("Buy some milk")
    assert task.title == "Buy some milk"
    assert task.status is Status.INCOMPLETE
    assert task.reminders == []
    assert not task.is_complete()


def test_tasks_can_be_completed() -> None:
    task = Task("Buy some milk")
    task.complete()
    assert task.status is Status.COMPLETE
    assert task.is_complete()


def test_completing_twice_is_a_no_op() -> None:
    once = Task("Buy some milk")
    once.complete()
    twice = Task("Buy some milk")
    twice.complete()
    twice.complete()
    assert once == twice


def test_tasks_can_be_renamed_including_to_empty_title() -> None:
    task = Task("Buy some milk")
    task.rename("Purchase some milk")
    assert task.title == "Purchase some milk"
    task.rename("")
    assert task.title == ""


def test_reminders_keep_insertion_order() -> None:
    task = Task("Dentist")
    task.add_reminder(datetime.date(2026, 11, 2))
    task.add_reminder(datetime.date(2026, 10, 30))
    assert task.reminders == [datetime.date(2026, 11, 2), datetime.date(2026, 10, 30)]


def test_status_glyphs() -> None:
    assert str(Status.INCOMPLETE) == "•"
    assert str(Status.COMPLETE) == "–"


def test_incomplete_tasks_get_bullet() -> None:
    assert str(Task("Buy some milk")) == "• Buy some milk"


def test_complete_tasks_get_en_dash() -> None:
    assert str(Task("Buy some milk", status=Status.COMPLETE)) == "– Buy some milk"


def test_reminders_are_not_displayed() -> None:
    task = Task("Buy some milk", reminders=[datetime.date(2026, 1, 1)])
    assert str(task) == "• Buy some milk"
