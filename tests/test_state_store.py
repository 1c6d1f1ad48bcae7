"""In-memory store ordering, toggling and lookups."""

import logging

import pytest

from neura_os.core.models import NotFoundError, ValidationError


def test_tasks_are_listed_newest_first(store):
    first = store.add_task("first")
    second = store.add_task("second")
    third = store.add_task("third")

    assert [task.id for task in store.list_tasks()] == [third.id, second.id, first.id]


def test_rejected_task_does_not_mutate_store(store):
    store.add_task("kept")
    with pytest.raises(ValidationError):
        store.add_task("   ")
    assert len(store.list_tasks()) == 1


def test_toggle_twice(store):
    task = store.add_task("Write notes", urgency=8)

    toggled = store.toggle_task(task.id)
    assert toggled.done is True
    assert toggled.updated_at is not None

    toggled = store.toggle_task(task.id)
    assert toggled.done is False
    assert toggled.updated_at is not None
    assert store.get_task(task.id).done is False


def test_toggle_unknown_task_raises(store):
    store.add_task("only")
    with pytest.raises(NotFoundError):
        store.toggle_task("does-not-exist")
    assert store.list_tasks()[0].done is False


def test_get_task(store):
    task = store.add_task("lookup")
    assert store.get_task(task.id) is task
    with pytest.raises(NotFoundError):
        store.get_task("nope")


def test_list_returns_a_copy(store):
    store.add_task("a")
    tasks = store.list_tasks()
    tasks.clear()
    assert len(store.list_tasks()) == 1


def test_focus_sessions_newest_first_with_defaults(store):
    older = store.add_focus_session()
    newer = store.add_focus_session(title="Deep work", minutes=50, energy_start=72)

    sessions = store.list_focus_sessions()
    assert [s.id for s in sessions] == [newer.id, older.id]
    assert older.title == "Focus session"
    assert older.minutes == 25
    assert older.energy_start is None
    assert newer.energy_start == 72


def test_snapshot_and_counts(store):
    store.add_task("a")
    store.add_task("b")
    store.add_focus_session()

    tasks, sessions = store.snapshot()
    assert len(tasks) == 2
    assert len(sessions) == 1
    assert store.counts() == (2, 1)

    store.clear()
    assert store.counts() == (0, 0)
    # snapshot lists are independent of the store
    assert len(tasks) == 2


def test_toggle_logs_new_state(store, caplog):
    task = store.add_task("Log me")

    with caplog.at_level(logging.INFO, logger="neura_os.services.state_store"):
        store.toggle_task(task.id)

    assert f"Task {task.id} toggled - done: True" in caplog.text
