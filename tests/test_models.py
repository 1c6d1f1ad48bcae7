"""Coercion helpers and the task / focus session records."""

import math
import sys

import pytest

from neura_os.core.models import (
    CoachMeta, FocusSession, Task, ValidationError,
    coerce_number, coerce_optional_number, round_half_up
)


@pytest.mark.parametrize("value,expected", [
    (5, 5),
    (7.5, 7.5),
    (9.0, 9),
    ("7.5", 7.5),
    (" 3 ", 3),
    ("", 0),
    ("abc", 0),
    (None, 0),
    (True, 1),
    (False, 0),
    ([1], 0),
    (float("nan"), 0),
    (float("inf"), sys.float_info.max),
    (float("-inf"), -sys.float_info.max),
    ("1e400", sys.float_info.max),
])
def test_coerce_number(value, expected):
    result = coerce_number(value)
    assert result == expected
    assert not (isinstance(result, float) and math.isnan(result))


def test_coerce_number_keeps_integral_values_as_int():
    assert isinstance(coerce_number(9.0), int)
    assert isinstance(coerce_number("6"), int)


@pytest.mark.parametrize("value,expected", [
    (None, None),
    ("x", None),
    (float("nan"), None),
    ("42", 42),
    (0, 0),
    (55.5, 55.5),
])
def test_coerce_optional_number(value, expected):
    assert coerce_optional_number(value) == expected


@pytest.mark.parametrize("value,expected", [
    (2.5, 3),
    (3.5, 4),
    (2.4, 2),
    (0.5, 1),
    (-0.5, 0),
    (-1.5, -1),
    (7, 7),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_task_weight_is_rounded_mean():
    task = Task.create(title="Ship report", urgency=9, effort=6, impact=6)
    assert task.weight == 7


def test_task_weight_rounds_halves_up():
    # (2 + 3 + 2.5) / 3 == 2.5
    task = Task.create(title="Halfway", urgency=2, effort=3, impact=2.5)
    assert task.weight == 3


def test_task_defaults():
    task = Task.create(title="Read")
    assert task.category == "personal"
    assert task.done is False
    assert task.updated_at is None
    assert task.created_at.endswith("Z")


def test_task_title_is_required():
    with pytest.raises(ValidationError):
        Task.create(title="   ")
    with pytest.raises(ValidationError):
        Task.create(title=None)


def test_task_ids_are_unique():
    ids = {Task.create(title=f"t{i}").id for i in range(50)}
    assert len(ids) == 50


def test_toggle_twice_returns_to_open():
    task = Task.create(title="Stretch")
    task.toggle()
    first_update = task.updated_at
    assert task.done is True
    assert first_update is not None

    task.toggle()
    assert task.done is False
    assert task.updated_at is not None
    assert task.updated_at >= first_update


def test_urgent_means_high_urgency_and_not_done():
    assert Task.create(title="a", urgency=7).is_urgent
    assert not Task.create(title="b", urgency=6.9).is_urgent

    done = Task.create(title="c", urgency=10)
    done.toggle()
    assert not done.is_urgent


def test_task_to_dict_uses_wire_names():
    data = Task.create(title="Plan week", urgency=3, date="2025-01-02", time="09:00").to_dict()
    assert data["createdAt"]
    assert data["updatedAt"] is None
    assert data["date"] == "2025-01-02"
    assert data["time"] == "09:00"
    assert set(data) == {
        "id", "title", "urgency", "effort", "impact", "weight",
        "date", "time", "category", "done", "createdAt", "updatedAt"
    }


def test_focus_session_defaults():
    session = FocusSession.create()
    assert session.title == "Focus session"
    assert session.minutes == 25
    assert session.energy_start is None
    assert session.to_dict()["energyStart"] is None


def test_focus_session_is_immutable():
    session = FocusSession.create(minutes=40)
    with pytest.raises(AttributeError):
        session.minutes = 10


def test_coach_meta_counts():
    done = Task.create(title="done", urgency=9)
    done.toggle()
    tasks = [
        Task.create(title="urgent", urgency=8),
        Task.create(title="calm", urgency=2),
        done,
    ]
    meta = CoachMeta.from_state(55, tasks, [FocusSession.create()])
    assert meta.to_dict() == {"energy": 55, "tasksOpen": 2, "tasksUrgent": 1, "focusCount": 1}


def test_huge_ints_saturate_instead_of_overflowing():
    huge = int("9" * 400)
    assert coerce_number(huge) == sys.float_info.max
    assert coerce_number(-huge) == -sys.float_info.max
    assert coerce_number(2 ** 60) == float(2 ** 60)
    assert coerce_optional_number(huge) == sys.float_info.max


def test_round_half_up_is_total():
    assert round_half_up(float("nan")) == 0
    assert round_half_up(float("inf")) == int(sys.float_info.max)
    assert round_half_up(float("-inf")) == -int(sys.float_info.max)


def test_task_weight_with_huge_scores():
    huge = int("9" * 400)

    task = Task.create(title="Overflow", urgency=huge, effort=huge, impact=huge)
    assert task.urgency == sys.float_info.max
    assert isinstance(task.weight, int)
    assert task.weight > 10 ** 300

    balanced = Task.create(title="Cancelled out", urgency=huge, effort=-huge)
    assert balanced.weight == 0


def test_long_titles_are_accepted():
    title = "x" * 5000
    assert Task.create(title=title).title == title
