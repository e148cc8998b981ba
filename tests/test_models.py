from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from smart_planning.models.task import Task, UserPreferences


def test_task_from_store_dict() -> None:
    task = Task.from_dict({
        "id": "abc",
        "title": "Prepare demo",
        "priority": "urgent",
        "status": "completed",
        "estimatedMinutes": 45,
        "dueDate": "2026-10-20T12:00:00Z",
        "completedAt": "2026-10-19T10:30:00",
        "tags": ["work"],
    })

    assert task.task_id == "abc"
    assert task.estimated_minutes == 45
    assert task.due_date == datetime(2026, 10, 20, 12, 0, tzinfo=timezone.utc)
    assert task.completed_at == datetime(2026, 10, 19, 10, 30)
    assert task.tags == ["work"]


def test_task_from_snake_case_dict() -> None:
    task = Task.from_dict({"task_id": "t1", "title": "Inbox zero", "priority": "low", "estimated_minutes": 15})

    assert (task.task_id, task.status, task.estimated_minutes, task.due_date) == ("t1", "todo", 15, None)


def test_task_dict_round_trip() -> None:
    task = Task(
        title="Plan sprint",
        priority="high",
        task_id="t9",
        estimated_minutes=60,
        due_date=datetime(2026, 10, 21, 9, 0),
    )

    assert Task.from_dict(task.to_dict()) == task


@pytest.mark.parametrize("kwargs", [{"priority": "critical"}, {"priority": "low", "status": "done"}])
def test_task_rejects_unknown_enums(kwargs) -> None:
    with pytest.raises(ValueError):
        Task(title="Bad task", **kwargs)


def test_estimate_defaults() -> None:
    assert Task(title="No estimate", priority="low").get_estimated_minutes() == 30
    assert Task(title="Zero estimate", priority="low", estimated_minutes=0).get_estimated_minutes() == 30
    assert Task(title="No estimate", priority="low").get_estimated_minutes(default=10) == 10
    assert Task(title="Negative estimate", priority="low", estimated_minutes=-5).get_estimated_minutes() == 30


def test_preferences_from_nested_dict() -> None:
    prefs = UserPreferences.from_dict({"workingHours": {"start": "08:00", "end": "16:00"}, "focusTime": 50})

    assert prefs == UserPreferences("08:00", "16:00", 50, None)


def test_preferences_resolve_fills_gaps() -> None:
    defaults = {"working_hours_start": "09:00", "working_hours_end": "18:00", "focus_minutes": 90, "break_minutes": 15}

    resolved = UserPreferences(working_hours_end="17:00", break_time=0).resolve(defaults)

    assert resolved == UserPreferences("09:00", "17:00", 90, 15)


def test_empty_preferences() -> None:
    assert UserPreferences.from_dict(None) == UserPreferences()
    assert UserPreferences.from_dict({}).resolve({}) == UserPreferences("09:00", "18:00", 90, 15)


def test_due_dates_with_offsets_sort_by_instant() -> None:
    from smart_planning import smart_task_prioritization

    utc_noon = datetime(2026, 10, 20, 12, 0, tzinfo=timezone.utc)
    earlier_elsewhere = utc_noon.astimezone(timezone(timedelta(hours=5))) - timedelta(minutes=1)
    a = Task(title="Later", priority="high", due_date=utc_noon)
    b = Task(title="Earlier", priority="high", due_date=earlier_elsewhere)

    assert smart_task_prioritization([a, b]) == [b, a]


def test_plain_dates_become_datetimes() -> None:
    task = Task(title="Dated", priority="low", due_date=date(2026, 10, 20), completed_at=date(2026, 10, 19))

    assert task.due_date == datetime(2026, 10, 20)
    assert task.completed_at == datetime(2026, 10, 19)
