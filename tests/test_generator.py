from __future__ import annotations

from datetime import datetime

from smart_planning import create_daily_schedule
from smart_planning.evaluation.generator import TaskGenerator

DAY = datetime(2026, 10, 19, 9, 0)


def test_same_seed_same_tasks() -> None:
    first = TaskGenerator(seed=7).generate_tasks(20, DAY)
    second = TaskGenerator(seed=7).generate_tasks(20, DAY)

    assert [t.to_dict() for t in first] == [t.to_dict() for t in second]


def test_generated_tasks_are_well_formed() -> None:
    tasks = TaskGenerator().generate_tasks(30, DAY)

    assert len(tasks) == 30
    assert len({t.task_id for t in tasks}) == 30
    for task in tasks:
        assert task.status in ("todo", "completed")
        if task.status == "completed":
            assert task.completed_at.date() == DAY.date()
        if task.due_date is not None:
            assert task.due_date >= DAY


def test_generated_day_schedules_without_overlap() -> None:
    tasks = TaskGenerator(seed=3).generate_tasks(25, DAY)

    schedule = create_daily_schedule(tasks, {}, DAY, now=DAY.replace(hour=15))

    starts = [s.time_slot.start for s in schedule.slots]
    assert len(starts) == len(set(starts))
    assert len(schedule.slots) + len(schedule.unscheduled) == sum(t.status == "todo" for t in tasks)
    assert 0 <= schedule.productivity_score <= 100
