from __future__ import annotations

from datetime import date

import pytest

from smart_planning.models.task import Task


@pytest.fixture()
def plan_day():
    return date(2026, 10, 19)


@pytest.fixture()
def make_task():
    counter = {"n": 0}

    def _make(priority="medium", **kwargs):
        counter["n"] += 1
        kwargs.setdefault("title", f"Task {counter['n']}")
        kwargs.setdefault("task_id", f"t{counter['n']}")
        return Task(priority=priority, **kwargs)

    return _make
