from __future__ import annotations

import pytest

from smart_planning import ProductivityPattern, TimeSlot, find_optimal_time_slot, generate_time_slots
from smart_planning.policies.smart import SmartPolicy


@pytest.fixture()
def day_slots():
    return generate_time_slots("09:00", "18:00", 90, 15)


def _slot(start, end, duration):
    return TimeSlot(start=start, end=end, duration=duration)


def test_high_priority_prefers_late_morning_peak(make_task, day_slots) -> None:
    slot = find_optimal_time_slot(make_task("high", estimated_minutes=60), day_slots)

    assert slot.start == "10:45"


def test_medium_priority_prefers_afternoon(make_task, day_slots) -> None:
    slot = find_optimal_time_slot(make_task("medium", estimated_minutes=60), day_slots)

    assert slot.start == "16:00"


def test_low_priority_takes_short_end_of_day_slot(make_task, day_slots) -> None:
    slot = find_optimal_time_slot(make_task("low", estimated_minutes=15), day_slots)

    assert slot.start == "17:45"


def test_slot_scores_match_weights(make_task) -> None:
    policy = SmartPolicy()
    patterns = [ProductivityPattern(9, "high", 90, ("urgent", "high"))]
    nine = _slot("09:00", "10:30", 90)

    # energy 30 + affinity 25 + focus 18
    assert policy.score_slot(make_task("high"), nine, patterns) == pytest.approx(73)
    # plus the morning bonus
    assert policy.score_slot(make_task("urgent"), nine, patterns) == pytest.approx(93)
    # adjacent energy 15 + focus 18
    assert policy.score_slot(make_task("medium"), nine, patterns) == pytest.approx(33)
    # two energy steps apart: focus only
    assert policy.score_slot(make_task("low"), nine, patterns) == pytest.approx(18)


def test_unknown_hour_falls_back_to_first_pattern(make_task) -> None:
    policy = SmartPolicy()
    patterns = [
        ProductivityPattern(9, "low", 50, ("low",)),
        ProductivityPattern(14, "high", 100, ("high",)),
    ]
    early = _slot("07:00", "08:00", 60)

    assert policy.score_slot(make_task("low"), early, patterns) == pytest.approx(30 + 25 + 10)


def test_custom_patterns_change_the_choice(make_task) -> None:
    slots = [_slot("09:00", "10:00", 60), _slot("14:00", "15:00", 60)]
    patterns = [
        ProductivityPattern(9, "low", 10, ("low",)),
        ProductivityPattern(14, "high", 100, ("high",)),
    ]

    slot = find_optimal_time_slot(make_task("high", estimated_minutes=45), slots, patterns)

    assert slot.start == "14:00"


def test_equal_scores_resolve_to_first_slot(make_task) -> None:
    slots = [_slot("12:00", "13:00", 60), _slot("14:00", "15:00", 60)]

    slot = find_optimal_time_slot(make_task("medium", estimated_minutes=30), slots, [])

    assert slot is slots[0]


def test_slots_shorter_than_task_are_ignored(make_task) -> None:
    slots = [_slot("10:00", "10:30", 30), _slot("16:00", "17:30", 90)]

    slot = find_optimal_time_slot(make_task("urgent", estimated_minutes=45), slots)

    assert slot.start == "16:00"


def test_no_slots_returns_none(make_task) -> None:
    assert find_optimal_time_slot(make_task("urgent"), []) is None


def test_no_slot_long_enough_returns_none(make_task, day_slots) -> None:
    assert find_optimal_time_slot(make_task("high", estimated_minutes=1000), day_slots) is None


def test_default_estimate_applies_when_unset(make_task) -> None:
    slots = [_slot("09:00", "09:20", 20), _slot("13:00", "13:30", 30)]

    slot = find_optimal_time_slot(make_task("urgent"), slots)

    assert slot.start == "13:00"
