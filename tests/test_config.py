from __future__ import annotations

import json

import pytest

from smart_planning.models.pattern import DEFAULT_PRODUCTIVITY_PATTERNS
from smart_planning.utils.config import get_default_config, load_config, merge_config, patterns_from_config


def test_load_yaml_config(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("scheduling:\n  focus_minutes: 50\n", encoding="utf-8")

    assert load_config(str(path)) == {"scheduling": {"focus_minutes": 50}}


def test_empty_yaml_config_is_empty_dict(tmp_path) -> None:
    path = tmp_path / "config.yml"
    path.write_text("", encoding="utf-8")

    assert load_config(str(path)) == {}


def test_load_json_config(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"scoring": {"energy_match": 40}}), encoding="utf-8")

    assert load_config(str(path))["scoring"]["energy_match"] == 40


def test_missing_config_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_unsupported_format_raises(tmp_path) -> None:
    path = tmp_path / "config.ini"
    path.write_text("[scheduling]\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(str(path))


def test_merge_keeps_unset_defaults() -> None:
    config = merge_config({"scheduling": {"focus_minutes": 45}, "logging": {"level": "DEBUG"}})

    assert config["scheduling"]["focus_minutes"] == 45
    assert config["scheduling"]["break_minutes"] == 15
    assert config["scoring"] == get_default_config()["scoring"]
    assert config["logging"]["level"] == "DEBUG"


def test_merge_does_not_leak_between_calls() -> None:
    overrides = {"scoring": {"morning_urgency_hours": [8]}}
    config = merge_config(overrides)
    config["scoring"]["morning_urgency_hours"].append(9)

    assert overrides["scoring"]["morning_urgency_hours"] == [8]
    assert merge_config(None)["scoring"]["morning_urgency_hours"] == [9, 10, 11]


def test_default_patterns_round_trip_through_config() -> None:
    assert patterns_from_config(get_default_config()) == list(DEFAULT_PRODUCTIVITY_PATTERNS)


def test_patterns_from_config_override() -> None:
    config = {"productivity_patterns": [
        {"hour": 8, "energyLevel": "high", "focusCapacity": 99, "taskTypes": ["urgent"]},
    ]}

    (pattern,) = patterns_from_config(config)

    assert (pattern.hour, pattern.energy_level, pattern.focus_capacity) == (8, "high", 99)
    assert pattern.task_types == ("urgent",)


def test_empty_pattern_table_uses_defaults() -> None:
    assert patterns_from_config({}) == list(DEFAULT_PRODUCTIVITY_PATTERNS)
