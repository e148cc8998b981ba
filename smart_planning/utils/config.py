"""Configuration management."""

import copy
import json
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional

from ..models.pattern import DEFAULT_PRODUCTIVITY_PATTERNS, ProductivityPattern


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file."""
    path = Path(config_path)
    
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            return yaml.safe_load(f) or {}
        elif path.suffix.lower() == '.json':
            return json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'scheduling': {
            'working_hours_start': '09:00',
            'working_hours_end': '18:00',
            'focus_minutes': 90,
            'break_minutes': 15,
            'default_task_minutes': 30,
        },
        'scoring': {
            'energy_match': 30,
            'energy_adjacent': 15,
            'task_type_match': 25,
            'focus_capacity_factor': 0.2,
            'morning_urgency_bonus': 20,
            'morning_urgency_hours': [9, 10, 11],
        },
        'analysis': {
            'points_per_task': 15,
            'max_task_points': 60,
            'urgent_bonus': 25,
            'high_bonus': 15,
        },
        'productivity_patterns': [p.to_dict() for p in DEFAULT_PRODUCTIVITY_PATTERNS],
        'logging': {
            'level': 'INFO',
        },
    }


def merge_config(overrides: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Deep-merge a (possibly partial) config onto the defaults."""
    config = get_default_config()
    _merge_into(config, overrides or {})
    return config


def patterns_from_config(config: Dict[str, Any]) -> List[ProductivityPattern]:
    """Build the productivity pattern table from config."""
    rows = config.get('productivity_patterns')
    if not rows:
        return list(DEFAULT_PRODUCTIVITY_PATTERNS)
    return [ProductivityPattern.from_dict(row) for row in rows]


def _merge_into(base: Dict[str, Any], overrides: Dict[str, Any]) -> None:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge_into(base[key], value)
        else:
            base[key] = copy.deepcopy(value)
