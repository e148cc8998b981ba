"""Main entry point for the Smart Planning Engine."""

import argparse
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from smart_planning.analysis.productivity import analyze_productivity_and_suggest
from smart_planning.engine.scheduler import DailyScheduler
from smart_planning.evaluation.generator import TaskGenerator
from smart_planning.models.task import Task, UserPreferences
from smart_planning.utils.config import load_config, merge_config, patterns_from_config
from smart_planning.utils.datetime_utils import parse_datetime
from smart_planning.utils.logging import configure_logging
from smart_planning.utils.validation import validate_task, validate_time_range

logger = logging.getLogger(__name__)


def build_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load a config file over the defaults; a missing file means defaults."""
    if config_path and Path(config_path).exists():
        return merge_config(load_config(config_path))
    return merge_config(None)


def load_tasks(tasks_path: str) -> List[Task]:
    """Load tasks from a JSON list, skipping entries that fail validation."""
    with open(tasks_path, 'r', encoding='utf-8') as f:
        raw_tasks = json.load(f)
    
    tasks = []
    for index, data in enumerate(raw_tasks):
        result = validate_task(data)
        if not result.is_valid:
            for error in result.errors:
                logger.warning("Skipping task #%d (%s): %s", index, data.get('title'), error)
            continue
        tasks.append(Task.from_dict(data))
    
    logger.info("Loaded %d of %d tasks from %s", len(tasks), len(raw_tasks), tasks_path)
    return tasks


def load_preferences(preferences_path: Optional[str]) -> UserPreferences:
    """Load user preferences from JSON, warning about an unusable working-hours range."""
    if not preferences_path:
        return UserPreferences()
    
    with open(preferences_path, 'r', encoding='utf-8') as f:
        preferences = UserPreferences.from_dict(json.load(f))
    
    if preferences.working_hours_start and preferences.working_hours_end:
        result = validate_time_range(preferences.working_hours_start, preferences.working_hours_end)
        for error in result.errors:
            logger.warning("Working hours %s-%s: %s", preferences.working_hours_start,
                           preferences.working_hours_end, error)
    
    return preferences


def get_tasks(args, config: Dict[str, Any], day: datetime) -> List[Task]:
    """Tasks from --tasks, or a generated sample set for the day."""
    if args.tasks:
        return load_tasks(args.tasks)
    
    generator = TaskGenerator(seed=42, config=config)
    return generator.generate_tasks(args.count, day)


def run_scheduling(args, config: Dict[str, Any]):
    """Build and save the schedule for one day."""
    day = parse_datetime(args.date) if args.date else datetime.now()
    now = parse_datetime(args.now) if args.now else None
    
    tasks = get_tasks(args, config, day)
    preferences = load_preferences(args.preferences)
    
    scheduler = DailyScheduler(config=config)
    schedule = scheduler.create_daily_schedule(tasks, preferences, day, now)
    
    print(f"\nScheduled {len(schedule.slots)} of {schedule.summary['tasks_total']} tasks "
          f"for {day.date()}")
    print(f"Productivity score: {schedule.productivity_score}")
    
    output_dir = Path(args.output_dir)
    output_dir.mkdir(exist_ok=True)
    
    schedule_path = output_dir / f"schedule_{day.date().isoformat()}.json"
    with open(schedule_path, 'w', encoding='utf-8') as f:
        json.dump(schedule.to_dict(), f, indent=2, ensure_ascii=False, default=str)
    
    log_path = output_dir / f"schedule_{day.date().isoformat()}.log"
    with open(log_path, 'w', encoding='utf-8') as f:
        f.write(schedule.to_human_readable())
    
    print(f"Schedule saved to: {schedule_path}")
    print(f"Human-readable log saved to: {log_path}")
    
    return schedule


def run_analysis(args, config: Dict[str, Any]):
    """Print and save the productivity analysis."""
    now = parse_datetime(args.now) if args.now else datetime.now()
    
    tasks = get_tasks(args, config, now)
    completed = [task for task in tasks if task.status == 'completed']
    
    analysis = analyze_productivity_and_suggest(
        completed, now=now, patterns=patterns_from_config(config), config=config,
    )
    
    print(f"\nProductivity score: {analysis.score}")
    for insight in analysis.insights:
        print(f"  {insight}")
    for recommendation in analysis.recommendations:
        print(f"  {recommendation}")
    
    output_dir = Path(args.output_dir)
    output_dir.mkdir(exist_ok=True)
    
    analysis_path = output_dir / f"analysis_{now.date().isoformat()}.json"
    with open(analysis_path, 'w', encoding='utf-8') as f:
        json.dump(analysis.to_dict(), f, indent=2, ensure_ascii=False)
    
    print(f"\nAnalysis saved to: {analysis_path}")
    
    return analysis


def run_generate_tasks(args, config: Dict[str, Any]):
    """Write a deterministic sample task list."""
    day = parse_datetime(args.date) if args.date else datetime.now()
    
    generator = TaskGenerator(seed=args.seed, config=config)
    tasks = generator.generate_tasks(args.count, day)
    
    output_dir = Path(args.output_dir)
    output_dir.mkdir(exist_ok=True)
    
    tasks_path = output_dir / "generated_tasks.json"
    with open(tasks_path, 'w', encoding='utf-8') as f:
        json.dump([task.to_dict() for task in tasks], f, indent=2, ensure_ascii=False)
    
    print(f"Generated {len(tasks)} tasks")
    print(f"Tasks saved to: {tasks_path}")
    
    return tasks


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Smart Planning Engine"
    )
    parser.add_argument(
        'command',
        choices=['schedule', 'analyze', 'generate-tasks'],
        help='Command to run'
    )
    parser.add_argument(
        '--config',
        type=str,
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    parser.add_argument(
        '--tasks',
        type=str,
        help='JSON file with a list of tasks (default: generated sample tasks)'
    )
    parser.add_argument(
        '--preferences',
        type=str,
        help='JSON file with working hours, focusTime and breakTime'
    )
    parser.add_argument(
        '--date',
        type=str,
        help='Day to plan, ISO format (default: today)'
    )
    parser.add_argument(
        '--now',
        type=str,
        help='Reference instant for productivity analysis, ISO format (default: now)'
    )
    parser.add_argument(
        '--count',
        type=int,
        default=12,
        help='Number of sample tasks to generate (default: 12)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=42,
        help='Seed for sample task generation (default: 42)'
    )
    parser.add_argument(
        '--output-dir',
        type=str,
        default='results',
        help='Directory for output files (default: results)'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        help='Logging level (default: from config, INFO)'
    )
    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = build_parser().parse_args(argv)
    
    config = build_config(args.config)
    configure_logging(log_level=(args.log_level or config['logging']['level']).upper())
    
    if args.command == 'schedule':
        run_scheduling(args, config)
    elif args.command == 'analyze':
        run_analysis(args, config)
    elif args.command == 'generate-tasks':
        run_generate_tasks(args, config)


if __name__ == "__main__":
    main()
