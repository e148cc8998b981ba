"""Productivity scoring and recommendations from completed tasks."""

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..models.pattern import DEFAULT_PRODUCTIVITY_PATTERNS, ProductivityPattern, find_pattern
from ..models.schedule import ProductivityAnalysis
from ..models.task import Task
from ..utils.datetime_utils import is_same_day, to_local

logger = logging.getLogger(__name__)

DEFAULT_ANALYSIS = {
    'points_per_task': 15,
    'max_task_points': 60,
    'urgent_bonus': 25,
    'high_bonus': 15,
}

MAX_SCORE = 100

INSIGHT_NOTHING_DONE = "📊 Сегодня еще не выполнено ни одной задачи"
INSIGHT_DONE_COUNT = "✅ Выполнено {count} задач сегодня"
INSIGHT_URGENT_DONE = "🔥 Отлично! Выполнено {count} срочных задач"
INSIGHT_HIGH_DONE = "⚡ Выполнено {count} важных задач"

RECOMMEND_EASY_START = "🎯 Начните с самой простой задачи для создания импульса"
RECOMMEND_HIGH_ENERGY = "🚀 Сейчас пик продуктивности - идеальное время для сложных задач!"
RECOMMEND_LOW_ENERGY = "😴 Энергия на низком уровне - займитесь простыми задачами или сделайте перерыв"
RECOMMEND_MEDIUM_ENERGY = "⚡ Хорошее время для задач средней сложности"
RECOMMEND_MORNING = "🌅 Утренние часы - лучшее время для креативной работы"
RECOMMEND_AFTERNOON = "☀️ Послеобеденное время - хорошо для встреч и коммуникации"
RECOMMEND_EVENING = "🌆 Вечер - время для планирования завтрашнего дня"


def analyze_productivity_and_suggest(
    completed_tasks: Sequence[Task],
    now: Optional[datetime] = None,
    patterns: Sequence[ProductivityPattern] = DEFAULT_PRODUCTIVITY_PATTERNS,
    config: Optional[dict] = None,
) -> ProductivityAnalysis:
    """Score today's completions and suggest what to do next.

    Only tasks completed on the same calendar day as ``now`` count. The
    score is clamped to 0-100. Recommendations depend on the hour of
    ``now``: one from the hour's energy level (hours missing from the
    pattern table give none) and one from the time of day.
    """
    if now is None:
        now = datetime.now()
    
    weights = dict(DEFAULT_ANALYSIS)
    weights.update((config or {}).get('analysis', {}))
    
    insights = []
    recommendations = []
    
    today_tasks = [
        task for task in completed_tasks
        if task.completed_at and is_same_day(task.completed_at, now)
    ]
    
    score = min(len(today_tasks) * weights['points_per_task'], weights['max_task_points'])
    
    if not today_tasks:
        insights.append(INSIGHT_NOTHING_DONE)
        recommendations.append(RECOMMEND_EASY_START)
    else:
        insights.append(INSIGHT_DONE_COUNT.format(count=len(today_tasks)))
    
    urgent_completed = sum(1 for task in today_tasks if task.priority == 'urgent')
    high_completed = sum(1 for task in today_tasks if task.priority == 'high')
    
    if urgent_completed > 0:
        score += weights['urgent_bonus']
        insights.append(INSIGHT_URGENT_DONE.format(count=urgent_completed))
    
    if high_completed > 0:
        score += weights['high_bonus']
        insights.append(INSIGHT_HIGH_DONE.format(count=high_completed))
    
    hour = to_local(now).hour
    pattern = find_pattern(patterns, hour)
    
    if pattern is not None:
        if pattern.energy_level == 'high':
            recommendations.append(RECOMMEND_HIGH_ENERGY)
        elif pattern.energy_level == 'low':
            recommendations.append(RECOMMEND_LOW_ENERGY)
        else:
            recommendations.append(RECOMMEND_MEDIUM_ENERGY)
    
    if 9 <= hour <= 11:
        recommendations.append(RECOMMEND_MORNING)
    elif 14 <= hour <= 16:
        recommendations.append(RECOMMEND_AFTERNOON)
    elif hour >= 17:
        recommendations.append(RECOMMEND_EVENING)
    
    score = int(min(max(score, 0), MAX_SCORE))
    
    logger.debug(
        "Productivity for %s: %d completed today, score %d",
        now.date(), len(today_tasks), score,
    )
    
    return ProductivityAnalysis(score=score, insights=insights, recommendations=recommendations)
