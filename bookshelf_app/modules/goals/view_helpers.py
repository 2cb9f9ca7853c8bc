"""Utility functions shared between goal-aware views."""

from __future__ import annotations

from typing import Optional

from .constants import GOAL_TYPE_CONFIG
from .schemas import GoalProgressDTO


def get_progress_color_class(percent: int) -> str:
    """Return CSS class suffix for progress bars."""
    if percent >= 100:
        return 'success'
    if percent >= 75:
        return 'info'
    if percent >= 40:
        return 'primary'
    if percent > 0:
        return 'warning'
    return 'secondary'


def _pluralise(count: int, goal_type: str) -> str:
    config = GOAL_TYPE_CONFIG[goal_type]
    return config['unit_singular'] if count == 1 else config['unit']


def describe_schedule(progress: GoalProgressDTO) -> str:
    """Human readable sentence for where the user stands against their goal."""
    schedule = progress.schedule
    if schedule.goal_met:
        return (
            f"Congratulations, you have reached your goal of "
            f"{progress.target} {_pluralise(progress.target, progress.goal_type)}!"
        )
    if schedule.on_schedule:
        return "You are on schedule."
    return (
        f"You are {schedule.difference} {_pluralise(schedule.difference, progress.goal_type)} "
        f"{schedule.label} schedule."
    )


def build_goal_summary(progress: Optional[GoalProgressDTO]) -> Optional[dict[str, object]]:
    """Return a template-friendly representation of the goal progress."""
    if progress is None:
        return None

    config = GOAL_TYPE_CONFIG[progress.goal_type]
    percent = progress.percent
    return {
        'goal_id': progress.goal_id,
        'goal_type': progress.goal_type,
        'label': config['label'],
        'unit': config['unit'],
        'icon': config['icon'],
        'target': progress.target,
        'read': progress.read,
        'remaining': max(0, progress.target - progress.read),
        'year': progress.year,
        'current_week': progress.current_week,
        'weeks_in_year': progress.weeks_in_year,
        'per_week': progress.schedule.books_per_week,
        'per_week_unit': _pluralise(progress.schedule.books_per_week, progress.goal_type),
        'should_have_read': progress.schedule.should_have_read,
        'percent': percent,
        'color': get_progress_color_class(percent),
        'schedule_message': describe_schedule(progress),
        'is_completed': progress.schedule.goal_met,
    }
