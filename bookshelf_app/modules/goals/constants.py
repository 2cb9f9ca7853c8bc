"""Shared configuration for reading goals."""

from __future__ import annotations

from enum import Enum


class GoalType(str, Enum):
    """What a yearly reading goal counts."""

    BOOKS = 'books'
    PAGES = 'pages'


GOAL_TYPE_CONFIG: dict[str, dict[str, str]] = {
    GoalType.BOOKS.value: {
        'label': 'Books',
        'unit': 'books',
        'unit_singular': 'book',
        'icon': 'book',
    },
    GoalType.PAGES.value: {
        'label': 'Pages',
        'unit': 'pages',
        'unit_singular': 'page',
        'icon': 'file-lines',
    },
}

GOAL_TYPE_CHOICES: list[tuple[str, str]] = [
    (key, config['label']) for key, config in GOAL_TYPE_CONFIG.items()
]

BEHIND = 'behind'
AHEAD_OF = 'ahead of'
