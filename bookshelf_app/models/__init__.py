"""Database models package for Bookshelf."""

from ..core.extensions import db

from .user import User
from .book import Book, PredefinedShelf
from .reading_goal import ReadingGoal

__all__ = [
    'db',
    'User',
    'Book',
    'PredefinedShelf',
    'ReadingGoal',
]
