"""
Reading Goal Service
Persists yearly goals and feeds the read shelf and the user's current date
into the pure calculation layer.
"""

import logging
from datetime import date
from typing import Optional

from bookshelf_app.core.error_handlers import NotFoundError, ValidationError
from bookshelf_app.core.extensions import db
from bookshelf_app.models import Book, ReadingGoal, User
from bookshelf_app.modules.shelves.services import PredefinedShelfService
from bookshelf_app.utils.time_utils import get_week_of_year, get_weeks_in_year, user_today
from ..constants import GoalType
from ..logics.calculation import compute_schedule, how_many_read_this_year
from ..schemas import GoalProgressDTO

logger = logging.getLogger(__name__)


class ReadingGoalService:

    @staticmethod
    def _today_for(user_id: int) -> date:
        return user_today(db.session.get(User, user_id))

    @staticmethod
    def get_goal(user_id: int, year: Optional[int] = None) -> Optional[ReadingGoal]:
        if year is None:
            year = ReadingGoalService._today_for(user_id).year
        return ReadingGoal.query.filter_by(user_id=user_id, year=year).first()

    @staticmethod
    def set_goal(user_id: int, goal_type, target: int, year: Optional[int] = None) -> ReadingGoal:
        """Create or replace the user's goal for ``year`` (default: the user's current year)."""
        try:
            goal_type = GoalType(goal_type)
        except ValueError as exc:
            raise ValidationError(
                f"Unknown goal type '{goal_type}'",
                errors={'goal_type': f"must be one of {', '.join(t.value for t in GoalType)}"},
            ) from exc
        if target is None or target < 1:
            raise ValidationError('Invalid goal target', errors={'target': 'must be at least 1'})

        if year is None:
            year = ReadingGoalService._today_for(user_id).year

        goal = ReadingGoal.query.filter_by(user_id=user_id, year=year).first()
        if goal is None:
            goal = ReadingGoal(user_id=user_id, year=year)
            db.session.add(goal)
        goal.goal_type = goal_type.value
        goal.target = target
        db.session.commit()
        logger.info("User %s set %s goal to %s %s", user_id, year, target, goal_type.value)
        return goal

    @staticmethod
    def delete_goal(user_id: int, year: Optional[int] = None) -> None:
        goal = ReadingGoalService.get_goal(user_id, year)
        if goal is None:
            raise NotFoundError('No reading goal set for this year', resource='reading_goal')
        goal_year = goal.year
        db.session.delete(goal)
        db.session.commit()
        logger.info("User %s deleted %s goal", user_id, goal_year)

    @staticmethod
    def count_read_this_year(user_id: int, goal_type, year: int) -> int:
        read_shelf = PredefinedShelfService.get_read_shelf(user_id)
        if read_shelf is None:
            logger.warning("User %s has no read shelf", user_id)
            return 0
        books = Book.query.filter_by(shelf_id=read_shelf.shelf_id).all()
        return how_many_read_this_year(goal_type, books, year)

    @staticmethod
    def get_progress(user_id: int, today: Optional[date] = None) -> Optional[GoalProgressDTO]:
        """Progress towards this year's goal, or None when no goal is set."""
        today = today or ReadingGoalService._today_for(user_id)
        goal = ReadingGoalService.get_goal(user_id, today.year)
        if goal is None:
            return None

        read = ReadingGoalService.count_read_this_year(user_id, goal.goal_type, today.year)
        current_week = get_week_of_year(today)
        weeks_in_year = get_weeks_in_year(today.year)
        schedule = compute_schedule(goal.target, read, current_week, weeks_in_year)

        return GoalProgressDTO(
            goal_id=goal.goal_id,
            goal_type=goal.goal_type,
            target=goal.target,
            year=goal.year,
            read=read,
            current_week=current_week,
            weeks_in_year=weeks_in_year,
            schedule=schedule,
        )
