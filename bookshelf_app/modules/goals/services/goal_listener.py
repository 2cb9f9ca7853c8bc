"""
Goal Listener
Listens to shelf events and announces when a yearly goal is reached.
"""
import logging

from bookshelf_app.core.signals import book_finished, reading_goal_reached
from ..constants import GoalType
from .goal_service import ReadingGoalService

logger = logging.getLogger(__name__)


def handle_book_finished(sender, **kwargs):
    """
    Listener for the book_finished signal.
    Emits reading_goal_reached when this book is the one that meets the target.
    """
    user_id = kwargs.get('user_id')
    date_finished = kwargs.get('date_finished')
    if not user_id or date_finished is None:
        return

    progress = ReadingGoalService.get_progress(user_id)
    if progress is None or date_finished.year != progress.year:
        return

    if progress.goal_type == GoalType.BOOKS.value:
        contribution = 1
    else:
        contribution = kwargs.get('number_of_pages') or 0

    if progress.read >= progress.target > progress.read - contribution:
        logger.info(
            "User %s reached their %s goal of %s %s",
            user_id, progress.year, progress.target, progress.goal_type,
        )
        reading_goal_reached.send(
            'goal_listener',
            user_id=user_id,
            goal_id=progress.goal_id,
            goal_type=progress.goal_type,
            target=progress.target,
            read=progress.read,
        )


def init_listener():
    book_finished.connect(handle_book_finished)
