from .goal_service import ReadingGoalService

__all__ = ['ReadingGoalService']
