"""
Stateless calculation logic for reading goal progress.
Pure functions, no database or Flask dependencies.

The week of the year, the number of weeks in the year and the evaluation
year are always passed in by the caller; see ``utils.time_utils`` for how
the service layer derives them from the user's current date.
"""

from typing import Iterable, Optional, Union

from ..constants import AHEAD_OF, BEHIND, GoalType
from ..schemas import ScheduleDTO


def books_to_read_from_start_of_year(goal: int, weeks_in_year: int) -> int:
    """Weekly pace needed to reach ``goal`` by the end of the year, rounded up."""
    if weeks_in_year <= 0:
        raise ZeroDivisionError(f"weeks_in_year must be positive, got {weeks_in_year}")
    return -(-goal // weeks_in_year)


def should_have_read(goal: int, current_week: int, weeks_in_year: int) -> int:
    """
    Number of books (or pages) that should have been read by ``current_week``
    to be on target, assuming a linear reading pace.
    """
    return books_to_read_from_start_of_year(goal, weeks_in_year) * current_week


def how_many_read_this_year(
    goal_type: Union[GoalType, str],
    shelf: Iterable[Optional[object]],
    year: int,
) -> int:
    """
    Count the books, or sum the pages, finished during ``year``.

    ``shelf`` is iterated once. Entries may be ``None`` and are skipped, as
    are books without a finish date. A missing page count adds nothing.
    """
    looking_for_books = GoalType(goal_type) is GoalType.BOOKS
    read_this_year = 0
    for book in shelf:
        if book is None:
            continue
        finished = book.date_finished_reading
        # only books that have been given a finish date count towards the goal
        if finished is None or finished.year != year:
            continue
        if looking_for_books:
            read_this_year += 1
        else:
            read_this_year += book.number_of_pages or 0
    return read_this_year


def how_far_ahead_or_behind_schedule(goal: int, read: int, current_week: int, weeks_in_year: int) -> int:
    """Distance from the on-schedule count. Magnitude only, see ``behind_or_ahead_schedule``."""
    return abs(should_have_read(goal, current_week, weeks_in_year) - read)


def calculate_progress_towards_reading_goal(goal: int, read: int) -> float:
    """Fraction of the goal achieved, capped at 1.0. A goal of zero gives 0.0."""
    progress = 0.0 if goal == 0 else read / goal
    return min(progress, 1.0)


def behind_or_ahead_schedule(read: int, should_have_read_count: int) -> str:
    """
    'behind' when fewer than ``should_have_read_count`` have been read,
    'ahead of' otherwise (including exactly on schedule).

    Callers are expected to handle the goal-met and on-schedule cases first.
    """
    return BEHIND if read < should_have_read_count else AHEAD_OF


def compute_schedule(goal: int, read: int, current_week: int, weeks_in_year: int) -> ScheduleDTO:
    """Derive every schedule figure from a single on-schedule count."""
    pace = books_to_read_from_start_of_year(goal, weeks_in_year)
    expected = pace * current_week
    return ScheduleDTO(
        books_per_week=pace,
        should_have_read=expected,
        difference=abs(expected - read),
        label=behind_or_ahead_schedule(read, expected),
        progress=calculate_progress_towards_reading_goal(goal, read),
        goal_met=read >= goal,
        on_schedule=read == expected,
    )
