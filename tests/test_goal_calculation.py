"""
Tests for the reading goal calculator - pure functions, no app needed.

Tests cover:
- Weekly pace and on-schedule counts
- Counting books and pages read in a year
- Progress fraction and schedule labels
- The combined schedule pipeline
"""

from datetime import date
from types import SimpleNamespace

import pytest

from bookshelf_app.modules.goals.constants import AHEAD_OF, BEHIND, GoalType
from bookshelf_app.modules.goals.logics.calculation import (
    behind_or_ahead_schedule,
    books_to_read_from_start_of_year,
    calculate_progress_towards_reading_goal,
    compute_schedule,
    how_far_ahead_or_behind_schedule,
    how_many_read_this_year,
    should_have_read,
)

YEAR = 2024


def make_book(finished=None, pages=None):
    return SimpleNamespace(date_finished_reading=finished, number_of_pages=pages)


@pytest.fixture
def read_shelf():
    return [
        make_book(date(YEAR, 1, 15), 100),
        make_book(date(YEAR, 3, 2), 200),
        make_book(date(YEAR, 6, 30), None),
        make_book(date(YEAR - 1, 12, 31), 500),
    ]


class TestWeeklyPace:

    def test_goal_of_zero_needs_no_books(self):
        assert books_to_read_from_start_of_year(0, 52) == 0

    @pytest.mark.parametrize('weeks_in_year', [52, 53])
    def test_any_positive_goal_needs_at_least_one_a_week(self, weeks_in_year):
        for goal in range(1, 200):
            assert books_to_read_from_start_of_year(goal, weeks_in_year) >= 1

    def test_pace_rounds_up(self):
        assert books_to_read_from_start_of_year(52, 52) == 1
        assert books_to_read_from_start_of_year(53, 52) == 2
        assert books_to_read_from_start_of_year(104, 52) == 2
        assert books_to_read_from_start_of_year(12, 53) == 1

    def test_pace_is_exact_for_very_large_goals(self):
        assert books_to_read_from_start_of_year(52 * 2**53 + 1, 52) == 2**53 + 1
        assert books_to_read_from_start_of_year(52 * 2**60, 52) == 2**60

    @pytest.mark.parametrize('weeks_in_year', [0, -1])
    def test_non_positive_weeks_is_a_division_fault(self, weeks_in_year):
        with pytest.raises(ZeroDivisionError):
            books_to_read_from_start_of_year(10, weeks_in_year)

    def test_should_have_read_in_week_ten(self):
        assert books_to_read_from_start_of_year(52, 52) == 1
        assert should_have_read(52, current_week=10, weeks_in_year=52) == 10

    def test_should_have_read_uses_rounded_pace(self):
        # ceil(60 / 52) == 2 books a week
        assert should_have_read(60, current_week=3, weeks_in_year=52) == 6


class TestHowManyReadThisYear:

    def test_counts_books_finished_this_year(self, read_shelf):
        assert how_many_read_this_year(GoalType.BOOKS, read_shelf, YEAR) == 3

    def test_sums_pages_with_missing_counts_as_zero(self, read_shelf):
        assert how_many_read_this_year(GoalType.PAGES, read_shelf, YEAR) == 300

    def test_accepts_goal_type_value(self, read_shelf):
        assert how_many_read_this_year('pages', read_shelf, YEAR) == 300

    def test_null_entries_are_skipped(self, read_shelf):
        shelf = [None] + read_shelf + [None]
        assert how_many_read_this_year(GoalType.BOOKS, shelf, YEAR) == 3
        assert how_many_read_this_year(GoalType.PAGES, shelf, YEAR) == 300

    def test_books_without_finish_date_do_not_count(self):
        shelf = [make_book(None, 300), make_book(date(YEAR, 2, 1), 50)]
        assert how_many_read_this_year(GoalType.BOOKS, shelf, YEAR) == 1
        assert how_many_read_this_year(GoalType.PAGES, shelf, YEAR) == 50

    def test_empty_shelf(self):
        assert how_many_read_this_year(GoalType.BOOKS, [], YEAR) == 0

    def test_shelf_is_consumed_in_one_pass(self, read_shelf):
        assert how_many_read_this_year(GoalType.BOOKS, iter(read_shelf), YEAR) == 3

    def test_year_is_explicit(self, read_shelf):
        assert how_many_read_this_year(GoalType.BOOKS, read_shelf, YEAR - 1) == 1


class TestScheduleDifference:

    @pytest.mark.parametrize('goal, read', [(52, 0), (52, 10), (52, 30), (0, 5), (200, 3)])
    def test_difference_is_never_negative(self, goal, read):
        assert how_far_ahead_or_behind_schedule(goal, read, current_week=10, weeks_in_year=52) >= 0

    def test_behind_and_ahead_have_same_magnitude(self):
        assert how_far_ahead_or_behind_schedule(52, 7, current_week=10, weeks_in_year=52) == 3
        assert how_far_ahead_or_behind_schedule(52, 13, current_week=10, weeks_in_year=52) == 3


class TestProgress:

    def test_goal_of_zero_gives_no_progress(self):
        assert calculate_progress_towards_reading_goal(0, 0) == 0.0
        assert calculate_progress_towards_reading_goal(0, 12) == 0.0

    def test_progress_is_clamped_to_one(self):
        assert calculate_progress_towards_reading_goal(10, 20) == 1.0

    def test_progress_fraction(self):
        assert calculate_progress_towards_reading_goal(4, 1) == 0.25

    def test_progress_stays_in_unit_interval(self):
        for goal in range(1, 30):
            for read in range(0, 60):
                assert 0.0 <= calculate_progress_towards_reading_goal(goal, read) <= 1.0


class TestScheduleLabel:

    def test_behind(self):
        assert behind_or_ahead_schedule(5, 10) == BEHIND == 'behind'

    def test_ahead(self):
        assert behind_or_ahead_schedule(10, 5) == AHEAD_OF == 'ahead of'

    def test_exactly_on_schedule_is_reported_as_ahead(self):
        assert behind_or_ahead_schedule(5, 5) == 'ahead of'


class TestComputeSchedule:

    def test_behind_schedule(self):
        schedule = compute_schedule(52, 7, current_week=10, weeks_in_year=52)

        assert schedule.books_per_week == 1
        assert schedule.should_have_read == 10
        assert schedule.difference == 3
        assert schedule.label == 'behind'
        assert schedule.progress == pytest.approx(7 / 52)
        assert schedule.goal_met is False
        assert schedule.on_schedule is False

    def test_matches_individual_functions(self):
        goal, read, week, weeks = 100, 25, 14, 53
        schedule = compute_schedule(goal, read, week, weeks)

        assert schedule.should_have_read == should_have_read(goal, week, weeks)
        assert schedule.difference == how_far_ahead_or_behind_schedule(goal, read, week, weeks)
        assert schedule.label == behind_or_ahead_schedule(read, schedule.should_have_read)
        assert schedule.progress == calculate_progress_towards_reading_goal(goal, read)

    def test_on_schedule(self):
        schedule = compute_schedule(52, 10, current_week=10, weeks_in_year=52)
        assert schedule.on_schedule is True
        assert schedule.difference == 0

    def test_goal_met(self):
        schedule = compute_schedule(12, 12, current_week=20, weeks_in_year=52)
        assert schedule.goal_met is True
        assert schedule.progress == 1.0
