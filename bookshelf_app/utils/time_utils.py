"""
Centralized Utilities for Time Handling in Bookshelf.
Goal: Ensure consistent UTC storage, User-Timezone display and the
week-of-year values used by reading goals.
"""
from datetime import date, datetime, timezone
from typing import Optional

import pytz
from flask import current_app, has_app_context, has_request_context
from flask_login import current_user


def utcnow() -> datetime:
    """
    Get the current timezone-aware UTC datetime.
    Always use this instead of datetime.utcnow() or datetime.now().
    """
    return datetime.now(timezone.utc)


def get_weeks_in_year(year: int) -> int:
    """Number of ISO-8601 weeks in ``year`` (52 or 53)."""
    # 28 December always falls in the last ISO week of its year
    return date(year, 12, 28).isocalendar()[1]


def get_week_of_year(day: Optional[date] = None) -> int:
    """
    1-based ISO week of ``day``, clamped to ``day``'s calendar year.

    Early January days that ISO assigns to the previous year's last week
    count as week 1, late December days that ISO assigns to week 1 of the
    next year count as the last week of this year.
    """
    day = day or utcnow().date()
    iso_year, iso_week, _ = day.isocalendar()
    if iso_year < day.year:
        return 1
    if iso_year > day.year:
        return get_weeks_in_year(day.year)
    return iso_week


def _resolve_timezone(user=None):
    tz_name = current_app.config.get('SYSTEM_TIMEZONE', 'UTC') if has_app_context() else 'UTC'

    target_user = user
    if target_user is None and has_request_context():
        target_user = current_user
    if target_user is not None and getattr(target_user, 'is_authenticated', False):
        user_tz = getattr(target_user, 'timezone', None)
        if user_tz:
            tz_name = user_tz

    try:
        return pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        return pytz.UTC


def to_user_timezone(dt: Optional[datetime], user=None) -> Optional[datetime]:
    """
    Convert a timezone-aware (or naive-as-UTC) datetime to the user's timezone.

    Args:
        dt: The datetime object to convert (usually UTC).
        user: The user object (optional). If None, tries current_user.

    Returns:
        datetime: Timezone-aware datetime in user's local time.
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(_resolve_timezone(user))


def user_today(user=None) -> date:
    """The calendar date it currently is for ``user``."""
    return to_user_timezone(utcnow(), user).date()
