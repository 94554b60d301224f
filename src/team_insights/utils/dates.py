"""Date utility functions for Team Insights."""

from datetime import date, datetime


def as_date(value: date | datetime) -> date:
    """Drop the time part of a datetime, leaving dates untouched."""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_between(earlier: date, now: date | datetime) -> int:
    """Whole days elapsed from `earlier` to `now`."""
    return (as_date(now) - earlier).days


def is_within_days(day: date, now: date | datetime, days: int) -> bool:
    """True when `day` falls in the `days`-day window ending at `now`."""
    return 0 <= days_between(day, now) <= days


def month_label(reference: date | datetime, offset: int) -> str:
    """Label ("Mar 2026") for the month `offset` months from `reference`."""
    month_index = reference.year * 12 + (reference.month - 1) + offset
    year, month = divmod(month_index, 12)
    return date(year, month + 1, 1).strftime("%b %Y")
