"""
Date helpers used when presenting due dates
"""
from datetime import date, datetime, timedelta
from typing import Optional


def _as_date(value: datetime) -> date:
    return value.date()


def is_same_day(value: datetime, other: datetime) -> bool:
    return _as_date(value) == _as_date(other)


def is_today(value: datetime, now: Optional[datetime] = None) -> bool:
    return is_same_day(value, now or datetime.now())


def is_tomorrow(value: datetime, now: Optional[datetime] = None) -> bool:
    now = now or datetime.now()
    return _as_date(value) == _as_date(now) + timedelta(days=1)


def is_yesterday(value: datetime, now: Optional[datetime] = None) -> bool:
    now = now or datetime.now()
    return _as_date(value) == _as_date(now) - timedelta(days=1)


def is_this_week(value: datetime, now: Optional[datetime] = None) -> bool:
    """True when value falls in the ISO week (Monday to Sunday) containing now."""
    now = now or datetime.now()
    return value.isocalendar()[:2] == now.isocalendar()[:2]


def is_overdue(value: datetime, now: Optional[datetime] = None) -> bool:
    return value < (now or datetime.now())


def format_due_date(value: datetime, include_time: bool = True) -> str:
    """Medium-style date, e.g. 'Mar 21, 2025' or 'Mar 21, 2025 at 9:30 AM'."""
    text = f"{value:%b} {value.day}, {value.year}"
    if include_time:
        hour = value.hour % 12 or 12
        text += f" at {hour}:{value:%M %p}"
    return text


def relative_date_string(value: datetime, now: Optional[datetime] = None) -> str:
    """Short human label for a due date relative to now."""
    now = now or datetime.now()
    if is_today(value, now):
        return "Today"
    if is_tomorrow(value, now):
        return "Tomorrow"
    if is_yesterday(value, now):
        return "Yesterday"

    days = (_as_date(value) - _as_date(now)).days
    if days > 0:
        return f"in {days} days"
    return f"{-days} days ago"


__all__ = [
    "is_same_day",
    "is_today",
    "is_tomorrow",
    "is_yesterday",
    "is_this_week",
    "is_overdue",
    "format_due_date",
    "relative_date_string",
]
