"""
Date normalization.

Turns the date representations callers hand us (``date``, ``datetime``,
``YYYY-MM-DD`` / ``YYYY/MM/DD`` strings) into a plain ``datetime.date``.
"""
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional, Union

from .exceptions import InvalidDateError

DateLike = Union[date, datetime, str, None]

DATE_FORMATS = ("%Y-%m-%d", "%Y/%m/%d")


def to_date(value: DateLike) -> Optional[date]:
    """Normalize ``value`` to a date, or ``None`` if it is not a date."""
    if value is None:
        return None
    # datetime is a date subclass; drop the time part
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
    return None


def parse_date(value: DateLike) -> date:
    """Strict variant of :func:`to_date` for user-facing input."""
    parsed = to_date(value)
    if parsed is None:
        raise InvalidDateError(
            message="Not a date; expected YYYY-MM-DD or YYYY/MM/DD",
            value=None if value is None else str(value),
        )
    return parsed


def next_day(d: date) -> Optional[date]:
    """The following calendar day, or ``None`` past ``date.max``."""
    try:
        return d + timedelta(days=1)
    except OverflowError:
        return None


def previous_day(d: date) -> Optional[date]:
    """The preceding calendar day, or ``None`` before ``date.min``."""
    try:
        return d - timedelta(days=1)
    except OverflowError:
        return None
