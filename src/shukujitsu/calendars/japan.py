"""
Japanese National Holiday Calendar

Resolves a date to its holiday name under the National Holidays Act, as
amended since 1948. Three layers are evaluated in order:

1. Named holidays (``HOLIDAY_RULES``), first match wins.
2. Substitute holidays (振替休日, since 1973): a holiday falling on Sunday
   moves to the next day that is not already a holiday.
3. Citizen's holidays (国民の休日): a non-Sunday sandwiched between two
   holidays is itself a holiday.

Layers 1-2 are exposed as ``base_holiday_name()`` and never consult layer 3;
layer 3 evaluates the neighbouring days through ``base_holiday_name()`` only.
Keeping the two entry points separate is what stops the bridge check from
recursing into itself.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from typing import Optional

from ..dates import DateLike, next_day, previous_day, to_date
from .base import BaseCalendar, HolidayResult
from .rules import matching_rule

logger = logging.getLogger(__name__)

# 1973-04-12 amendment introducing 振替休日
SUBSTITUTE_HOLIDAY_LAW_YEAR = 1973
SUBSTITUTE_HOLIDAY_SUFFIX = "振替休日"
CITIZENS_HOLIDAY_NAME = "国民の休日"

SUNDAY = 7


def substitute_holiday(d: date) -> Optional[str]:
    """
    Name of the substitute holiday observed on ``d``, if any.

    Walks backwards from the previous day across an unbroken run of named
    holidays; if the run starts on a Sunday, ``d`` carries that Sunday
    holiday's observance.

    Returns:
        ``"<holiday name> 振替休日"`` or None
    """
    if d.year < SUBSTITUTE_HOLIDAY_LAW_YEAR:
        return None

    # A substitute holiday never lands on a Sunday
    if d.isoweekday() == SUNDAY:
        return None

    current = previous_day(d)
    while current is not None:
        rule = matching_rule(current)
        if rule is None:
            return None
        if current.isoweekday() == SUNDAY:
            return f"{rule.name} {SUBSTITUTE_HOLIDAY_SUFFIX}"
        current = previous_day(current)
    return None


def base_holiday_name(d: date) -> Optional[str]:
    """Named or substitute holiday on ``d``; citizen's holidays excluded."""
    rule = matching_rule(d)
    if rule is not None:
        return rule.name
    return substitute_holiday(d)


def national_holiday_name(d: date) -> Optional[str]:
    """Holiday name on ``d`` including the citizen's-holiday bridge."""
    name = base_holiday_name(d)
    if name is not None:
        return name

    if d.isoweekday() == SUNDAY:
        return None

    before = previous_day(d)
    after = next_day(d)
    if before is None or after is None:
        return None

    if base_holiday_name(before) is not None and base_holiday_name(after) is not None:
        return CITIZENS_HOLIDAY_NAME
    return None


@dataclass
class JapanCalendar(BaseCalendar):
    """
    Japanese national holiday calendar.

    Holds no per-year state; year listings come from the bounded
    ``get_japan_holidays`` cache.
    """

    def get_holiday_name(self, d: date) -> Optional[str]:
        return national_holiday_name(d)

    def _compute_holidays_for_year(self, year: int) -> tuple[HolidayResult, ...]:
        logger.debug(f"Computing holidays for {year}")
        holidays: list[HolidayResult] = []
        for month in range(1, 13):
            holidays.extend(super().holidays_in_month(year, month))
        return tuple(holidays)

    def holidays_in_year(self, year: int) -> list[HolidayResult]:
        return list(get_japan_holidays(year))

    def holidays_in_month(self, year: int, month: int) -> list[HolidayResult]:
        if not 1 <= month <= 12:
            return []
        return [h for h in get_japan_holidays(year) if h.date.month == month]


# Pre-configured calendar instance
JAPAN_CALENDAR = JapanCalendar()


@lru_cache(maxsize=128)
def get_japan_holidays(year: int) -> tuple[HolidayResult, ...]:
    """Get Japanese national holidays for a year (cached, at most 128 years)."""
    if not date.min.year <= year <= date.max.year:
        return ()
    return JAPAN_CALENDAR._compute_holidays_for_year(year)


# =============================================================================
# Public API (accepts any DateLike)
# =============================================================================

def holiday_name(value: DateLike) -> Optional[str]:
    """
    Get the holiday name for a date.

    Args:
        value: ``date``, ``datetime``, or a ``YYYY-MM-DD`` / ``YYYY/MM/DD`` string

    Returns:
        The holiday name, or None if the date is not a holiday (or not a date)

    Example:
        >>> holiday_name("2024-01-01")
        '元日'
    """
    d = to_date(value)
    if d is None:
        return None
    return JAPAN_CALENDAR.get_holiday_name(d)


# Alias of holiday_name
is_holiday_name = holiday_name


def is_holiday(value: DateLike) -> bool:
    """Check if a date is a Japanese national holiday."""
    return holiday_name(value) is not None


def is_non_working_day(value: DateLike) -> bool:
    """Saturday, Sunday, or a national holiday."""
    d = to_date(value)
    if d is None:
        return False
    return JAPAN_CALENDAR.is_non_working_day(d)


def holidays_in_month(year: int, month: int) -> list[HolidayResult]:
    """Holidays in the given month, in date order."""
    return JAPAN_CALENDAR.holidays_in_month(year, month)


def holidays_in_year(year: int) -> list[HolidayResult]:
    """Holidays in the given year, in date order."""
    return list(get_japan_holidays(year))


def holidays_between(
    start: DateLike, end: DateLike, inclusive: bool = True
) -> list[HolidayResult]:
    """
    Holidays from ``start`` to ``end``.

    Args:
        start: First date (always included)
        end: Last date, included when ``inclusive`` is True
        inclusive: Include ``end`` itself

    Returns:
        Holidays in date order; [] if either bound is not a date
        or ``start`` is after ``end``.
    """
    start_date = to_date(start)
    end_date = to_date(end)
    if start_date is None or end_date is None:
        return []
    logger.debug(f"Scanning holidays {start_date} .. {end_date} (inclusive={inclusive})")
    return JAPAN_CALENDAR.get_holidays_in_range(start_date, end_date, inclusive=inclusive)


between = holidays_between
