"""
Shukujitsu - Japanese national holiday engine

Determines whether a date is a Japanese national holiday (祝日) and under
which name, following every amendment of the National Holidays Act since
1948, including substitute holidays (振替休日) and citizen's holidays
(国民の休日).
"""
from __future__ import annotations

__version__ = "1.0.0"

from .calendars import (
    HOLIDAY_RULES,
    JAPAN_CALENDAR,
    HolidayResult,
    HolidayRule,
    JapanCalendar,
    between,
    holiday_name,
    holidays_between,
    holidays_in_month,
    holidays_in_year,
    is_holiday,
    is_holiday_name,
    is_non_working_day,
)
from .dates import DateLike, parse_date, to_date
from .exceptions import (
    ConfigError,
    InvalidDateError,
    InvalidRangeError,
    ShukujitsuError,
)

__all__ = [
    "__version__",
    # Queries
    "holiday_name",
    "is_holiday_name",
    "is_holiday",
    "is_non_working_day",
    "holidays_in_month",
    "holidays_in_year",
    "holidays_between",
    "between",
    # Types
    "HolidayResult",
    "HolidayRule",
    "HOLIDAY_RULES",
    "JapanCalendar",
    "JAPAN_CALENDAR",
    # Dates
    "DateLike",
    "to_date",
    "parse_date",
    # Exceptions
    "ShukujitsuError",
    "InvalidDateError",
    "InvalidRangeError",
    "ConfigError",
]
