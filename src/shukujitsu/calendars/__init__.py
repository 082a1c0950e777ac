"""
Shukujitsu Calendars

Japanese national holiday determination.

Provides:
- HolidayCalendar protocol and BaseCalendar with range queries
- HOLIDAY_RULES, the statute-derived rule set
- JapanCalendar with substitute (振替休日) and citizen's (国民の休日) holidays
- Module-level helpers for quick checks

Usage:
    from shukujitsu.calendars import holiday_name, holidays_in_year

    holiday_name("2024-01-01")        # '元日'
    len(holidays_in_year(2024))       # 21
"""
from __future__ import annotations

from .base import BaseCalendar, HolidayCalendar, HolidayResult
from .datemath import autumnal_equinox_day, nth_weekday_of_month, vernal_equinox_day
from .japan import (
    CITIZENS_HOLIDAY_NAME,
    JAPAN_CALENDAR,
    SUBSTITUTE_HOLIDAY_SUFFIX,
    JapanCalendar,
    base_holiday_name,
    between,
    get_japan_holidays,
    holiday_name,
    holidays_between,
    holidays_in_month,
    holidays_in_year,
    is_holiday,
    is_holiday_name,
    is_non_working_day,
    national_holiday_name,
    substitute_holiday,
)
from .rules import HOLIDAY_RULES, HolidayRule, get_rule, matching_rule

__all__ = [
    # Protocols and base classes
    "HolidayCalendar",
    "BaseCalendar",
    "HolidayResult",
    # Date arithmetic
    "nth_weekday_of_month",
    "vernal_equinox_day",
    "autumnal_equinox_day",
    # Rules
    "HolidayRule",
    "HOLIDAY_RULES",
    "matching_rule",
    "get_rule",
    # Japan
    "JapanCalendar",
    "JAPAN_CALENDAR",
    "CITIZENS_HOLIDAY_NAME",
    "SUBSTITUTE_HOLIDAY_SUFFIX",
    "substitute_holiday",
    "base_holiday_name",
    "national_holiday_name",
    "get_japan_holidays",
    "holiday_name",
    "is_holiday_name",
    "is_holiday",
    "is_non_working_day",
    "holidays_in_month",
    "holidays_in_year",
    "holidays_between",
    "between",
]
