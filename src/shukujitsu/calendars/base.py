"""
Holiday Calendar Base

Provides the protocol and base implementation shared by holiday calendars:
weekend handling, non-working-day checks and range queries built on a
single per-date ``get_holiday_name()``.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Any, NamedTuple, Optional, Protocol, runtime_checkable

from ..dates import next_day


class HolidayResult(NamedTuple):
    """A holiday date and its name."""

    date: date
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date.isoformat(), "name": self.name}


@runtime_checkable
class HolidayCalendar(Protocol):
    """
    Protocol for holiday calendars.

    Implementations resolve a single date to a holiday name; everything
    else is derived from that.
    """

    def get_holiday_name(self, d: date) -> Optional[str]:
        ...

    def is_holiday(self, d: date) -> bool:
        ...

    def is_non_working_day(self, d: date) -> bool:
        ...

    def get_holidays_in_range(
        self, start: date, end: date, inclusive: bool = True
    ) -> list[HolidayResult]:
        ...


@dataclass
class BaseCalendar(ABC):
    """
    Abstract base class for holiday calendars.

    Subclasses must implement `get_holiday_name()`.
    """

    # Weekend days (0=Monday, 6=Sunday)
    weekend_days: frozenset[int] = field(default_factory=lambda: frozenset({5, 6}))

    @abstractmethod
    def get_holiday_name(self, d: date) -> Optional[str]:
        """Name of the holiday on ``d``, or None."""
        ...

    def is_holiday(self, d: date) -> bool:
        return self.get_holiday_name(d) is not None

    def is_weekend(self, d: date) -> bool:
        """Check if a date is a weekend day."""
        return d.weekday() in self.weekend_days

    def is_non_working_day(self, d: date) -> bool:
        """Weekend days and holidays."""
        if self.is_weekend(d):
            return True
        return self.is_holiday(d)

    def is_business_day(self, d: date) -> bool:
        return not self.is_non_working_day(d)

    def get_holidays_in_range(
        self, start: date, end: date, inclusive: bool = True
    ) -> list[HolidayResult]:
        """
        Get all holidays within a date range, in date order.

        ``inclusive`` controls whether ``end`` itself is included.
        Iteration stops quietly at the last representable date.
        """
        holidays = []
        current: Optional[date] = start
        while current is not None and (current < end or (inclusive and current == end)):
            name = self.get_holiday_name(current)
            if name is not None:
                holidays.append(HolidayResult(current, name))
            current = next_day(current)
        return holidays

    def holidays_in_month(self, year: int, month: int) -> list[HolidayResult]:
        """Holidays in a month; invalid year/month combinations yield []."""
        holidays = []
        for day in range(1, 32):
            try:
                current = date(year, month, day)
            except ValueError:
                continue
            name = self.get_holiday_name(current)
            if name is not None:
                holidays.append(HolidayResult(current, name))
        return holidays

    def holidays_in_year(self, year: int) -> list[HolidayResult]:
        holidays = []
        for month in range(1, 13):
            holidays.extend(self.holidays_in_month(year, month))
        return holidays
