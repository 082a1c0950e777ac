"""
Japanese calendar tests: named, substitute (振替休日) and citizen's
(国民の休日) holidays, and the single-date public API.
"""
from datetime import date, datetime, timedelta

import pytest

from shukujitsu import holiday_name, is_holiday, is_holiday_name, is_non_working_day
from shukujitsu.calendars import (
    CITIZENS_HOLIDAY_NAME,
    JAPAN_CALENDAR,
    HolidayCalendar,
    base_holiday_name,
    national_holiday_name,
    substitute_holiday,
)

from tests.conftest import d
from tests.fixtures.known_holidays import KNOWN_HOLIDAYS, KNOWN_NON_HOLIDAYS


# =============================================================================
# Known Calendars
# =============================================================================

class TestKnownHolidays:
    """Resolved names match published calendars."""

    @pytest.mark.parametrize("day,name", KNOWN_HOLIDAYS)
    def test_holiday_name(self, day, name):
        assert holiday_name(day) == name

    @pytest.mark.parametrize("day", KNOWN_NON_HOLIDAYS)
    def test_not_a_holiday(self, day):
        assert holiday_name(day) is None

    def test_new_years_day_2024(self):
        assert holiday_name(d("2024-01-01")) == "元日"


# =============================================================================
# Substitute Holidays
# =============================================================================

class TestSubstituteHoliday:
    """Tests for substitute_holiday()."""

    def test_first_substitute_holiday_1973(self):
        """1973-04-29 (天皇誕生日) fell on a Sunday."""
        assert substitute_holiday(d("1973-04-30")) == "天皇誕生日 振替休日"

    def test_no_substitute_before_1973(self):
        """1971-10-10 (体育の日) fell on a Sunday."""
        assert substitute_holiday(d("1971-10-11")) is None
        assert holiday_name(d("1971-10-11")) is None

    def test_never_on_sunday(self):
        assert substitute_holiday(d("2024-02-11")) is None

    def test_chain_through_consecutive_holidays(self):
        """2009: 5/3 Sunday, 5/4 and 5/5 holidays, observance lands on 5/6."""
        assert base_holiday_name(d("2009-05-04")) == "みどりの日"
        assert base_holiday_name(d("2009-05-05")) == "こどもの日"
        assert substitute_holiday(d("2009-05-06")) == "憲法記念日 振替休日"

    def test_chain_broken_by_working_day(self):
        assert substitute_holiday(d("2024-05-07")) is None

    def test_named_holiday_takes_precedence(self):
        """2008-05-05 follows a Sunday holiday but is こどもの日 itself."""
        assert base_holiday_name(d("2008-05-05")) == "こどもの日"
        assert holiday_name(d("2008-05-06")) == "みどりの日 振替休日"

    def test_weekday_after_sunday_holiday(self):
        assert substitute_holiday(d("2024-09-23")) == "秋分の日 振替休日"


# =============================================================================
# Citizen's Holidays
# =============================================================================

class TestCitizensHoliday:
    """Tests for the 国民の休日 bridge."""

    @pytest.mark.parametrize("day", ["2019-04-30", "2019-05-02"])
    def test_abdication_period_2019(self, day):
        assert holiday_name(d(day)) == CITIZENS_HOLIDAY_NAME

    @pytest.mark.parametrize("day", ["2009-09-22", "2015-09-22"])
    def test_silver_week(self, day):
        assert holiday_name(d(day)) == "国民の休日"

    def test_base_resolver_excludes_bridge(self):
        assert base_holiday_name(d("2019-04-30")) is None
        assert national_holiday_name(d("2019-04-30")) == "国民の休日"

    def test_not_on_sunday(self):
        assert holiday_name(d("1997-05-04")) is None

    def test_requires_both_neighbours(self):
        assert holiday_name(d("1992-05-06")) is None

    def test_bridge_does_not_chain(self):
        """A citizen's holiday does not count as a neighbour for another bridge."""
        assert holiday_name(d("2019-05-02")) == "国民の休日"
        assert holiday_name(d("2019-04-30")) == "国民の休日"
        assert holiday_name(d("2019-04-27")) is None


# =============================================================================
# Public API
# =============================================================================

class TestPublicApi:
    """Tests for the DateLike-accepting functions."""

    @pytest.mark.parametrize("value", [
        "2024-01-01",
        "2024/01/01",
        date(2024, 1, 1),
        datetime(2024, 1, 1, 15, 30),
    ])
    def test_accepts_date_like(self, value):
        assert holiday_name(value) == "元日"

    @pytest.mark.parametrize("value", ["", "2024-13-01", "01/01/2024", "not a date", None])
    def test_not_a_date(self, value):
        assert holiday_name(value) is None
        assert is_holiday(value) is False
        assert is_non_working_day(value) is False

    def test_alias(self):
        assert is_holiday_name is holiday_name

    @pytest.mark.parametrize("day,expected", [
        ("2024/09/13", False),  # Friday
        ("2024/09/14", True),   # Saturday
        ("2024/09/15", True),   # Sunday
        ("2024/09/16", True),   # 敬老の日
        ("2024/09/17", False),  # Tuesday
    ])
    def test_is_non_working_day(self, day, expected):
        assert is_non_working_day(day) is expected

    def test_is_holiday_agrees_with_name(self):
        current = date(2018, 12, 1)
        while current <= date(2020, 1, 31):
            assert is_holiday(current) == (holiday_name(current) is not None)
            current += timedelta(days=1)

    def test_repeated_evaluation_is_stable(self):
        first = [holiday_name(date(2019, 5, day)) for day in range(1, 8)]
        second = [holiday_name(date(2019, 5, day)) for day in range(1, 8)]
        assert first == second


# =============================================================================
# Calendar Boundaries
# =============================================================================

class TestBoundaries:
    """Dates at the edge of the representable range never raise."""

    def test_last_representable_date(self):
        assert holiday_name(date.max) is None

    def test_first_representable_date(self):
        assert holiday_name(date.min) == "元日"

    def test_day_before_max(self):
        assert national_holiday_name(date.max - timedelta(days=1)) is None


class TestJapanCalendarObject:
    def test_satisfies_protocol(self):
        assert isinstance(JAPAN_CALENDAR, HolidayCalendar)

    def test_business_day(self, calendar):
        assert calendar.is_business_day(d("2024-09-17"))
        assert not calendar.is_business_day(d("2024-09-16"))
        assert not calendar.is_business_day(d("2024-09-14"))

    def test_weekend(self, calendar):
        assert calendar.is_weekend(d("2024-09-14"))
        assert not calendar.is_weekend(d("2024-09-16"))
