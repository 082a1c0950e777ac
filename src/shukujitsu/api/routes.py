"""Holiday query endpoints."""

from datetime import date, timedelta

from fastapi import APIRouter, Request

from ..calendars import (
    HOLIDAY_RULES,
    HolidayResult,
    holiday_name,
    holidays_between,
    holidays_in_month,
    holidays_in_year,
    is_non_working_day,
)
from ..dates import parse_date
from ..exceptions import InvalidRangeError
from .schemas import HolidayItem, HolidayList, HolidayLookup, RuleSummary

router = APIRouter(tags=["Holidays"])


def _to_list(results: list[HolidayResult]) -> HolidayList:
    return HolidayList(
        count=len(results),
        holidays=[HolidayItem(date=r.date.isoformat(), name=r.name) for r in results],
    )


def _check_year(year: int) -> None:
    if not date.min.year <= year <= date.max.year:
        raise InvalidRangeError(
            message=f"Year must be between {date.min.year} and {date.max.year}",
            value=str(year),
        )


@router.get("/rules", response_model=list[RuleSummary])
async def list_rules():
    """List the named holiday rules in evaluation order."""
    return [RuleSummary(key=rule.key, name=rule.name) for rule in HOLIDAY_RULES]


@router.get("/holidays", response_model=HolidayList)
def list_holidays_between(
    request: Request, start: str, end: str, inclusive: bool = True
):
    """
    List holidays between two dates.

    Dates accept YYYY-MM-DD or YYYY/MM/DD. ``inclusive=false`` excludes ``end``.
    """
    start_date = parse_date(start)
    end_date = parse_date(end)
    if start_date > end_date:
        raise InvalidRangeError(
            message="start must not be after end",
            details={"start": start_date.isoformat(), "end": end_date.isoformat()},
        )

    max_days = request.app.state.settings.max_range_days
    if end_date - start_date > timedelta(days=max_days):
        raise InvalidRangeError(
            message=f"Range exceeds {max_days} days",
            details={"max_range_days": max_days},
        )

    return _to_list(holidays_between(start_date, end_date, inclusive=inclusive))


@router.get("/holidays/year/{year}", response_model=HolidayList)
def list_holidays_in_year(year: int):
    """List the holidays of a year."""
    _check_year(year)
    return _to_list(holidays_in_year(year))


@router.get("/holidays/month/{year}/{month}", response_model=HolidayList)
def list_holidays_in_month(year: int, month: int):
    """List the holidays of a month."""
    _check_year(year)
    if not 1 <= month <= 12:
        raise InvalidRangeError(message="Month must be between 1 and 12", value=str(month))
    return _to_list(holidays_in_month(year, month))


@router.get("/holidays/{day}", response_model=HolidayLookup)
def lookup_holiday(day: str):
    """Look up one date (YYYY-MM-DD)."""
    d = parse_date(day)
    name = holiday_name(d)
    return HolidayLookup(
        date=d.isoformat(),
        is_holiday=name is not None,
        is_non_working_day=is_non_working_day(d),
        name=name,
    )
