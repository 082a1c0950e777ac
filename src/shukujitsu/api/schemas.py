"""Response schemas for the API."""

from typing import Optional

from pydantic import BaseModel


class HolidayItem(BaseModel):
    """A single holiday."""
    date: str  # YYYY-MM-DD
    name: str


class HolidayLookup(BaseModel):
    """Result of looking up one date."""
    date: str
    is_holiday: bool
    is_non_working_day: bool
    name: Optional[str] = None


class HolidayList(BaseModel):
    """Holidays found by a range query."""
    count: int
    holidays: list[HolidayItem]


class RuleSummary(BaseModel):
    """A named holiday rule."""
    key: str
    name: str


class HealthResponse(BaseModel):
    healthy: bool
    version: str
    rules_loaded: int


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: Optional[dict] = None
    value: Optional[str] = None
    request_id: Optional[str] = None
