"""
Calendar arithmetic used by the holiday rules.

- nth-weekday-of-month resolution ("Happy Monday" holidays)
- vernal / autumnal equinox day approximation
"""
from __future__ import annotations

import math
from datetime import date, timedelta
from typing import Optional

# Equinox law as 春分の日 / 秋分の日 took effect in 1948
EQUINOX_LAW_YEAR = 1948

# (first year, last year, constant), inclusive bands
_VERNAL_BANDS = (
    (1851, 1899, 19.8277),
    (1900, 1979, 20.8357),
    (1980, 2099, 20.8431),
    (2100, 2150, 21.8510),
)

_AUTUMNAL_BANDS = (
    (1851, 1899, 22.2588),
    (1900, 1979, 23.2588),
    (1980, 2099, 23.2488),
    (2100, 2150, 24.2488),
)


def nth_weekday_of_month(d: date, week: int, weekday: int) -> Optional[date]:
    """
    Get the ``week``-th occurrence of ``weekday`` in the month containing ``d``.

    Args:
        d: Any date in the target month
        week: Occurrence number, 1-5
        weekday: ISO weekday, 1=Monday .. 7=Sunday

    Returns:
        The date, or None when the month has no such occurrence
        (e.g. a 5th Monday) or the arguments are out of range.
    """
    if not 1 <= week <= 5:
        return None
    if not 1 <= weekday <= 7:
        return None

    first_day = d.replace(day=1)
    days_until_weekday = (weekday - first_day.isoweekday()) % 7
    try:
        target = first_day + timedelta(days=days_until_weekday, weeks=week - 1)
    except OverflowError:
        return None
    if target.month != first_day.month:
        return None
    return target


def _equinox_day(year: int, bands: tuple[tuple[int, int, float], ...]) -> int:
    if year <= EQUINOX_LAW_YEAR:
        return 0

    constant = 0.0
    for first, last, value in bands:
        if first <= year <= last:
            constant = value
            break

    offset = year - 1980
    day = math.floor(constant + 0.242194 * offset - math.floor(offset / 4))
    # Outside every band the formula goes negative; 0 never matches a real day
    return max(day, 0)


def vernal_equinox_day(year: int) -> int:
    """Day of March on which 春分の日 falls, or 0 if there is none."""
    return _equinox_day(year, _VERNAL_BANDS)


def autumnal_equinox_day(year: int) -> int:
    """Day of September on which 秋分の日 falls, or 0 if there is none."""
    return _equinox_day(year, _AUTUMNAL_BANDS)
