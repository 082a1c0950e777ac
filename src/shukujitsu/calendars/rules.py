"""
Japanese National Holiday Rules

One rule per named holiday under the National Holidays Act
(国民の祝日に関する法律, 昭和23年法律第178号) and its amendments, plus the
single-day holidays declared for imperial ceremonies.

Each rule is a time-bounded predicate: its year windows and one-off dates
are literal statute text and must not be generalized.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from .datemath import autumnal_equinox_day, nth_weekday_of_month, vernal_equinox_day

MONDAY = 1


@dataclass(frozen=True)
class HolidayRule:
    """A named holiday and the predicate deciding which dates it covers."""

    key: str
    name: str
    predicate: Callable[[date], bool]

    def is_holiday(self, d: date) -> bool:
        return self.predicate(d)


def _is_nth_monday(d: date, week: int) -> bool:
    target = nth_weekday_of_month(d, week, MONDAY)
    return target is not None and target == d


def _one_off(d: date, overrides: dict[int, date]) -> Optional[bool]:
    """Year-specific replacement date (Olympic special measures)."""
    if d.year in overrides:
        return d == overrides[d.year]
    return None


# =============================================================================
# Predicates
# =============================================================================

def _new_years_day(d: date) -> bool:
    return d.month == 1 and d.day == 1


def _coming_of_age_day(d: date) -> bool:
    if d.month != 1:
        return False
    if d.year <= 1999:
        return d.day == 15
    return _is_nth_monday(d, 2)


def _national_foundation_day(d: date) -> bool:
    return d.year >= 1967 and d.month == 2 and d.day == 11


def _emperors_birthday(d: date) -> bool:
    if 1948 <= d.year <= 1988:
        return d.month == 4 and d.day == 29
    if 1989 <= d.year <= 2018:
        return d.month == 12 and d.day == 23
    # No 天皇誕生日 in 2019 (abdication year)
    if d.year >= 2020:
        return d.month == 2 and d.day == 23
    return False


def _vernal_equinox_day(d: date) -> bool:
    return d.month == 3 and d.day == vernal_equinox_day(d.year)


def _greenery_day(d: date) -> bool:
    if 1989 <= d.year <= 2006:
        return d.month == 4 and d.day == 29
    if d.year >= 2007:
        return d.month == 5 and d.day == 4
    return False


def _showa_day(d: date) -> bool:
    return d.year >= 2007 and d.month == 4 and d.day == 29


def _constitution_memorial_day(d: date) -> bool:
    return d.month == 5 and d.day == 3


def _childrens_day(d: date) -> bool:
    return d.month == 5 and d.day == 5


_MARINE_DAY_OVERRIDES = {2020: date(2020, 7, 23), 2021: date(2021, 7, 22)}


def _marine_day(d: date) -> bool:
    override = _one_off(d, _MARINE_DAY_OVERRIDES)
    if override is not None:
        return override
    if d.month != 7:
        return False
    if 1996 <= d.year <= 2002:
        return d.day == 20
    if d.year >= 2003:
        return _is_nth_monday(d, 3)
    return False


_MOUNTAIN_DAY_OVERRIDES = {2020: date(2020, 8, 10), 2021: date(2021, 8, 8)}


def _mountain_day(d: date) -> bool:
    override = _one_off(d, _MOUNTAIN_DAY_OVERRIDES)
    if override is not None:
        return override
    return d.year >= 2016 and d.month == 8 and d.day == 11


def _respect_for_the_aged_day(d: date) -> bool:
    if d.month != 9:
        return False
    if 1966 <= d.year <= 2002:
        return d.day == 15
    if d.year >= 2003:
        return _is_nth_monday(d, 3)
    return False


def _autumnal_equinox_day(d: date) -> bool:
    return d.month == 9 and d.day == autumnal_equinox_day(d.year)


def _health_and_sports_day(d: date) -> bool:
    if d.month != 10:
        return False
    if 1966 <= d.year <= 1999:
        return d.day == 10
    if 2000 <= d.year <= 2019:
        return _is_nth_monday(d, 2)
    return False


_SPORTS_DAY_OVERRIDES = {2020: date(2020, 7, 24), 2021: date(2021, 7, 23)}


def _sports_day(d: date) -> bool:
    override = _one_off(d, _SPORTS_DAY_OVERRIDES)
    if override is not None:
        return override
    return d.year >= 2020 and d.month == 10 and _is_nth_monday(d, 2)


def _culture_day(d: date) -> bool:
    return d.month == 11 and d.day == 3


def _labor_thanksgiving_day(d: date) -> bool:
    return d.month == 11 and d.day == 23


def _on(day: date) -> Callable[[date], bool]:
    return lambda d: d == day


# =============================================================================
# Rule Set
# =============================================================================

HOLIDAY_RULES: tuple[HolidayRule, ...] = (
    HolidayRule("new_years_day", "元日", _new_years_day),
    HolidayRule("coming_of_age_day", "成人の日", _coming_of_age_day),
    HolidayRule("national_foundation_day", "建国記念の日", _national_foundation_day),
    HolidayRule("emperors_birthday", "天皇誕生日", _emperors_birthday),
    HolidayRule("vernal_equinox_day", "春分の日", _vernal_equinox_day),
    HolidayRule("greenery_day", "みどりの日", _greenery_day),
    HolidayRule("showa_day", "昭和の日", _showa_day),
    HolidayRule("constitution_memorial_day", "憲法記念日", _constitution_memorial_day),
    HolidayRule("childrens_day", "こどもの日", _childrens_day),
    HolidayRule("marine_day", "海の日", _marine_day),
    HolidayRule("mountain_day", "山の日", _mountain_day),
    HolidayRule("respect_for_the_aged_day", "敬老の日", _respect_for_the_aged_day),
    HolidayRule("autumnal_equinox_day", "秋分の日", _autumnal_equinox_day),
    HolidayRule("health_and_sports_day", "体育の日", _health_and_sports_day),
    HolidayRule("sports_day", "スポーツの日", _sports_day),
    HolidayRule("culture_day", "文化の日", _culture_day),
    HolidayRule("labor_thanksgiving_day", "勤労感謝の日", _labor_thanksgiving_day),
    # Imperial ceremonies, one literal date each
    HolidayRule(
        "wedding_of_crown_prince_akihito",
        "皇太子・明仁親王の結婚の儀",
        _on(date(1959, 4, 10)),
    ),
    HolidayRule(
        "funeral_of_emperor_showa",
        "昭和天皇の大喪の礼",
        _on(date(1989, 2, 24)),
    ),
    HolidayRule(
        "enthronement_ceremony_1990",
        "即位の礼正殿の儀",
        _on(date(1990, 11, 12)),
    ),
    HolidayRule(
        "wedding_of_crown_prince_naruhito",
        "皇太子・皇太子徳仁親王の結婚の儀",
        _on(date(1993, 6, 9)),
    ),
    HolidayRule(
        "emperors_enthronement_day",
        "天皇の即位の日",
        _on(date(2019, 5, 1)),
    ),
    HolidayRule(
        "enthronement_ceremony_2019",
        "即位礼正殿の儀",
        _on(date(2019, 10, 22)),
    ),
)


def matching_rule(d: date) -> Optional[HolidayRule]:
    """First rule covering ``d``, in rule-set order."""
    for rule in HOLIDAY_RULES:
        if rule.is_holiday(d):
            return rule
    return None


def get_rule(key: str) -> Optional[HolidayRule]:
    """Look up a rule by its key."""
    for rule in HOLIDAY_RULES:
        if rule.key == key:
            return rule
    return None
