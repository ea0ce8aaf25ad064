"""
Proleptic Gregorian Day Arithmetic

Converts (year, month, day) triples to a linear day count and back.

CALENDAR RULES:
===============
- Years are signed; there is NO year 0 (year -1 is followed by year 1)
- Day counting maps year -n to astronomical year 1 - n, so 31 Dec -1 and
  1 Jan 1 are consecutive days
- Day numbers count from 1970-01-01 (day 0), negative before that
"""

from __future__ import annotations
from typing import Tuple

DAYS_PER_400_YEARS = 146097
_EPOCH_SHIFT = 719468  # days from 0000-03-01 (astronomical) to 1970-01-01

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def to_astronomical(year: int) -> int:
    """Historical signed year (no zero) -> astronomical year (has zero)."""
    if year == 0:
        raise ValueError("year 0 does not exist in this calendar")
    return year if year > 0 else year + 1


def from_astronomical(astro_year: int) -> int:
    """Astronomical year -> historical signed year (no zero)."""
    return astro_year if astro_year > 0 else astro_year - 1


def is_leap_year(year: int) -> bool:
    astro = to_astronomical(year)
    return astro % 4 == 0 and (astro % 100 != 0 or astro % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def day_number(year: int, month: int, day: int) -> int:
    """Signed day count of a calendar date relative to 1970-01-01."""
    y = to_astronomical(year)
    if month <= 2:
        y -= 1
    era = y // 400
    yoe = y - era * 400
    mp = month - 3 if month > 2 else month + 9
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * DAYS_PER_400_YEARS + doe - _EPOCH_SHIFT


def civil_from_day_number(days: int) -> Tuple[int, int, int]:
    """Inverse of day_number: day count -> (year, month, day), year never 0."""
    z = days + _EPOCH_SHIFT
    era = z // DAYS_PER_400_YEARS
    doe = z - era * DAYS_PER_400_YEARS
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    astro = yoe + era * 400 + (1 if month <= 2 else 0)
    return from_astronomical(astro), month, day
