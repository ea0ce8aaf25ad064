"""
Date Parser

The single entry point from date strings to TimePoints.

GRAMMAR:
========
    [-]YEAR[-MONTH[-DAY]]

- A leading ``-`` marks a BCE year and negates the numeric year directly
  ("-0100" is year -100). No astronomical-year offset is applied.
- YEAR may have fewer than 4 digits; it is zero-padded to 4 digits first.
- MONTH and DAY default to 01. Precision is NOT retained: "1700-03" and
  "1700-03-01" parse to the same TimePoint.
- Surrounding whitespace is stripped before matching (hand-edited datasets);
  whitespace inside the date is still malformed.

FAILURES:
=========
MalformedDateError for empty strings, non-numeric components, year 0,
and months/days that do not exist. Never coerced to a default.
"""

from __future__ import annotations
import re
from typing import Tuple

from ..contracts.base import MalformedDateError
from ..contracts.temporal import TimePoint, UncertainInterval

_DATE_RE = re.compile(r"^(?P<sign>-)?(?P<year>\d+)(?:-(?P<month>\d{1,2})(?:-(?P<day>\d{1,2}))?)?$", re.ASCII)


def _split(text: str) -> Tuple[bool, str, str, str]:
    if not isinstance(text, str):
        raise MalformedDateError(f"date must be a string, got {type(text).__name__}")
    stripped = text.strip()
    if not stripped:
        raise MalformedDateError("empty date string")
    m = _DATE_RE.match(stripped)
    if not m:
        raise MalformedDateError(f"unparseable date: {text!r}")
    return (
        m.group("sign") is not None,
        m.group("year").zfill(4),
        (m.group("month") or "01").zfill(2),
        (m.group("day") or "01").zfill(2),
    )


def normalize_date_string(text: str) -> str:
    """Zero-padded canonical form: ``"-450"`` -> ``"-0450-01-01"``."""
    negative, year, month, day = _split(text)
    return f"{'-' if negative else ''}{year}-{month}-{day}"


def parse_date(text: str) -> TimePoint:
    """Parse a date string into a comparable TimePoint."""
    negative, year, month, day = _split(text)
    value = int(year)
    if value == 0:
        raise MalformedDateError(f"year 0 does not exist: {text!r}")
    try:
        return TimePoint(
            year=-value if negative else value,
            month=int(month),
            day=int(day),
        )
    except MalformedDateError as e:
        raise MalformedDateError(f"{e.message} in {text!r}") from e


def parse_interval(earliest: str, latest: str) -> UncertainInterval:
    """Parse an (earliest, latest) pair of date strings."""
    return UncertainInterval(earliest=parse_date(earliest), latest=parse_date(latest))
