"""
Temporal Contracts

Immutable calendar instants, uncertain intervals and time windows.

INVARIANTS:
===========
- TimePoint years are signed integers, never 0
- TimePoints order by (year, month, day) with the year taken as signed
- UncertainInterval: earliest <= latest
- TimeWindow: min_date < max_date (strictly)
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import timedelta

from .base import MalformedDateError, InvertedIntervalError, EmptyWindowError
from ..temporal import calendar


@dataclass(frozen=True, order=True)
class TimePoint:
    """
    Immutable calendar instant with day precision.

    Built by the date parser from a string, or with ``TimePoint.of`` for
    internal anchors (e.g. 1 January of a tick year). Subtracting two
    TimePoints yields a signed ``timedelta``.
    """
    year: int
    month: int = 1
    day: int = 1

    def __post_init__(self):
        if self.year == 0:
            raise MalformedDateError("year 0 does not exist")
        if not 1 <= self.month <= 12:
            raise MalformedDateError(f"month out of range: {self.month}")
        last_day = calendar.days_in_month(self.year, self.month)
        if not 1 <= self.day <= last_day:
            raise MalformedDateError(
                f"day out of range for {self.year}-{self.month:02d}: {self.day}"
            )

    @staticmethod
    def of(year: int, month: int = 1, day: int = 1) -> TimePoint:
        return TimePoint(year=year, month=month, day=day)

    @staticmethod
    def from_day_number(days: int) -> TimePoint:
        year, month, day = calendar.civil_from_day_number(days)
        return TimePoint(year=year, month=month, day=day)

    @property
    def day_number(self) -> int:
        """Signed days since 1970-01-01 on the proleptic calendar."""
        return calendar.day_number(self.year, self.month, self.day)

    @property
    def is_bce(self) -> bool:
        return self.year < 0

    def __sub__(self, other):
        if isinstance(other, TimePoint):
            return timedelta(days=self.day_number - other.day_number)
        if isinstance(other, timedelta):
            return TimePoint.from_day_number(self.day_number - other.days)
        return NotImplemented

    def __add__(self, other):
        if isinstance(other, timedelta):
            return TimePoint.from_day_number(self.day_number + other.days)
        return NotImplemented

    def isoformat(self) -> str:
        """Canonical zero-padded form, e.g. ``-0450-01-01`` or ``1800-06-15``."""
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class UncertainInterval:
    """
    "The true event date lies somewhere in [earliest, latest]".
    When earliest == latest the date is certain.
    """
    earliest: TimePoint
    latest: TimePoint

    def __post_init__(self):
        if self.earliest > self.latest:
            raise InvertedIntervalError(
                f"earliest bound {self.earliest} is after latest bound {self.latest}"
            )

    @staticmethod
    def exact(point: TimePoint) -> UncertainInterval:
        return UncertainInterval(earliest=point, latest=point)

    @property
    def is_certain(self) -> bool:
        return self.earliest == self.latest

    @property
    def spread(self) -> timedelta:
        return self.latest - self.earliest

    def bounds(self):
        return (self.earliest, self.latest)


@dataclass(frozen=True)
class TimeWindow:
    """
    Visible range of the axis.

    Recomputed on every selection change; owned transiently by the caller.
    """
    min_date: TimePoint
    max_date: TimePoint

    def __post_init__(self):
        if not self.min_date < self.max_date:
            raise EmptyWindowError(
                f"window has no extent: {self.min_date} .. {self.max_date}"
            )

    @property
    def span(self) -> timedelta:
        return self.max_date - self.min_date

    def contains(self, point: TimePoint) -> bool:
        return self.min_date <= point <= self.max_date

    def fraction(self, point: TimePoint) -> float:
        """Unvalidated linear position of ``point`` (0.0 at min, 1.0 at max)."""
        return (point - self.min_date) / self.span
