"""
Axis Tick Generator

Produces the ordered tick marks for a TimeWindow.

ALGORITHM:
==========
1. step = max(1, ceil(year_span / target_ticks))
2. start at the multiple of step at or below min_date.year
3. one tick per step up to max_date.year, skipping years before the window,
   a 1 January that falls before min_date, and year 0
4. a window that crosses the BCE/CE boundary always gets a CE tick
   (at ``step``, or at max_date.year when ``step`` does not fit)
5. when both eras have a tick, an ERA_BOUNDARY marker is inserted halfway
   (in position space) between the last BCE tick and the first CE tick

INVARIANTS:
===========
- ticks strictly ascending by year, never year 0
- real tick positions in [0, 100]
- the boundary marker lies strictly between its neighbours
"""

from __future__ import annotations
from typing import List, Tuple

from ..contracts.layout import TickKind, TickMark
from ..contracts.temporal import TimePoint, TimeWindow
from .scale import DEFAULT_TOLERANCE, to_percent

DEFAULT_TARGET_TICKS = 10
BOUNDARY_LABEL = "BCE | CE"


def format_year(year: int) -> str:
    """Tick label: ``1800`` for CE years, ``450 BCE`` for BCE years."""
    if year == 0:
        raise ValueError("year 0 has no label")
    return f"{-year} BCE" if year < 0 else str(year)


def tick_step(year_span: int, target_ticks: int = DEFAULT_TARGET_TICKS) -> int:
    if target_ticks < 1:
        raise ValueError("target_ticks must be positive")
    return max(1, -(-year_span // target_ticks))


def _year_tick(window: TimeWindow, year: int, tolerance: float) -> TickMark:
    return TickMark(
        year=year,
        label=format_year(year),
        position_percent=to_percent(window, TimePoint.of(year), tolerance),
    )


def generate_ticks(
    window: TimeWindow,
    target_ticks: int = DEFAULT_TARGET_TICKS,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Tuple[TickMark, ...]:
    """Ordered tick marks for ``window``; see module docstring."""
    min_year = window.min_date.year
    max_year = window.max_date.year
    step = tick_step(max_year - min_year, target_ticks)
    start_year = (min_year // step) * step

    ticks: List[TickMark] = []
    for year in range(start_year, max_year + 1, step):
        if year < min_year or year == 0:
            continue
        if TimePoint.of(year) < window.min_date:
            # 1 January of the first year precedes the window start
            continue
        ticks.append(_year_tick(window, year, tolerance))

    if not (min_year < 0 < max_year):
        return tuple(ticks)

    if not any(t.year > 0 for t in ticks):
        ticks.append(_year_tick(window, step if step <= max_year else max_year, tolerance))

    negatives = [t for t in ticks if t.year < 0]
    positives = [t for t in ticks if t.year > 0]
    if negatives and positives:
        last_bce, first_ce = negatives[-1], positives[0]
        marker = TickMark(
            year=None,
            label=BOUNDARY_LABEL,
            position_percent=(last_bce.position_percent + first_ce.position_percent) / 2.0,
            kind=TickKind.ERA_BOUNDARY,
        )
        ticks.insert(ticks.index(first_ce), marker)

    return tuple(ticks)
