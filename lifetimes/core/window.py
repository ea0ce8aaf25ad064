"""
Range Computer

Derives the visible TimeWindow from the dataset and an explicit selection.

CONTRACT:
=========
- Empty selection  -> window over the four bounds of ALL persons
- Otherwise        -> window over the four bounds of the SELECTED persons
- Collapsed window (min == max) raises EmptyWindowError. Widening it is the
  caller's responsibility (see ``widen_collapsed``); this module never
  widens silently.
"""

from __future__ import annotations
from datetime import timedelta
from typing import AbstractSet, Iterable, List, Sequence, Tuple

from ..contracts.base import EmptyWindowError, UnknownEntityError
from ..contracts.person import PersonRecord
from ..contracts.temporal import TimePoint, TimeWindow


def select_people(
    all_people: Sequence[PersonRecord],
    selected_ids: AbstractSet[str],
) -> List[PersonRecord]:
    """Resolve a selection of ids against the dataset, preserving dataset order."""
    known = {p.person_id for p in all_people}
    unknown = sorted(set(selected_ids) - known)
    if unknown:
        raise UnknownEntityError(f"unknown person id(s): {', '.join(unknown)}")
    return [p for p in all_people if p.person_id in selected_ids]


def compute_bounds(
    all_people: Sequence[PersonRecord],
    selected_ids: AbstractSet[str] = frozenset(),
) -> Tuple[TimePoint, TimePoint]:
    """Raw (min, max) over the relevant persons' bounds; may be collapsed."""
    people: Iterable[PersonRecord] = (
        select_people(all_people, selected_ids) if selected_ids else all_people
    )
    points = [point for person in people for point in person.bounds]
    if not points:
        raise EmptyWindowError("no persons to derive a window from")
    return min(points), max(points)


def compute_window(
    all_people: Sequence[PersonRecord],
    selected_ids: AbstractSet[str] = frozenset(),
) -> TimeWindow:
    """Visible window for the selection (or everyone when nothing is selected)."""
    min_date, max_date = compute_bounds(all_people, selected_ids)
    return TimeWindow(min_date=min_date, max_date=max_date)


def widen_collapsed(point: TimePoint, span_days: int) -> TimeWindow:
    """
    Caller-side guard for a collapsed window: ``span_days`` centred on ``point``.

    Used by the layout engine when ``compute_window`` raises EmptyWindowError.
    """
    if span_days < 1:
        raise ValueError("span_days must be at least 1")
    start = point - timedelta(days=span_days // 2)
    return TimeWindow(min_date=start, max_date=start + timedelta(days=span_days))
