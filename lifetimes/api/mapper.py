"""
API Mapper
==========

Transforms layout contracts into API response models.
This is the ONLY place where contracts become wire shapes.
"""

from typing import Dict, Iterable, List

from ingestion.contracts import LoadIssue

from ..contracts.layout import BarSegment, PersonLayout, TickMark, TimelineLayout
from ..contracts.person import PersonRecord
from ..contracts.temporal import TimeWindow, UncertainInterval
from .models import (
    IntervalModel, IssueModel, LayoutModel, PersonModel, RowModel,
    SegmentModel, TickModel, WindowModel,
)


def map_window(window: TimeWindow, widened: bool = False) -> WindowModel:
    return WindowModel(
        min_date=window.min_date.isoformat(),
        max_date=window.max_date.isoformat(),
        span_days=window.span.days,
        widened=widened,
    )


def map_tick(tick: TickMark) -> TickModel:
    return TickModel(
        year=tick.year,
        label=tick.label,
        position_percent=tick.position_percent,
        kind=tick.kind.value,
    )


def map_segment(segment: BarSegment) -> SegmentModel:
    return SegmentModel(
        kind=segment.kind.value,
        left_percent=segment.left_percent,
        width_percent=segment.width_percent,
    )


def _map_row(row: PersonLayout, people: Dict[str, PersonRecord]) -> RowModel:
    person = people.get(row.person_id)
    return RowModel(
        person_id=row.person_id,
        segments=[map_segment(s) for s in row.segments],
        display=dict(person.display) if person is not None else {},
    )


def map_layout(layout: TimelineLayout, people: Iterable[PersonRecord]) -> LayoutModel:
    """
    Map a TimelineLayout to its response model.

    Rows carry the person's display fields so a renderer can label bars
    without a second request.
    """
    by_id = {p.person_id: p for p in people}
    return LayoutModel(
        window=map_window(layout.window, layout.widened),
        ticks=[map_tick(t) for t in layout.ticks],
        rows=[_map_row(r, by_id) for r in layout.rows],
    )


def _map_interval(interval: UncertainInterval) -> IntervalModel:
    return IntervalModel(
        earliest=interval.earliest.isoformat(),
        latest=interval.latest.isoformat(),
        certain=interval.is_certain,
    )


def map_person(person: PersonRecord) -> PersonModel:
    return PersonModel(
        person_id=person.person_id,
        sort_key=person.sort_key,
        birth=_map_interval(person.birth),
        death=_map_interval(person.death),
        display=dict(person.display),
    )


def map_issues(issues: Iterable[LoadIssue]) -> List[IssueModel]:
    return [IssueModel(**issue.to_dict()) for issue in issues]
