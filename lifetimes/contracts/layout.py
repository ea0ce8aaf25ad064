"""
Timeline Layout Contracts

Responsibility:
Deterministic transformation of a selection of persons into a renderable
timeline view.
Input: PersonRecords + selection -> Output: TimelineLayout

All values are pure, derived and short-lived. They are recomputed on every
layout pass and never mutated in place. No colours, text styling or DOM
references live here - the renderer reads those from ``PersonRecord.display``.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .temporal import TimeWindow


class TickKind(Enum):
    YEAR = "year"
    ERA_BOUNDARY = "era_boundary"   # visual placeholder between BCE and CE, not an instant


class SegmentKind(Enum):
    CERTAIN = "certain"
    UNCERTAIN_LEFT = "uncertain-left"
    UNCERTAIN_RIGHT = "uncertain-right"


@dataclass(frozen=True)
class TickMark:
    """A labelled position on the time axis."""
    year: Optional[int]         # None only for the era boundary marker; never 0
    label: str
    position_percent: float     # 0-100 along the axis
    kind: TickKind = TickKind.YEAR

    @property
    def is_boundary(self) -> bool:
        return self.kind is TickKind.ERA_BOUNDARY


@dataclass(frozen=True)
class BarSegment:
    """One rectangle of a person's bar, in percent of the axis width."""
    kind: SegmentKind
    left_percent: float
    width_percent: float

    @property
    def right_percent(self) -> float:
        return self.left_percent + self.width_percent


@dataclass(frozen=True)
class PersonLayout:
    """All segments of one visible person, uncertain-left first."""
    person_id: str
    segments: Tuple[BarSegment, ...]

    def segment(self, kind: SegmentKind) -> Optional[BarSegment]:
        for seg in self.segments:
            if seg.kind is kind:
                return seg
        return None


@dataclass(frozen=True)
class TimelineLayout:
    """
    Fully calculated timeline visualization.

    DETERMINISTIC:
    Same people + same selection + same config = identical layout.
    No layout logic allowed in the renderer - all pre-calculated here.
    """
    window: TimeWindow
    ticks: Tuple[TickMark, ...]
    rows: Tuple[PersonLayout, ...]
    widened: bool = False       # True when the caller guard expanded a collapsed window
