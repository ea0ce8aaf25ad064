"""
Bar Geometry Calculator

Maps one person's birth/death intervals onto percent geometry.

CONVENTION:
===========
The CERTAIN segment runs from birth.latest to death.earliest - the span in
which the person is alive under the worst case of both bounds. Uncertainty
narrows the certain segment inward; it never widens the bar.

    birth.earliest   birth.latest          death.earliest   death.latest
         |---- left ----|======= certain =======|---- right ----|

Segments are emitted in that left-to-right order. UNCERTAIN_LEFT and
UNCERTAIN_RIGHT only exist when the respective bounds differ.

DEGENERATE INPUT:
=================
death.earliest before birth.latest gives a negative certain width. It is
clamped to zero and logged as a data-quality condition; with strict=True a
DegenerateIntervalError is raised instead.
"""

from __future__ import annotations
import logging
from typing import List, Tuple

from ..contracts.base import DegenerateIntervalError
from ..contracts.layout import BarSegment, SegmentKind
from ..contracts.person import PersonRecord
from ..contracts.temporal import TimePoint, TimeWindow
from .scale import DEFAULT_TOLERANCE, to_percent

logger = logging.getLogger(__name__)


def _span_segment(
    window: TimeWindow,
    kind: SegmentKind,
    start: TimePoint,
    end: TimePoint,
    tolerance: float,
) -> BarSegment:
    left = to_percent(window, start, tolerance)
    right = to_percent(window, end, tolerance)
    return BarSegment(kind=kind, left_percent=left, width_percent=right - left)


def compute_bar_segments(
    window: TimeWindow,
    person: PersonRecord,
    strict: bool = False,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Tuple[BarSegment, ...]:
    """Ordered bar segments of ``person`` inside ``window``."""
    segments: List[BarSegment] = []

    if not person.birth.is_certain:
        segments.append(_span_segment(
            window, SegmentKind.UNCERTAIN_LEFT,
            person.birth.earliest, person.birth.latest, tolerance,
        ))

    certain = _span_segment(
        window, SegmentKind.CERTAIN,
        person.certain_start, person.certain_end, tolerance,
    )
    if certain.width_percent < 0:
        error = DegenerateIntervalError(
            f"person {person.person_id!r}: earliest death {person.certain_end} "
            f"precedes latest birth {person.certain_start}"
        )
        if strict:
            raise error
        logger.warning("%s; certain width clamped to 0", error.message)
        certain = BarSegment(
            kind=SegmentKind.CERTAIN,
            left_percent=certain.left_percent,
            width_percent=0.0,
        )
    segments.append(certain)

    if not person.death.is_certain:
        segments.append(_span_segment(
            window, SegmentKind.UNCERTAIN_RIGHT,
            person.death.earliest, person.death.latest, tolerance,
        ))

    return tuple(segments)
