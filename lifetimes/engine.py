"""
Engine Orchestration Module

The single pure entry point the presentation layer calls on every selection
change or viewport resize.

DESIGN PRINCIPLES:
==================
1. The caller passes the selection explicitly on every call
2. Every call is a full recomputation - no memoization, no listeners
3. The engine holds configuration only, never data or selection
4. The collapsed-window guard lives here, outside the range computer
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import AbstractSet, Iterable, List, Optional, Sequence, Tuple
import logging

from .contracts.base import EmptyWindowError
from .contracts.layout import PersonLayout, TimelineLayout
from .contracts.person import PersonRecord
from .contracts.temporal import TimeWindow
from .core.axis import DEFAULT_TARGET_TICKS, generate_ticks
from .core.bars import compute_bar_segments
from .core.ordering import DEFAULT_LANGUAGE, sorted_by_birth, sorted_by_sort_key
from .core.scale import DEFAULT_TOLERANCE
from .core.window import compute_bounds, select_people, widen_collapsed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutConfig:
    """Configuration for a layout pass."""
    target_ticks: int = DEFAULT_TARGET_TICKS
    min_span_days: int = 365            # width of the window around a collapsed selection
    strict_intervals: bool = False      # raise instead of clamping degenerate certain spans
    percent_tolerance: float = DEFAULT_TOLERANCE
    sort_language: str = DEFAULT_LANGUAGE  # collation of sort keys (tie-breaks, selection list)

    def __post_init__(self):
        if self.target_ticks < 1:
            raise ValueError("target_ticks must be positive")
        if self.min_span_days < 1:
            raise ValueError("min_span_days must be at least 1")
        if not 0.0 <= self.percent_tolerance < 1.0:
            raise ValueError("percent_tolerance must be in [0, 1)")
        if not self.sort_language:
            raise ValueError("sort_language must be a non-empty string")


def resolve_window(
    people: Sequence[PersonRecord],
    selected_ids: AbstractSet[str],
    config: LayoutConfig,
) -> Tuple[TimeWindow, bool]:
    """
    Window for the selection, widened when it collapses to a single instant.

    Returns (window, widened). An empty dataset still raises EmptyWindowError.
    """
    min_date, max_date = compute_bounds(people, selected_ids)
    try:
        return TimeWindow(min_date=min_date, max_date=max_date), False
    except EmptyWindowError:
        window = widen_collapsed(min_date, config.min_span_days)
        logger.info(
            "Collapsed window at %s widened to %s .. %s",
            min_date, window.min_date, window.max_date,
        )
        return window, True


def recompute(
    people: Sequence[PersonRecord],
    selected_ids: Iterable[str] = (),
    config: Optional[LayoutConfig] = None,
) -> TimelineLayout:
    """
    Full layout for one selection.

    - Window over the selection (everyone when the selection is empty)
    - Axis ticks for that window
    - One row per SELECTED person, in birth order; no rows when nothing is
      selected
    """
    config = config or LayoutConfig()
    selection = frozenset(selected_ids)

    window, widened = resolve_window(people, selection, config)
    ticks = generate_ticks(window, config.target_ticks, config.percent_tolerance)

    visible = (
        sorted_by_birth(select_people(people, selection), config.sort_language)
        if selection else []
    )
    rows = tuple(
        PersonLayout(
            person_id=person.person_id,
            segments=compute_bar_segments(
                window, person,
                strict=config.strict_intervals,
                tolerance=config.percent_tolerance,
            ),
        )
        for person in visible
    )

    return TimelineLayout(window=window, ticks=ticks, rows=rows, widened=widened)


def selection_list(
    people: Iterable[PersonRecord],
    language: str = DEFAULT_LANGUAGE,
) -> List[PersonRecord]:
    """People in the order the selection list shows them."""
    return sorted_by_sort_key(people, language)


class TimelineLayoutEngine:
    """
    Object wrapper around ``recompute`` for callers that keep a configured
    engine around. Holds configuration only.
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        self._config = config or LayoutConfig()

    @property
    def config(self) -> LayoutConfig:
        return self._config

    def layout(
        self,
        people: Sequence[PersonRecord],
        selected_ids: Iterable[str] = (),
    ) -> TimelineLayout:
        return recompute(people, selected_ids, self._config)

    def selection_list(self, people: Iterable[PersonRecord]) -> List[PersonRecord]:
        return selection_list(people, self._config.sort_language)
