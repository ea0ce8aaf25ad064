"""
Core Layout Engine

RESPONSIBILITY: Window, axis ticks, bar geometry and ordering
ALLOWED INPUTS: PersonRecords, an explicit selection of ids, a TimeWindow
OUTPUTS: TimeWindow, TickMark, BarSegment, ordered PersonRecords

WHAT THIS LAYER MUST NOT DO:
============================
- Hold a "current" selection between calls
- Parse date strings (the temporal layer does that)
- Produce colours, labels in a language, or any DOM detail
- Widen a collapsed window silently

Every function here is pure: identical inputs give bit-identical outputs.
"""

from .ordering import (
    Ordering, ALPHABET_TAILORINGS, DEFAULT_LANGUAGE, collation_key,
    compare_by_birth, compare_by_sort_key, sorted_by_birth, sorted_by_sort_key,
)
from .window import select_people, compute_bounds, compute_window, widen_collapsed
from .axis import generate_ticks, format_year, tick_step, BOUNDARY_LABEL
from .bars import compute_bar_segments
from .scale import to_percent, validate_percent

__all__ = [
    'Ordering', 'ALPHABET_TAILORINGS', 'DEFAULT_LANGUAGE', 'collation_key',
    'compare_by_birth', 'compare_by_sort_key', 'sorted_by_birth', 'sorted_by_sort_key',
    'select_people', 'compute_bounds', 'compute_window', 'widen_collapsed',
    'generate_ticks', 'format_year', 'tick_step', 'BOUNDARY_LABEL',
    'compute_bar_segments',
    'to_percent', 'validate_percent',
]
