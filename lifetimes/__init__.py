"""
Lifetimes Timeline Engine

Lays out historical persons as horizontal bars on a proportional time axis.
Birth and death are uncertain intervals; dates may be BCE or CE and the axis
may cross the missing year 0.

LAYER STRUCTURE:
================

1. CONTRACTS (contracts/)
   - Immutable types: TimePoint, UncertainInterval, PersonRecord,
     TimeWindow, TickMark, BarSegment, TimelineLayout, error taxonomy

2. TEMPORAL LAYER (temporal/)
   - Responsibility: Date strings -> TimePoints, calendar day arithmetic
   - MUST NOT: Guess dates, repair bounds

3. CORE LAYOUT (core/)
   - Responsibility: Window, axis ticks, bar geometry, person ordering
   - MUST NOT: Hold selection state, render anything

4. ENGINE (engine.py)
   - Responsibility: One pure ``recompute`` per selection change

5. OUTER SURFACES (api/, cli.py)
   - Read-only HTTP API and inspection CLI over a loaded dataset

6. OBSERVABILITY (observability/)
   - Logging configuration

The dataset loader lives in the separate ``ingestion`` package.

CONSTRAINTS ENFORCED:
=====================
- Immutability-first: all data structures are frozen
- Deterministic: identical inputs always produce identical layouts
- Explicit errors: every failure mode has an ErrorCode
"""

from .contracts import (
    TimePoint, UncertainInterval, TimeWindow, PersonRecord,
    TickMark, BarSegment, PersonLayout, TimelineLayout, TickKind, SegmentKind,
)
from .temporal.parser import parse_date, parse_interval, normalize_date_string
from .engine import LayoutConfig, TimelineLayoutEngine, recompute, selection_list

__version__ = "0.1.0"

__all__ = [
    'TimePoint', 'UncertainInterval', 'TimeWindow', 'PersonRecord',
    'TickMark', 'BarSegment', 'PersonLayout', 'TimelineLayout', 'TickKind',
    'SegmentKind',
    'parse_date', 'parse_interval', 'normalize_date_string',
    'LayoutConfig', 'TimelineLayoutEngine', 'recompute', 'selection_list',
]
