"""
Contracts Module

Immutable types shared by every layer of the timeline engine.
Layers communicate ONLY through these contracts.

DESIGN PRINCIPLES:
==================
1. All contract types are immutable (frozen dataclasses)
2. All failure modes are enumerated in ErrorCode
3. TimePoint is the only representation of a date past the parser
4. View-model values (ticks, segments) carry no rendering details
"""

from .base import (
    ErrorCode, TimelineError,
    MalformedDateError, InvertedIntervalError, EmptyWindowError,
    DegenerateIntervalError, OutOfWindowError, UnknownEntityError,
    DatasetFormatError, MissingFieldError,
)
from .temporal import TimePoint, UncertainInterval, TimeWindow
from .person import PersonRecord
from .layout import (
    TickKind, SegmentKind, TickMark, BarSegment, PersonLayout, TimelineLayout
)

__all__ = [
    'ErrorCode', 'TimelineError',
    'MalformedDateError', 'InvertedIntervalError', 'EmptyWindowError',
    'DegenerateIntervalError', 'OutOfWindowError', 'UnknownEntityError',
    'DatasetFormatError', 'MissingFieldError',
    'TimePoint', 'UncertainInterval', 'TimeWindow',
    'PersonRecord',
    'TickKind', 'SegmentKind', 'TickMark', 'BarSegment', 'PersonLayout',
    'TimelineLayout',
]
