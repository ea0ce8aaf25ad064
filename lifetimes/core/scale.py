"""
Linear percent scale over a TimeWindow.

Every percentage the layout emits goes through ``to_percent`` or
``validate_percent``. Excursions within ``tolerance`` of the edges are
floating-point noise and are clamped; anything further out raises
OutOfWindowError. The window span is strictly positive, so NaN cannot occur.
"""

from __future__ import annotations

from ..contracts.base import OutOfWindowError
from ..contracts.temporal import TimePoint, TimeWindow

DEFAULT_TOLERANCE = 1e-6


def validate_percent(value: float, tolerance: float = DEFAULT_TOLERANCE) -> float:
    if value != value:  # NaN
        raise OutOfWindowError("percentage is NaN")
    if 0.0 <= value <= 100.0:
        return value
    if -tolerance <= value < 0.0:
        return 0.0
    if 100.0 < value <= 100.0 + tolerance:
        return 100.0
    raise OutOfWindowError(f"percentage {value!r} outside [0, 100]")


def to_percent(window: TimeWindow, point: TimePoint, tolerance: float = DEFAULT_TOLERANCE) -> float:
    """``(point - min) / (max - min) * 100``, validated."""
    raw = window.fraction(point) * 100.0
    try:
        return validate_percent(raw, tolerance)
    except OutOfWindowError as e:
        raise OutOfWindowError(
            f"{point} lies outside window {window.min_date} .. {window.max_date}"
        ) from e
