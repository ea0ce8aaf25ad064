"""
Bar Geometry Tests

Certain and uncertain segments, their order, and the degenerate case
where the earliest death precedes the latest birth.
"""

import logging

import pytest

from lifetimes.contracts.base import DegenerateIntervalError, OutOfWindowError
from lifetimes.contracts.layout import SegmentKind
from lifetimes.core.bars import compute_bar_segments
from lifetimes.core.scale import to_percent, validate_percent
from lifetimes.core.window import compute_window
from lifetimes.temporal.parser import parse_date

from tests.fixtures import make_person


def kinds(segments):
    return [s.kind for s in segments]


class TestCertainOnly:

    def test_single_full_width_segment(self):
        p = make_person("p", "1800", "1850")
        window = compute_window([p])
        segments = compute_bar_segments(window, p)
        assert kinds(segments) == [SegmentKind.CERTAIN]
        assert segments[0].left_percent == 0.0
        assert segments[0].width_percent == 100.0

    def test_idempotent(self):
        p = make_person("p", "1800", "1850")
        window = compute_window([p, make_person("q", "1700", "1900")])
        assert compute_bar_segments(window, p) == compute_bar_segments(window, p)


class TestUncertainBounds:

    def test_uncertain_birth(self):
        p = make_person("p", ("1700", "1705"), "1750")
        window = compute_window([p])
        segments = compute_bar_segments(window, p)

        assert kinds(segments) == [SegmentKind.UNCERTAIN_LEFT, SegmentKind.CERTAIN]
        left, certain = segments
        assert left.left_percent == 0.0
        assert left.width_percent == pytest.approx(to_percent(window, parse_date("1705")))
        assert certain.left_percent == pytest.approx(left.right_percent)
        assert certain.right_percent == pytest.approx(100.0)

    def test_uncertain_death(self):
        p = make_person("p", "1700", ("1750", "1760"))
        window = compute_window([p])
        segments = compute_bar_segments(window, p)

        assert kinds(segments) == [SegmentKind.CERTAIN, SegmentKind.UNCERTAIN_RIGHT]
        certain, right = segments
        assert certain.right_percent == pytest.approx(right.left_percent)
        assert right.right_percent == pytest.approx(100.0)

    def test_both_uncertain_in_left_to_right_order(self):
        p = make_person("p", ("-0470", "-0469"), ("-0400", "-0399"))
        window = compute_window([p])
        segments = compute_bar_segments(window, p)

        assert kinds(segments) == [
            SegmentKind.UNCERTAIN_LEFT, SegmentKind.CERTAIN, SegmentKind.UNCERTAIN_RIGHT,
        ]
        lefts = [s.left_percent for s in segments]
        assert lefts == sorted(lefts)
        assert all(s.width_percent > 0 for s in segments)

    def test_uncertainty_detected_on_parsed_dates(self):
        # differently written, same instant
        p = make_person("p", ("1800", "1800-01-01"), ("1850-1", "1850-01-01"))
        segments = compute_bar_segments(compute_window([p]), p)
        assert kinds(segments) == [SegmentKind.CERTAIN]

    def test_segment_in_sub_window(self):
        p = make_person("p", "1800", "1850")
        other = make_person("q", "1700", "1900")
        window = compute_window([p, other])
        certain = compute_bar_segments(window, p)[0]
        assert certain.left_percent == pytest.approx(to_percent(window, parse_date("1800")))
        assert 0.0 < certain.left_percent < certain.right_percent < 100.0


class TestDegenerate:

    def overlapping(self):
        # death.earliest (1805) precedes birth.latest (1810)
        return make_person("odd", ("1800", "1810"), ("1805", "1850"))

    def test_certain_width_clamped(self, caplog):
        p = self.overlapping()
        window = compute_window([p])
        with caplog.at_level(logging.WARNING, logger="lifetimes.core.bars"):
            segments = compute_bar_segments(window, p)

        certain = next(s for s in segments if s.kind is SegmentKind.CERTAIN)
        assert certain.width_percent == 0.0
        assert certain.left_percent == pytest.approx(to_percent(window, parse_date("1810")))
        assert "clamped to 0" in caplog.text
        assert "'odd'" in caplog.text

    def test_strict_raises(self):
        p = self.overlapping()
        with pytest.raises(DegenerateIntervalError):
            compute_bar_segments(compute_window([p]), p, strict=True)

    def test_uncertain_segments_still_emitted(self):
        p = self.overlapping()
        segments = compute_bar_segments(compute_window([p]), p)
        assert kinds(segments) == [
            SegmentKind.UNCERTAIN_LEFT, SegmentKind.CERTAIN, SegmentKind.UNCERTAIN_RIGHT,
        ]


class TestScale:

    def test_person_outside_window(self):
        inside = make_person("in", "1800", "1850")
        outside = make_person("out", "1900", "1950")
        with pytest.raises(OutOfWindowError):
            compute_bar_segments(compute_window([inside]), outside)

    @pytest.mark.parametrize("raw,expected", [
        (-1e-9, 0.0),
        (100.0 + 1e-9, 100.0),
        (42.5, 42.5),
    ])
    def test_noise_clamped(self, raw, expected):
        assert validate_percent(raw) == expected

    @pytest.mark.parametrize("raw", [-0.5, 100.5, float("nan")])
    def test_out_of_range_rejected(self, raw):
        with pytest.raises(OutOfWindowError):
            validate_percent(raw)
