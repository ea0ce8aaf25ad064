"""
Property Tests for the Layout Engine
Verifies ordering, percent bounds, tick monotonicity and determinism over
generated people.
"""

from hypothesis import given, settings, strategies as st

from lifetimes.contracts.layout import SegmentKind
from lifetimes.contracts.person import PersonRecord
from lifetimes.contracts.temporal import TimePoint, UncertainInterval
from lifetimes.engine import LayoutConfig, recompute
from lifetimes.temporal.parser import parse_date


# =============================================================================
# STRATEGIES
# =============================================================================

@st.composite
def time_points(draw, min_year=-3000, max_year=3000):
    year = draw(st.integers(min_value=min_year, max_value=max_year).filter(lambda y: y != 0))
    month = draw(st.integers(min_value=1, max_value=12))
    day = draw(st.integers(min_value=1, max_value=28))
    return TimePoint(year, month, day)


@st.composite
def intervals(draw):
    a, b = sorted([draw(time_points()), draw(time_points())])
    return UncertainInterval(earliest=a, latest=b)


@st.composite
def people(draw, person_id):
    """Birth and death drawn independently; may be inconsistent or degenerate."""
    return PersonRecord(
        person_id=person_id,
        birth=draw(intervals()),
        death=draw(intervals()),
        sort_key=draw(st.text(min_size=1, max_size=8)),
    )


@st.composite
def datasets(draw):
    n = draw(st.integers(min_value=1, max_value=6))
    return [draw(people(f"p{i}")) for i in range(n)]


@st.composite
def consistent_datasets(draw):
    """Four sorted bounds per person: never degenerate."""
    n = draw(st.integers(min_value=1, max_value=6))
    dataset = []
    for i in range(n):
        b0, b1, d0, d1 = sorted(draw(time_points()) for _ in range(4))
        dataset.append(PersonRecord(
            person_id=f"p{i}",
            birth=UncertainInterval(b0, b1),
            death=UncertainInterval(d0, d1),
            sort_key=f"name{i}",
        ))
    return dataset


# =============================================================================
# TEMPORAL ORDER
# =============================================================================

class TestTemporalOrder:

    @given(time_points(), time_points())
    def test_order_matches_day_number(self, a, b):
        assert (a < b) == (a.day_number < b.day_number)
        assert (a == b) == (a.day_number == b.day_number)

    @given(time_points())
    def test_isoformat_reparses(self, point):
        assert parse_date(point.isoformat()) == point

    @given(time_points(), time_points())
    def test_difference_is_signed_days(self, a, b):
        assert (a - b).days == -(b - a).days


# =============================================================================
# LAYOUT
# =============================================================================

class TestLayoutInvariants:

    @settings(max_examples=75, deadline=None)
    @given(datasets(), st.data())
    def test_percentages_within_bounds(self, dataset, data):
        selected = data.draw(st.sets(st.sampled_from([p.person_id for p in dataset]), min_size=1))
        layout = recompute(dataset, selected)

        for tick in layout.ticks:
            assert 0.0 <= tick.position_percent <= 100.0
        for row in layout.rows:
            for seg in row.segments:
                assert 0.0 <= seg.left_percent <= 100.0
                assert seg.width_percent >= 0.0
                assert seg.right_percent <= 100.0 + 1e-9

    @settings(max_examples=75, deadline=None)
    @given(datasets())
    def test_ticks_ascending_without_year_zero(self, dataset):
        layout = recompute(dataset)
        real = [t for t in layout.ticks if not t.is_boundary]
        years = [t.year for t in real]
        assert 0 not in years
        assert years == sorted(set(years))

        positions = [t.position_percent for t in layout.ticks]
        assert positions == sorted(positions)

        boundaries = [i for i, t in enumerate(layout.ticks) if t.is_boundary]
        assert len(boundaries) <= 1
        for i in boundaries:
            before, marker, after = layout.ticks[i - 1], layout.ticks[i], layout.ticks[i + 1]
            assert before.year < 0 < after.year
            assert before.position_percent < marker.position_percent < after.position_percent

    @settings(max_examples=50, deadline=None)
    @given(datasets())
    def test_rows_in_birth_order(self, dataset):
        layout = recompute(dataset, [p.person_id for p in dataset])
        by_id = {p.person_id: p for p in dataset}
        births = [by_id[r.person_id].birth.earliest for r in layout.rows]
        assert births == sorted(births)
        assert sorted(r.person_id for r in layout.rows) == sorted(by_id)

    @settings(max_examples=50, deadline=None)
    @given(datasets())
    def test_segment_kinds_follow_certainty(self, dataset):
        layout = recompute(dataset, [p.person_id for p in dataset])
        by_id = {p.person_id: p for p in dataset}
        for row in layout.rows:
            person = by_id[row.person_id]
            assert (row.segment(SegmentKind.UNCERTAIN_LEFT) is None) == person.birth.is_certain
            assert (row.segment(SegmentKind.UNCERTAIN_RIGHT) is None) == person.death.is_certain
            assert row.segment(SegmentKind.CERTAIN) is not None

    @settings(max_examples=50, deadline=None)
    @given(datasets())
    def test_empty_selection_same_window_as_everyone(self, dataset):
        everyone = recompute(dataset, [p.person_id for p in dataset])
        nobody = recompute(dataset, [])
        assert nobody.window == everyone.window
        assert nobody.ticks == everyone.ticks
        assert nobody.rows == ()

    @settings(max_examples=50, deadline=None)
    @given(datasets())
    def test_recompute_is_deterministic(self, dataset):
        ids = [p.person_id for p in dataset]
        assert recompute(dataset, ids) == recompute(dataset, list(reversed(ids)))

    @settings(max_examples=25, deadline=None)
    @given(consistent_datasets())
    def test_strict_mode_accepts_consistent_people(self, dataset):
        ids = [p.person_id for p in dataset]
        lenient = recompute(dataset, ids)
        strict = recompute(dataset, ids, LayoutConfig(strict_intervals=True))
        assert lenient == strict
