"""Tests for scanline intervals and the overlay algorithm."""

import random

import pytest

from firetrace.mesh.interval import IntervalLine, IntervalSegment
from firetrace.types import BurnStatus

U = BurnStatus.UNBURNED
B = BurnStatus.BURNED
F = BurnStatus.BURNING
E = BurnStatus.EDGE
X = BurnStatus.UNBURNABLE


def spans(line):
    """(begins, ends, status) triples for compact assertions."""
    return [(s.begins, s.ends, s.status) for s in line]


@pytest.fixture
def line():
    """A 4000-unit unburned scanline."""
    return IntervalLine.filled(0.0, 0.0, 4000.0)


class TestIntervalSegment:
    """Test single-interval helpers."""

    def test_reversed_bounds_normalized(self):
        """Bounds given high-to-low are stored low-to-high."""
        segment = IntervalSegment(10.0, 2.0, U)
        assert (segment.begins, segment.ends) == (2.0, 10.0)
        assert segment.length == 8.0

    def test_connects(self):
        """Segments sharing an endpoint connect in either order."""
        assert IntervalSegment(0.0, 5.0, U).connects(IntervalSegment(5.0, 9.0, B))
        assert IntervalSegment(5.0, 9.0, B).connects(IntervalSegment(0.0, 5.0, U))
        assert not IntervalSegment(0.0, 5.0, U).connects(IntervalSegment(6.0, 9.0, B))

    def test_contains_half_open(self):
        """A segment includes its start but not its end."""
        segment = IntervalSegment(0.0, 5.0, U)
        assert segment.contains(0.0)
        assert segment.contains(4.999)
        assert not segment.contains(5.0)


class TestFill:
    """Test filled scanlines."""

    def test_filled_line(self, line):
        """A filled line is one segment followed by a zero-width EDGE."""
        assert spans(line) == [(0.0, 4000.0, U), (4000.0, 4000.0, E)]
        assert line.pos == 0.0
        assert line.begins == 0.0
        assert line.ends == 4000.0

    def test_fill_resets(self, line):
        """Refilling discards earlier overlays."""
        line.overlay(10.0, 20.0, B)
        line.fill(0.0, 50.0, B)
        assert spans(line) == [(0.0, 50.0, B), (50.0, 50.0, E)]

    def test_empty_line(self):
        """An empty line has no extent, statuses or fronts."""
        empty = IntervalLine(3.0)
        assert len(empty) == 0
        assert empty.begins is None
        assert empty.ends is None
        assert empty.value_at(1.0) is None
        assert empty.scanline_fire_fronts() == []


class TestOverlay:
    """Test incorporating new intervals into a scanline."""

    def test_middle_overlay_splits(self, line):
        """An overlay inside one segment splits it in three."""
        line.overlay(1000.0, 2000.0, B)
        assert spans(line) == [
            (0.0, 1000.0, U),
            (1000.0, 2000.0, B),
            (2000.0, 4000.0, U),
            (4000.0, 4000.0, E),
        ]

    def test_overlay_returns_line(self, line):
        """overlay() mutates and returns the same line."""
        assert line.overlay(1.0, 2.0, B) is line

    def test_contained_overlay_same_status_is_noop(self, line):
        """Overlaying a status inside a segment of that status changes nothing."""
        line.overlay(1000.0, 2000.0, B)
        before = line.segments
        line.overlay(1500.0, 1600.0, B)
        assert line.segments == before

    def test_overlay_is_idempotent(self, line):
        """Applying the same overlay twice equals applying it once."""
        line.overlay(1000.0, 2000.0, B)
        before = line.segments
        line.overlay(1000.0, 2000.0, B)
        assert line.segments == before

    def test_overlay_spanning_multiple_segments(self, line):
        """Covered segments are replaced and partially covered ones trimmed."""
        line.overlay(1000.0, 2000.0, B)
        line.overlay(3000.0, 3500.0, B)
        line.overlay(500.0, 3200.0, F)
        assert spans(line) == [
            (0.0, 500.0, U),
            (500.0, 3200.0, F),
            (3200.0, 3500.0, B),
            (3500.0, 4000.0, U),
            (4000.0, 4000.0, E),
        ]

    def test_connected_equal_status_merges(self, line):
        """Touching segments of equal status merge on either side."""
        line.overlay(1000.0, 2000.0, B)
        line.overlay(2000.0, 2500.0, B)
        assert spans(line)[1] == (1000.0, 2500.0, B)
        line.overlay(500.0, 1000.0, B)
        assert spans(line)[:2] == [(0.0, 500.0, U), (500.0, 2500.0, B)]

    def test_restoring_status_merges_neighbors(self, line):
        """Overlaying the surrounding status heals the line into one segment."""
        line.overlay(1000.0, 2000.0, B)
        line.overlay(1000.0, 2000.0, U)
        assert spans(line) == [(0.0, 4000.0, U), (4000.0, 4000.0, E)]

    def test_overlay_at_line_start(self, line):
        """An overlay starting at the line start has no leading portion."""
        line.overlay(0.0, 100.0, B)
        assert spans(line)[:2] == [(0.0, 100.0, B), (100.0, 4000.0, U)]

    def test_reversed_range_normalized(self, line):
        """begins > ends is treated as the same range in order."""
        line.overlay(2000.0, 1000.0, B)
        assert spans(line)[1] == (1000.0, 2000.0, B)

    def test_zero_width_overlay_is_noop(self, line):
        """An empty range leaves the line untouched."""
        before = line.segments
        line.overlay(1000.0, 1000.0, B)
        assert line.segments == before

    def test_range_clamped_to_edge_sentinel(self, line):
        """Ranges reaching past the EDGE sentinel stop at it."""
        line.overlay(3000.0, 99999.0, B)
        assert spans(line) == [(0.0, 3000.0, U), (3000.0, 4000.0, B), (4000.0, 4000.0, E)]

    def test_range_clamped_at_line_start(self, line):
        """Ranges reaching below the line start stop at it."""
        line.overlay(-9999.0, 99999.0, B)
        assert spans(line) == [(0.0, 4000.0, B), (4000.0, 4000.0, E)]
        assert line.begins == 0.0

    def test_whole_line_overlay_collapses(self, line):
        """Burning past both ends of a split line leaves one segment and the EDGE."""
        line.overlay(1000.0, 2000.0, B)
        line.overlay(-9999.0, 99999.0, B)
        assert spans(line) == [(0.0, 4000.0, B), (4000.0, 4000.0, E)]
        assert line.scanline_fire_fronts() == []

    def test_clamped_start_stays_outside_line(self):
        """Positions before the line start stay outside it after a clamped overlay."""
        line = IntervalLine.filled(0.0, 0.0, 100.0)
        line.overlay(-10.0, 100.0, B)
        assert line.value_at(-5.0) is None
        assert spans(line) == [(0.0, 100.0, B), (100.0, 100.0, E)]

    def test_line_without_sentinels_clamped_to_its_segments(self):
        """A line with no sentinels is clamped to its first and last segments."""
        line = IntervalLine(0.0, [IntervalSegment(10.0, 20.0, U), IntervalSegment(20.0, 30.0, B)])
        line.overlay(0.0, 50.0, F)
        assert spans(line) == [(10.0, 30.0, F)]

    def test_overlay_entirely_past_edge_is_noop(self, line):
        """A range wholly beyond the EDGE clamps to nothing."""
        before = line.segments
        line.overlay(5000.0, 6000.0, B)
        assert line.segments == before

    def test_leading_unburnable_sentinel_preserved(self):
        """A leading UNBURNABLE sentinel is neither split nor overwritten."""
        line = IntervalLine(
            0.0,
            [IntervalSegment(-10.0, 0.0, X), IntervalSegment(0.0, 100.0, U), IntervalSegment(100.0, 100.0, E)],
        )
        line.overlay(-50.0, 20.0, B)
        assert spans(line) == [
            (-10.0, 0.0, X),
            (0.0, 20.0, B),
            (20.0, 100.0, U),
            (100.0, 100.0, E),
        ]

    def test_overlaid_returns_new_line(self, line):
        """overlaid() builds a new line and leaves this one as it was."""
        before = line.segments
        burned = line.overlaid(1000.0, 2000.0, B)
        assert line.segments == before
        assert burned is not line
        assert burned.pos == line.pos
        assert len(burned) == 4

    def test_randomized_overlays_match_cell_model(self):
        """Integer overlays agree with a per-cell status model and stay consolidated."""
        rng = random.Random(20240611)
        statuses = [U, F, B]
        for _ in range(50):
            line = IntervalLine.filled(7.0, 0.0, 100.0)
            cells = [U] * 100
            for _ in range(40):
                a, b = rng.randint(-10, 110), rng.randint(-10, 110)
                status = rng.choice(statuses)
                line.overlay(float(a), float(b), status)
                for i in range(max(0, min(a, b)), min(100, max(a, b))):
                    cells[i] = status

                assert line.is_consolidated()
                assert line[0].begins == 0.0
                assert spans(line)[-1] == (100.0, 100.0, E)
                for prev, segment in zip(line.segments, line.segments[1:]):
                    assert prev.ends == segment.begins
                for i in range(100):
                    assert line.value_at(i + 0.5) is cells[i]
                assert line.value_at(-0.5) is None


class TestValueAt:
    """Test status lookup along a scanline."""

    def test_value_at(self, line):
        """Lookups honor half-open segments and the zero-width EDGE."""
        line.overlay(1000.0, 2000.0, B)
        assert line.value_at(0.0) is U
        assert line.value_at(999.9) is U
        assert line.value_at(1000.0) is B
        assert line.value_at(2000.0) is U
        assert line.value_at(4000.0) is E

    def test_value_outside_line(self, line):
        """Positions outside the line have no status."""
        assert line.value_at(-1.0) is None
        assert line.value_at(4001.0) is None


class TestFireFronts:
    """Test fire front extraction."""

    def test_unburned_line_has_no_fronts(self, line):
        """A fresh line has no fronts."""
        assert line.scanline_fire_fronts() == []

    def test_burned_island(self, line):
        """A burned island has a front at each end."""
        line.overlay(1000.0, 2000.0, B)
        assert line.scanline_fire_fronts() == [1000.0, 2000.0]

    def test_burning_counts_as_fire(self, line):
        """BURNING segments border fronts like BURNED ones."""
        line.overlay(1000.0, 2000.0, F)
        assert line.scanline_fire_fronts() == [1000.0, 2000.0]

    def test_burning_to_burned_is_not_a_front(self, line):
        """A boundary between two burnt statuses is not a front."""
        line.overlay(1000.0, 2000.0, B)
        line.overlay(1500.0, 2000.0, F)
        assert line.scanline_fire_fronts() == [1000.0, 2000.0]

    def test_fire_against_edge_is_not_a_front(self, line):
        """Fire reaching the EDGE sentinel adds no front there."""
        line.overlay(3000.0, 4000.0, B)
        assert line.scanline_fire_fronts() == [3000.0]

    def test_fully_burned_line(self, line):
        """A wholly burned line has no fronts."""
        line.overlay(0.0, 4000.0, B)
        assert line.scanline_fire_fronts() == []


class TestQueries:
    """Test range queries and burned length."""

    def test_segments_between(self, line):
        """Only segments overlapping the range are returned."""
        line.overlay(1000.0, 2000.0, B)
        found = line.segments_between(1500.0, 2500.0)
        assert [s.status for s in found] == [B, U]

    def test_segments_between_reversed(self, line):
        """Reversed query ranges are normalized."""
        line.overlay(1000.0, 2000.0, B)
        assert line.segments_between(2500.0, 1500.0) == line.segments_between(1500.0, 2500.0)

    def test_burned_length(self, line):
        """Burned length sums BURNED and BURNING segments."""
        assert line.burned_length() == 0.0
        line.overlay(1000.0, 2000.0, B)
        line.overlay(3000.0, 3250.0, F)
        assert line.burned_length() == 1250.0

    def test_is_consolidated_detects_unmerged(self):
        """Touching equal-status segments break consolidation."""
        line = IntervalLine(0.0, [IntervalSegment(0.0, 5.0, U), IntervalSegment(5.0, 9.0, U)])
        assert not line.is_consolidated()

    def test_is_consolidated_detects_overlap(self):
        """Overlapping segments break consolidation."""
        line = IntervalLine(0.0, [IntervalSegment(0.0, 5.0, U), IntervalSegment(4.0, 9.0, B)])
        assert not line.is_consolidated()
