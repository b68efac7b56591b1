import math

import pytest

from waypoint_core.algo_core.contracts import Path, Point
from waypoint_core.algo_core.core import DEMO_WAYPOINTS
from waypoint_core.algo_core.errors import DegenerateSegmentError, InsufficientPointsError
from waypoint_core.algo_core.extrapolate import inject_boundary_controls
from waypoint_core.algo_core.spline import ALPHA, TENSION, build_segments, calc_coefficients

TOL = 1e-9


def _demo_segments():
    return build_segments(inject_boundary_controls(Path.from_xy(DEMO_WAYPOINTS)))


def test_segment_count():
    assert len(_demo_segments()) == len(DEMO_WAYPOINTS) - 1


def test_segments_hit_their_endpoints():
    controls = inject_boundary_controls(Path.from_xy(DEMO_WAYPOINTS))
    for i, seg in enumerate(build_segments(controls)):
        p1, p2 = controls.get_point(i + 1), controls.get_point(i + 2)
        start, end = seg.evaluate(0.0), seg.evaluate(1.0)
        assert start == p1
        assert end.x == pytest.approx(p2.x, abs=TOL)
        assert end.y == pytest.approx(p2.y, abs=TOL)


def test_every_waypoint_starts_exactly_one_segment():
    starts = [seg.d.as_tuple() for seg in _demo_segments()]
    waypoints = [(float(x), float(y)) for x, y in DEMO_WAYPOINTS]
    # the last waypoint is only ever a segment end
    assert starts == waypoints[:-1]
    assert len(set(starts)) == len(starts)


def test_evenly_spaced_collinear_is_a_straight_line():
    seg = calc_coefficients(ALPHA, TENSION, Point(-3, -4), Point(0, 0), Point(3, 4), Point(6, 8))
    assert seg.a.x == pytest.approx(0.0, abs=TOL) and seg.a.y == pytest.approx(0.0, abs=TOL)
    assert seg.b.x == pytest.approx(0.0, abs=TOL) and seg.b.y == pytest.approx(0.0, abs=TOL)
    assert seg.c == Point(3, 4)
    mid = seg.evaluate(0.5)
    assert (mid.x, mid.y) == (pytest.approx(1.5), pytest.approx(2.0))


def test_full_tension_flattens_tangents():
    seg = calc_coefficients(ALPHA, 1.0, Point(0, 5), Point(0, 0), Point(4, 0), Point(9, 3))
    assert seg.c == Point(0, 0)
    mid = seg.evaluate(0.5)
    assert mid.x == pytest.approx(2.0)
    assert mid.y == pytest.approx(0.0)


def test_coefficients_are_finite():
    for seg in _demo_segments():
        for v in (seg.a, seg.b, seg.c, seg.d):
            assert math.isfinite(v.x) and math.isfinite(v.y)


@pytest.mark.parametrize("quad", [
    [(0, 0), (0, 0), (1, 1), (2, 2)],
    [(0, 0), (1, 1), (1, 1), (2, 2)],
    [(0, 0), (1, 1), (2, 2), (2, 2)],
])
def test_coincident_neighbours_rejected(quad):
    with pytest.raises(DegenerateSegmentError):
        calc_coefficients(ALPHA, TENSION, *[Point(*p) for p in quad])


def test_near_coincident_rejected_with_threshold():
    a, b, c, d = Point(0, 0), Point(1, 1), Point(1, 1 + 1e-9), Point(2, 2)
    calc_coefficients(ALPHA, TENSION, a, b, c, d)
    with pytest.raises(DegenerateSegmentError):
        calc_coefficients(ALPHA, TENSION, a, b, c, d, min_dist=1e-6)


@pytest.mark.parametrize("bad", [Point(float("nan"), 0), Point(float("inf"), 0)])
def test_non_finite_control_rejected(bad):
    with pytest.raises(DegenerateSegmentError):
        calc_coefficients(ALPHA, TENSION, bad, Point(0, 1), Point(1, 1), Point(2, 0))


def test_degenerate_error_carries_segment_index():
    controls = inject_boundary_controls(Path.from_xy([(0, 0), (1, 1), (1, 1), (2, 0)]))
    with pytest.raises(DegenerateSegmentError) as exc:
        build_segments(controls)
    assert exc.value.segment == 0
    assert exc.value.distance == 0.0


def test_build_needs_four_controls():
    with pytest.raises(InsufficientPointsError) as exc:
        build_segments(Path.from_xy([(0, 0), (1, 0), (2, 0)]))
    assert exc.value.needed == 4
