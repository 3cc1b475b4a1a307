import math

import pytest

from inksmooth.core import bezier_control_points, BEZIER_TIGHTNESS


@pytest.mark.parametrize("n", [3, 4, 7])
def test_two_controls_per_interior_knot(n):
    pts = [(float(i), math.sin(i)) for i in range(n)]
    assert len(bezier_control_points(pts)) == 2 * (n - 2)


@pytest.mark.parametrize("pts", [[], [(1.0, 1.0)], [(0.0, 0.0), (3.0, 4.0)]])
def test_too_few_points_give_nothing(pts):
    assert bezier_control_points(pts) == []


def test_collinear_knots_keep_controls_on_the_line():
    ctrl = bezier_control_points([(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)])
    assert len(ctrl) == 2
    before, after = ctrl
    assert before[1] == pytest.approx(0.0)
    assert after[1] == pytest.approx(0.0)
    # symmetric around the knot along the chord
    assert before == pytest.approx((1.0 - BEZIER_TIGHTNESS, 0.0))
    assert after == pytest.approx((1.0 + BEZIER_TIGHTNESS, 0.0))


def test_controls_follow_neighbour_chord():
    # chord from (0, 0) to (4, 0); knot raised above it
    before, after = bezier_control_points([(0.0, 0.0), (1.0, 3.0), (4.0, 0.0)])
    assert before == pytest.approx((1.0 - 0.5 * 1.0, 3.0))
    assert after == pytest.approx((1.0 + 0.5 * 3.0, 3.0))


def test_coincident_neighbours_collapse_onto_knot():
    ctrl = bezier_control_points([(2.0, 2.0), (5.0, 7.0), (2.0, 2.0)])
    assert ctrl == [(5.0, 7.0), (5.0, 7.0)]
    assert all(math.isfinite(c) for p in ctrl for c in p)


def test_tightness_scales_offsets():
    pts = [(0.0, 0.0), (2.0, 1.0), (4.0, 0.0)]
    assert bezier_control_points(pts, tightness=0.0) == [(2.0, 1.0), (2.0, 1.0)]
    loose = bezier_control_points(pts, tightness=1.0)
    assert loose[0] == pytest.approx((0.0, 1.0))
    assert loose[1] == pytest.approx((4.0, 1.0))
