import math

import pytest

from modring.arrows import congruent_points, cycle_pairs, reduction_endpoints, shrink
from modring.configuration import Mode
from modring.errors import EmptyArrowMatch
from modring.layout import Point, layout


def test_shrink_pulls_both_ends_in():
    p1 = Point(0.0, 32.0, 0)
    p2 = Point(0.0, -32.0, 1)
    start, end = shrink(p1, p2)
    assert start == pytest.approx((0.0, 28.8))
    assert end == pytest.approx((0.0, -28.8))


def test_shrink_same_point():
    a = (3.0, -4.0)
    assert shrink(a, a) == (a, a)


@pytest.mark.parametrize("a, b", [((0, 0), (10, 0)), ((-3, 7), (5, -1)), ((1.5, 2.5), (1.5, 9.0))])
def test_shrunk_ends_move_towards_each_other(a, b):
    start, end = shrink(a, b)
    assert math.dist(start, b) < math.dist(a, b)
    assert math.dist(end, a) < math.dist(a, b)
    # Still on the segment, same direction.
    assert math.dist(start, end) == pytest.approx(0.9 * math.dist(a, b))


def test_reduction_endpoints_seven_mod_three():
    lay = layout(7, 3)
    outer, inner = reduction_endpoints(lay.points, 7, 3)
    assert (outer.label, inner.label) == (7, 1)


def test_reduction_endpoints_use_only_given_points():
    lay = layout(7, 3)
    outer, inner = reduction_endpoints(lay.points[:5], 7, 3)
    assert (outer.label, inner.label) == (4, 1)


def test_no_congruent_point():
    points = [Point(0.0, 0.0, 0), Point(1.0, 0.0, 3)]
    assert congruent_points(points, 7, 3) == []
    with pytest.raises(EmptyArrowMatch):
        reduction_endpoints(points, 7, 3)


def test_cycle_pairs():
    lay = layout(3, 8, Mode.CYCLE)
    pairs = cycle_pairs(lay.points[:8], 3, 8, 8)
    assert [(a.label, b.label) for a, b in pairs] == [(i, (i + 3) % 8) for i in range(8)]
    assert len(cycle_pairs(lay.points[:8], 3, 8, 2)) == 2
