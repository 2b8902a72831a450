import math

import pytest

from modring.configuration import Mode
from modring.errors import InvalidConfiguration
from modring.layout import Point, layout, ring_count, slot_angles


def test_seven_mod_three():
    lay = layout(7, 3, Mode.REDUCTION)
    assert len(lay.points) == 8
    assert lay.ring_count == 3
    # Label 0 at the top of ring 0, radius 32 * 3 / 4.
    assert lay.points[0] == Point(0.0, 24.0, 0)
    assert lay.points[-1].label == 7


def test_exact_multiple_needs_an_extra_ring():
    lay = layout(3, 3, Mode.REDUCTION)
    assert lay.ring_count == 2
    last = lay.points[-1]
    assert last.label == 3
    assert lay.ring_index(last.label) == 1
    assert [p for p in lay.points if lay.ring_index(p.label) == 1] == [last]
    # Alone on ring 1, at the top.
    assert last.x == pytest.approx(0.0)
    assert last.y == pytest.approx(24.0 + 40.0)


def test_seventeen_mod_twelve():
    lay = layout(17, 12, Mode.REDUCTION)
    assert len(lay.points) == 18
    assert lay.ring_count == 2


def test_cycle_mode_single_ring():
    lay = layout(1, 3, Mode.CYCLE)
    assert len(lay.points) == 3
    assert lay.ring_count == 1
    assert lay.base_radius == 320.0
    for p in lay.points:
        assert math.hypot(p.x, p.y) == pytest.approx(320.0)


@pytest.mark.parametrize("modulus", range(1, 16))
@pytest.mark.parametrize("natural", [0, 1, 2, 6, 13, 29, 40])
def test_reduction_counts(natural, modulus):
    lay = layout(natural, modulus, Mode.REDUCTION)
    assert len(lay.points) == natural + 1
    assert lay.ring_count == math.ceil((natural + 1) / modulus)
    assert [p.label for p in lay.points] == list(range(natural + 1))


@pytest.mark.parametrize("modulus", [1, 2, 5, 7, 11, 12, 36, 360])
def test_cycle_counts(modulus):
    lay = layout(4, modulus, Mode.CYCLE)
    assert len(lay.points) == modulus
    assert lay.ring_count == 1
    assert [p.label for p in lay.points] == list(range(modulus))


def test_stride_not_dividing_360_drops_the_extra_slot():
    # 360 // 7 = 51 -> slots 0, 51, ..., 357: eight of them for seven residues.
    lay = layout(13, 7, Mode.REDUCTION)
    assert len(lay.points) == 14
    on_ring = [sum(1 for p in lay.points if lay.ring_index(p.label) == nr) for nr in range(lay.ring_count)]
    assert on_ring == [7, 7]
    # Label 7 opens ring 1 at the top instead of sitting in slot 357 of ring 0.
    p7 = lay.points[7]
    assert p7.x == pytest.approx(0.0)
    assert p7.y == pytest.approx(32.0 * 7 / 4 + 40.0)


def test_points_sit_on_their_ring():
    lay = layout(25, 6, Mode.REDUCTION)
    for p in lay.points:
        nr = lay.ring_index(p.label)
        assert math.hypot(p.x, p.y) == pytest.approx(lay.ring_radius(nr))


def test_congruent_labels_share_a_ray():
    lay = layout(20, 5, Mode.REDUCTION)
    for p in lay.points:
        base = lay.points[p.label % 5]
        assert math.atan2(p.x, p.y) == pytest.approx(math.atan2(base.x, base.y))


def test_clockwise_from_top():
    lay = layout(3, 4, Mode.REDUCTION)
    # 0 top, 1 right, 2 bottom, 3 left
    assert lay.points[1].x == pytest.approx(32.0)
    assert lay.points[1].y == pytest.approx(0.0, abs=1e-9)
    assert lay.points[2].y == pytest.approx(-32.0)
    assert lay.points[3].x == pytest.approx(-32.0)


def test_outer_radius():
    lay = layout(7, 3, Mode.REDUCTION)
    assert lay.outer_radius == pytest.approx(24.0 + 2 * 40.0)


def test_ring_count_helper():
    assert ring_count(2, 3, Mode.REDUCTION) == 1
    assert ring_count(3, 3, Mode.REDUCTION) == 2
    assert ring_count(99, 3, Mode.CYCLE) == 1


@pytest.mark.parametrize("natural, modulus", [(5, 0), (-1, 3), (2**32, 3), (1.5, 3), (3, "4"), (True, 3)])
def test_invalid_configuration(natural, modulus):
    with pytest.raises(InvalidConfiguration):
        layout(natural, modulus, Mode.REDUCTION)


def test_modulus_zero_is_also_a_value_error():
    with pytest.raises(ValueError):
        layout(1, 0, Mode.CYCLE)


def test_layout_is_immutable():
    lay = layout(4, 2, Mode.REDUCTION)
    with pytest.raises(AttributeError):
        lay.points[0].label = 9
    assert isinstance(lay.points, tuple)


def _angle(p):
    return math.degrees(math.atan2(p.x, p.y)) % 360


@pytest.mark.parametrize("modulus", [361, 400, 1000])
def test_modulus_above_360_reduction(modulus):
    lay = layout(5, modulus, Mode.REDUCTION)
    assert len(lay.points) == 6
    assert lay.ring_count == 1
    assert [p.label for p in lay.points] == list(range(6))


def test_modulus_400_cycle_goes_all_the_way_round():
    lay = layout(1, 400, Mode.CYCLE)
    assert len(lay.points) == 400
    assert lay.ring_count == 1
    angles = [_angle(p) for p in lay.points]
    assert angles[0] == pytest.approx(0.0)
    assert angles[1] == pytest.approx(0.9)
    assert angles[-1] == pytest.approx(359.1)


def test_modulus_400_second_ring():
    lay = layout(400, 400, Mode.REDUCTION)
    assert len(lay.points) == 401
    assert lay.ring_count == 2
    last = lay.points[-1]
    assert lay.ring_index(last.label) == 1
    assert _angle(last) == pytest.approx(0.0)


def test_slot_angles():
    assert list(slot_angles(7)) == list(range(0, 360, 51))
    assert list(slot_angles(360)) == list(range(360))
    # 1 deg slots would only cover 200 deg of the circle.
    slots = slot_angles(200)
    assert len(slots) == 200
    assert slots[1] == pytest.approx(1.8)
    assert slots[-1] == pytest.approx(358.2)


@pytest.mark.parametrize("modulus", [181, 250, 359])
def test_mid_range_moduli_cover_the_circle(modulus):
    lay = layout(0, modulus, Mode.CYCLE)
    assert len(lay.points) == modulus
    assert max(_angle(p) for p in lay.points) > 357.0


def test_unknown_mode_is_invalid_configuration():
    with pytest.raises(InvalidConfiguration):
        layout(1, 3, "cycle")
