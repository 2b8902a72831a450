"""
layout.py

Places the numbers 0, 1, 2, ... on concentric rings.

Every ring has `modulus` angular slots, so numbers that are congruent mod
`modulus` line up on the same ray from the centre. Label 0 sits at the top and
labels increase clockwise, then continue on the next ring outwards.

    ring 0:  0  1  2 ... m-1
    ring 1:  m m+1  ... 2m-1
    ...
"""

import math
from dataclasses import dataclass
from typing import Tuple

from modring.config import CYCLE_RADIUS, MARKER_SIZE, RING_RADIUS_SCALE, RING_SPACING
from modring.configuration import Mode, validate


@dataclass(frozen=True)
class Point:
    """A placed number. World coordinates, y pointing up."""
    x: float
    y: float
    label: int


@dataclass(frozen=True)
class Layout:
    points: Tuple[Point, ...]
    ring_count: int
    points_per_ring: int
    base_radius: float = 0.0
    ring_spacing: float = RING_SPACING

    @property
    def total(self):
        return len(self.points)

    def ring_radius(self, nr):
        return self.base_radius + nr * self.ring_spacing

    def ring_index(self, label):
        """Ring a label lives on (0 = innermost)."""
        return label // self.points_per_ring

    @property
    def outer_radius(self):
        return self.ring_radius(max(0, self.ring_count - 1))


def ring_count(natural, modulus, mode):
    """Number of rings needed for the diagram."""
    if mode is Mode.CYCLE:
        return 1
    # Ceiling division: 3 mod 3 needs a second ring to hold the 3.
    return -(-(natural + 1) // modulus)


def base_radius(modulus, mode):
    if mode is Mode.CYCLE:
        return CYCLE_RADIUS
    return MARKER_SIZE * modulus / RING_RADIUS_SCALE


def slot_angles(modulus):
    """
    Angular slots of one ring, in degrees, increasing from 0.

    Whole degrees, like a protractor, while they still go round the circle:
    for 7, 360 // 7 = 51 gives 8 slots (0, 51, ..., 357) and the ring
    boundary check in layout() drops the 8th. When whole degrees would leave
    a gap wider than one stride (200 -> 1 deg slots covering 200 deg) or no
    stride at all (above 360), the slots are spaced 360 / modulus instead.
    """
    stride = 360 // modulus
    if stride and 360 - modulus * stride <= stride:
        return range(0, 360, stride)
    return [i * 360 / modulus for i in range(modulus)]


def layout(natural, modulus, mode=Mode.REDUCTION) -> Layout:
    """
    Build the labeled points for (natural, modulus, mode).

    Reduction: labels 0..natural, the last ring may be partially filled.
    Cycle: labels 0..modulus-1 on a single ring.

    Raises InvalidConfiguration before any geometry is computed.
    """
    validate(natural, modulus, mode)

    last = modulus - 1 if mode is Mode.CYCLE else natural
    rings = ring_count(natural, modulus, mode)
    radius0 = base_radius(modulus, mode)
    slots = slot_angles(modulus)

    points = []
    number = 0
    for nr in range(rings):
        r = radius0 + nr * RING_SPACING
        ring_max = modulus * (nr + 1)
        for deg in slots:
            if number >= ring_max or number > last:
                break
            rad = math.radians(deg)
            # sin for x and cos for y puts 0 deg at the top, going clockwise.
            points.append(Point(math.sin(rad) * r, math.cos(rad) * r, number))
            number += 1

    return Layout(
        points=tuple(points),
        ring_count=rings,
        points_per_ring=modulus,
        base_radius=radius0,
    )
