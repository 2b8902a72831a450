"""
reveal.py

Time gating for the animation: given the seconds since the last commit,
decide what is on screen. Pure functions, the caller owns the clock.
"""

import logging
import math
from dataclasses import dataclass
from typing import Tuple

from modring.config import POINT_REVEAL_PERIOD
from modring.configuration import Mode
from modring.errors import DegenerateLayout, InvalidConfiguration
from modring.layout import Layout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RevealState:
    # Points revealed so far; paces markers (reduction) or arrows (cycle).
    visible_point_count: int
    # Markers on screen. Equal to the above in reduction mode, everything in cycle mode.
    visible_marker_count: int
    ring_opacities: Tuple[float, ...]
    arrow_visible: bool

    @property
    def visible_arrow_count(self):
        return self.visible_point_count


def revealed_count(elapsed, total, period=POINT_REVEAL_PERIOD):
    """One new point per `period` seconds, saturating at `total`."""
    if elapsed <= 0:
        return 0
    return min(math.floor(elapsed / period), total)


def ring_opacities(visible, ring_count, points_per_ring):
    """
    Binary opacity per ring, innermost first.

    Ring nr lights up as soon as all rings inside it are fully revealed and
    at least one of its own points is visible.
    """
    if points_per_ring <= 0:
        raise DegenerateLayout(f"points_per_ring is {points_per_ring}")
    if visible <= 0:
        return (0.0,) * ring_count
    lit = (visible - 1) // points_per_ring
    return tuple(1.0 if lit >= nr else 0.0 for nr in range(ring_count))


def reveal(elapsed, layout: Layout, mode=Mode.REDUCTION, period=POINT_REVEAL_PERIOD) -> RevealState:
    total = layout.total
    visible = revealed_count(elapsed, total, period)

    match mode:
        case Mode.CYCLE:
            # The whole group is shown at once, the arrows do the pacing.
            return RevealState(
                visible_point_count=visible,
                visible_marker_count=total,
                ring_opacities=(1.0,),
                arrow_visible=visible > 0,
            )
        case Mode.REDUCTION:
            pass
        case _:
            raise InvalidConfiguration(f"unknown mode {mode!r}")

    try:
        opacities = ring_opacities(visible, layout.ring_count, layout.points_per_ring)
    except DegenerateLayout as e:
        logger.warning(f"Degenerate layout, hiding rings and arrow: {e}")
        return RevealState(visible, visible, (0.0,) * layout.ring_count, False)

    # Strictly after the last point, so the arrow never targets a hidden marker.
    arrow_visible = elapsed / period > total

    return RevealState(
        visible_point_count=visible,
        visible_marker_count=visible,
        ring_opacities=opacities,
        arrow_visible=arrow_visible,
    )
