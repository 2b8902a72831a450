"""
arrows.py

Arrow geometry: which points an arrow connects, and how far to pull its ends
in so it doesn't disappear under the number markers.
"""

from typing import List, Sequence, Tuple

from modring.config import SHRINK_FACTOR
from modring.errors import EmptyArrowMatch
from modring.layout import Point

Vec = Tuple[float, float]


def _xy(p):
    if isinstance(p, Point):
        return (p.x, p.y)
    return (p[0], p[1])


def lerp(a: Vec, b: Vec, t: float) -> Vec:
    """Linear interpolation a + t (b - a)."""
    return (a[0] + t * (b[0] - a[0]),
            a[1] + t * (b[1] - a[1]))


def shrink(start, end, factor: float = SHRINK_FACTOR) -> Tuple[Vec, Vec]:
    """
    Move both ends of start->end towards each other by `factor` of its length.

    Accepts Points or (x, y) pairs, returns (x, y) pairs.
    """
    a, b = _xy(start), _xy(end)
    return lerp(a, b, factor), lerp(b, a, factor)


def congruent_points(points: Sequence[Point], natural, modulus) -> List[Point]:
    """Points whose label is congruent to natural mod modulus, innermost first."""
    residue = natural % modulus
    return [p for p in points if p.label % modulus == residue]


def reduction_endpoints(points: Sequence[Point], natural, modulus) -> Tuple[Point, Point]:
    """
    (outer, inner) ends of the reduction arrow.

    The arrow starts at the outermost point congruent to `natural` and ends at
    the innermost one, i.e. at the residue itself.
    """
    matching = congruent_points(points, natural, modulus)
    if not matching:
        raise EmptyArrowMatch(f"no point congruent to {natural} mod {modulus}")
    return matching[-1], matching[0]


def cycle_pairs(points: Sequence[Point], natural, modulus, count) -> List[Tuple[Point, Point]]:
    """The first `count` arrows i -> (i + natural) mod modulus."""
    pairs = []
    for i, start in enumerate(points[:count]):
        pairs.append((start, points[(i + natural) % modulus]))
    return pairs
