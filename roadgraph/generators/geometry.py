"""2-D segment geometry on the (x, z) plane."""

from __future__ import annotations

from typing import Sequence

Point = Sequence[float]


def orientation(a: Point, b: Point, c: Point) -> float:
    """
    Signed area of the triangle ``a, b, c`` (times two).

    Positive for a counter-clockwise turn, negative for clockwise,
    zero when the three points are collinear.
    """
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def segments_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """
    True if segment ``p1-p2`` properly crosses segment ``p3-p4``.

    Both endpoints of each segment must lie strictly on opposite sides of
    the other segment.  Collinear overlaps and touching endpoints count
    as non-crossing.
    """
    d1 = orientation(p3, p4, p1)
    d2 = orientation(p3, p4, p2)
    d3 = orientation(p1, p2, p3)
    d4 = orientation(p1, p2, p4)
    return d1 * d2 < 0 and d3 * d4 < 0
