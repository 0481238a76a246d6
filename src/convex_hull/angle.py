"""
Orientation and polar angle primitives.

Every hull algorithm reduces to the ``cross`` predicate. ``compare_angles``
orders points by polar angle without trigonometry and drives the Graham
scan presort; the atan2-based helpers are a slow reference kept to check
the fast path.
"""

from __future__ import annotations

import functools
from enum import IntEnum

import numpy as np

from convex_hull.point import Point
from convex_hull.point import equals
from convex_hull.point import square_norm


class Orientation(IntEnum):
    """
    Enumeration representing the orientation of an ordered triplet of points.

    Used to determine turn direction during convex hull construction.
    Integer values allow direct comparison and pattern matching.
    """

    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTERCLOCKWISE = 2


def cross(p1: Point, p2: Point, p3: Point):
    """
    Cross product of P1P2 and P1P3, twice the signed area of the triangle.

    Args:
        p1: First point.
        p2: Second point, where the turn happens.
        p3: Third point.

    Returns:
        0 if the points are collinear, a positive value for a
        counter-clockwise turn and a negative value for a clockwise turn.
    """
    return (p2.x - p1.x) * (p3.y - p1.y) - (p2.y - p1.y) * (p3.x - p1.x)


def orientation(p1: Point, p2: Point, p3: Point) -> Orientation:
    """Classify the turn p1 -> p2 -> p3, treating an epsilon-zero cross as collinear."""
    value = cross(p1, p2, p3)
    if equals(value, 0):
        return Orientation.COLLINEAR
    return Orientation.COUNTERCLOCKWISE if value > 0 else Orientation.CLOCKWISE


def get_angle_with_j(p: Point, origin: Point | None = None) -> float:
    """
    Signed angle between the unit vector j = (1, 0) and OP, in [-pi, pi].

    Relies on atan2, so it is only meant for checking the fast comparison.
    """
    if origin is not None:
        p = p - origin
    return float(np.arctan2(p.y, p.x))


def slow_compare_angles(p1: Point, p2: Point, origin: Point | None = None) -> bool:
    """Trigonometric reference for :func:`compare_angles`, valid on the whole plane."""
    if origin is not None:
        p1 = p1 - origin
        p2 = p2 - origin
    a1 = get_angle_with_j(p1)
    a2 = get_angle_with_j(p2)
    if equals(a1, a2):
        return square_norm(p1) < square_norm(p2)
    return a1 < a2


def compare_angles(p1: Point, p2: Point, origin: Point | None = None) -> bool:
    """
    Tell whether angle(OP1) < angle(OP2) without computing the angles.

    Both points must lie in the upper half-plane (y >= 0) once translated
    by ``origin``. Points on the x-axis come first when x >= 0 and last
    when x < 0; the others are ordered by -x/y, ties broken by the
    distance to the origin (closer first).

    Args:
        p1: The point P1.
        p2: The point P2.
        origin: Optional origin O, defaults to (0, 0).

    Returns:
        True if P1 sorts strictly before P2.
    """
    if origin is not None:
        return compare_angles(p1 - origin, p2 - origin)

    assert (p1.y >= 0 or equals(p1.y, 0)) and (p2.y >= 0 or equals(p2.y, 0)), (
        f"compare_angles expects points in the upper half-plane, got {p1} and {p2}"
    )

    if equals(p1.y, 0):
        if equals(p2.y, 0):
            return p1.x >= 0 and p2.x < 0
        return p1.x >= 0
    if equals(p2.y, 0):
        return p2.x < 0

    # true division keeps integral coordinates from truncating
    div1 = -p1.x / p1.y
    div2 = -p2.x / p2.y
    if equals(div1, div2):
        return square_norm(p1) < square_norm(p2)
    return div1 < div2


def polar_angle_key(origin: Point | None = None):
    """Sort key ordering points by :func:`compare_angles` around ``origin``."""

    def _compare(p1: Point, p2: Point) -> int:
        if compare_angles(p1, p2, origin):
            return -1
        if compare_angles(p2, p1, origin):
            return 1
        return 0

    return functools.cmp_to_key(_compare)
