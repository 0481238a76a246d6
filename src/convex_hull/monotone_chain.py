"""
Andrew's monotone chain convex hull algorithm.

The input is sorted in place by x (then y); the hull is written to a
separate output buffer which must hold at least 2 * N points, since the
upper chain is appended after the lower one before the closing point is
dropped.
"""

from __future__ import annotations

import functools
from collections.abc import MutableSequence

from convex_hull.angle import cross
from convex_hull.point import Point
from convex_hull.point import equals


def _compare_xy(p1: Point, p2: Point) -> int:
    if p1.x < p2.x or (equals(p1.x, p2.x) and p1.y < p2.y):
        return -1
    if p2.x < p1.x or (equals(p1.x, p2.x) and p2.y < p1.y):
        return 1
    return 0


def sort_by_x(points: MutableSequence[Point]) -> None:
    """Sort in place by x-coordinate, ties broken by y-coordinate."""
    points[:] = sorted(points, key=functools.cmp_to_key(_compare_xy))


def monotone_chain(points: MutableSequence[Point], out: MutableSequence[Point]) -> int:
    """
    Compute the convex hull of ``points`` into ``out``.

    Args:
        points: Input points, sorted in place as a side effect.
        out: Destination buffer with at least 2 * len(points) slots.

    Returns:
        The number of hull vertices written to the front of ``out``,
        counter-clockwise from the lowest-x point.
        Identical points are not merged: N >= 2 copies of one point give
        the two-vertex hull [p, p].
    """
    sort_by_x(points)

    n = len(points)
    if n <= 1:
        out[:n] = points
        return n

    k = 0

    def no_counter_clockwise(i: int) -> bool:
        return cross(out[k - 2], out[k - 1], points[i]) <= 0

    # lower hull
    for i in range(n):
        while k >= 2 and no_counter_clockwise(i):
            k -= 1
        out[k] = points[i]
        k += 1

    # upper hull, never popping below the lower chain
    t = k + 1
    for i in range(n - 2, -1, -1):
        while k >= t and no_counter_clockwise(i):
            k -= 1
        out[k] = points[i]
        k += 1

    # the last point repeats the first one
    return k - 1
