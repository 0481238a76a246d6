"""
Graham scan convex hull algorithm.

Works in place: the input list is reordered so that its first M slots
hold the hull, counter-clockwise, starting from the pivot (lowest y,
then lowest x). Callers that need the original order must copy first.

Ranges of three points or fewer are returned as presorted, without the
scan: collinear triples and duplicates are kept. From four points on,
collinear and repeated points are dropped, except that N copies of a
single point still give the two-vertex hull [p, p].

Average time complexity is O(N log N) for the presort, the scan itself
is linear.
"""

from __future__ import annotations

import functools
from collections.abc import MutableSequence

from convex_hull.angle import compare_angles
from convex_hull.angle import cross
from convex_hull.point import Point
from convex_hull.point import equals
from convex_hull.point import square_norm


def _resolve_bounds(points: MutableSequence[Point], hi: int | None) -> int:
    return len(points) if hi is None else hi


def is_too_small(lo: int, hi: int) -> bool:
    """Three points or fewer already form a convex polygon or a segment."""
    return hi - lo <= 3


def _presort_key(origin: Point):
    """
    Polar angle order around the pivot.

    Points that compare_angles leaves equivalent (those on the pivot's
    horizontal ray) are ordered by distance, closer first, the same
    tie-break compare_angles applies to the other rays.
    """

    def _compare(p1: Point, p2: Point) -> int:
        if compare_angles(p1, p2, origin):
            return -1
        if compare_angles(p2, p1, origin):
            return 1
        d1 = square_norm(p1 - origin)
        d2 = square_norm(p2 - origin)
        return (d1 > d2) - (d1 < d2)

    return functools.cmp_to_key(_compare)


def _lowest_index(points: MutableSequence[Point], lo: int, hi: int) -> int:
    lowest = lo
    for i in range(lo + 1, hi):
        p, q = points[i], points[lowest]
        if p.y < q.y or (equals(p.y, q.y) and p.x < q.x):
            lowest = i
    return lowest


def sort_by_polar_angles(
    points: MutableSequence[Point], lo: int = 0, hi: int | None = None
) -> None:
    """
    Presort points[lo:hi] for the scan.

    The point with the lowest y (lowest x on ties) is swapped to position
    ``lo`` and the remaining points are sorted by polar angle around it.

    Args:
        points: Mutable sequence of points, reordered in place.
        lo: First index of the range.
        hi: One past the last index of the range, defaults to len(points).
    """
    hi = _resolve_bounds(points, hi)
    if hi - lo < 2:
        return

    lowest = _lowest_index(points, lo, hi)
    points[lo], points[lowest] = points[lowest], points[lo]

    origin = points[lo]
    points[lo + 1:hi] = sorted(points[lo + 1:hi], key=_presort_key(origin))


def _scan(points: MutableSequence[Point], lo: int, hi: int) -> int:
    """
    Stack pass over presorted points, swapping hull vertices to the front.

    Index 0 of the virtual array is a sentinel aliasing the last point,
    index i >= 1 maps to points[lo + i - 1].

    Returns:
        The number M of hull vertices, stored in points[lo:lo + M].
    """
    n = hi - lo

    def at(i: int) -> int:
        return hi - 1 if i == 0 else lo + i - 1

    m = 1
    i = 2
    while i <= n:
        while cross(points[at(m - 1)], points[at(m)], points[at(i)]) <= 0:
            if m > 1:
                m -= 1
            elif i == n:
                # every point is collinear with the pivot
                break
            else:
                i += 1

        m += 1
        points[at(m)], points[at(i)] = points[at(i)], points[at(m)]
        i += 1

    return m


def perform_graham_scan(
    points: MutableSequence[Point], lo: int = 0, hi: int | None = None
) -> int:
    """Run the selection pass on an already presorted range."""
    hi = _resolve_bounds(points, hi)
    if is_too_small(lo, hi):
        return hi - lo
    return _scan(points, lo, hi)


def graham_scan(points: MutableSequence[Point], lo: int = 0, hi: int | None = None) -> int:
    """
    Compute the convex hull of points[lo:hi] in place.

    Args:
        points: Mutable sequence of points, reordered in place.
        lo: First index of the range.
        hi: One past the last index of the range, defaults to len(points).

    Returns:
        The number M of hull vertices; the hull occupies points[lo:lo + M]
        in counter-clockwise order, starting from the pivot.
        Ranges of at most three points come back whole, so three collinear
        points or a repeated point count as vertices there.
    """
    hi = _resolve_bounds(points, hi)
    sort_by_polar_angles(points, lo, hi)
    return perform_graham_scan(points, lo, hi)
