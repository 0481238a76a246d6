"""
Jarvis march (gift wrapping) convex hull algorithm.

Output sensitive: O(N * H) where H is the number of hull vertices. The
extreme point search is shared with Chan's algorithm as its merge step.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import MutableSequence
from collections.abc import Sequence

from convex_hull.angle import Orientation
from convex_hull.angle import orientation
from convex_hull.errors import HullConstructionError
from convex_hull.point import Point
from convex_hull.point import equals
from convex_hull.point import square_norm

logger = logging.getLogger(__name__)


def wraps_further(point_on_hull: Point, endpoint: Point, candidate: Point) -> bool:
    """
    Tell whether ``candidate`` should replace ``endpoint`` as the next vertex.

    A candidate on the clockwise side of point_on_hull -> endpoint wins, so
    the final endpoint leaves every point on its left and the walk is
    counter-clockwise. Collinear candidates win when they are farther.
    """
    turn = orientation(point_on_hull, endpoint, candidate)
    if turn is Orientation.COLLINEAR:
        return square_norm(candidate - point_on_hull) > square_norm(endpoint - point_on_hull)
    return turn is Orientation.CLOCKWISE


def max_jarvis_march(candidates: Iterable[Point], point_on_hull: Point) -> Point:
    """
    Find the hull vertex following ``point_on_hull`` among ``candidates``.

    Args:
        candidates: Points to search.
        point_on_hull: Current hull vertex.

    Returns:
        The candidate every other candidate lies to the left of, the
        farthest one on collinear ties. ``point_on_hull`` itself when
        no other distinct candidate exists.
    """
    endpoint = point_on_hull
    for sj in candidates:
        if equals(endpoint, point_on_hull) or wraps_further(point_on_hull, endpoint, sj):
            endpoint = sj
    return endpoint


def leftmost_point(points: Sequence[Point]) -> Point:
    """Leftmost point, the highest one on ties."""
    best = points[0]
    for p in points[1:]:
        if p.x < best.x or (equals(p.x, best.x) and p.y > best.y):
            best = p
    return best


def jarvis_march(points: Sequence[Point], out: MutableSequence[Point]) -> int:
    """
    Compute the convex hull of ``points`` into ``out``.

    The input is left untouched.

    Args:
        points: Input points.
        out: Destination buffer with at least len(points) slots.

    Returns:
        The number of hull vertices written to the front of ``out``,
        counter-clockwise from the leftmost point.

    Raises:
        HullConstructionError: If the walk does not close within N steps,
            which only happens with non-finite coordinates.
    """
    n = len(points)
    if n <= 1:
        out[:n] = points
        return n

    point_on_hull = leftmost_point(points)
    first = point_on_hull

    i = 0
    while True:
        if i >= n:
            raise HullConstructionError(
                f"Gift wrapping did not return to {first} after {n} steps"
            )
        out[i] = point_on_hull
        point_on_hull = max_jarvis_march(points, point_on_hull)
        i += 1
        if equals(point_on_hull, first):
            break

    logger.debug("Jarvis march wrapped %d points into %d vertices", n, i)
    return i
