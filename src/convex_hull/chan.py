"""
Chan's output-sensitive convex hull algorithm, O(N log H).

The input is split into groups of at most m points, each group is reduced
to its hull with the Graham scan, and the global hull is wrapped Jarvis
style across the sub-hulls. When m wrapping rounds are not enough the
guess was too small and the caller retries with m = min(2^(2^t), N).

Reference: http://www.cs.wustl.edu/~pless/506/l3.html
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from collections.abc import MutableSequence
from collections.abc import Sequence
from dataclasses import dataclass

from convex_hull.errors import HullConstructionError
from convex_hull.graham_scan import graham_scan
from convex_hull.jarvis_march import max_jarvis_march
from convex_hull.point import Point
from convex_hull.point import equals

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Found:
    """The wrap closed: ``hull`` holds the vertices, counter-clockwise."""

    hull: list[Point]


@dataclass(slots=True, frozen=True)
class TooSmall:
    """The wrap needed more than ``m`` rounds; retry with a larger guess."""

    m: int


PartialHull = Found | TooSmall


def bottommost_point(points: Sequence[Point]) -> Point:
    """Lowest point, the rightmost one on ties."""
    best = points[0]
    for p in points[1:]:
        if p.y < best.y or (equals(p.y, best.y) and p.x > best.x):
            best = p
    return best


def guess_sizes(n: int) -> Iterator[int]:
    """Yield min(2^(2^t), n) for t = 1, 2, ... up to and including n."""
    t = 1
    while True:
        m = min(2 ** (2 ** t), n)
        yield m
        if m == n:
            return
        t += 1


def partial_hull(points: MutableSequence[Point], m: int) -> PartialHull:
    """
    Try to wrap the hull of ``points`` in at most ``m`` rounds.

    Groups are the contiguous slices points[i*m:(i+1)*m]; each one is
    reordered in place by the Graham scan so its sub-hull sits at the
    front of the slice.

    Args:
        points: Input points, reordered in place.
        m: Group size and maximum number of hull vertices.

    Returns:
        Found with the hull, starting at the bottommost point, or
        TooSmall when the hull has more than m vertices.
    """
    if m < 1:
        raise ValueError(f"Group size must be positive, got {m}")

    n = len(points)
    if n == 0:
        return Found([])

    r = -(-n // m)

    # end index of each sub-hull inside its group
    lasts: list[int] = []
    for i in range(r):
        lo = i * m
        hi = min(lo + m, n)
        lasts.append(lo + graham_scan(points, lo, hi))

    first = bottommost_point(points)
    point_on_hull = first

    hull: list[Point] = []
    for _ in range(m):
        hull.append(point_on_hull)

        candidates = [
            max_jarvis_march(points[i * m:lasts[i]], point_on_hull) for i in range(r)
        ]
        next_point = max_jarvis_march(candidates, point_on_hull)

        if equals(next_point, first):
            return Found(hull)

        point_on_hull = next_point

    return TooSmall(m)


def chan(points: MutableSequence[Point], out: MutableSequence[Point]) -> int:
    """
    Compute the convex hull of ``points`` into ``out``.

    Args:
        points: Input points, reordered in place by the sub-hull passes.
        out: Destination buffer with at least len(points) slots.

    Returns:
        The number of hull vertices written to the front of ``out``,
        counter-clockwise from the bottommost point.
    """
    n = len(points)
    if n == 0:
        return 0

    for m in guess_sizes(n):
        match partial_hull(points, m):
            case Found(hull=hull):
                logger.debug("Chan closed the hull with m=%d: %d vertices", m, len(hull))
                out[:len(hull)] = hull
                return len(hull)
            case TooSmall():
                logger.debug("Chan guess m=%d too small for %d points, retrying", m, n)

    raise HullConstructionError(f"Chan's algorithm did not close the hull of {n} points")
