"""
Runtime checks for the hull invariants.

A valid hull only contains input points, turns counter-clockwise (or
goes straight) at every vertex, and leaves no input point strictly
outside. The per-edge loops are JIT-compiled with Numba over float64
arrays, so integral coordinates are checked exactly while they fit in
the 53-bit mantissa.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence

import numpy as np
from numba import njit

from convex_hull.bounding_box import BoundingBox
from convex_hull.errors import HullValidationError
from convex_hull.numeric import machine_epsilon
from convex_hull.point import Point
from convex_hull.point import equals
from convex_hull.point import square_norm
from convex_hull.point import to_array

logger = logging.getLogger(__name__)


@njit(cache=True)
def _cyclic_turns(hull: np.ndarray) -> np.ndarray:
    """
    Cross product at every vertex of a closed polygon.

    Args:
        hull: (H, 2) array of vertices, H >= 3.

    Returns:
        Array of H turn values; entry i is the turn at vertex i + 1.
    """
    n = hull.shape[0]
    turns = np.empty(n, dtype=np.float64)
    for i in range(n):
        ax, ay = hull[i, 0], hull[i, 1]
        bx, by = hull[(i + 1) % n, 0], hull[(i + 1) % n, 1]
        cx, cy = hull[(i + 2) % n, 0], hull[(i + 2) % n, 1]
        turns[i] = (bx - ax) * (cy - ay) - (by - ay) * (cx - ax)
    return turns


@njit(cache=True)
def _outside_mask(hull: np.ndarray, points: np.ndarray, tolerance: float) -> np.ndarray:
    """
    Flag points lying strictly right of at least one hull edge.

    Args:
        hull: (H, 2) counter-clockwise vertices, H >= 2.
        points: (N, 2) points to test.
        tolerance: Cross products down to -tolerance still count as inside.

    Returns:
        Boolean array of N flags.
    """
    n = hull.shape[0]
    k = points.shape[0]
    mask = np.zeros(k, dtype=np.bool_)
    for j in range(k):
        px, py = points[j, 0], points[j, 1]
        for i in range(n):
            ax, ay = hull[i, 0], hull[i, 1]
            bx, by = hull[(i + 1) % n, 0], hull[(i + 1) % n, 1]
            if (bx - ax) * (py - ay) - (by - ay) * (px - ax) < -tolerance:
                mask[j] = True
                break
    return mask


def hull_tolerance(points: Sequence[Point]) -> float:
    """
    Rounding allowance for cross products over ``points``.

    The algorithms call a cross product within one machine epsilon
    collinear, and each cross product carries a rounding error of a few
    epsilons times the squared extent of the points. Integral input gets
    no allowance.

    Args:
        points: Points whose cross products will be compared.

    Returns:
        eps * (1 + 8 * extent**2), 0.0 for integral or empty input.
    """
    epsilon = machine_epsilon(*(c for p in points for c in p))
    if epsilon == 0.0:
        return 0.0
    box = BoundingBox.of_points(points)
    extent = float(max(box.x1 - box.x0, box.y1 - box.y0))
    return epsilon * (1.0 + 8.0 * extent * extent)


def is_convex(hull: Sequence[Point], tolerance: float | None = None) -> bool:
    """
    True when no three consecutive vertices (cyclically) turn clockwise.

    ``tolerance`` defaults to :func:`hull_tolerance` of the hull.
    """
    if len(hull) < 3:
        return True
    if tolerance is None:
        tolerance = hull_tolerance(hull)
    turns = _cyclic_turns(to_array(hull, np.float64))
    return bool(np.all(turns >= -tolerance))


def _beyond_segment(p: Point, a: Point, b: Point, tolerance: float) -> bool:
    ab = b - a
    ap = p - a
    t = ap.x * ab.x + ap.y * ab.y
    return t < -tolerance or t > square_norm(ab) + tolerance


def outside_points(
    points: Sequence[Point], hull: Sequence[Point], tolerance: float | None = None
) -> list[Point]:
    """
    Input points lying strictly outside a counter-clockwise hull.

    Degenerate hulls are handled explicitly: an empty hull contains
    nothing, a single vertex contains only equal points, and a segment
    contains the points on it. ``tolerance`` defaults to
    :func:`hull_tolerance` of the points.
    """
    if not points:
        return []
    if not hull:
        return list(points)
    if len(hull) == 1:
        return [p for p in points if not equals(p, hull[0])]
    if tolerance is None:
        tolerance = hull_tolerance(points)

    mask = _outside_mask(
        to_array(hull, np.float64), to_array(points, np.float64), float(tolerance)
    )
    outside = [p for p, flagged in zip(points, mask) if flagged]

    if len(hull) == 2:
        a, b = hull
        outside.extend(
            p for p, flagged in zip(points, mask)
            if not flagged and _beyond_segment(p, a, b, tolerance)
        )
    return outside


def validate_hull(
    points: Sequence[Point], hull: Sequence[Point], tolerance: float | None = None
) -> None:
    """
    Check a computed hull against its input.

    Args:
        points: The input the hull was computed from.
        hull: Counter-clockwise hull vertices.
        tolerance: Cross products down to -tolerance count as collinear,
            defaults to :func:`hull_tolerance` of the input.

    Raises:
        HullValidationError: If the hull uses a point that is not in the
            input (counting duplicates), is not convex, or leaves an
            input point outside.
    """
    available = Counter(points)
    used = Counter(hull)
    foreign = [p for p, count in used.items() if count > available[p]]
    if foreign:
        raise HullValidationError(f"Hull vertices not found in the input: {foreign}")

    if tolerance is None:
        tolerance = hull_tolerance(points)

    if not is_convex(hull, tolerance):
        raise HullValidationError("Hull turns clockwise at one of its vertices")

    outside = outside_points(points, hull, tolerance)
    if outside:
        raise HullValidationError(
            f"{len(outside)} input point(s) outside the hull, first: {outside[0]}"
        )

    logger.debug("Hull of %d vertices validated against %d points", len(hull), len(points))
