"""
Algorithm selection and the two call shapes every algorithm supports.

``compute_convex_hull`` works over caller-owned buffers and may reorder
the input in place; ``convex_hull`` copies its input and returns a list
sized to the hull. Both give the same hull for the same input order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import MutableSequence
from enum import Enum

from convex_hull.chan import chan
from convex_hull.errors import OutputBufferTooSmallError
from convex_hull.errors import UnknownAlgorithmError
from convex_hull.graham_scan import graham_scan
from convex_hull.jarvis_march import jarvis_march
from convex_hull.monotone_chain import monotone_chain
from convex_hull.point import Point
from convex_hull.point import as_points

logger = logging.getLogger(__name__)


class Algorithm(Enum):
    """Selectable convex hull algorithms, named as in configuration files."""

    GRAHAM_SCAN = "graham_scan"
    MONOTONE_CHAIN = "monotone_chain"
    JARVIS_MARCH = "jarvis_march"
    CHAN = "chan"

    @classmethod
    def parse(cls, value: Algorithm | str) -> Algorithm:
        """Accept an Algorithm or its name, case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower().replace("-", "_"))
        except ValueError:
            known = ", ".join(a.value for a in cls)
            raise UnknownAlgorithmError(
                f"Unknown convex hull algorithm {value!r}, expected one of: {known}"
            ) from None


DEFAULT_ALGORITHM = Algorithm.GRAHAM_SCAN


def _graham_scan_into(points: MutableSequence[Point], out: MutableSequence[Point]) -> int:
    count = graham_scan(points)
    out[:count] = points[:count]
    return count


_RANGE_ALGORITHMS: dict[Algorithm, Callable[[MutableSequence[Point], MutableSequence[Point]], int]] = {
    Algorithm.GRAHAM_SCAN: _graham_scan_into,
    Algorithm.MONOTONE_CHAIN: monotone_chain,
    Algorithm.JARVIS_MARCH: jarvis_march,
    Algorithm.CHAN: chan,
}

# output slots needed per input point
_OUTPUT_FACTOR = {
    Algorithm.GRAHAM_SCAN: 1,
    Algorithm.MONOTONE_CHAIN: 2,
    Algorithm.JARVIS_MARCH: 1,
    Algorithm.CHAN: 1,
}


def required_output_size(algorithm: Algorithm | str, n: int) -> int:
    """Number of output slots a range-based call needs for ``n`` input points."""
    return _OUTPUT_FACTOR[Algorithm.parse(algorithm)] * n


def compute_convex_hull(
    points: MutableSequence[Point],
    out: MutableSequence[Point],
    algorithm: Algorithm | str = DEFAULT_ALGORITHM,
) -> int:
    """
    Compute the convex hull of ``points`` into the caller's ``out`` buffer.

    Graham scan, monotone chain and Chan reorder ``points`` in place.

    Args:
        points: Mutable sequence of input points.
        out: Destination buffer, see :func:`required_output_size`.
        algorithm: Algorithm to run, Graham scan by default.

    Returns:
        The number of hull vertices written to the front of ``out``.

    Raises:
        UnknownAlgorithmError: If ``algorithm`` is not recognised.
        OutputBufferTooSmallError: If ``out`` cannot hold the result.
    """
    algorithm = Algorithm.parse(algorithm)
    required = required_output_size(algorithm, len(points))
    if len(out) < required:
        raise OutputBufferTooSmallError(algorithm.value, required, len(out))
    count = _RANGE_ALGORITHMS[algorithm](points, out)
    logger.debug("%s: %d points -> %d hull vertices", algorithm.value, len(points), count)
    return count


def convex_hull(
    points: Iterable,
    algorithm: Algorithm | str = DEFAULT_ALGORITHM,
) -> list[Point]:
    """
    Compute the convex hull of a collection of points.

    The input is adapted with :func:`convex_hull.point.as_points` into a
    private copy, so the caller's collection is never reordered.

    Args:
        points: Points, pairs, objects with x/y, or an (N, 2) array.
        algorithm: Algorithm to run, Graham scan by default.

    Returns:
        The hull vertices, counter-clockwise.
    """
    algorithm = Algorithm.parse(algorithm)
    work = as_points(points)
    out: list = [None] * required_output_size(algorithm, len(work))
    count = compute_convex_hull(work, out, algorithm)
    return out[:count]
