from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from convex_hull.algorithms import convex_hull
from convex_hull.config import HullConfig
from convex_hull.errors import NonFiniteCoordinateError
from convex_hull.point import Point
from convex_hull.point import as_points
from convex_hull.validation import validate_hull

logger = logging.getLogger(__name__)


class ConvexHullSolver:
    """
    Convex hull computation driven by a :class:`HullConfig`.

    Adapts the input, optionally rejects non-finite coordinates, runs the
    configured algorithm on a private copy and optionally validates the
    result.

    Example:
        >>> solver = ConvexHullSolver(HullConfig(algorithm="chan"))
        >>> hull = solver([(0, 0), (2, 0), (1, 1), (1, 3)])

    Attributes:
        config: Solver options.
    """

    __slots__ = ("config",)

    def __init__(self, config: HullConfig | None = None) -> None:
        self.config = config or HullConfig.default()

    def __call__(self, points: Iterable) -> list[Point]:
        """Enable callable syntax: solver(points)."""
        return self.compute(points)

    def __repr__(self) -> str:
        return f"ConvexHullSolver(algorithm={self.config.algorithm.value})"

    def compute(self, points: Iterable) -> list[Point]:
        """
        Compute the convex hull of ``points`` with the configured algorithm.

        Args:
            points: Points, pairs, objects with x/y, or an (N, 2) array.

        Returns:
            Hull vertices, counter-clockwise.

        Raises:
            NonFiniteCoordinateError: If precondition checks are enabled
                and a coordinate is NaN or infinite.
            HullValidationError: If output validation is enabled and the
                result breaks a hull invariant.
        """
        work = as_points(points)
        if self.config.check_preconditions:
            self._check_finite(work)

        hull = convex_hull(work, self.config.algorithm)
        logger.debug(
            "%r computed %d vertices from %d points", self, len(hull), len(work)
        )

        if self.config.validate_output:
            validate_hull(work, hull)
        return hull

    @staticmethod
    def _check_finite(points: list[Point]) -> None:
        for index, p in enumerate(points):
            if not (math.isfinite(p.x) and math.isfinite(p.y)):
                raise NonFiniteCoordinateError(
                    f"Point {index} has a non-finite coordinate: {p}"
                )
