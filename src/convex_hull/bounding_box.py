from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import MutableSequence
from dataclasses import dataclass

from convex_hull.errors import OutputBufferTooSmallError
from convex_hull.point import Point


@dataclass
class BoundingBox:
    """Axis-aligned box spanning [x0, x1] x [y0, y1]."""

    x0: float
    y0: float
    x1: float
    y1: float

    @classmethod
    def of_points(cls, points: Iterable[Point]) -> BoundingBox | None:
        """Single pass over the points, None when there are none."""
        it = iter(points)
        first = next(it, None)
        if first is None:
            return None
        min_x = max_x = first.x
        min_y = max_y = first.y
        for p in it:
            min_x = min(min_x, p.x)
            max_x = max(max_x, p.x)
            min_y = min(min_y, p.y)
            max_y = max(max_y, p.y)
        return cls(min_x, min_y, max_x, max_y)

    def corners(self) -> list[Point]:
        """The four corners, counter-clockwise from the bottom-left one."""
        return [
            Point(self.x0, self.y0),
            Point(self.x1, self.y0),
            Point(self.x1, self.y1),
            Point(self.x0, self.y1),
        ]

    def __iter__(self) -> Iterator[float]:
        yield self.x0
        yield self.y0
        yield self.x1
        yield self.y1


def bounding_box(points: Iterable[Point], out: MutableSequence[Point]) -> int:
    """
    Write the bounding box corners of ``points`` into ``out``.

    This is not a convex hull but, like one, it surrounds every point.

    Returns:
        4, or 0 for empty input.
    """
    box = BoundingBox.of_points(points)
    if box is None:
        return 0
    if len(out) < 4:
        raise OutputBufferTooSmallError("bounding_box", 4, len(out))
    out[:4] = box.corners()
    return 4


def bounding_box_corners(points: Iterable[Point]) -> list[Point]:
    box = BoundingBox.of_points(points)
    return [] if box is None else box.corners()
