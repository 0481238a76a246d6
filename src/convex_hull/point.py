"""
Concrete 2D point type and the vector primitives the hull algorithms use.

Points are immutable values. Coordinates are either both integral or both
floating; a point built from a mix is promoted to floating coordinates.
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from convex_hull import numeric


def _scalar(value):
    """Unwrap numpy scalars so integral input stays integral."""
    return value.item() if isinstance(value, np.generic) else value


@dataclass(slots=True, frozen=True)
class Point:
    """
    Immutable 2D point.

    Supports tuple-like access via iteration and indexing, so a Point can
    be unpacked (x, y = p) or handed to numpy directly. The generated
    ``==`` is exact; use :func:`equals` for the epsilon-aware comparison
    the algorithms rely on.

    Attributes:
        x: X-coordinate.
        y: Y-coordinate.
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        """Reject non-numeric coordinates and promote mixed int/float pairs."""
        for name in ("x", "y"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise TypeError(
                    f"Point.{name} must be a real number, got {type(value).__name__}"
                )
        x_integral = numeric.is_integral(self.x)
        y_integral = numeric.is_integral(self.y)
        if x_integral and not y_integral:
            object.__setattr__(self, "x", type(self.y)(self.x))
        elif y_integral and not x_integral:
            object.__setattr__(self, "y", type(self.x)(self.y))

    def __iter__(self):
        """Enable tuple unpacking: x, y = point."""
        return iter((self.x, self.y))

    def __getitem__(self, idx: int):
        """Enable indexing: point[0] returns x, point[1] returns y."""
        return (self.x, self.y)[idx]

    def __sub__(self, other: Point) -> Point:
        """Vector subtraction, the result is a new point."""
        return Point(self.x - other.x, self.y - other.y)

    def square_distance(self, other: Point) -> float:
        """Squared Euclidean distance to another point."""
        return square_norm(self - other)

    def equals(self, other: Point) -> bool:
        return equals(self, other)

    @classmethod
    def from_array(cls, arr) -> Point:
        """Construct a Point from a numpy array or any two-element sequence."""
        if len(arr) != 2:
            raise ValueError(f"Expected 2 coordinates, got {len(arr)}")
        return cls(_scalar(arr[0]), _scalar(arr[1]))


def square_norm(p: Point):
    """Squared norm of the vector from the origin to p."""
    return p.x * p.x + p.y * p.y


def equals(a, b) -> bool:
    """
    Epsilon-aware equality for points and scalars.

    Two points are equal when both coordinate pairs are equal according to
    :func:`convex_hull.numeric.equals`.
    """
    if isinstance(a, Point) and isinstance(b, Point):
        return numeric.equals(a.x, b.x) and numeric.equals(a.y, b.y)
    return numeric.equals(a, b)


def _to_point(item) -> Point:
    if isinstance(item, Point):
        return item
    if hasattr(item, "x") and hasattr(item, "y"):
        return Point(_scalar(item.x), _scalar(item.y))
    if isinstance(item, (Sequence, np.ndarray)) and not isinstance(item, str):
        return Point.from_array(item)
    raise TypeError(f"Cannot interpret {type(item).__name__} as a 2D point")


def as_points(data: Iterable | np.ndarray) -> list[Point]:
    """
    Adapt common point containers to a list of :class:`Point`.

    Accepts Points, objects exposing ``x`` and ``y`` attributes, pairs or
    two-element sequences, and numpy arrays shaped (N, 2).

    Args:
        data: Iterable of point-like items or an (N, 2) array.

    Returns:
        A new list of Points; the input is never modified.
    """
    if isinstance(data, np.ndarray):
        if data.size == 0:
            return []
        if data.ndim != 2 or data.shape[1] != 2:
            raise ValueError(f"Expected an (N, 2) array, got shape {data.shape}")
        return [Point.from_array(row) for row in data]
    return [_to_point(item) for item in data]


def to_array(points: Iterable[Point], dtype=None) -> np.ndarray:
    """Stack points into an (N, 2) array."""
    coords = [(p.x, p.y) for p in points]
    return np.asarray(coords, dtype=dtype).reshape(-1, 2)
