import numpy as np
import pytest

from convex_hull.point import Point


def _points(*coords):
    return [Point(x, y) for x, y in coords]


@pytest.fixture
def make_points():
    return _points


@pytest.fixture
def reference_points():
    """Ten integral points whose hull has six vertices."""
    return _points(
        (13, 5), (12, 8), (10, 3), (7, 7), (9, 6),
        (4, 0), (7, 1), (7, 4), (3, 3), (1, 1),
    )


@pytest.fixture
def rng():
    return np.random.default_rng(20240611)
