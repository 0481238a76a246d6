import pytest

from convex_hull.bounding_box import BoundingBox
from convex_hull.bounding_box import bounding_box
from convex_hull.bounding_box import bounding_box_corners
from convex_hull.errors import OutputBufferTooSmallError
from convex_hull.point import Point


class TestBoundingBox:
    def test_of_points(self, make_points):
        box = BoundingBox.of_points(make_points((3, -7), (-12, 0), (13, 8), (0, 2)))
        assert tuple(box) == (-12, -7, 13, 8)

    def test_of_generator(self, make_points):
        box = BoundingBox.of_points(p for p in make_points((1, 2), (3, 4)))
        assert box == BoundingBox(1, 2, 3, 4)

    def test_empty(self):
        assert BoundingBox.of_points([]) is None

    def test_corners_counter_clockwise(self):
        assert BoundingBox(0, 0, 2, 1).corners() == [
            Point(0, 0), Point(2, 0), Point(2, 1), Point(0, 1)
        ]


class TestBoundingBoxCall:
    def test_writes_four_corners(self, make_points):
        points = make_points((-12, 3), (13, -7), (0, 8), (5, 5))
        out = [None] * 6
        assert bounding_box(points, out) == 4
        assert out[:4] == make_points((-12, -7), (13, -7), (13, 8), (-12, 8))
        assert out[4:] == [None, None]

    def test_empty_input(self):
        out = [None] * 4
        assert bounding_box([], out) == 0
        assert out == [None] * 4

    def test_single_point_collapses(self):
        assert bounding_box_corners([Point(1, 1)]) == [Point(1, 1)] * 4

    def test_buffer_too_small(self, reference_points):
        with pytest.raises(OutputBufferTooSmallError):
            bounding_box(reference_points, [None] * 3)

    def test_corners_enclose_the_input(self, reference_points):
        corners = bounding_box_corners(reference_points)
        (x0, y0), (x1, _), (_, y1), _ = corners
        assert all(x0 <= p.x <= x1 and y0 <= p.y <= y1 for p in reference_points)

    def test_mixed_sign_points(self, make_points):
        points = make_points(
            (13, 5), (-12, 8), (10, 3), (7, -7), (-9, -6),
            (4, 0), (7, 1), (7, 4), (3, 3), (-1, 1),
        )
        assert bounding_box_corners(points) == make_points(
            (-12, -7), (13, -7), (13, 8), (-12, 8)
        )
