from convex_hull.monotone_chain import monotone_chain
from convex_hull.monotone_chain import sort_by_x
from convex_hull.point import Point


def run(points):
    out = [None] * (2 * len(points))
    count = monotone_chain(points, out)
    return out[:count]


class TestSortByX:
    def test_ties_broken_by_y(self, make_points):
        points = make_points((2, 1), (0, 5), (2, -1), (-1, 0))
        sort_by_x(points)
        assert points == make_points((-1, 0), (0, 5), (2, -1), (2, 1))

    def test_sorts_in_place(self, make_points):
        points = make_points((3, 0), (1, 0))
        alias = points
        sort_by_x(points)
        assert alias == make_points((1, 0), (3, 0))


class TestMonotoneChain:
    def test_reference_hull(self, reference_points, make_points):
        assert run(reference_points) == make_points(
            (1, 1), (4, 0), (7, 1), (13, 5), (12, 8), (7, 7)
        )

    def test_input_left_sorted(self, reference_points):
        run(reference_points)
        assert reference_points == sorted(reference_points, key=tuple)

    def test_empty(self):
        assert run([]) == []

    def test_single_point(self):
        assert run([Point(0, 0)]) == [Point(0, 0)]

    def test_two_points(self, make_points):
        assert run(make_points((5, 0), (-2, -3))) == make_points((-2, -3), (5, 0))

    def test_collinear_reduces_to_extremes(self, make_points):
        points = make_points((1, 1), (-3, 1), (-10, 1), (10, 1))
        assert run(points) == make_points((-10, 1), (10, 1))

    def test_vertical_collinear(self, make_points):
        points = make_points((0, 3), (0, -1), (0, 7))
        assert run(points) == make_points((0, -1), (0, 7))

    def test_square_with_inner_and_edge_points(self, make_points):
        points = make_points(
            (0, 0), (5, 5), (5, 0), (-5, 0), (-5, 5), (-5, -5),
            (0, -5), (0, 5), (5, -5), (2, 3), (-3, 2), (-5, 4),
        )
        assert run(points) == make_points((-5, -5), (5, -5), (5, 5), (-5, 5))

    def test_writes_only_the_front_of_out(self, reference_points):
        out = ["unused"] * (2 * len(reference_points))
        count = monotone_chain(reference_points, out)
        assert all(isinstance(p, Point) for p in out[:count])
        assert len(out) == 2 * len(reference_points)

    def test_duplicates_are_dropped(self, make_points):
        assert run(make_points((3, 0), (0, 0), (0, 0))) == make_points((0, 0), (3, 0))

    def test_identical_points_give_two_vertices(self):
        assert run([Point(2, 2)] * 3) == [Point(2, 2), Point(2, 2)]
