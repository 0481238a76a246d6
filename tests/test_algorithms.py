import numpy as np
import pytest

from convex_hull.algorithms import Algorithm
from convex_hull.algorithms import DEFAULT_ALGORITHM
from convex_hull.algorithms import compute_convex_hull
from convex_hull.algorithms import convex_hull
from convex_hull.algorithms import required_output_size
from convex_hull.errors import OutputBufferTooSmallError
from convex_hull.errors import UnknownAlgorithmError
from convex_hull.point import Point
from convex_hull.validation import validate_hull

ALL_ALGORITHMS = list(Algorithm)


class TestAlgorithm:
    @pytest.mark.parametrize("name, expected", [
        ("graham_scan", Algorithm.GRAHAM_SCAN),
        ("Monotone-Chain", Algorithm.MONOTONE_CHAIN),
        (" jarvis_march ", Algorithm.JARVIS_MARCH),
        ("CHAN", Algorithm.CHAN),
        (Algorithm.CHAN, Algorithm.CHAN),
    ])
    def test_parse(self, name, expected):
        assert Algorithm.parse(name) is expected

    def test_unknown_name(self):
        with pytest.raises(UnknownAlgorithmError, match="quickhull"):
            Algorithm.parse("quickhull")

    def test_unknown_name_is_a_value_error(self):
        with pytest.raises(ValueError):
            convex_hull([], "quickhull")

    def test_default(self):
        assert DEFAULT_ALGORITHM is Algorithm.GRAHAM_SCAN

    @pytest.mark.parametrize("algorithm, expected", [
        (Algorithm.GRAHAM_SCAN, 10),
        (Algorithm.MONOTONE_CHAIN, 20),
        (Algorithm.JARVIS_MARCH, 10),
        (Algorithm.CHAN, 10),
    ])
    def test_required_output_size(self, algorithm, expected):
        assert required_output_size(algorithm, 10) == expected


@pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
class TestEveryAlgorithm:
    def test_empty(self, algorithm):
        assert convex_hull([], algorithm) == []

    def test_single_point(self, algorithm):
        assert convex_hull([(0, 0)], algorithm) == [Point(0, 0)]

    def test_two_points(self, algorithm):
        hull = convex_hull([(5, 0), (-2, -3)], algorithm)
        assert sorted(hull, key=tuple) == [Point(-2, -3), Point(5, 0)]

    def test_collinear(self, algorithm):
        hull = convex_hull([(1, 1), (-3, 1), (-10, 1), (10, 1)], algorithm)
        assert sorted(hull, key=tuple) == [Point(-10, 1), Point(10, 1)]

    def test_reference_hull_set(self, algorithm, reference_points):
        hull = convex_hull(reference_points, algorithm)
        assert set(hull) == {
            Point(4, 0), Point(7, 1), Point(13, 5), Point(12, 8), Point(7, 7), Point(1, 1)
        }
        assert len(hull) == 6

    def test_collection_call_copies(self, algorithm, reference_points):
        before = list(reference_points)
        convex_hull(reference_points, algorithm)
        assert reference_points == before

    def test_range_call_matches_collection_call(self, algorithm, reference_points):
        expected = convex_hull(reference_points, algorithm)
        points = list(reference_points)
        out = [None] * required_output_size(algorithm, len(points))
        count = compute_convex_hull(points, out, algorithm)
        assert out[:count] == expected

    def test_range_call_rejects_short_buffer(self, algorithm, reference_points):
        out = [None] * (required_output_size(algorithm, len(reference_points)) - 1)
        with pytest.raises(OutputBufferTooSmallError):
            compute_convex_hull(reference_points, out, algorithm)

    def test_accepts_numpy_input(self, algorithm):
        arr = np.array([[0.0, 0.0], [4.0, 0.0], [4.0, 3.0], [0.0, 3.0], [2.0, 1.0]])
        hull = convex_hull(arr, algorithm)
        assert set(hull) == {Point(0.0, 0.0), Point(4.0, 0.0), Point(4.0, 3.0), Point(0.0, 3.0)}

    def test_accepts_algorithm_name(self, algorithm, reference_points):
        assert convex_hull(reference_points, algorithm.value) == convex_hull(
            reference_points, algorithm
        )

    def test_random_float_cloud_is_valid(self, algorithm, rng):
        coords = rng.normal(size=(200, 2))
        points = [Point(x, y) for x, y in coords.tolist()]
        hull = convex_hull(points, algorithm)
        validate_hull(points, hull, tolerance=1e-9)

    def test_hull_of_hull_is_itself(self, algorithm, rng):
        coords = rng.uniform(-1.0, 1.0, size=(100, 2))
        hull = convex_hull(coords, algorithm)
        assert set(convex_hull(hull, algorithm)) == set(hull)


class TestAgreement:
    def test_float_clouds(self, rng):
        for _ in range(5):
            coords = rng.uniform(-50.0, 50.0, size=(150, 2))
            hulls = [set(convex_hull(coords, a)) for a in ALL_ALGORITHMS]
            assert all(h == hulls[0] for h in hulls)

    def test_integer_grid_clouds(self, rng):
        for n in (10, 40, 200):
            coords = rng.integers(-10, 11, size=(n, 2)).tolist()
            points = [Point(x, y) for x, y in coords]
            hulls = [set(convex_hull(points, a)) for a in ALL_ALGORITHMS]
            assert all(h == hulls[0] for h in hulls)
            validate_hull(points, convex_hull(points))
