"""
Tests for grid points and point providers.
"""

import numpy as np
import pytest

from ripsgrid.geometry.points import (
    Point,
    as_points,
    distance,
    parse_points_string,
    random_points,
    validate_points,
)


class TestDistance:
    def test_taxicab(self):
        assert distance(Point(0, 0), Point(2, 3)) == 5
        assert distance(Point(4, 1), Point(1, 5)) == 7

    def test_symmetric_and_zero(self):
        p, q = Point(3, 7), Point(6, 2)
        assert distance(p, q) == distance(q, p)
        assert distance(p, p) == 0
        assert distance(p, q) > 0


class TestParsing:
    def test_parse_points_string(self):
        pts = parse_points_string("0,0; 0,2;2,2 ;2,0;")
        assert pts == [Point(0, 0), Point(0, 2), Point(2, 2), Point(2, 0)]

    def test_parse_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_points_string("0,0;1")
        with pytest.raises(ValueError):
            parse_points_string("a,b")

    def test_as_points_keeps_order(self):
        pts = as_points([(2, 1), Point(0, 0), [5, 5]])
        assert pts == [Point(2, 1), Point(0, 0), Point(5, 5)]

    def test_as_points_rejects_wrong_arity(self):
        with pytest.raises(ValueError):
            as_points([(1, 2, 3)])

    @pytest.mark.parametrize("coords", [(1.9, 0), (0, "2"), (True, 0), (0, None)])
    def test_as_points_rejects_non_integer_coordinates(self, coords):
        with pytest.raises(ValueError, match="integers"):
            as_points([coords, (0, 0)])

    @pytest.mark.parametrize("entry", [5, None, "01", {"row": 0}])
    def test_as_points_rejects_non_pairs(self, entry):
        with pytest.raises(ValueError, match="pair"):
            as_points([(0, 0), entry])

    def test_as_points_accepts_numpy_integers(self):
        arr = np.array([[0, 1], [2, 3]], dtype=np.int64)
        assert as_points(arr) == [Point(0, 1), Point(2, 3)]
        assert as_points([(np.int32(4), 5)]) == [Point(4, 5)]

    def test_key(self):
        assert Point(3, 4).key == "3,4"


class TestValidation:
    def test_duplicates_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            validate_points([Point(1, 1), Point(0, 0), Point(1, 1)])

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="negative"):
            validate_points([Point(-1, 0)])

    def test_valid_points_pass(self, square_points):
        validate_points(square_points)


class TestRandomPoints:
    def test_distinct_and_on_board(self):
        pts = random_points(9, 20, seed=0)
        assert len(pts) == 20
        assert len(set(pts)) == 20
        assert all(0 <= p.row < 9 and 0 <= p.col < 9 for p in pts)

    def test_seed_is_deterministic(self):
        assert random_points(7, 10, seed=42) == random_points(7, 10, seed=42)

    def test_count_capped_by_board_area(self):
        pts = random_points(2, 10, seed=1)
        assert sorted(p.as_tuple() for p in pts) == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_attempt_cap(self):
        assert random_points(9, 5, seed=0, max_attempts=0) == []

    def test_invalid_board(self):
        with pytest.raises(ValueError):
            random_points(0, 3)
