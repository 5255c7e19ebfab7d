"""
Tests for the high-level analysis API and whole-pipeline properties.
"""

import numpy as np
import pytest

from ripsgrid import analyze, betti_curve, compute_stats, random_points
from ripsgrid.analysis import ComplexStats, validate_epsilon
from ripsgrid.algebra.gf2 import GF2Basis
from ripsgrid.geometry.points import Point
from ripsgrid.homology.cycles import cycle_space_rank
from ripsgrid.homology.reduction import boundary_basis
from ripsgrid.topology.chains import is_cycle
from ripsgrid.topology.complex import build_complex


class TestScenarios:
    def test_empty(self):
        res = analyze([], 3)
        cx = res.complex
        assert (cx.num_vertices, cx.num_edges, cx.num_triangles) == (0, 0, 0)
        assert res.beta0 == 0
        assert res.beta1 == 0

    def test_single_point(self):
        res = analyze([(3, 3)], 3)
        assert res.complex.num_vertices == 1
        assert res.beta0 == 1
        assert res.beta1 == 0

    def test_hollow_square(self, square_points):
        res = analyze(square_points, 2)
        assert res.complex.num_edges == 4
        assert res.complex.num_triangles == 0
        assert (res.beta0, res.beta1) == (1, 1)
        assert len(res.hole_edge_sets()[0]) == 4

    def test_filled_square(self, square_points):
        res = analyze(square_points, 4)
        assert res.complex.num_edges == 6
        assert res.complex.num_triangles == 4
        assert (res.beta0, res.beta1) == (1, 0)
        assert res.hole_cycles == ()

    def test_two_squares(self, two_squares_points):
        res = analyze(two_squares_points, 2)
        assert (res.beta0, res.beta1) == (2, 2)
        first, second = res.hole_edge_sets()
        assert all(e.v < 4 for e in first)
        assert all(e.u >= 4 for e in second)

    def test_accepts_coordinate_pairs(self):
        res = analyze([(0, 0), (0, 2), (2, 2), (2, 0)], 2)
        assert res.beta1 == 1
        assert res.complex.vertices[1] == Point(0, 2)


class TestValidation:
    def test_duplicate_points(self):
        with pytest.raises(ValueError):
            analyze([(0, 0), (1, 1), (0, 0)], 2)

    def test_negative_points(self):
        with pytest.raises(ValueError):
            analyze([(0, -1)], 2)

    @pytest.mark.parametrize("eps", [0, -3, 1.5, "2", True])
    def test_bad_epsilon(self, eps):
        with pytest.raises(ValueError):
            validate_epsilon(eps)

    def test_numpy_integer_epsilon(self):
        validate_epsilon(np.int64(3))

    def test_validation_can_be_skipped(self):
        res = analyze([(0, 0), (0, 0)], 1, validate=False)
        assert res.complex.num_edges == 1


class TestReport:
    def test_stats(self, two_squares_points):
        cx = build_complex(two_squares_points, 2)
        assert compute_stats(cx) == ComplexStats(components=2, beta1=2)

    def test_to_dict(self, square_points):
        d = analyze(square_points, 2).to_dict()
        assert d["epsilon"] == 2
        assert (d["num_vertices"], d["num_edges"], d["num_triangles"]) == (4, 4, 0)
        assert (d["beta0"], d["beta1"]) == (1, 1)
        assert d["points"][2] == [2, 2]
        assert d["edges"] == [[0, 1], [0, 3], [1, 2], [2, 3]]
        assert d["holes"] == [[[0, 1], [0, 3], [1, 2], [2, 3]]]

    def test_betti_curve(self, square_points):
        curve = betti_curve(square_points, [1, 2, 4])
        assert [r.epsilon for r in curve] == [1, 2, 4]
        assert [r.beta0 for r in curve] == [4, 1, 1]
        assert [r.beta1 for r in curve] == [0, 1, 0]


def _random_cases():
    for seed in range(12):
        pts = random_points(6, 11, seed=seed)
        yield seed, pts


class TestProperties:
    @pytest.mark.parametrize("seed,points", list(_random_cases()))
    def test_invariants(self, seed, points):
        prev = None
        for eps in range(1, 6):
            res = analyze(points, eps)
            cx = res.complex
            z1 = cycle_space_rank(cx)

            assert res.beta1 == len(res.hole_cycles)
            assert 0 <= res.beta1 <= z1

            # rank(H1) = rank(Z1) - rank(B1)
            assert res.beta1 == z1 - boundary_basis(cx).rank

            boundaries = boundary_basis(cx)
            h1 = GF2Basis()
            for rep in res.hole_cycles:
                assert rep.shape == (cx.num_edges,)
                assert is_cycle(cx, rep)
                assert np.array_equal(boundaries.reduce(rep), rep)
                assert h1.add(rep) is not None

            if prev is not None:
                assert cx.num_edges >= prev.complex.num_edges
                assert cx.num_triangles >= prev.complex.num_triangles
                assert res.beta0 <= prev.beta0
            prev = res

    @pytest.mark.parametrize("seed,points", list(_random_cases())[:4])
    def test_input_order_does_not_change_betti_numbers(self, seed, points):
        shuffled = list(points)
        np.random.default_rng(seed).shuffle(shuffled)
        for eps in (2, 3):
            a = analyze(points, eps)
            b = analyze(shuffled, eps)
            assert (a.beta0, a.beta1) == (b.beta0, b.beta1)


class TestCoordinateTypes:
    def test_fractional_coordinates_rejected(self):
        with pytest.raises(ValueError):
            analyze([(1.9, 0), (0, 0)], 1)
