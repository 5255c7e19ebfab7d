"""
Shared fixtures for the test suite.
"""

import pytest

from ripsgrid.geometry.points import Point


def square(r0, c0, side):
    return [
        Point(r0, c0),
        Point(r0, c0 + side),
        Point(r0 + side, c0 + side),
        Point(r0 + side, c0),
    ]


@pytest.fixture
def square_points():
    """Corners of a side-2 square: sides at distance 2, diagonals at 4."""
    return square(0, 0, 2)


@pytest.fixture
def two_squares_points():
    """Two side-2 squares far apart from each other."""
    return square(0, 0, 2) + square(0, 10, 2)


@pytest.fixture
def ring_points():
    """The 8 cells around the center of a 3x3 block."""
    coords = [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0), (1, 0)]
    return [Point(r, c) for r, c in coords]
