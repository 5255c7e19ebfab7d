"""
Geometry module: grid points, taxicab distance and point providers.
"""

from ripsgrid.geometry.points import (
    Point,
    distance,
    as_points,
    parse_points_string,
    validate_points,
    random_points,
)

__all__ = [
    "Point",
    "distance",
    "as_points",
    "parse_points_string",
    "validate_points",
    "random_points",
]
