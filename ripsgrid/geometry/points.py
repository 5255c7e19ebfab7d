"""
ripsgrid/geometry/points.py

Grid points, taxicab distance and point-set providers.

A point is a stone on an integer board, addressed by (row, col).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Set, Tuple

import numpy as np

from ripsgrid.config import MAX_PLACEMENT_ATTEMPTS


@dataclass(frozen=True)
class Point:
    """An integer grid coordinate."""
    row: int
    col: int

    @property
    def key(self) -> str:
        """Display identifier "r,c"."""
        return f"{self.row},{self.col}"

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)


def distance(p: Point, q: Point) -> int:
    """Taxicab distance |dr| + |dc| between two grid points."""
    return abs(p.row - q.row) + abs(p.col - q.col)


def as_points(coords: Iterable) -> List[Point]:
    """
    Coerce (row, col) pairs or Point objects into a list of Points.

    Order is preserved, since vertex indices follow input order.
    """
    out: List[Point] = []
    for c in coords:
        if isinstance(c, Point):
            out.append(c)
            continue
        if isinstance(c, (str, bytes)) or not isinstance(c, (Sequence, np.ndarray)) or len(c) != 2:
            raise ValueError(f"Point must be a (row, col) pair, got {c!r}")
        for x in c:
            if isinstance(x, bool) or not isinstance(x, (int, np.integer)):
                raise ValueError(f"Point coordinates must be integers, got {c!r}")
        out.append(Point(int(c[0]), int(c[1])))
    return out


def parse_points_string(points_str: str) -> List[Point]:
    """Parse a point specification: '0,0;0,2;2,2;2,0'"""
    points: List[Point] = []
    for part in points_str.split(';'):
        part = part.strip()
        if not part:
            continue
        fields = part.split(',')
        if len(fields) != 2:
            raise ValueError(f"Cannot parse point {part!r}, expected 'row,col'")
        try:
            points.append(Point(int(fields[0].strip()), int(fields[1].strip())))
        except ValueError:
            raise ValueError(f"Cannot parse point {part!r}, coordinates must be integers") from None
    return points


def validate_points(points: Sequence[Point]) -> None:
    """
    Reject point sequences the complex builder does not accept.

    Raises:
        ValueError: on negative coordinates or duplicate points
    """
    seen: Set[Point] = set()
    for p in points:
        if p.row < 0 or p.col < 0:
            raise ValueError(f"Point {p.key} has a negative coordinate")
        if p in seen:
            raise ValueError(f"Duplicate point {p.key}")
        seen.add(p)


def random_points(
    board_size: int,
    count: int,
    seed: Optional[int] = None,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> List[Point]:
    """
    Place up to `count` distinct stones uniformly at random on a board.

    Draws cells until `count` distinct ones are found, the board is full,
    or `max_attempts` draws have been spent, so fewer points may come back.

    Args:
        board_size: Board side length N (cells are 0..N-1 on each axis)
        count: Requested number of stones
        seed: Optional seed for numpy's default generator
        max_attempts: Cap on the number of draws

    Returns:
        Points in placement order
    """
    if board_size < 1:
        raise ValueError("board_size must be positive")
    rng = np.random.default_rng(seed)
    target = min(count, board_size * board_size)

    points: List[Point] = []
    used: Set[Point] = set()
    attempts = 0
    while len(points) < target and attempts < max_attempts:
        attempts += 1
        r, c = rng.integers(0, board_size, size=2)
        p = Point(int(r), int(c))
        if p not in used:
            used.add(p)
            points.append(p)
    return points
