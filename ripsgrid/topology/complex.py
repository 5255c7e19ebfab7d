"""
ripsgrid/topology/complex.py

Vietoris-Rips 2-skeleton of a grid point set.

For a threshold epsilon the complex consists of:
- Vertices: the input points, indexed by position
- Edges: pairs (i, j), i < j, with distance <= epsilon
- Triangles: triples (i, j, k), i < j < k, with all pairwise distances <= epsilon

Triangles are what kill 1-cycles in H1 via boundaries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from ripsgrid.geometry.points import Point, distance

logger = logging.getLogger(__name__)

EdgeKey = Tuple[int, int]


def edge_key(a: int, b: int) -> EdgeKey:
    """Canonical key (min, max) of an unordered vertex pair."""
    return (a, b) if a < b else (b, a)


@dataclass(frozen=True)
class Edge:
    """1-simplex between vertex indices u < v."""
    u: int
    v: int

    @property
    def key(self) -> EdgeKey:
        return (self.u, self.v)


@dataclass(frozen=True)
class Triangle:
    """2-simplex on vertex indices a < b < c."""
    a: int
    b: int
    c: int

    @property
    def key(self) -> Tuple[int, int, int]:
        return (self.a, self.b, self.c)

    @property
    def edge_keys(self) -> Tuple[EdgeKey, EdgeKey, EdgeKey]:
        """Keys of the three boundary edges."""
        return ((self.a, self.b), (self.a, self.c), (self.b, self.c))


@dataclass(frozen=True)
class RipsComplex:
    """
    Vietoris-Rips 2-skeleton built for one (points, epsilon) evaluation.

    Attributes:
        vertices: Input points; a vertex index is a position in this tuple
        edges: Edges in ascending lexicographic order
        triangles: Triangles in ascending lexicographic order
        epsilon: Threshold the complex was built with
    """
    vertices: Tuple[Point, ...]
    edges: Tuple[Edge, ...]
    triangles: Tuple[Triangle, ...]
    epsilon: int
    edge_index: Dict[EdgeKey, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "edge_index", {e.key: i for i, e in enumerate(self.edges)})

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    @property
    def num_triangles(self) -> int:
        return len(self.triangles)

    def edge_position(self, a: int, b: int) -> int:
        """Position of edge {a, b} in `edges` (chain-vector index)."""
        return self.edge_index[edge_key(a, b)]

    def __repr__(self) -> str:
        return (
            f"RipsComplex(V={self.num_vertices}, E={self.num_edges}, "
            f"T={self.num_triangles}, epsilon={self.epsilon})"
        )


def build_complex(points: Sequence[Point], epsilon: int) -> RipsComplex:
    """
    Build the Rips 2-skeleton of `points` at threshold `epsilon`.

    Inputs are not validated: points are assumed distinct and epsilon >= 1.
    The triple loop is cubic in the number of points, which is fine for
    board-sized inputs.

    Args:
        points: Ordered sequence of distinct grid points
        epsilon: Proximity threshold (taxicab)

    Returns:
        RipsComplex with edges and triangles in lexicographic index order
    """
    vertices = tuple(points)
    n = len(vertices)

    edges: List[Edge] = []
    for i in range(n):
        for j in range(i + 1, n):
            if distance(vertices[i], vertices[j]) <= epsilon:
                edges.append(Edge(i, j))

    triangles: List[Triangle] = []
    for i in range(n):
        for j in range(i + 1, n):
            if distance(vertices[i], vertices[j]) > epsilon:
                continue
            for k in range(j + 1, n):
                if (
                    distance(vertices[i], vertices[k]) <= epsilon
                    and distance(vertices[j], vertices[k]) <= epsilon
                ):
                    triangles.append(Triangle(i, j, k))

    logger.debug("built complex V=%d E=%d T=%d at epsilon=%s", n, len(edges), len(triangles), epsilon)
    return RipsComplex(
        vertices=vertices,
        edges=tuple(edges),
        triangles=tuple(triangles),
        epsilon=epsilon,
    )
