"""
ripsgrid/topology/union_find.py

Disjoint-set forest for counting connected components of the 1-skeleton.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple


class DisjointSetForest:
    """
    Union-find over elements 0..n-1.

    Uses path compression in find and union by rank.
    """

    def __init__(self, n: int):
        self.parent: List[int] = list(range(n))
        self.rank: List[int] = [0] * n

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, x: int) -> int:
        """Representative of x's set; compresses the traversed path."""
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """
        Merge the sets containing a and b.

        Returns:
            False if a and b were already in the same set
        """
        ra = self.find(a)
        rb = self.find(b)
        if ra == rb:
            return False
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1
        return True

    def component_count(self) -> int:
        """Number of distinct representatives."""
        return len({self.find(i) for i in range(len(self.parent))})


def component_count(vertex_count: int, edges: Iterable) -> int:
    """
    Count connected components of a graph on vertices 0..vertex_count-1.

    Args:
        vertex_count: Number of vertices
        edges: Edge objects with `u`, `v` attributes, or (u, v) pairs

    Returns:
        Component count, 0 for the empty graph
    """
    if vertex_count == 0:
        return 0
    dsf = DisjointSetForest(vertex_count)
    for e in edges:
        u, v = _endpoints(e)
        dsf.union(u, v)
    return dsf.component_count()


def _endpoints(e) -> Tuple[int, int]:
    if hasattr(e, "u"):
        return e.u, e.v
    return e[0], e[1]
