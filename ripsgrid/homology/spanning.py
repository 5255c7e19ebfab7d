"""
ripsgrid/homology/spanning.py

Spanning forest of the 1-skeleton.

The forest is grown by depth-first search from every unvisited vertex in
ascending order, so each connected component contributes one tree. Edges
of the 1-skeleton that are not in the forest are chords; each chord closes
exactly one fundamental cycle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

import networkx as nx

from ripsgrid.topology.complex import Edge, EdgeKey, edge_key


@dataclass(frozen=True)
class SpanningForest:
    """
    DFS spanning forest of a graph on vertices 0..V-1.

    Attributes:
        graph: The forest as an undirected networkx graph (all V vertices)
        parent: parent[x] = DFS parent of x (None for tree roots)
        tree_edges: Canonical keys of the forest edges
        roots: One root per component, ascending
    """
    graph: nx.Graph
    parent: Dict[int, Optional[int]]
    tree_edges: FrozenSet[EdgeKey]
    roots: Tuple[int, ...]

    @property
    def num_components(self) -> int:
        return len(self.roots)

    def is_tree_edge(self, a: int, b: int) -> bool:
        return edge_key(a, b) in self.tree_edges


def skeleton_graph(num_vertices: int, edges: Iterable[Edge]) -> nx.Graph:
    """
    1-skeleton as a networkx graph.

    Neighbor order follows edge order, which fixes the DFS order.
    """
    g = nx.Graph()
    g.add_nodes_from(range(num_vertices))
    for e in edges:
        g.add_edge(e.u, e.v)
    return g


def spanning_forest(num_vertices: int, edges: Iterable[Edge]) -> SpanningForest:
    """
    Build a DFS spanning forest covering every component.

    Args:
        num_vertices: Vertex count V
        edges: Edges of the 1-skeleton

    Returns:
        SpanningForest with parent pointers and tree edge keys
    """
    g = skeleton_graph(num_vertices, edges)

    forest = nx.Graph()
    forest.add_nodes_from(range(num_vertices))
    parent: Dict[int, Optional[int]] = {}
    roots: List[int] = []
    tree_edges = set()

    for s in range(num_vertices):
        if s in parent:
            continue
        parent[s] = None
        roots.append(s)
        # nx.dfs_edges is iterative and yields tree edges in recursive DFS order
        for u, v in nx.dfs_edges(g, source=s):
            parent[v] = u
            forest.add_edge(u, v)
            tree_edges.add(edge_key(u, v))

    return SpanningForest(
        graph=forest,
        parent=parent,
        tree_edges=frozenset(tree_edges),
        roots=tuple(roots),
    )


def path_in_forest(forest: SpanningForest, u: int, v: int) -> List[int]:
    """
    Get the unique vertex path from u to v through forest edges.

    Raises:
        networkx.NetworkXNoPath: if u and v lie in different trees
    """
    return nx.shortest_path(forest.graph, source=u, target=v)


def path_edge_keys(path: List[int]) -> List[EdgeKey]:
    """Canonical keys of consecutive vertex pairs along a path."""
    return [edge_key(path[i], path[i + 1]) for i in range(len(path) - 1)]
