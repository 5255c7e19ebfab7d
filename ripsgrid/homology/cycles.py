"""
ripsgrid/homology/cycles.py

Fundamental cycles of the 1-skeleton.

Each chord (edge not in the spanning forest) defines one cycle: the chord
plus the forest path between its endpoints. Together they form a basis of
the cycle space Z1, whose rank is E - V + C.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from ripsgrid.algebra.gf2 import indicator
from ripsgrid.homology.spanning import SpanningForest, path_edge_keys, path_in_forest, spanning_forest
from ripsgrid.topology.complex import EdgeKey, RipsComplex


@dataclass(frozen=True, eq=False)
class FundamentalCycle:
    """
    Cycle closed by a chord.

    Attributes:
        chord: (u, v) endpoints of the non-tree edge, u < v
        path: Forest path u = p0 ... pk = v
        vector: 1-chain over the complex's edge positions
    """
    chord: EdgeKey
    path: Tuple[int, ...]
    vector: np.ndarray


def build_fundamental_cycle(cx: RipsComplex, forest: SpanningForest, u: int, v: int) -> FundamentalCycle:
    """
    Build the fundamental cycle for chord (u, v).

    Args:
        cx: Complex whose edges index the chain vector
        forest: Spanning forest of cx's 1-skeleton
        u, v: Chord endpoints

    Returns:
        FundamentalCycle whose vector is path edges XOR the chord
    """
    path = path_in_forest(forest, u, v)
    positions = [cx.edge_index[k] for k in path_edge_keys(path)]
    positions.append(cx.edge_position(u, v))
    vec = indicator(cx.num_edges, positions)
    return FundamentalCycle(chord=(min(u, v), max(u, v)), path=tuple(path), vector=vec)


def fundamental_cycles(cx: RipsComplex, forest: Optional[SpanningForest] = None) -> List[FundamentalCycle]:
    """
    One fundamental cycle per chord, in edge order.

    Args:
        cx: Rips complex
        forest: Optional precomputed spanning forest of cx

    Returns:
        List of FundamentalCycle objects
    """
    if forest is None:
        forest = spanning_forest(cx.num_vertices, cx.edges)
    out: List[FundamentalCycle] = []
    for e in cx.edges:
        if e.key in forest.tree_edges:
            continue
        out.append(build_fundamental_cycle(cx, forest, e.u, e.v))

    assert len(out) == cycle_space_rank(cx, forest)
    return out


def cycle_space_rank(cx: RipsComplex, forest: Optional[SpanningForest] = None) -> int:
    """Rank of Z1 of the 1-skeleton: E - V + C."""
    if forest is None:
        forest = spanning_forest(cx.num_vertices, cx.edges)
    return cx.num_edges - cx.num_vertices + forest.num_components
