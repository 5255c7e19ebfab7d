"""
ripsgrid/topology/chains.py

Chain groups and boundary operators of a Rips complex over GF(2).

Edge positions index 1-chains and triangle positions index 2-chains:
- d1: C1 -> C0 is the (V x E) vertex-edge incidence matrix
- d2: C2 -> C1 is the (E x T) edge-triangle incidence matrix

Both are returned as scipy CSR matrices with entries in {0, 1}.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np
import scipy.sparse as sp

from ripsgrid.algebra.gf2 import GF2_DTYPE, indicator, support
from ripsgrid.topology.complex import Edge, RipsComplex, Triangle


def edge_indicator(cx: RipsComplex, a: int, b: int) -> np.ndarray:
    """1-chain consisting of the single edge {a, b}."""
    return indicator(cx.num_edges, (cx.edge_position(a, b),))


def triangle_boundary(cx: RipsComplex, t: Triangle) -> np.ndarray:
    """Boundary of a triangle: XOR of its three edge indicators."""
    return indicator(cx.num_edges, (cx.edge_index[k] for k in t.edge_keys))


def boundary_matrix_1(cx: RipsComplex) -> sp.csr_matrix:
    """Vertex-edge incidence d1 (V x E)."""
    E = cx.num_edges
    rows = np.empty(2 * E, dtype=np.int64)
    cols = np.repeat(np.arange(E, dtype=np.int64), 2)
    for i, e in enumerate(cx.edges):
        rows[2 * i] = e.u
        rows[2 * i + 1] = e.v
    data = np.ones(2 * E, dtype=GF2_DTYPE)
    return sp.csr_matrix((data, (rows, cols)), shape=(cx.num_vertices, E))


def boundary_matrix_2(cx: RipsComplex) -> sp.csr_matrix:
    """Edge-triangle incidence d2 (E x T)."""
    T = cx.num_triangles
    rows = np.empty(3 * T, dtype=np.int64)
    cols = np.repeat(np.arange(T, dtype=np.int64), 3)
    for j, t in enumerate(cx.triangles):
        for k, key in enumerate(t.edge_keys):
            rows[3 * j + k] = cx.edge_index[key]
    data = np.ones(3 * T, dtype=GF2_DTYPE)
    return sp.csr_matrix((data, (rows, cols)), shape=(cx.num_edges, T))


def chain_boundary(cx: RipsComplex, chain: np.ndarray) -> np.ndarray:
    """
    Boundary d1(chain) as a 0-chain over GF(2).

    Each vertex bit is the parity of the chain's edges incident to it.
    """
    d1 = boundary_matrix_1(cx).astype(np.int64)
    counts = d1 @ np.asarray(chain, dtype=np.int64)
    return (counts % 2).astype(GF2_DTYPE)


def is_cycle(cx: RipsComplex, chain: np.ndarray) -> bool:
    """Whether a 1-chain has zero boundary."""
    return not chain_boundary(cx, chain).any()


def chain_edges(cx: RipsComplex, chain: np.ndarray) -> Tuple[Edge, ...]:
    """Edges whose bit is set in a 1-chain."""
    return tuple(cx.edges[i] for i in support(chain))


def chain_edge_keys(cx: RipsComplex, chain: np.ndarray) -> List[Tuple[int, int]]:
    return [e.key for e in chain_edges(cx, chain)]
