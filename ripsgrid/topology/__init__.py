"""
Topology module: Rips complex construction, components and chains.
"""

from ripsgrid.topology.complex import Edge, Triangle, RipsComplex, build_complex, edge_key
from ripsgrid.topology.union_find import DisjointSetForest, component_count
from ripsgrid.topology.chains import (
    edge_indicator,
    triangle_boundary,
    boundary_matrix_1,
    boundary_matrix_2,
    chain_boundary,
    is_cycle,
    chain_edges,
    chain_edge_keys,
)

__all__ = [
    "Edge",
    "Triangle",
    "RipsComplex",
    "build_complex",
    "edge_key",
    "DisjointSetForest",
    "component_count",
    "edge_indicator",
    "triangle_boundary",
    "boundary_matrix_1",
    "boundary_matrix_2",
    "chain_boundary",
    "is_cycle",
    "chain_edges",
    "chain_edge_keys",
]
