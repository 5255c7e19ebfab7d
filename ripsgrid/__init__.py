"""
ripsgrid: Homology of Vietoris-Rips complexes on integer grids

Given stones on a board and a taxicab threshold epsilon, ripsgrid builds
the Rips 2-skeleton and reports its connected components (beta0), its
independent holes (beta1) and an edge-set representative for each hole.
All linear algebra is exact over GF(2).

Key components:
- geometry: Grid points, taxicab distance and point providers
- algebra: GF(2) bit-vectors and incremental bases
- topology: Rips complex builder, union-find and boundary operators
- homology: Spanning forests, fundamental cycles and H1 reduction
- analysis: One-call evaluation API
"""

__version__ = "1.0.0"
__author__ = "ripsgrid contributors"

from ripsgrid.geometry.points import Point, distance, random_points
from ripsgrid.algebra.gf2 import GF2Basis
from ripsgrid.topology.complex import Edge, Triangle, RipsComplex, build_complex
from ripsgrid.topology.union_find import DisjointSetForest, component_count
from ripsgrid.homology.reduction import compute_hole_cycles, first_betti_number
from ripsgrid.analysis import (
    ComplexStats,
    TopologyResult,
    analyze,
    betti_curve,
    compute_stats,
)

__all__ = [
    # Geometry
    "Point",
    "distance",
    "random_points",
    # Algebra
    "GF2Basis",
    # Topology
    "Edge",
    "Triangle",
    "RipsComplex",
    "build_complex",
    "DisjointSetForest",
    "component_count",
    # Homology
    "compute_hole_cycles",
    "first_betti_number",
    # Analysis
    "ComplexStats",
    "TopologyResult",
    "analyze",
    "betti_curve",
    "compute_stats",
]
