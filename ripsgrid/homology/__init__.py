"""
Homology module: spanning forests, fundamental cycles and H1 reduction.
"""

from ripsgrid.homology.spanning import (
    SpanningForest,
    skeleton_graph,
    spanning_forest,
    path_in_forest,
    path_edge_keys,
)
from ripsgrid.homology.cycles import (
    FundamentalCycle,
    build_fundamental_cycle,
    fundamental_cycles,
    cycle_space_rank,
)
from ripsgrid.homology.reduction import (
    boundary_basis,
    compute_hole_cycles,
    first_betti_number,
)

__all__ = [
    # spanning
    "SpanningForest",
    "skeleton_graph",
    "spanning_forest",
    "path_in_forest",
    "path_edge_keys",
    # cycles
    "FundamentalCycle",
    "build_fundamental_cycle",
    "fundamental_cycles",
    "cycle_space_rank",
    # reduction
    "boundary_basis",
    "compute_hole_cycles",
    "first_betti_number",
]
