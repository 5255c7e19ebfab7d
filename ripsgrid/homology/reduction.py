"""
ripsgrid/homology/reduction.py

First homology H1 = Z1 / B1 over GF(2).

Triangle boundaries span B1. Fundamental cycles span Z1. Reducing each
fundamental cycle modulo B1 and inserting the residual into a second basis
keeps exactly one representative per independent class.
"""

from __future__ import annotations

import logging
from typing import List

import numpy as np

from ripsgrid.algebra.gf2 import GF2Basis
from ripsgrid.homology.cycles import fundamental_cycles
from ripsgrid.topology.chains import triangle_boundary
from ripsgrid.topology.complex import RipsComplex

logger = logging.getLogger(__name__)


def boundary_basis(cx: RipsComplex) -> GF2Basis:
    """Basis of B1, the span of all triangle boundaries."""
    basis = GF2Basis()
    for t in cx.triangles:
        basis.add(triangle_boundary(cx, t))
    return basis


def compute_hole_cycles(cx: RipsComplex) -> List[np.ndarray]:
    """
    Representative 1-chains of a basis of H1.

    Representatives come back in the order their classes were found, which
    follows the order of the chords.

    Args:
        cx: Rips complex

    Returns:
        List of edge-position bit-vectors of length E; empty if E == 0
    """
    if cx.num_edges == 0:
        return []

    boundaries = boundary_basis(cx)
    h1 = GF2Basis()
    reps: List[np.ndarray] = []
    for cyc in fundamental_cycles(cx):
        added = h1.add(boundaries.reduce(cyc.vector))
        if added is not None:
            reps.append(added)

    logger.debug(
        "H1 reduction: rank(B1)=%d, beta1=%d over E=%d", boundaries.rank, len(reps), cx.num_edges
    )
    return reps


def first_betti_number(cx: RipsComplex) -> int:
    """beta1 = number of independent holes."""
    return len(compute_hole_cycles(cx))
