"""
ripsgrid/analysis.py

High-level evaluation of a point set at a threshold.

This is the main entry point: it builds the Rips complex, counts
components and extracts hole representatives in one call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from ripsgrid.geometry.points import Point, as_points, validate_points
from ripsgrid.homology.reduction import compute_hole_cycles
from ripsgrid.topology.chains import chain_edges
from ripsgrid.topology.complex import Edge, RipsComplex, build_complex
from ripsgrid.topology.union_find import component_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComplexStats:
    """Connected components and hole count of a complex."""
    components: int
    beta1: int


@dataclass(frozen=True, eq=False)
class TopologyResult:
    """
    Result of evaluating one (points, epsilon) pair.

    Attributes:
        complex: The Rips 2-skeleton
        beta0: Number of connected components
        beta1: Number of independent holes
        hole_cycles: One edge-position bit-vector per hole
    """
    complex: RipsComplex
    beta0: int
    beta1: int
    hole_cycles: Tuple[np.ndarray, ...]

    @property
    def epsilon(self) -> int:
        return self.complex.epsilon

    def hole_edge_sets(self) -> List[Tuple[Edge, ...]]:
        """Each hole representative as the edges it contains."""
        return [chain_edges(self.complex, c) for c in self.hole_cycles]

    def to_dict(self) -> dict:
        """JSON-serializable report."""
        cx = self.complex
        return {
            "epsilon": cx.epsilon,
            "num_vertices": cx.num_vertices,
            "num_edges": cx.num_edges,
            "num_triangles": cx.num_triangles,
            "beta0": self.beta0,
            "beta1": self.beta1,
            "points": [list(p.as_tuple()) for p in cx.vertices],
            "edges": [list(e.key) for e in cx.edges],
            "triangles": [list(t.key) for t in cx.triangles],
            "holes": [[list(e.key) for e in es] for es in self.hole_edge_sets()],
        }


def validate_epsilon(epsilon) -> None:
    """
    Reject thresholds that are not positive integers.

    Raises:
        ValueError: if epsilon is not an integer >= 1
    """
    if isinstance(epsilon, bool) or not isinstance(epsilon, (int, np.integer)):
        raise ValueError(f"epsilon must be an integer, got {epsilon!r}")
    if epsilon < 1:
        raise ValueError(f"epsilon must be >= 1, got {epsilon}")


def compute_stats(cx: RipsComplex) -> ComplexStats:
    """Component count and first Betti number of a complex."""
    return ComplexStats(
        components=component_count(cx.num_vertices, cx.edges),
        beta1=len(compute_hole_cycles(cx)),
    )


def analyze(points: Iterable, epsilon: int, *, validate: bool = True) -> TopologyResult:
    """
    Compute the Rips complex, beta0, beta1 and hole representatives.

    Args:
        points: Point objects or (row, col) pairs; order fixes vertex indices
        epsilon: Taxicab proximity threshold
        validate: Reject duplicate/negative points and epsilon < 1

    Returns:
        TopologyResult

    Example:
        >>> res = analyze([(0, 0), (0, 2), (2, 2), (2, 0)], 2)
        >>> res.beta0, res.beta1
        (1, 1)
    """
    pts = as_points(points)
    if validate:
        validate_points(pts)
        validate_epsilon(epsilon)

    cx = build_complex(pts, epsilon)
    beta0 = component_count(cx.num_vertices, cx.edges)
    holes = compute_hole_cycles(cx)

    logger.debug("epsilon=%s: beta0=%d beta1=%d", epsilon, beta0, len(holes))
    return TopologyResult(complex=cx, beta0=beta0, beta1=len(holes), hole_cycles=tuple(holes))


def betti_curve(points: Sequence, epsilons: Iterable[int], *, validate: bool = True) -> List[TopologyResult]:
    """
    Evaluate the same points at several thresholds.

    Every threshold is an independent evaluation; nothing is shared between
    them.
    """
    pts: List[Point] = as_points(points)
    return [analyze(pts, eps, validate=validate) for eps in epsilons]
