"""
ripsgrid/algebra/gf2.py

Bit-vectors and incremental bases over the two-element field.

A vector is a 1-D numpy uint8 array with entries in {0, 1}; addition is
XOR. GF2Basis keeps at most one stored vector per pivot, where the pivot
of a vector is the index of its highest set bit.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import numpy as np

GF2_DTYPE = np.uint8


def zero_vector(length: int) -> np.ndarray:
    """The zero chain of the given length."""
    return np.zeros(length, dtype=GF2_DTYPE)


def indicator(length: int, positions: Iterable[int]) -> np.ndarray:
    """
    Vector with bit i flipped once for every occurrence of i in `positions`.

    Repeated positions cancel, matching addition mod 2.
    """
    v = zero_vector(length)
    for i in positions:
        v[i] ^= 1
    return v


def xor_inplace(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """a <- a + b over GF(2)."""
    np.bitwise_xor(a, b, out=a)
    return a


def is_zero(v: np.ndarray) -> bool:
    return not v.any()


def leading_one(v: np.ndarray) -> int:
    """Index of the highest set bit, or -1 for the zero vector."""
    nz = np.flatnonzero(v)
    if nz.size == 0:
        return -1
    return int(nz[-1])


def support(v: np.ndarray) -> List[int]:
    """Positions of the set bits, ascending."""
    return [int(i) for i in np.flatnonzero(v)]


class GF2Basis:
    """
    Incremental basis of a subspace of GF(2)^n.

    Vectors are reduced against the stored pivots (highest pivot first)
    before insertion. Stored vectors are never rewritten by later
    insertions, so this is not a reduced echelon form, but span membership
    and rank are exact.
    """

    def __init__(self):
        self.basis: Dict[int, np.ndarray] = {}

    def __len__(self) -> int:
        return len(self.basis)

    @property
    def rank(self) -> int:
        return len(self.basis)

    def pivots(self) -> List[int]:
        """Stored pivot positions, descending."""
        return sorted(self.basis.keys(), reverse=True)

    def _eliminate(self, vec: np.ndarray) -> np.ndarray:
        v = np.array(vec, dtype=GF2_DTYPE, copy=True)
        for k in self.pivots():
            if v[k]:
                xor_inplace(v, self.basis[k])
        return v

    def add(self, vec: np.ndarray) -> Optional[np.ndarray]:
        """
        Insert `vec` if it is independent of the current basis.

        Returns:
            The reduced vector now stored under its pivot, or None when
            `vec` already lies in the span
        """
        v = self._eliminate(vec)
        lead = leading_one(v)
        if lead == -1:
            return None
        # Any vector previously stored at `lead` would have cleared that bit
        assert lead not in self.basis
        self.basis[lead] = v
        return v

    def reduce(self, vec: np.ndarray) -> np.ndarray:
        """Residual of `vec` modulo the span; zero iff `vec` is in the span."""
        return self._eliminate(vec)

    def contains(self, vec: np.ndarray) -> bool:
        """Whether `vec` lies in the span of the basis."""
        return is_zero(self._eliminate(vec))

    def __repr__(self) -> str:
        return f"GF2Basis(rank={self.rank})"
