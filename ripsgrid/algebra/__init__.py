"""
Algebra module: linear algebra over GF(2).
"""

from ripsgrid.algebra.gf2 import (
    GF2_DTYPE,
    GF2Basis,
    zero_vector,
    indicator,
    xor_inplace,
    is_zero,
    leading_one,
    support,
)

__all__ = [
    "GF2_DTYPE",
    "GF2Basis",
    "zero_vector",
    "indicator",
    "xor_inplace",
    "is_zero",
    "leading_one",
    "support",
]
