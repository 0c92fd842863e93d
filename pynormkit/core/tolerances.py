"""
Tolerance tiers for numerical validation.

Defines precision expectations per working precision:
- FP64: relative error a small multiple of double epsilon
- FP32: relaxed for single-precision arithmetic

The norms computed here are backward stable reductions, so the expected
relative error grows at most linearly with the number of terms. Tiers are
chosen for the matrix sizes exercised by the test suite (n <= 64).
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Relative and absolute tolerance for comparing against a reference."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-13,
    atol=0.0,
    name='fp64',
    description='Double precision, O(n*eps) relative error',
)

FP32 = ToleranceTier(
    rtol=1e-5,
    atol=0.0,
    name='fp32',
    description='Single precision, O(n*eps) relative error',
)


def select_tolerance(dtype: np.dtype | type) -> ToleranceTier:
    """Select the tolerance tier matching the precision of a dtype."""
    if np.finfo(dtype).bits <= 32:
        return FP32
    return FP64
