"""
LAPACK-level auxiliary routines over views.

Public API:
    ScaleState          - (scale, sumsq) pair for scaled sums of squares
    lassq(x, state)     - Overflow-safe one-pass sum of squared magnitudes
    lanhe(norm, uplo, A) - Max/One/Inf/Frobenius norm of a Hermitian matrix
    lansy(norm, uplo, A) - Same for a symmetric matrix
    lapy2(x, y)         - sqrt(x**2 + y**2) without unnecessary overflow
"""

from pynormkit.lapack.lassq import ScaleState, lassq
from pynormkit.lapack.lanhe import lanhe, lansy
from pynormkit.lapack.lapy2 import lapy2

__all__ = [
    "ScaleState",
    "lassq",
    "lanhe",
    "lansy",
    "lapy2",
]
