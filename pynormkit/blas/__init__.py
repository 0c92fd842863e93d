"""
BLAS-level routines over views.

Public API:
    swap(x, y)                          - Exchange two vectors
    herk(uplo, trans, alpha, A, beta, C) - Hermitian rank-k update
"""

from pynormkit.blas.swap import swap
from pynormkit.blas.herk import herk

__all__ = [
    "swap",
    "herk",
]
