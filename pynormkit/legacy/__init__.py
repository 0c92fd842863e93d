"""
Legacy (buffer + stride) API.

The argument-validating layer around the view-based kernels. Callers pass
flat NumPy buffers with extents, increments and leading dimensions as in
reference BLAS/LAPACK; arguments are checked once, views are built, and
the non-validating kernels run on them.

Public API:
    lassq(n, x, incx, scale, sumsq)
    lanhe(norm, uplo, n, A, lda, work=None)
    lansy(norm, uplo, n, A, lda, work=None)
    swap(n, x, incx, y, incy)
    herk(layout, uplo, trans, n, k, alpha, A, lda, beta, C, ldc)
    as_matrix_view(array)
"""

from pynormkit.legacy.arrays import as_matrix_view
from pynormkit.legacy.lapack import lassq, lanhe, lansy
from pynormkit.legacy.blas import swap, herk

__all__ = [
    "lassq",
    "lanhe",
    "lansy",
    "swap",
    "herk",
    "as_matrix_view",
]
