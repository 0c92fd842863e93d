"""
Legacy (buffer + stride) entry points for the BLAS-level routines.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from pynormkit.core.exceptions import ValidationError
from pynormkit.core.types import Layout, Op, Uplo
from pynormkit.core.validation import (
    check_buffer,
    check_increment,
    check_leading_dimension,
    check_matrix_extent,
    check_nonnegative,
    check_option,
    check_output_buffer,
    check_real_scalar,
    check_vector_extent,
)
from pynormkit.blas import herk as _herk
from pynormkit.blas import swap as _swap
from pynormkit.legacy.arrays import legacy_matrix, legacy_vector


def swap(n: int, x: ArrayLike, incx: int, y: ArrayLike, incy: int) -> None:
    """
    Swap n elements of x and y in place.

    A negative increment uses the elements in reverse order, so with
    incx < 0 logical element i is x[(n - 1 - i) * |incx|].

    Raises:
        InvalidArgumentError: n < 0, incx == 0 or incy == 0
        ValidationError: x or y is not a writeable ndarray
        DimensionError: x or y too short
    """
    check_nonnegative(n, "n", 1)
    xbuf = check_output_buffer(x, "x")
    check_increment(incx, "incx", 3)
    ybuf = check_output_buffer(y, "y")
    check_increment(incy, "incy", 5)
    check_vector_extent(xbuf, n, incx, "x")
    check_vector_extent(ybuf, n, incy, "y")

    _swap(legacy_vector(xbuf, n, incx), legacy_vector(ybuf, n, incy))


def herk(
    layout: Layout | str,
    uplo: Uplo | str,
    trans: Op | str,
    n: int,
    k: int,
    alpha: Any,
    A: ArrayLike,
    lda: int,
    beta: Any,
    C: ArrayLike,
    ldc: int,
) -> None:
    """
    Hermitian rank-k update C := alpha*A*A^H + beta*C or alpha*A^H*A + beta*C.

    Args:
        layout: 'C' (column-major) or 'R' (row-major), for both A and C
        uplo: 'U', 'L' or 'G'
        trans: 'N' or 'C'; 'T' is accepted for real data only
        n: Order of C
        k: Inner dimension
        alpha: Real scalar
        A: Flat buffer holding A (n x k for 'N', k x n otherwise)
        lda: Leading dimension of A
        beta: Real scalar
        C: Flat buffer holding C (n x n), updated in place
        ldc: Leading dimension of C

    Raises:
        InvalidArgumentError: Bad option, negative extent, complex
            alpha/beta or too-small leading dimension
        ValidationError: Complex A with real C, or C not a writeable ndarray
        DimensionError: A or C too short
    """
    layout = check_option(layout, Layout, "layout", 1)
    uplo = check_option(uplo, Uplo, "uplo", 2)
    abuf = check_buffer(A, "A")
    cbuf = check_output_buffer(C, "C")

    allowed_ops = (Op.NoTrans, Op.ConjTrans)
    if not np.iscomplexobj(abuf):
        allowed_ops += (Op.Trans,)
    trans = check_option(trans, Op, "trans", 3, allowed=allowed_ops)

    check_nonnegative(n, "n", 4)
    check_nonnegative(k, "k", 5)
    check_real_scalar(alpha, "alpha", 6)
    check_real_scalar(beta, "beta", 9)

    if np.iscomplexobj(abuf) and not np.iscomplexobj(cbuf):
        raise ValidationError(
            f"C: dtype {cbuf.dtype} cannot hold the update of complex A ({abuf.dtype})"
        )

    rows, cols = (n, k) if trans == Op.NoTrans else (k, n)
    if layout == Layout.ColMajor:
        check_leading_dimension(lda, rows, "lda", 8)
        check_matrix_extent(abuf, rows, cols, lda, "A")
    else:
        check_leading_dimension(lda, cols, "lda", 8)
        check_matrix_extent(abuf, cols, rows, lda, "A")
    check_leading_dimension(ldc, n, "ldc", 11)
    check_matrix_extent(cbuf, n, n, ldc, "C")

    _herk(
        uplo,
        trans,
        alpha,
        legacy_matrix(layout, abuf, rows, cols, lda),
        beta,
        legacy_matrix(layout, cbuf, n, n, ldc),
    )
