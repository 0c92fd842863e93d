"""
Legacy (buffer + stride) entry points for the LAPACK-level routines.

Each function validates its arguments, builds views over the caller's
buffers and calls the non-validating routine in pynormkit.lapack.
Invalid arguments raise InvalidArgumentError carrying the 1-based
position of the argument, as LAPACK reports info = -i.
"""

from __future__ import annotations

import warnings
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike

from pynormkit.core.exceptions import ValidationError
from pynormkit.core.types import Norm, Uplo
from pynormkit.core.validation import (
    check_buffer,
    check_increment,
    check_leading_dimension,
    check_matrix_extent,
    check_nonnegative,
    check_option,
    check_output_buffer,
    check_vector_extent,
)
from pynormkit.lapack import lanhe as _lanhe
from pynormkit.lapack import lansy as _lansy
from pynormkit.lapack.lassq import ScaleState
from pynormkit.lapack.lassq import lassq as _lassq
from pynormkit.legacy.arrays import legacy_vector
from pynormkit.views.matrix import colmajor_matrix
from pynormkit.views.vector import vector

SUPPORTED_NORMS = (Norm.Max, Norm.One, Norm.Inf, Norm.Fro)


def lassq(
    n: int,
    x: ArrayLike,
    incx: int,
    scale: Any,
    sumsq: Any,
) -> tuple[Any, Any]:
    """
    Update a scaled sum of squares with n elements of x.

    Returns (scale_out, sumsq_out) such that
    scale_out**2 * sumsq_out = sum_i |x_i|**2 + scale**2 * sumsq.

    Args:
        n: Number of elements, n >= 0
        x: Flat buffer of length >= (n - 1) * |incx| + 1
        incx: Nonzero increment; negative reads x from the end
        scale: Incoming scale
        sumsq: Incoming sum of squares

    Raises:
        InvalidArgumentError: n < 0 or incx == 0
        DimensionError: x too short
    """
    check_nonnegative(n, "n", 1)
    buf = check_buffer(x, "x")
    check_increment(incx, "incx", 3)
    check_vector_extent(buf, n, incx, "x")

    state = ScaleState(scale, sumsq)
    _lassq(legacy_vector(buf, n, incx), state)
    return state.scale, state.sumsq


def lanhe(
    norm: Norm | str,
    uplo: Uplo | str,
    n: int,
    A: ArrayLike,
    lda: int,
    work: ArrayLike | None = None,
) -> Any:
    """
    Norm of an n x n Hermitian matrix in column-major storage.

    Args:
        norm: 'M', '1', 'I' or 'F'
        uplo: 'U' or 'L', the triangle of A that is referenced
        n: Order of A, n >= 0
        A: Flat column-major buffer, leading dimension lda
        lda: Leading dimension, lda >= max(1, n)
        work: Optional real buffer of length >= n for the One/Inf norm

    Raises:
        InvalidArgumentError: Unsupported norm/uplo, n < 0 or lda < n
        ValidationError: Complex, read-only or non-ndarray work buffer
        DimensionError: A or work too short
    """
    return _call_norm("lanhe", _lanhe, norm, uplo, n, A, lda, work)


def lansy(
    norm: Norm | str,
    uplo: Uplo | str,
    n: int,
    A: ArrayLike,
    lda: int,
    work: ArrayLike | None = None,
) -> Any:
    """
    Norm of an n x n symmetric matrix in column-major storage.

    Same arguments and errors as lanhe.
    """
    return _call_norm("lansy", _lansy, norm, uplo, n, A, lda, work)


def _call_norm(
    routine: str,
    kernel: Callable[..., Any],
    norm: Norm | str,
    uplo: Uplo | str,
    n: int,
    A: ArrayLike,
    lda: int,
    work: ArrayLike | None,
) -> Any:
    norm = check_option(norm, Norm, "norm", 1, allowed=SUPPORTED_NORMS)
    uplo = check_option(uplo, Uplo, "uplo", 2, allowed=(Uplo.Upper, Uplo.Lower))
    check_nonnegative(n, "n", 3)
    buf = check_buffer(A, "A")
    check_leading_dimension(lda, n, "lda", 5)
    check_matrix_extent(buf, n, n, lda, "A")

    work_view = None
    if work is not None:
        if norm in (Norm.Max, Norm.Fro):
            warnings.warn(
                f"{routine}: work is not referenced for Norm.{norm.name}",
                UserWarning,
                stacklevel=3,
            )
        else:
            work_buf = check_output_buffer(work, "work")
            if np.iscomplexobj(work_buf):
                raise ValidationError(
                    f"work: must be a real buffer, got dtype {work_buf.dtype}"
                )
            check_vector_extent(work_buf, n, 1, "work")
            work_view = vector(work_buf, n)

    return kernel(norm, uplo, colmajor_matrix(buf, n, n, lda), work_view)
