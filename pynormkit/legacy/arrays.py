"""
Validated view construction from caller arguments.

The views themselves check nothing. These helpers are where the legacy
API checks buffers, extents and strides once, before any view exists.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynormkit.core.exceptions import DimensionError, ValidationError
from pynormkit.core.types import Layout
from pynormkit.core.validation import check_buffer
from pynormkit.views.matrix import ColMajorMatrix, RowMajorMatrix, colmajor_matrix, rowmajor_matrix
from pynormkit.views.vector import StridedVector, backward_vector, vector


def legacy_vector(x: NDArray[Any], n: int, inc: int) -> StridedVector:
    """
    View of n elements of x under the BLAS increment convention.

    A negative increment reads the buffer from the end:
    element i is x[(n - 1 - i) * |inc|].
    """
    if inc > 0:
        return vector(x, n, inc)
    return backward_vector(x, n, -inc)


def legacy_matrix(
    layout: Layout, A: NDArray[Any], m: int, n: int, lda: int
) -> ColMajorMatrix | RowMajorMatrix:
    """m x n view of A in the given layout."""
    if layout == Layout.ColMajor:
        return colmajor_matrix(A, m, n, lda)
    return rowmajor_matrix(A, m, n, lda)


def as_matrix_view(array: ArrayLike) -> ColMajorMatrix | RowMajorMatrix:
    """
    Wrap a contiguous 2D ndarray as a matrix view without copying.

    Fortran-ordered arrays become column-major views, C-ordered arrays
    row-major views. Writes through the view land in ``array``.

    Raises:
        ValidationError: If the array is not floating-point/complex or
            not contiguous in either order
        DimensionError: If the array is not 2D
    """
    arr = np.asarray(array)
    if arr.ndim != 2:
        raise DimensionError(
            f"array: expected 2D array, got {arr.ndim}D with shape {arr.shape}"
        )

    m, n = arr.shape
    if arr.flags.f_contiguous:
        flat = check_buffer(arr.reshape(-1, order='F'), "array")
        return colmajor_matrix(flat, m, n, max(1, m))
    if arr.flags.c_contiguous:
        flat = check_buffer(arr.reshape(-1), "array")
        return rowmajor_matrix(flat, m, n, max(1, n))

    raise ValidationError(
        f"array: must be C- or Fortran-contiguous, got strides {arr.strides}"
    )
