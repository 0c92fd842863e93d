"""
Non-owning views over caller-owned strided memory.

A view is a small descriptor (buffer reference, extents, strides, layout)
telling the kernels how to read a flat buffer as a vector or a matrix.
Views never copy, never allocate element storage, and never check bounds;
their lifetime is bound to the buffer they reference.

Public API:
    StridedVector, vector, backward_vector, subvector, size
    ColMajorMatrix, RowMajorMatrix, BandedMatrix
    colmajor_matrix, rowmajor_matrix, banded_matrix
    nrows, ncols, col, row, diag, submatrix, transpose
"""

from pynormkit.views.vector import (
    StridedVector,
    vector,
    backward_vector,
    subvector,
    size,
)
from pynormkit.views.matrix import (
    ColMajorMatrix,
    RowMajorMatrix,
    BandedMatrix,
    colmajor_matrix,
    rowmajor_matrix,
    banded_matrix,
    nrows,
    ncols,
    col,
    row,
    diag,
    submatrix,
    transpose,
)

__all__ = [
    # Vectors
    "StridedVector",
    "vector",
    "backward_vector",
    "subvector",
    "size",
    # Matrices
    "ColMajorMatrix",
    "RowMajorMatrix",
    "BandedMatrix",
    "colmajor_matrix",
    "rowmajor_matrix",
    "banded_matrix",
    # Slicing and relabeling
    "nrows",
    "ncols",
    "col",
    "row",
    "diag",
    "submatrix",
    "transpose",
]
