"""
Matrix views over caller-owned memory.

Three layouts share one surface (extents, dtype, ``A[i, j]`` access):

    ColMajorMatrix: (i, j) -> offset + i + j*ld
    RowMajorMatrix: (i, j) -> offset + j + i*ld
    BandedMatrix:   (i, j) -> offset + (ku + i - j) + j*(kl + ku + 1)

Every layout is affine in (i, j), so columns, rows and diagonals are
themselves StridedVectors over the same buffer and need no per-layout
code. Transposition is a relabeling between ColMajor and RowMajor over
the identical buffer and leading dimension.

No bounds checking is performed. For a banded matrix only entries with
-kl <= j - i <= ku exist in storage.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, ClassVar

import numpy as np
from numpy.typing import NDArray

from pynormkit.core.protocols import MatrixView
from pynormkit.core.types import Layout
from pynormkit.views.vector import StridedVector


class _MatrixAccess:
    """Element access shared by all matrix layouts."""

    buffer: NDArray[Any]
    m: int
    n: int
    offset: int

    def index(self, i: int, j: int) -> int:
        raise NotImplementedError

    @property
    def row_stride(self) -> int:
        """Buffer distance between (i, j) and (i + 1, j)."""
        raise NotImplementedError

    @property
    def col_stride(self) -> int:
        """Buffer distance between (i, j) and (i, j + 1)."""
        raise NotImplementedError

    @property
    def nrows(self) -> int:
        return self.m

    @property
    def ncols(self) -> int:
        return self.n

    @property
    def shape(self) -> tuple[int, int]:
        return (self.m, self.n)

    @property
    def dtype(self) -> np.dtype:
        return self.buffer.dtype

    def __getitem__(self, ij: tuple[int, int]) -> Any:
        i, j = ij
        return self.buffer[self.index(i, j)]

    def __setitem__(self, ij: tuple[int, int], value: Any) -> None:
        i, j = ij
        self.buffer[self.index(i, j)] = value


@dataclass(frozen=True, eq=False)
class ColMajorMatrix(_MatrixAccess):
    """m x n matrix stored column by column, columns ld apart."""
    buffer: NDArray[Any]
    m: int
    n: int
    ld: int
    offset: int = 0

    layout: ClassVar[Layout] = Layout.ColMajor

    def index(self, i: int, j: int) -> int:
        return self.offset + i + j * self.ld

    @property
    def row_stride(self) -> int:
        return 1

    @property
    def col_stride(self) -> int:
        return self.ld

    def __repr__(self) -> str:
        return f"ColMajorMatrix(m={self.m}, n={self.n}, ld={self.ld}, offset={self.offset}, dtype={self.dtype})"


@dataclass(frozen=True, eq=False)
class RowMajorMatrix(_MatrixAccess):
    """m x n matrix stored row by row, rows ld apart."""
    buffer: NDArray[Any]
    m: int
    n: int
    ld: int
    offset: int = 0

    layout: ClassVar[Layout] = Layout.RowMajor

    def index(self, i: int, j: int) -> int:
        return self.offset + j + i * self.ld

    @property
    def row_stride(self) -> int:
        return self.ld

    @property
    def col_stride(self) -> int:
        return 1

    def __repr__(self) -> str:
        return f"RowMajorMatrix(m={self.m}, n={self.n}, ld={self.ld}, offset={self.offset}, dtype={self.dtype})"


@dataclass(frozen=True, eq=False)
class BandedMatrix(_MatrixAccess):
    """
    m x n band matrix in LAPACK band storage.

    Column j of the band is stored contiguously in a column of length
    kl + ku + 1, with A(j, j) at row ku of that column.
    """
    buffer: NDArray[Any]
    m: int
    n: int
    kl: int
    ku: int
    offset: int = 0

    @property
    def ld(self) -> int:
        return self.kl + self.ku + 1

    def index(self, i: int, j: int) -> int:
        return self.offset + (self.ku + i - j) + j * (self.kl + self.ku + 1)

    @property
    def row_stride(self) -> int:
        return 1

    @property
    def col_stride(self) -> int:
        return self.kl + self.ku

    def in_band(self, i: int, j: int) -> bool:
        """Whether (i, j) is stored."""
        return -self.kl <= j - i <= self.ku

    def __repr__(self) -> str:
        return f"BandedMatrix(m={self.m}, n={self.n}, kl={self.kl}, ku={self.ku}, offset={self.offset}, dtype={self.dtype})"


def colmajor_matrix(
    A: NDArray[Any], m: int, n: int, lda: int | None = None, offset: int = 0
) -> ColMajorMatrix:
    """Column-major view; lda defaults to m."""
    return ColMajorMatrix(A, m, n, m if lda is None else lda, offset)


def rowmajor_matrix(
    A: NDArray[Any], m: int, n: int, lda: int | None = None, offset: int = 0
) -> RowMajorMatrix:
    """Row-major view; lda defaults to n."""
    return RowMajorMatrix(A, m, n, n if lda is None else lda, offset)


def banded_matrix(
    A: NDArray[Any], m: int, n: int, kl: int, ku: int, offset: int = 0
) -> BandedMatrix:
    """Band view with lower bandwidth kl and upper bandwidth ku."""
    return BandedMatrix(A, m, n, kl, ku, offset)


def nrows(A: MatrixView) -> int:
    return A.nrows


def ncols(A: MatrixView) -> int:
    return A.ncols


def col(A: MatrixView, j: int) -> StridedVector:
    """Column j as a vector of length nrows(A)."""
    return StridedVector(A.buffer, A.nrows, A.row_stride, A.index(0, j))


def row(A: MatrixView, i: int) -> StridedVector:
    """Row i as a vector of length ncols(A)."""
    return StridedVector(A.buffer, A.ncols, A.col_stride, A.index(i, 0))


def diag(A: MatrixView, k: int = 0) -> StridedVector:
    """
    Diagonal k of A as a vector.

    k = 0 is the main diagonal, k > 0 the k-th superdiagonal and k < 0 the
    |k|-th subdiagonal.
    """
    if k >= 0:
        i0, j0 = 0, k
        length = min(A.nrows, A.ncols - k)
    else:
        i0, j0 = -k, 0
        length = min(A.nrows + k, A.ncols)
    return StridedVector(
        A.buffer, max(0, length), A.row_stride + A.col_stride, A.index(i0, j0)
    )


def transpose(A: MatrixView) -> ColMajorMatrix | RowMajorMatrix:
    """
    O(1) transpose: same buffer and leading dimension, extents swapped.

    A column-major view becomes row-major and vice versa; transposing
    twice gives back a view with the original layout and element mapping.
    """
    if isinstance(A, ColMajorMatrix):
        return RowMajorMatrix(A.buffer, A.n, A.m, A.ld, A.offset)
    if isinstance(A, RowMajorMatrix):
        return ColMajorMatrix(A.buffer, A.n, A.m, A.ld, A.offset)
    raise NotImplementedError(f"transpose is not defined for {type(A).__name__}")


def submatrix(
    A: ColMajorMatrix | RowMajorMatrix, rows: tuple[int, int], cols: tuple[int, int]
) -> ColMajorMatrix | RowMajorMatrix:
    """Rows [r0, r1) and columns [c0, c1) of a dense view, without copying."""
    if not isinstance(A, (ColMajorMatrix, RowMajorMatrix)):
        raise NotImplementedError(f"submatrix is not defined for {type(A).__name__}")
    (r0, r1), (c0, c1) = rows, cols
    return replace(A, m=r1 - r0, n=c1 - c0, offset=A.index(r0, c0))
