"""
Core protocols for PyNormKit.

These define the structural interfaces the kernels are written against.
Any object exposing these can be passed to lassq, lanhe, herk or swap;
the concrete views in pynormkit.views are the shipped implementations.

We use Protocol (structural typing) rather than ABC (nominal typing) so
callers can supply their own layouts without inheriting from ours.
"""

from typing import Any, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class VectorView(Protocol):
    """
    Minimal protocol for a vector over caller-owned memory.

    Element i is read with ``x[i]`` and written with ``x[i] = value`` for
    0 <= i < size. No bounds checking is implied.
    """

    @property
    def size(self) -> int:
        """Number of logical elements."""
        ...

    @property
    def dtype(self) -> np.dtype:
        """Element dtype."""
        ...

    def __getitem__(self, i: int) -> Any:
        ...

    def __setitem__(self, i: int, value: Any) -> None:
        ...


@runtime_checkable
class MatrixView(Protocol):
    """
    Protocol for a matrix over caller-owned memory with an affine layout.

    Element (i, j) lives at ``buffer[index(i, j)]`` and moving one row or
    one column moves the buffer position by ``row_stride`` or
    ``col_stride``. That is what lets columns, rows and diagonals be
    taken as strided vectors without copying. ``A[i, j]`` reads and
    ``A[i, j] = value`` writes, for 0 <= i < nrows, 0 <= j < ncols.
    """

    @property
    def buffer(self) -> NDArray[Any]:
        """The caller-owned flat buffer."""
        ...

    @property
    def nrows(self) -> int:
        """Number of rows."""
        ...

    @property
    def ncols(self) -> int:
        """Number of columns."""
        ...

    @property
    def row_stride(self) -> int:
        ...

    @property
    def col_stride(self) -> int:
        ...

    @property
    def dtype(self) -> np.dtype:
        """Element dtype."""
        ...

    def index(self, i: int, j: int) -> int:
        """Buffer position of element (i, j)."""
        ...

    def __getitem__(self, ij: tuple[int, int]) -> Any:
        ...

    def __setitem__(self, ij: tuple[int, int], value: Any) -> None:
        ...
