"""
Norms of Hermitian and symmetric matrices stored in one triangle.

Only the triangle selected by ``uplo`` is read; the other is implied by
(conjugate) symmetry. The two entry points differ only in how a diagonal
entry contributes:

    lanhe: |Re a_jj|  (the diagonal of a Hermitian matrix is real)
    lansy: |a_jj|

Supported norms:

    Norm.Max  largest magnitude over all entries (not a consistent norm)
    Norm.One  largest column sum of magnitudes
    Norm.Inf  largest row sum of magnitudes; equals Norm.One by symmetry
    Norm.Fro  square root of the sum of squared magnitudes

Max, One and Inf return the first NaN they meet and stop scanning. The
Frobenius norm goes through lassq, so NaN poisons it instead.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

import numpy as np
from numpy.typing import NDArray

from pynormkit.core.protocols import MatrixView, VectorView
from pynormkit.core.traits import ScalarTraits, abs_real, abs_value, isnan, scalar_traits
from pynormkit.core.types import Norm, Uplo
from pynormkit.lapack.lassq import ScaleState, lassq
from pynormkit.views.matrix import col, diag
from pynormkit.views.vector import subvector, vector

AbsFunc = Callable[[Any], Any]


def lanhe(
    norm: Norm | str,
    uplo: Uplo | str,
    A: MatrixView,
    work: VectorView | NDArray[Any] | None = None,
) -> Any:
    """
    Norm of a Hermitian matrix.

    Args:
        norm: Norm.Max, Norm.One, Norm.Inf or Norm.Fro (or 'M', '1', 'I', 'F')
        uplo: Uplo.Upper or Uplo.Lower, the triangle of A that is referenced
        A: n x n view; only the referenced triangle is read
        work: Optional real scratch of length >= n, overwritten by the
            One/Inf norm. Without it the One/Inf norm rereads the triangle
            once per column instead. Ignored by Max and Fro.

    Returns:
        The norm as a real scalar of A's precision (0 when n <= 0)
    """
    return _norm(Norm(norm), Uplo(uplo), A, work, abs_real)


def lansy(
    norm: Norm | str,
    uplo: Uplo | str,
    A: MatrixView,
    work: VectorView | NDArray[Any] | None = None,
) -> Any:
    """
    Norm of a symmetric (possibly complex symmetric) matrix.

    Same arguments as lanhe; the diagonal contributes its full magnitude.
    """
    return _norm(Norm(norm), Uplo(uplo), A, work, abs_value)


def _norm(
    norm: Norm,
    uplo: Uplo,
    A: MatrixView,
    work: VectorView | NDArray[Any] | None,
    abs_diag: AbsFunc,
) -> Any:
    traits = scalar_traits(A.dtype)
    n = A.nrows

    if n <= 0:
        return traits.zero()

    upper = uplo == Uplo.Upper

    if norm == Norm.Max:
        return _max_with_nan(_triangle_magnitudes(upper, A, abs_diag), traits.zero())
    if norm == Norm.Fro:
        return _frobenius(upper, A, abs_diag, traits)
    if norm in (Norm.One, Norm.Inf):
        if isinstance(work, np.ndarray):
            work = vector(work, n)
        # A column sum beyond the representable range is reported as inf
        with np.errstate(over='ignore'):
            if work is None:
                return _max_with_nan(_column_sums(upper, A, abs_diag, traits), traits.zero())
            return _one_norm_with_work(upper, A, work, abs_diag, traits)

    raise ValueError(f"norm {norm!r} is not supported for symmetric storage")


def _max_with_nan(values: Iterable[Any], zero: Any) -> Any:
    """Running maximum that returns the first NaN it sees."""
    result = zero
    for value in values:
        if value > result:
            result = value
        elif isnan(value):
            return value
    return result


def _triangle_magnitudes(upper: bool, A: MatrixView, abs_diag: AbsFunc) -> Iterable[Any]:
    n = A.nrows
    if upper:
        for j in range(n):
            for i in range(j):
                yield abs_value(A[i, j])
            yield abs_diag(A[j, j])
    else:
        for j in range(n):
            yield abs_diag(A[j, j])
            for i in range(j + 1, n):
                yield abs_value(A[i, j])


def _frobenius(upper: bool, A: MatrixView, abs_diag: AbsFunc, traits: ScalarTraits) -> Any:
    n = A.nrows
    state = ScaleState(traits.zero(), traits.one())

    # Strictly off-diagonal part of the referenced triangle
    if upper:
        for j in range(1, n):
            lassq(subvector(col(A, j), (0, j)), state)
    else:
        for j in range(n - 1):
            lassq(subvector(col(A, j), (j + 1, n)), state)

    # Every off-diagonal entry appears twice in the full matrix
    if state.sumsq < traits.safe_max:
        state.sumsq = state.sumsq * 2
    else:
        state.scale = state.scale * np.sqrt(traits.real_dtype.type(2))

    lassq(diag(A), state, abs_diag)

    return state.value()


def _column_sums(
    upper: bool, A: MatrixView, abs_diag: AbsFunc, traits: ScalarTraits
) -> Iterable[Any]:
    """Column sums of the full matrix, reading only the referenced triangle."""
    n = A.nrows
    for j in range(n):
        total = traits.zero() + abs_diag(A[j, j])
        for i in range(n):
            if i == j:
                continue
            if (i < j) == upper:
                total += abs_value(A[i, j])
            else:
                total += abs_value(A[j, i])
        yield total


def _one_norm_with_work(
    upper: bool,
    A: MatrixView,
    work: VectorView,
    abs_diag: AbsFunc,
    traits: ScalarTraits,
) -> Any:
    n = A.nrows
    zero = traits.zero()

    for i in range(n):
        work[i] = zero

    if upper:
        # work[i] collects row i of the triangle, which is column i of
        # the mirrored part
        for j in range(n):
            total = zero
            for i in range(j):
                absa = abs_value(A[i, j])
                total += absa
                work[i] += absa
            work[j] = total + abs_diag(A[j, j])
        return _max_with_nan((work[i] for i in range(n)), zero)

    def sums() -> Iterable[Any]:
        for j in range(n):
            total = work[j] + abs_diag(A[j, j])
            for i in range(j + 1, n):
                absa = abs_value(A[i, j])
                total += absa
                work[i] += absa
            yield total

    return _max_with_nan(sums(), zero)
