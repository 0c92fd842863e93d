"""
Hermitian rank-k update.

    C := alpha * A * A^H + beta * C    (trans = Op.NoTrans)
    C := alpha * A^H * A + beta * C    (trans = Op.ConjTrans)

alpha and beta are real, C is n x n Hermitian and A is n x k (NoTrans) or
k x n (ConjTrans). For real data this is the symmetric rank-k update.
"""

from __future__ import annotations

from typing import Any

from pynormkit.core.protocols import MatrixView
from pynormkit.core.traits import conj, imag_part, real_part, scalar_traits
from pynormkit.core.types import Op, Uplo


def herk(
    uplo: Uplo | str,
    trans: Op | str,
    alpha: Any,
    A: MatrixView,
    beta: Any,
    C: MatrixView,
) -> None:
    """
    Hermitian rank-k update of C, in place.

    Args:
        uplo: Triangle of C that is referenced and updated. Uplo.General
            updates the upper triangle, then fills the strictly lower one
            with its conjugate transpose.
        trans: Op.NoTrans for A*A^H, Op.ConjTrans for A^H*A
        alpha: Real scalar
        A: n x k (NoTrans) or k x n (ConjTrans) view
        beta: Real scalar
        C: n x n view, updated in place. Imaginary parts of the diagonal
            are assumed zero on entry and set to zero on exit.

    Notes:
        With complex alpha or beta the result would no longer be
        Hermitian; keeping them real is the caller's responsibility.
    """
    uplo = Uplo(uplo)
    trans = Op(trans)

    if trans == Op.NoTrans:
        n, k = A.nrows, A.ncols
    else:
        n, k = A.ncols, A.nrows

    lower = uplo == Uplo.Lower

    if trans == Op.NoTrans:
        for j in range(n):
            if lower:
                C[j, j] = beta * real_part(C[j, j])
                for i in range(j + 1, n):
                    C[i, j] *= beta
            else:
                for i in range(j):
                    C[i, j] *= beta
                C[j, j] = beta * real_part(C[j, j])

            for l in range(k):
                alpha_conj_ajl = alpha * conj(A[j, l])
                C[j, j] += real_part(A[j, l] * alpha_conj_ajl)
                rows = range(j + 1, n) if lower else range(j)
                for i in rows:
                    C[i, j] += A[i, l] * alpha_conj_ajl
    else:
        zero = A.dtype.type(0)
        real_zero = scalar_traits(A.dtype).zero()
        for j in range(n):
            rows = range(j + 1, n) if lower else range(j)
            for i in rows:
                total = zero
                for l in range(k):
                    total += conj(A[l, i]) * A[l, j]
                C[i, j] = alpha * total + beta * C[i, j]

            total = real_zero
            for l in range(k):
                re = real_part(A[l, j])
                im = imag_part(A[l, j])
                total += re * re + im * im
            C[j, j] = alpha * total + beta * real_part(C[j, j])

    if uplo == Uplo.General:
        for j in range(n):
            for i in range(j + 1, n):
                C[i, j] = conj(C[j, i])
