"""
Scalar trait table.

Provides, per NumPy scalar type, the representable-range constants from
which the scaled sum-of-squares thresholds are derived, plus the small set
of scalar operations (modulus, real part, conjugate, NaN test) the kernels
need. Constants are resolved once per dtype and cached.

Blue's constants follow Anderson (2017), "Algorithm 978: Safe Scaling in
the Level 1 BLAS", with the Fortran exponent convention
(emin = finfo.minexp + 1, emax = finfo.maxexp) and t binary digits:

    blue_min         = 2**ceil((emin - 1) / 2)      values below are scaled up
    blue_max         = 2**floor((emax - t + 1) / 2) values above are scaled down
    blue_scaling_min = 2**-floor((emin - t) / 2)
    blue_scaling_max = 2**-ceil((emax + t - 1) / 2)
"""

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

import numpy as np


@dataclass(frozen=True)
class ScalarTraits:
    """
    Numeric constants for one scalar type.

    All floating-point attributes are NumPy scalars of ``real_dtype`` so
    arithmetic with them stays in the working precision.

    Attributes:
        dtype: The scalar dtype (real or complex)
        real_dtype: Dtype of the real part
        is_complex: Whether dtype is complex
        digits: Binary digits in the significand (t)
        eps: Machine epsilon
        tiny: Smallest positive normal number
        huge: Largest finite number
        safe_min: Smallest x such that 1/x does not overflow
        safe_max: 1 / safe_min
        blue_min: Lower threshold for values whose square is representable
        blue_max: Upper threshold for values whose square is representable
        blue_scaling_min: Scaling factor for values below blue_min
        blue_scaling_max: Scaling factor for values above blue_max
    """
    dtype: np.dtype
    real_dtype: np.dtype
    is_complex: bool
    digits: int
    eps: np.floating[Any]
    tiny: np.floating[Any]
    huge: np.floating[Any]
    safe_min: np.floating[Any]
    safe_max: np.floating[Any]
    blue_min: np.floating[Any]
    blue_max: np.floating[Any]
    blue_scaling_min: np.floating[Any]
    blue_scaling_max: np.floating[Any]

    def zero(self) -> np.floating[Any]:
        """Real zero in working precision."""
        return self.real_dtype.type(0)

    def one(self) -> np.floating[Any]:
        """Real one in working precision."""
        return self.real_dtype.type(1)


@lru_cache(maxsize=None)
def _build_traits(dtype: np.dtype) -> ScalarTraits:
    finfo = np.finfo(dtype)
    real_dtype = np.dtype(finfo.dtype)
    one = real_dtype.type(1)

    t = finfo.nmant + 1
    emin = finfo.minexp + 1
    emax = finfo.maxexp

    def pow2(exponent: int) -> np.floating[Any]:
        return np.ldexp(one, exponent)

    safe_min = pow2(max(emin - 1, 1 - emax))

    return ScalarTraits(
        dtype=dtype,
        real_dtype=real_dtype,
        is_complex=np.issubdtype(dtype, np.complexfloating),
        digits=t,
        eps=real_dtype.type(finfo.eps),
        tiny=real_dtype.type(finfo.tiny),
        huge=real_dtype.type(finfo.max),
        safe_min=safe_min,
        safe_max=one / safe_min,
        blue_min=pow2(math.ceil((emin - 1) / 2)),
        blue_max=pow2(math.floor((emax - t + 1) / 2)),
        blue_scaling_min=pow2(-math.floor((emin - t) / 2)),
        blue_scaling_max=pow2(-math.ceil((emax + t - 1) / 2)),
    )


def scalar_traits(dtype: np.dtype | type) -> ScalarTraits:
    """
    Get the trait table for a floating-point or complex dtype.

    Args:
        dtype: NumPy dtype or scalar type (float32, float64, complex64, ...)

    Returns:
        Cached ScalarTraits for the dtype
    """
    return _build_traits(np.dtype(dtype))


def real_part(x: Any) -> np.floating[Any]:
    """Real part (identity on real scalars)."""
    return np.real(x)


def imag_part(x: Any) -> np.floating[Any]:
    """Imaginary part (zero on real scalars)."""
    return np.imag(x)


def conj(x: Any) -> Any:
    """Complex conjugate, extended to real scalars as the identity."""
    return np.conj(x)


def isnan(x: Any) -> bool:
    """NaN test; a complex number is NaN if either part is NaN."""
    return bool(np.isnan(x))


def abs_value(x: Any) -> np.floating[Any]:
    """
    Modulus |x|.

    For complex input the result is NaN whenever either part is NaN, even
    when the other part is infinite (np.abs follows C99 hypot and would
    return inf there).
    """
    if np.iscomplexobj(x):
        re = np.abs(np.real(x))
        if np.isnan(re) or np.isnan(np.imag(x)):
            return re.dtype.type(np.nan)
    return np.abs(x)


def abs_real(x: Any) -> np.floating[Any]:
    """|Re x|; the diagonal magnitude of a Hermitian matrix."""
    return np.abs(np.real(x))


__all__ = [
    'ScalarTraits',
    'scalar_traits',
    'real_part',
    'imag_part',
    'conj',
    'isnan',
    'abs_value',
    'abs_real',
]
