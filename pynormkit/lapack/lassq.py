"""
Scaled sum of squares.

Updates a sum of squares represented in scaled form,

    scale_out**2 * sumsq_out = sum_i |x_i|**2 + scale_in**2 * sumsq_in,

in one pass and without intermediate overflow or underflow, using Blue's
three accumulators (Anderson 2017, Algorithm 978: Safe Scaling in the
Level 1 BLAS, ACM TOMS 44:1-28):

    abig -- squares of values above blue_max, scaled down by blue_scaling_max
    amed -- squares of mid-range values, unscaled
    asml -- squares of values below blue_min, scaled up by blue_scaling_min

The incoming (scale, sumsq) pair is classified and folded in the same way
as the elements, then the non-empty accumulators are merged.

The incoming state is trusted: only NaN is checked at entry. If
scale * sqrt(sumsq) > blue_max on entry the caller must keep
scale >= sqrt(tiny * eps) / blue_scaling_max, and if it is below blue_min
the caller must keep scale <= sqrt(huge) / blue_scaling_min. States
produced by lassq itself always satisfy this.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np

from pynormkit.core.protocols import VectorView
from pynormkit.core.traits import abs_value, isnan, scalar_traits

AbsFunc = Callable[[Any], Any]


@dataclass
class ScaleState:
    """
    The pair (scale, sumsq) representing scale**2 * sumsq.

    Threaded through successive lassq calls, each of which reads and
    overwrites it. Start from the default (0, 1) for an empty sum, or from
    a partial result. A NaN in either component poisons the state for good.
    """
    scale: Any = 0.0
    sumsq: Any = 1.0

    def value(self) -> Any:
        """scale * sqrt(sumsq); inf if the true value is not representable."""
        with np.errstate(over='ignore'):
            return self.scale * np.sqrt(self.sumsq)

    def is_nan(self) -> bool:
        return isnan(self.scale) or isnan(self.sumsq)


def lassq(
    x: VectorView,
    state: ScaleState,
    abs_func: AbsFunc = abs_value,
) -> ScaleState:
    """
    Fold sum_i |x_i|**2 into a scaled sum of squares.

    Args:
        x: Vector view of the elements to accumulate
        state: Incoming (scale, sumsq); updated in place
        abs_func: Magnitude of one element. Defaults to the modulus; pass
            ``abs_real`` to accumulate only real parts (Hermitian diagonals)

    Returns:
        ``state``, updated

    Notes:
        A NaN state is returned untouched. Otherwise sumsq == 0 resets
        scale to 1, and scale == 0 resets the state to (1, 0) so that a
        degenerate zero-scale state does not misclassify later terms.
    """
    traits = scalar_traits(x.dtype)
    real_t = traits.real_dtype.type
    zero = traits.zero()
    one = traits.one()
    tsml = traits.blue_min
    tbig = traits.blue_max
    ssml = traits.blue_scaling_min
    sbig = traits.blue_scaling_max

    scl = real_t(state.scale)
    sumsq = real_t(state.sumsq)

    if isnan(scl) or isnan(sumsq):
        return state

    if sumsq == zero:
        scl = one
    if scl == zero:
        scl = one
        sumsq = zero

    n = x.size
    if n <= 0:
        state.scale, state.sumsq = scl, sumsq
        return state

    asml = zero
    amed = zero
    abig = zero

    for i in range(n):
        ax = abs_func(x[i])
        if ax > tbig:
            t = ax * sbig
            abig += t * t
        elif ax < tsml:
            if abig == zero:
                t = ax * ssml
                asml += t * t
        else:
            amed += ax * ax

    # Put the existing sum of squares into one of the accumulators
    if sumsq > zero:
        ax = scl * np.sqrt(sumsq)
        if ax > tbig:
            t = scl * sbig
            abig += t * t * sumsq
        elif ax < tsml:
            if abig == zero:
                t = scl * ssml
                asml += t * t * sumsq
        else:
            amed += scl * scl * sumsq

    # Combine abig and amed, or amed and asml, if more than one
    # accumulator was used
    if abig > zero:
        if amed > zero or isnan(amed):
            abig += (amed * sbig) * sbig
        scl = one / sbig
        sumsq = abig
    elif asml > zero:
        if amed > zero or isnan(amed):
            amed = np.sqrt(amed)
            asml = np.sqrt(asml) / ssml
            if asml > amed:
                ymin, ymax = amed, asml
            else:
                ymin, ymax = asml, amed
            ratio = ymin / ymax
            scl = one
            sumsq = ymax * ymax * (one + ratio * ratio)
        else:
            scl = one / ssml
            sumsq = asml
    else:
        # All values are mid-range or zero
        scl = one
        sumsq = amed

    state.scale, state.sumsq = scl, sumsq
    return state
