"""
Safe two-term hypotenuse.
"""

from typing import Any

import numpy as np

from pynormkit.core.traits import isnan


def lapy2(x: Any, y: Any) -> Any:
    """
    sqrt(x**2 + y**2) without unnecessary overflow or underflow.

    Computed as w * sqrt(1 + (z/w)**2) with w = max(|x|, |y|) and
    z = min(|x|, |y|). Returns w when z is zero or w is infinite, and NaN
    when either input is NaN.

    Args:
        x: Real scalar
        y: Real scalar

    Returns:
        The hypotenuse in the precision of the inputs
    """
    xabs = np.abs(x)
    yabs = np.abs(y)

    if isnan(xabs) or isnan(yabs):
        return xabs + yabs

    if xabs > yabs:
        w, z = xabs, yabs
    else:
        w, z = yabs, xabs

    if z == 0 or np.isinf(w):
        return w

    ratio = z / w
    return w * np.sqrt(1 + ratio * ratio)
