"""
Vector swap, x <=> y.
"""

from pynormkit.core.protocols import VectorView


def swap(x: VectorView, y: VectorView) -> None:
    """
    Exchange the elements of two vectors of equal length, in place.

    Works across any combination of increments and directions: logical
    element i of x is exchanged with logical element i of y.

    Args:
        x: Vector view, size(x) == size(y)
        y: Vector view
    """
    for i in range(x.size):
        x[i], y[i] = y[i], x[i]
