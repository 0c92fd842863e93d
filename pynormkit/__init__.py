"""
PyNormKit: overflow-safe norms over zero-copy strided views.

A small numerical kernel layer:

    views:   Non-owning column-major, row-major, banded and strided-vector
             views over caller-owned NumPy buffers
    lapack:  Scaled sum of squares (Blue's algorithm) and Hermitian /
             symmetric matrix norms built on it
    blas:    Vector swap and Hermitian rank-k update over views
    legacy:  Argument-validating buffer + stride entry points

Submodules:
    core: Protocols, option enums, scalar traits, exceptions, validation
"""

__version__ = "0.1.0"

from pynormkit.core.types import Norm, Uplo, Op, Layout, Direction
from pynormkit.lapack import ScaleState, lassq, lanhe, lansy, lapy2
from pynormkit.blas import swap, herk
from pynormkit import views
from pynormkit import legacy

__all__ = [
    "__version__",
    # Options
    "Norm",
    "Uplo",
    "Op",
    "Layout",
    "Direction",
    # Kernels
    "ScaleState",
    "lassq",
    "lanhe",
    "lansy",
    "lapy2",
    "swap",
    "herk",
    # Submodules
    "views",
    "legacy",
]
