"""
Core infrastructure for PyNormKit.

This module provides shared abstractions and utilities used by the views,
BLAS and LAPACK subpackages.

Key components:
    protocols: VectorView, MatrixView structural interfaces
    types: Option enums (Norm, Uplo, Op, Layout, Direction)
    traits: Per-dtype numeric constants and scalar helpers
    exceptions: Exception hierarchy (raised by the legacy layer only)
    validation: Argument validators for the legacy layer
    tolerances: Precision tiers for numerical comparison
"""

from pynormkit.core.protocols import VectorView, MatrixView
from pynormkit.core.types import Norm, Uplo, Op, Layout, Direction
from pynormkit.core.traits import ScalarTraits, scalar_traits
from pynormkit.core.exceptions import (
    PyNormKitError,
    ValidationError,
    DimensionError,
    InvalidArgumentError,
)

__all__ = [
    # Protocols
    "VectorView",
    "MatrixView",
    # Options
    "Norm",
    "Uplo",
    "Op",
    "Layout",
    "Direction",
    # Traits
    "ScalarTraits",
    "scalar_traits",
    # Exceptions
    "PyNormKitError",
    "ValidationError",
    "DimensionError",
    "InvalidArgumentError",
]
