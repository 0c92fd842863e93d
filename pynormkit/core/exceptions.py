"""
Exception hierarchy for PyNormKit.

All exceptions inherit from PyNormKitError to allow catching any
library-specific error.

Only the validating legacy layer raises these. The numerical core (views,
lassq, lanhe/lansy, herk, swap) is a total function over well-formed
inputs and never raises: NaN is a numeric outcome, and malformed views are
a precondition violation.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Any


class PyNormKitError(Exception):
    """Base exception for all PyNormKit errors."""
    pass


class ValidationError(PyNormKitError):
    """
    Input validation failed.

    Raised when caller-provided arguments fail validation checks before a
    view is constructed.
    """
    pass


class DimensionError(ValidationError):
    """
    Extents are incorrect or inconsistent.

    Raised when a buffer is too short for the requested extents and
    strides, when a leading dimension is smaller than the number of rows,
    or when a buffer has the wrong number of dimensions.
    """
    pass


class InvalidArgumentError(ValidationError):
    """
    A single argument of a legacy call is invalid.

    Mirrors the BLAS/LAPACK convention of reporting the position of the
    offending argument (an info value of -i).

    Attributes:
        argument: Parameter name
        position: 1-based position of the argument in the call signature
        value: The rejected value
    """

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        position: int | None = None,
        value: Any = None
    ):
        super().__init__(message)
        self.argument = argument
        self.position = position
        self.value = value

    @property
    def info(self) -> int | None:
        """LAPACK-style info code (-position), or None if unknown."""
        if self.position is None:
            return None
        return -self.position
