"""
Argument validation for the legacy (buffer + stride) API.

The numerical core trusts its views and checks nothing. These validators
run in the surrounding API layer before a view is built. They follow the
"fail fast, fail loud" principle: raise immediately with a clear message
rather than silently correcting or guessing caller intent.

Design principles:
    - No copies and no dtype coercion: views must alias caller memory
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names (and legacy argument positions) in all errors
"""

from enum import Enum
from typing import Any, Iterable, TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynormkit.core.exceptions import (
    DimensionError,
    InvalidArgumentError,
    ValidationError,
)

E = TypeVar('E', bound=Enum)


def check_buffer(buffer: ArrayLike, name: str) -> NDArray[np.inexact[Any]]:
    """
    Validate a caller-owned flat buffer.

    Unlike a general-purpose converter this never copies: a view built on
    the result must write through to the caller's memory, so the dtype
    must already be floating or complex.

    Args:
        buffer: Flat numeric buffer (1-D ndarray)
        name: Parameter name for error messages

    Returns:
        The buffer as an ndarray (same object when given an ndarray)

    Raises:
        ValidationError: If the buffer is not floating-point or complex
        DimensionError: If the buffer is not 1-dimensional
    """
    try:
        result = np.asarray(buffer)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.inexact):
        raise ValidationError(
            f"{name}: dtype {result.dtype} is not floating-point or complex"
        )

    if result.ndim != 1:
        raise DimensionError(
            f"{name}: expected a flat 1D buffer, got {result.ndim}D with shape {result.shape}"
        )

    return result


def check_output_buffer(buffer: Any, name: str) -> NDArray[np.inexact[Any]]:
    """
    Validate a caller-owned flat buffer that a routine writes into.

    Only an existing writeable ndarray qualifies: a list or tuple would be
    converted to a temporary and the result would never reach the caller.

    Args:
        buffer: Flat writeable numeric buffer (1-D ndarray)
        name: Parameter name for error messages

    Returns:
        The same ndarray

    Raises:
        ValidationError: If the buffer is not an ndarray, is read-only, or
            is not floating-point or complex
        DimensionError: If the buffer is not 1-dimensional
    """
    if not isinstance(buffer, np.ndarray):
        raise ValidationError(
            f"{name}: is written in place and must be a numpy.ndarray, "
            f"got {type(buffer).__name__}"
        )

    if not buffer.flags.writeable:
        raise ValidationError(f"{name}: is written in place but the array is read-only")

    return check_buffer(buffer, name)


def check_nonnegative(value: int, name: str, position: int) -> None:
    """
    Verify an extent (rows, columns, length, bandwidth) is >= 0.

    Raises:
        InvalidArgumentError: If value < 0
    """
    if value < 0:
        raise InvalidArgumentError(
            f"{name}: must be >= 0, got {value}",
            argument=name, position=position, value=value
        )


def check_increment(inc: int, name: str, position: int) -> None:
    """
    Verify a vector increment is nonzero.

    Raises:
        InvalidArgumentError: If inc == 0
    """
    if inc == 0:
        raise InvalidArgumentError(
            f"{name}: increment must be nonzero",
            argument=name, position=position, value=inc
        )


def check_leading_dimension(ld: int, minimum: int, name: str, position: int) -> None:
    """
    Verify a leading dimension is at least max(1, minimum).

    Raises:
        InvalidArgumentError: If ld is too small
    """
    required = max(1, minimum)
    if ld < required:
        raise InvalidArgumentError(
            f"{name}: must be >= {required}, got {ld}",
            argument=name, position=position, value=ld
        )


def check_vector_extent(
    buffer: NDArray[np.inexact[Any]],
    n: int,
    inc: int,
    name: str
) -> None:
    """
    Verify a buffer holds n elements spaced |inc| apart.

    Requires len(buffer) >= (n - 1) * |inc| + 1 when n > 0.

    Raises:
        DimensionError: If the buffer is too short
    """
    if n <= 0:
        return
    required = (n - 1) * abs(inc) + 1
    if buffer.shape[0] < required:
        raise DimensionError(
            f"{name}: buffer of length {buffer.shape[0]} is too short for "
            f"n={n}, inc={inc} (requires {required})"
        )


def check_matrix_extent(
    buffer: NDArray[np.inexact[Any]],
    major: int,
    minor: int,
    ld: int,
    name: str
) -> None:
    """
    Verify a buffer holds a dense matrix.

    For a column-major matrix ``major`` is the number of rows and ``minor``
    the number of columns; for row-major the roles are exchanged. Requires
    len(buffer) >= (minor - 1) * ld + major when both extents are positive.

    Raises:
        DimensionError: If the buffer is too short
    """
    if major <= 0 or minor <= 0:
        return
    required = (minor - 1) * ld + major
    if buffer.shape[0] < required:
        raise DimensionError(
            f"{name}: buffer of length {buffer.shape[0]} is too short for a "
            f"{major} x {minor} block with leading dimension {ld} (requires {required})"
        )


def check_real_scalar(value: Any, name: str, position: int) -> None:
    """
    Verify a scalar coefficient is real.

    Raises:
        InvalidArgumentError: If value is complex
    """
    if np.iscomplexobj(value):
        raise InvalidArgumentError(
            f"{name}: must be real, got {value!r}",
            argument=name, position=position, value=value
        )


def check_option(
    value: Any,
    enum_type: type[E],
    name: str,
    position: int,
    allowed: Iterable[E] | None = None
) -> E:
    """
    Convert an option (enum member or character code) to its enum member.

    Args:
        value: Enum member or its string value
        enum_type: The Enum class to convert to
        name: Parameter name for error messages
        position: Legacy argument position
        allowed: Members the routine accepts (default: all)

    Returns:
        The enum member

    Raises:
        InvalidArgumentError: If value is unknown or not allowed
    """
    try:
        member = enum_type(value)
    except ValueError:
        valid = ", ".join(repr(m.value) for m in enum_type)
        raise InvalidArgumentError(
            f"{name}: unknown {enum_type.__name__} {value!r}, expected one of {valid}",
            argument=name, position=position, value=value
        ) from None

    if allowed is not None:
        allowed = tuple(allowed)
        if member not in allowed:
            valid = ", ".join(repr(m.value) for m in allowed)
            raise InvalidArgumentError(
                f"{name}: {enum_type.__name__}.{member.name} is not supported here, "
                f"expected one of {valid}",
                argument=name, position=position, value=value
            )

    return member
