"""
Strided vector views.

A StridedVector reads a flat caller-owned buffer as a vector: logical
element i lives at ``offset + k * inc`` where k = i for a forward vector
and k = n - 1 - i for a backward one. Nothing is copied and nothing is
checked; indices outside [0, n) are a precondition violation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np
from numpy.typing import NDArray

from pynormkit.core.types import Direction


@dataclass(frozen=True, eq=False)
class StridedVector:
    """
    Non-owning vector view over a flat buffer.

    Attributes:
        buffer: Caller-owned 1D array
        n: Number of logical elements
        inc: Distance between consecutive stored elements (nonzero)
        offset: Buffer position of stored element k = 0
        direction: Forward reads k = i, Backward reads k = n - 1 - i
    """
    buffer: NDArray[Any]
    n: int
    inc: int = 1
    offset: int = 0
    direction: Direction = Direction.Forward

    @property
    def size(self) -> int:
        return self.n

    @property
    def shape(self) -> tuple[int]:
        return (self.n,)

    @property
    def dtype(self) -> np.dtype:
        return self.buffer.dtype

    def index(self, i: int) -> int:
        """Buffer position of logical element i."""
        if self.direction == Direction.Backward:
            i = self.n - 1 - i
        return self.offset + i * self.inc

    def __getitem__(self, i: int) -> Any:
        return self.buffer[self.index(i)]

    def __setitem__(self, i: int, value: Any) -> None:
        self.buffer[self.index(i)] = value

    def __len__(self) -> int:
        return self.n

    def __iter__(self) -> Iterator[Any]:
        for i in range(self.n):
            yield self.buffer[self.index(i)]

    def __repr__(self) -> str:
        return (
            f"StridedVector(n={self.n}, inc={self.inc}, offset={self.offset}, "
            f"direction={Direction(self.direction).name}, dtype={self.dtype})"
        )


def vector(x: NDArray[Any], n: int, inc: int = 1, offset: int = 0) -> StridedVector:
    """Forward vector of n elements of x, inc apart, starting at x[offset]."""
    return StridedVector(x, n, inc, offset, Direction.Forward)


def backward_vector(x: NDArray[Any], n: int, inc: int = 1, offset: int = 0) -> StridedVector:
    """Vector of n elements of x, inc apart, read from the last to the first."""
    return StridedVector(x, n, inc, offset, Direction.Backward)


def size(x: StridedVector) -> int:
    return x.n


def subvector(x: StridedVector, rng: tuple[int, int]) -> StridedVector:
    """
    Logical elements [start, stop) of x as a new view over the same buffer.

    The result keeps the direction of x, so ``subvector(x, (a, b))[i]`` is
    always ``x[a + i]``.
    """
    start, stop = rng
    if x.direction == Direction.Backward:
        offset = x.offset + (x.n - stop) * x.inc
    else:
        offset = x.offset + start * x.inc
    return StridedVector(x.buffer, stop - start, x.inc, offset, x.direction)
