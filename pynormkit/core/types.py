"""
Option vocabulary shared by the views, BLAS and LAPACK routines.

Every option is a string-valued Enum so callers may pass either the member
(``Norm.Fro``) or its character code (``'F'``). Use ``Norm('F')`` to
convert; ``core.validation.check_option`` does the same with a clear error.
"""

from enum import Enum


class Norm(str, Enum):
    """Matrix norm kind."""
    Max = 'M'
    One = '1'
    Inf = 'I'
    Fro = 'F'
    Two = '2'


class Uplo(str, Enum):
    """Which triangle of a matrix is referenced."""
    Upper = 'U'
    Lower = 'L'
    General = 'G'


class Op(str, Enum):
    """Operation applied to a matrix operand."""
    NoTrans = 'N'
    Trans = 'T'
    ConjTrans = 'C'


class Layout(str, Enum):
    """Dense storage order."""
    ColMajor = 'C'
    RowMajor = 'R'


class Direction(str, Enum):
    """Traversal direction of a strided vector."""
    Forward = 'F'
    Backward = 'B'


__all__ = [
    'Norm',
    'Uplo',
    'Op',
    'Layout',
    'Direction',
]
