"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def make_hermitian(rng):
    """Factory for random n x n Hermitian matrices (real diagonal)."""
    def _make(n, dtype=np.complex128):
        X = rng.standard_normal((n, n)) + 1j * rng.standard_normal((n, n))
        return (X + X.conj().T).astype(dtype)
    return _make


@pytest.fixture
def make_symmetric(rng):
    """Factory for random n x n real symmetric matrices."""
    def _make(n, dtype=np.float64):
        X = rng.standard_normal((n, n))
        return (X + X.T).astype(dtype)
    return _make


@pytest.fixture
def colmajor_buffer():
    """Flatten a matrix column by column, padding columns to length lda."""
    def _flatten(A, lda=None, fill=0.0):
        m, n = A.shape
        lda = m if lda is None else lda
        padded = np.full((lda, n), fill, dtype=A.dtype)
        padded[:m, :] = A
        return padded.ravel(order='F')
    return _flatten
