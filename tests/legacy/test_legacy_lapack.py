"""
Tests for the validating buffer + stride entry points of lassq, lanhe and lansy.

Validates:
    - Results agree with the view-based routines
    - Negative increments
    - Argument errors carry the LAPACK argument position (info = -i)
    - Buffer length errors
    - Warnings for an unreferenced workspace
"""

import warnings

import numpy as np
import pytest

from pynormkit import legacy
from pynormkit.core.exceptions import (
    DimensionError,
    InvalidArgumentError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# lassq
# ═══════════════════════════════════════════════════════════════════════


class TestLassq:

    def test_basic(self):
        scale, sumsq = legacy.lassq(2, np.array([3.0, 4.0]), 1, 0.0, 1.0)
        assert scale * np.sqrt(sumsq) == 5.0

    def test_returns_pair(self):
        result = legacy.lassq(2, np.array([3.0, 4.0]), 1, 0.0, 1.0)
        assert result == (1.0, 25.0)

    def test_strided(self):
        x = np.array([3.0, np.nan, 4.0])
        scale, sumsq = legacy.lassq(2, x, 2, 0.0, 1.0)
        assert scale * np.sqrt(sumsq) == 5.0

    def test_negative_increment(self):
        x = np.array([3.0, np.nan, 4.0])
        scale, sumsq = legacy.lassq(2, x, -2, 0.0, 1.0)
        assert scale * np.sqrt(sumsq) == 5.0

    def test_n_zero_normalizes(self):
        assert legacy.lassq(0, np.zeros(0), 1, 0.0, 5.0) == (1.0, 0.0)

    def test_large(self):
        scale, sumsq = legacy.lassq(2, np.array([1e200, 1e200]), 1, 0.0, 1.0)
        np.testing.assert_allclose(scale * np.sqrt(sumsq), np.sqrt(2.0) * 1e200, rtol=1e-14)

    def test_negative_n(self):
        with pytest.raises(InvalidArgumentError) as excinfo:
            legacy.lassq(-1, np.zeros(2), 1, 0.0, 1.0)
        assert excinfo.value.info == -1

    def test_zero_increment(self):
        with pytest.raises(InvalidArgumentError) as excinfo:
            legacy.lassq(2, np.zeros(2), 0, 0.0, 1.0)
        assert excinfo.value.info == -3

    def test_buffer_too_short(self):
        with pytest.raises(DimensionError, match="too short"):
            legacy.lassq(3, np.zeros(4), 2, 0.0, 1.0)

    def test_integer_buffer_rejected(self):
        with pytest.raises(ValidationError):
            legacy.lassq(2, np.array([3, 4]), 1, 0.0, 1.0)


# ═══════════════════════════════════════════════════════════════════════
# lanhe / lansy
# ═══════════════════════════════════════════════════════════════════════


@pytest.fixture
def hermitian_buffer(make_hermitian, colmajor_buffer):
    H = make_hermitian(4)
    return H, colmajor_buffer(H, lda=6)


class TestNorms:

    @pytest.mark.parametrize("norm, ord_", [('M', None), ('1', 1), ('I', np.inf), ('F', 'fro')])
    @pytest.mark.parametrize("uplo", ['U', 'L'])
    def test_lanhe_matches_numpy(self, hermitian_buffer, norm, ord_, uplo):
        H, buf = hermitian_buffer
        expected = np.abs(H).max() if ord_ is None else np.linalg.norm(H, ord_)
        np.testing.assert_allclose(legacy.lanhe(norm, uplo, 4, buf, 6), expected, rtol=1e-13)

    def test_lansy_real(self, make_symmetric, colmajor_buffer):
        S = make_symmetric(5)
        result = legacy.lansy('F', 'L', 5, colmajor_buffer(S), 5)
        np.testing.assert_allclose(result, np.linalg.norm(S, 'fro'), rtol=1e-13)

    def test_with_workspace(self, hermitian_buffer):
        H, buf = hermitian_buffer
        work = np.empty(4)
        result = legacy.lanhe('1', 'U', 4, buf, 6, work)
        np.testing.assert_allclose(result, np.linalg.norm(H, 1), rtol=1e-13)
        np.testing.assert_allclose(work, np.abs(H).sum(axis=0), rtol=1e-13)

    def test_n_zero(self):
        assert legacy.lanhe('M', 'U', 0, np.zeros(0), 1) == 0.0

    def test_workspace_warning_for_max(self, hermitian_buffer):
        _, buf = hermitian_buffer
        with pytest.warns(UserWarning, match="work is not referenced for Norm.Max"):
            legacy.lanhe('M', 'U', 4, buf, 6, np.empty(4))

    def test_workspace_warning_for_fro(self, hermitian_buffer):
        _, buf = hermitian_buffer
        with pytest.warns(UserWarning, match="lansy: work is not referenced"):
            legacy.lansy('F', 'U', 4, buf, 6, np.empty(4))

    def test_no_warning_without_workspace(self, hermitian_buffer):
        _, buf = hermitian_buffer
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            legacy.lanhe('F', 'U', 4, buf, 6)


class TestNormErrors:

    @pytest.mark.parametrize("norm", ['2', 'X'])
    def test_bad_norm(self, hermitian_buffer, norm):
        _, buf = hermitian_buffer
        with pytest.raises(InvalidArgumentError) as excinfo:
            legacy.lanhe(norm, 'U', 4, buf, 6)
        assert excinfo.value.info == -1
        assert excinfo.value.argument == "norm"

    @pytest.mark.parametrize("uplo", ['G', 'Q'])
    def test_bad_uplo(self, hermitian_buffer, uplo):
        _, buf = hermitian_buffer
        with pytest.raises(InvalidArgumentError) as excinfo:
            legacy.lansy('F', uplo, 4, buf, 6)
        assert excinfo.value.info == -2

    def test_negative_n(self, hermitian_buffer):
        _, buf = hermitian_buffer
        with pytest.raises(InvalidArgumentError) as excinfo:
            legacy.lanhe('F', 'U', -1, buf, 6)
        assert excinfo.value.info == -3

    def test_lda_too_small(self, hermitian_buffer):
        _, buf = hermitian_buffer
        with pytest.raises(InvalidArgumentError) as excinfo:
            legacy.lanhe('F', 'U', 4, buf, 3)
        assert excinfo.value.info == -5
        assert excinfo.value.value == 3

    def test_matrix_buffer_too_short(self):
        with pytest.raises(DimensionError):
            legacy.lanhe('F', 'U', 4, np.zeros(15), 4)

    def test_complex_workspace(self, hermitian_buffer):
        _, buf = hermitian_buffer
        with pytest.raises(ValidationError, match="real buffer"):
            legacy.lanhe('1', 'U', 4, buf, 6, np.empty(4, dtype=np.complex128))

    def test_workspace_too_short(self, hermitian_buffer):
        _, buf = hermitian_buffer
        with pytest.raises(DimensionError):
            legacy.lanhe('I', 'L', 4, buf, 6, np.empty(3))

    def test_list_workspace_rejected(self, hermitian_buffer):
        _, buf = hermitian_buffer
        with pytest.raises(ValidationError, match="work: is written in place"):
            legacy.lanhe('1', 'U', 4, buf, 6, [0.0] * 4)

    def test_read_only_workspace_rejected(self, hermitian_buffer):
        _, buf = hermitian_buffer
        work = np.empty(4)
        work.flags.writeable = False
        with pytest.raises(ValidationError, match="read-only"):
            legacy.lanhe('1', 'U', 4, buf, 6, work)

    def test_read_only_matrix_accepted(self, hermitian_buffer):
        H, buf = hermitian_buffer
        buf.flags.writeable = False
        np.testing.assert_allclose(legacy.lanhe('F', 'U', 4, buf, 6), np.linalg.norm(H, 'fro'), rtol=1e-13)

    def test_two_dimensional_matrix_buffer(self, make_hermitian):
        with pytest.raises(DimensionError, match="flat 1D buffer"):
            legacy.lanhe('F', 'U', 3, make_hermitian(3), 3)
