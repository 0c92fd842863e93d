"""
Tests for the scaled sum of squares.

Validates:
    - Reconstruction scale * sqrt(sumsq) against the true 2-norm
    - Overflow and underflow safety in each of Blue's accumulators
    - State normalization on entry
    - NaN and infinity propagation
    - Strided, offset and backward vectors
    - Agreement with reference BLAS nrm2 (via scipy)
"""

import numpy as np
import pytest
from scipy.linalg import blas

from pynormkit.core.tolerances import select_tolerance
from pynormkit.core.traits import abs_real
from pynormkit.lapack import ScaleState, lassq
from pynormkit.views import backward_vector, subvector, vector


def norm2(values, state=None):
    x = np.asarray(values)
    state = ScaleState() if state is None else state
    return lassq(vector(x, x.shape[0]), state).value()


# ═══════════════════════════════════════════════════════════════════════
# Basic reconstruction
# ═══════════════════════════════════════════════════════════════════════


class TestBasic:

    def test_three_four_five(self):
        assert norm2([3.0, 4.0]) == 5.0

    def test_default_state(self):
        state = ScaleState()
        assert state.scale == 0.0
        assert state.sumsq == 1.0
        assert state.value() == 0.0

    def test_updates_in_place(self):
        state = ScaleState()
        result = lassq(vector(np.array([3.0, 4.0]), 2), state)
        assert result is state
        assert state.scale * np.sqrt(state.sumsq) == 5.0

    def test_zeros(self):
        assert norm2(np.zeros(5)) == 0.0

    def test_matches_numpy(self, rng):
        x = rng.standard_normal(200)
        tol = select_tolerance(x.dtype)
        np.testing.assert_allclose(norm2(x), np.linalg.norm(x), rtol=tol.rtol)

    def test_continues_partial_state(self):
        state = ScaleState()
        lassq(vector(np.array([3.0]), 1), state)
        lassq(vector(np.array([4.0]), 1), state)
        assert state.value() == pytest.approx(5.0, rel=1e-15)

    def test_chunking_invariance(self, rng):
        """Splitting the input across calls gives the same norm."""
        x = rng.standard_normal(100) * 10.0 ** rng.integers(-200, 200, 100)
        whole = norm2(x)
        state = ScaleState()
        for start in range(0, 100, 7):
            stop = min(start + 7, 100)
            lassq(vector(x, stop - start, 1, start), state)
        np.testing.assert_allclose(state.value(), whole, rtol=1e-13)


# ═══════════════════════════════════════════════════════════════════════
# Range safety
# ═══════════════════════════════════════════════════════════════════════


class TestRange:
    """Values whose squares leave the representable range."""

    def test_large_values_do_not_overflow(self):
        x = np.array([1e200, 1e200])
        with np.errstate(over='ignore'):
            assert np.isinf(np.sqrt(np.sum(x * x)))
        np.testing.assert_allclose(norm2(x), np.sqrt(2.0) * 1e200, rtol=1e-14)

    def test_near_overflow(self):
        x = np.array([1.5e308, 1.5e308])
        # sqrt(2) * 1.5e308 exceeds the largest double
        assert np.isinf(norm2(x))

    def test_large_below_max(self):
        x = np.array([1.2e308, 0.5e308])
        np.testing.assert_allclose(norm2(x), 1.3e308, rtol=1e-14)

    def test_small_values_do_not_underflow(self):
        x = np.array([3e-200, 4e-200])
        np.testing.assert_allclose(norm2(x), 5e-200, rtol=1e-14)

    def test_subnormal(self):
        x = np.array([3e-320, 4e-320])
        np.testing.assert_allclose(norm2(x), 5e-320, rtol=1e-3)

    def test_small_and_medium_combined(self):
        """1.6e-154 is mid-range, 1.2e-154 falls below the small threshold."""
        x = np.array([1.6e-154, 1.2e-154])
        np.testing.assert_allclose(norm2(x), 2e-154, rtol=1e-14)

    def test_big_absorbs_medium(self):
        x = np.array([1e200, 1.0, 2.0])
        np.testing.assert_allclose(norm2(x), 1e200, rtol=1e-15)

    def test_big_ignores_small(self):
        x = np.array([1e-200, 1e200])
        assert norm2(x) == pytest.approx(1e200, rel=1e-15)

    def test_wide_dynamic_range(self):
        x = np.array([1e-300, 1e-150, 1.0, 1e150, 1e300])
        np.testing.assert_allclose(norm2(x), 1e300, rtol=1e-15)

    def test_large_partial_state(self):
        state = ScaleState(1e200, 1.0)
        assert norm2([1e200], state) == pytest.approx(np.sqrt(2.0) * 1e200, rel=1e-14)

    def test_small_partial_state(self):
        state = ScaleState(3e-200, 1.0)
        assert norm2([4e-200], state) == pytest.approx(5e-200, rel=1e-14)

    def test_float32_keeps_precision(self):
        x = np.array([1e30, 1e30], dtype=np.float32)
        state = ScaleState()
        lassq(vector(x, 2), state)
        result = state.value()
        assert result.dtype == np.float32
        tol = select_tolerance(np.float32)
        np.testing.assert_allclose(result, np.sqrt(2.0) * 1e30, rtol=tol.rtol)


# ═══════════════════════════════════════════════════════════════════════
# State normalization
# ═══════════════════════════════════════════════════════════════════════


class TestNormalization:
    """Degenerate incoming states are normalized even for empty input."""

    def test_zero_scale_becomes_one_zero(self):
        state = lassq(vector(np.zeros(1), 0), ScaleState(0.0, 5.0))
        assert (state.scale, state.sumsq) == (1.0, 0.0)

    def test_zero_sumsq_sets_scale_one(self):
        state = lassq(vector(np.zeros(1), 0), ScaleState(3.0, 0.0))
        assert (state.scale, state.sumsq) == (1.0, 0.0)

    def test_zero_scale_does_not_contribute(self):
        assert norm2([3.0, 4.0], ScaleState(0.0, 1e300)) == 5.0

    def test_empty_keeps_valid_state(self):
        state = lassq(vector(np.zeros(1), 0), ScaleState(2.0, 3.0))
        assert (state.scale, state.sumsq) == (2.0, 3.0)


# ═══════════════════════════════════════════════════════════════════════
# NaN and infinity
# ═══════════════════════════════════════════════════════════════════════


class TestSpecialValues:

    def test_nan_element_poisons(self):
        assert np.isnan(norm2([1.0, np.nan, 2.0]))

    def test_nan_with_big_values(self):
        assert np.isnan(norm2([1e300, np.nan]))

    def test_nan_with_small_values(self):
        assert np.isnan(norm2([1e-300, np.nan]))

    def test_nan_state_is_sticky(self):
        state = ScaleState()
        lassq(vector(np.array([np.nan]), 1), state)
        assert state.is_nan()
        lassq(vector(np.array([1.0, 2.0, 3.0]), 3), state)
        assert state.is_nan()
        assert np.isnan(state.value())

    @pytest.mark.parametrize("scale, sumsq, expected", [
        (0.0, 1.0, False),
        (np.nan, 1.0, True),
        (1.0, np.nan, True),
        (np.float64(2.0), np.float64(np.inf), False),
    ])
    def test_is_nan_checks_both_components(self, scale, sumsq, expected):
        result = ScaleState(scale, sumsq).is_nan()
        assert type(result) is bool
        assert result is expected

    def test_nan_state_returned_untouched(self):
        state = ScaleState(np.nan, 7.0)
        lassq(vector(np.array([1.0]), 1), state)
        assert np.isnan(state.scale)
        assert state.sumsq == 7.0

    def test_infinity(self):
        assert np.isinf(norm2([1.0, np.inf]))

    def test_complex_nan_in_imaginary_part(self):
        x = np.array([complex(np.inf, np.nan)])
        assert np.isnan(norm2(x))


# ═══════════════════════════════════════════════════════════════════════
# Complex input and magnitude functions
# ═══════════════════════════════════════════════════════════════════════


class TestComplex:

    def test_modulus(self):
        x = np.array([3 + 4j, 0 + 12j])
        assert norm2(x) == pytest.approx(13.0, rel=1e-15)

    def test_result_is_real(self):
        assert np.isrealobj(norm2(np.array([3 + 4j])))

    def test_real_parts_only(self):
        x = np.array([3 + 100j, -4 - 7j])
        state = lassq(vector(x, 2), ScaleState(), abs_real)
        assert state.value() == 5.0

    def test_large_complex(self, rng):
        x = (rng.standard_normal(50) + 1j * rng.standard_normal(50)) * 1e250
        np.testing.assert_allclose(norm2(x), np.linalg.norm(x / 1e250) * 1e250, rtol=1e-13)


# ═══════════════════════════════════════════════════════════════════════
# Strided views
# ═══════════════════════════════════════════════════════════════════════


class TestStrided:

    def test_increment(self):
        buf = np.array([3.0, 99.0, 4.0, 99.0])
        assert lassq(vector(buf, 2, 2), ScaleState()).value() == 5.0

    def test_backward_same_as_forward(self, rng):
        buf = rng.standard_normal(30)
        fwd = lassq(vector(buf, 10, 3), ScaleState()).value()
        bwd = lassq(backward_vector(buf, 10, 3), ScaleState()).value()
        np.testing.assert_allclose(bwd, fwd, rtol=1e-15)

    def test_subvector(self):
        buf = np.array([99.0, 3.0, 4.0, 99.0])
        x = subvector(vector(buf, 4), (1, 3))
        assert lassq(x, ScaleState()).value() == 5.0


# ═══════════════════════════════════════════════════════════════════════
# Reference BLAS
# ═══════════════════════════════════════════════════════════════════════


class TestAgainstBLAS:
    """scipy's nrm2 wrappers are the reference implementation."""

    @pytest.mark.parametrize("scale", [1e-300, 1e-160, 1.0, 1e160, 1e300])
    def test_dnrm2(self, rng, scale):
        x = rng.standard_normal(64) * scale
        np.testing.assert_allclose(norm2(x), blas.dnrm2(x), rtol=1e-12)

    def test_dnrm2_strided(self, rng):
        x = rng.standard_normal(60)
        np.testing.assert_allclose(
            lassq(vector(x, 20, 3), ScaleState()).value(),
            blas.dnrm2(x, n=20, incx=3),
            rtol=1e-13,
        )

    def test_dznrm2(self, rng):
        x = rng.standard_normal(40) + 1j * rng.standard_normal(40)
        np.testing.assert_allclose(norm2(x), blas.dznrm2(x), rtol=1e-13)

    def test_snrm2(self, rng):
        x = rng.standard_normal(40).astype(np.float32)
        np.testing.assert_allclose(norm2(x), blas.snrm2(x), rtol=1e-5)
