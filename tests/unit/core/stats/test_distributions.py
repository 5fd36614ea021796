"""Tests for the Student-t distribution numerics."""

import logging
import math

import pytest

from rating_ab.core.stats.distributions import (
    beta_continued_fraction,
    ieee_divide,
    incomplete_beta,
    ln_gamma,
    t_cdf,
)


class TestIeeeDivide:
    """Test division with IEEE semantics for zero denominators."""

    def test_regular_division(self) -> None:
        assert ieee_divide(6.0, 3.0) == 2.0

    def test_positive_over_zero(self) -> None:
        assert ieee_divide(1.0, 0.0) == math.inf

    def test_negative_over_zero(self) -> None:
        assert ieee_divide(-1.0, 0.0) == -math.inf

    def test_signed_zero_denominator(self) -> None:
        assert ieee_divide(1.0, -0.0) == -math.inf

    def test_zero_over_zero(self) -> None:
        assert math.isnan(ieee_divide(0.0, 0.0))

    def test_nan_over_zero(self) -> None:
        assert math.isnan(ieee_divide(math.nan, 0.0))


class TestLnGamma:
    """Test the Lanczos log-gamma against the standard library."""

    @pytest.mark.parametrize("z", [0.5, 1.0, 1.5, 2.0, 3.7, 10.0, 50.5, 171.0])
    def test_matches_lgamma(self, z: float) -> None:
        assert ln_gamma(z) == pytest.approx(math.lgamma(z), rel=1e-10, abs=1e-12)

    @pytest.mark.parametrize("z", [0.1, 0.25, 0.49])
    def test_reflection_below_one_half(self, z: float) -> None:
        assert ln_gamma(z) == pytest.approx(math.lgamma(z), rel=1e-10, abs=1e-12)

    @pytest.mark.parametrize("z", [-0.5, -1.5, -2.25])
    def test_negative_arguments_give_log_magnitude(self, z: float) -> None:
        assert ln_gamma(z) == pytest.approx(math.lgamma(z), rel=1e-10, abs=1e-12)

    def test_factorial(self) -> None:
        assert ln_gamma(5.0) == pytest.approx(math.log(24.0))

    def test_pole_at_zero(self) -> None:
        assert ln_gamma(0.0) == math.inf


class TestBetaContinuedFraction:
    """Test Lentz evaluation of the beta continued fraction."""

    def test_uniform_case(self) -> None:
        # For a = b = 1 the fraction equals 1 / (1 - x)
        assert beta_continued_fraction(0.2, 1.0, 1.0) == pytest.approx(1.25)

    def test_non_convergence_returns_estimate_without_raising(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(
            logging.DEBUG, logger="rating_ab.core.stats.distributions"
        ):
            result = beta_continued_fraction(math.nan, 2.0, 3.0)

        assert math.isnan(result)
        assert "not converged" in caplog.text


class TestIncompleteBeta:
    """Test the regularized incomplete beta function."""

    @pytest.mark.parametrize("a,b", [(0.5, 0.5), (1.0, 1.0), (2.0, 5.0), (9.0, 0.5)])
    def test_boundaries_are_exact(self, a: float, b: float) -> None:
        assert incomplete_beta(0.0, a, b) == 0.0
        assert incomplete_beta(1.0, a, b) == 1.0

    @pytest.mark.parametrize("x", [0.2, 0.5, 0.8])
    def test_uniform_distribution(self, x: float) -> None:
        assert incomplete_beta(x, 1.0, 1.0) == pytest.approx(x, abs=1e-9)

    @pytest.mark.parametrize("x", [0.3, 0.9])
    def test_power_law_closed_form(self, x: float) -> None:
        # I_x(a, 1) = x ** a, on both sides of the reflection threshold
        assert incomplete_beta(x, 2.5, 1.0) == pytest.approx(x**2.5, rel=1e-8)

    def test_symmetry(self) -> None:
        left = incomplete_beta(0.3, 2.0, 5.0)
        right = 1 - incomplete_beta(0.7, 5.0, 2.0)
        assert left == pytest.approx(right, abs=1e-10)

    def test_stays_in_unit_interval(self) -> None:
        for i in range(1, 20):
            value = incomplete_beta(i / 20, 3.0, 0.5)
            assert 0.0 <= value <= 1.0


class TestTCdf:
    """Test the Student-t cumulative distribution."""

    @pytest.mark.parametrize("df", [1.0, 2.0, 7.5, 30.0])
    def test_zero_is_median(self, df: float) -> None:
        assert t_cdf(0.0, df) == 0.5

    def test_cauchy_case(self) -> None:
        # df = 1 is the Cauchy distribution: P(T <= 1) = 3/4
        assert t_cdf(1.0, 1.0) == pytest.approx(0.75, abs=1e-6)

    @pytest.mark.parametrize("t", [0.5, 1.0, 2.0, 4.0])
    def test_two_degrees_of_freedom_closed_form(self, t: float) -> None:
        expected = 0.5 + t / (2 * math.sqrt(2 + t * t))
        assert t_cdf(t, 2.0) == pytest.approx(expected, abs=1e-8)

    def test_infinite_t(self) -> None:
        assert t_cdf(math.inf, 18.0) == 1.0

    def test_nan_propagates(self) -> None:
        assert math.isnan(t_cdf(math.nan, 10.0))
        assert math.isnan(t_cdf(2.0, math.nan))

    @pytest.mark.parametrize("df", [1.0, 3.0, 10.0, 18.0, 57.3])
    def test_monotonic_in_t(self, df: float) -> None:
        values = [t_cdf(step * 0.25, df) for step in range(41)]
        for lower, upper in zip(values, values[1:]):
            assert lower <= upper

    def test_realistic_inputs_converge(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(
            logging.DEBUG, logger="rating_ab.core.stats.distributions"
        ):
            for df in (1.0, 2.0, 5.0, 10.0, 30.0, 100.0):
                for t in (0.5, 1.0, 2.0, 3.0, 5.0, 10.0):
                    t_cdf(t, df)

        assert "not converged" not in caplog.text
