"""Tests for the standard normal primitives."""

import math
from statistics import NormalDist

import numpy as np
import pytest

from bscalc.normal import cdf, pdf

_nd = NormalDist()


class TestCDF:
    @pytest.mark.parametrize("x", [-3.0, -1.0, -0.25, 0.0, 0.5, 1.96, 4.0])
    def test_matches_stdlib(self, x):
        assert cdf(x) == pytest.approx(_nd.cdf(x), rel=1e-12, abs=1e-15)

    def test_midpoint(self):
        assert cdf(0.0) == 0.5

    def test_symmetry(self):
        for x in (0.1, 1.0, 2.5):
            assert cdf(x) + cdf(-x) == pytest.approx(1.0, abs=1e-15)

    @pytest.mark.parametrize("x", [-40.0, -10.0, 10.0, 40.0])
    def test_tails_finite(self, x):
        v = cdf(x)
        assert not math.isnan(v)
        assert 0.0 <= v <= 1.0

    def test_lower_tail_not_zero_at_ten(self):
        assert 0.0 < cdf(-10.0) < 1e-22

    def test_scalar_returns_float(self):
        assert isinstance(cdf(1.0), float)

    def test_array_in_array_out(self):
        xs = np.array([-1.0, 0.0, 1.0])
        out = cdf(xs)
        assert isinstance(out, np.ndarray)
        np.testing.assert_allclose(out, [_nd.cdf(x) for x in xs], rtol=1e-12)


class TestPDF:
    def test_peak(self):
        assert pdf(0.0) == pytest.approx(1.0 / math.sqrt(2 * math.pi))

    @pytest.mark.parametrize("x", [-2.0, -0.35, 0.35, 3.0])
    def test_closed_form(self, x):
        assert pdf(x) == pytest.approx(math.exp(-0.5 * x * x) / math.sqrt(2 * math.pi))

    def test_even(self):
        assert pdf(1.3) == pdf(-1.3)

    @pytest.mark.parametrize("x", [-40.0, 10.0])
    def test_tails_non_negative(self, x):
        assert pdf(x) >= 0.0

    def test_array(self):
        out = pdf([0.0, 1.0])
        assert out.shape == (2,)
