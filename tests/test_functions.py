"""Tests for SmoothFunction and the built-in examples."""

import dataclasses
import math

import numpy as np
import pytest
from scipy.optimize import approx_fprime

from pytaylor import PARABOLOID, SADDLE, SINE_WAVE
from conftest import ALL_FUNCTIONS, FUNCTION_IDS

SAMPLE_POINTS = [(0.0, 0.0), (0.3, -0.7), (1.2, 0.4), (-2.1, 1.9), (2.8, -2.6)]

EPS = 1e-7
TOL = 1e-5


def _grad(g, x, y):
    """Forward-difference gradient of g(x, y) via scipy."""
    return approx_fprime(np.array([x, y]), lambda p: float(g(p[0], p[1])), EPS)


# ---------------------------------------------------------------------------
# Analytic derivatives agree with finite differences
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("func", ALL_FUNCTIONS, ids=FUNCTION_IDS)
@pytest.mark.parametrize("x,y", SAMPLE_POINTS)
class TestDerivativesMatchFiniteDifferences:

    def test_first_derivatives(self, func, x, y):
        num_fx, num_fy = _grad(func.evaluate, x, y)
        assert abs(func.df_dx(x, y) - num_fx) < TOL
        assert abs(func.df_dy(x, y) - num_fy) < TOL

    def test_second_derivatives_from_df_dx(self, func, x, y):
        num_fxx, num_fxy = _grad(func.df_dx, x, y)
        assert abs(func.d2f_dx2(x, y) - num_fxx) < TOL
        assert abs(func.d2f_dxdy(x, y) - num_fxy) < TOL

    def test_second_derivatives_from_df_dy(self, func, x, y):
        num_fyx, num_fyy = _grad(func.df_dy, x, y)
        assert abs(func.d2f_dy2(x, y) - num_fyy) < TOL
        assert abs(func.d2f_dxdy(x, y) - num_fyx) < TOL


# ---------------------------------------------------------------------------
# Closed forms
# ---------------------------------------------------------------------------

class TestClosedForms:
    def test_paraboloid(self):
        assert PARABOLOID.evaluate(1.5, -2.0) == 1.5 ** 2 + 2.0 ** 2
        assert PARABOLOID.gradient(1.5, -2.0) == (3.0, -4.0)
        np.testing.assert_array_equal(PARABOLOID.hessian(1.5, -2.0), [[2, 0], [0, 2]])

    def test_saddle(self):
        assert SADDLE.evaluate(1.5, -2.0) == 1.5 ** 2 - 2.0 ** 2
        assert SADDLE.gradient(1.5, -2.0) == (3.0, 4.0)
        np.testing.assert_array_equal(SADDLE.hessian(0.1, 0.2), [[2, 0], [0, -2]])

    def test_sine_wave(self):
        x, y = 0.3, 1.1
        assert SINE_WAVE.evaluate(x, y) == pytest.approx(math.sin(x) * math.cos(y))
        assert SINE_WAVE.df_dy(x, y) == pytest.approx(-math.sin(x) * math.sin(y))
        assert SINE_WAVE.d2f_dxdy(x, y) == pytest.approx(-math.cos(x) * math.sin(y))

    def test_call_is_evaluate(self):
        assert SINE_WAVE(0.3, 1.1) == SINE_WAVE.evaluate(0.3, 1.1)


# ---------------------------------------------------------------------------
# Array inputs
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("func", ALL_FUNCTIONS, ids=FUNCTION_IDS)
def test_derivatives_broadcast_over_arrays(func):
    X, Y = np.meshgrid(np.linspace(-1, 1, 4), np.linspace(-2, 2, 3))
    for name in ("evaluate", "df_dx", "df_dy", "d2f_dx2", "d2f_dy2", "d2f_dxdy"):
        values = getattr(func, name)(X, Y)
        assert np.shape(values) == X.shape, name
        # Each cell equals the scalar evaluation
        assert float(values[1, 2]) == pytest.approx(
            float(getattr(func, name)(X[1, 2], Y[1, 2]))
        )


def test_functions_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        PARABOLOID.name = "Bowl"


def test_str_shows_name_and_formula():
    assert str(SADDLE) == "Hyperbolic Paraboloid (Saddle): f(x,y) = x^2 - y^2"
