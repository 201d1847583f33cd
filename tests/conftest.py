"""Shared test fixtures for PyTaylor tests."""

import numpy as np
import pytest

from pytaylor import CATALOG, ExpansionState, SamplingGrid, SmoothFunction, TaylorEvaluator


# ---------------------------------------------------------------------------
# Test functions
# ---------------------------------------------------------------------------

ALL_FUNCTIONS = CATALOG.list()
FUNCTION_IDS = [f.id for f in ALL_FUNCTIONS]

# Expansion points inside, on the edge of, and outside the sampling domain
POINTS = [(0.0, 0.0), (0.5, 0.5), (1.0, 1.0), (-1.3, 0.7), (2.0, -2.0), (4.5, -3.5)]

# Every state reachable through toggle_order
PROGRESSIVE_ORDERS = [(), (0,), (0, 1), (0, 1, 2)]


def log_x():
    """log(x): NaN for x < 0, -inf at x = 0."""
    return SmoothFunction(
        id="log_x",
        name="Logarithm",
        formula="f(x,y) = \\log(x)",
        evaluate=lambda x, y: np.log(x) + 0 * y,
        df_dx=lambda x, y: 1 / x + 0 * y,
        df_dy=lambda x, y: 0 * x + 0 * y,
        d2f_dx2=lambda x, y: -1 / (x * x) + 0 * y,
        d2f_dy2=lambda x, y: 0 * x + 0 * y,
        d2f_dxdy=lambda x, y: 0 * x + 0 * y,
    )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="module")
def evaluator():
    """Evaluator on the default 31x31 grid over [-3, 3]."""
    return TaylorEvaluator()


@pytest.fixture(scope="module")
def coarse_evaluator():
    """Evaluator on a 5x5 grid over [-1, 1]."""
    return TaylorEvaluator(SamplingGrid(-1.0, 1.0, 0.5))


@pytest.fixture
def default_state():
    return ExpansionState.create()


@pytest.fixture(params=ALL_FUNCTIONS, ids=FUNCTION_IDS)
def func(request):
    """Each catalog function in turn."""
    return request.param
