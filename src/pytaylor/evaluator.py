"""Second-order Taylor expansion of a smooth function over a sampling grid.

Around ``(x0, y0)`` with ``dx = x - x0`` and ``dy = y - y0``:

    T(x, y) = f                                        (order 0)
            + fx*dx + fy*dy                            (order 1)
            + 0.5*(fxx*dx² + 2*fxy*dx*dy + fyy*dy²)    (order 2)

Only the orders whose flag is set contribute. The terms are summed
independently of one another; keeping the active orders a prefix of
{0, 1, 2} is the job of :class:`~pytaylor.state.ExpansionState`, not of
the evaluator.

Non-finite values are neither detected nor masked: they propagate through
the arrays following IEEE 754 arithmetic.
"""

from __future__ import annotations

import time
from typing import NamedTuple, Sequence, Tuple

import numpy as np

from pytaylor._formatting import format_expansion
from pytaylor.functions import SmoothFunction
from pytaylor.grid import DEFAULT_GRID, SamplingGrid
from pytaylor.state import ExpansionState


class TaylorCoefficients(NamedTuple):
    """Function value and partial derivatives at the expansion point."""

    f: float
    fx: float
    fy: float
    fxx: float
    fyy: float
    fxy: float


class TaylorSurfaces(NamedTuple):
    """True and approximated surfaces on a shared grid.

    ``z_real[i, j]`` and ``z_approx[i, j]`` are the values at
    ``(xs[j], ys[i])``.
    """

    xs: np.ndarray
    ys: np.ndarray
    z_real: np.ndarray
    z_approx: np.ndarray

    def error(self) -> np.ndarray:
        """Pointwise absolute error ``|z_approx - z_real|``."""
        with np.errstate(over="ignore", invalid="ignore"):
            return np.abs(self.z_approx - self.z_real)

    def max_error(self) -> float:
        """Largest pointwise error; NaN if any cell is NaN."""
        return float(np.max(self.error()))


def _order_terms(coeffs: TaylorCoefficients, dx, dy) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Contribution of each order at displacements ``(dx, dy)``."""
    shape = np.broadcast(dx, dy).shape
    with np.errstate(over="ignore", invalid="ignore"):
        order0 = np.full(shape, coeffs.f, dtype=float)
        order1 = coeffs.fx * dx + coeffs.fy * dy
        order2 = 0.5 * (coeffs.fxx * dx * dx
                        + 2 * coeffs.fxy * dx * dy
                        + coeffs.fyy * dy * dy)
    return order0, np.asarray(order1, dtype=float), np.asarray(order2, dtype=float)


def _accumulate(coeffs: TaylorCoefficients, flags: Sequence[bool], dx, dy) -> np.ndarray:
    """Sum the active-order terms; all-zero when no flag is set."""
    total = np.zeros(np.broadcast(dx, dy).shape)
    with np.errstate(over="ignore", invalid="ignore"):
        for active, term in zip(flags, _order_terms(coeffs, dx, dy)):
            if active:
                total += term
    return total


def _on_grid(values, shape: Tuple[int, ...]) -> np.ndarray:
    """Materialize ``values`` as a fresh float array of ``shape``."""
    return np.array(np.broadcast_to(values, shape), dtype=float)


class TaylorEvaluator:
    """Evaluate Taylor coefficients and surfaces on a fixed grid.

    The evaluator holds no state besides its grid; every call recomputes
    from scratch and returns newly allocated arrays.

    Parameters
    ----------
    grid : SamplingGrid, optional
        Sampling axis used for both x and y. Defaults to 31 points
        spanning [-3, 3] with step 0.2.

    Examples
    --------
    >>> from pytaylor import CATALOG, ExpansionState, TaylorEvaluator
    >>> evaluator = TaylorEvaluator()
    >>> paraboloid = CATALOG.get("paraboloid")
    >>> state = ExpansionState.create().set_point(1.0, 1.0).toggle_order(2)
    >>> surfaces = evaluator.compute_surfaces(paraboloid, state)
    >>> surfaces.z_approx.shape
    (31, 31)
    >>> surfaces.max_error() < 1e-12
    True
    """

    def __init__(self, grid: SamplingGrid = DEFAULT_GRID):
        if not isinstance(grid, SamplingGrid):
            raise TypeError(f"grid must be a SamplingGrid, got {type(grid).__name__}")
        self.grid = grid

    def compute_coefficients(self, function: SmoothFunction, x0: float,
                             y0: float) -> TaylorCoefficients:
        """Evaluate ``function`` and its five partial derivatives at ``(x0, y0)``.

        Parameters
        ----------
        function : SmoothFunction
            Function to expand.
        x0, y0 : float
            Expansion point. Any real values are accepted.

        Returns
        -------
        TaylorCoefficients
            ``(f, fx, fy, fxx, fyy, fxy)``.
        """
        x0, y0 = float(x0), float(y0)
        with np.errstate(all="ignore"):
            return TaylorCoefficients(
                f=float(function.evaluate(x0, y0)),
                fx=float(function.df_dx(x0, y0)),
                fy=float(function.df_dy(x0, y0)),
                fxx=float(function.d2f_dx2(x0, y0)),
                fyy=float(function.d2f_dy2(x0, y0)),
                fxy=float(function.d2f_dxdy(x0, y0)),
            )

    def compute_surfaces(self, function: SmoothFunction, state: ExpansionState,
                         verbose: bool = False) -> TaylorSurfaces:
        """Sample the true surface and its active-term Taylor approximation.

        Parameters
        ----------
        function : SmoothFunction
            Function to sample.
        state : ExpansionState
            Expansion point and active orders. Flags are used as given,
            without enforcing the progressive rule.
        verbose : bool, optional
            If True, print progress and timing. Default is False.

        Returns
        -------
        TaylorSurfaces
            ``xs`` and ``ys`` (the grid axis), ``z_real`` and ``z_approx``,
            both of shape ``(len(ys), len(xs))``. ``z_approx`` is all zeros
            when no order is active.
        """
        start = time.time()
        if verbose:
            print(f"Sampling {function.name} on a {self.grid.num_points}x"
                  f"{self.grid.num_points} grid (orders {list(state.active_orders)})...")

        xs = self.grid.axis()
        ys = self.grid.axis()
        X, Y = self.grid.mesh()

        with np.errstate(all="ignore"):
            z_real = _on_grid(function.evaluate(X, Y), X.shape)

        x0, y0 = float(state.x0), float(state.y0)
        coeffs = self.compute_coefficients(function, x0, y0)
        z_approx = _accumulate(coeffs, state.flags, X - x0, Y - y0)

        if verbose:
            print(f"Surfaces complete in {time.time() - start:.3f}s")

        return TaylorSurfaces(xs=xs, ys=ys, z_real=z_real, z_approx=z_approx)

    def term_surfaces(self, function: SmoothFunction, x0: float,
                      y0: float) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Per-order contributions on the grid, regardless of any flags.

        Returns
        -------
        tuple of ndarray
            ``(order0, order1, order2)``, each of shape ``grid.shape``.
            ``compute_surfaces(...).z_approx`` equals the sum of the
            entries whose order is active.
        """
        x0, y0 = float(x0), float(y0)
        X, Y = self.grid.mesh()
        coeffs = self.compute_coefficients(function, x0, y0)
        return _order_terms(coeffs, X - x0, Y - y0)

    def approximate(self, function: SmoothFunction, state: ExpansionState, x, y):
        """Evaluate the active-term Taylor polynomial at arbitrary points.

        Parameters
        ----------
        function : SmoothFunction
            Function being approximated.
        state : ExpansionState
            Expansion point and active orders.
        x, y : float or array_like
            Evaluation points; broadcast against each other.

        Returns
        -------
        float or ndarray
            Scalar for scalar input, otherwise an array of the broadcast shape.
        """
        x0, y0 = float(state.x0), float(state.y0)
        coeffs = self.compute_coefficients(function, x0, y0)
        dx = np.asarray(x, dtype=float) - x0
        dy = np.asarray(y, dtype=float) - y0
        result = _accumulate(coeffs, state.flags, dx, dy)
        return result[()] if result.ndim == 0 else result

    def expansion_text(self, function: SmoothFunction, state: ExpansionState,
                       decimals: int = 2) -> str:
        """Render the current expansion with numeric coefficients."""
        coeffs = self.compute_coefficients(function, state.x0, state.y0)
        return format_expansion(coeffs, state, decimals=decimals)

    def __repr__(self) -> str:
        return f"TaylorEvaluator(grid={self.grid!r})"

    def __str__(self) -> str:
        g = self.grid
        lines = [
            "TaylorEvaluator (second order, 2D)",
            f"  Axis:        [{g.lo}, {g.hi}], step {g.step}",
            f"  Grid:        {g.num_points} x {g.num_points} "
            f"({g.num_points * g.num_points:,} points)",
        ]
        return "\n".join(lines)


_DEFAULT_EVALUATOR = TaylorEvaluator()


def compute_coefficients(function: SmoothFunction, x0: float, y0: float) -> TaylorCoefficients:
    """:meth:`TaylorEvaluator.compute_coefficients` on the default evaluator."""
    return _DEFAULT_EVALUATOR.compute_coefficients(function, x0, y0)


def compute_surfaces(function: SmoothFunction, state: ExpansionState,
                     verbose: bool = False) -> TaylorSurfaces:
    """:meth:`TaylorEvaluator.compute_surfaces` on the default 31x31 grid."""
    return _DEFAULT_EVALUATOR.compute_surfaces(function, state, verbose=verbose)
