"""Smooth bivariate functions with closed-form partial derivatives.

Each :class:`SmoothFunction` bundles ``f(x, y)`` with its five partial
derivatives up to second order. Derivatives are supplied by hand; nothing
here differentiates symbolically or checks that the supplied derivatives
match ``evaluate``.

All callables accept scalars or numpy arrays and broadcast like ufuncs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Tuple

import numpy as np


def _constant(value: float) -> Callable:
    """Return ``g(x, y) = value`` broadcast to the shape of ``x`` and ``y``."""
    def g(x, y):
        return value + np.zeros(np.broadcast(x, y).shape)[()]
    return g


@dataclass(frozen=True)
class SmoothFunction:
    """A named smooth function f(x, y) with its exact partial derivatives.

    Parameters
    ----------
    id : str
        Stable identifier, unique within a catalog.
    name : str
        Human-readable display name.
    formula : str
        Display formula (LaTeX). Never evaluated.
    evaluate : callable
        ``f(x, y)``.
    df_dx, df_dy : callable
        First partial derivatives.
    d2f_dx2, d2f_dy2, d2f_dxdy : callable
        Second partial derivatives.
    description : str, optional
        One-sentence description for display.

    Examples
    --------
    >>> f = SmoothFunction(
    ...     "plane", "Plane", "f(x,y) = x + y",
    ...     evaluate=lambda x, y: x + y,
    ...     df_dx=_constant(1.0), df_dy=_constant(1.0),
    ...     d2f_dx2=_constant(0.0), d2f_dy2=_constant(0.0),
    ...     d2f_dxdy=_constant(0.0),
    ... )
    >>> float(f(1.0, 2.0))
    3.0
    """

    id: str
    name: str
    formula: str
    evaluate: Callable = field(repr=False)
    df_dx: Callable = field(repr=False)
    df_dy: Callable = field(repr=False)
    d2f_dx2: Callable = field(repr=False)
    d2f_dy2: Callable = field(repr=False)
    d2f_dxdy: Callable = field(repr=False)
    description: str = field(default="", repr=False)

    def __call__(self, x, y):
        return self.evaluate(x, y)

    def gradient(self, x, y) -> Tuple[float, float]:
        """Return ``(df/dx, df/dy)`` at ``(x, y)``."""
        return self.df_dx(x, y), self.df_dy(x, y)

    def hessian(self, x: float, y: float) -> np.ndarray:
        """Return the 2x2 Hessian matrix at a single point ``(x, y)``."""
        fxy = self.d2f_dxdy(x, y)
        return np.array([
            [self.d2f_dx2(x, y), fxy],
            [fxy, self.d2f_dy2(x, y)],
        ], dtype=float)

    def __str__(self) -> str:
        return f"{self.name}: {self.formula}"


# ---------------------------------------------------------------------------
# Built-in examples
# ---------------------------------------------------------------------------

PARABOLOID = SmoothFunction(
    id="paraboloid",
    name="Circular Paraboloid",
    formula="f(x,y) = x^2 + y^2",
    evaluate=lambda x, y: x * x + y * y,
    df_dx=lambda x, y: 2 * x,
    df_dy=lambda x, y: 2 * y,
    d2f_dx2=_constant(2.0),
    d2f_dy2=_constant(2.0),
    d2f_dxdy=_constant(0.0),
    description="A classic bowl shape. Simple curvature, easy to visualize approximation.",
)

SADDLE = SmoothFunction(
    id="saddle",
    name="Hyperbolic Paraboloid (Saddle)",
    formula="f(x,y) = x^2 - y^2",
    evaluate=lambda x, y: x * x - y * y,
    df_dx=lambda x, y: 2 * x,
    df_dy=lambda x, y: -2 * y,
    d2f_dx2=_constant(2.0),
    d2f_dy2=_constant(-2.0),
    d2f_dxdy=_constant(0.0),
    description="Curved up in one direction, down in the other. Shows why mixed terms matter.",
)

SINE_WAVE = SmoothFunction(
    id="sine_wave",
    name="Sine Cosine Wave",
    formula="f(x,y) = \\sin(x) \\cdot \\cos(y)",
    evaluate=lambda x, y: np.sin(x) * np.cos(y),
    df_dx=lambda x, y: np.cos(x) * np.cos(y),
    df_dy=lambda x, y: -np.sin(x) * np.sin(y),
    d2f_dx2=lambda x, y: -np.sin(x) * np.cos(y),
    d2f_dy2=lambda x, y: -np.sin(x) * np.cos(y),
    d2f_dxdy=lambda x, y: -np.cos(x) * np.sin(y),
    description="Complex oscillating surface. Best for seeing local vs global approximation.",
)
