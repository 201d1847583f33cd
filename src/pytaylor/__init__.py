"""PyTaylor: second-order Taylor expansions of smooth functions f(x, y).

Provides a fixed :data:`CATALOG` of :class:`SmoothFunction` examples with
closed-form partial derivatives, the :class:`ExpansionState` holding the
expansion point and which orders are shown, and the
:class:`TaylorEvaluator` that samples the true surface and its Taylor
approximation on a fixed grid.

Example
-------
>>> from pytaylor import CATALOG, ExpansionState, compute_surfaces
>>> state = ExpansionState.create().toggle_order(1)
>>> surfaces = compute_surfaces(CATALOG.get("sine_wave"), state)
>>> surfaces.z_real.shape
(31, 31)
"""

from pytaylor._formatting import format_expansion
from pytaylor._version import __version__
from pytaylor.catalog import CATALOG, FunctionCatalog
from pytaylor.evaluator import (
    TaylorCoefficients,
    TaylorEvaluator,
    TaylorSurfaces,
    compute_coefficients,
    compute_surfaces,
)
from pytaylor.functions import PARABOLOID, SADDLE, SINE_WAVE, SmoothFunction
from pytaylor.grid import DEFAULT_GRID, SamplingGrid
from pytaylor.state import ExpansionState

__all__ = [
    "CATALOG",
    "DEFAULT_GRID",
    "ExpansionState",
    "FunctionCatalog",
    "PARABOLOID",
    "SADDLE",
    "SINE_WAVE",
    "SamplingGrid",
    "SmoothFunction",
    "TaylorCoefficients",
    "TaylorEvaluator",
    "TaylorSurfaces",
    "compute_coefficients",
    "compute_surfaces",
    "format_expansion",
    "__version__",
]
