"""Fixed sampling axis shared by the x and y directions."""

from __future__ import annotations

import math
import warnings
from typing import Tuple

import numpy as np


class SamplingGrid:
    """Evenly spaced axis ``lo, lo + step, ..., hi`` (both ends included).

    The same axis is used for x and y, so surfaces have shape
    ``(num_points, num_points)``.

    Parameters
    ----------
    lo, hi : float
        Axis bounds, ``lo < hi``.
    step : float
        Spacing between consecutive samples. If it does not divide
        ``hi - lo`` evenly, the nearest whole number of intervals is used
        and a ``UserWarning`` is issued.

    Examples
    --------
    >>> grid = SamplingGrid(-3.0, 3.0, 0.2)
    >>> grid.num_points
    31
    >>> grid.shape
    (31, 31)
    """

    def __init__(self, lo: float = -3.0, hi: float = 3.0, step: float = 0.2):
        if not (math.isfinite(lo) and math.isfinite(hi)):
            raise ValueError(f"Grid bounds must be finite, got [{lo}, {hi}]")
        if lo >= hi:
            raise ValueError(f"Grid bounds must satisfy lo < hi, got [{lo}, {hi}]")
        if not step > 0:
            raise ValueError(f"step must be positive, got {step}")

        intervals = (hi - lo) / step
        n_intervals = max(1, int(round(intervals)))
        if abs(intervals - n_intervals) > 1e-9 * max(1.0, intervals):
            warnings.warn(
                f"step={step} does not divide [{lo}, {hi}] evenly; "
                f"using {n_intervals} intervals of {(hi - lo) / n_intervals:.6g}.",
                UserWarning,
                stacklevel=2,
            )

        self.lo = float(lo)
        self.hi = float(hi)
        self.step = float(step)
        self.num_points = n_intervals + 1

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.num_points, self.num_points)

    def axis(self) -> np.ndarray:
        """Return the sample coordinates as a fresh float64 array."""
        return np.linspace(self.lo, self.hi, self.num_points)

    def mesh(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return ``(X, Y)`` with ``X[i, j] = axis[j]`` and ``Y[i, j] = axis[i]``."""
        axis = self.axis()
        return np.meshgrid(axis, axis, indexing="xy")

    def __eq__(self, other) -> bool:
        if not isinstance(other, SamplingGrid):
            return NotImplemented
        return (self.lo, self.hi, self.num_points) == (other.lo, other.hi, other.num_points)

    def __hash__(self) -> int:
        return hash((self.lo, self.hi, self.num_points))

    def __repr__(self) -> str:
        return (
            f"SamplingGrid(lo={self.lo}, hi={self.hi}, "
            f"step={self.step}, points={self.num_points})"
        )


DEFAULT_GRID = SamplingGrid(-3.0, 3.0, 0.2)
