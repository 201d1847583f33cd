"""Text rendering of a Taylor expansion with numeric coefficients."""

from __future__ import annotations

from typing import List


def _fmt(value: float, decimals: int) -> str:
    text = f"{value:.{decimals}f}"
    # "-0.00" -> "0.00"
    if text.startswith("-") and float(text) == 0.0:
        text = text[1:]
    return text


def format_expansion(coeffs, state, decimals: int = 2) -> str:
    """Render the active terms of the expansion as a single line.

    Parameters
    ----------
    coeffs : TaylorCoefficients
        Coefficients at the expansion point.
    state : ExpansionState
        Only the active orders are rendered.
    decimals : int, optional
        Digits after the decimal point. Default is 2.

    Returns
    -------
    str
        E.g. ``"f(x,y) ≈ 0.50 + (2.00)(x-x₀) + (2.00)(y-y₀)"``.
        ``"f(x,y) ≈ 0"`` when no order is active.

    Examples
    --------
    >>> from pytaylor import ExpansionState, SADDLE, compute_coefficients
    >>> c = compute_coefficients(SADDLE, 1.0, 1.0)
    >>> format_expansion(c, ExpansionState.with_orders(0, 1))
    'f(x,y) ≈ 0.00 + (2.00)(x-x₀) + (-2.00)(y-y₀)'
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise TypeError(f"decimals must be an int, got {type(decimals).__name__}")
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    def c(value):
        return _fmt(value, decimals)

    parts: List[str] = []
    if state.show_order0:
        parts.append(c(coeffs.f))
    if state.show_order1:
        parts.append(f"({c(coeffs.fx)})(x-x₀) + ({c(coeffs.fy)})(y-y₀)")
    if state.show_order2:
        parts.append(
            f"0.5[({c(coeffs.fxx)})(x-x₀)² + 2({c(coeffs.fxy)})(x-x₀)(y-y₀) "
            f"+ ({c(coeffs.fyy)})(y-y₀)²]"
        )

    if not parts:
        return "f(x,y) ≈ 0"
    return "f(x,y) ≈ " + " + ".join(parts)
