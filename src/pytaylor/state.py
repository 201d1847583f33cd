"""Expansion point and active-order flags for a second-order Taylor expansion.

The active orders always form a prefix of ``{0, 1, 2}`` when a state is
reached through :meth:`ExpansionState.create`, :meth:`~ExpansionState.set_point`
and :meth:`~ExpansionState.toggle_order`:

    {}  ->  {0}  ->  {0, 1}  ->  {0, 1, 2}

Every transition returns a new state; instances are never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Tuple

DEFAULT_X0 = 0.5
DEFAULT_Y0 = 0.5

MAX_ORDER = 2

ORDER_LABELS = (
    "Order 0 (Base)",
    "Order 1 (Linear Plane)",
    "Order 2 (Quadratic/Curvature)",
)


def _check_order(order) -> int:
    if isinstance(order, bool) or not isinstance(order, int):
        raise TypeError(f"order must be an int, got {type(order).__name__}")
    if order < 0 or order > MAX_ORDER:
        raise ValueError(f"order {order} out of range [0, {MAX_ORDER}]")
    return order


@dataclass(frozen=True)
class ExpansionState:
    """Expansion point ``(x0, y0)`` and which Taylor orders are shown.

    Parameters
    ----------
    x0, y0 : float
        Expansion point. Not range-checked.
    show_order0, show_order1, show_order2 : bool
        Whether the constant, linear and quadratic terms are active.

    Examples
    --------
    >>> state = ExpansionState.create()
    >>> state.active_orders
    (0,)
    >>> state.toggle_order(2).active_orders
    (0, 1, 2)
    >>> state.toggle_order(0).active_orders
    ()
    """

    x0: float = DEFAULT_X0
    y0: float = DEFAULT_Y0
    show_order0: bool = True
    show_order1: bool = False
    show_order2: bool = False

    @classmethod
    def create(cls) -> "ExpansionState":
        """Return the session-start state: point (0.5, 0.5), order 0 only."""
        return cls()

    @classmethod
    def with_orders(cls, *orders: int, x0: float = DEFAULT_X0,
                    y0: float = DEFAULT_Y0) -> "ExpansionState":
        """Build a state with exactly ``orders`` active.

        No cascading is applied, so the result may not be progressive.
        """
        active = {_check_order(o) for o in orders}
        return cls(x0=x0, y0=y0, show_order0=0 in active,
                   show_order1=1 in active, show_order2=2 in active)

    def set_point(self, x0: float, y0: float) -> "ExpansionState":
        """Return a copy with a new expansion point and the same flags."""
        return replace(self, x0=x0, y0=y0)

    def toggle_order(self, order: int) -> "ExpansionState":
        """Flip one order flag, cascading so the active orders stay a prefix.

        - order 0 off also turns orders 1 and 2 off
        - order 1 on also turns order 0 on; off also turns order 2 off
        - order 2 on also turns orders 0 and 1 on

        Parameters
        ----------
        order : int
            0, 1 or 2.

        Returns
        -------
        ExpansionState
            The new state.

        Raises
        ------
        TypeError
            If ``order`` is not an int.
        ValueError
            If ``order`` is not 0, 1 or 2.
        """
        _check_order(order)
        o0, o1, o2 = self.show_order0, self.show_order1, self.show_order2

        if order == 0:
            o0 = not o0
            if not o0:
                o1 = o2 = False
        elif order == 1:
            o1 = not o1
            if o1:
                o0 = True
            else:
                o2 = False
        else:
            o2 = not o2
            if o2:
                o0 = o1 = True

        return replace(self, show_order0=o0, show_order1=o1, show_order2=o2)

    def is_active(self, order: int) -> bool:
        return self.flags[_check_order(order)]

    @property
    def flags(self) -> Tuple[bool, bool, bool]:
        return (self.show_order0, self.show_order1, self.show_order2)

    @property
    def point(self) -> Tuple[float, float]:
        return (self.x0, self.y0)

    @property
    def active_orders(self) -> Tuple[int, ...]:
        """Active order numbers, ascending."""
        return tuple(order for order, on in enumerate(self.flags) if on)

    def is_progressive(self) -> bool:
        """True if the active orders are one of {}, {0}, {0,1}, {0,1,2}."""
        active = self.active_orders
        return active == tuple(range(len(active)))

    def active_order_labels(self) -> List[str]:
        """Labels of the active orders, as shown to a reader of the plot."""
        return [ORDER_LABELS[order] for order in self.active_orders]
