"""Quick start example: expand a 2D function and compare against the true surface."""

from pytaylor import CATALOG, ExpansionState, TaylorEvaluator

evaluator = TaylorEvaluator()
print(evaluator)

func = CATALOG.get("sine_wave")
state = ExpansionState.create().set_point(0.5, 0.5)

# Walk through the orders: {0} -> {0, 1} -> {0, 1, 2}
for order in (None, 1, 2):
    if order is not None:
        state = state.toggle_order(order)
    surfaces = evaluator.compute_surfaces(func, state, verbose=True)
    print(f"  {evaluator.expansion_text(func, state)}")
    print(f"  active: {', '.join(state.active_order_labels())}")
    print(f"  max |approx - f| on grid: {surfaces.max_error():.4f}")

# Accuracy near the expansion point
for h in (0.5, 0.1, 0.01):
    x, y = state.x0 + h, state.y0 + h
    err = abs(evaluator.approximate(func, state, x, y) - func(x, y))
    print(f"h={h:<5} error={err:.2e}")
