"""Matplotlib chart of the integrand and its Simpson nodes."""

from __future__ import annotations

import math
from pathlib import Path
from typing import TYPE_CHECKING

from simpsonrule.expression.parser import parse
from simpsonrule.result import CalculationResult

if TYPE_CHECKING:
    from matplotlib.figure import Figure

# Same palette the calculator uses for its step list.
COEFFICIENT_COLORS = {1: "tab:blue", 2: "tab:gray", 4: "goldenrod"}


def _curve(result: CalculationResult, samples: int) -> tuple[list[float], list[float]]:
    p = result.parameters
    tree = parse(p.expression.strip())
    xs = [p.a + (p.b - p.a) * k / (samples - 1) for k in range(samples)]
    ys = []
    for x in xs:
        y = tree.evaluate(x)
        ys.append(y if math.isfinite(y) else math.nan)
    return xs, ys


def plot_calculation(
    result: CalculationResult,
    path: str | Path | None = None,
    samples: int = 400,
) -> Figure:
    """Draw f(x) over [a, b], shade the area and mark each node by coefficient.

    Args:
        result: A successful calculation.
        path: Save the figure here (PNG, 150 dpi) when given.
        samples: Points used to draw the smooth curve.

    Returns:
        The matplotlib Figure. Callers that do not save it should close it.
        The active backend is left alone; headless callers select "Agg"
        themselves.
    """
    import matplotlib.pyplot as plt

    p = result.parameters
    xs, ys = _curve(result, samples)

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(xs, ys, color="black", linewidth=1.5, label=f"f(x) = {p.expression}")
    ax.fill_between(xs, ys, 0.0, alpha=0.15, color="steelblue")

    for coefficient, color in COEFFICIENT_COLORS.items():
        nodes = [s for s in result.steps if s.coefficient == coefficient]
        if nodes:
            ax.scatter(
                [s.x for s in nodes],
                [s.fx for s in nodes],
                color=color,
                zorder=3,
                label=f"weight {coefficient}",
            )

    ax.axhline(0.0, color="black", linewidth=0.5)
    ax.set_xlabel("x")
    ax.set_ylabel("f(x)")
    ax.set_title(f"Simpson's rule, n={p.n}: integral ≈ {result.value}")
    ax.grid(True, alpha=0.2)
    ax.legend()
    fig.tight_layout()

    if path is not None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path, dpi=150)
    return fig
