"""Text and tabular views of a CalculationResult."""

from __future__ import annotations

import pandas as pd

from simpsonrule.result import STEP_COLUMNS, CalculationResult

# Node roles, keyed by Simpson coefficient.
COEFFICIENT_ROLES = {1: "endpoint", 2: "even", 4: "odd"}


def steps_to_dataframe(result: CalculationResult) -> pd.DataFrame:
    """One row per node, columns i, x, fx, coefficient, term."""
    rows = [step.to_dict() for step in result.steps]
    df = pd.DataFrame(rows, columns=STEP_COLUMNS)
    return df.astype({"i": "int64", "coefficient": "int64"})


def format_report(result: CalculationResult) -> str:
    """Human-readable summary: integral, parameters and the step table."""
    p = result.parameters
    lines = [
        "Simpson's Rule Integration",
        f"  ∫[{p.a}, {p.b}] f(x) dx ≈ {result.value}",
        f"  f(x) = {p.expression}",
        f"  Intervals: {p.n} | Step: h = {result.step_size:.4f}",
        "  Steps:",
        f"    {'i':>4}  {'x':>12}  {'f(x)':>14}  {'coef':>4}  {'term':>14}  role",
    ]
    for s in result.steps:
        lines.append(
            f"    {s.i:>4}  {s.x:>12.4f}  {s.fx:>14.6f}  {s.coefficient:>4}  "
            f"{s.term:>14.6f}  {COEFFICIENT_ROLES[s.coefficient]}"
        )
    total = sum(s.term for s in result.steps)
    lines.append(f"  Sum of terms: {total:.6f}  x  h/3 = {result.step_size / 3:.6g}")
    return "\n".join(lines)
