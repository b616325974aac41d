"""Value types exchanged with callers of the quadrature engine.

All of them are immutable and created fresh for each calculation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import pandas as pd

    from simpsonrule.errors import CalculationError

STEP_COLUMNS = ["i", "x", "fx", "coefficient", "term"]


@dataclass(frozen=True)
class IntegrationParameters:
    """Inputs for one calculation: integrate ``expression`` over [a, b] with n intervals."""

    a: float
    b: float
    n: int
    expression: str

    @property
    def step_size(self) -> float:
        return (self.b - self.a) / self.n

    def to_dict(self) -> dict[str, Any]:
        return {"a": self.a, "b": self.b, "n": self.n, "expression": self.expression}


@dataclass(frozen=True)
class SampleStep:
    """One Simpson node. Numeric fields hold the rounded display values."""

    i: int
    x: float
    fx: float
    coefficient: int
    term: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "i": self.i,
            "x": self.x,
            "fx": self.fx,
            "coefficient": self.coefficient,
            "term": self.term,
        }


@dataclass(frozen=True)
class CalculationResult:
    """Integral approximation plus the ordered per-node trace."""

    value: float
    steps: tuple[SampleStep, ...]
    parameters: IntegrationParameters

    @property
    def step_size(self) -> float:
        return self.parameters.step_size

    def to_dict(self) -> dict[str, Any]:
        return {
            "value": self.value,
            "step_size": self.step_size,
            "parameters": self.parameters.to_dict(),
            "steps": [step.to_dict() for step in self.steps],
        }

    def to_dataframe(self) -> pd.DataFrame:
        """Trace as a pandas DataFrame with columns i, x, fx, coefficient, term."""
        from simpsonrule.analysis.report import steps_to_dataframe

        return steps_to_dataframe(self)

    def to_prompt_context(self, max_steps: int = 20) -> str:
        """Format the result as compact structured text for AI consumption."""
        p = self.parameters
        lines = [
            "## Simpson's Rule Integration",
            f"f(x) = {p.expression}",
            f"Interval: [{p.a}, {p.b}], n = {p.n}, h = {self.step_size:.6g}",
            f"Result: {self.value}",
            "",
            "| i | x | f(x) | coef | term |",
            "|---|---|------|------|------|",
        ]
        shown = self.steps if len(self.steps) <= max_steps else self.steps[:max_steps]
        for s in shown:
            lines.append(f"| {s.i} | {s.x} | {s.fx} | {s.coefficient} | {s.term} |")
        if len(shown) < len(self.steps):
            lines.append(f"... {len(self.steps) - len(shown)} more steps omitted")
        return "\n".join(lines)


@dataclass(frozen=True)
class CalculationOutcome:
    """What a presentation layer consumes: ``{result, steps, error}``.

    Exactly one of ``result`` and ``error`` is set.
    """

    result: CalculationResult | None = None
    error: CalculationError | None = None
    parameters: IntegrationParameters | None = field(default=None, compare=False)

    def __post_init__(self):
        if (self.result is None) == (self.error is None):
            raise ValueError("CalculationOutcome needs exactly one of result or error")

    @property
    def succeeded(self) -> bool:
        return self.result is not None

    @property
    def value(self) -> float | None:
        return self.result.value if self.result is not None else None

    @property
    def steps(self) -> tuple[SampleStep, ...]:
        return self.result.steps if self.result is not None else ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "result": self.value,
            "steps": [step.to_dict() for step in self.steps],
            "error": self.error.to_dict() if self.error is not None else None,
        }
