"""Stateless facade for presentation layers.

``SimpsonCalculator`` turns every ``CalculationError`` into an explicit
``CalculationOutcome`` so a UI can render ``{result, steps, error}``
without a try/except. It holds no state besides its immutable config, so
a single instance can serve concurrent callers.

Example:
    calculator = SimpsonCalculator()
    outcome = calculator.calculate(0, 1, 4, "x^2")
    if outcome.succeeded:
        print(outcome.value)          # 0.333333
    else:
        print(outcome.error.message)
"""

from __future__ import annotations

from dataclasses import dataclass

from simpsonrule.config import CalculatorConfig
from simpsonrule.errors import CalculationError
from simpsonrule.expression.compiler import ExpressionCheck, check_expression
from simpsonrule.numerics.simpson import integrate
from simpsonrule.result import CalculationOutcome, IntegrationParameters


@dataclass(frozen=True)
class ExampleFunction:
    label: str
    value: str
    description: str


EXAMPLE_FUNCTIONS: tuple[ExampleFunction, ...] = (
    ExampleFunction("x²", "x^2", "Square of x"),
    ExampleFunction("sin(x)", "sin(x)", "Sine of x"),
    ExampleFunction("cos(x)", "cos(x)", "Cosine of x"),
    ExampleFunction("e^x", "exp(x)", "Exponential"),
    ExampleFunction("ln(x)", "ln(x)", "Natural logarithm"),
    ExampleFunction("1/x", "1/x", "Reciprocal"),
    ExampleFunction("sqrt(x)", "sqrt(x)", "Square root"),
    ExampleFunction("50", "50", "Constant 50"),
)


class SimpsonCalculator:
    """Runs Simpson's rule calculations and reports failures as values."""

    def __init__(self, config: CalculatorConfig | None = None):
        self.config = config or CalculatorConfig()

    def calculate(self, a: float, b: float, n: int, expression: str) -> CalculationOutcome:
        params = IntegrationParameters(a=a, b=b, n=n, expression=expression)
        try:
            result = integrate(
                a,
                b,
                n,
                expression,
                probe_point=self.config.probe_point,
                x_decimals=self.config.x_decimals,
                value_decimals=self.config.value_decimals,
            )
        except CalculationError as e:
            return CalculationOutcome(error=e, parameters=params)
        return CalculationOutcome(result=result, parameters=params)

    def calculate_defaults(self) -> CalculationOutcome:
        """Run the calculation the form starts with (x^2 over [0, 1], n=4)."""
        c = self.config
        return self.calculate(c.default_a, c.default_b, c.default_n, c.default_expression)

    def check_expression(self, source: str) -> ExpressionCheck:
        return check_expression(source, probe_point=self.config.probe_point)
