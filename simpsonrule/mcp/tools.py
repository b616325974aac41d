"""Tool implementations for the MCP server.

These functions can be imported without the mcp SDK installed. The
server.py module wraps them in MCP tool definitions.
"""

from __future__ import annotations

import json
from typing import Any

from simpsonrule.calculator import EXAMPLE_FUNCTIONS, SimpsonCalculator
from simpsonrule.config import CalculatorConfig
from simpsonrule.result import CalculationOutcome


def run_integration(
    a: float,
    b: float,
    n: int,
    expression: str,
    config: CalculatorConfig | None = None,
) -> CalculationOutcome:
    """Integrate ``expression`` over [a, b] with n intervals."""
    return SimpsonCalculator(config).calculate(a, b, n, expression)


def run_expression_check(expression: str, config: CalculatorConfig | None = None) -> dict[str, Any]:
    check = SimpsonCalculator(config).check_expression(expression)
    return {
        "expression": expression,
        "is_valid": check.is_valid,
        "message": check.message,
        "kind": check.kind.value if check.kind is not None else None,
    }


def format_response(outcome: CalculationOutcome) -> str:
    """Format an outcome as JSON with prompt_context and data."""
    if outcome.result is not None:
        context = outcome.result.to_prompt_context()
    else:
        context = f"Calculation failed ({outcome.error.kind.value}): {outcome.error.message}"
    return json.dumps({
        "prompt_context": context,
        "data": outcome.to_dict(),
    }, indent=2, default=str)


FUNCTIONS_INFO = [
    {"name": "sin", "arity": 1, "description": "Sine (radians)"},
    {"name": "cos", "arity": 1, "description": "Cosine (radians)"},
    {"name": "tan", "arity": 1, "description": "Tangent (radians)"},
    {"name": "exp", "arity": 1, "description": "e raised to the argument"},
    {"name": "ln", "arity": 1, "description": "Natural logarithm"},
    {"name": "log", "arity": 1, "description": "Base-10 logarithm"},
    {"name": "sqrt", "arity": 1, "description": "Square root"},
    {"name": "pow", "arity": 2, "description": "pow(base, exponent), same as base^exponent"},
]

CONSTANTS_INFO = [
    {"name": "PI", "value": "3.14159...", "description": "Ratio of circumference to diameter"},
    {"name": "E", "value": "2.71828...", "description": "Euler's number"},
]


def format_functions() -> str:
    """Format the supported grammar as readable text."""
    lines = [
        "## Expression syntax",
        "Variable: x. Operators: + - * / ^ (power, also **). Parentheses for grouping.",
        "",
        "Functions:",
    ]
    for info in FUNCTIONS_INFO:
        args = "x" if info["arity"] == 1 else "a, b"
        lines.append(f"- {info['name']}({args}): {info['description']}")
    lines.append("")
    lines.append("Constants:")
    for info in CONSTANTS_INFO:
        lines.append(f"- {info['name']} = {info['value']}: {info['description']}")
    lines.append("")
    lines.append("Examples: " + ", ".join(example.value for example in EXAMPLE_FUNCTIONS))
    return "\n".join(lines)
