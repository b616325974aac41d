"""Compile expression text into a real function of x.

Compilation runs both validation layers: the lexer/parser whitelist and a
semantic probe that evaluates the tree once at ``probe_point``. The result
is a ``CompiledExpression`` bound to the exact source it came from.

Example:
    >>> f = compile_expression("x^2 + 3*x - 5")
    >>> evaluate(f, 2.0)
    5.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from simpsonrule.errors import (
    CalculationError,
    ErrorKind,
    EvaluationError,
    ExpressionFault,
    InvalidExpression,
)
from simpsonrule.expression.nodes import Node
from simpsonrule.expression.parser import parse

logger = logging.getLogger(__name__)

DEFAULT_PROBE_POINT = 1.0


@dataclass(frozen=True)
class CompiledExpression:
    """A parsed, probed expression. Calling it returns the raw IEEE value.

    Use ``evaluate()`` to get the finite-or-raise behaviour needed by the
    quadrature engine.
    """

    source: str
    tree: Node = field(repr=False)

    @property
    def is_constant(self) -> bool:
        """True when the expression does not reference x."""
        return not self.tree.has_variable

    @property
    def canonical(self) -> str:
        """Fully parenthesised form of the parsed tree."""
        return str(self.tree)

    def __call__(self, x: float) -> float:
        return self.tree.evaluate(float(x))


def compile_expression(source: str, probe_point: float = DEFAULT_PROBE_POINT) -> CompiledExpression:
    """Compile ``source`` into a ``CompiledExpression``.

    Args:
        source: Untrusted expression text in the variable ``x``.
        probe_point: Where the semantic probe evaluates the expression.

    Returns:
        The compiled expression.

    Raises:
        InvalidExpression: If the text contains disallowed characters, does
            not parse, or evaluates to NaN at the probe point.
    """
    if not isinstance(source, str):
        raise InvalidExpression(
            repr(source), ExpressionFault.INVALID_SYNTAX, "expression must be a string"
        )

    try:
        tree = parse(source.strip())
    except InvalidExpression as e:
        # positions in e.detail stay relative to the trimmed text
        raise InvalidExpression(source, e.fault, e.detail) from None
    compiled = CompiledExpression(source=source, tree=tree)

    probe = compiled(probe_point)
    if math.isnan(probe):
        raise InvalidExpression(
            source, ExpressionFault.EVALUATES_TO_NAN, f"at x = {probe_point:g}"
        )

    logger.debug("Compiled %r as %s", source, compiled.canonical)
    return compiled


def evaluate(compiled: CompiledExpression, x: float) -> float:
    """Evaluate ``compiled`` at ``x``.

    Raises:
        EvaluationError: If the value is NaN or infinite at ``x``.
    """
    value = compiled(x)
    if not math.isfinite(value):
        raise EvaluationError(float(x), value)
    return value


@dataclass(frozen=True)
class ExpressionCheck:
    """Outcome of a non-raising expression check, for live input feedback."""

    is_valid: bool
    message: str | None = None
    kind: ErrorKind | None = None


def check_expression(source: str, probe_point: float = DEFAULT_PROBE_POINT) -> ExpressionCheck:
    """Validate ``source`` without raising.

    Constants get an informational message describing the constant function.
    """
    try:
        compiled = compile_expression(source, probe_point=probe_point)
    except CalculationError as e:
        return ExpressionCheck(is_valid=False, message=e.message, kind=e.kind)

    if compiled.is_constant:
        value = compiled(probe_point)
        return ExpressionCheck(is_valid=True, message=f"Constant function: f(x) = {value:.15g}")
    return ExpressionCheck(is_valid=True)
