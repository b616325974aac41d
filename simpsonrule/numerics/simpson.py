"""Composite Simpson's rule over a user-supplied expression.

The interval [a, b] is split into n (even) subintervals of width h and the
integral is approximated as::

    h/3 * (f(x0) + 4 f(x1) + 2 f(x2) + ... + 4 f(x_{n-1}) + f(xn))

Every node is recorded in the trace. Terms are summed at full precision;
only the recorded step fields and the reported value are rounded.
"""

from __future__ import annotations

import logging
import math
from numbers import Integral, Real

from simpsonrule.errors import CalculationError, EvaluationError, InvalidBounds, InvalidIntervalCount
from simpsonrule.expression.compiler import (
    DEFAULT_PROBE_POINT,
    CompiledExpression,
    compile_expression,
    evaluate,
)
from simpsonrule.result import CalculationResult, IntegrationParameters, SampleStep

logger = logging.getLogger(__name__)

X_DECIMALS = 4
VALUE_DECIMALS = 6


def simpson_coefficient(i: int, n: int) -> int:
    """Weight of node i: 1 at the endpoints, 4 at odd and 2 at even interior nodes."""
    if i == 0 or i == n:
        return 1
    if i % 2 == 0:
        return 2
    return 4


def validate(
    params: IntegrationParameters,
    probe_point: float = DEFAULT_PROBE_POINT,
) -> CompiledExpression:
    """Check the parameters and compile the expression.

    Checks run in order: interval count, bounds, expression. The first
    failure is raised.

    Args:
        params: The calculation inputs.
        probe_point: Where the compiled expression is probed for NaN.

    Returns:
        The compiled expression, ready to pass to ``run``.

    Raises:
        InvalidIntervalCount: If n is not an even integer >= 2.
        InvalidBounds: If a or b is not finite, or b <= a.
        InvalidExpression: If the expression does not compile.
    """
    n = params.n
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidIntervalCount(n, f"number of intervals n must be an integer, got {n!r}")
    if n < 2:
        raise InvalidIntervalCount(n, f"number of intervals n must be at least 2, got {n}")
    if n % 2 != 0:
        raise InvalidIntervalCount(n, f"number of intervals n must be even, got {n}")

    a, b = params.a, params.b
    if not _is_finite_real(a) or not _is_finite_real(b):
        raise InvalidBounds(a, b, f"bounds must be finite real numbers, got a={a}, b={b}")
    if not b > a:
        raise InvalidBounds(a, b)

    return compile_expression(params.expression, probe_point=probe_point)


def run(
    params: IntegrationParameters,
    compiled: CompiledExpression | None = None,
    x_decimals: int = X_DECIMALS,
    value_decimals: int = VALUE_DECIMALS,
    probe_point: float = DEFAULT_PROBE_POINT,
) -> CalculationResult:
    """Sample the integrand at the n+1 nodes and apply Simpson's rule.

    Assumes ``params`` already passed ``validate``.

    Args:
        params: Validated calculation inputs.
        compiled: The expression compiled from ``params.expression``. Compiled
            here when omitted.
        x_decimals: Decimal places recorded for each abscissa.
        value_decimals: Decimal places recorded for f(x), terms and the result.
        probe_point: Probe used when ``compiled`` is omitted.

    Returns:
        The rounded integral value with its ordered trace.

    Raises:
        EvaluationError: On the first node where f(x) is NaN or infinite,
            tagged with that node's index. No partial trace is returned.
        InvalidExpression: If ``compiled`` is omitted and ``params.expression``
            does not compile.
        ValueError: If ``compiled`` was built from a different source string.
    """
    if compiled is None:
        compiled = compile_expression(params.expression, probe_point=probe_point)
    elif compiled.source != params.expression:
        raise ValueError(
            f"compiled expression {compiled.source!r} does not match "
            f"parameters expression {params.expression!r}"
        )

    a, n = params.a, params.n
    h = params.step_size
    total = 0.0
    steps: list[SampleStep] = []

    for i in range(n + 1):
        x = a + i * h
        try:
            fx = evaluate(compiled, x)
        except EvaluationError as e:
            raise e.at_step(i) from e

        coefficient = simpson_coefficient(i, n)
        term = coefficient * fx
        total += term

        steps.append(
            SampleStep(
                i=i,
                x=round(x, x_decimals),
                fx=round(fx, value_decimals),
                coefficient=coefficient,
                term=round(term, value_decimals),
            )
        )

    value = round(h / 3.0 * total, value_decimals)
    return CalculationResult(value=value, steps=tuple(steps), parameters=params)


def integrate(
    a: float,
    b: float,
    n: int,
    expression: str,
    probe_point: float = DEFAULT_PROBE_POINT,
    x_decimals: int = X_DECIMALS,
    value_decimals: int = VALUE_DECIMALS,
) -> CalculationResult:
    """Validate the inputs, then integrate ``expression`` over [a, b] with n intervals.

    Raises:
        CalculationError: Any subclass from ``validate`` or ``run``.
    """
    params = IntegrationParameters(a=a, b=b, n=n, expression=expression)

    logger.debug("Validating %s", params)
    try:
        compiled = validate(params, probe_point=probe_point)
        logger.debug("Evaluating %d nodes with h=%g", n + 1, params.step_size)
        result = run(params, compiled, x_decimals=x_decimals, value_decimals=value_decimals)
    except CalculationError as e:
        logger.warning(
            "Integration of %r over [%s, %s] failed: %s",
            expression, a, b, e,
            extra={**params.to_dict(), "error_kind": e.kind.value},
        )
        raise

    logger.info(
        "Integrated %r over [%s, %s] with n=%d: %s",
        expression, a, b, n, result.value,
        extra=params.to_dict(),
    )
    return result


def _is_finite_real(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)
