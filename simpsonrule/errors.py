"""Error taxonomy for simpsonrule calculations.

Every failure carries a discriminable ``kind`` plus a human-readable message,
so a caller can render it without inspecting internals. All errors derive
from ``ValueError``: they describe bad input, not broken code.

Hierarchy:
    CalculationError
    ├── ValidationError
    │   ├── InvalidIntervalCount
    │   ├── InvalidBounds
    │   └── InvalidExpression
    └── EvaluationError
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Tag identifying which class of failure ended a calculation."""

    INVALID_INTERVAL_COUNT = "invalid_interval_count"
    INVALID_BOUNDS = "invalid_bounds"
    INVALID_EXPRESSION = "invalid_expression"
    EVALUATION_ERROR = "evaluation_error"


class ExpressionFault(Enum):
    """Why an expression was rejected at compile time."""

    DISALLOWED_CHARACTERS = "disallowed_characters"
    INVALID_SYNTAX = "invalid_syntax"
    EVALUATES_TO_NAN = "evaluates_to_nan"


class CalculationError(ValueError):
    """Base class for every error a calculation can surface."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message}


class ValidationError(CalculationError):
    """Parameters rejected before any sampling took place."""


class InvalidIntervalCount(ValidationError):
    kind = ErrorKind.INVALID_INTERVAL_COUNT

    def __init__(self, n: Any, message: str | None = None):
        self.n = n
        super().__init__(
            message or f"number of intervals n must be an even integer >= 2, got {n!r}"
        )


class InvalidBounds(ValidationError):
    kind = ErrorKind.INVALID_BOUNDS

    def __init__(self, a: float, b: float, message: str | None = None):
        self.a = a
        self.b = b
        super().__init__(
            message or f"upper bound must be greater than lower bound, got a={a}, b={b}"
        )


class InvalidExpression(ValidationError):
    """The expression text could not be turned into a real function of x.

    Attributes:
        source: The offending expression text.
        fault: Which validation layer rejected it.
        detail: Extra context (offending token, position), may be empty.
    """

    kind = ErrorKind.INVALID_EXPRESSION

    _PREFIXES = {
        ExpressionFault.DISALLOWED_CHARACTERS: "contains disallowed characters",
        ExpressionFault.INVALID_SYNTAX: "invalid syntax",
        ExpressionFault.EVALUATES_TO_NAN: "evaluates to NaN",
    }

    def __init__(self, source: str, fault: ExpressionFault, detail: str = ""):
        self.source = source
        self.fault = fault
        self.detail = detail
        prefix = self._PREFIXES[fault]
        super().__init__(f"{prefix}: {detail}" if detail else prefix)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["fault"] = self.fault.value
        return data


class EvaluationError(CalculationError):
    """The integrand produced NaN or an infinity at a required sample point.

    Attributes:
        x: The abscissa where evaluation failed.
        value: The non-finite value that was produced.
        index: Sample index within a run, or None for a standalone evaluation.
    """

    kind = ErrorKind.EVALUATION_ERROR

    def __init__(self, x: float, value: float, index: int | None = None):
        self.x = x
        self.value = value
        self.index = index
        where = f"x = {x:.4f}" if index is None else f"x = {x:.4f} (step i={index})"
        super().__init__(f"invalid function value {value} at {where}")

    def at_step(self, index: int) -> EvaluationError:
        """Return a copy of this error tagged with the sample index."""
        return EvaluationError(self.x, self.value, index=index)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["x"] = self.x
        if self.index is not None:
            data["i"] = self.index
        return data
