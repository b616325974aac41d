"""Abstract syntax tree for integrand expressions.

Nodes are immutable and evaluate with IEEE-754 semantics: a domain error
yields NaN and an overflow yields an infinity rather than raising. The
``math`` module raises for most of these cases, so each primitive maps
those exceptions back to the IEEE result. Deciding whether a non-finite
value is acceptable is left to the caller.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from simpsonrule.expression.lexer import VARIABLE

NAN = math.nan
INF = math.inf


def _divide(left: float, right: float) -> float:
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return NAN
        return math.copysign(INF, left) * math.copysign(1.0, right)
    return left / right


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        odd_integer = exponent.is_integer() and int(exponent) % 2 == 1
        return -INF if base < 0 and odd_integer else INF
    except ValueError:
        # math.pow raises for 0 ** negative and negative ** non-integer
        return INF if base == 0.0 else NAN


def _exp(value: float) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return INF


def _logarithm(func: Callable[[float], float]) -> Callable[[float], float]:
    def log(value: float) -> float:
        if value == 0.0:
            return -INF
        if value < 0.0:
            return NAN
        return func(value)

    return log


def _sqrt(value: float) -> float:
    if value < 0.0:
        return NAN
    return math.sqrt(value)


def _periodic(func: Callable[[float], float]) -> Callable[[float], float]:
    def wrapped(value: float) -> float:
        if math.isinf(value):
            return NAN
        return func(value)

    return wrapped


BINARY_OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": _divide,
    "^": _power,
}

# ln is the natural logarithm, log is base 10.
FUNCTION_IMPLS: dict[str, Callable[..., float]] = {
    "sin": _periodic(math.sin),
    "cos": _periodic(math.cos),
    "tan": _periodic(math.tan),
    "exp": _exp,
    "ln": _logarithm(math.log),
    "log": _logarithm(math.log10),
    "sqrt": _sqrt,
    "pow": _power,
}


class Node:
    """Base class for expression tree nodes."""

    def evaluate(self, x: float) -> float:
        raise NotImplementedError

    @property
    def has_variable(self) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class Number(Node):
    value: float

    def evaluate(self, x: float) -> float:
        return self.value

    @property
    def has_variable(self) -> bool:
        return False

    def __str__(self) -> str:
        return repr(self.value) if not self.value.is_integer() else str(int(self.value))


@dataclass(frozen=True)
class Constant(Node):
    name: str
    value: float

    def evaluate(self, x: float) -> float:
        return self.value

    @property
    def has_variable(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.name.upper()


@dataclass(frozen=True)
class Variable(Node):
    def evaluate(self, x: float) -> float:
        return x

    @property
    def has_variable(self) -> bool:
        return True

    def __str__(self) -> str:
        return VARIABLE


@dataclass(frozen=True)
class UnaryOp(Node):
    op: str
    operand: Node

    def evaluate(self, x: float) -> float:
        value = self.operand.evaluate(x)
        return -value if self.op == "-" else value

    @property
    def has_variable(self) -> bool:
        return self.operand.has_variable

    def __str__(self) -> str:
        return f"({self.op}{self.operand})"


@dataclass(frozen=True)
class BinaryOp(Node):
    op: str
    left: Node
    right: Node

    def evaluate(self, x: float) -> float:
        return BINARY_OPERATORS[self.op](self.left.evaluate(x), self.right.evaluate(x))

    @property
    def has_variable(self) -> bool:
        return self.left.has_variable or self.right.has_variable

    def __str__(self) -> str:
        return f"({self.left} {self.op} {self.right})"


@dataclass(frozen=True)
class Call(Node):
    name: str
    args: tuple[Node, ...]

    def evaluate(self, x: float) -> float:
        return FUNCTION_IMPLS[self.name](*(arg.evaluate(x) for arg in self.args))

    @property
    def has_variable(self) -> bool:
        return any(arg.has_variable for arg in self.args)

    def __str__(self) -> str:
        return f"{self.name}({', '.join(str(arg) for arg in self.args)})"
