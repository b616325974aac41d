"""Safe parsing and evaluation of single-variable math expressions.

Expressions are tokenized, parsed into an immutable tree and evaluated by
a pure numeric interpreter. No user text ever reaches ``eval``/``exec``.
"""

from simpsonrule.expression.compiler import (
    CompiledExpression,
    ExpressionCheck,
    check_expression,
    compile_expression,
    evaluate,
)
from simpsonrule.expression.lexer import CONSTANTS, FUNCTIONS
from simpsonrule.expression.parser import parse

__all__ = [
    "CONSTANTS",
    "FUNCTIONS",
    "CompiledExpression",
    "ExpressionCheck",
    "check_expression",
    "compile_expression",
    "evaluate",
    "parse",
]
