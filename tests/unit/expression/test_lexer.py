"""Unit tests for the expression tokenizer."""

import math

import pytest

from simpsonrule.errors import ExpressionFault, InvalidExpression
from simpsonrule.expression.lexer import TokenType, tokenize


def _types(source: str) -> list[TokenType]:
    return [t.type for t in tokenize(source)]


class TestTokenize:
    def test_simple_polynomial(self):
        assert _types("x^2 + 3*x - 5") == [
            TokenType.VARIABLE,
            TokenType.OPERATOR,
            TokenType.NUMBER,
            TokenType.OPERATOR,
            TokenType.NUMBER,
            TokenType.OPERATOR,
            TokenType.VARIABLE,
            TokenType.OPERATOR,
            TokenType.NUMBER,
            TokenType.END,
        ]

    def test_number_forms(self):
        values = [t.value for t in tokenize("12 3.5 .25 4. 2e3 1.5E-2") if t.type is TokenType.NUMBER]
        assert values == [12.0, 3.5, 0.25, 4.0, 2000.0, 0.015]

    def test_trailing_e_is_euler_constant(self):
        """'2*e' keeps e as a constant; the exponent needs digits after it."""
        tokens = tokenize("2*e")
        assert tokens[2].type is TokenType.CONSTANT
        assert tokens[2].value == math.e

    def test_double_star_folds_to_caret(self):
        tokens = tokenize("x**2")
        assert tokens[1].type is TokenType.OPERATOR
        assert tokens[1].text == "^"

    def test_names_are_case_insensitive(self):
        tokens = tokenize("SIN(PI) + Ln(E)")
        assert tokens[0].type is TokenType.FUNCTION
        assert tokens[0].text == "sin"
        assert tokens[2].type is TokenType.CONSTANT
        assert tokens[2].value == math.pi
        assert tokens[5].text == "ln"

    def test_positions_are_recorded(self):
        tokens = tokenize("x + 10")
        assert [t.position for t in tokens] == [0, 2, 4, 6]

    @pytest.mark.parametrize("source", ["x;1", "x & 1", "x % 2", "x = 1", "[x]", "x_1", "'x'", "__import__"])
    def test_disallowed_characters(self, source):
        with pytest.raises(InvalidExpression) as exc_info:
            tokenize(source)
        assert exc_info.value.fault is ExpressionFault.DISALLOWED_CHARACTERS
        assert exc_info.value.message.startswith("contains disallowed characters")

    @pytest.mark.parametrize("source", ["import os", "y + 1", "X", "abs(x)", "x2"])
    def test_unknown_names_are_disallowed(self, source):
        with pytest.raises(InvalidExpression) as exc_info:
            tokenize(source)
        assert exc_info.value.fault is ExpressionFault.DISALLOWED_CHARACTERS
        assert "unknown name" in exc_info.value.message
