"""Unit tests for the recursive-descent expression parser."""

import pytest

from simpsonrule.errors import ExpressionFault, InvalidExpression
from simpsonrule.expression.nodes import BinaryOp, Call, Constant, Number, UnaryOp, Variable
from simpsonrule.expression.parser import parse


class TestPrecedence:
    def test_multiplication_binds_tighter_than_addition(self):
        assert str(parse("1 + 2*x")) == "(1 + (2 * x))"

    def test_left_associative_subtraction_and_division(self):
        assert str(parse("8 - 4 - 2")) == "((8 - 4) - 2)"
        assert str(parse("8 / 4 / 2")) == "((8 / 4) / 2)"

    def test_power_is_right_associative(self):
        assert str(parse("2^3^2")) == "(2 ^ (3 ^ 2))"

    def test_unary_minus_applies_after_power(self):
        """-x^2 means -(x^2), as in ordinary math notation."""
        assert str(parse("-x^2")) == "(-(x ^ 2))"

    def test_negative_exponent(self):
        assert str(parse("2^-1")) == "(2 ^ (-1))"

    def test_parentheses_override_precedence(self):
        assert str(parse("(1 + x) * 2")) == "((1 + x) * 2)"


class TestNodes:
    def test_node_types(self):
        tree = parse("pow(x, 2) + PI")
        assert isinstance(tree, BinaryOp)
        assert tree.left == Call("pow", (Variable(), Number(2.0)))
        assert isinstance(tree.right, Constant)

    def test_unary_plus(self):
        assert parse("+x") == UnaryOp("+", Variable())

    def test_has_variable(self):
        assert parse("sin(x) + 1").has_variable
        assert not parse("sin(PI) + 1").has_variable


class TestSyntaxErrors:
    @pytest.mark.parametrize(
        "source",
        [
            "x +* 2",
            "",
            "x +",
            "(x + 1",
            "x + 1)",
            "2x",
            "sin x",
            "sin()",
            "pow(x)",
            "sqrt(x, 2)",
            "x ^ ^ 2",
            "1.2.3",
            ",",
            "x . 2",
        ],
    )
    def test_rejected_as_invalid_syntax(self, source):
        with pytest.raises(InvalidExpression) as exc_info:
            parse(source)
        assert exc_info.value.fault is ExpressionFault.INVALID_SYNTAX
        assert exc_info.value.message.startswith("invalid syntax")

    def test_message_points_at_offending_token(self):
        with pytest.raises(InvalidExpression, match=r"'\*' at position 3"):
            parse("x +* 2")

    def test_arity_message(self):
        with pytest.raises(InvalidExpression, match=r"pow\(\) takes 2 arguments, got 1"):
            parse("pow(x)")
