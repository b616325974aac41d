"""Recursive-descent parser for integrand expressions.

Grammar, lowest precedence first::

    expr    := term (('+' | '-') term)*
    term    := unary (('*' | '/') unary)*
    unary   := ('+' | '-') unary | power
    power   := primary ('^' unary)?
    primary := NUMBER | 'x' | CONSTANT | FUNCTION '(' args ')' | '(' expr ')'

Exponentiation is right-associative and binds tighter than unary minus,
so ``-x^2`` is ``-(x^2)`` and ``2^-1`` is ``0.5``.

Evaluation and printing walk the tree recursively, so input is capped at
``MAX_TOKENS`` tokens and ``MAX_NESTING`` levels of parentheses, calls and
signs. Past either limit the text is rejected as invalid syntax instead of
exhausting the interpreter stack.
"""

from __future__ import annotations

from simpsonrule.errors import ExpressionFault, InvalidExpression
from simpsonrule.expression.lexer import FUNCTIONS, Token, TokenType, tokenize
from simpsonrule.expression.nodes import BinaryOp, Call, Constant, Node, Number, UnaryOp, Variable

MAX_TOKENS = 512
MAX_NESTING = 100


class Parser:
    """Builds a Node tree from a token stream. One instance per source string."""

    def __init__(self, source: str):
        self._source = source
        self._tokens = tokenize(source)
        self._pos = 0
        self._depth = 0

        # the END sentinel does not count
        if len(self._tokens) - 1 > MAX_TOKENS:
            raise self._syntax_error(
                f"expression too long ({len(self._tokens) - 1} tokens, limit {MAX_TOKENS})"
            )

    def parse(self) -> Node:
        if self._peek().type is TokenType.END:
            raise self._syntax_error("empty expression")
        node = self._expr()
        token = self._peek()
        if token.type is not TokenType.END:
            raise self._syntax_error(f"unexpected {_describe(token)} at position {token.position}")
        return node

    def _peek(self) -> Token:
        return self._tokens[self._pos]

    def _advance(self) -> Token:
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def _match_operator(self, *ops: str) -> Token | None:
        token = self._peek()
        if token.type is TokenType.OPERATOR and token.text in ops:
            return self._advance()
        return None

    def _expect(self, token_type: TokenType, what: str) -> Token:
        token = self._peek()
        if token.type is not token_type:
            raise self._syntax_error(
                f"expected {what} but found {_describe(token)} at position {token.position}"
            )
        return self._advance()

    def _syntax_error(self, detail: str) -> InvalidExpression:
        return InvalidExpression(self._source, ExpressionFault.INVALID_SYNTAX, detail)

    def _descend(self) -> None:
        self._depth += 1
        if self._depth > MAX_NESTING:
            raise self._syntax_error(f"expression nested too deeply (limit {MAX_NESTING})")

    def _expr(self) -> Node:
        self._descend()
        node = self._term()
        while (op := self._match_operator("+", "-")) is not None:
            node = BinaryOp(op.text, node, self._term())
        self._depth -= 1
        return node

    def _term(self) -> Node:
        node = self._unary()
        while (op := self._match_operator("*", "/")) is not None:
            node = BinaryOp(op.text, node, self._unary())
        return node

    def _unary(self) -> Node:
        self._descend()
        op = self._match_operator("+", "-")
        node = UnaryOp(op.text, self._unary()) if op is not None else self._power()
        self._depth -= 1
        return node

    def _power(self) -> Node:
        base = self._primary()
        if self._match_operator("^") is not None:
            return BinaryOp("^", base, self._unary())
        return base

    def _primary(self) -> Node:
        token = self._peek()

        if token.type is TokenType.NUMBER:
            self._advance()
            return Number(token.value)
        if token.type is TokenType.VARIABLE:
            self._advance()
            return Variable()
        if token.type is TokenType.CONSTANT:
            self._advance()
            return Constant(token.text, token.value)
        if token.type is TokenType.FUNCTION:
            return self._call()
        if token.type is TokenType.LPAREN:
            self._advance()
            node = self._expr()
            self._expect(TokenType.RPAREN, "')'")
            return node

        raise self._syntax_error(
            f"expected a value but found {_describe(token)} at position {token.position}"
        )

    def _call(self) -> Node:
        name_token = self._advance()
        self._expect(TokenType.LPAREN, f"'(' after {name_token.text}")

        args = [self._expr()]
        while self._peek().type is TokenType.COMMA:
            self._advance()
            args.append(self._expr())
        self._expect(TokenType.RPAREN, "')'")

        arity = FUNCTIONS[name_token.text]
        if len(args) != arity:
            raise self._syntax_error(
                f"{name_token.text}() takes {arity} argument{'s' if arity != 1 else ''}, "
                f"got {len(args)}"
            )
        return Call(name_token.text, tuple(args))


def _describe(token: Token) -> str:
    if token.type is TokenType.END:
        return "end of expression"
    return f"{token.text!r}"


def parse(source: str) -> Node:
    """Parse ``source`` into an expression tree.

    Raises:
        InvalidExpression: for disallowed characters or invalid syntax.
    """
    return Parser(source).parse()
