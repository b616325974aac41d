"""Tokenizer for integrand expressions.

This is the lexical whitelist: the character set is closed (ASCII digits,
letters, whitespace, ``. , ( ) + - * / ^``) and every identifier must be
the variable ``x``, a known function or a known constant. Anything else is
rejected before parsing starts.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from simpsonrule.errors import ExpressionFault, InvalidExpression

VARIABLE = "x"

# name -> arity. Lookup is case-insensitive, as in ``SIN(x)`` or ``Sqrt(x)``.
FUNCTIONS: dict[str, int] = {
    "sin": 1,
    "cos": 1,
    "tan": 1,
    "exp": 1,
    "ln": 1,
    "log": 1,
    "sqrt": 1,
    "pow": 2,
}

CONSTANTS: dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
}

_OPERATOR_CHARS = "+-*/^"
_WHITESPACE = " \t\n\r"


class TokenType(Enum):
    NUMBER = "number"
    VARIABLE = "variable"
    CONSTANT = "constant"
    FUNCTION = "function"
    OPERATOR = "operator"
    LPAREN = "("
    RPAREN = ")"
    COMMA = ","
    END = "end"


@dataclass(frozen=True)
class Token:
    """A lexical token.

    ``text`` is the canonical spelling (lower-cased names, ``**`` folded
    to ``^``); ``position`` is the 0-based offset into the trimmed source.
    """

    type: TokenType
    text: str
    position: int
    value: float | None = None


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def tokenize(source: str) -> list[Token]:
    """Split ``source`` into tokens, ending with a single END token.

    Raises:
        InvalidExpression: DISALLOWED_CHARACTERS for characters outside the
            closed set or unknown identifiers.
    """
    tokens: list[Token] = []
    pos = 0
    length = len(source)

    while pos < length:
        ch = source[pos]

        if ch in _WHITESPACE:
            pos += 1
            continue

        if _is_digit(ch) or (ch == "." and pos + 1 < length and _is_digit(source[pos + 1])):
            end = _scan_number(source, pos)
            text = source[pos:end]
            tokens.append(Token(TokenType.NUMBER, text, pos, float(text)))
            pos = end
            continue

        if _is_letter(ch):
            end = pos
            while end < length and (_is_letter(source[end]) or _is_digit(source[end])):
                end += 1
            tokens.append(_identifier(source, source[pos:end], pos))
            pos = end
            continue

        if ch == "*" and source.startswith("**", pos):
            tokens.append(Token(TokenType.OPERATOR, "^", pos))
            pos += 2
            continue

        if ch in _OPERATOR_CHARS:
            tokens.append(Token(TokenType.OPERATOR, ch, pos))
        elif ch == "(":
            tokens.append(Token(TokenType.LPAREN, ch, pos))
        elif ch == ")":
            tokens.append(Token(TokenType.RPAREN, ch, pos))
        elif ch == ",":
            tokens.append(Token(TokenType.COMMA, ch, pos))
        elif ch == ".":
            raise InvalidExpression(
                source, ExpressionFault.INVALID_SYNTAX, f"stray '.' at position {pos}"
            )
        else:
            raise InvalidExpression(
                source,
                ExpressionFault.DISALLOWED_CHARACTERS,
                f"{ch!r} at position {pos}",
            )
        pos += 1

    tokens.append(Token(TokenType.END, "", length))
    return tokens


def _scan_number(source: str, pos: int) -> int:
    """Return the end offset of the numeric literal starting at ``pos``."""
    length = len(source)
    end = pos
    while end < length and _is_digit(source[end]):
        end += 1
    if end < length and source[end] == ".":
        end += 1
        while end < length and _is_digit(source[end]):
            end += 1

    # Exponent only when digits follow, so "2*e" and "2e" keep e as Euler's number.
    if end < length and source[end] in "eE":
        mark = end + 1
        if mark < length and source[mark] in "+-":
            mark += 1
        if mark < length and _is_digit(source[mark]):
            end = mark
            while end < length and _is_digit(source[end]):
                end += 1
    return end


def _identifier(source: str, name: str, pos: int) -> Token:
    if name == VARIABLE:
        return Token(TokenType.VARIABLE, name, pos)

    lowered = name.lower()
    if lowered in FUNCTIONS:
        return Token(TokenType.FUNCTION, lowered, pos)
    if lowered in CONSTANTS:
        return Token(TokenType.CONSTANT, lowered, pos, CONSTANTS[lowered])

    raise InvalidExpression(
        source,
        ExpressionFault.DISALLOWED_CHARACTERS,
        f"unknown name {name!r} at position {pos}",
    )
