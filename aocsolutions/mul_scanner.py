"""Scanning corrupted memory for mul(x,y) instructions, with do() and don't() toggles."""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

_DIGITS = frozenset("0123456789")
_MAX_U32 = 2**32 - 1
_I32 = re.compile(r"[+-]?[0-9]+")


class TokenType(Enum):
    """Kinds of tokens produced by tokenize."""

    LITERAL = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    SPACE = auto()
    COMMA = auto()
    PLUS = auto()
    MINUS = auto()
    EQUALS = auto()
    SEMICOLON = auto()


@dataclass(frozen=True)
class Token:
    """A token and the text it was made from."""

    token_type: TokenType
    value: str


_SEPARATORS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    " ": TokenType.SPACE,
    ",": TokenType.COMMA,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "=": TokenType.EQUALS,
    ";": TokenType.SEMICOLON,
}

_MUL_SHAPE = [
    TokenType.LEFT_PAREN,
    TokenType.LITERAL,
    TokenType.COMMA,
    TokenType.LITERAL,
    TokenType.RIGHT_PAREN,
]


def _parse_u32(digits: str) -> int:
    if not digits:
        raise ValueError("mul operand has no digits")
    value = int(digits)
    if value > _MAX_U32:
        raise ValueError(f"mul operand {digits!r} out of range")
    return value


def _digits_until(text: str, start: int, terminator: str) -> int | None:
    """Return the index of terminator after a run of digits, or None."""
    for pos, char in enumerate(text[start:], start):
        if char in _DIGITS:
            continue
        return pos if char == terminator else None
    return None


def find_mul(substr: str) -> tuple[int, int] | None:
    """Parse a leading mul(x,y) instruction, or return None if it is malformed.

    An operand with no digits is an error.
    """
    if not substr.startswith("mul("):
        return None
    comma = _digits_until(substr, 4, ",")
    if comma is None:
        return None
    close = _digits_until(substr, comma + 1, ")")
    if close is None:
        return None
    return _parse_u32(substr[4:comma]), _parse_u32(substr[comma + 1:close])


def scan_products(text: str) -> list[tuple[int, int]]:
    """Collect the operand pairs of enabled mul instructions, in order."""
    pairs: list[tuple[int, int]] = []
    mul_start = 0
    toggle_start = 0
    enabled = True
    for i, char in enumerate(text):
        if char == "d":
            toggle_start = i
        if char == ")":
            candidate = text[toggle_start:i + 1]
            if candidate.startswith("do()"):
                toggle_start = i + 1
                enabled = True
                continue
            if candidate.startswith("don't()"):
                toggle_start = i + 1
                enabled = False
                continue
        if char == "m":
            mul_start = i
        if char == ")":
            if not enabled:
                mul_start = i + 1
                continue
            operands = find_mul(text[mul_start:i + 1])
            if operands is not None:
                pairs.append(operands)
                mul_start = i + 1
    return pairs


def sum_products(pairs: Iterable[tuple[int, int]]) -> int:
    """Sum the products of operand pairs."""
    return sum(x * y for x, y in pairs)


def tokenize(text: str) -> list[Token]:
    """Split text into separator tokens and the literals between them.

    Line breaks count as spaces. The first character of the text never starts
    a literal, a literal before a minus sign keeps the preceding separator, and
    text after the last separator is dropped.
    """
    cleaned = text.replace("\n", " ").replace("\r", " ")
    tokens: list[Token] = []
    last = 0
    for i, char in enumerate(cleaned):
        kind = _SEPARATORS.get(char)
        if kind is None:
            continue
        if last < i - 1:
            start = last if kind is TokenType.MINUS else last + 1
            tokens.append(Token(TokenType.LITERAL, cleaned[start:i]))
        tokens.append(Token(kind, char))
        last = i
    return tokens


def _parse_i32(value: str) -> int | None:
    if not _I32.fullmatch(value):
        return None
    number = int(value)
    if not -(2**31) <= number < 2**31:
        return None
    return number


def evaluate(tokens: list[Token]) -> int:
    """Sum the enabled mul(x,y) products found in a token stream."""
    result = 0
    i = 0
    enabled = True
    while i + 5 < len(tokens):
        head = tokens[i].value
        is_call = (
            tokens[i + 1].token_type is TokenType.LEFT_PAREN
            and tokens[i + 2].token_type is TokenType.RIGHT_PAREN
        )
        if is_call and head.endswith("do"):
            enabled = True
            i += 3
            continue
        if is_call and head.endswith("don't"):
            enabled = False
            i += 3
            continue
        if not enabled:
            i += 1
            continue
        shape = [token.token_type for token in tokens[i + 1:i + 6]]
        if head.endswith("mul") and shape == _MUL_SHAPE:
            x = _parse_i32(tokens[i + 2].value)
            y = _parse_i32(tokens[i + 4].value)
            if x is not None and y is not None:
                result += x * y
            i += 6
        else:
            i += 1
    return result