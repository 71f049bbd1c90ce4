"""Claw contraption: the cheapest button presses that reach each prize."""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum, auto

PRIZE_OFFSET = 10_000_000_000_000

_I64 = re.compile(r"[+-]?[0-9]+")
_MAX_A_PRESSES = 100
_A_COST = 3
_MIN_TOKENS = 37
_MACHINE_TOKENS = 41
_CHECKED = (7, 12, 21, 26)
_FIELDS = (7, 12, 21, 26, 33, 38)


class TokenType(Enum):
    """Kinds of tokens produced by tokenize."""

    LITERAL = auto()
    COLON = auto()
    PLUS = auto()
    EQUAL = auto()
    COMMA = auto()
    SPACE = auto()
    NEWLINE = auto()


@dataclass(frozen=True)
class Token:
    """A token and the text it was made from."""

    token_type: TokenType
    value: str


@dataclass(frozen=True)
class ClawMachine:
    """Button offsets and prize position of one machine."""

    a_x: int
    a_y: int
    b_x: int
    b_y: int
    prize_x: int
    prize_y: int


_SEPARATORS = {
    ":": TokenType.COLON,
    "+": TokenType.PLUS,
    "=": TokenType.EQUAL,
    ",": TokenType.COMMA,
    " ": TokenType.SPACE,
    "\n": TokenType.NEWLINE,
}


def tokenize(text: str) -> list[Token]:
    """Split text into separators and the literals between them.

    The first character never starts a literal, and whatever follows the last
    separator always ends the list as a literal, empty or not. Empty text or a
    separator as the first character is an error.
    """
    if not text:
        raise ValueError("the input is empty")
    tokens: list[Token] = []
    last = 0
    for i, char in enumerate(text):
        kind = _SEPARATORS.get(char)
        if kind is None:
            continue
        if i == 0:
            raise ValueError("input may not start with a separator")
        if last < i - 1:
            tokens.append(Token(TokenType.LITERAL, text[last + 1:i]))
        tokens.append(Token(kind, char))
        last = i
    tokens.append(Token(TokenType.LITERAL, text[last + 1:]))
    return tokens


def _parse_i64(value: str) -> int:
    value = value.strip()
    if not _I64.fullmatch(value):
        raise ValueError(f"invalid number {value!r}")
    number = int(value)
    if not -(2**63) <= number < 2**63:
        raise ValueError(f"number {value!r} out of range")
    return number


def _token_at(tokens: Sequence[Token], index: int) -> Token:
    if index >= len(tokens):
        raise ValueError("unexpected end of input")
    return tokens[index]


def parse(tokens: Sequence[Token], offset: int = 0) -> list[ClawMachine]:
    """Read the machines from a token stream, adding offset to each prize coordinate."""
    if len(tokens) < _MIN_TOKENS:
        raise ValueError("too little input for a machine")
    machines = []
    i = 0
    while i < len(tokens) - _MIN_TOKENS:
        if all(
            _token_at(tokens, i + k).token_type is TokenType.LITERAL for k in _CHECKED
        ):
            a_x, a_y, b_x, b_y, p_x, p_y = (
                _parse_i64(_token_at(tokens, i + k).value) for k in _FIELDS
            )
            machines.append(ClawMachine(a_x, a_y, b_x, b_y, p_x + offset, p_y + offset))
            i += _MACHINE_TOKENS
        else:
            i += 1
    return machines


def _div(a: int, b: int) -> int:
    """Divide, rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _rem(a: int, b: int) -> int:
    """Remainder of division rounding toward zero."""
    return a - b * _div(a, b)


def min_tokens_search(machine: ClawMachine) -> int | None:
    """Try fewer than 100 presses of A and return the cheapest win, or None.

    When the rest of the X distance is not a whole number of B presses, B is
    taken as pressed zero times.
    """
    limit = min(_div(machine.prize_x, machine.a_x) + 1, _MAX_A_PRESSES)
    best: int | None = None
    for a in range(limit):
        rest = machine.prize_x - a * machine.a_x
        b = _div(rest, machine.b_x) if _rem(rest, machine.b_x) == 0 else 0
        if a * machine.a_y + b * machine.b_y == machine.prize_y:
            cost = a * _A_COST + b
            if best is None or cost < best:
                best = cost
    return best


def min_tokens_exact(machine: ClawMachine) -> int | None:
    """Solve the two press counts exactly and return their cost, or None.

    Buttons that move in parallel make the system singular, which raises
    ZeroDivisionError.
    """
    numerator = machine.prize_x * machine.b_y - machine.prize_y * machine.b_x
    determinant = machine.a_x * machine.b_y - machine.b_x * machine.a_y
    if _rem(numerator, determinant) != 0:
        return None
    a = _div(numerator, determinant)
    rest = machine.prize_x - machine.a_x * a
    if _rem(rest, machine.b_x) != 0:
        return None
    b = _div(rest, machine.b_x)
    return a * _A_COST + b


def total_search(machines: Iterable[ClawMachine]) -> int:
    """Sum the cheapest wins found by searching, skipping machines with none."""
    return sum(cost for m in machines if (cost := min_tokens_search(m)) is not None)


def total_exact(machines: Iterable[ClawMachine]) -> int:
    """Sum the exactly solved costs, skipping machines with no whole solution."""
    return sum(cost for m in machines if (cost := min_tokens_exact(m)) is not None)