"""Bridge calibration: equations whose numbers combine, left to right, into the answer."""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import product

_MAX_U64 = 2**64 - 1
_U64 = re.compile(r"\+?[0-9]+")
_CONCAT_DEFAULT = "2"


@dataclass(frozen=True)
class Equation:
    """A test value and the numbers that should combine into it."""

    answer: int
    numbers: tuple[int, ...]


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _parse_u64(field: str) -> int:
    if not _U64.fullmatch(field):
        raise ValueError(f"invalid number {field!r}")
    value = int(field)
    if value > _MAX_U64:
        raise ValueError(f"number {field!r} out of range")
    return value


def parse_equations(text: str) -> list[Equation]:
    """Parse lines of the form 'answer: n1 n2 ...'; numbers are split on single spaces."""
    equations = []
    for line in _lines(text):
        parts = line.split(":")
        if len(parts) < 2:
            raise ValueError(f"missing ':' in line {line!r}")
        numbers = tuple(_parse_u64(field) for field in parts[1].strip().split(" "))
        equations.append(Equation(_parse_u64(parts[0]), numbers))
    return equations


def _split(equation: Equation) -> tuple[int, tuple[int, ...]]:
    if not equation.numbers:
        raise ValueError("an equation needs at least one number")
    return equation.numbers[0], equation.numbers[1:]


def solvable_add_mul(equation: Equation) -> bool:
    """Return True if some choice of + and * between the numbers gives the answer.

    An operation whose result would not fit in 64 unsigned bits is skipped,
    leaving the running total as it was.
    """
    first, rest = _split(equation)
    for operators in product((True, False), repeat=len(rest)):
        total = first
        for add, number in zip(operators, rest):
            result = total + number if add else total * number
            if result <= _MAX_U64:
                total = result
        if total == equation.answer:
            return True
    return False


def to_base3(num: int) -> str:
    """Write a non-negative number in base 3, most significant digit first; 0 gives ''."""
    if num < 0:
        raise ValueError("cannot convert a negative number")
    digits = []
    while num > 0:
        num, remainder = divmod(num, 3)
        digits.append(str(remainder))
    return "".join(reversed(digits))


def solvable_with_concat(equation: Equation) -> bool:
    """Return True if +, * and digit concatenation can combine the numbers into the answer.

    Each counter value from 1 below 3**n is written in base 3 without padding;
    the digit at the position of a number picks its operator (0 add, 1 multiply,
    2 concatenate), and positions beyond the written digits concatenate. An
    overflowing add or multiply stops that attempt; an overflowing
    concatenation is an error.
    """
    first, _ = _split(equation)
    for counter in range(1, 3 ** len(equation.numbers)):
        digits = to_base3(counter)
        total = first
        for pos, number in enumerate(equation.numbers[1:], 1):
            operator = digits[pos] if pos < len(digits) else _CONCAT_DEFAULT
            if operator == "0":
                result = total + number
            elif operator == "1":
                result = total * number
            else:
                total = int(f"{total}{number}")
                if total > _MAX_U64:
                    raise ValueError("concatenated number out of range")
                continue
            if result > _MAX_U64:
                break
            total = result
        if total == equation.answer:
            return True
    return False


def total_add_mul(equations: Iterable[Equation]) -> int:
    """Sum the answers of equations solvable with + and *."""
    return sum(eq.answer for eq in equations if solvable_add_mul(eq))


def total_with_concat(equations: Iterable[Equation]) -> int:
    """Sum the answers of equations solvable with +, * and concatenation."""
    return sum(eq.answer for eq in equations if solvable_with_concat(eq))