"""Inverse captcha: sum the digits that match a partner digit in a circular list."""

from collections.abc import Iterable

_DIGITS = frozenset("0123456789")


def _digit(char: str) -> int | None:
    """Return the value of an ASCII decimal digit, or None for anything else."""
    return int(char) if char in _DIGITS else None


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_captchas(text: str) -> list[str]:
    """Split the input into one captcha per line, with surrounding whitespace removed."""
    return [line.strip() for line in _lines(text)]


def _next_matches(captcha: str) -> int:
    if not captcha:
        raise ValueError("a captcha must hold at least one character")
    pairs = list(zip(captcha, captcha[1:]))
    pairs.append((captcha[0], captcha[-1]))
    total = 0
    for first, second in pairs:
        value = _digit(first)
        if value is not None and first == second:
            total += value
    return total


def sum_next_matches(captchas: Iterable[str]) -> int:
    """Sum digits equal to the next digit, the last one wrapping to the first.

    Characters that are not digits never match. An empty captcha is an error.
    """
    return sum(_next_matches(captcha) for captcha in captchas)


def _halfway_matches(captcha: str) -> int:
    half = len(captcha) // 2
    rotated = captcha[half:] + captcha[:half]
    total = 0
    for char, partner in zip(captcha, rotated):
        if char != partner:
            continue
        value = _digit(char)
        if value is None:
            raise ValueError(f"matching character {char!r} is not a digit")
        total += value
    return total


def sum_halfway_matches(captchas: Iterable[str]) -> int:
    """Sum digits equal to the digit halfway around the circular list.

    A matching pair of characters that are not digits is an error.
    """
    return sum(_halfway_matches(captcha) for captcha in captchas)