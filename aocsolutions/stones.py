"""Plutonian pebbles: stones that change or split each time you blink."""

import re
from collections.abc import Iterable

_MAX_U64 = 2**64 - 1
_U64 = re.compile(r"\+?[0-9]+")
_MULTIPLIER = 2024


def _parse_u64(field: str) -> int:
    if not _U64.fullmatch(field):
        raise ValueError(f"invalid stone {field!r}")
    value = int(field)
    if value > _MAX_U64:
        raise ValueError(f"stone {field!r} out of range")
    return value


def parse_stones(text: str) -> list[int]:
    """Parse numbers separated by single spaces; any other character is an error."""
    return [_parse_u64(field) for field in text.split(" ")]


def _change(stone: int) -> list[int]:
    if stone == 0:
        return [1]
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return [int(digits[:half]), int(digits[half:])]
    return [stone * _MULTIPLIER]


def blink(stones: Iterable[int]) -> list[int]:
    """Apply one blink: 0 becomes 1, even-length numbers split, others times 2024."""
    return [new for stone in stones for new in _change(stone)]


def _check_blinks(blinks: int) -> None:
    if blinks < 0:
        raise ValueError("the number of blinks cannot be negative")


def simulate(stones: Iterable[int], blinks: int) -> list[int]:
    """Return the row of stones after blinking the given number of times."""
    _check_blinks(blinks)
    current = list(stones)
    for _ in range(blinks):
        current = blink(current)
    return current


def count_stones(stones: Iterable[int], blinks: int) -> int:
    """Count the stones after the given number of blinks without building the row."""
    _check_blinks(blinks)
    memo: dict[tuple[int, int], int] = {}

    def count(stone: int, remaining: int) -> int:
        if remaining == 0:
            return 1
        key = (stone, remaining)
        if key not in memo:
            memo[key] = sum(count(new, remaining - 1) for new in _change(stone))
        return memo[key]

    return sum(count(stone, blinks) for stone in stones)