"""Two lists of location ids: their total distance and similarity score."""

import re
from collections import Counter
from collections.abc import Iterable
from typing import TextIO

_INTEGER = re.compile(r"[+-]?[0-9]+")


def read_lines(stream: TextIO) -> list[str]:
    """Read lines from a stream until an empty line or the end of input."""
    lines = []
    for raw in stream:
        content = raw.removesuffix("\n").removesuffix("\r")
        if not content:
            break
        lines.append(content)
    return lines


def _parse_int(field: str) -> int:
    if not _INTEGER.fullmatch(field):
        raise ValueError(f"invalid number {field!r}")
    return int(field)


def parse_pairs(lines: Iterable[str]) -> tuple[list[int], list[int]]:
    """Split lines of two whitespace separated numbers into a left and a right list."""
    left: list[int] = []
    right: list[int] = []
    for line in lines:
        fields = line.split()
        if len(fields) < 2:
            raise ValueError(f"expected two numbers in line {line!r}")
        left.append(_parse_int(fields[0]))
        right.append(_parse_int(fields[1]))
    return left, right


def total_difference(left: Iterable[int], right: Iterable[int]) -> int:
    """Sum the distances between the lists once both are sorted."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right), strict=True))


def similarity_score(left: Iterable[int], right: Iterable[int]) -> int:
    """Sum each left value times the number of times it occurs in the right list."""
    counts = Counter(right)
    return sum(value * counts[value] for value in left)