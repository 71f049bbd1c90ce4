"""Resonant collinearity: antinodes produced by pairs of same-frequency antennas."""

from collections import defaultdict
from collections.abc import Sequence
from itertools import permutations

_EMPTY = 0
_HASH = ord("#")

Grid = Sequence[Sequence[int]]
Position = tuple[int, int]


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def parse_map(text: str) -> list[list[int]]:
    """Map '.' to 0 and every other character to its low byte."""
    return [
        [_EMPTY if char == "." else ord(char) & 0xFF for char in line]
        for line in _lines(text)
    ]


def _antennas(grid: Grid) -> dict[int, list[Position]]:
    groups: dict[int, list[Position]] = defaultdict(list)
    for row, cells in enumerate(grid):
        for col, value in enumerate(cells):
            if value != _EMPTY:
                groups[value].append((row, col))
    return groups


def in_bounds(y: int, x: int, height: int, width: int) -> bool:
    """Return True if y lies in [0, height) and x in [0, width)."""
    return 0 <= y < height and 0 <= x < width


def count_antinodes(grid: Grid) -> int:
    """Count cells twice as far from one antenna as from its same-frequency partner.

    Antennas marked '#' are ignored, pairs sharing a row or a column produce
    nothing, and cells holding '#' are never counted.
    """
    if not grid:
        return 0
    height, width = len(grid), len(grid[0])
    marked: set[Position] = set()
    for frequency, positions in _antennas(grid).items():
        if frequency == _HASH:
            continue
        for (i, j), (k, l) in permutations(positions, 2):
            if i == k or j == l:
                continue
            row, col = 2 * i - k, 2 * j - l
            if 0 <= row < height and 0 <= col < width and grid[row][col] != _HASH:
                marked.add((row, col))
    return len(marked)


def count_harmonic_antinodes(grid: Grid) -> int:
    """Count cells in line with any same-frequency pair, plus cells holding '#'.

    Each pair walks from the partner antenna onwards in steps of their
    distance while in_bounds(column, row, height, width) holds; on a grid
    that is not square this can leave the grid, which is an error.
    """
    if not grid:
        return 0
    height, width = len(grid), len(grid[0])
    marked: set[Position] = {
        (row, col)
        for row, cells in enumerate(grid)
        for col, value in enumerate(cells)
        if value == _HASH
    }
    for positions in _antennas(grid).values():
        for (i, j), (k, l) in permutations(positions, 2):
            dx, dy = k - i, l - j
            x, y = k, l
            while in_bounds(y, x, height, width):
                if x >= height or y >= len(grid[x]):
                    raise ValueError(f"antinode {(x, y)} lies outside the grid")
                marked.add((x, y))
                x += dx
                y += dy
    return len(marked)