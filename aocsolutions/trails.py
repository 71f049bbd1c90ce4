"""Hiking trails: paths climbing one step at a time from height 0 to height 9."""

from collections.abc import Iterator, Sequence
from functools import cache

_DIGITS = frozenset("0123456789")
_PEAK = 9

Grid = Sequence[Sequence[int]]
Position = tuple[int, int]


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def parse_map(text: str) -> list[list[int]]:
    """Parse a grid of single-digit heights."""
    grid = []
    for line in _lines(text):
        bad = next((char for char in line if char not in _DIGITS), None)
        if bad is not None:
            raise ValueError(f"invalid height {bad!r}")
        grid.append([int(char) for char in line])
    return grid


def find_trail_heads(grid: Grid) -> list[Position]:
    """Return the positions of height 0, row by row."""
    return [
        (row, col)
        for row, cells in enumerate(grid)
        for col, value in enumerate(cells)
        if value == 0
    ]


def _inside(grid: Grid, pos: Position) -> bool:
    row, col = pos
    return bool(grid) and 0 <= row < len(grid) and 0 <= col < len(grid[0])


def _uphill(grid: Grid, pos: Position) -> Iterator[Position]:
    row, col = pos
    height, width = len(grid), len(grid[0])
    target = grid[row][col] + 1
    candidates = []
    if col < width - 1:
        candidates.append((row, col + 1))
    if col > 0:
        candidates.append((row, col - 1))
    if row < height - 1:
        candidates.append((row + 1, col))
    if row > 0:
        candidates.append((row - 1, col))
    for r, c in candidates:
        if grid[r][c] == target:
            yield r, c


def trail_score(grid: Grid, start: Position) -> int:
    """Count the distinct height-9 positions reachable from start."""
    if not _inside(grid, start):
        return 0
    peaks: set[Position] = set()
    seen = {start}
    stack = [start]
    while stack:
        pos = stack.pop()
        if grid[pos[0]][pos[1]] == _PEAK:
            peaks.add(pos)
            continue
        for nxt in _uphill(grid, pos):
            if nxt not in seen:
                seen.add(nxt)
                stack.append(nxt)
    return len(peaks)


def trail_rating(grid: Grid, start: Position) -> int:
    """Count the distinct climbing paths from start to any height-9 position."""
    if not _inside(grid, start):
        return 0

    @cache
    def rating(pos: Position) -> int:
        if grid[pos[0]][pos[1]] == _PEAK:
            return 1
        return sum(rating(nxt) for nxt in _uphill(grid, pos))

    return rating(start)


def total_score(grid: Grid) -> int:
    """Sum the scores of all trail heads."""
    return sum(trail_score(grid, head) for head in find_trail_heads(grid))


def total_rating(grid: Grid) -> int:
    """Sum the ratings of all trail heads."""
    return sum(trail_rating(grid, head) for head in find_trail_heads(grid))