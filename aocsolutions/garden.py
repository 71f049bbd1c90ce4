"""Garden groups: fence prices from region areas and their number of straight sides."""

from collections.abc import Iterable, Sequence
from itertools import groupby

Grid = Sequence[Sequence[int]]
Position = tuple[int, int]


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def parse_map(text: str) -> list[list[int]]:
    """Turn each character of each line into its low byte."""
    return [[ord(char) & 0xFF for char in line] for line in _lines(text)]


def _neighbors(grid: Grid, x: int, y: int) -> list[Position]:
    result = []
    if x > 0:
        result.append((x - 1, y))
    if y > 0:
        result.append((x, y - 1))
    if x + 1 < len(grid):
        result.append((x + 1, y))
    if y + 1 < len(grid[0]):
        result.append((x, y + 1))
    return result


def _explore(
    grid: Grid, visited: set[Position], start: Position, target: int
) -> list[Position]:
    stack = [start]
    region: list[Position] = []
    while stack:
        x, y = stack.pop()
        if (x, y) in visited or grid[x][y] != target:
            continue
        visited.add((x, y))
        region.append((x, y))
        stack.extend(_neighbors(grid, x, y))
    return region


def explore_regions(grid: Grid) -> list[list[Position]]:
    """Split the grid into connected regions of equal plants, in row-major order of discovery."""
    visited: set[Position] = set()
    regions = []
    for x, row in enumerate(grid):
        for y in range(len(row)):
            if (x, y) in visited:
                continue
            regions.append(_explore(grid, visited, (x, y), grid[x][y]))
    return regions


def points_to_map(region: Iterable[Position]) -> list[list[bool]]:
    """Draw the region into a boolean grid spanning its bounding box."""
    points = list(region)
    if not points:
        raise ValueError("a region needs at least one position")
    min_x = min(x for x, _ in points)
    max_x = max(x for x, _ in points)
    min_y = min(y for _, y in points)
    max_y = max(y for _, y in points)
    result = [[False] * (max_y - min_y + 1) for _ in range(max_x - min_x + 1)]
    for x, y in points:
        result[x - min_x][y - min_y] = True
    return result


def _top_sides(rows: Sequence[Sequence[bool]]) -> int:
    """Count runs of cells whose upper neighbour lies outside the region."""
    if len(rows[0]) == 1:
        return 1
    count = 0
    previous: Sequence[bool] | None = None
    for row in rows:
        if previous is None:
            exposed = list(row)
        else:
            exposed = [cell and not above for cell, above in zip(row, previous)]
        count += sum(1 for key, _ in groupby(exposed) if key)
        previous = row
    return count


def region_sides(region: Iterable[Position]) -> int:
    """Count the straight fence sides around a region."""
    grid = points_to_map(region)
    columns = [list(column) for column in zip(*grid)]
    return (
        _top_sides(grid)
        + _top_sides(grid[::-1])
        + _top_sides(columns)
        + _top_sides(columns[::-1])
    )


def fence_price(grid: Grid) -> int:
    """Sum, over all regions, the number of sides times the area."""
    return sum(region_sides(region) * len(region) for region in explore_regions(grid))