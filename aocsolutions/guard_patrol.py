"""Guard patrol: walk a guard around obstacles and find placements that trap it."""

from collections.abc import Sequence
from enum import Enum

_OPEN = 0
_WALL = 1
_GUARD = 2
_OTHER = 3

_CELLS = {".": _OPEN, "#": _WALL, "^": _GUARD}

Position = tuple[int, int]
Grid = Sequence[Sequence[int]]


class Direction(Enum):
    """Headings of the guard, valued by their row and column step."""

    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)


_TURN_RIGHT = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}


def parse_map(text: str) -> list[list[int]]:
    """Map '.' to 0, '#' to 1, '^' to 2 and any other character to 3."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [
        [_CELLS.get(char, _OTHER) for char in line.removesuffix("\r")]
        for line in lines
    ]


def _find_guard(grid: Grid) -> Position:
    return next(
        (
            (row, col)
            for row, cells in enumerate(grid)
            for col, cell in enumerate(cells)
            if cell == _GUARD
        ),
        (0, 0),
    )


def _step(pos: Position, direction: Direction) -> Position:
    dr, dc = direction.value
    return pos[0] + dr, pos[1] + dc


def _ahead(grid: Grid, pos: Position, direction: Direction) -> Position | None:
    """Return the next position, or None if it lies outside the grid."""
    row, col = _step(pos, direction)
    if not 0 <= row < len(grid) or not 0 <= col < len(grid[0]):
        return None
    return row, col


def count_walked(grid: Grid) -> int:
    """Count the cells the guard steps onto before leaving the grid.

    On meeting a wall the guard turns right and steps at once in the new
    direction. Stepping off the grid while turning is an error.
    """
    pos = _find_guard(grid)
    direction = Direction.UP
    walked: set[Position] = set()
    while (ahead := _ahead(grid, pos, direction)) is not None:
        if grid[ahead[0]][ahead[1]] == _WALL:
            direction = _TURN_RIGHT[direction]
            pos = _step(pos, direction)
        else:
            pos = ahead
        row, col = pos
        if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
            raise ValueError(f"guard left the grid at {pos} while turning")
        walked.add(pos)
    return len(walked)


def simulate_route(grid: Grid, start: Position) -> bool:
    """Return True if the guard starting at start ends up walking in a loop."""
    turn_points: set[Position] = set()
    pending: Position | None = None
    pos = start
    direction = Direction.UP
    while (ahead := _ahead(grid, pos, direction)) is not None:
        if grid[ahead[0]][ahead[1]] == _WALL:
            if direction is not Direction.UP and pos in turn_points:
                return True
            pending = pos
            direction = _TURN_RIGHT[direction]
        else:
            if pending is not None:
                turn_points.add(pending)
                pending = None
            pos = ahead
    return False


def count_loop_positions(grid: Grid) -> int:
    """Count open cells where one extra wall would trap the guard in a loop."""
    start = _find_guard(grid)
    count = 0
    for row, cells in enumerate(grid):
        for col, cell in enumerate(cells):
            if cell != _OPEN:
                continue
            blocked = [list(line) for line in grid]
            blocked[row][col] = _WALL
            if simulate_route(blocked, start):
                count += 1
    return count