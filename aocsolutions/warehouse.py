"""Warehouse robot: push rows of boxes around a walled grid."""

from collections.abc import Sequence

_MOVES = {"^": (-1, 0), ">": (0, 1), "v": (1, 0), "<": (0, -1)}

Grid = list[list[str]]
Position = tuple[int, int]


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def parse_warehouse(map_text: str, moves_text: str) -> tuple[Grid, str]:
    """Return the map as rows of characters and the moves with everything else dropped."""
    grid = [list(line) for line in _lines(map_text)]
    moves = "".join(char for char in moves_text if char in _MOVES)
    return grid, moves


def _find_player(grid: Sequence[Sequence[str]]) -> Position:
    for x, row in enumerate(grid):
        for y, cell in enumerate(row):
            if cell == "@":
                return x, y
    raise ValueError("the map has no robot")


def _in_bounds(grid: Sequence[Sequence[str]], pos: Position) -> bool:
    return 0 <= pos[0] < len(grid) and 0 <= pos[1] < len(grid[0])


def _try_move(grid: Grid, pos: Position, direction: Position) -> Position:
    row, col = pos
    dr, dc = direction
    first = (row + dr, col + dc)
    if not _in_bounds(grid, first):
        raise ValueError(f"the robot would leave the map at {first}")
    cell = grid[first[0]][first[1]]
    if cell == "#":
        return pos
    if cell == ".":
        grid[row][col] = "."
        grid[first[0]][first[1]] = "@"
        return first
    end = first
    while grid[end[0]][end[1]] != ".":
        if grid[end[0]][end[1]] == "#":
            return pos
        end = (end[0] + dr, end[1] + dc)
        if not _in_bounds(grid, end):
            return pos
    grid[row][col] = "."
    grid[first[0]][first[1]] = "@"
    grid[end[0]][end[1]] = "O"
    return first


def simulate(grid: Sequence[Sequence[str]], moves: str) -> Grid:
    """Return a copy of the map after the robot has made every move."""
    board = [list(row) for row in grid]
    pos = _find_player(board)
    for move in moves:
        direction = _MOVES.get(move)
        if direction is None:
            raise ValueError(f"invalid move {move!r}")
        pos = _try_move(board, pos, direction)
    return board


def gps_sum(grid: Sequence[Sequence[str]]) -> int:
    """Sum 100 times the row plus the column of every box."""
    return sum(
        100 * x + y
        for x, row in enumerate(grid)
        for y, cell in enumerate(row)
        if cell == "O"
    )