"""Wide warehouse robot: push two-cell boxes around a doubled-width grid."""

from collections.abc import Sequence

_WIDE_CELLS = {"#": "##", "O": "[]", ".": "..", "@": "@."}
_VERTICAL = {"^": (-1, 0), "v": (1, 0)}
_HORIZONTAL = {"<": (0, -1), ">": (0, 1)}
_MOVE_CHARS = frozenset("^<v>")

Grid = list[list[str]]
Position = tuple[int, int]


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def parse_wide_warehouse(map_text: str, moves_text: str) -> tuple[Grid, str]:
    """Return the map with every cell doubled in width, and the moves alone.

    Walls become '##', boxes '[]', floor '..' and the robot '@.'. Any other
    map character is an error.
    """
    grid: Grid = []
    for line in _lines(map_text):
        row: list[str] = []
        for char in line:
            wide = _WIDE_CELLS.get(char)
            if wide is None:
                raise ValueError(f"invalid map character {char!r}")
            row.extend(wide)
        grid.append(row)
    moves = "".join(char for char in moves_text if char in _MOVE_CHARS)
    return grid, moves


def _in_bounds(grid: Sequence[Sequence[str]], pos: Position) -> bool:
    return 0 <= pos[0] < len(grid) and 0 <= pos[1] < len(grid[0])


def _cell(grid: Sequence[Sequence[str]], pos: Position) -> str:
    row, col = pos
    if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
        raise ValueError(f"position {pos} lies outside the map")
    return grid[row][col]


def _find_player(grid: Sequence[Sequence[str]]) -> Position:
    for x, row in enumerate(grid):
        for y, cell in enumerate(row):
            if cell == "@":
                return x, y
    raise ValueError("the map has no robot")


def _step_into_floor(grid: Grid, pos: Position, target: Position) -> Position:
    grid[pos[0]][pos[1]] = "."
    grid[target[0]][target[1]] = "@"
    return target


def _move_side(grid: Grid, pos: Position, direction: Position) -> Position:
    row, col = pos
    dr, dc = direction
    first = (row + dr, col + dc)
    cell = _cell(grid, first)
    if cell == "#":
        return pos
    if cell == ".":
        return _step_into_floor(grid, pos, first)

    end = first
    while grid[end[0]][end[1]] != ".":
        if grid[end[0]][end[1]] == "#":
            return pos
        end = (end[0] + dr, end[1] + dc)
        if not _in_bounds(grid, end):
            return pos

    last_was_open = False
    cur = first
    while grid[cur[0]][cur[1]] != ".":
        if grid[cur[0]][cur[1]] == "]":
            grid[cur[0]][cur[1]] = "["
            last_was_open = True
        else:
            grid[cur[0]][cur[1]] = "]"
            last_was_open = False
        cur = (cur[0] + dr, cur[1] + dc)
    grid[cur[0]][cur[1]] = "]" if last_was_open else "["
    grid[first[0]][first[1]] = "@"
    grid[row][col] = "."
    return first


def _box_halves(pos: Position, cell: str) -> dict[Position, str]:
    row, col = pos
    if cell == "[":
        return {pos: "[", (row, col + 1): "]"}
    return {pos: "]", (row, col - 1): "["}


def _move_vertical(grid: Grid, pos: Position, direction: Position) -> Position:
    row, col = pos
    dr, dc = direction
    first = (row + dr, col + dc)
    cell = _cell(grid, first)
    if cell == "#":
        return pos
    if cell == ".":
        return _step_into_floor(grid, pos, first)

    boxes = _box_halves(first, cell)
    grown = True
    while grown:
        grown = False
        found: dict[Position, str] = {}
        for r, c in boxes:
            ahead = (r + dr, c + dc)
            if ahead in boxes:
                continue
            ahead_cell = _cell(grid, ahead)
            if ahead_cell in ("[", "]"):
                found.update(_box_halves(ahead, ahead_cell))
                grown = True
        boxes.update(found)

    if any(_cell(grid, (r + dr, c + dc)) == "#" for r, c in boxes):
        return pos

    for r, c in boxes:
        grid[r][c] = "."
    for (r, c), half in boxes.items():
        grid[r + dr][c + dc] = half
    grid[first[0]][first[1]] = "@"
    grid[row][col] = "."
    return first


def simulate(grid: Sequence[Sequence[str]], moves: str) -> Grid:
    """Return a copy of the wide map after the robot has made every move."""
    board = [list(row) for row in grid]
    pos = _find_player(board)
    for move in moves:
        if move in _VERTICAL:
            pos = _move_vertical(board, pos, _VERTICAL[move])
        elif move in _HORIZONTAL:
            pos = _move_side(board, pos, _HORIZONTAL[move])
        else:
            raise ValueError(f"invalid move {move!r}")
    return board


def gps_sum(grid: Sequence[Sequence[str]]) -> int:
    """Sum 100 times the row plus the column of the left half of every box."""
    return sum(
        100 * x + y
        for x, row in enumerate(grid)
        for y, cell in enumerate(row)
        if cell == "["
    )