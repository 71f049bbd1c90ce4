"""Reindeer maze: the cheapest route from S to E and the tiles on the best routes."""

from collections.abc import Sequence
from enum import Enum
from heapq import heappop, heappush
from itertools import count

Position = tuple[int, int]
Grid = Sequence[Sequence[str]]

_STEP_COST = 1
_TURN_COST = 1000


class Direction(Enum):
    """Headings, valued by their row and column step."""

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    def step(self, pos: Position) -> Position:
        """Return the position one step further in this direction."""
        dr, dc = self.value
        row, col = pos[0] + dr, pos[1] + dc
        if row < 0 or col < 0:
            raise ValueError(f"stepping {self.name} from {pos} leaves the map")
        return row, col


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def parse_maze(text: str) -> list[str]:
    """Split the maze into its rows."""
    return _lines(text)


def _cell(grid: Grid, pos: Position) -> str:
    row, col = pos
    if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
        raise ValueError(f"position {pos} lies outside the maze")
    return grid[row][col]


def _find(grid: Grid, target: str) -> Position:
    for row, cells in enumerate(grid):
        for col, cell in enumerate(cells):
            if cell == target:
                return row, col
    raise ValueError(f"the maze has no {target!r}")


def _move_cost(cost: int, heading: Direction, direction: Direction) -> int:
    if direction is heading:
        return cost + _STEP_COST
    return cost + _STEP_COST + _TURN_COST


def lowest_score(grid: Grid) -> int:
    """Return the cost of the cheapest route from S to E, or 0 if there is none.

    A step costs 1 and any change of heading another 1000; the reindeer starts
    facing east.
    """
    start = _find(grid, "S")
    end = _find(grid, "E")
    costs: dict[Position, int] = {start: 0}
    order = count(1)
    queue: list[tuple[int, int, Position, Direction]] = [(0, 0, start, Direction.EAST)]
    while queue:
        cost, _, pos, heading = heappop(queue)
        if pos == end:
            return cost
        for direction in Direction:
            nxt = direction.step(pos)
            if _cell(grid, nxt) == "#":
                continue
            move_cost = _move_cost(cost, heading, direction)
            if nxt not in costs or move_cost < costs[nxt]:
                costs[nxt] = move_cost
                heappush(queue, (move_cost, next(order), nxt, direction))
    return 0


def best_path_tiles(grid: Grid) -> int:
    """Count the tiles that lie on any of the cheapest routes from S to E."""
    start = _find(grid, "S")
    end = _find(grid, "E")
    costs: dict[Position, int] = {start: 0}
    headings: dict[Position, Direction] = {}
    previous: dict[Position, list[Position]] = {}
    order = count(1)
    queue: list[tuple[int, int, Position, Direction]] = [(0, 0, start, Direction.EAST)]
    while queue:
        cost, _, pos, heading = heappop(queue)
        for direction in Direction:
            nxt = direction.step(pos)
            if _cell(grid, nxt) == "#":
                continue
            move_cost = _move_cost(cost, heading, direction)
            best = costs.get(nxt)
            if best is None or move_cost < best:
                costs[nxt] = move_cost
                previous[nxt] = [pos]
            elif move_cost == best:
                previous.setdefault(nxt, []).append(pos)
            elif (
                move_cost == best + _TURN_COST
                and direction is not headings.get(nxt, Direction.EAST)
            ):
                if _cell(grid, direction.step(nxt)) == "#":
                    continue
                previous.setdefault(nxt, []).append(pos)
            else:
                continue
            headings[nxt] = direction
            heappush(queue, (costs[nxt], next(order), nxt, direction))

    seen = {end}
    stack = [end]
    while stack:
        for before in previous.get(stack.pop(), ()):
            if before not in seen:
                seen.add(before)
                stack.append(before)
    return len(seen)