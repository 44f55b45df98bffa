"""
Day 15: Warehouse Woes.

A robot (``@``) walks through a warehouse following a list of moves and pushes
any boxes in its way, unless the push would shove something into a wall.
Part two runs the same moves on a map twice as wide where boxes are ``[]``.
"""

import logging
from typing import List, Tuple

from ..core.grid import ARROWS, Point, find
from ..core.parsing import PuzzleInputError, lines

logger = logging.getLogger(__name__)

TITLE = "Warehouse Woes"

_WIDEN = {"#": "##", "O": "[]", ".": "..", "@": "@."}


def read_warehouse(text: str) -> Tuple[List[List[str]], List[Point]]:
    """Split the input at the first blank line into a map and a list of moves."""
    rows = lines(text)
    try:
        split = next(i for i, line in enumerate(rows) if not line.strip())
    except StopIteration:
        split = len(rows)
    grid = [list(line) for line in rows[:split]]
    moves = [ARROWS[c] for line in rows[split + 1:] for c in line if c in ARROWS]
    return grid, moves


def widen(grid: List[List[str]]) -> List[List[str]]:
    return [list("".join(_WIDEN[c] for c in row)) for row in grid]


def push(grid: List[List[str]], robot: Point, move: Point) -> Point:
    """Try to move the robot one step, pushing boxes; return its new position."""
    dx, dy = move
    queue = [robot]
    seen = {robot}
    i = 0
    while i < len(queue):
        x, y = queue[i]
        i += 1
        nx, ny = x + dx, y + dy
        ahead = grid[ny][nx]
        if ahead == "#":
            return robot
        if ahead == "O":
            cells = [(nx, ny)]
        elif ahead == "[":
            cells = [(nx, ny), (nx + 1, ny)]
        elif ahead == "]":
            cells = [(nx, ny), (nx - 1, ny)]
        else:
            cells = []
        for cell in cells:
            if cell not in seen:
                seen.add(cell)
                queue.append(cell)

    moved = {(x, y): grid[y][x] for x, y in queue}
    for x, y in queue:
        grid[y][x] = "."
    for (x, y), c in moved.items():
        grid[y + dy][x + dx] = c
    return robot[0] + dx, robot[1] + dy


def gps_sum(grid: List[List[str]]) -> int:
    return sum(100 * y + x for y, row in enumerate(grid) for x, c in enumerate(row) if c in "O[")


def simulate(grid: List[List[str]], moves: List[Point]) -> int:
    grid = [row[:] for row in grid]
    robot = find(grid, "@")
    if robot is None:
        raise PuzzleInputError("no robot found")
    for move in moves:
        robot = push(grid, robot, move)
    return gps_sum(grid)


def solve(text: str) -> Tuple[int, int]:
    grid, moves = read_warehouse(text)
    logger.debug("Warehouse is %dx%d with %d moves", len(grid[0]) if grid else 0, len(grid), len(moves))
    return simulate(grid, moves), simulate(widen(grid), moves)
