"""
Day 6: Guard Gallivant.

A guard starts at one of ``^ > v <`` facing that way. It walks forward and
turns right whenever the cell ahead is an obstacle (``#``), until leaving the
map. Part one counts distinct visited positions; part two counts the
single-obstruction placements that trap the guard in a loop.
"""

import logging
from typing import List, Set, Tuple

from ..core.grid import ARROWS, Point, find, in_bounds, turn_right
from ..core.parsing import PuzzleInputError, read_grid

logger = logging.getLogger(__name__)

TITLE = "Guard Gallivant"


def _blocked(grid: List[List[str]], x: int, y: int, obstruction=None) -> bool:
    return grid[y][x] == "#" or (x, y) == obstruction


def walk(grid: List[List[str]], start: Point, direction: Point) -> Set[Point]:
    """Return every position the guard visits before leaving the map.

    Raises PuzzleInputError if the guard never leaves.
    """
    (x, y), (dx, dy) = start, direction
    visited = {start}
    seen = set()
    while (x, y, dx, dy) not in seen:
        seen.add((x, y, dx, dy))
        nx, ny = x + dx, y + dy
        if not in_bounds(grid, nx, ny):
            return visited
        if _blocked(grid, nx, ny):
            dx, dy = turn_right((dx, dy))
        else:
            x, y = nx, ny
            visited.add((x, y))
    raise PuzzleInputError("loop")


def loops(grid: List[List[str]], pos: Point, direction: Point, obstruction: Point) -> bool:
    """Return True if the guard, resuming from *pos*, never leaves the map."""
    (x, y), (dx, dy) = pos, direction
    seen = {(x, y, dx, dy)}
    while True:
        nx, ny = x + dx, y + dy
        if not in_bounds(grid, nx, ny):
            return False
        if _blocked(grid, nx, ny, obstruction):
            dx, dy = turn_right((dx, dy))
        else:
            x, y = nx, ny
        state = (x, y, dx, dy)
        if state in seen:
            return True
        seen.add(state)


def count_loop_obstructions(grid: List[List[str]], start: Point, direction: Point) -> int:
    # An obstruction can only be placed on a cell the guard has not reached
    # yet, otherwise the path leading to the current state would differ.
    (x, y), (dx, dy) = start, direction
    tried = {start}
    count = 0
    while True:
        nx, ny = x + dx, y + dy
        if not in_bounds(grid, nx, ny):
            return count
        if _blocked(grid, nx, ny):
            dx, dy = turn_right((dx, dy))
            continue
        if (nx, ny) not in tried:
            tried.add((nx, ny))
            if loops(grid, (x, y), (dx, dy), (nx, ny)):
                count += 1
        x, y = nx, ny


def find_guard(grid: List[List[str]]) -> Tuple[Point, Point]:
    for arrow, direction in ARROWS.items():
        start = find(grid, arrow)
        if start is not None:
            return start, direction
    raise PuzzleInputError("no guard found")


def solve(text: str) -> Tuple[int, int]:
    grid = read_grid(text)
    start, direction = find_guard(grid)
    visited = walk(grid, start, direction)
    logger.debug("Guard visits %d cells", len(visited))
    return len(visited), count_loop_obstructions(grid, start, direction)
