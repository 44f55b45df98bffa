"""Helpers for 2D character grids addressed as ``grid[y][x]``.

Directions are ``(dx, dy)`` tuples with y growing downwards.
"""

from typing import Iterator, List, Optional, Sequence, Tuple

Point = Tuple[int, int]
Grid = Sequence[Sequence[str]]

UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)

DIRS4 = (UP, RIGHT, DOWN, LEFT)
DIRS8 = (UP, DOWN, LEFT, RIGHT, (-1, -1), (1, -1), (-1, 1), (1, 1))

ARROWS = {"^": UP, "v": DOWN, "<": LEFT, ">": RIGHT}


def in_bounds(grid: Grid, x: int, y: int) -> bool:
    return 0 <= y < len(grid) and 0 <= x < len(grid[y])


def neighbors4(grid: Grid, x: int, y: int) -> Iterator[Point]:
    """Yield the orthogonal neighbours of ``(x, y)`` that lie inside the grid."""
    for dx, dy in DIRS4:
        nx, ny = x + dx, y + dy
        if in_bounds(grid, nx, ny):
            yield nx, ny


def find(grid: Grid, char: str) -> Optional[Point]:
    """Return the first ``(x, y)`` holding *char*, scanning row by row."""
    for y, row in enumerate(grid):
        for x, c in enumerate(row):
            if c == char:
                return x, y
    return None


def find_all(grid: Grid, char: str) -> List[Point]:
    return [(x, y) for y, row in enumerate(grid) for x, c in enumerate(row) if c == char]


def turn_right(direction: Point) -> Point:
    dx, dy = direction
    return -dy, dx


def turn_left(direction: Point) -> Point:
    dx, dy = direction
    return dy, -dx


__all__ = [
    "Point",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "DIRS4",
    "DIRS8",
    "ARROWS",
    "in_bounds",
    "neighbors4",
    "find",
    "find_all",
    "turn_right",
    "turn_left",
]
