"""
Day 14: Restroom Redoubt.

Robots move with constant velocity on a wrapping ``width`` x ``height`` grid.
Part one multiplies the robot counts of the four quadrants after ``seconds``
seconds. Part two looks for the Easter egg: the first second at which more
than ``tree_neighbors`` robots have another robot immediately to their right.
"""

import logging
from typing import Tuple

import numpy as np

from ..core.parsing import PuzzleInputError, ints, lines

logger = logging.getLogger(__name__)

TITLE = "Restroom Redoubt"


def read_robots(text: str) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(positions, velocities)`` as ``(n, 2)`` integer arrays of (x, y)."""
    rows = []
    for line in lines(text):
        if not line.strip():
            continue
        values = ints(line)
        if len(values) != 4:
            raise PuzzleInputError(f"invalid robot: {line!r}")
        rows.append(values)
    data = np.array(rows, dtype=np.int64).reshape(-1, 4)
    return data[:, :2], data[:, 2:]


def positions_at(pos: np.ndarray, vel: np.ndarray, t: int, width: int, height: int) -> np.ndarray:
    return (pos + vel * t) % np.array([width, height])


def safety_factor(pos: np.ndarray, width: int, height: int) -> int:
    # Odd sizes leave the middle row and column out of every quadrant.
    mid_x, mid_y = width // 2, height // 2
    right_x, bottom_y = (width + 1) // 2, (height + 1) // 2
    x, y = pos[:, 0], pos[:, 1]
    factor = 1
    for in_x in (x < mid_x, x >= right_x):
        for in_y in (y < mid_y, y >= bottom_y):
            factor *= int(np.count_nonzero(in_x & in_y))
    return factor


def right_neighbors(pos: np.ndarray, width: int, height: int) -> int:
    """Count robots with an occupied cell directly to their right (no wrapping)."""
    occupied = np.zeros((height, width), dtype=bool)
    x, y = pos[:, 0], pos[:, 1]
    occupied[y, x] = True
    has_room = x + 1 < width
    return int(np.count_nonzero(has_room & occupied[y, np.minimum(x + 1, width - 1)]))


def find_tree(pos, vel, width: int, height: int, tree_neighbors: int, max_seconds: int) -> int:
    for t in range(max_seconds):
        if right_neighbors(positions_at(pos, vel, t, width, height), width, height) > tree_neighbors:
            logger.debug("Robots line up after %d seconds", t)
            return t
    return -1


def solve(
    text: str,
    width: int = 101,
    height: int = 103,
    seconds: int = 100,
    tree_neighbors: int = 200,
    max_seconds: int = 10000,
) -> Tuple[int, int]:
    pos, vel = read_robots(text)
    part1 = safety_factor(positions_at(pos, vel, seconds, width, height), width, height)
    return part1, find_tree(pos, vel, width, height, tree_neighbors, max_seconds)
