"""
Day 10: Hoof It.

Trails start at height 0 and climb by exactly one per step up to height 9.
A trailhead's score is the number of distinct 9s it reaches; its rating is the
number of distinct trails. Cells marked ``.`` are impassable.
"""

import logging
from functools import lru_cache
from typing import FrozenSet, List, Tuple

from ..core.grid import Point, neighbors4
from ..core.parsing import PuzzleInputError, lines

logger = logging.getLogger(__name__)

TITLE = "Hoof It"

IMPASSABLE = -1


def read_heights(text: str) -> List[List[int]]:
    heights = []
    for line in lines(text):
        row = []
        for c in line:
            if c == ".":
                row.append(IMPASSABLE)
            elif c.isdigit():
                row.append(int(c))
            else:
                raise PuzzleInputError(f"invalid height: {c!r}")
        heights.append(row)
    return heights


def score_trailheads(heights: List[List[int]]) -> Tuple[int, int]:
    """Return the summed scores and summed ratings of all trailheads."""

    @lru_cache(maxsize=None)
    def summits(x: int, y: int) -> FrozenSet[Point]:
        h = heights[y][x]
        if h == 9:
            return frozenset([(x, y)])
        reached: FrozenSet[Point] = frozenset()
        for nx, ny in neighbors4(heights, x, y):
            if heights[ny][nx] == h + 1:
                reached |= summits(nx, ny)
        return reached

    @lru_cache(maxsize=None)
    def trails(x: int, y: int) -> int:
        h = heights[y][x]
        if h == 9:
            return 1
        return sum(trails(nx, ny) for nx, ny in neighbors4(heights, x, y) if heights[ny][nx] == h + 1)

    score = rating = 0
    for y, row in enumerate(heights):
        for x, h in enumerate(row):
            if h == 0:
                score += len(summits(x, y))
                rating += trails(x, y)
    return score, rating


def solve(text: str) -> Tuple[int, int]:
    return score_trailheads(read_heights(text))
