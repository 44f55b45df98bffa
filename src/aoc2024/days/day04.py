"""
Day 4: Ceres Search.

Count ``XMAS`` in a word search (any of the eight directions, overlaps
allowed), then count X-shaped pairs of ``MAS`` crossing on their ``A``.
"""

from typing import List, Tuple

from ..core.grid import DIRS8, in_bounds
from ..core.parsing import read_grid

TITLE = "Ceres Search"


def count_word(grid: List[List[str]], word: str = "XMAS") -> int:
    total = 0
    for y, row in enumerate(grid):
        for x, c in enumerate(row):
            if c != word[0]:
                continue
            for dx, dy in DIRS8:
                if all(
                    in_bounds(grid, x + dx * i, y + dy * i) and grid[y + dy * i][x + dx * i] == ch
                    for i, ch in enumerate(word)
                ):
                    total += 1
    return total


def count_x_mas(grid: List[List[str]]) -> int:
    total = 0
    for y in range(1, len(grid) - 1):
        for x in range(1, len(grid[y]) - 1):
            if grid[y][x] != "A":
                continue
            if not all(in_bounds(grid, x + dx, y + dy) for dx in (-1, 1) for dy in (-1, 1)):
                continue
            diagonal = grid[y - 1][x - 1] + grid[y + 1][x + 1]
            anti_diagonal = grid[y - 1][x + 1] + grid[y + 1][x - 1]
            if diagonal in ("MS", "SM") and anti_diagonal in ("MS", "SM"):
                total += 1
    return total


def solve(text: str) -> Tuple[int, int]:
    grid = read_grid(text)
    return count_word(grid), count_x_mas(grid)
