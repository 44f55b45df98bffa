"""
Day 8: Resonant Collinearity.
"""

import logging
from collections import defaultdict
from itertools import permutations
from typing import Dict, List, Set, Tuple

from ..core.grid import Point, in_bounds
from ..core.parsing import read_grid

logger = logging.getLogger(__name__)

TITLE = "Resonant Collinearity"


def antennas_by_frequency(grid: List[List[str]]) -> Dict[str, List[Point]]:
    antennas: Dict[str, List[Point]] = defaultdict(list)
    for y, row in enumerate(grid):
        for x, c in enumerate(row):
            if c.isalnum():
                antennas[c].append((x, y))
    return antennas


def antinodes(grid: List[List[str]], resonant: bool = False) -> Set[Point]:
    """Collect antinode positions for every ordered pair of same-frequency antennas.

    Without *resonant* only the point beyond the second antenna at the same
    distance counts. With it, every in-grid point on the line does, starting
    at the second antenna itself.
    """
    found: Set[Point] = set()
    for positions in antennas_by_frequency(grid).values():
        for (ax, ay), (bx, by) in permutations(positions, 2):
            dx, dy = bx - ax, by - ay
            if not resonant:
                if in_bounds(grid, bx + dx, by + dy):
                    found.add((bx + dx, by + dy))
                continue
            x, y = bx, by
            while in_bounds(grid, x, y):
                found.add((x, y))
                x, y = x + dx, y + dy
    return found


def solve(text: str) -> Tuple[int, int]:
    grid = read_grid(text)
    return len(antinodes(grid)), len(antinodes(grid, resonant=True))
