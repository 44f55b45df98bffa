"""
Day 12: Garden Groups.

Plots of the same plant that touch orthogonally form a region. Fencing costs
area times perimeter; with the bulk discount (part two) it costs area times
the number of straight sides, which equals the number of corners.
"""

import logging
from collections import deque
from typing import List, Set, Tuple

from ..core.grid import DIRS4, Point, neighbors4, turn_right
from ..core.parsing import read_grid

logger = logging.getLogger(__name__)

TITLE = "Garden Groups"


def regions(grid: List[List[str]]) -> List[Set[Point]]:
    seen: Set[Point] = set()
    found = []
    for y, row in enumerate(grid):
        for x, plant in enumerate(row):
            if (x, y) in seen:
                continue
            region = {(x, y)}
            queue = deque([(x, y)])
            while queue:
                cx, cy = queue.popleft()
                for nx, ny in neighbors4(grid, cx, cy):
                    if (nx, ny) not in region and grid[ny][nx] == plant:
                        region.add((nx, ny))
                        queue.append((nx, ny))
            seen |= region
            found.append(region)
    return found


def perimeter(region: Set[Point]) -> int:
    return sum(1 for x, y in region for dx, dy in DIRS4 if (x + dx, y + dy) not in region)


def sides(region: Set[Point]) -> int:
    corners = 0
    for x, y in region:
        for d1 in DIRS4:
            d2 = turn_right(d1)
            a = (x + d1[0], y + d1[1]) in region
            b = (x + d2[0], y + d2[1]) in region
            diagonal = (x + d1[0] + d2[0], y + d1[1] + d2[1]) in region
            if (not a and not b) or (a and b and not diagonal):
                corners += 1
    return corners


def solve(text: str) -> Tuple[int, int]:
    grid = read_grid(text)
    found = regions(grid)
    logger.debug("Found %d regions", len(found))
    price = sum(len(r) * perimeter(r) for r in found)
    discounted = sum(len(r) * sides(r) for r in found)
    return price, discounted
