"""
Day 18: RAM Run.

Bytes fall onto a ``width`` x ``height`` memory grid and corrupt the cell they
land on. Part one is the shortest path from the top-left to the bottom-right
corner after the first ``fallen`` bytes. Part two is the ``x,y`` of the first
byte whose fall cuts the exit off.
"""

import logging
from collections import deque
from typing import List, Optional, Set, Tuple

from ..core.grid import DIRS4, Point
from ..core.parsing import PuzzleInputError, lines, parse_int

logger = logging.getLogger(__name__)

TITLE = "RAM Run"


def read_bytes(text: str) -> List[Point]:
    points = []
    for line in lines(text):
        if not line.strip():
            continue
        x, sep, y = line.partition(",")
        if not sep:
            raise PuzzleInputError(f"invalid byte position: {line!r}")
        points.append((parse_int(x.strip(), "x"), parse_int(y.strip(), "y")))
    return points


def shortest_path(corrupted: Set[Point], width: int, height: int) -> Optional[int]:
    """Breadth-first search from (0, 0) to the far corner; None if unreachable."""
    start, goal = (0, 0), (width - 1, height - 1)
    if start in corrupted or goal in corrupted:
        return None
    dist = {start: 0}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        if (x, y) == goal:
            return dist[goal]
        for dx, dy in DIRS4:
            nxt = (x + dx, y + dy)
            if 0 <= nxt[0] < width and 0 <= nxt[1] < height and nxt not in corrupted and nxt not in dist:
                dist[nxt] = dist[(x, y)] + 1
                queue.append(nxt)
    return None


def first_blocking_byte(points: List[Point], width: int, height: int) -> Optional[Point]:
    """Binary search the number of fallen bytes for the first that blocks the exit."""
    if shortest_path(set(points), width, height) is not None:
        return None
    lo, hi = 0, len(points)  # path exists after lo bytes, blocked after hi bytes
    while hi - lo > 1:
        mid = (lo + hi) // 2
        if shortest_path(set(points[:mid]), width, height) is None:
            hi = mid
        else:
            lo = mid
    return points[hi - 1]


def solve(text: str, width: int = 71, height: int = 71, fallen: int = 1024) -> Tuple[int, str]:
    points = read_bytes(text)
    steps = shortest_path(set(points[:fallen]), width, height)
    if steps is None:
        logger.warning("Exit is unreachable after %d bytes", fallen)
        steps = 0
    blocker = first_blocking_byte(points, width, height)
    logger.debug("Shortest path after %d bytes is %d steps", fallen, steps)
    return steps, "" if blocker is None else f"{blocker[0]},{blocker[1]}"
