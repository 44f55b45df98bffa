"""
Day 20: Race Condition.

The race track is a single path from ``S`` to ``E``. A program may cheat once,
passing through walls for up to ``max_cheat`` picoseconds. A cheat from track
position i to position j (further along the track) saves ``(j - i) - d``
picoseconds, where d is the Manhattan distance between the two cells.
"""

import logging
from typing import List, Tuple

import numpy as np

from ..core.grid import Point, find, neighbors4
from ..core.parsing import PuzzleInputError, read_grid

logger = logging.getLogger(__name__)

TITLE = "Race Condition"


def trace_track(grid: List[List[str]]) -> np.ndarray:
    """Return the track cells in race order as an ``(n, 2)`` array of (x, y)."""
    start, end = find(grid, "S"), find(grid, "E")
    if start is None or end is None:
        raise PuzzleInputError("track needs both a start and an end")
    path: List[Point] = [start]
    previous = None
    current = start
    while current != end:
        step = [
            (nx, ny)
            for nx, ny in neighbors4(grid, *current)
            if grid[ny][nx] != "#" and (nx, ny) != previous
        ]
        if len(step) != 1:
            raise PuzzleInputError(f"track branches or ends at {current}")
        previous, current = current, step[0]
        path.append(current)
    return np.array(path, dtype=np.int64)


def count_cheats(track: np.ndarray, max_cheat: int, min_save: int) -> int:
    total = 0
    n = len(track)
    for i in range(n - min_save):
        ahead = track[i + min_save:]
        dist = np.abs(ahead - track[i]).sum(axis=1)
        saved = np.arange(min_save, n - i) - dist
        total += int(np.count_nonzero((dist <= max_cheat) & (saved >= min_save)))
    return total


def solve(
    text: str,
    max_cheat: int = 2,
    min_save: int = 100,
    max_cheat2: int = 20,
    min_save2: int = 100,
) -> Tuple[int, int]:
    track = trace_track(read_grid(text))
    logger.debug("Track is %d cells long", len(track))
    return count_cheats(track, max_cheat, min_save), count_cheats(track, max_cheat2, min_save2)
