"""
Day 16: Reindeer Maze.

The reindeer starts on ``S`` facing east and must reach ``E``. Stepping forward
costs 1 point and turning 90 degrees costs 1000. Part one is the lowest score;
part two counts the tiles that lie on at least one lowest-score path.
"""

import heapq
import logging
from typing import Dict, Iterator, List, Tuple

from ..core.grid import DIRS4, RIGHT, find, in_bounds
from ..core.parsing import PuzzleInputError, read_grid

logger = logging.getLogger(__name__)

TITLE = "Reindeer Maze"

STEP_COST = 1
TURN_COST = 1000

State = Tuple[int, int, int]  # x, y, index into DIRS4


def _moves(grid: List[List[str]], state: State, reverse: bool) -> Iterator[Tuple[int, State]]:
    x, y, d = state
    dx, dy = DIRS4[d]
    if reverse:
        dx, dy = -dx, -dy
    if in_bounds(grid, x + dx, y + dy) and grid[y + dy][x + dx] != "#":
        yield STEP_COST, (x + dx, y + dy, d)
    yield TURN_COST, (x, y, (d + 1) % 4)
    yield TURN_COST, (x, y, (d + 3) % 4)


def dijkstra(grid: List[List[str]], starts: List[State], reverse: bool = False) -> Dict[State, int]:
    """Return the lowest cost to every reachable state from any of *starts*.

    With *reverse*, edges are walked backwards, giving the cost from each
    state to the start states instead.
    """
    dist: Dict[State, int] = {s: 0 for s in starts}
    heap = [(0, s) for s in starts]
    heapq.heapify(heap)
    while heap:
        cost, state = heapq.heappop(heap)
        if cost > dist.get(state, cost):
            continue
        for step, nxt in _moves(grid, state, reverse):
            new_cost = cost + step
            if new_cost < dist.get(nxt, new_cost + 1):
                dist[nxt] = new_cost
                heapq.heappush(heap, (new_cost, nxt))
    return dist


def solve(text: str) -> Tuple[int, int]:
    grid = read_grid(text)
    start, end = find(grid, "S"), find(grid, "E")
    if start is None or end is None:
        raise PuzzleInputError("maze needs both a start and an end tile")

    forward = dijkstra(grid, [(start[0], start[1], DIRS4.index(RIGHT))])
    end_states = [(end[0], end[1], d) for d in range(4) if (end[0], end[1], d) in forward]
    if not end_states:
        raise PuzzleInputError("end tile is unreachable")
    best = min(forward[s] for s in end_states)
    backward = dijkstra(grid, [s for s in end_states if forward[s] == best], reverse=True)

    tiles = {
        (x, y)
        for (x, y, d), cost in forward.items()
        if cost + backward.get((x, y, d), best + 1) == best
    }
    logger.debug("Explored %d states", len(forward))
    return best, len(tiles)
