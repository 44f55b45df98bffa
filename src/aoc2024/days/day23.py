"""
Day 23: LAN Party.

Input lines ``ab-cd`` are undirected links between computers. Part one counts
sets of three mutually connected computers where at least one name starts
with ``t``. Part two is the password: the largest fully connected set, names
sorted and joined with commas.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Set, Tuple

from ..core.parsing import PuzzleInputError, lines

logger = logging.getLogger(__name__)

TITLE = "LAN Party"

Graph = Dict[str, Set[str]]


def read_network(text: str) -> Graph:
    graph: Graph = defaultdict(set)
    for line in lines(text):
        if not line.strip():
            continue
        a, sep, b = line.strip().partition("-")
        if not sep or not a or not b:
            raise PuzzleInputError(f"invalid connection: {line!r}")
        graph[a].add(b)
        graph[b].add(a)
    return graph


def triangles(graph: Graph) -> Set[Tuple[str, ...]]:
    found = set()
    for a, neighbours in graph.items():
        for b in neighbours:
            for c in neighbours & graph[b]:
                found.add(tuple(sorted((a, b, c))))
    return found


def max_clique(graph: Graph) -> List[str]:
    """Bron-Kerbosch with pivoting."""
    best: Set[str] = set()

    def expand(r: Set[str], p: Set[str], x: Set[str]) -> None:
        nonlocal best
        if not p and not x:
            if len(r) > len(best):
                best = r
            return
        pivot = max(p | x, key=lambda v: len(graph[v] & p))
        for v in list(p - graph[pivot]):
            expand(r | {v}, p & graph[v], x & graph[v])
            p = p - {v}
            x = x | {v}

    expand(set(), set(graph), set())
    return sorted(best)


def solve(text: str) -> Tuple[int, str]:
    graph = read_network(text)
    logger.debug("Network has %d computers", len(graph))
    part1 = sum(1 for tri in triangles(graph) if any(name.startswith("t") for name in tri))
    return part1, ",".join(max_clique(graph))
