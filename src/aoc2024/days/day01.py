"""
Day 1: Historian Hysteria.

Two columns of location IDs. Part one sums the distances between the columns
once both are sorted; part two sums each left ID multiplied by how often it
appears in the right column (the similarity score).
"""

import logging
from collections import Counter
from typing import List, Tuple

from ..core.parsing import PuzzleInputError, lines, parse_int

logger = logging.getLogger(__name__)

TITLE = "Historian Hysteria"


def read_lists(text: str) -> Tuple[List[int], List[int]]:
    """Read the left and right columns.

    Raises:
        PuzzleInputError: If a line lacks a left or right value, or holds a
            token that is not an integer.
    """
    left, right = [], []
    for line in lines(text):
        parts = line.split()
        if not parts:
            raise PuzzleInputError("no left value")
        if len(parts) < 2:
            raise PuzzleInputError("no right value")
        left.append(parse_int(parts[0], "left value"))
        right.append(parse_int(parts[1], "right value"))
    return left, right


def total_distance(left: List[int], right: List[int]) -> int:
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: List[int], right: List[int]) -> int:
    counts = Counter(right)
    return sum(n * counts[n] for n in left)


def solve(text: str) -> Tuple[int, int]:
    left, right = read_lists(text)
    logger.debug("Read %d location ID pairs", len(left))
    return total_distance(left, right), similarity_score(left, right)
