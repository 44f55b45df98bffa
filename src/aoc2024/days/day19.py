"""
Day 19: Linen Layout.
"""

import logging
from typing import List, Sequence, Tuple

from ..core.parsing import PuzzleInputError, blocks

logger = logging.getLogger(__name__)

TITLE = "Linen Layout"


def read_towels(text: str) -> Tuple[List[str], List[str]]:
    chunks = blocks(text)
    if len(chunks) != 2:
        raise PuzzleInputError("expected towel patterns and designs separated by a blank line")
    patterns = [p.strip() for p in chunks[0].split(",") if p.strip()]
    designs = [d.strip() for d in chunks[1].splitlines() if d.strip()]
    return patterns, designs


def arrangements(design: str, patterns: Sequence[str]) -> int:
    """Count the ways *design* can be built by concatenating *patterns*."""
    ways = [0] * (len(design) + 1)
    ways[0] = 1
    for i in range(len(design)):
        if not ways[i]:
            continue
        for pattern in patterns:
            if design.startswith(pattern, i):
                ways[i + len(pattern)] += ways[i]
    return ways[len(design)]


def solve(text: str) -> Tuple[int, int]:
    patterns, designs = read_towels(text)
    counts = [arrangements(design, patterns) for design in designs]
    logger.debug("Checked %d designs against %d patterns", len(designs), len(patterns))
    return sum(1 for n in counts if n), sum(counts)
