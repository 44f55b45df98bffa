"""
Day 11: Plutonian Pebbles.

On each blink every stone changes at once: 0 becomes 1, a stone with an even
number of digits splits into its two halves, anything else is multiplied by
2024. Order does not matter for the count, so stones are kept as a multiset.
"""

import logging
from collections import Counter
from typing import Dict, Iterable, Tuple

from ..core.parsing import parse_int

logger = logging.getLogger(__name__)

TITLE = "Plutonian Pebbles"


def change(stone: int) -> Tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * 2024,)


def blink(stones: Dict[int, int]) -> Counter:
    after: Counter = Counter()
    for stone, n in stones.items():
        for new in change(stone):
            after[new] += n
    return after


def count_stones(stones: Iterable[int], blinks: int) -> int:
    counts = Counter(stones)
    for _ in range(blinks):
        counts = blink(counts)
    return sum(counts.values())


def solve(text: str) -> Tuple[int, int]:
    stones = [parse_int(token, "stone") for token in text.split()]
    return count_stones(stones, 25), count_stones(stones, 75)
