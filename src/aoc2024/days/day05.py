"""
Day 5: Print Queue.

Page ordering rules ``X|Y`` say page X must be printed before page Y when both
appear in an update. Part one sums the middle page of correctly-ordered
updates; part two fixes the remaining updates and sums their middle pages.
"""

import logging
from functools import cmp_to_key
from typing import List, Set, Tuple

from ..core.parsing import PuzzleInputError, lines, parse_int

logger = logging.getLogger(__name__)

TITLE = "Print Queue"

Rules = Set[Tuple[int, int]]


def read_rules_and_updates(text: str) -> Tuple[Rules, List[List[int]]]:
    rules: Rules = set()
    updates: List[List[int]] = []
    reading_rules = True
    for line in lines(text):
        line = line.strip()
        if not line:
            reading_rules = False
            continue
        if reading_rules:
            left, sep, right = line.partition("|")
            if not sep:
                raise PuzzleInputError(f"invalid ordering rule: {line!r}")
            rules.add((parse_int(left, "page"), parse_int(right, "page")))
        else:
            updates.append([parse_int(page, "page") for page in line.split(",")])
    return rules, updates


def is_ordered(rules: Rules, update: List[int]) -> bool:
    return all((b, a) not in rules for i, a in enumerate(update) for b in update[i + 1:])


def reorder(rules: Rules, update: List[int]) -> List[int]:
    """Return *update* sorted so that every applicable rule is satisfied."""

    def compare(a: int, b: int) -> int:
        if (a, b) in rules:
            return -1
        if (b, a) in rules:
            return 1
        return 0

    return sorted(update, key=cmp_to_key(compare))


def solve(text: str) -> Tuple[int, int]:
    rules, updates = read_rules_and_updates(text)
    logger.debug("Read %d rules and %d updates", len(rules), len(updates))
    ordered_sum = 0
    fixed_sum = 0
    for update in updates:
        if is_ordered(rules, update):
            ordered_sum += update[len(update) // 2]
        else:
            fixed = reorder(rules, update)
            fixed_sum += fixed[len(fixed) // 2]
    return ordered_sum, fixed_sum
