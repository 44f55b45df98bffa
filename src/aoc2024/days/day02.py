"""
Day 2: Red-Nosed Reports.

A report is safe when its levels are all increasing or all decreasing and
adjacent levels differ by one to three. The Problem Dampener (part two)
tolerates a single bad level.
"""

import logging
from typing import List, Sequence, Tuple

from ..core.parsing import lines, parse_int

logger = logging.getLogger(__name__)

TITLE = "Red-Nosed Reports"


def read_reports(text: str) -> List[List[int]]:
    return [
        [parse_int(token, "level") for token in line.split()]
        for line in lines(text)
        if line.strip()
    ]


def is_safe(report: Sequence[int]) -> bool:
    steps = [b - a for a, b in zip(report, report[1:])]
    return all(1 <= s <= 3 for s in steps) or all(-3 <= s <= -1 for s in steps)


def is_safe_dampened(report: Sequence[int]) -> bool:
    """Return True if the report is safe after removing at most one level."""
    if is_safe(report):
        return True
    return any(is_safe(report[:i] + report[i + 1:]) for i in range(len(report)))


def solve(text: str) -> Tuple[int, int]:
    reports = read_reports(text)
    logger.debug("Evaluating %d reports", len(reports))
    safe = sum(1 for r in reports if is_safe(r))
    dampened = sum(1 for r in reports if is_safe_dampened(r))
    return safe, dampened
