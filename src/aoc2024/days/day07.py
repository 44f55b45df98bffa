"""
Day 7: Bridge Repair.

Each calibration line ``test: a b c`` is valid when operators inserted between
the numbers (evaluated strictly left to right) produce the test value. Part
one allows ``+`` and ``*``; part two adds concatenation ``||``.
"""

import logging
from typing import List, Sequence, Tuple

from ..core.parsing import PuzzleInputError, lines, parse_int

logger = logging.getLogger(__name__)

TITLE = "Bridge Repair"

Equation = Tuple[int, List[int]]


def read_equations(text: str) -> List[Equation]:
    equations = []
    for line in lines(text):
        if not line.strip():
            continue
        target, sep, rest = line.partition(":")
        if not sep:
            raise PuzzleInputError(f"invalid calibration line: {line!r}")
        numbers = [parse_int(token, "operand") for token in rest.split()]
        if not numbers:
            raise PuzzleInputError(f"calibration line has no operands: {line!r}")
        equations.append((parse_int(target.strip(), "test value"), numbers))
    return equations


def _unconcat(value: int, suffix: int):
    """Return *value* with the digits of *suffix* removed from its end, or None."""
    digits = 10 ** len(str(suffix))
    if value >= suffix and (value - suffix) % digits == 0:
        return (value - suffix) // digits
    return None


def is_solvable(target: int, numbers: Sequence[int], concat: bool = False) -> bool:
    """Work backwards from the target, undoing the last operation each step."""
    if len(numbers) == 1:
        return target == numbers[0]
    *head, last = numbers
    if target >= last and is_solvable(target - last, head, concat):
        return True
    if last == 0:
        if target == 0:
            return True
    elif target % last == 0 and is_solvable(target // last, head, concat):
        return True
    if concat:
        prefix = _unconcat(target, last)
        if prefix is not None and is_solvable(prefix, head, concat):
            return True
    return False


def solve(text: str) -> Tuple[int, int]:
    equations = read_equations(text)
    logger.debug("Checking %d calibrations", len(equations))
    part1 = sum(t for t, nums in equations if is_solvable(t, nums))
    part2 = sum(t for t, nums in equations if is_solvable(t, nums, concat=True))
    return part1, part2
