"""
Day 3: Mull It Over.

Scan corrupted memory for ``mul(X,Y)`` instructions with one to three digit
operands. Part two honours ``do()`` and ``don't()``, which enable and disable
subsequent multiplications; instructions start enabled.
"""

import logging
import re
from typing import Tuple

logger = logging.getLogger(__name__)

TITLE = "Mull It Over"

_MUL_RE = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")
_TOKEN_RE = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)|do\(\)|don't\(\)")


def sum_multiplications(memory: str) -> int:
    return sum(int(a) * int(b) for a, b in _MUL_RE.findall(memory))


def sum_enabled_multiplications(memory: str) -> int:
    total = 0
    enabled = True
    for match in _TOKEN_RE.finditer(memory):
        token = match.group(0)
        if token == "do()":
            enabled = True
        elif token == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return total


def solve(text: str) -> Tuple[int, int]:
    return sum_multiplications(text), sum_enabled_multiplications(text)
