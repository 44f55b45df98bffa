import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[2]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from aoc2024.days import day02  # noqa: E402


EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def test_example_answers():
    assert day02.solve(EXAMPLE) == (2, 4)


def test_unsafe_jumps_cannot_be_dampened():
    assert day02.solve("1 2 7 8 9\n9 7 6 2 1\n") == (0, 0)


@pytest.mark.parametrize(
    "report",
    [
        "5 0 1 2 3",
        "1 2 3 4 0",
        "1 0 1 2 3",
        "0 1 2 3 2",
    ],
)
def test_dampener_removes_first_or_last_level(report):
    assert day02.solve(report + "\n") == (0, 1)


def test_blank_lines_are_ignored():
    assert day02.solve("1 2 3\n\n3 2 1\n") == (2, 2)


def test_is_safe_requires_monotonic_steps():
    assert day02.is_safe([1, 3, 6, 7, 9])
    assert not day02.is_safe([1, 3, 2, 4, 5])
    assert not day02.is_safe([8, 6, 4, 4, 1])
