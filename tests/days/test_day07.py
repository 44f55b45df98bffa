import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[2]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from aoc2024.days import day07  # noqa: E402


EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_example_answers():
    assert day07.solve(EXAMPLE) == (3749, 11387)


@pytest.mark.parametrize(
    "target,numbers,concat,expected",
    [
        (190, [10, 19], False, True),
        (3267, [81, 40, 27], False, True),
        (156, [15, 6], False, False),
        (156, [15, 6], True, True),
        (7290, [6, 8, 6, 15], True, True),
        (83, [17, 5], True, False),
    ],
)
def test_is_solvable(target, numbers, concat, expected):
    assert day07.is_solvable(target, numbers, concat=concat) is expected


def test_operators_evaluate_left_to_right():
    # 2 + 3 * 4 is 20 left to right, never 14.
    assert day07.is_solvable(20, [2, 3, 4])
    assert not day07.is_solvable(14, [2, 3, 4])
