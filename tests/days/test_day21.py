import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[2]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from aoc2024.days import day21  # noqa: E402


EXAMPLE = """029A
980A
179A
456A
379A
"""


def test_dirpad_min_paths():
    assert sorted(day21.Keypad.dirpad().min_paths("A", "<")) == ["<v<A", "v<<A"]


def test_numpad_min_paths():
    assert sorted(day21.Keypad.numpad().min_paths("1", "6")) == [">>^A", ">^>A", "^>>A"]


def test_min_paths_avoid_the_gap():
    # Moving from 0 to 1 may not pass through the empty corner left of 0.
    assert day21.Keypad.numpad().min_paths("0", "1") == ["^<A"]


@pytest.mark.parametrize("code,expected", [("12", 6), ("593", 10)])
def test_single_robot_chain(code, expected):
    assert day21.RobotChain(day21.Keypad.numpad(), 1).cost(code) == expected


@pytest.mark.parametrize("chain_len,expected", [(0, 4), (1, 12), (2, 28), (3, 68)])
def test_chain_depths(chain_len, expected):
    assert day21.RobotChain(day21.Keypad.numpad(), chain_len).cost("029A") == expected


def test_example_answers():
    assert day21.solve(EXAMPLE) == (126384, 154115708116294)
