import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[2]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from aoc2024.core.parsing import PuzzleInputError  # noqa: E402
from aoc2024.days import day05  # noqa: E402


EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


def test_example_answers():
    assert day05.solve(EXAMPLE) == (143, 123)


def test_reorder_fixes_invalid_updates():
    rules, _ = day05.read_rules_and_updates(EXAMPLE)
    assert day05.reorder(rules, [75, 97, 47, 61, 53]) == [97, 75, 47, 61, 53]
    assert day05.reorder(rules, [97, 13, 75, 29, 47]) == [97, 75, 47, 29, 13]


def test_is_ordered():
    rules, updates = day05.read_rules_and_updates(EXAMPLE)
    assert [day05.is_ordered(rules, u) for u in updates] == [True, True, True, False, False, False]


def test_malformed_rule_is_rejected():
    with pytest.raises(PuzzleInputError):
        day05.solve("47-53\n\n47,53\n")
