import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[2]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from aoc2024.days import day03  # noqa: E402


def test_sum_multiplications_example():
    memory = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
    assert day03.sum_multiplications(memory) == 161


@pytest.mark.parametrize("memory", ["mul(4*", "mul(6,9!", "?(12,34)", "mul ( 2 , 4 )"])
def test_corrupted_instructions_are_ignored(memory):
    assert day03.sum_multiplications(memory) == 0


@pytest.mark.parametrize(
    "memory",
    ["mul(mul(2,4)", "mul(2mul(2,4)", "mul(2,mul(2,4)", "mul(2,12mul(2,4)"],
)
def test_instruction_after_partial_match_is_found(memory):
    assert day03.sum_multiplications(memory) == 8


def test_operands_longer_than_three_digits_are_ignored():
    assert day03.sum_multiplications("mul(1234,2)mul(2,3)") == 6


def test_do_and_dont_toggle_multiplications():
    memory = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"
    assert day03.sum_enabled_multiplications(memory) == 48
    assert day03.solve(memory) == (161, 48)
