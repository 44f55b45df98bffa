import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[2]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from aoc2024.core.parsing import PuzzleInputError  # noqa: E402
from aoc2024.days import day17  # noqa: E402


EXAMPLE = """Register A: 729
Register B: 0
Register C: 0

Program: 0,1,5,4,3,0
"""

QUINE = """Register A: 2024
Register B: 0
Register C: 0

Program: 0,3,5,4,3,0
"""


def test_example_output():
    assert day17.solve(EXAMPLE) == ("4,6,3,5,6,3,5,2,1,0", -1)


def test_quine_search():
    output, a = day17.solve(QUINE)
    assert output == "5,7,3,0"
    assert a == 117440
    computer = day17.read_computer(QUINE)
    assert computer.run(a) == computer.program


@pytest.mark.parametrize(
    "a,b,c,program,expected",
    [
        (0, 0, 9, [2, 6], []),
        (10, 0, 0, [5, 0, 5, 1, 5, 4], [0, 1, 2]),
        (2024, 0, 0, [0, 1, 5, 4, 3, 0], [4, 2, 5, 6, 7, 7, 7, 7, 3, 1, 0]),
    ],
)
def test_instruction_examples(a, b, c, program, expected):
    assert day17.Computer(a, b, c, program).run() == expected


def test_bitwise_instructions():
    # bxl 7 then out 5
    assert day17.Computer(13, 29, 0, [1, 7, 5, 5]).run() == [26 % 8]
    # bxc then out 5
    assert day17.Computer(0, 2024, 43690, [4, 0, 5, 5]).run() == [44354 % 8]


def test_invalid_combo_operand():
    with pytest.raises(ValueError):
        day17.Computer(0, 0, 0, [5, 7]).run()


def test_missing_program_line():
    with pytest.raises(PuzzleInputError):
        day17.read_computer("Register A: 1\nRegister B: 0\nRegister C: 0\n")
