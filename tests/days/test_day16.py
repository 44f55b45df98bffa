import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[2]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from aoc2024.core.parsing import PuzzleInputError  # noqa: E402
from aoc2024.days import day16  # noqa: E402


FIRST = """###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############"""

SECOND = """#################
#...#...#...#..E#
#.#.#.#.#.#.#.#.#
#.#.#.#...#...#.#
#.#.#.#.###.#.#.#
#...#.#.#.....#.#
#.#.#.#.#.#####.#
#.#...#.#.#.....#
#.#.#####.#.###.#
#.#.#.......#...#
#.#.###.#####.###
#.#.#...#.....#.#
#.#.#.#####.###.#
#.#.#.........#.#
#.#.#.#########.#
#S#.............#
#################"""


@pytest.mark.parametrize("maze,expected", [(FIRST, (7036, 45)), (SECOND, (11048, 64))])
def test_examples(maze, expected):
    assert day16.solve(maze) == expected


def test_straight_corridor():
    assert day16.solve("#####\n#S.E#\n#####\n") == (2, 3)


def test_unreachable_end():
    with pytest.raises(PuzzleInputError):
        day16.solve("#####\n#S#E#\n#####\n")
