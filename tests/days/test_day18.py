import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[2]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from aoc2024.days import day18  # noqa: E402


EXAMPLE = """5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0
"""


def test_example_answers():
    assert day18.solve(EXAMPLE, width=7, height=7, fallen=12) == (22, "6,1")


def test_open_grid_path_length():
    assert day18.shortest_path(set(), 3, 3) == 4


def test_exit_never_blocked():
    points = day18.read_bytes("1,1\n")
    assert day18.first_blocking_byte(points, 3, 3) is None


def test_blocked_exit_still_reports_first_blocker():
    assert day18.solve("0,1\n1,0\n", width=3, height=3, fallen=2) == (0, "1,0")
