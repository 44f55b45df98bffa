import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[2]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from aoc2024.core.parsing import read_grid  # noqa: E402
from aoc2024.days import day08  # noqa: E402


EXAMPLE = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""


def test_example_answers():
    assert day08.solve(EXAMPLE) == (14, 34)


def test_pair_produces_two_antinodes():
    grid = read_grid("..........\n..........\n..........\n....a.....\n..........\n.....a....\n"
                     "..........\n..........\n..........\n..........\n")
    assert day08.antinodes(grid) == {(3, 1), (6, 7)}


def test_resonant_antinodes_include_antennas():
    grid = read_grid("T....\n.T...\n.....\n.....\n.....\n")
    assert day08.antinodes(grid, resonant=True) == {(0, 0), (1, 1), (2, 2), (3, 3), (4, 4)}
