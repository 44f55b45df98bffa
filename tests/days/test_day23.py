import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[2]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from aoc2024.core.parsing import PuzzleInputError  # noqa: E402
from aoc2024.days import day23  # noqa: E402


EXAMPLE = """kh-tc
qp-kh
de-cg
ka-co
yn-aq
qp-ub
cg-tb
vc-aq
tb-ka
wh-tc
yn-cg
kh-ub
ta-co
de-co
tc-td
tb-wq
wh-td
ta-ka
td-qp
aq-cg
wq-ub
ub-vc
de-ta
wq-aq
wq-vc
wh-yn
ka-de
kh-ta
co-tc
wh-qp
tb-vc
td-yn
"""


def test_example_answers():
    assert day23.solve(EXAMPLE) == (7, "co,de,ka,ta")


def test_triangle_count():
    graph = day23.read_network(EXAMPLE)
    assert len(day23.triangles(graph)) == 12


def test_max_clique_of_triangle():
    graph = day23.read_network("a-b\nb-c\na-c\nc-d\n")
    assert day23.max_clique(graph) == ["a", "b", "c"]


def test_invalid_connection():
    with pytest.raises(PuzzleInputError):
        day23.read_network("ab\n")
