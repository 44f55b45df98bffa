from pathlib import Path
import sys

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from aoc2024.core import registry  # noqa: E402


def test_every_day_has_a_solver_and_title():
    assert registry.available_days() == list(range(1, 24))
    for day, info in registry.DAYS.items():
        solver = registry.get_solver(day)
        assert callable(solver)
        module = sys.modules[info.module_name]
        assert module.TITLE == info.title


def test_module_name_is_zero_padded():
    assert registry.DAYS[5].module_name == "aoc2024.days.day05"


def test_unknown_day():
    with pytest.raises(KeyError, match="No solver for day 25"):
        registry.get_solver(25)


@pytest.mark.parametrize(
    "selection,expected",
    [
        ("1,3,5-7", [1, 3, 5, 6, 7]),
        ("7, 2,2", [2, 7]),
        ("22-23", [22, 23]),
        ("", []),
    ],
)
def test_parse_day_selection(selection, expected):
    assert registry.parse_day_selection(selection) == expected


@pytest.mark.parametrize("selection", ["x", "5-3", "0", "20-25", "1-2-3"])
def test_parse_day_selection_rejects(selection):
    with pytest.raises(ValueError):
        registry.parse_day_selection(selection)
