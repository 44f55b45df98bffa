"""Index of puzzle days and lazy lookup of their solvers."""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayInfo:
    day: int
    title: str

    @property
    def module_name(self) -> str:
        return f"aoc2024.days.day{self.day:02d}"


_TITLES = [
    "Historian Hysteria",
    "Red-Nosed Reports",
    "Mull It Over",
    "Ceres Search",
    "Print Queue",
    "Guard Gallivant",
    "Bridge Repair",
    "Resonant Collinearity",
    "Disk Fragmenter",
    "Hoof It",
    "Plutonian Pebbles",
    "Garden Groups",
    "Claw Contraption",
    "Restroom Redoubt",
    "Warehouse Woes",
    "Reindeer Maze",
    "Chronospatial Computer",
    "RAM Run",
    "Linen Layout",
    "Race Condition",
    "Keypad Conundrum",
    "Monkey Market",
    "LAN Party",
]

DAYS: Dict[int, DayInfo] = {
    number: DayInfo(number, title) for number, title in enumerate(_TITLES, start=1)
}


def available_days() -> List[int]:
    """Return the sorted list of implemented day numbers."""
    return sorted(DAYS)


def get_solver(day: int) -> Callable:
    """Import the module for *day* and return its ``solve`` callable.

    Raises:
        KeyError: If no solver exists for the requested day.
    """
    info = DAYS.get(day)
    if info is None:
        raise KeyError(f"No solver for day {day}; available days are 1-{max(DAYS)}")
    module = importlib.import_module(info.module_name)
    logger.debug("Loaded solver module %s", info.module_name)
    return module.solve


def parse_day_selection(selection: str) -> List[int]:
    """Parse a day selection such as ``"1,3,5-7"`` into a sorted list of days.

    Examples:
        >>> parse_day_selection("1,3,5-7")
        [1, 3, 5, 6, 7]
    """
    days = set()
    for part in selection.split(","):
        part = part.strip()
        if not part:
            continue
        start, sep, end = part.partition("-")
        try:
            first = int(start)
            last = int(end) if sep else first
        except ValueError:
            raise ValueError(f"Invalid day selection '{part}'") from None
        if first > last:
            raise ValueError(f"Invalid day range '{part}'")
        for day in range(first, last + 1):
            if day not in DAYS:
                raise ValueError(f"Day {day} is not available")
            days.add(day)
    return sorted(days)


__all__ = ["DAYS", "DayInfo", "available_days", "get_solver", "parse_day_selection"]
