"""
Day 21: Keypad Conundrum.

A door code is typed on a numeric keypad by a robot, which is steered from a
directional keypad by another robot, and so on up to the human at the end of
the chain. The complexity of a code is the length of the shortest button
sequence the human must press, multiplied by the numeric part of the code.
"""

import logging
from functools import lru_cache
from typing import Dict, List, Tuple

from ..core.parsing import PuzzleInputError, lines

logger = logging.getLogger(__name__)

TITLE = "Keypad Conundrum"

# Keypad coordinates have y growing upwards, so ``^`` increases y.
_MOVES = (("v", (0, -1)), (">", (1, 0)), ("^", (0, 1)), ("<", (-1, 0)))

NUMPAD_LAYOUT = {
    "0": (1, 0), "A": (2, 0),
    "1": (0, 1), "2": (1, 1), "3": (2, 1),
    "4": (0, 2), "5": (1, 2), "6": (2, 2),
    "7": (0, 3), "8": (1, 3), "9": (2, 3),
}
DIRPAD_LAYOUT = {
    "<": (0, 0), "v": (1, 0), ">": (2, 0),
    "^": (1, 1), "A": (2, 1),
}


class Keypad:
    """A keypad with buttons at fixed positions; gaps are simply absent."""

    def __init__(self, layout: Dict[str, Tuple[int, int]]):
        self.layout = dict(layout)
        self._buttons = {pos: button for button, pos in self.layout.items()}
        self._paths: Dict[Tuple[str, str], List[str]] = {}

    @classmethod
    def numpad(cls) -> "Keypad":
        return cls(NUMPAD_LAYOUT)

    @classmethod
    def dirpad(cls) -> "Keypad":
        return cls(DIRPAD_LAYOUT)

    def min_paths(self, a: str, b: str) -> List[str]:
        """Return every shortest press sequence that moves from *a* to *b* and presses it.

        Each sequence ends with ``A`` and never passes over a gap.
        """
        if (a, b) in self._paths:
            return self._paths[(a, b)]
        if a not in self.layout or b not in self.layout:
            raise PuzzleInputError(f"no button path from {a!r} to {b!r}")
        (ax, ay), (bx, by) = self.layout[a], self.layout[b]
        length = abs(bx - ax) + abs(by - ay)

        paths = []

        def remaining(pos: Tuple[int, int]) -> int:
            return abs(bx - pos[0]) + abs(by - pos[1])

        def extend(pos: Tuple[int, int], presses: str) -> None:
            if len(presses) == length:
                paths.append(presses + "A")
                return
            for char, (dx, dy) in _MOVES:
                nxt = (pos[0] + dx, pos[1] + dy)
                if nxt in self._buttons and remaining(nxt) < remaining(pos):
                    extend(nxt, presses + char)

        extend((ax, ay), "")
        self._paths[(a, b)] = paths
        return paths


class RobotChain:
    """A keypad operated through ``chain_len`` directional keypads.

    ``chain_len`` counts every directional keypad in the chain, including the
    one the human presses.
    """

    def __init__(self, keypad: Keypad, chain_len: int):
        self.keypad = keypad
        self.chain_len = chain_len
        self.dirpad = Keypad.dirpad()
        self._cost = lru_cache(maxsize=None)(self._dir_cost)

    def _sequence_cost(self, keypad: Keypad, code: str, depth: int) -> int:
        if depth == 0:
            return len(code)
        total = 0
        for a, b in zip("A" + code, code):
            total += min(self._cost(path, depth - 1) for path in keypad.min_paths(a, b))
        return total

    def _dir_cost(self, code: str, depth: int) -> int:
        return self._sequence_cost(self.dirpad, code, depth)

    def cost(self, code: str) -> int:
        """Return the number of presses the human needs to type *code*."""
        return self._sequence_cost(self.keypad, code, self.chain_len)


def complexity(code: str, cost: int) -> int:
    digits = "".join(c for c in code if c.isdigit())
    if not digits:
        raise PuzzleInputError(f"code has no numeric part: {code!r}")
    return cost * int(digits)


def solve(text: str, robots: int = 3, robots2: int = 26) -> Tuple[int, int]:
    codes = [line.strip() for line in lines(text) if line.strip()]
    short, long = RobotChain(Keypad.numpad(), robots), RobotChain(Keypad.numpad(), robots2)
    part1 = sum(complexity(code, short.cost(code)) for code in codes)
    part2 = sum(complexity(code, long.cost(code)) for code in codes)
    return part1, part2
