"""
Day 13: Claw Contraption.

Each machine is a 2x2 linear system: presses ``a`` and ``b`` of buttons A and B
must land the claw exactly on the prize. Solutions must be whole,
non-negative press counts; a token costs 3 per A press and 1 per B press.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.parsing import PuzzleInputError, lines

logger = logging.getLogger(__name__)

TITLE = "Claw Contraption"

PRIZE_OFFSET = 10000000000000

_BUTTON_RE = re.compile(r"^Button [AB]: X\+(\d+), Y\+(\d+)$")
_PRIZE_RE = re.compile(r"^Prize: X=(\d+), Y=(\d+)$")


@dataclass(frozen=True)
class Machine:
    ax: int
    ay: int
    bx: int
    by: int
    x: int
    y: int

    def shifted(self, offset: int) -> "Machine":
        return Machine(self.ax, self.ay, self.bx, self.by, self.x + offset, self.y + offset)


def _match(pattern, line: str) -> Tuple[int, int]:
    m = pattern.match(line.strip())
    if not m:
        raise PuzzleInputError("unexpected line")
    return int(m.group(1)), int(m.group(2))


def read_machines(text: str) -> List[Machine]:
    """Read blocks of three lines (button A, button B, prize).

    Blocks are separated by one blank line, which may be omitted at the end.

    Raises:
        PuzzleInputError: ``unexpected line`` for a malformed line and
            ``unexpected EOF`` for a truncated block.
    """
    rows = lines(text)
    machines = []
    i = 0
    while i < len(rows):
        block = rows[i:i + 3]
        values: List[int] = []
        for pattern, line in zip((_BUTTON_RE, _BUTTON_RE, _PRIZE_RE), block):
            values.extend(_match(pattern, line))
        if len(block) < 3:
            raise PuzzleInputError("unexpected EOF")
        machines.append(Machine(*values))
        i += 3
        if i < len(rows):
            if rows[i].strip():
                raise PuzzleInputError("unexpected line")
            i += 1
    return machines


def min_tokens(machine: Machine) -> Optional[int]:
    """Solve the system with Cramer's rule; None when no whole solution exists."""
    m = machine
    det = m.ax * m.by - m.ay * m.bx
    if det == 0:
        return None
    a_num = m.x * m.by - m.y * m.bx
    b_num = m.ax * m.y - m.ay * m.x
    if a_num % det or b_num % det:
        return None
    a, b = a_num // det, b_num // det
    if a < 0 or b < 0:
        return None
    return 3 * a + b


def total_tokens(machines: List[Machine], offset: int = 0) -> int:
    total = 0
    for machine in machines:
        tokens = min_tokens(machine.shifted(offset))
        if tokens is not None:
            total += tokens
    return total


def solve(text: str) -> Tuple[int, int]:
    machines = read_machines(text)
    logger.debug("Read %d claw machines", len(machines))
    return total_tokens(machines), total_tokens(machines, PRIZE_OFFSET)
