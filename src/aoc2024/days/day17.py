"""
Day 17: Chronospatial Computer.

A 3-bit computer with registers A, B and C runs a program of (opcode, operand)
pairs. Part one is the program's comma-joined output. Part two is the lowest
initial value of register A that makes the program output a copy of itself.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.parsing import PuzzleInputError, lines, parse_int

logger = logging.getLogger(__name__)

TITLE = "Chronospatial Computer"

ADV, BXL, BST, JNZ, BXC, OUT, BDV, CDV = range(8)


@dataclass
class Computer:
    a: int
    b: int
    c: int
    program: List[int]

    def combo(self, operand: int) -> int:
        if operand <= 3:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        raise ValueError(f"invalid combo operand: {operand}")

    def run(self, a: Optional[int] = None) -> List[int]:
        """Run the program from the top and return everything it outputs.

        Registers are not modified; *a* overrides the initial value of A.
        """
        regs = Computer(self.a if a is None else a, self.b, self.c, self.program)
        out = []
        pc = 0
        while pc + 1 < len(self.program):
            opcode, operand = self.program[pc], self.program[pc + 1]
            pc += 2
            if opcode == ADV:
                regs.a = regs.a >> regs.combo(operand)
            elif opcode == BXL:
                regs.b ^= operand
            elif opcode == BST:
                regs.b = regs.combo(operand) % 8
            elif opcode == JNZ:
                if regs.a != 0:
                    pc = operand
            elif opcode == BXC:
                regs.b ^= regs.c
            elif opcode == OUT:
                out.append(regs.combo(operand) % 8)
            elif opcode == BDV:
                regs.b = regs.a >> regs.combo(operand)
            elif opcode == CDV:
                regs.c = regs.a >> regs.combo(operand)
            else:
                raise ValueError(f"invalid opcode: {opcode}")
        return out


def read_computer(text: str) -> Computer:
    values = {}
    for line in lines(text):
        key, sep, value = line.partition(":")
        if sep:
            values[key.strip()] = value.strip()
    try:
        a, b, c = (parse_int(values[f"Register {r}"], f"register {r}") for r in "ABC")
        program = [parse_int(v, "instruction") for v in values["Program"].split(",")]
    except KeyError as exc:
        raise PuzzleInputError(f"missing {exc.args[0]!r} line") from None
    return Computer(a, b, c, program)


def find_quine(computer: Computer) -> int:
    """Return the lowest A for which the program prints itself, or -1.

    Programs of this kind shift A right by three bits per loop and print one
    value per iteration, so the last output depends only on the highest octal
    digit of A. Digits are chosen from the most significant one down, keeping
    only those that reproduce the matching tail of the program.
    """
    program = computer.program

    def search(a: int, i: int) -> Optional[int]:
        for digit in range(8):
            candidate = a * 8 + digit
            if computer.run(candidate) == program[i:]:
                if i == 0:
                    return candidate
                found = search(candidate, i - 1)
                if found is not None:
                    return found
        return None

    if not program:
        return -1
    result = search(0, len(program) - 1)
    return -1 if result is None else result


def solve(text: str) -> Tuple[str, int]:
    computer = read_computer(text)
    output = ",".join(str(v) for v in computer.run())
    return output, find_quine(computer)
