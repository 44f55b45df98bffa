"""
Solve command implementation.
Runs a single day's solver against its puzzle input.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from ..core.command_context import CommandContext
from ..core.registry import get_solver

logger = logging.getLogger(__name__)

STDIN = "-"


def read_text(path: str) -> str:
    """Read a puzzle input from *path*, or from stdin when *path* is ``-``."""
    if path == STDIN:
        return sys.stdin.read()
    candidate = Path(path).expanduser()
    if not candidate.is_file():
        raise FileNotFoundError(f"Puzzle input not found: {candidate}")
    return candidate.read_text(encoding="utf-8")


def run(
    config_path: Optional[str],
    day: int,
    input_path: Optional[str] = None,
    params: Optional[Dict[str, Any]] = None,
) -> Tuple[Any, Any]:
    """Solve one day and return its ``(part1, part2)`` answers.

    Args:
        config_path: Path to the main configuration file
        day: Puzzle day number
        input_path: Input file, ``-`` for stdin, or None for the configured input
        params: Solver parameters overriding the configured ones
    """
    solver = get_solver(day)

    with CommandContext(config_path) as ctx:
        if input_path is None:
            logger.info(f"Reading day {day} input from {ctx.input_path(day)}")
            text = ctx.read_input(day)
        else:
            logger.info(f"Reading day {day} input from {'stdin' if input_path == STDIN else input_path}")
            text = read_text(input_path)
        day_params = ctx.day_params(day, params)

    if day_params:
        logger.debug(f"Day {day} parameters: {day_params}")
    started = time.perf_counter()
    answers = solver(text, **day_params)
    logger.info(f"Solved day {day} in {time.perf_counter() - started:.3f}s")
    return answers
