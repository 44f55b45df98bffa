"""
Run-all command implementation.
Solves every selected day that has a puzzle input and checks the answers
against the ones recorded in the configuration.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple, Union

from ..core.command_context import CommandContext
from ..core.command_utils import resolve_days
from ..core.registry import DAYS, get_solver

logger = logging.getLogger(__name__)

SOLVED = "solved"
CORRECT = "correct"
MISMATCH = "mismatch"
SKIPPED = "skipped"
FAILED = "failed"


@dataclass
class DayResult:
    day: int
    title: str
    status: str
    answers: Optional[Tuple[Any, Any]] = None
    expected: Optional[Tuple[Any, Any]] = None
    elapsed: float = 0.0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status in (SOLVED, CORRECT, SKIPPED)


def _matches(answers: Tuple[Any, Any], expected: Tuple[Any, Any]) -> bool:
    # Configured answers may be read back from YAML as ints or strings.
    return all(str(a) == str(e) for a, e in zip(answers, expected))


def run(
    config_path: Optional[str],
    days: Optional[Union[str, Iterable[int]]] = None,
) -> List[DayResult]:
    """Solve the selected days (all days by default).

    Days without an input file are reported as skipped. A failing day is
    logged and recorded, and the remaining days still run.
    """
    selected = resolve_days(days)
    logger.info(f"Starting run-all for {len(selected)} day(s)")
    results = []

    with CommandContext(config_path) as ctx:
        for day in selected:
            title = DAYS[day].title
            if not ctx.has_input(day):
                logger.info(f"Skipping day {day}: no input at {ctx.input_path(day)}")
                results.append(DayResult(day, title, SKIPPED))
                continue

            expected = ctx.expected_answers(day)
            started = time.perf_counter()
            try:
                answers = tuple(get_solver(day)(ctx.read_input(day), **ctx.day_params(day)))
            except Exception as exc:
                logger.error(f"Day {day} failed: {exc}")
                results.append(DayResult(day, title, FAILED, expected=expected, error=str(exc)))
                continue
            elapsed = time.perf_counter() - started

            if expected is None:
                status = SOLVED
            elif _matches(answers, expected):
                status = CORRECT
            else:
                status = MISMATCH
                logger.warning(f"Day {day} answers {answers} do not match expected {expected}")
            results.append(DayResult(day, title, status, answers, expected, elapsed))

    failed = sum(1 for r in results if not r.ok)
    logger.info(f"run-all finished: {len(results) - failed} ok, {failed} failed or mismatched")
    return results
