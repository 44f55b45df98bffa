from __future__ import annotations

import logging
import os
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from .commands import run_all as run_all_cmd
from .commands import solve as solve_cmd
from .core.config import ConfigManager, DEFAULT_CONFIG_PATH
from .core.registry import DAYS, get_solver

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = str(DEFAULT_CONFIG_PATH)

__all__ = [
    'solve',
    'run',
    'run_all',
    'status',
]


def solve(day: int, text: str, **params: Any) -> Tuple[Any, Any]:
    """Solve *day* for the given puzzle text.

    Only the explicitly passed parameters reach the solver; the configuration
    is not consulted.
    """
    return get_solver(day)(text, **params)


def run(
    day: int,
    input_path: Optional[str] = None,
    config_path: Optional[str] = None,
    **params: Any,
) -> Tuple[Any, Any]:
    """Solve *day* using the configured input and parameters.

    Args:
        day: Puzzle day number.
        input_path: Optional input file (``-`` reads stdin); defaults to the
            configured input for the day.
        config_path: Path to main YAML config; defaults to the data dir config.
        **params: Solver parameters overriding the configured ones.
    """
    cfg_path = config_path or _DEFAULT_CONFIG
    return solve_cmd.run(cfg_path, day, input_path, params)


def run_all(
    days: Optional[Union[str, Iterable[int]]] = None,
    config_path: Optional[str] = None,
) -> List[run_all_cmd.DayResult]:
    """Solve every selected day with an input file and return the results."""
    cfg_path = config_path or _DEFAULT_CONFIG
    return run_all_cmd.run(cfg_path, days)


def status(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Return configuration and input status for programmatic use."""
    cfg_path = config_path or _DEFAULT_CONFIG
    info: Dict[str, Any] = {'config_path': cfg_path}
    if not os.path.exists(cfg_path):
        info.update({'valid': False, 'error': f'Config file not found: {cfg_path}'})
        return info
    try:
        cm = ConfigManager(cfg_path)
        valid = cm.validate_config()
        inputs = {day: cm.get_input_path(day).is_file() for day in DAYS} if valid else {}
        info.update({
            'valid': bool(valid),
            'inputs_dir': str(cm.get_inputs_dir()) if valid else None,
            'days': sorted(DAYS),
            'inputs_available': sorted(day for day, present in inputs.items() if present),
        })
        return info
    except Exception as e:
        info.update({'valid': False, 'error': str(e)})
        return info
