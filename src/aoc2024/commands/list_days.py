"""List command implementation: the day index with input availability."""

import logging
from typing import Any, Dict, List, Optional

from ..core.command_context import CommandContext
from ..core.registry import DAYS

logger = logging.getLogger(__name__)


def run(config_path: Optional[str]) -> List[Dict[str, Any]]:
    """Return one entry per day with its title and input file status."""
    with CommandContext(config_path) as ctx:
        rows = [
            {
                "day": info.day,
                "title": info.title,
                "input_path": str(ctx.input_path(info.day)),
                "has_input": ctx.has_input(info.day),
            }
            for info in DAYS.values()
        ]
    logger.debug(f"{sum(r['has_input'] for r in rows)} of {len(rows)} days have inputs")
    return rows
