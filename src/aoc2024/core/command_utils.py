"""Shared utilities for command implementations.

Provides common patterns used across multiple commands.
"""

from typing import Any, Dict, Iterable, List, Optional, Union

import yaml

from .registry import available_days, parse_day_selection


def resolve_days(selection: Optional[Union[str, Iterable[int]]] = None) -> List[int]:
    """Resolve a day selection to the list of days to process.

    Args:
        selection: ``None`` for every available day, a selection string such
            as ``"1,3,5-7"``, or an iterable of day numbers.

    Returns:
        Sorted list of day numbers

    Raises:
        ValueError: If the selection names unknown days or is malformed
    """
    if selection is None:
        return available_days()
    if isinstance(selection, str):
        return parse_day_selection(selection)
    return parse_day_selection(",".join(str(day) for day in selection))


def parse_params(pairs: Iterable[str]) -> Dict[str, Any]:
    """Parse ``KEY=VALUE`` pairs, reading each value as a YAML scalar.

    Examples:
        >>> parse_params(["width=11", "name=abc"])
        {'width': 11, 'name': 'abc'}
    """
    params: Dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got '{pair}'")
        params[key] = yaml.safe_load(value) if value.strip() else ""
    return params


def format_answer(value: Any) -> str:
    return "" if value is None else str(value)
