"""Shared puzzle input parsing utilities.

Consolidates the small text helpers used across the day modules: splitting
lines and blank-line separated blocks, pulling integers out of free text and
turning character maps into grids.
"""

import re
from typing import List


class PuzzleInputError(ValueError):
    """Raised when a puzzle input does not have the expected shape."""


_INT_RE = re.compile(r"-?\d+")


def lines(text: str) -> List[str]:
    """Split text into lines, dropping carriage returns.

    A trailing newline does not produce an empty last line.

    Examples:
        >>> lines("a\\r\\nb\\n")
        ['a', 'b']
    """
    return text.replace("\r", "").splitlines()


def blocks(text: str) -> List[str]:
    """Split text into blank-line separated chunks, ignoring empty chunks.

    Examples:
        >>> blocks("a\\nb\\n\\nc\\n")
        ['a\\nb', 'c']
    """
    chunks = re.split(r"\n\s*\n", text.replace("\r", ""))
    return [chunk.strip("\n") for chunk in chunks if chunk.strip()]


def ints(text: str) -> List[int]:
    """Return every (optionally negative) integer found in *text*.

    Examples:
        >>> ints("p=0,4 v=3,-3")
        [0, 4, 3, -3]
    """
    return [int(match) for match in _INT_RE.findall(text)]


def parse_int(token: str, what: str = "value") -> int:
    """Parse a single integer token.

    Raises:
        PuzzleInputError: If *token* is not an integer.
    """
    try:
        return int(token)
    except (TypeError, ValueError):
        raise PuzzleInputError(f"invalid {what}: {token!r}") from None


def read_grid(text: str) -> List[List[str]]:
    """Turn a character map into a list of rows of single characters."""
    return [list(line) for line in lines(text)]


__all__ = ["PuzzleInputError", "lines", "blocks", "ints", "parse_int", "read_grid"]
