"""
Day 9: Disk Fragmenter.

The disk map alternates file lengths and free-space lengths. Part one moves
file blocks one at a time from the end into the leftmost free block; part two
moves whole files. Both answers are the filesystem checksum (sum of position
times file ID).
"""

import logging
from typing import List, Optional, Tuple

from ..core.parsing import PuzzleInputError

logger = logging.getLogger(__name__)

TITLE = "Disk Fragmenter"


def read_disk_map(text: str) -> List[int]:
    digits = text.strip()
    if not digits.isdigit():
        raise PuzzleInputError(f"invalid disk map: {digits[:20]!r}")
    return [int(d) for d in digits]


def expand(disk_map: List[int]) -> List[Optional[int]]:
    """Lay the disk map out block by block; free blocks are None."""
    blocks: List[Optional[int]] = []
    for i, length in enumerate(disk_map):
        blocks.extend([i // 2 if i % 2 == 0 else None] * length)
    return blocks


def checksum(blocks: List[Optional[int]]) -> int:
    return sum(pos * file_id for pos, file_id in enumerate(blocks) if file_id is not None)


def compact_blocks(disk_map: List[int]) -> int:
    blocks = expand(disk_map)
    left, right = 0, len(blocks) - 1
    while True:
        while left < len(blocks) and blocks[left] is not None:
            left += 1
        while right >= 0 and blocks[right] is None:
            right -= 1
        if left >= right:
            break
        blocks[left], blocks[right] = blocks[right], None
    return checksum(blocks)


def compact_files(disk_map: List[int]) -> int:
    files = []  # (start, length, id)
    spans = []  # [start, length]
    pos = 0
    for i, length in enumerate(disk_map):
        if i % 2 == 0:
            files.append((pos, length, i // 2))
        elif length:
            spans.append([pos, length])
        pos += length

    total = 0
    for start, length, file_id in reversed(files):
        for span in spans:
            if span[0] >= start:
                break
            if span[1] >= length:
                start = span[0]
                span[0] += length
                span[1] -= length
                break
        total += file_id * (length * start + length * (length - 1) // 2)
    return total


def solve(text: str) -> Tuple[int, int]:
    disk_map = read_disk_map(text)
    logger.debug("Disk map has %d entries", len(disk_map))
    return compact_blocks(disk_map), compact_files(disk_map)
