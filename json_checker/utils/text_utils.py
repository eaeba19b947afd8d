"""Text utility functions."""

from bisect import bisect_right
from typing import List, Tuple


def line_starts(text: str) -> List[int]:
    """Offsets at which each line of ``text`` begins."""
    starts = [0]
    for index, char in enumerate(text):
        if char == '\n':
            starts.append(index + 1)
    return starts


def offset_to_position(starts: List[int], offset: int) -> Tuple[int, int]:
    """Convert a character offset to a 0-based (line, character) pair."""
    offset = max(offset, 0)
    line = bisect_right(starts, offset) - 1
    return line, offset - starts[line]
