#!/usr/bin/env python3
"""
Offset to line/column mapping.

A PositionIndex is built once per analysis pass from the raw text and is
never shared between passes.
"""

from bisect import bisect_right
from typing import List, Optional

from ..models import Position


class PositionIndex:
    """Maps absolute text offsets to 0-based (line, column) positions."""

    def __init__(self, text: str):
        self.text_length = len(text)
        self.line_starts: List[int] = []

        current_offset = 0
        for line in text.split('\n'):
            self.line_starts.append(current_offset)
            # +1 for the '\n' consumed by split
            current_offset += len(line) + 1

    def resolve(self, offset: int) -> Optional[Position]:
        """Resolve an offset to a Position, or None if it cannot be placed."""
        if offset < 0 or offset > self.text_length:
            return None

        line = bisect_right(self.line_starts, offset) - 1
        return Position(line=line, column=offset - self.line_starts[line])

    def offset_of(self, position: Position) -> Optional[int]:
        """Rebuild the absolute offset for a Position produced by resolve()."""
        if position.line < 0 or position.line >= len(self.line_starts):
            return None

        offset = self.line_starts[position.line] + position.column
        if position.column < 0 or offset > self.text_length:
            return None
        return offset

    @property
    def line_count(self) -> int:
        return len(self.line_starts)
