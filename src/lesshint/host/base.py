"""Host adapter protocol.

The engine never owns the document. Everything it reads or writes goes
through one of these four calls, made synchronously from the host's own
keystroke or selection callback.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from lesshint.core.session import Position


class HostAdapter(ABC):
    """Abstract base class for editor hosts."""

    @abstractmethod
    def get_cursor_position(self) -> Position:
        """Get the current cursor position."""
        ...

    @abstractmethod
    def get_full_text(self) -> str:
        """Get the whole document text."""
        ...

    @abstractmethod
    def get_range_text(self, start: Position, end: Position) -> str:
        """Get the text of the half-open span [start, end)."""
        ...

    @abstractmethod
    def replace_range(self, text: str, start: Position, end: Position) -> None:
        """Replace the half-open span [start, end) with *text*."""
        ...


def position_to_index(text: str, position: Position) -> int:
    """Convert a line/column position into an offset in *text*.

    Columns past the end of a line are clamped to the line end.
    """
    lines = text.split("\n")
    if position.line < 0 or position.line >= len(lines):
        raise IndexError(f"line {position.line} outside document of {len(lines)} lines")

    index = sum(len(line) + 1 for line in lines[:position.line])
    return index + max(0, min(position.column, len(lines[position.line])))


def index_to_position(text: str, index: int) -> Position:
    """Convert an offset in *text* into a line/column position."""
    index = max(0, min(index, len(text)))
    line = text.count("\n", 0, index)
    line_start = text.rfind("\n", 0, index) + 1
    return Position(line, index - line_start)
