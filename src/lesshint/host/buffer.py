"""In-memory text buffer host."""

from __future__ import annotations

from lesshint.core.session import Position
from lesshint.host.base import HostAdapter, index_to_position, position_to_index


class TextBufferHost(HostAdapter):
    """A plain string buffer with a single cursor.

    Typing goes through :meth:`type_text`, which inserts at the cursor and
    returns the last character inserted, ready to hand to the engine as the
    implicit character.
    """

    def __init__(self, text: str = "", cursor: Position | None = None):
        self.text = text
        self.cursor = cursor if cursor is not None else index_to_position(text, len(text))

    def get_cursor_position(self) -> Position:
        return self.cursor

    def get_full_text(self) -> str:
        return self.text

    def get_range_text(self, start: Position, end: Position) -> str:
        return self.text[position_to_index(self.text, start):position_to_index(self.text, end)]

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        start_index = position_to_index(self.text, start)
        end_index = position_to_index(self.text, end)
        self.text = self.text[:start_index] + text + self.text[end_index:]
        self.cursor = index_to_position(self.text, start_index + len(text))

    def type_text(self, text: str) -> str | None:
        """Insert *text* at the cursor and move the cursor past it."""
        if not text:
            return None
        self.replace_range(text, self.cursor, self.cursor)
        return text[-1]

    def move_cursor(self, line: int, column: int) -> None:
        """Place the cursor at an explicit position."""
        self.cursor = Position(line, column)
