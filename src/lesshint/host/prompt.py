"""prompt_toolkit document host."""

from __future__ import annotations

from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document

from lesshint.core.session import Position
from lesshint.host.base import HostAdapter, position_to_index


class PromptToolkitHost(HostAdapter):
    """Exposes a prompt_toolkit :class:`Document` to the hint engine.

    ``context_text`` is scanned for declarations along with the document, so a
    single-line prompt can complete variables declared in a stylesheet on
    disk. Positions always address the document itself.

    Without a ``buffer`` the host is read-only; prompt_toolkit applies
    completions on its own.
    """

    def __init__(
        self,
        document: Document | None = None,
        context_text: str = "",
        buffer: Buffer | None = None,
    ):
        self.buffer = buffer
        self._document = document or Document()
        self.context_text = context_text

    @property
    def document(self) -> Document:
        if self.buffer is not None:
            return self.buffer.document
        return self._document

    @document.setter
    def document(self, document: Document) -> None:
        self._document = document

    def get_cursor_position(self) -> Position:
        doc = self.document
        return Position(doc.cursor_position_row, doc.cursor_position_col)

    def get_full_text(self) -> str:
        if self.context_text:
            return f"{self.context_text}\n{self.document.text}"
        return self.document.text

    def get_range_text(self, start: Position, end: Position) -> str:
        text = self.document.text
        return text[position_to_index(text, start):position_to_index(text, end)]

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        if self.buffer is None:
            raise RuntimeError("Cannot replace text in a read-only prompt document")

        current = self.buffer.document.text
        start_index = position_to_index(current, start)
        end_index = position_to_index(current, end)
        new_text = current[:start_index] + text + current[end_index:]
        self.buffer.document = Document(new_text, cursor_position=start_index + len(text))

