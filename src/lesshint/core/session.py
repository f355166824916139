"""Completion session state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from lesshint.hints.declarations import Declaration


class Position(NamedTuple):
    """Zero-based line/column address in a host document."""

    line: int
    column: int


@dataclass
class HintSession:
    """Holds all state for one completion interaction.

    A session begins when the sigil is typed and ends when the cursor leaves
    the valid span, an invalid character is typed, or a candidate is applied.
    ``display_forms[i]`` is always the rendering of ``candidates[i]``.
    """

    start_position: Position
    typed_since_start: str = ""
    candidates: list[Declaration] = field(default_factory=list)
    display_forms: list[str] = field(default_factory=list)

    def update(
        self,
        typed: str,
        candidates: list[Declaration],
        display_forms: list[str],
    ) -> None:
        """Replace the query and both candidate lists in one step."""
        if len(candidates) != len(display_forms):
            raise ValueError(
                f"candidates ({len(candidates)}) and display forms "
                f"({len(display_forms)}) must be index-aligned"
            )
        self.typed_since_start = typed
        self.candidates = list(candidates)
        self.display_forms = list(display_forms)

    def resolve(self, display_form: str) -> Declaration | None:
        """Get the candidate rendered as *display_form*, if it is listed."""
        try:
            index = self.display_forms.index(display_form)
        except ValueError:
            return None
        return self.candidates[index]

    def accepts(self, cursor: Position) -> bool:
        """Check that *cursor* is still inside the span this session covers."""
        return (
            cursor.line == self.start_position.line
            and cursor.column >= self.start_position.column
        )
