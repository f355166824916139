"""Variable hint engine: trigger, extract, filter, rank and insert."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from lesshint.config.settings import HintsConfig
from lesshint.core.session import HintSession
from lesshint.hints.declarations import Declaration, DeclarationScanner
from lesshint.hints.matching import (
    filter_declarations,
    rank_declarations,
    render_display_form,
)

if TYPE_CHECKING:
    from lesshint.host.base import HostAdapter

logger = logging.getLogger(__name__)


@dataclass
class HintList:
    """Hints as handed back to the host."""

    hints: list[str] = field(default_factory=list)
    match: str | None = None  # Hosts must not highlight a matched prefix
    select_initial: bool = True
    handle_wide_results: bool = False

    def __len__(self) -> int:
        return len(self.hints)


class VariableHintEngine:
    """Offers ``@variable`` completions for the host's current document.

    The host calls :meth:`can_activate` for every inserted character. Once it
    returns true, each further keystroke goes through :meth:`get_candidates`
    until it returns ``None`` or the user picks a hint with
    :meth:`apply_selection`.
    """

    def __init__(self, host: HostAdapter, config: HintsConfig | None = None):
        self.host = host
        self.config = config or HintsConfig()
        self.scanner = DeclarationScanner(self.config.sigil, self.config.identifier_chars)
        self._allowed_char = re.compile(
            rf"[{re.escape(self.config.sigil)}{self.config.identifier_chars}]"
        )
        self.session: HintSession | None = None

    @property
    def sigil(self) -> str:
        return self.config.sigil

    def can_activate(self, implicit_char: str | None) -> bool:
        """Start a session if *implicit_char* is the sigil."""
        if not implicit_char or implicit_char != self.sigil:
            return False

        self.session = HintSession(start_position=self.host.get_cursor_position())
        logger.debug("Hint session started at %s", self.session.start_position)
        return True

    def get_candidates(self, implicit_char: str | None = None) -> HintList | None:
        """Get hints for the text typed since the session started.

        Returns ``None`` and ends the session when the position is no longer
        valid; the host should close its hint list.
        """
        if not self.valid_position(implicit_char):
            self.end_session()
            return None

        return self.refine_query(self.session.typed_since_start)

    def refine_query(self, query: str) -> HintList:
        """Filter and rank the document's declarations against *query*.

        Updates the active session, if any, so a later selection resolves
        against exactly the hints returned here.
        """
        candidates = self.match(query)
        display_forms = [
            render_display_form(decl, self.config.display_template)
            for decl in candidates
        ]

        if self.session is not None:
            self.session.update(query, candidates, display_forms)

        return HintList(hints=display_forms)

    def match(self, query: str) -> list[Declaration]:
        """Get the declarations matching *query*, ranked by name."""
        declarations = self.scanner.scan(self.host.get_full_text())
        candidates = rank_declarations(
            filter_declarations(declarations, self._filter_text(query))
        )
        logger.debug(
            "Query %r: %d of %d declarations match",
            query, len(candidates), len(declarations),
        )
        return candidates

    def apply_selection(self, display_form: str) -> bool:
        """Replace the typed span with the name of the chosen hint.

        Only the variable name is inserted, never its value. Unknown hints
        leave the document untouched.
        """
        if self.session is None:
            logger.warning("Selection %r with no active hint session", display_form)
            return False

        declaration = self.session.resolve(display_form)
        if declaration is None:
            logger.warning("Selection %r is not among the current hints", display_form)
            return False

        cursor = self.host.get_cursor_position()
        self.host.replace_range(declaration.name, self.session.start_position, cursor)
        self.end_session()
        return True

    def valid_position(self, implicit_char: str | None) -> bool:
        """Check the session can continue and refresh the typed text.

        Fails when the typed character cannot be part of a variable name, or
        the cursor has left the start line or moved before the start column.
        """
        if self.session is None:
            return False

        if implicit_char and not self._allowed_char.fullmatch(implicit_char):
            logger.debug("Character %r ends the hint session", implicit_char)
            return False

        cursor = self.host.get_cursor_position()
        if not self.session.accepts(cursor):
            logger.debug("Cursor %s left the hint span", cursor)
            return False

        self.session.typed_since_start = self.host.get_range_text(
            self.session.start_position, cursor
        )
        return True

    def end_session(self) -> None:
        """Drop the active session."""
        if self.session is not None:
            logger.debug("Hint session ended")
        self.session = None

    def _filter_text(self, query: str) -> str:
        if self.config.strip_sigil and query.startswith(self.sigil):
            return query[len(self.sigil):]
        return query
