"""prompt_toolkit completer driven by the variable hint engine."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from lesshint.config.settings import HintsConfig
from lesshint.hints.engine import VariableHintEngine
from lesshint.host.prompt import PromptToolkitHost

logger = logging.getLogger(__name__)


class VariableHintCompleter(Completer):
    """Completes ``@variables`` declared in the prompt or in context text."""

    def __init__(self, config: HintsConfig | None = None, context_text: str = ""):
        self.host = PromptToolkitHost(context_text=context_text)
        self.engine = VariableHintEngine(self.host, config)

    def get_completions(
        self, document: Document, complete_event: CompleteEvent
    ) -> Iterable[Completion]:
        """Get completions for current input."""
        try:
            yield from self._get_completions_inner(document)
        except Exception:
            # Never let a completer crash take down the prompt.
            logger.debug("Variable completion failed", exc_info=True)
            self.engine.end_session()
            return

    def _get_completions_inner(self, document: Document) -> Iterable[Completion]:
        self.host.document = document
        implicit_char = document.char_before_cursor or None

        if self.engine.session is not None and not self._sigil_still_typed(document):
            # The sigil that opened the session is gone, or the prompt was reset
            self.engine.end_session()

        if self.engine.session is None and not self.engine.can_activate(implicit_char):
            return

        if self.engine.get_candidates(implicit_char) is None:
            return

        session = self.engine.session
        for declaration in session.candidates:
            yield Completion(
                text=declaration.name,
                start_position=-len(session.typed_since_start),
                display=declaration.name,
                display_meta=declaration.value.strip(),
            )

    def _sigil_still_typed(self, document: Document) -> bool:
        """Check that the session start still sits right after (or on) the sigil."""
        start = self.engine.session.start_position
        if start.line >= document.line_count:
            return False

        line = document.lines[start.line]
        if start.column > len(line):
            return False

        sigil = self.engine.sigil
        if line[start.column:start.column + 1] == sigil:
            return True
        return start.column > 0 and line[start.column - 1] == sigil

    def add_context(self, text: str) -> None:
        """Append *text* to the declarations available for completion."""
        if self.host.context_text:
            self.host.context_text = f"{self.host.context_text}\n{text}"
        else:
            self.host.context_text = text
