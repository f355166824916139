"""Tests for the prompt_toolkit completer."""

import pytest
from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document

from lesshint.cli.completers import VariableHintCompleter
from lesshint.config.settings import HintsConfig


@pytest.fixture
def completer():
    return VariableHintCompleter(context_text="@color: red;\n@bg-color: blue;")


def _complete(completer, text):
    document = Document(text, cursor_position=len(text))
    return list(completer.get_completions(document, CompleteEvent(text_inserted=True)))


def test_no_completions_without_sigil(completer):
    """Test that plain text does not start a session."""
    assert _complete(completer, "a") == []
    assert completer.engine.session is None


def test_sigil_offers_all_variables(completer):
    """Test completions right after the sigil."""
    completions = _complete(completer, "@")

    assert [c.text for c in completions] == ["bg-color", "color"]
    assert all(c.start_position == 0 for c in completions)


def test_typing_filters_and_replaces_typed_text(completer):
    """Test that completions replace only the text typed after the sigil."""
    _complete(completer, "@")
    completions = _complete(completer, "@bg")

    assert [c.text for c in completions] == ["bg-color"]
    assert completions[0].start_position == -2
    assert completions[0].display_meta_text == "blue"


def test_invalid_char_ends_session(completer):
    """Test that a space closes the completion session."""
    _complete(completer, "@")
    assert _complete(completer, "@c ") == []
    assert completer.engine.session is None


def test_new_sigil_restarts_session(completer):
    """Test that another sigil after a closed session starts again."""
    _complete(completer, "@")
    _complete(completer, "@c;")
    completions = _complete(completer, "@c; @")

    assert len(completions) == 2
    assert completer.engine.session.start_position.column == 5


def test_declarations_in_prompt_are_offered():
    """Test that variables declared in the prompt itself complete."""
    completer = VariableHintCompleter()
    completions = _complete(completer, "@gap: 4px; @")

    assert [c.text for c in completions] == ["gap"]


def test_add_context():
    """Test appending declarations to the context text."""
    completer = VariableHintCompleter()
    completer.add_context("@a: 1;")
    completer.add_context("@b: 2;")

    assert [c.text for c in _complete(completer, "@")] == ["a", "b"]


def test_custom_sigil():
    """Test completion with an SCSS sigil."""
    completer = VariableHintCompleter(HintsConfig(sigil="$"), context_text="$gutter: 8px;")

    assert _complete(completer, "@") == []
    assert [c.text for c in _complete(completer, "$g")] == []
    assert completer.engine.session is None
    assert [c.text for c in _complete(completer, "$")] == ["gutter"]


def test_session_does_not_carry_into_next_prompt(completer):
    """Test that plain text on a fresh prompt line offers nothing."""
    _complete(completer, "@")
    _complete(completer, "@bg")

    assert _complete(completer, "x") == []
    assert completer.engine.session is None


def test_deleting_sigil_ends_session(completer):
    """Test that removing the sigil stops the hints."""
    _complete(completer, "@")
    _complete(completer, "@bg")

    assert _complete(completer, "bg") == []
    assert completer.engine.session is None


def test_session_kept_while_sigil_present(completer):
    """Test that the span after an unchanged sigil keeps completing."""
    _complete(completer, "@")
    _complete(completer, "@b")
    completions = _complete(completer, "@bg")

    assert [c.text for c in completions] == ["bg-color"]
    assert completions[0].start_position == -2
