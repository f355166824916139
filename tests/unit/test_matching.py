"""Tests for subsequence filtering, ranking and rendering."""

from lesshint.hints.declarations import Declaration
from lesshint.hints.matching import (
    filter_declarations,
    is_subsequence,
    rank_declarations,
    render_display_form,
)


def _decls(*names):
    return [Declaration(name=name, value=f"v{i}") for i, name in enumerate(names)]


def test_subsequence_allows_gaps():
    """Test that query characters may be spread through the name."""
    assert is_subsequence("bgc", "bg-color")
    assert is_subsequence("c", "bg-color")
    assert is_subsequence("bcr", "bg-color")


def test_subsequence_respects_order():
    """Test that characters must appear in query order."""
    assert not is_subsequence("cb", "bg-color")


def test_subsequence_consumes_characters():
    """Test that each name character satisfies one query character only."""
    assert is_subsequence("oo", "color")
    assert not is_subsequence("ooo", "color")


def test_subsequence_is_case_insensitive():
    """Test case-insensitive matching."""
    assert is_subsequence("MC", "mainColor")
    assert is_subsequence("mc", "MainColor")


def test_empty_query_matches_everything():
    """Test that an empty query keeps every candidate."""
    assert is_subsequence("", "anything")
    assert len(filter_declarations(_decls("a", "b"), "")) == 2


def test_filter_excludes_non_matches():
    """Test that non-matching names are dropped."""
    kept = filter_declarations(_decls("foo", "bar", "fizz"), "f")

    assert [d.name for d in kept] == ["foo", "fizz"]
    assert filter_declarations(_decls("foo"), "z") == []


def test_rank_is_case_insensitive():
    """Test ascending case-insensitive ordering."""
    ranked = rank_declarations(_decls("beta", "Alpha", "gamma", "Delta"))

    assert [d.name for d in ranked] == ["Alpha", "beta", "Delta", "gamma"]


def test_rank_is_stable_for_ties():
    """Test that names equal under case folding keep document order."""
    decls = [
        Declaration("Size", "first"),
        Declaration("color", "x"),
        Declaration("size", "second"),
        Declaration("SIZE", "third"),
    ]
    ranked = rank_declarations(decls)

    assert [d.value for d in ranked] == ["x", "first", "second", "third"]


def test_render_display_form():
    """Test that the value is dimmed after the name."""
    rendered = render_display_form(Declaration("bg-color", "blue"))

    assert rendered == "bg-color [dim]blue[/dim]"


def test_render_escapes_markup():
    """Test that values containing markup are escaped."""
    rendered = render_display_form(Declaration("grid", "[bold] 1fr"))

    assert rendered.startswith("grid [dim]")
    assert "\\[bold]" in rendered


def test_render_custom_template():
    """Test a custom display template."""
    rendered = render_display_form(Declaration("gap", "4px"), "{name} = {value}")

    assert rendered == "gap = 4px"


def test_render_trims_value():
    """Test that a CRLF line ending and trailing spaces are not displayed."""
    declaration = Declaration("gap", "4px \r")
    rendered = render_display_form(declaration)

    assert rendered == "gap [dim]4px[/dim]"
    assert declaration.value == "4px \r"
