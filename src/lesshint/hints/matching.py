"""Candidate filtering, ranking and display rendering."""

from __future__ import annotations

from collections.abc import Iterable

from rich.markup import escape

from lesshint.hints.declarations import Declaration

DEFAULT_DISPLAY_TEMPLATE = "{name} [dim]{value}[/dim]"


def is_subsequence(query: str, name: str) -> bool:
    """Check that every character of *query* appears in *name* in order.

    Comparison is case-insensitive and the characters need not be adjacent,
    so ``"bgc"`` matches ``"bg-color"``.
    """
    name = name.lower()
    pos = 0
    for char in query.lower():
        index = name.find(char, pos)
        if index == -1:
            return False
        pos = index + 1
    return True


def filter_declarations(
    declarations: Iterable[Declaration],
    query: str,
) -> list[Declaration]:
    """Keep declarations whose name contains *query* as a subsequence."""
    return [decl for decl in declarations if is_subsequence(query, decl.name)]


def rank_declarations(declarations: Iterable[Declaration]) -> list[Declaration]:
    """Sort by name, case-insensitively; equal names keep document order."""
    return sorted(declarations, key=lambda decl: decl.name.lower())


def render_display_form(
    declaration: Declaration,
    template: str = DEFAULT_DISPLAY_TEMPLATE,
) -> str:
    """Render a declaration as rich markup: the name, then the dimmed value.

    The value is trimmed for display only; ``Declaration.value`` stays raw.
    """
    return template.format(
        name=escape(declaration.name),
        value=escape(declaration.value.strip()),
    )
