"""Interactive completion playground using prompt_toolkit."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from lesshint.cli.completers import VariableHintCompleter
from lesshint.hints.declarations import DeclarationScanner
from lesshint.hints.registry import HintProviderRegistry

if TYPE_CHECKING:
    from pathlib import Path

    from lesshint.config.settings import LessHintConfig


def run_playground(
    stylesheet: Path | None,
    config: LessHintConfig,
    console: Console,
) -> None:
    """Run the prompt loop until the user exits."""
    context_text = stylesheet.read_text(errors="ignore") if stylesheet else ""
    completer = VariableHintCompleter(config.hints, context_text=context_text)
    scanner = DeclarationScanner(config.hints.sigil, config.hints.identifier_chars)

    prompt_session: PromptSession = PromptSession(
        completer=completer,
        complete_while_typing=True,
        multiline=False,
    )

    registry = HintProviderRegistry()
    registry.register_from_config(completer.engine, config.registry)
    language = stylesheet.suffix.lstrip(".") if stylesheet else config.registry.languages[0]
    if not registry.providers_for(language):
        console.print(
            f"[yellow]lesshint is not registered for '{escape(language)}' documents;"
            " add it under registry.languages to get hints there.[/yellow]"
        )

    _print_welcome(stylesheet, len(scanner.scan(context_text)), config, console)

    while True:
        try:
            line = prompt_session.prompt(
                HTML('<style fg="ansibrightcyan" bold="true">❯ </style>'),
            )
        except KeyboardInterrupt:
            console.print("[dim]Use /exit or Ctrl-D to quit[/dim]")
            continue
        except EOFError:
            break

        # Each accepted line is a new document; no session survives it
        completer.engine.end_session()

        if line.strip().lower() in ("/exit", "/quit"):
            break
        if not line.strip():
            continue

        # Lines entered here become part of the document for later prompts
        completer.add_context(line)
        for declaration in scanner.scan(line):
            console.print(
                f"[green]+[/green] {escape(config.hints.sigil + declaration.name)}"
                f" [dim]{escape(declaration.value)}[/dim]"
            )

    console.print("[dim]Goodbye![/dim]")


def _print_welcome(
    stylesheet: Path | None,
    declaration_count: int,
    config: LessHintConfig,
    console: Console,
) -> None:
    source = escape(str(stylesheet)) if stylesheet else "[dim]none[/dim]"
    lines = [
        "[bold cyan]lesshint playground[/bold cyan]",
        "",
        f"  File          {source}",
        f"  Declarations  {declaration_count}",
        "",
        f"  Type [cyan]{escape(config.hints.sigil)}[/cyan] to complete a variable,"
        " [cyan]/exit[/cyan] to quit.",
    ]
    console.print(Panel.fit("\n".join(lines), border_style="cyan"))
