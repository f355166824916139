"""Main CLI entry point using Typer."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lesshint.config.settings import CONFIG_FILENAME, LessHintConfig, find_config_path
from lesshint.hints.engine import VariableHintEngine
from lesshint.hints.matching import render_display_form
from lesshint.host.buffer import TextBufferHost

app = typer.Typer(
    name="lesshint",
    help="Variable completion for LESS-style stylesheets",
    no_args_is_help=True,
)
console = Console(highlight=False)

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help=f"Path to {CONFIG_FILENAME} (default: search current and parent directories)",
)
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")


@app.command()
def init(
    directory: Path = typer.Argument(
        Path("."),
        help="Directory to initialize (default: current directory)",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing config file",
    ),
) -> None:
    """Write a lesshint.yaml with the default settings."""
    directory = directory.resolve()

    if not directory.exists():
        console.print(f"[red]Directory does not exist: {directory}[/red]")
        raise typer.Exit(1)

    config_path = directory / CONFIG_FILENAME
    if config_path.exists() and not force:
        console.print(f"[yellow]{CONFIG_FILENAME} already exists. Use --force to overwrite.[/yellow]")
        return

    _create_config_template(config_path)
    console.print(f"  [green]+[/green] {CONFIG_FILENAME}  (sigil, display and registration settings)")


@app.command()
def scan(
    stylesheet: Path = typer.Argument(..., help="Stylesheet to scan"),
    config_path: Path = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List every variable declaration in a stylesheet."""
    config = _load_config(config_path, verbose)
    engine = VariableHintEngine(TextBufferHost(_read_stylesheet(stylesheet)), config.hints)
    declarations = engine.scanner.scan(engine.host.get_full_text())

    if not declarations:
        console.print("[yellow]No declarations found[/yellow]")
        return

    table = Table(title=escape(str(stylesheet)), show_header=True, title_style="bold")
    table.add_column("Line", justify="right", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Value")
    for decl in declarations:
        table.add_row(str(decl.line), escape(decl.name), escape(decl.value.strip()))

    console.print(table)


@app.command()
def complete(
    stylesheet: Path = typer.Argument(..., help="Stylesheet providing the declarations"),
    query: str = typer.Argument("", help="Text typed after the sigil, e.g. 'bgc'"),
    names_only: bool = typer.Option(
        False,
        "--names",
        "-n",
        help="Print only the variable names",
    ),
    config_path: Path = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show the ranked completions for a query."""
    config = _load_config(config_path, verbose)
    engine = VariableHintEngine(TextBufferHost(_read_stylesheet(stylesheet)), config.hints)

    candidates = engine.match(query)
    if not candidates:
        console.print("[dim]No hints[/dim]")
        return

    for decl in candidates:
        if names_only:
            console.print(escape(decl.name))
        else:
            console.print(render_display_form(decl, config.hints.display_template))


@app.command()
def playground(
    stylesheet: Path = typer.Argument(
        None,
        help="Stylesheet whose declarations are offered (optional)",
    ),
    config_path: Path = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Try completions interactively in a prompt."""
    config = _load_config(config_path, verbose)
    if stylesheet is not None:
        _read_stylesheet(stylesheet)

    from lesshint.cli.playground import run_playground

    run_playground(stylesheet, config, console)


def _load_config(config_path: Path | None, verbose: bool = False) -> LessHintConfig:
    """Load config from an explicit path or the nearest lesshint.yaml."""
    if config_path is not None and not config_path.exists():
        console.print(f"[red]Config file not found: {escape(str(config_path))}[/red]")
        raise typer.Exit(1)

    path = config_path or find_config_path()
    try:
        config = LessHintConfig.load(path) if path else LessHintConfig()
    except (ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid configuration in {escape(str(path))}:[/red]\n{escape(str(e))}")
        raise typer.Exit(1)

    level = logging.DEBUG if verbose else logging.getLevelName(config.logging.level.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    return config


def _read_stylesheet(path: Path) -> str:
    if not path.is_file():
        console.print(f"[red]File does not exist: {escape(str(path))}[/red]")
        raise typer.Exit(1)
    return path.read_text(errors="ignore")


def _create_config_template(path: Path) -> None:
    """Create lesshint.yaml template."""
    template = """\
# lesshint configuration

hints:
  sigil: "@"                # Trigger character and variable prefix ("$" for SCSS)
  identifier_chars: "\\\\w\\\\-"  # Regex class body for variable names
  strip_sigil: true         # Ignore a leading sigil in the typed query
  display_template: "{name} [dim]{value}[/dim]"

registry:
  languages:
    - "less"
  priority: 0

logging:
  level: "WARNING"
"""
    path.write_text(template)


if __name__ == "__main__":
    app()
