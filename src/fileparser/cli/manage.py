"""
CLI commands for the file parser:
- parse: split a file into batches and show them
- types: list the registered file extensions
"""

import json
import logging
import os
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from fileparser.consts import LOG_LEVEL
from fileparser.dialects import FileType
from fileparser.factory import get_registry, parse_file

app = typer.Typer(
    help="📄 File Parser - Strip comments and split config files and SQL scripts into batches",
    no_args_is_help=True,
)
console = Console()
logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.getLevelName(LOG_LEVEL)
    if not isinstance(level, int):
        console.print(f"[red]Error: Unknown log level {escape(LOG_LEVEL)}[/red]")
        raise typer.Exit(code=1)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.callback()
def main():
    """Parse configuration files and SQL scripts into batches."""


@app.command()
def parse(
    path: str = typer.Argument(..., help="File to parse"),
    file_type: Optional[str] = typer.Option(
        None, "--type", "-t", help="File type: config or sql (detected from the extension if omitted)"
    ),
    encoding: Optional[str] = typer.Option(None, "--encoding", "-e", help="Text encoding of the file"),
    as_json: bool = typer.Option(False, "--json", help="Print batches as a JSON array"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """
    Strips comments from a file and prints its batches.

    Configuration files give one batch per line. SQL scripts give one
    batch per GO-separated block.
    """
    _configure_logging(verbose)

    try:
        selected = FileType.from_name(file_type) if file_type else get_registry().get_file_type(path)
        if selected is None:
            _, ext = os.path.splitext(path)
            raise ValueError(f"Cannot detect file type for extension '{ext}', use --type")
        logger.debug(f"Using file type {selected.value} for {path}")

        batches = parse_file(path, file_type=selected, encoding=encoding)
    except (ValueError, OSError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(batches, indent=2, ensure_ascii=False))
        return

    if not batches:
        console.print("[yellow]No batches found.[/yellow]")
        return

    console.print(f"[bold green]{len(batches)} batch(es)[/bold green] from [cyan]{escape(path)}[/cyan]\n")

    for i, batch in enumerate(batches):
        if selected is FileType.SQL_SCRIPT:
            body = Syntax(batch, "sql", theme="monokai", line_numbers=True)
        else:
            body = escape(batch)
        console.print(Panel(body, title=f"#{i + 1}", title_align="left", border_style="blue"))


@app.command()
def types(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging")):
    """Shows the registered file extensions and their file types."""
    _configure_logging(verbose)
    extension_map = get_registry().get_extension_map()

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Extension", style="white")
    table.add_column("File Type", style="green")

    for ext, file_type in sorted(extension_map.items()):
        table.add_row(ext, file_type.value)

    console.print(table)
