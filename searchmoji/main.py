#!/usr/bin/env python3
"""
Main CLI entry point for searchmoji
"""

from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from searchmoji import __version__
from searchmoji.config.settings import get_data_source, get_log_level, validate_all_env_vars
from searchmoji.exceptions import SearchmojiError
from searchmoji.services.filtering import filter_records
from searchmoji.services.record_source import load_records
from searchmoji.utils.logging_utils import setup_logging
from searchmoji.utils.output import console, print_json

app = typer.Typer(help="Searchmoji - search emojis by name or keyword and copy them.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
):
    """
    searchmoji - Terminal emoji picker

    [bold]Examples:[/bold]

    Open the picker:
        [cyan]searchmoji ui[/cyan]

    Print matching emojis:
        [cyan]searchmoji find happy[/cyan]
    """
    for error in validate_all_env_vars():
        console.print(f"[yellow]Warning: {error}[/yellow]")

    try:
        level = "DEBUG" if verbose else get_log_level()
    except SearchmojiError:
        level = "INFO"
    setup_logging(level)


@app.command()
def ui(
    source: Optional[str] = typer.Option(
        None, "--source", "-s", help="Path or http(s) URL of the emoji JSON payload"
    ),
):
    """Open the interactive picker."""
    from searchmoji.ui.app import run_app

    try:
        run_app(get_data_source(source))
    except KeyboardInterrupt:
        pass
    except SearchmojiError as e:
        console.print(f"❌ Error: {e}", style="red")
        raise typer.Exit(1) from e


@app.command()
def find(
    query: str = typer.Argument("", help="Text to match against names and keywords"),
    source: Optional[str] = typer.Option(
        None, "--source", "-s", help="Path or http(s) URL of the emoji JSON payload"
    ),
    limit: int = typer.Option(50, "--limit", "-n", min=1, help="Maximum emojis to show"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Print the emojis matching QUERY."""
    try:
        records = load_records(get_data_source(source))
    except SearchmojiError as e:
        console.print(f"❌ Error: {e}", style="red")
        raise typer.Exit(1) from e

    matches = filter_records(records, query)

    if json_output:
        print_json([record.to_dict() for record in matches[:limit]])
        return

    if not matches:
        console.print(f"[yellow]No emojis match '{escape(query)}'[/yellow]")
        return

    table = Table(title=f"Emojis matching '{escape(query)}'" if query else "Emojis")
    table.add_column("Emoji", no_wrap=True)
    table.add_column("Name", style="magenta")
    table.add_column("Keywords", style="cyan")
    for record in matches[:limit]:
        table.add_row(escape(record.symbol), escape(record.name), escape(", ".join(record.keywords)))

    console.print(table)
    console.print(f"\n[dim]Showing {min(len(matches), limit)} of {len(matches)} matches[/dim]")


@app.command()
def version():
    """Show searchmoji version"""
    typer.echo(f"searchmoji version {__version__}")


if __name__ == "__main__":
    app()
