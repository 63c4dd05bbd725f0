#!/usr/bin/env python3
"""
AlgoViz CLI - Step-by-step algorithm playback

Main entrypoint for the algoviz command-line tool.
"""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..logging_config import setup_logging
from .commands import algorithms, log, play

app = typer.Typer(
    name="algoviz",
    help="Deterministic algorithm playback CLI",
    add_completion=False,
)

console = Console()

app.command(name="algorithms")(algorithms.algorithms_command)
app.command(name="log")(log.log_command)
app.command(name="play")(play.play_command)


@app.callback()
def configure(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override ALGOVIZ_LOG_LEVEL"),
    log_format: Optional[str] = typer.Option(None, "--log-format", help="Override ALGOVIZ_LOG_FORMAT (json, text)"),
):
    """Deterministic algorithm playback CLI."""
    setup_logging(level=log_level, fmt=log_format)


@app.command()
def version():
    """Show version information."""
    from . import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]AlgoViz CLI[/bold]", f"v{__version__}")
    table.add_row("Engine", "Event-sourced playback")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
