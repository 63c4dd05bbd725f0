"""
Log command: produce an event log and print it with its digest
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ...core.canonical import log_digest
from ...core.errors import SnapshotError, UnknownAlgorithmError
from ...logging_config import get_logger
from ...producers.registry import default_registry
from ..display import event_style, payload_summary
from ..inputs import build_log

console = Console()


def log_command(
    name: str = typer.Argument(..., help="Algorithm id (see `algoviz algorithms`)"),
    values: Optional[str] = typer.Option(None, "--input", "-i", help="Comma-separated input values"),
    random_size: Optional[int] = typer.Option(None, "--random", "-r", help="Random input of this length"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for --random"),
    action: Optional[str] = typer.Option(None, "--action", "-a", help="Operation for tree/stack/queue"),
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Key or value for the operation"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Produce an event log and print every event.

    Examples:
        algoviz log bubble --input 5,1,4,2
        algoviz log quick --random 10 --seed 7
        algoviz log bst --input 5,3,8 --action delete --key 5
        algoviz log stack --input 1,2 --action pop --json
    """
    logger = get_logger(__name__, trace_id=name)
    try:
        algorithm, events = build_log(default_registry(), name, values, random_size, seed, action, key)
    except (UnknownAlgorithmError, SnapshotError) as e:
        logger.debug(f"Log request failed: {e}")
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    digest = log_digest(events)

    if json_output:
        print(json.dumps({
            "algorithm": algorithm.name,
            "digest": digest,
            "count": len(events),
            "events": [ev.to_dict() for ev in events],
        }, indent=2))
        raise typer.Exit(0)

    table = Table(title=f"Event Log: {algorithm.title}")
    table.add_column("Tick", style="cyan", justify="right")
    table.add_column("Type")
    table.add_column("Line", style="dim", justify="right")
    table.add_column("Payload")

    for ev in events:
        line = algorithm.line_for(ev)
        table.add_row(
            str(ev.t),
            f"[{event_style(ev)}]{ev.type}[/{event_style(ev)}]",
            "" if line is None else str(line),
            payload_summary(ev),
        )

    console.print(table)
    console.print(f"  Events: [cyan]{len(events)}[/cyan]")
    console.print(f"  Digest: [yellow]{digest}[/yellow]")
