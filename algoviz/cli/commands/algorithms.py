"""
Algorithms command: list the registry or show one algorithm's display source
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from ...core.errors import UnknownAlgorithmError
from ...producers.registry import default_registry

console = Console()


def algorithms_command(
    source: Optional[str] = typer.Option(None, "--source", "-s", help="Show display source of an algorithm"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    List registered algorithms.

    Examples:
        algoviz algorithms
        algoviz algorithms --source quick
        algoviz algorithms --json
    """
    registry = default_registry()

    if source is not None:
        try:
            algorithm = registry.get(source)
        except UnknownAlgorithmError as e:
            if json_output:
                print(json.dumps({"error": str(e)}))
            else:
                console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(2)

        if json_output:
            print(json.dumps({"name": algorithm.name, "source": list(algorithm.source)}, indent=2))
        else:
            console.print(f"[bold]{algorithm.title}[/bold]")
            console.print(Syntax("\n".join(algorithm.source), "python", theme="monokai", line_numbers=True))
        raise typer.Exit(0)

    if json_output:
        out = [
            {"name": a.name, "title": a.title, "kind": a.kind, "actions": list(a.actions)}
            for a in registry
        ]
        print(json.dumps({"algorithms": out, "count": len(out)}, indent=2))
        raise typer.Exit(0)

    table = Table(title="Algorithms")
    table.add_column("Name", style="green")
    table.add_column("Title")
    table.add_column("Kind", style="cyan")
    table.add_column("Actions", style="yellow")
    for a in registry:
        table.add_row(a.name, a.title, a.kind, ", ".join(a.actions) or "-")
    console.print(table)
