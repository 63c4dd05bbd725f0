"""
Play command: drive an Animator over an event log in the terminal
"""

import json
import time
from typing import Any, Dict, List, Optional

import typer
from rich.console import Console

from ...config import PlaybackSettings
from ...core.canonical import log_digest
from ...core.errors import SnapshotError, UnknownAlgorithmError
from ...core.events import Event
from ...logging_config import get_logger
from ...playback import Animator, FrameScheduler, Timeline
from ...producers.registry import Algorithm, default_registry
from ..display import EventCounters, event_style, payload_summary
from ..inputs import build_log

console = Console()


class TerminalRenderer:
    """
    Render callback for the terminal.

    Prints every event of a batch with the code line it maps to. Frames
    are recorded instead of printed when json output is requested.
    """

    def __init__(self, algorithm: Algorithm, record: bool = False) -> None:
        self.algorithm = algorithm
        self.record = record
        self.frames: List[Dict[str, Any]] = []
        self.counters = EventCounters()

    def render(self, events: List[Event]) -> None:
        if self.record or not events:
            return
        for ev in events:
            style = event_style(ev)
            line = self.algorithm.line_for(ev)
            code = ""
            if line is not None and 0 < line <= len(self.algorithm.source):
                code = f"  [dim]{line:>3} | {self.algorithm.source[line - 1].strip()}[/dim]"
            console.print(f"[cyan]t={ev.t:<4}[/cyan] [{style}]{ev.type:<16}[/{style}] {payload_summary(ev)}{code}")

    def observe(self, logical_time: float, events: List[Event]) -> None:
        self.counters.observe(logical_time, events)
        if self.record and events:
            self.frames.append({"time": logical_time, "events": [ev.to_dict() for ev in events]})


def play_command(
    name: str = typer.Argument(..., help="Algorithm id (see `algoviz algorithms`)"),
    values: Optional[str] = typer.Option(None, "--input", "-i", help="Comma-separated input values"),
    random_size: Optional[int] = typer.Option(None, "--random", "-r", help="Random input of this length"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for --random"),
    action: Optional[str] = typer.Option(None, "--action", "-a", help="Operation for tree/stack/queue"),
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Key or value for the operation"),
    speed: Optional[float] = typer.Option(None, "--speed", help="Ticks per frame (min 0.1)"),
    fps: Optional[int] = typer.Option(None, "--fps", help="Frames per second; 0 plays without delay"),
    steps: bool = typer.Option(False, "--steps", help="Advance one tick per step instead of per frame"),
    json_output: bool = typer.Option(False, "--json", help="Output frames as JSON"),
):
    """
    Play an algorithm's event log frame by frame.

    Examples:
        algoviz play bubble --input 5,1,4,2
        algoviz play merge --random 16 --speed 2
        algoviz play bst --input 5,3,8 --action insert --key 4 --steps
        algoviz play quick --random 8 --fps 0 --json
    """
    settings = PlaybackSettings.from_env()
    logger = get_logger(__name__, trace_id=name)
    try:
        algorithm, events = build_log(
            default_registry(), name, values, random_size, seed, action, key, settings=settings
        )
    except (UnknownAlgorithmError, SnapshotError) as e:
        logger.debug(f"Play request failed: {e}")
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    renderer = TerminalRenderer(algorithm, record=json_output)
    scheduler = FrameScheduler()
    animator = Animator(render=renderer.render, observe=renderer.observe, scheduler=scheduler)
    animator.set_timeline(Timeline(events))
    animator.set_speed(settings.speed if speed is None else speed)

    frame_rate = settings.fps if fps is None else fps
    delay = 1.0 / frame_rate if frame_rate > 0 else 0.0

    if not json_output:
        console.print(f"[bold]{algorithm.title}[/bold] - {len(events)} events at speed {animator.speed}")

    advancements = 0
    if steps:
        while not animator.finished and advancements < settings.max_frames:
            animator.step()
            advancements += 1
            if delay:
                time.sleep(delay)
    else:
        animator.play()
        while not animator.finished and advancements < settings.max_frames:
            scheduler.run_frame()
            advancements += 1
            if delay:
                time.sleep(delay)
        animator.pause()

    if not animator.finished:
        logger.warning(f"Stopped after {advancements} frames before the log was exhausted")

    if json_output:
        print(json.dumps({
            "algorithm": algorithm.name,
            "digest": log_digest(events),
            "speed": animator.speed,
            "frames": renderer.frames,
            "advancements": advancements,
            "logical_time": animator.logical_time,
            "counters": renderer.counters.to_dict(),
        }, indent=2))
        raise typer.Exit(0)

    c = renderer.counters
    console.print(
        f"[green]Done[/green] in {advancements} advancements  "
        f"ops=[cyan]{c.operations}[/cyan] cmps=[cyan]{c.comparisons}[/cyan] writes=[cyan]{c.writes}[/cyan]"
    )
