"""
Terminal rendering helpers shared by the log and play commands.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List

from ..core.events import COMPARISON_TYPES, MUTATION_TYPES, Event, EventType


def _short(value: Any) -> str:
    if isinstance(value, Mapping) and "nodes" in value:
        return f"<tree {len(value['nodes'])} nodes>"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(str(v) for v in value) + "]"
    return str(value)


def payload_summary(event: Event) -> str:
    """One-line payload without the code-pane line."""
    parts = [f"{k}={_short(v)}" for k, v in event.payload.items() if k != "line"]
    return " ".join(parts)


@dataclass
class EventCounters:
    """Running operation, comparison and write counts fed by the observe callback."""
    operations: int = 0
    comparisons: int = 0
    writes: int = 0

    def observe(self, time: float, events: List[Event]) -> None:
        for ev in events:
            if ev.type in COMPARISON_TYPES:
                self.comparisons += 1
                self.operations += 1
            elif ev.type in MUTATION_TYPES:
                self.writes += 1
                self.operations += 1

    def to_dict(self) -> Dict[str, int]:
        return {
            "operations": self.operations,
            "comparisons": self.comparisons,
            "writes": self.writes,
        }


def event_style(event: Event) -> str:
    if event.type == EventType.ERROR:
        return "red"
    if event.type in (EventType.DONE, EventType.FOUND):
        return "bold green"
    if event.type == EventType.NOT_FOUND:
        return "yellow"
    if event.type in MUTATION_TYPES:
        return "magenta"
    if event.type in COMPARISON_TYPES:
        return "cyan"
    return "dim"
