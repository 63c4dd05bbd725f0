"""
Event model for algorithm execution logs.

Events are immutable records of one step of an algorithm. A log is the
ordered list of events produced by one producer call.

Payloads are frozen on construction: mappings become read-only
MappingProxyType views and lists become tuples, so a consumer holding an
event cannot change what a later seek or reset replays. to_dict() hands
out plain, independent dicts and lists.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List


def freeze(value: Any) -> Any:
    """Read-only deep copy of nested mappings and sequences."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    """Plain dict/list deep copy of a frozen value."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(v) for v in value]
    return value


class EventType:
    """Closed vocabulary of event type tags."""

    # lifecycle
    INIT = "init"
    CLEAR = "clear"
    DONE = "done"
    ERROR = "error"
    FOUND = "found"
    NOT_FOUND = "notFound"

    # comparisons
    COMPARE = "compare"
    COMPARE_WITH_PIVOT = "compareWithPivot"
    COMPARE_NODE = "compareNode"

    # mutations (payload carries a full snapshot)
    SWAP = "swap"
    SHIFT = "shift"
    INSERT = "insert"
    OVERWRITE = "overwrite"
    PUSH = "push"
    POP = "pop"
    ENQUEUE = "enqueue"
    DEQUEUE = "dequeue"
    INSERT_NODE = "insertNode"
    UPDATE_TREE = "updateTree"

    # scope / markers
    MARK_SUBARRAY = "markSubarray"
    SET_PIVOT = "setPivot"
    MARK_SORTED_END = "markSortedEnd"
    MARK_SORTED_PREFIX = "markSortedPrefix"
    MARK_SORTED_INDEX = "markSortedIndex"
    SET_CURRENT = "setCurrent"


TERMINAL_TYPES = frozenset({EventType.DONE, EventType.ERROR, EventType.FOUND, EventType.NOT_FOUND})

MUTATION_TYPES = frozenset({
    EventType.SWAP,
    EventType.SHIFT,
    EventType.INSERT,
    EventType.OVERWRITE,
    EventType.PUSH,
    EventType.POP,
    EventType.ENQUEUE,
    EventType.DEQUEUE,
    EventType.INSERT_NODE,
    EventType.UPDATE_TREE,
})

COMPARISON_TYPES = frozenset({
    EventType.COMPARE,
    EventType.COMPARE_WITH_PIVOT,
    EventType.COMPARE_NODE,
})



@dataclass(frozen=True)
class Event:
    """
    Immutable event record.

    Fields:
        t: Tick (non-negative, assigned by the producer's recorder)
        type: Event type tag (see EventType)
        payload: Type-specific data, frozen on construction; mutation
            events carry a full snapshot
    """
    t: int
    type: str
    payload: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", freeze(self.payload))

    def to_dict(self) -> Dict[str, Any]:
        return {"t": self.t, "type": self.type, "payload": thaw(self.payload)}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Event":
        return Event(t=int(data["t"]), type=data["type"], payload=data.get("payload") or {})


def error_log(message: str) -> List[Event]:
    """Single-event log for rejected input. Always tick 0."""
    return [Event(t=0, type=EventType.ERROR, payload={"message": message})]


class EventRecorder:
    """
    Accumulates events for one producer call.

    Ticks come from the recorder, never from system time: every producer
    call starts a fresh recorder at tick 0 and each emit advances by one,
    so replaying the same input yields the same ticks.

    Usage:
        rec = EventRecorder()
        rec.emit(EventType.INIT, a=[3, 1, 2], line=2)
        rec.emit(EventType.DONE, line=15)
        events = rec.events
    """

    def __init__(self) -> None:
        self._events: List[Event] = []

    @property
    def tick(self) -> int:
        """Tick the next emitted event receives."""
        return len(self._events)

    def emit(self, event_type: str, **payload: Any) -> Event:
        """
        Append an event stamped with the next tick.

        Args:
            event_type: Event type tag
            **payload: Payload fields; containers are frozen into the event

        Returns:
            The recorded event
        """
        ev = Event(t=self.tick, type=event_type, payload=payload)
        self._events.append(ev)
        return ev

    @property
    def events(self) -> List[Event]:
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)
