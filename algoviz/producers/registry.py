"""
Algorithm registry.

Maps an algorithm id to its producer and the static teaching metadata a
code pane needs: the display source and a fallback event-type -> line map
for events whose payload carries no line.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..core.canonical import log_digest
from ..core.errors import DeterminismError, UnknownAlgorithmError
from ..core.events import Event, EventType
from ..logging_config import get_logger
from . import bst, linear, sorting

# Producer signature: (snapshot, *params) -> event log
Producer = Callable[..., List[Event]]


@dataclass(frozen=True)
class Algorithm:
    """
    One registered algorithm or data-structure operation set.

    Fields:
        name: Registry id (e.g., "bubble", "bst")
        title: Human-readable name
        kind: "sort", "tree", "stack" or "queue"
        produce: Producer function
        source: Display source, one entry per line (1-based in events)
        line_map: Fallback line per event type
        actions: Accepted action names for operation producers; empty for sorts
        initial: Optional producer of a one-event init log for a starting snapshot
    """
    name: str
    title: str
    kind: str
    produce: Producer
    source: Tuple[str, ...] = ()
    line_map: Dict[str, int] = field(default_factory=dict)
    actions: Tuple[str, ...] = ()
    initial: Optional[Producer] = None

    def line_for(self, event: Event) -> Optional[int]:
        """Source line for an event: its payload line, else the fallback map."""
        line = event.payload.get("line")
        if line is not None:
            return line
        return self.line_map.get(event.type)


class AlgorithmRegistry:
    """
    Registry of producers keyed by algorithm id.

    Usage:
        registry = AlgorithmRegistry()
        registry.register(Algorithm(name="bubble", ...))
        events = registry.produce("bubble", [3, 1, 2])
    """

    def __init__(self) -> None:
        self._algorithms: Dict[str, Algorithm] = {}

    def register(self, algorithm: Algorithm) -> None:
        self._algorithms[algorithm.name] = algorithm

    def get(self, name: str) -> Algorithm:
        """
        Raises:
            UnknownAlgorithmError: If no algorithm is registered under name
        """
        if name not in self._algorithms:
            raise UnknownAlgorithmError(f"Unknown algorithm: {name}")
        return self._algorithms[name]

    def names(self) -> List[str]:
        return sorted(self._algorithms)

    def __contains__(self, name: object) -> bool:
        return name in self._algorithms

    def __iter__(self):
        return iter(self._algorithms[n] for n in self.names())

    def __len__(self) -> int:
        return len(self._algorithms)

    def produce(self, name: str, snapshot: Any, *params: Any) -> List[Event]:
        """
        Run a producer by id.

        Args:
            name: Algorithm id
            snapshot: Input array, buffer or tree (never mutated)
            *params: Operation parameters (action, key/value)

        Returns:
            Event log
        """
        algorithm = self.get(name)
        logger = get_logger(__name__, trace_id=name)
        events = algorithm.produce(snapshot, *params)
        if events and events[-1].type == EventType.ERROR:
            logger.debug(f"Rejected input: {events[-1].payload.get('message')}")
        else:
            logger.debug(f"Produced {len(events)} events")
        return events

    def verify_deterministic(self, name: str, snapshot: Any, *params: Any, runs: int = 2) -> str:
        """
        Produce the same log several times and compare digests.

        Returns:
            The shared log digest

        Raises:
            DeterminismError: If any run differs
        """
        digests = {log_digest(self.produce(name, snapshot, *params)) for _ in range(max(runs, 1))}
        if len(digests) != 1:
            raise DeterminismError(f"{name} produced {len(digests)} distinct logs for identical input")
        return digests.pop()


SORT_LINE_MAP = {EventType.INIT: 2}

BST_LINE_MAP = {
    EventType.INIT: 1,
    EventType.SET_CURRENT: 3,
    EventType.COMPARE_NODE: 5,
    EventType.INSERT_NODE: 10,
    EventType.FOUND: 16,
    EventType.NOT_FOUND: 18,
    EventType.UPDATE_TREE: 31,
}

STACK_LINE_MAP = {EventType.INIT: 3, EventType.PUSH: 7, EventType.POP: 10}
QUEUE_LINE_MAP = {EventType.INIT: 3, EventType.ENQUEUE: 7, EventType.DEQUEUE: 10}


def default_registry() -> AlgorithmRegistry:
    """Registry with every shipped producer."""
    registry = AlgorithmRegistry()
    registry.register(Algorithm(
        name="bubble",
        title="Bubble Sort",
        kind="sort",
        produce=sorting.bubble_sort,
        source=sorting.BUBBLE_SOURCE,
        line_map=dict(SORT_LINE_MAP, compare=8, swap=9, markSortedEnd=11, done=13),
    ))
    registry.register(Algorithm(
        name="insertion",
        title="Insertion Sort",
        kind="sort",
        produce=sorting.insertion_sort,
        source=sorting.INSERTION_SOURCE,
        line_map=dict(SORT_LINE_MAP, compare=6, shift=7, insert=9, markSortedPrefix=10, done=11),
    ))
    registry.register(Algorithm(
        name="merge",
        title="Merge Sort",
        kind="sort",
        produce=sorting.merge_sort,
        source=sorting.MERGE_SOURCE,
        line_map=dict(SORT_LINE_MAP, markSubarray=15, compare=8, overwrite=9, done=22),
    ))
    registry.register(Algorithm(
        name="quick",
        title="Quick Sort (Lomuto)",
        kind="sort",
        produce=sorting.quick_sort,
        source=sorting.QUICK_SOURCE,
        line_map=dict(
            SORT_LINE_MAP,
            markSubarray=12,
            setPivot=4,
            compareWithPivot=7,
            swap=8,
            markSortedIndex=11,
            done=17,
        ),
    ))
    registry.register(Algorithm(
        name="bst",
        title="Binary Search Tree",
        kind="tree",
        produce=bst.bst_op,
        source=bst.BST_SOURCE,
        line_map=BST_LINE_MAP,
        actions=("insert", "search", "delete"),
        initial=bst.bst_init,
    ))
    registry.register(Algorithm(
        name="stack",
        title="Stack",
        kind="stack",
        produce=linear.stack_op,
        source=linear.STACK_SOURCE,
        line_map=STACK_LINE_MAP,
        actions=("push", "pop"),
        initial=linear.stack_init,
    ))
    registry.register(Algorithm(
        name="queue",
        title="Queue",
        kind="queue",
        produce=linear.queue_op,
        source=linear.QUEUE_SOURCE,
        line_map=QUEUE_LINE_MAP,
        actions=("enqueue", "dequeue"),
        initial=linear.queue_init,
    ))
    return registry
