"""
Turn command-line options into a producer call.
"""

from typing import List, Optional, Tuple

from ..config import PlaybackSettings
from ..core.events import Event, EventType, error_log
from ..core.snapshots import TreeSnapshot
from ..producers.bst import bst_insert, tree_from_log
from ..producers.inputs import random_array
from ..producers.registry import Algorithm, AlgorithmRegistry


def parse_values(text: Optional[str]) -> List[str]:
    """Split "5, 3,8" into ["5", "3", "8"]. Producers validate the values."""
    if not text:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


def build_tree(keys: List[str]) -> Tuple[TreeSnapshot, Optional[List[Event]]]:
    """
    Insert keys one by one into an empty tree.

    Returns:
        (tree, None) on success, or (partial tree, error log) on a bad key
    """
    tree = TreeSnapshot.empty()
    for key in keys:
        events = bst_insert(tree, key)
        if events[-1].type == EventType.ERROR:
            return tree, events
        tree = tree_from_log(events, tree)
    return tree, None


def build_log(
    registry: AlgorithmRegistry,
    name: str,
    values: Optional[str] = None,
    random_size: Optional[int] = None,
    seed: Optional[int] = None,
    action: Optional[str] = None,
    key: Optional[str] = None,
    settings: Optional[PlaybackSettings] = None,
) -> Tuple[Algorithm, List[Event]]:
    """
    Resolve the input snapshot and produce the event log.

    Sorts take the array from --input or --random. Structures take their
    starting contents from --input (tree keys are inserted in order) and
    run --action with --key; without an action the log only draws the
    starting state.

    Raises:
        UnknownAlgorithmError: If name is not registered
    """
    settings = settings or PlaybackSettings.from_env()
    algorithm = registry.get(name)

    if values is None and random_size is not None:
        seed = settings.random_seed if seed is None else seed
        items: List = list(random_array(random_size, seed))
    else:
        items = parse_values(values)

    if algorithm.kind == "sort":
        return algorithm, registry.produce(name, items)

    snapshot = items
    if algorithm.kind == "tree":
        snapshot, failure = build_tree(items)
        if failure is not None:
            return algorithm, failure

    if action is None:
        if algorithm.initial is None:
            return algorithm, error_log(f"{algorithm.title} needs an action.")
        return algorithm, algorithm.initial(snapshot)

    return algorithm, registry.produce(name, snapshot, action, key)
