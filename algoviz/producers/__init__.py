"""
Event log producers.

Pure functions from an input snapshot (plus operation parameters) to an
ordered event log:
- sorting: bubble, insertion, merge and quick sort
- bst: binary search tree insert, search and delete
- linear: stack push/pop and queue enqueue/dequeue
- registry: algorithm id -> producer and display metadata
"""

from .sorting import bubble_sort, insertion_sort, merge_sort, quick_sort
from .bst import bst_init, bst_insert, bst_search, bst_delete, bst_op, tree_from_log
from .linear import (
    stack_init,
    stack_push,
    stack_pop,
    stack_op,
    queue_init,
    queue_enqueue,
    queue_dequeue,
    queue_op,
    buffer_from_log,
)
from .inputs import random_array
from .registry import Algorithm, AlgorithmRegistry, default_registry

__all__ = [
    "bubble_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "bst_init",
    "bst_insert",
    "bst_search",
    "bst_delete",
    "bst_op",
    "tree_from_log",
    "stack_init",
    "stack_push",
    "stack_pop",
    "stack_op",
    "queue_init",
    "queue_enqueue",
    "queue_dequeue",
    "queue_op",
    "buffer_from_log",
    "random_array",
    "Algorithm",
    "AlgorithmRegistry",
    "default_registry",
]
