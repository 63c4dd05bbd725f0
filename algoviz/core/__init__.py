"""
Core deterministic primitives.

This module provides the building blocks every producer shares:
- Event: Immutable step record
- EventRecorder: Tick-stamping log builder
- freeze / thaw: Read-only payload copies and their plain form
- TreeSnapshot: Immutable binary search tree value
- Canonical: Deterministic serialization and log digests
"""

from .events import (
    Event,
    EventType,
    EventRecorder,
    error_log,
    freeze,
    thaw,
    TERMINAL_TYPES,
    MUTATION_TYPES,
    COMPARISON_TYPES,
)
from .snapshots import TreeNode, TreeSnapshot, coerce_number, coerce_array
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str, log_digest
from .errors import DeterminismError, UnknownAlgorithmError, SnapshotError

__all__ = [
    "Event",
    "EventType",
    "EventRecorder",
    "error_log",
    "freeze",
    "thaw",
    "TERMINAL_TYPES",
    "MUTATION_TYPES",
    "COMPARISON_TYPES",
    "TreeNode",
    "TreeSnapshot",
    "coerce_number",
    "coerce_array",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "log_digest",
    "DeterminismError",
    "UnknownAlgorithmError",
    "SnapshotError",
]
