"""
Canonical serialization for deterministic comparison of event logs.

Two logs are considered identical when their canonical bytes match. The
digest is what tests and the CLI use to show that replaying a producer
reproduces the same log.
"""

import hashlib
import json
from collections.abc import Mapping
from typing import Any, Iterable


def canonicalize(obj: Any) -> Any:
    """
    Convert arbitrary nested dict/list to canonical form.

    Rules:
    - mapping keys sorted alphabetically (read-only payload views included)
    - tuples converted to lists
    - objects exposing to_dict() are expanded
    - recursive normalization
    """
    if hasattr(obj, "to_dict"):
        return canonicalize(obj.to_dict())
    if isinstance(obj, Mapping):
        return {k: canonicalize(obj[k]) for k in sorted(obj.keys())}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_bytes(obj: Any) -> bytes:
    """
    Deterministic JSON bytes for hashing.

    Returns:
        UTF-8 encoded JSON bytes

    Raises:
        ValueError: If obj holds NaN or an infinity, which JSON cannot carry
    """
    canon = canonicalize(obj)
    s = json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    return s.encode("utf-8")


def canonical_json_str(obj: Any) -> str:
    """
    Deterministic JSON string (for display or storage).

    Same guarantees as canonical_json_bytes but returns string.
    """
    return canonical_json_bytes(obj).decode("utf-8")


def log_digest(events: Iterable[Any]) -> str:
    """
    SHA-256 of an event log's canonical bytes.

    Args:
        events: Events (or their dict forms) in log order

    Returns:
        Hex string (64 characters)
    """
    return hashlib.sha256(canonical_json_bytes(list(events))).hexdigest()
