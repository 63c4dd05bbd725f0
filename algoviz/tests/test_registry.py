"""
Tests for the algorithm registry.
"""

import json
import logging

import pytest

from algoviz.core.canonical import log_digest
from algoviz.core.errors import DeterminismError, UnknownAlgorithmError
from algoviz.core.events import Event, EventType
from algoviz.logging_config import setup_logging
from algoviz.producers.registry import Algorithm, AlgorithmRegistry, default_registry
from algoviz.producers.sorting import bubble_sort


def test_default_registry_names():
    registry = default_registry()

    assert registry.names() == ["bst", "bubble", "insertion", "merge", "queue", "quick", "stack"]
    assert "bubble" in registry
    assert len(registry) == 7


def test_produce_matches_direct_call():
    registry = default_registry()

    assert registry.produce("bubble", [3, 1, 2]) == bubble_sort([3, 1, 2])


def test_produce_passes_operation_params():
    registry = default_registry()
    events = registry.produce("stack", [1, 2], "push", 3)

    assert events[0].type == EventType.PUSH
    assert events[0].payload["a"] == (1, 2, 3)


def test_unknown_algorithm_raises():
    with pytest.raises(UnknownAlgorithmError):
        default_registry().get("bogo")


def test_line_for_prefers_payload_then_fallback():
    algorithm = default_registry().get("bubble")

    assert algorithm.line_for(Event(t=0, type=EventType.COMPARE, payload={"line": 8})) == 8
    assert algorithm.line_for(Event(t=0, type=EventType.SWAP)) == 9
    assert algorithm.line_for(Event(t=0, type=EventType.CLEAR)) is None


def test_payload_lines_point_into_source():
    """Every line an event names exists in the algorithm's display source."""
    registry = default_registry()
    samples = {
        "bubble": ([4, 2, 3, 1],),
        "insertion": ([4, 2, 3, 1],),
        "merge": ([4, 2, 3, 1],),
        "quick": ([4, 2, 3, 1],),
        "stack": ([1], "pop"),
        "queue": ([1], "enqueue", 2),
        "bst": ({"root_id": 0, "nodes": [{"id": 0, "key": 5}]}, "delete", 5),
    }
    for name, args in samples.items():
        algorithm = registry.get(name)
        for ev in registry.produce(name, *args):
            line = algorithm.line_for(ev)
            if line is not None:
                assert 1 <= line <= len(algorithm.source), (name, ev)


def test_verify_deterministic_returns_digest():
    registry = default_registry()
    digest = registry.verify_deterministic("merge", [5, 2, 9, 1], runs=5)

    assert digest == log_digest(registry.produce("merge", [5, 2, 9, 1]))


def test_verify_deterministic_detects_drift():
    calls = []

    def drifting(arr):
        calls.append(1)
        return [Event(t=0, type=EventType.INIT, payload={"n": len(calls)})]

    registry = AlgorithmRegistry()
    registry.register(Algorithm(name="drift", title="Drift", kind="sort", produce=drifting))

    with pytest.raises(DeterminismError):
        registry.verify_deterministic("drift", [], runs=3)


def test_produce_logs_event_count(capsys):
    setup_logging(level="DEBUG", fmt="json")
    events = default_registry().produce("stack", [1, 2], "pop")

    record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert record["message"] == f"Produced {len(events)} events"
    assert record["trace_id"] == "stack"

    setup_logging(level="WARNING", fmt="text")
    assert logging.getLogger().level == logging.WARNING
