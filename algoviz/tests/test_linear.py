"""
Tests for stack and queue producers.
"""

from algoviz.core.canonical import log_digest
from algoviz.core.events import EventType
from algoviz.producers.linear import (
    buffer_from_log,
    queue_dequeue,
    queue_enqueue,
    queue_init,
    queue_op,
    stack_init,
    stack_op,
    stack_pop,
    stack_push,
)


def test_pop_empty_stack_is_underflow_error():
    events = stack_pop([])

    assert [ev.to_dict() for ev in events] == [
        {"t": 0, "type": "error", "payload": {"message": "Stack underflow (empty stack)."}}
    ]


def test_dequeue_then_enqueue():
    """dequeue on [1, 2, 3] leaves [2, 3]; enqueue(9) then gives [2, 3, 9]."""
    queue = [1, 2, 3]

    first = queue_dequeue(queue)
    assert [ev.type for ev in first] == ["dequeue", "clear"]
    assert first[0].payload["value"] == 1
    assert first[0].payload["a"] == (2, 3)

    second = queue_enqueue(buffer_from_log(first), 9)
    assert [ev.type for ev in second] == ["enqueue", "clear"]
    assert [ev.t for ev in second] == [0, 1]
    assert second[0].payload["a"] == (2, 3, 9)
    assert second[0].payload["index"] == 2

    assert queue == [1, 2, 3]


def test_stack_is_lifo():
    events = stack_push([1, 2], 3)
    assert events[0].payload["a"] == (1, 2, 3)

    popped = stack_pop(buffer_from_log(events))
    assert popped[0].payload["value"] == 3
    assert popped[0].payload["index"] == 2
    assert popped[0].payload["a"] == (1, 2)


def test_push_non_numeric_is_rejected_without_change():
    stack = [4]
    events = stack_push(stack, "seven")

    assert len(events) == 1
    assert events[0].type == EventType.ERROR
    assert events[0].payload["message"] == "Enter a number to push."
    assert stack == [4]


def test_enqueue_non_numeric_is_rejected():
    events = queue_enqueue([], None)

    assert events[0].payload["message"] == "Enter a number to enqueue."


def test_dequeue_empty_queue_is_underflow_error():
    events = queue_dequeue([])

    assert len(events) == 1
    assert events[0].payload["message"] == "Queue underflow (empty queue)."


def test_dispatchers_route_by_action():
    assert stack_op([1], "pop")[0].type == EventType.POP
    assert stack_op([], "push", "5")[0].payload["value"] == 5
    assert queue_op([1], "dequeue")[0].type == EventType.DEQUEUE
    assert queue_op([], "enqueue", 2.5)[0].payload["a"] == (2.5,)


def test_dispatchers_reject_unknown_action():
    assert stack_op([1], "peek")[0].payload["message"] == "Unknown action: peek"
    assert queue_op([1], "peek")[0].payload["message"] == "Unknown action: peek"


def test_init_copies_buffer():
    data = [3, 4]
    events = stack_init(data)

    assert [ev.type for ev in events] == ["init"]
    assert events[0].payload["a"] == (3, 4)
    assert events[0].payload["a"] is not data
    assert queue_init()[0].payload["a"] == ()


def test_operations_are_deterministic():
    digests = {log_digest(queue_dequeue([7, 8, 9])) for _ in range(50)}

    assert len(digests) == 1


def test_buffer_from_log_falls_back_on_error():
    assert buffer_from_log(stack_pop([]), [1]) == [1]
