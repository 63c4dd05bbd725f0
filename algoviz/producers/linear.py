"""
Stack and queue producers.

Both structures are plain lists of numbers. The stack's top is the end of
the list; the queue's front is index 0 and its rear is the end.

Each successful operation returns a two-event log: the operation event
(carrying the post-operation buffer as `a`) and a clear. Underflow and
non-numeric values return a single error event and change nothing.
"""

from typing import Any, Iterable, List, Optional

from ..core.events import Event, EventRecorder, EventType, error_log
from ..core.snapshots import coerce_array, coerce_number

STACK_SOURCE = (
    "class Stack:",
    "    def __init__(self, items=()):",
    "        self.a = list(items)",
    "",
    "    def push(self, value):",
    "        # top of stack is the end of the list",
    "        self.a.append(value)",
    "",
    "    def pop(self):",
    "        return self.a.pop()",
)

QUEUE_SOURCE = (
    "class Queue:",
    "    def __init__(self, items=()):",
    "        self.a = list(items)",
    "",
    "    def enqueue(self, value):",
    "        # rear of queue is the end of the list",
    "        self.a.append(value)",
    "",
    "    def dequeue(self):",
    "        return self.a.pop(0)",
)

STACK_UNDERFLOW = "Stack underflow (empty stack)."
QUEUE_UNDERFLOW = "Queue underflow (empty queue)."


def _init(values: Optional[Iterable[Any]], kind: str) -> List[Event]:
    a = coerce_array(values)
    if a is None:
        return error_log(f"A {kind} holds numbers only.")
    return [Event(t=0, type=EventType.INIT, payload={"a": a, "line": 3})]


def stack_init(values: Optional[Iterable[Any]] = None) -> List[Event]:
    return _init(values, "stack")


def queue_init(values: Optional[Iterable[Any]] = None) -> List[Event]:
    return _init(values, "queue")


def _append(values, raw_value, event_type: str, message: str) -> List[Event]:
    value = coerce_number(raw_value)
    a = coerce_array(values)
    if value is None or a is None:
        return error_log(message)
    index = len(a)
    a.append(value)
    rec = EventRecorder()
    rec.emit(event_type, index=index, value=value, a=list(a), line=7)
    rec.emit(EventType.CLEAR)
    return rec.events


def stack_push(values: Optional[Iterable[Any]], raw_value: Any) -> List[Event]:
    """Push onto the top (end) of the stack."""
    return _append(values, raw_value, EventType.PUSH, "Enter a number to push.")


def stack_pop(values: Optional[Iterable[Any]]) -> List[Event]:
    """Pop from the top (end) of the stack."""
    a = coerce_array(values)
    if a is None:
        return error_log("A stack holds numbers only.")
    if not a:
        return error_log(STACK_UNDERFLOW)
    index = len(a) - 1
    value = a.pop()
    rec = EventRecorder()
    rec.emit(EventType.POP, index=index, value=value, a=list(a), line=10)
    rec.emit(EventType.CLEAR)
    return rec.events


def queue_enqueue(values: Optional[Iterable[Any]], raw_value: Any) -> List[Event]:
    """Append at the rear (end) of the queue."""
    return _append(values, raw_value, EventType.ENQUEUE, "Enter a number to enqueue.")


def queue_dequeue(values: Optional[Iterable[Any]]) -> List[Event]:
    """Remove from the front (index 0) of the queue."""
    a = coerce_array(values)
    if a is None:
        return error_log("A queue holds numbers only.")
    if not a:
        return error_log(QUEUE_UNDERFLOW)
    value = a.pop(0)
    rec = EventRecorder()
    rec.emit(EventType.DEQUEUE, **{"from": 0, "value": value, "a": list(a), "line": 10})
    rec.emit(EventType.CLEAR)
    return rec.events


def stack_op(values: Optional[Iterable[Any]], action: str, value: Any = None) -> List[Event]:
    """Dispatch push / pop by name."""
    if action == "push":
        return stack_push(values, value)
    if action == "pop":
        return stack_pop(values)
    return error_log(f"Unknown action: {action}")


def queue_op(values: Optional[Iterable[Any]], action: str, value: Any = None) -> List[Event]:
    """Dispatch enqueue / dequeue by name."""
    if action == "enqueue":
        return queue_enqueue(values, value)
    if action == "dequeue":
        return queue_dequeue(values)
    return error_log(f"Unknown action: {action}")


def buffer_from_log(events: List[Event], fallback: Optional[Iterable[Any]] = None) -> List[Any]:
    """The buffer after a log: the last `a` snapshot, or a copy of the fallback."""
    for ev in reversed(events):
        if "a" in ev.payload:
            return list(ev.payload["a"])
    return list(fallback or [])
