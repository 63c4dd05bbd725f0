"""
Tests for Timeline tick semantics.

Critical: a tick's events are served once, and seek() replays exactly what
a fresh Timeline would have served from that tick on.
"""

import pytest

from algoviz.core.events import Event
from algoviz.playback.timeline import Timeline
from algoviz.producers.sorting import bubble_sort


def _log(n=5):
    return [Event(t=i, type="step", payload={"n": i}) for i in range(n)]


def test_next_serves_each_tick_once():
    tl = Timeline(_log())

    assert [ev.t for ev in tl.next(0.5)] == [0]
    assert tl.next(0.9) == []
    assert [ev.t for ev in tl.next(1.2)] == [1]
    assert [ev.t for ev in tl.next(3.0)] == [2, 3]
    assert tl.next(3.99) == []


def test_increasing_time_never_repeats_events():
    tl = Timeline(_log(10))
    served = []
    now = 0.0
    for _ in range(40):
        now += 0.3
        served.extend(tl.next(now))

    assert [ev.t for ev in served] == list(range(10))
    assert tl.exhausted


def test_seek_matches_fresh_timeline():
    events = _log(6)
    for target in range(7):
        tl = Timeline(events)
        tl.next(10)
        tl.seek(target)

        assert tl.next(10) == [ev for ev in events if ev.t >= target]


def test_seek_then_next_at_target_tick():
    events = _log(6)
    tl = Timeline(events)
    tl.next(5)

    tl.seek(2)

    assert tl.next(2) == [events[2]]
    assert tl.next(4) == [events[3], events[4]]


def test_seek_zero_replays_same_batch_tick():
    """seek() clears the served-tick marker so the same tick serves again."""
    tl = Timeline(_log(3))
    first = tl.next(1)
    tl.seek(0)

    assert tl.next(1) == first


def test_unsorted_log_is_sorted_stably():
    events = [
        Event(t=2, type="a"),
        Event(t=0, type="b"),
        Event(t=2, type="c"),
        Event(t=1, type="d"),
    ]
    tl = Timeline(events)

    assert [ev.type for ev in tl.events] == ["b", "d", "a", "c"]
    assert [ev.type for ev in tl.next(2)] == ["b", "d", "a", "c"]


def test_multiple_events_on_one_tick_keep_order():
    events = [Event(t=0, type="x"), Event(t=0, type="y"), Event(t=1, type="z")]
    tl = Timeline(events)

    assert [ev.type for ev in tl.next(0)] == ["x", "y"]


def test_empty_timeline_never_yields():
    tl = Timeline([])

    assert tl.next(0) == []
    assert tl.next(100) == []
    assert tl.exhausted
    assert tl.end_tick == -1
    assert len(tl) == 0


def test_cursor_and_end_tick():
    tl = Timeline(_log(4))

    assert tl.cursor == 0
    assert tl.end_tick == 3
    tl.next(1)
    assert tl.cursor == 2
    assert tl.last_tick == 1


def test_consumer_cannot_corrupt_a_replay():
    """A renderer poking at a delivered snapshot leaves seek()/replay intact."""
    tl = Timeline(bubble_sort([3, 1, 2]))
    first = tl.next(0)

    with pytest.raises(AttributeError):
        first[0].payload["a"].clear()
    with pytest.raises(TypeError):
        first[0].payload["a"] = []

    tl.seek(0)
    replay = tl.next(100)

    assert replay[0].payload["a"] == (3, 1, 2)
    assert replay == bubble_sort([3, 1, 2])
