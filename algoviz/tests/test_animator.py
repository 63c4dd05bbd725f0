"""
Tests for the Animator.

Frames are driven by FrameScheduler so every test is deterministic.
"""

import pytest

from algoviz.core.events import Event
from algoviz.playback.animator import Animator
from algoviz.playback.scheduler import FrameScheduler
from algoviz.playback.timeline import Timeline


class Recorder:
    def __init__(self):
        self.batches = []
        self.observed = []

    def render(self, events):
        self.batches.append(list(events))

    def observe(self, time, events):
        self.observed.append((time, list(events)))


def _log(n=4):
    return [Event(t=i, type="step", payload={"n": i}) for i in range(n)]


def _animator(n=4):
    rec = Recorder()
    scheduler = FrameScheduler()
    anim = Animator(render=rec.render, observe=rec.observe, scheduler=scheduler)
    anim.set_timeline(Timeline(_log(n)))
    return anim, scheduler, rec


def test_idle_operations_are_noops():
    rec = Recorder()
    scheduler = FrameScheduler()
    anim = Animator(render=rec.render, observe=rec.observe, scheduler=scheduler)

    anim.play()
    anim.step()
    anim.reset()
    anim.pause()
    anim.set_speed(3)

    assert anim.state == "idle"
    assert anim.playing is False
    assert anim.speed == 1.0
    assert scheduler.pending == 0
    assert rec.batches == []
    assert rec.observed == []


def test_set_timeline_rewinds_and_does_not_play():
    anim, scheduler, rec = _animator()
    anim.step()
    anim.step()

    anim.set_timeline(Timeline(_log(2)))

    assert anim.logical_time == 0
    assert anim.state == "paused"
    assert scheduler.pending == 0


def test_step_advances_one_tick_and_reports():
    anim, _, rec = _animator()

    batch = anim.step()

    assert anim.logical_time == 1
    assert [ev.t for ev in batch] == [0, 1]
    assert rec.batches == [batch]
    assert rec.observed == [(1.0, batch)]


def test_step_ignores_speed():
    anim, _, _ = _animator()
    anim.set_speed(4)

    anim.step()

    assert anim.logical_time == 1


@pytest.mark.parametrize(
    "value,expected",
    [(2, 2.0), (0.05, 0.1), (-2, 1.0), (0, 1.0), ("abc", 1.0), (None, 1.0), ("2.5", 2.5)],
)
def test_set_speed_clamps(value, expected):
    anim, _, _ = _animator()

    anim.set_speed(value)

    assert anim.speed == expected


def test_play_advances_by_speed_per_frame():
    anim, scheduler, rec = _animator()
    anim.set_speed(0.5)
    anim.play()

    scheduler.run_frame()
    scheduler.run_frame()
    scheduler.run_frame()

    assert anim.logical_time == 1.5
    # render fires every frame, even with an empty batch
    assert [[ev.t for ev in b] for b in rec.batches] == [[0], [1], []]
    assert [t for t, _ in rec.observed] == [0.5, 1.0, 1.5]


def test_play_is_noop_when_already_playing():
    anim, scheduler, _ = _animator()
    anim.play()
    anim.play()

    assert scheduler.pending == 1


def test_pause_stops_next_frame():
    anim, scheduler, rec = _animator()
    anim.play()
    scheduler.run_frame()
    anim.pause()
    time_at_pause = anim.logical_time

    scheduler.run_frame()
    scheduler.run_frame()

    assert anim.logical_time == time_at_pause
    assert len(rec.batches) == 1
    assert scheduler.pending == 0


def test_pause_inside_render_completes_current_frame():
    """A frame already being delivered finishes; only the next one is dropped."""
    scheduler = FrameScheduler()
    delivered = []
    anim = None

    def render(events):
        delivered.append(list(events))
        anim.pause()

    anim = Animator(render=render, scheduler=scheduler)
    anim.set_timeline(Timeline(_log()))
    anim.play()
    scheduler.run_frame()

    assert [[ev.t for ev in b] for b in delivered] == [[0, 1]]
    assert scheduler.pending == 0
    assert anim.playing is False


def test_pause_then_play_before_frame_keeps_one_request():
    anim, scheduler, _ = _animator()
    anim.play()
    anim.pause()
    anim.play()

    assert scheduler.pending == 1
    scheduler.run_frame()
    assert anim.logical_time == 1


def test_reset_clears_and_replays():
    anim, _, rec = _animator()
    first = anim.step()
    anim.step()

    anim.reset()

    assert anim.logical_time == 0
    assert rec.batches[-1] == []
    assert rec.observed[-1] == (0.0, [])
    assert anim.step() == first


def test_logical_time_is_monotonic_while_playing():
    anim, scheduler, rec = _animator(10)
    anim.set_speed(0.3)
    anim.play()

    scheduler.run(max_frames=50)
    anim.pause()

    times = [t for t, _ in rec.observed]
    assert times == sorted(times)
    delivered = [ev.t for batch in rec.batches for ev in batch]
    assert delivered == list(range(10))


def test_fractional_speed_lands_on_tick_boundary():
    anim, scheduler, rec = _animator()
    anim.set_speed(0.1)
    anim.play()

    for _ in range(10):
        scheduler.run_frame()

    assert anim.logical_time == 1.0
    assert [ev.t for ev in rec.batches[-1]] == [1]


def test_finished_after_log_is_delivered():
    anim, scheduler, _ = _animator(4)
    anim.set_speed(2)
    anim.play()

    scheduler.run_frame()
    assert not anim.finished
    scheduler.run_frame()
    assert anim.finished


def test_unbinding_returns_to_idle():
    anim, scheduler, _ = _animator()
    anim.play()

    anim.set_timeline(None)
    scheduler.run_frame()

    assert anim.state == "idle"
    assert anim.logical_time == 0
