"""
Animator: logical time, speed and play/pause/step/reset over a Timeline.

The Animator owns a continuous logical time. Each scheduler frame adds
`speed` to it; each manual step adds exactly 1. After every advancement the
events up to floor(logical_time) are pulled from the Timeline and handed to
the render callback as one batch.
"""

from typing import Any, Callable, List, Optional

from ..core.events import Event
from ..core.snapshots import coerce_number
from ..logging_config import get_logger
from .scheduler import FrameScheduler
from .timeline import Timeline

RenderCallback = Callable[[List[Event]], None]
ObserveCallback = Callable[[float, List[Event]], None]

MIN_SPEED = 0.1
DEFAULT_SPEED = 1.0

# logical time is rounded so fractional speeds land on exact tick boundaries
_TIME_PRECISION = 9


def _noop_render(events: List[Event]) -> None:
    return None


def _noop_observe(time: float, events: List[Event]) -> None:
    return None


class Animator:
    """
    Playback controller for one bound Timeline at a time.

    With no Timeline bound the Animator is idle and every operation other
    than set_timeline() does nothing.

    Callbacks:
        render(batch): events of one advancement, in log order; an empty
            batch after reset() means "clear everything"
        observe(logical_time, batch): fired after every frame, step and
            reset, for counters and telemetry

    The scheduler must expose request_frame(callback); FrameScheduler is
    used when none is given.
    """

    def __init__(
        self,
        render: Optional[RenderCallback] = None,
        observe: Optional[ObserveCallback] = None,
        scheduler: Optional[Any] = None,
    ) -> None:
        self.render = render or _noop_render
        self.observe = observe or _noop_observe
        self.scheduler = scheduler if scheduler is not None else FrameScheduler()
        self.timeline: Optional[Timeline] = None
        self.logical_time = 0.0
        self.speed = DEFAULT_SPEED
        self.playing = False
        self._frame_requested = False
        self._logger = get_logger(__name__, trace_id="animator")

    @property
    def state(self) -> str:
        if self.timeline is None:
            return "idle"
        return "playing" if self.playing else "paused"

    @property
    def finished(self) -> bool:
        """True once every event of the bound Timeline has been delivered."""
        return self.timeline is not None and self.timeline.exhausted

    def set_timeline(self, timeline: Optional[Timeline]) -> None:
        """
        Bind a new Timeline and rewind to logical time 0.

        Does not start playback. Binding None returns to idle.
        """
        self.timeline = timeline
        self.logical_time = 0.0
        if timeline is None:
            self.playing = False
            self._logger.debug("Timeline unbound")
            return
        timeline.seek(0)
        self._logger.debug(f"Bound timeline with {len(timeline)} events")

    def set_speed(self, value: Any) -> None:
        """Set the per-frame multiplier; floor 0.1, non-positive or non-numeric -> 1."""
        if self.timeline is None:
            return
        speed = coerce_number(value)
        if speed is None or speed <= 0:
            speed = DEFAULT_SPEED
        self.speed = max(MIN_SPEED, float(speed))

    def play(self) -> None:
        if self.timeline is None or self.playing:
            return
        self.playing = True
        self._logger.debug(f"Play at t={self.logical_time} speed={self.speed}")
        if not self._frame_requested:
            self._request_frame()

    def pause(self) -> None:
        """Stop after the current frame; the pending frame sees the flag and does nothing."""
        if self.timeline is None:
            return
        if self.playing:
            self._logger.debug(f"Pause at t={self.logical_time}")
        self.playing = False

    def step(self) -> List[Event]:
        """Advance exactly one tick regardless of speed or playing state."""
        if self.timeline is None:
            return []
        return self._advance(1)

    def reset(self) -> None:
        """Back to logical time 0 and signal the renderer to clear."""
        if self.timeline is None:
            return
        self.logical_time = 0.0
        self.timeline.seek(0)
        self._logger.debug("Reset to t=0")
        self.render([])
        self.observe(0.0, [])

    def _request_frame(self) -> None:
        self._frame_requested = True
        self.scheduler.request_frame(self._loop)

    def _loop(self) -> None:
        self._frame_requested = False
        if not self.playing or self.timeline is None:
            return
        self._advance(self.speed)
        if self.playing and not self._frame_requested:
            self._request_frame()

    def _advance(self, dt: float) -> List[Event]:
        self.logical_time = round(self.logical_time + dt, _TIME_PRECISION)
        events = self.timeline.next(self.logical_time) if self.timeline is not None else []
        self.render(events)
        self.observe(self.logical_time, events)
        return events
