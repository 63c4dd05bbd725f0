"""
Timeline: tick-indexed read access over one event log.

The log is fixed at construction. Reads are served per integer tick so a
caller polling at sub-tick granularity never receives an event twice.
"""

import math
from typing import Iterable, List, Optional, Tuple

from ..core.events import Event


class Timeline:
    """
    Read cursor over an event log ordered by tick.

    Usage:
        timeline = Timeline(events)
        timeline.next(0.5)   # events at tick 0
        timeline.next(0.9)   # [] (same tick)
        timeline.next(2.0)   # events at ticks 1 and 2
        timeline.seek(0)     # replay from the start
    """

    def __init__(self, events: Optional[Iterable[Event]] = None) -> None:
        # sorted() is stable: equal ticks keep emission order
        self._events: Tuple[Event, ...] = tuple(sorted(events or (), key=lambda ev: ev.t))
        self._idx = 0
        self._last_tick: Optional[int] = None

    def next(self, now: float) -> List[Event]:
        """
        Events up to floor(now) that have not been served yet.

        Returns an empty list when called again within the same integer tick.
        """
        tick = math.floor(now)
        out: List[Event] = []
        if tick == self._last_tick:
            return out
        self._last_tick = tick

        while self._idx < len(self._events) and self._events[self._idx].t <= tick:
            out.append(self._events[self._idx])
            self._idx += 1
        return out

    def seek(self, tick: float = 0) -> None:
        """
        Move the cursor to the first event with t >= tick.

        The next call to next() at or past tick serves everything from there.
        """
        self._last_tick = math.floor(tick) - 1
        self._idx = 0
        while self._idx < len(self._events) and self._events[self._idx].t < tick:
            self._idx += 1

    @property
    def events(self) -> Tuple[Event, ...]:
        return self._events

    @property
    def cursor(self) -> int:
        return self._idx

    @property
    def last_tick(self) -> Optional[int]:
        return self._last_tick

    @property
    def end_tick(self) -> int:
        """Tick of the last event, or -1 for an empty log."""
        return self._events[-1].t if self._events else -1

    @property
    def exhausted(self) -> bool:
        return self._idx >= len(self._events)

    def __len__(self) -> int:
        return len(self._events)
