"""
Frame scheduler.

The Animator never drives itself; it asks a host scheduler for the next
frame. FrameScheduler is the in-process host: callbacks requested during a
frame run on the following frame, never the current one.
"""

from typing import Callable, List

FrameCallback = Callable[[], None]


class FrameScheduler:
    """
    Deterministic, single-threaded frame queue.

    Usage:
        scheduler = FrameScheduler()
        animator = Animator(render=draw, scheduler=scheduler)
        animator.play()
        scheduler.run_frame()   # one animation frame
    """

    def __init__(self) -> None:
        self._pending: List[FrameCallback] = []
        self.frames = 0

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending.append(callback)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def run_frame(self) -> int:
        """
        Run every callback queued before this frame started.

        Returns:
            Number of callbacks run
        """
        batch, self._pending = self._pending, []
        for callback in batch:
            callback()
        self.frames += 1
        return len(batch)

    def run(self, max_frames: int) -> int:
        """
        Run frames until nothing is pending or max_frames is reached.

        Returns:
            Number of frames run
        """
        ran = 0
        while self._pending and ran < max_frames:
            self.run_frame()
            ran += 1
        return ran
