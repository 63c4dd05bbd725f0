"""
Playback of event logs.

Timeline serves a fixed log per integer tick; Animator advances logical
time per scheduler frame or manual step and forwards each batch to a
render callback.
"""

from .timeline import Timeline
from .scheduler import FrameScheduler
from .animator import Animator, MIN_SPEED, DEFAULT_SPEED

__all__ = [
    "Timeline",
    "FrameScheduler",
    "Animator",
    "MIN_SPEED",
    "DEFAULT_SPEED",
]
