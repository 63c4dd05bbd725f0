"""
Playback settings read from the environment.

Environment Variables:
    ALGOVIZ_FPS: Frames per second for the terminal player - default: 30
    ALGOVIZ_SPEED: Default playback speed multiplier - default: 1.0
    ALGOVIZ_RANDOM_SIZE: Length of randomized input arrays - default: 12
    ALGOVIZ_RANDOM_SEED: Seed for randomized input - default: 0
    ALGOVIZ_MAX_FRAMES: Upper bound on frames for one playback - default: 100000
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _env_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    try:
        return float(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class PlaybackSettings:
    fps: int = 30
    speed: float = 1.0
    random_size: int = 12
    random_seed: int = 0
    max_frames: int = 100_000

    @staticmethod
    def from_env() -> "PlaybackSettings":
        """Settings from ALGOVIZ_* variables; unset or unparsable values keep defaults."""
        defaults = PlaybackSettings()
        fps = _env_int("ALGOVIZ_FPS")
        speed = _env_float("ALGOVIZ_SPEED")
        size = _env_int("ALGOVIZ_RANDOM_SIZE")
        seed = _env_int("ALGOVIZ_RANDOM_SEED")
        max_frames = _env_int("ALGOVIZ_MAX_FRAMES")
        return PlaybackSettings(
            fps=fps if fps and fps > 0 else defaults.fps,
            speed=speed if speed and speed > 0 else defaults.speed,
            random_size=size if size is not None and size >= 0 else defaults.random_size,
            random_seed=seed if seed is not None else defaults.random_seed,
            max_frames=max_frames if max_frames and max_frames > 0 else defaults.max_frames,
        )
