"""
Integer tick/frame arithmetic of the animation loop.

Ticks are 1-based; tick ``idx`` happens at ``t = (idx - 1) * sample_time``.
Counting ticks instead of comparing ``t mod frame_time`` keeps the frame
boundaries exact whatever the floating-point drift of ``t``.
"""

import math

_REL_EPS = 1e-9


def _floor_ratio(a: float, b: float) -> int:
    """floor(a / b), snapping quotients within a relative epsilon of an integer."""
    q = a / b
    nearest = round(q)
    if abs(q - nearest) <= _REL_EPS * max(1.0, abs(q)):
        return int(nearest)
    return int(math.floor(q))


class FrameSchedule:
    """Which simulation ticks are rendered frames."""
    def __init__(self, tf: float, frame_rate: float, sample_time: float):
        self.tf = tf
        self.frame_rate = frame_rate
        self.sample_time = sample_time
        # ties round up: 2.5 ticks per frame -> 3
        ratio = 1.0 / (frame_rate * sample_time)
        self.ticks_per_frame = max(1, int(math.floor(ratio + 0.5 + _REL_EPS * ratio)))
        # ticks at t = 0, st, 2 st, ... <= tf
        self.ticks = _floor_ratio(tf, sample_time) + 1

    @property
    def frame_time(self) -> float:
        return self.ticks_per_frame * self.sample_time

    @property
    def frames(self) -> int:
        return (self.ticks - 1) // self.ticks_per_frame + 1

    def steps(self) -> range:
        return range(1, self.ticks + 1)

    def is_frame(self, idx: int) -> bool:
        return (idx - 1) % self.ticks_per_frame == 0

    def time_of(self, idx: int) -> float:
        return (idx - 1) * self.sample_time

    def __repr__(self):
        return (f"FrameSchedule(ticks={self.ticks}, frames={self.frames}, "
                f"ticks_per_frame={self.ticks_per_frame})")
