"""
Animation package – frame schedule and the tick loop.
"""

from vehicool.animation.schedule import FrameSchedule
from vehicool.animation.loop import AnimationLoop, AnimationStats

__all__ = ["FrameSchedule", "AnimationLoop", "AnimationStats"]
