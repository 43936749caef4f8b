"""
VehiCool – compose a 3-D scenario (track, camera, tree of moving objects)
and animate it at a fixed frame rate, optionally recording a video.
"""

from vehicool.utils import logger, AnimationConfig
from vehicool.errors import (
    VehiCoolError,
    ConfigurationError,
    MissingCollaboratorError,
    ScenarioLockedError,
)
from vehicool.scene import (
    ObjectNode, Camera, FixedCamera, ChaseCamera, Track, PolylineTrack,
    TrajectoryObject, AttachedObject, Scenario,
)
from vehicool.animation import AnimationLoop, AnimationStats, FrameSchedule
from vehicool.graphics import Drawable, RenderSurface
from vehicool.video import VideoSink, ImageioVideoSink

__version__ = "1.0.0"

__all__ = [
    "Scenario",
    "ObjectNode",
    "Camera",
    "FixedCamera",
    "ChaseCamera",
    "Track",
    "PolylineTrack",
    "TrajectoryObject",
    "AttachedObject",
    "AnimationConfig",
    "AnimationLoop",
    "AnimationStats",
    "FrameSchedule",
    "Drawable",
    "RenderSurface",
    "VideoSink",
    "ImageioVideoSink",
    "VehiCoolError",
    "ConfigurationError",
    "MissingCollaboratorError",
    "ScenarioLockedError",
    "logger",
]
