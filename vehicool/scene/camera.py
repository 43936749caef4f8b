"""
Cameras – the point of view used when the scenario is rendered.
"""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np


class Camera(ABC):
    """Viewpoint with update/render, outside the object tree."""

    @abstractmethod
    def update(self, step: Optional[int] = None) -> None:
        pass

    @abstractmethod
    def render(self, surface, step: Optional[int] = None) -> None:
        pass


class FixedCamera(Camera):
    """Static view of the whole scene."""
    def __init__(self, eye, target, up=(0.0, 0.0, 1.0), fov: float = 45.0):
        self.eye = np.asarray(eye, dtype=np.float64)
        self.target = np.asarray(target, dtype=np.float64)
        self.up = np.asarray(up, dtype=np.float64)
        self.fov = fov

    def update(self, step: Optional[int] = None) -> None:
        pass

    def render(self, surface, step: Optional[int] = None) -> None:
        surface.set_view(self.eye, self.target, self.up, self.fov)


class ChaseCamera(Camera):
    """
    Trails a node exposing ``pose`` and ``pose_at(step)``
    (x, y, z, roll, pitch, yaw).

    Updated after the objects, so it always looks at the target's pose of
    the same tick.
    """
    def __init__(self, target, distance: float = 8.0, height: float = 3.0,
                 look_ahead: float = 2.0, fov: float = 45.0):
        self.target = target
        self.distance = distance
        self.height = height
        self.look_ahead = look_ahead
        self.fov = fov
        self.eye = np.zeros(3)
        self.focus = np.zeros(3)
        self._surface = None

    def _follow(self, step=None):
        if step is None:
            pose = self.target.pose
        else:
            pose = self.target.pose_at(step)
        pose = np.asarray(pose, dtype=np.float64)
        position, yaw = pose[:3], pose[5]
        heading = np.array([np.cos(yaw), np.sin(yaw), 0.0])
        self.eye = position - self.distance * heading + np.array([0.0, 0.0, self.height])
        self.focus = position + self.look_ahead * heading
        if self._surface is not None:
            self._surface.set_view(self.eye, self.focus, (0.0, 0.0, 1.0), self.fov)

    def update(self, step: Optional[int] = None) -> None:
        self._follow()

    def render(self, surface, step: Optional[int] = None) -> None:
        # rendered before the objects, so read the target's pose for ``step``
        self._surface = surface
        self._follow(step)
