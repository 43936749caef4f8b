"""
Stock object nodes.

* TrajectoryObject – plays back precomputed poses, one row per tick.
* AttachedObject   – rigidly mounted on its parent (sensor, trailer hitch…).
"""

from typing import Optional

import numpy as np

from vehicool.graphics.drawable import Drawable, box_edges, axes_cross
from vehicool.math.mat4 import Mat4
from vehicool.scene.node import ObjectNode


class TrajectoryObject(ObjectNode):
    """Object following a sampled (N, 6) pose array: x, y, z, roll, pitch, yaw."""
    def __init__(self, states, shape=None, color=(0.8, 0.1, 0.1),
                 line_width: float = 2.0, name: str = "Vehicle"):
        super().__init__(name)
        states = np.asarray(states, dtype=np.float64)
        if states.ndim != 2 or states.shape[1] != 6 or len(states) == 0:
            raise ValueError("states must be a non-empty (N, 6) array")
        self.states = states
        self.shape = box_edges() if shape is None else np.asarray(shape, dtype=np.float32)
        self.color = color
        self.line_width = line_width
        self.drawable: Optional[Drawable] = None
        self._index = 0

    def _clamp(self, index: int) -> int:
        return min(max(index, 0), len(self.states) - 1)

    @property
    def index(self) -> int:
        return self._index

    @property
    def pose(self) -> np.ndarray:
        return self.states[self._index]

    def pose_at(self, step: int) -> np.ndarray:
        return self.states[self._clamp(step - 1)]

    # -----------------------------------------------------------------
    def update(self, step: Optional[int] = None) -> None:
        if step is None:
            self._index = self._clamp(self._index + 1)
        else:
            self._index = self._clamp(step - 1)
        self._sync()

    def render(self, surface, step: Optional[int] = None) -> None:
        if step is not None:
            self._index = self._clamp(step - 1)
        if self.drawable is None or self.drawable not in surface:
            self.drawable = surface.add_drawable(
                Drawable(self.shape, "lines", self.color, self.line_width, self.name)
            )
        self._sync()

    def _sync(self):
        if self.drawable is not None:
            self.drawable.set_pose(self.pose[:3], self.pose[3:])


class AttachedObject(ObjectNode):
    """Child node mounted at a body-frame ``offset`` of its parent."""
    def __init__(self, offset=(0.0, 0.0, 0.0), shape=None, color=(0.1, 0.3, 0.8),
                 line_width: float = 2.0, name: str = "Attachment"):
        super().__init__(name)
        self.offset = np.asarray(offset, dtype=np.float64)
        self.shape = axes_cross() if shape is None else np.asarray(shape, dtype=np.float32)
        self.color = color
        self.line_width = line_width
        self.drawable: Optional[Drawable] = None
        self._pose = np.zeros(6)

    @property
    def pose(self) -> np.ndarray:
        return self._pose

    def _mount(self, parent_pose) -> np.ndarray:
        parent_pose = np.asarray(parent_pose, dtype=np.float64)
        rotation = Mat4.from_rpy(*parent_pose[3:]).to_np()[:3, :3]
        position = parent_pose[:3] + rotation @ self.offset
        return np.concatenate([position, parent_pose[3:]])

    def pose_at(self, step: int) -> np.ndarray:
        return self._mount(self._parent().pose_at(step))

    def _parent(self):
        if self.parent is None:
            raise RuntimeError(f"{self.name!r} is not attached to a parent")
        return self.parent

    # -----------------------------------------------------------------
    def update(self, step: Optional[int] = None) -> None:
        # the parent was already updated for this tick (pre-order traversal)
        self._pose = self._mount(self._parent().pose)
        self._sync()

    def render(self, surface, step: Optional[int] = None) -> None:
        parent = self._parent()
        self._pose = self._mount(parent.pose if step is None else parent.pose_at(step))
        if self.drawable is None or self.drawable not in surface:
            self.drawable = surface.add_drawable(
                Drawable(self.shape, "lines", self.color, self.line_width, self.name)
            )
        self._sync()

    def _sync(self):
        if self.drawable is not None:
            self.drawable.set_pose(self._pose[:3], self._pose[3:])
