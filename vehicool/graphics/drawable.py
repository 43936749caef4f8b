"""
Retained-mode drawing handles and a few stock shapes.
"""

from typing import Sequence, Tuple

import numpy as np

from vehicool.math.mat4 import Mat4

MODES = ("points", "lines", "line_strip", "line_loop", "triangles")


class Drawable:
    """Vertex array + primitive mode + color + model matrix."""
    def __init__(
        self,
        vertices,
        mode: str = "lines",
        color: Tuple[float, float, float] = (0.0, 0.0, 0.0),
        line_width: float = 1.0,
        name: str = "Drawable",
    ):
        if mode not in MODES:
            raise ValueError(f"Unknown primitive mode: {mode}")
        self.vertices = np.ascontiguousarray(vertices, dtype=np.float32).reshape(-1, 3)
        self.mode = mode
        self.color = tuple(float(c) for c in color)
        self.line_width = float(line_width)
        self.name = name
        self.model = Mat4.identity()

    def set_pose(self, position: Sequence[float], angles: Sequence[float] = (0.0, 0.0, 0.0)):
        """Place the drawable at ``position`` with (roll, pitch, yaw) in radians."""
        x, y, z = (float(v) for v in position)
        roll, pitch, yaw = (float(a) for a in angles)
        self.model = Mat4.translate(x, y, z) @ Mat4.from_rpy(roll, pitch, yaw)

    def world_vertices(self) -> np.ndarray:
        return self.model.apply(self.vertices)

    def __repr__(self):
        return f"Drawable({self.name!r}, mode={self.mode!r}, n={len(self.vertices)})"


def box_edges(length: float = 4.5, width: float = 1.8, height: float = 1.5) -> np.ndarray:
    """Wireframe box for ``mode='lines'``, origin at the centre of the base."""
    hl, hw = length / 2.0, width / 2.0
    corners = np.array([
        [-hl, -hw, 0.0], [hl, -hw, 0.0], [hl, hw, 0.0], [-hl, hw, 0.0],
        [-hl, -hw, height], [hl, -hw, height], [hl, hw, height], [-hl, hw, height],
    ], dtype=np.float32)
    edges = [
        (0, 1), (1, 2), (2, 3), (3, 0),   # base
        (4, 5), (5, 6), (6, 7), (7, 4),   # roof
        (0, 4), (1, 5), (2, 6), (3, 7),   # pillars
    ]
    return corners[np.array(edges).ravel()]


def axes_cross(size: float = 1.0) -> np.ndarray:
    """Three orthogonal segments, handy for sensors and markers."""
    h = size / 2.0
    return np.array([
        [-h, 0, 0], [h, 0, 0],
        [0, -h, 0], [0, h, 0],
        [0, 0, -h], [0, 0, h],
    ], dtype=np.float32)
