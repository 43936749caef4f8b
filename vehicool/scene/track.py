"""
Static tracks.
"""

from abc import ABC, abstractmethod

import numpy as np

from vehicool.graphics.drawable import Drawable


class Track(ABC):
    """Render-only scenario element; never updated."""

    @abstractmethod
    def render(self, surface) -> None:
        pass


class PolylineTrack(Track):
    """Road of constant width around a sampled centre line."""
    def __init__(self, centerline, width: float = 10.0,
                 color=(0.25, 0.25, 0.25), name: str = "Track"):
        pts = np.asarray(centerline, dtype=np.float64)
        if pts.ndim != 2 or pts.shape[1] not in (2, 3) or len(pts) < 2:
            raise ValueError("centerline must be an (N, 2) or (N, 3) array with N >= 2")
        if pts.shape[1] == 2:
            pts = np.hstack([pts, np.zeros((len(pts), 1))])
        if width <= 0:
            raise ValueError("width must be > 0")

        self.name = name
        self.width = float(width)
        self.color = color
        self.centerline = pts
        self.left, self.right = self._borders(pts, self.width / 2.0)
        self.drawables = []

    @staticmethod
    def _borders(pts, half_width):
        tangents = np.gradient(pts[:, :2], axis=0)
        norms = np.linalg.norm(tangents, axis=1, keepdims=True)
        norms[norms == 0.0] = 1.0
        tangents /= norms
        normals = np.column_stack([-tangents[:, 1], tangents[:, 0], np.zeros(len(pts))])
        return pts + half_width * normals, pts - half_width * normals

    def render(self, surface) -> None:
        if self.drawables and all(d in surface for d in self.drawables):
            return
        edge_color = tuple(min(c + 0.2, 1.0) for c in self.color)
        self.drawables = [
            surface.add_drawable(Drawable(self.left, "line_strip", self.color, 2.0, f"{self.name}.left")),
            surface.add_drawable(Drawable(self.right, "line_strip", self.color, 2.0, f"{self.name}.right")),
            surface.add_drawable(Drawable(self.centerline, "line_strip", edge_color, 1.0, f"{self.name}.centre")),
        ]
