"""
Graphics layer: render-surface interface and retained-mode drawables.

The GLFW/OpenGL implementation lives in ``vehicool.graphics.gl_surface`` and
is imported on demand.
"""

from vehicool.graphics.drawable import Drawable, box_edges, axes_cross
from vehicool.graphics.surface import RenderSurface

__all__ = [
    "Drawable",
    "RenderSurface",
    "box_edges",
    "axes_cross",
]
