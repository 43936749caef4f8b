# vehicool/graphics/gl_surface.py
# -*- coding: utf-8 -*-
"""
GLFW window + legacy OpenGL context.

* Hidden window when the figure should not be shown (off-screen capture).
* Every ``flush`` clears and redraws all registered drawables.
* ``grab_frame`` reads the back buffer and flips it with Pillow.
"""

from typing import List, Sequence

import glfw
import numpy as np
from OpenGL import GL
from PIL import Image

from vehicool.graphics.drawable import Drawable
from vehicool.graphics.surface import RenderSurface
from vehicool.math.mat4 import Mat4
from vehicool.utils.logger import logger, gl_check_error

_GL_MODES = {
    "points": GL.GL_POINTS,
    "lines": GL.GL_LINES,
    "line_strip": GL.GL_LINE_STRIP,
    "line_loop": GL.GL_LINE_LOOP,
    "triangles": GL.GL_TRIANGLES,
}


class GLSurface(RenderSurface):
    """Render surface backed by a GLFW window."""
    def __init__(
        self,
        width: int = 960,
        height: int = 540,
        visible: bool = True,
        title: str = "VehiCool",
        background=(1.0, 1.0, 1.0, 1.0),
        z_near: float = 0.1,
        z_far: float = 5000.0,
    ):
        self.width, self.height = int(width), int(height)
        self.visible = visible
        self.title = title
        self.background = background
        self.z_near = z_near
        self.z_far = z_far
        self.handle = None
        self._drawables: List[Drawable] = []
        self._eye = np.array([0.0, -50.0, 50.0], dtype=np.float32)
        self._target = np.zeros(3, dtype=np.float32)
        self._up = np.array([0.0, 0.0, 1.0], dtype=np.float32)
        self._fov = 45.0

    # -----------------------------------------------------------------
    def begin(self) -> None:
        self._drawables.clear()
        if not glfw.init():
            raise RuntimeError("Failed to initialize GLFW")

        glfw.window_hint(glfw.VISIBLE, glfw.TRUE if self.visible else glfw.FALSE)
        glfw.window_hint(glfw.RESIZABLE, glfw.FALSE)

        self.handle = glfw.create_window(self.width, self.height, self.title, None, None)
        if not self.handle:
            glfw.terminate()
            raise RuntimeError("Failed to create GLFW window")

        glfw.make_context_current(self.handle)
        glfw.swap_interval(0)   # pacing is done by the animation loop

        GL.glEnable(GL.GL_DEPTH_TEST)
        GL.glDepthFunc(GL.GL_LEQUAL)
        GL.glEnable(GL.GL_LINE_SMOOTH)
        GL.glClearColor(*self.background)
        GL.glPixelStorei(GL.GL_PACK_ALIGNMENT, 1)
        gl_check_error("GLSurface.begin")
        logger.info(
            f"[GLSurface] {self.width}x{self.height} window "
            f"({'visible' if self.visible else 'hidden'})"
        )

    # -----------------------------------------------------------------
    def add_drawable(self, drawable: Drawable) -> Drawable:
        self._drawables.append(drawable)
        return drawable

    def drawables(self) -> Sequence[Drawable]:
        return tuple(self._drawables)

    def set_view(self, eye: Sequence[float], target: Sequence[float],
                 up: Sequence[float] = (0.0, 0.0, 1.0), fov: float = 45.0) -> None:
        self._eye = np.asarray(eye, dtype=np.float32)
        self._target = np.asarray(target, dtype=np.float32)
        self._up = np.asarray(up, dtype=np.float32)
        self._fov = float(fov)

    # -----------------------------------------------------------------
    def _draw(self):
        width, height = glfw.get_framebuffer_size(self.handle)
        GL.glViewport(0, 0, width, height)
        GL.glClear(GL.GL_COLOR_BUFFER_BIT | GL.GL_DEPTH_BUFFER_BIT)

        aspect = width / height if height else 1.0
        GL.glMatrixMode(GL.GL_PROJECTION)
        GL.glLoadMatrixf(Mat4.perspective(self._fov, aspect, self.z_near, self.z_far).to_gl())
        GL.glMatrixMode(GL.GL_MODELVIEW)
        GL.glLoadMatrixf(Mat4.look_at(self._eye, self._target, self._up).to_gl())

        GL.glEnableClientState(GL.GL_VERTEX_ARRAY)
        for d in self._drawables:
            GL.glPushMatrix()
            GL.glMultMatrixf(d.model.to_gl())
            GL.glColor3f(*d.color)
            GL.glLineWidth(d.line_width)
            GL.glVertexPointer(3, GL.GL_FLOAT, 0, d.vertices)
            GL.glDrawArrays(_GL_MODES[d.mode], 0, len(d.vertices))
            GL.glPopMatrix()
        GL.glDisableClientState(GL.GL_VERTEX_ARRAY)
        return width, height

    def flush(self) -> None:
        self._draw()
        glfw.swap_buffers(self.handle)
        glfw.poll_events()
        gl_check_error("GLSurface.flush")

    def grab_frame(self) -> np.ndarray:
        # the back buffer is undefined after a swap, draw it again
        width, height = self._draw()
        GL.glReadBuffer(GL.GL_BACK)
        data = GL.glReadPixels(0, 0, width, height, GL.GL_RGB, GL.GL_UNSIGNED_BYTE)
        gl_check_error("GLSurface.grab_frame")
        image = Image.frombytes("RGB", (width, height), data)
        return np.asarray(image.transpose(Image.Transpose.FLIP_TOP_BOTTOM))

    # -----------------------------------------------------------------
    def should_close(self) -> bool:
        return self.handle is not None and bool(glfw.window_should_close(self.handle))

    def release(self) -> None:
        """Destroy the window and terminate GLFW."""
        if self.handle is None:
            return
        glfw.destroy_window(self.handle)
        glfw.terminate()
        self.handle = None
        self._drawables.clear()
        logger.info("[GLSurface] Released")
