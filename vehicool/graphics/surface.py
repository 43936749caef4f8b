"""
Abstract render surface the scenario draws onto.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from vehicool.graphics.drawable import Drawable


class RenderSurface(ABC):
    """
    Retained-mode drawing target.

    Objects register their drawables once (``render``) and move them on
    ``update``; ``flush`` redraws everything that was registered.
    """

    @abstractmethod
    def begin(self) -> None:
        """Create the drawing context and start with no drawables."""

    @abstractmethod
    def add_drawable(self, drawable: Drawable) -> Drawable:
        pass

    @abstractmethod
    def drawables(self) -> Sequence[Drawable]:
        """Drawables registered since the last ``begin``."""

    def __contains__(self, drawable) -> bool:
        return any(d is drawable for d in self.drawables())

    @abstractmethod
    def set_view(
        self,
        eye: Sequence[float],
        target: Sequence[float],
        up: Sequence[float] = (0.0, 0.0, 1.0),
        fov: float = 45.0,
    ) -> None:
        pass

    @abstractmethod
    def flush(self) -> None:
        """Draw the current state immediately."""

    @abstractmethod
    def grab_frame(self) -> np.ndarray:
        """Return the last flushed frame as a (H, W, 3) uint8 array."""

    @abstractmethod
    def release(self) -> None:
        pass

    def should_close(self) -> bool:
        """True once the user asked to close the surface."""
        return False
