"""
Scenario – composition root: one track, one camera, a forest of objects.
"""

from contextlib import contextmanager
from typing import List, Optional

from vehicool.animation.loop import AnimationLoop
from vehicool.errors import MissingCollaboratorError, ScenarioLockedError
from vehicool.scene.camera import Camera
from vehicool.scene.node import ObjectNode
from vehicool.scene.track import Track
from vehicool.utils import logger, AnimationConfig


class Scenario:
    """
    Owns the track, the camera and the root objects, and walks the object
    tree for rendering and updating.

    Traversal is pre-order in insertion order: a parent is always handled
    before its children, and earlier siblings before later ones.
    """
    def __init__(self):
        self.track: Optional[Track] = None
        self.camera: Optional[Camera] = None
        self.objects: List[ObjectNode] = []
        self.sample_time: Optional[float] = None
        self.frame_rate: Optional[float] = None
        self._locked = False

    # -----------------------------------------------------------------
    # Composition
    # -----------------------------------------------------------------
    def _check_unlocked(self, what: str):
        if self._locked:
            raise ScenarioLockedError(f"Cannot {what} while the scenario is animating")

    def set_track(self, track: Track):
        self._check_unlocked("set the track")
        self.track = track

    def add_camera(self, camera: Camera):
        self._check_unlocked("set the camera")
        self.camera = camera

    def add_root_object(self, node: ObjectNode):
        self._check_unlocked("add a root object")
        if node.parent is not None:
            raise ValueError(f"{node.name!r} is a child of {node.parent.name!r}, not a root")
        if any(node is root for root in self.objects):
            raise ValueError(f"{node.name!r} is already a root object")
        self.objects.append(node)

    def nodes(self) -> List[ObjectNode]:
        """All nodes of the forest, pre-order."""
        return [node for root in self.objects for node in root.traverse()]

    # -----------------------------------------------------------------
    def check_ready(self):
        if self.track is None:
            raise MissingCollaboratorError("Scenario has no track – call set_track() first")
        if self.camera is None:
            raise MissingCollaboratorError("Scenario has no camera – call add_camera() first")

    @contextmanager
    def locked(self):
        """Freeze the tree structure for the duration of the block."""
        nodes = self.nodes()
        self._locked = True
        for node in nodes:
            node._locked = True
        try:
            yield self
        finally:
            self._locked = False
            for node in nodes:
                node._locked = False

    # -----------------------------------------------------------------
    # Traversal
    # -----------------------------------------------------------------
    def render(self, surface, step: Optional[int] = None):
        """Draw track, camera, then every object tree."""
        self.check_ready()
        self.track.render(surface)
        self.camera.render(surface, step)
        for node in self.nodes():
            node.render(surface, step)

    def update_objects(self, step: Optional[int] = None):
        for root in self.objects:
            for node in root.traverse():
                node.update(step)

    def advance(self, step: Optional[int] = None):
        """Update the objects, then the camera, for the same tick."""
        if self.camera is None:
            raise MissingCollaboratorError("Scenario has no camera – call add_camera() first")
        self.update_objects(step)
        self.camera.update(step)

    # -----------------------------------------------------------------
    def animate(self, tf, surface=None, video_sink=None, cancel=None,
                config_file=None, progress_stream=None, **options):
        """
        Animate the scenario for ``tf`` seconds.

        Options (defaults): frame_rate (30), sample_time (0.01),
        fig_size ((960, 540)), show_progress (False), show_figure (True),
        save_video (False), file_name ("VehiCool"), file_format ("MPEG-4"),
        file_quality (100).

        ``surface`` and ``video_sink`` default to a GLFW window and an
        imageio writer. ``cancel`` is polled once per tick, before any work.
        Returns an :class:`AnimationStats`.
        """
        config = AnimationConfig.from_options(tf, config_file=config_file, **options)
        self.check_ready()
        self.sample_time = config.sample_time
        self.frame_rate = config.frame_rate
        logger.info(f"[Scenario] Animating {len(self.nodes())} objects")

        loop = AnimationLoop(
            self,
            config,
            surface=surface,
            video_sink=video_sink,
            cancel=cancel,
            progress_stream=progress_stream,
        )
        return loop.run()
