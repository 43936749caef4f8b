# -*- coding: utf-8 -*-
"""
conftest.py – call-recording mocks for the render surface, the video sink
and the scenario elements. No window, OpenGL context or ffmpeg needed.
"""

from typing import Any, List, Optional, Tuple

import numpy as np
import pytest

from vehicool.animation import loop as loop_module
from vehicool.graphics.surface import RenderSurface
from vehicool.scene import Camera, ObjectNode, Scenario, Track
from vehicool.video.sink import VideoSink


class _Recorder:
    """Records every call as (method_name, args)."""
    def __init__(self) -> None:
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def _record(self, name: str, *a) -> None:
        self.calls.append((name, a))

    def called(self, name: str) -> bool:
        """True if ``name`` was called at least once."""
        return any(call[0] == name for call in self.calls)

    def count(self, name: str) -> int:
        """How many times ``name`` was called."""
        return sum(1 for call in self.calls if call[0] == name)

    def args_of(self, name: str) -> list:
        return [call[1] for call in self.calls if call[0] == name]


# ----------------------------------------------------------------------
# MockSurface – implements the RenderSurface interface.
# ----------------------------------------------------------------------
class MockSurface(_Recorder, RenderSurface):
    def __init__(self, close_after: Optional[int] = None) -> None:
        super().__init__()
        self._drawables = []
        self.view = None
        self._close_after = close_after

    def begin(self) -> None:
        self._record("begin")
        self._drawables.clear()

    def add_drawable(self, drawable):
        self._record("add_drawable", drawable)
        self._drawables.append(drawable)
        return drawable

    def drawables(self):
        return tuple(self._drawables)

    def set_view(self, eye, target, up=(0.0, 0.0, 1.0), fov=45.0) -> None:
        self._record("set_view", eye, target, up, fov)
        self.view = (np.asarray(eye), np.asarray(target))

    def flush(self) -> None:
        self._record("flush")

    def grab_frame(self) -> np.ndarray:
        self._record("grab_frame")
        return np.zeros((4, 6, 3), dtype=np.uint8)

    def should_close(self) -> bool:
        return self._close_after is not None and self.count("flush") >= self._close_after

    def release(self) -> None:
        self._record("release")
        self._drawables.clear()


class MockVideoSink(_Recorder, VideoSink):
    def __init__(self, fail_on_open: bool = False) -> None:
        super().__init__()
        self.fail_on_open = fail_on_open

    def open(self, file_name, file_format) -> None:
        self._record("open", file_name, file_format)
        if self.fail_on_open:
            raise OSError("disk full")

    def set(self, frame_rate, quality) -> None:
        self._record("set", frame_rate, quality)

    def append_frame(self, image) -> None:
        self._record("append_frame", image.shape)

    def close(self) -> None:
        self._record("close")


# ----------------------------------------------------------------------
# Scenario elements writing into a shared log
# ----------------------------------------------------------------------
class RecordingNode(ObjectNode):
    def __init__(self, name: str, log: list, fail_at: Optional[int] = None):
        super().__init__(name)
        self.log = log
        self.fail_at = fail_at
        self.clock = 0      # implicit clock
        self.state = None

    def update(self, step=None):
        if self.fail_at is not None and step == self.fail_at:
            raise RuntimeError(f"{self.name} failed at tick {step}")
        self.clock = self.clock + 1 if step is None else step
        self.state = self.clock * 10
        self.log.append((self.name, "update", step))

    def render(self, surface, step=None):
        self.log.append((self.name, "render", step))


class RecordingCamera(Camera):
    def __init__(self, log: list, name: str = "camera"):
        self.log = log
        self.name = name
        self.steps = []

    def update(self, step=None):
        self.steps.append(step)
        self.log.append((self.name, "update", step))

    def render(self, surface, step=None):
        self.log.append((self.name, "render", step))


class RecordingTrack(Track):
    def __init__(self, log: list, name: str = "track"):
        self.log = log
        self.name = name

    def render(self, surface):
        self.log.append((self.name, "render", None))


# ----------------------------------------------------------------------
# Fixtures
# ----------------------------------------------------------------------
@pytest.fixture
def mock_surface() -> MockSurface:
    return MockSurface()


@pytest.fixture
def mock_sink() -> MockVideoSink:
    return MockVideoSink()


@pytest.fixture
def call_log() -> list:
    return []


@pytest.fixture
def scenario(call_log) -> Scenario:
    """Track + camera + R(C1(G1), C2) and a second root S."""
    sc = Scenario()
    sc.set_track(RecordingTrack(call_log))
    sc.add_camera(RecordingCamera(call_log))
    root = RecordingNode("R", call_log)
    c1 = root.add_child(RecordingNode("C1", call_log))
    c1.add_child(RecordingNode("G1", call_log))
    root.add_child(RecordingNode("C2", call_log))
    sc.add_root_object(root)
    sc.add_root_object(RecordingNode("S", call_log))
    return sc


@pytest.fixture
def sleeps(monkeypatch) -> list:
    """Replace the pacing sleep; returns the requested durations."""
    durations = []
    monkeypatch.setattr(loop_module.time, "sleep", durations.append)
    return durations
