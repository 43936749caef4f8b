"""
Video sinks: abstract interface + imageio/ffmpeg implementation.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import imageio.v2 as imageio
import numpy as np

from vehicool.utils.logger import logger

# file_format -> (extension, ffmpeg codec)
FORMAT_PROFILES = {
    "MPEG-4": (".mp4", "libx264"),
    "Motion JPEG AVI": (".avi", "mjpeg"),
    "Uncompressed AVI": (".avi", "rawvideo"),
}


class VideoSink(ABC):
    """Scoped resource receiving captured frames."""

    @abstractmethod
    def open(self, file_name: str, file_format: str) -> None:
        pass

    @abstractmethod
    def set(self, frame_rate: float, quality: int) -> None:
        pass

    @abstractmethod
    def append_frame(self, image: np.ndarray) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        pass


class ImageioVideoSink(VideoSink):
    """
    Writes frames with ``imageio`` (ffmpeg plugin).

    The writer needs the frame rate, so it is created on the first frame.
    """
    def __init__(self):
        self.path: Optional[Path] = None
        self.codec: Optional[str] = None
        self.frame_rate = 30.0
        self.quality = 100
        self.frames = 0
        self._writer = None

    def open(self, file_name: str, file_format: str = "MPEG-4") -> None:
        try:
            extension, codec = FORMAT_PROFILES[file_format]
        except KeyError:
            raise ValueError(
                f"Unsupported file format {file_format!r}; "
                f"choose one of {', '.join(FORMAT_PROFILES)}"
            ) from None

        path = Path(file_name)
        if path.suffix.lower() != extension:
            path = path.with_name(path.name + extension)
        self.path = path
        self.codec = codec
        self.frames = 0
        logger.info(f"[Video] Opened {self.path} ({file_format}, {codec})")

    def set(self, frame_rate: float, quality: int) -> None:
        if self._writer is not None:
            raise RuntimeError("Cannot change video settings after the first frame")
        self.frame_rate = float(frame_rate)
        self.quality = int(quality)

    def _create_writer(self):
        kwargs = {"fps": self.frame_rate, "codec": self.codec}
        if self.codec != "rawvideo":
            # imageio uses a 0..10 quality scale
            kwargs["quality"] = self.quality / 10.0
        return imageio.get_writer(str(self.path), **kwargs)

    def append_frame(self, image: np.ndarray) -> None:
        if self.path is None:
            raise RuntimeError("Video sink is not open")
        if self._writer is None:
            self._writer = self._create_writer()
        self._writer.append_data(np.asarray(image))
        self.frames += 1

    def close(self) -> None:
        if self._writer is not None:
            self._writer.close()
            self._writer = None
        logger.info(f"[Video] Closed {self.path} ({self.frames} frames)")
