"""
Video capture.
"""

from vehicool.video.sink import VideoSink, ImageioVideoSink, FORMAT_PROFILES

__all__ = ["VideoSink", "ImageioVideoSink", "FORMAT_PROFILES"]
