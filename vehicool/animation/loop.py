# vehicool/animation/loop.py
# -*- coding: utf-8 -*-
"""
Main animation loop.

* Validates the options before anything is allocated.
* Renders tick 1, then advances the scenario on every frame tick.
* Polls for cancellation once per tick, before any work.
* Either captures each frame to the video sink or sleeps to keep
  real-time pace (no catch-up when a frame is late).
* The surface, the video sink and the progress bar are released on every
  exit path.
"""
import time
from dataclasses import dataclass
from typing import Callable, Optional

from vehicool.animation.schedule import FrameSchedule
from vehicool.core.timer import Timer
from vehicool.errors import ConfigurationError
from vehicool.utils import logger, AnimationConfig, Profiler, ProgressBar


def check_file_format(file_format: str):
    from vehicool.video.sink import FORMAT_PROFILES
    if file_format not in FORMAT_PROFILES:
        raise ConfigurationError(
            f"Unsupported file format {file_format!r}; "
            f"choose one of {', '.join(FORMAT_PROFILES)}"
        )


@dataclass
class AnimationStats:
    """Outcome of one animation run."""
    ticks: int = 0
    frames: int = 0
    elapsed: float = 0.0
    cancelled: bool = False


class AnimationLoop:
    """Drives a scenario tick by tick."""
    # -----------------------------------------------------------------
    def __init__(
        self,
        scenario,
        config: AnimationConfig,
        surface=None,
        video_sink=None,
        cancel: Optional[Callable[[], bool]] = None,
        progress_stream=None,
    ):
        self.scenario = scenario
        self.config = config
        self.schedule = FrameSchedule(config.tf, config.frame_rate, config.sample_time)
        self.surface = surface
        self.video_sink = video_sink
        self.cancel = cancel
        self.progress_stream = progress_stream
        self.state = "Idle"

    # -----------------------------------------------------------------
    def _create_surface(self):
        from vehicool.graphics.gl_surface import GLSurface
        width, height = self.config.fig_size
        return GLSurface(width, height, visible=self.config.show_figure)

    def _create_sink(self):
        from vehicool.video.sink import ImageioVideoSink
        return ImageioVideoSink()

    def _cancelled(self, surface) -> bool:
        if surface.should_close():
            logger.info("[Animation] Surface closed – stopping")
            return True
        if self.cancel is not None and self.cancel():
            logger.info("[Animation] Cancelled")
            return True
        return False

    # -----------------------------------------------------------------
    def run(self) -> AnimationStats:
        cfg = self.config
        schedule = self.schedule
        self.state = "Configuring"
        self.scenario.check_ready()
        if cfg.save_video and self.video_sink is None:
            # the default sink only knows its own profiles
            check_file_format(cfg.file_format)

        surface = self.surface if self.surface is not None else self._create_surface()
        sink = None
        progress = None
        stats = AnimationStats()
        idx = 0

        logger.info(
            f"[Animation] tf={cfg.tf}s, {schedule.ticks} ticks, "
            f"{schedule.frames} frames at {cfg.frame_rate} fps"
        )
        profiler = Profiler("animate")
        try:
            with self.scenario.locked(), profiler:
                self.state = "InitialRender"
                surface.begin()
                self.scenario.render(surface, 1)

                if cfg.save_video:
                    opening = self.video_sink if self.video_sink is not None else self._create_sink()
                    opening.open(cfg.file_name, cfg.file_format)
                    sink = opening   # opened: closed in finally from here on
                    sink.set(cfg.frame_rate, cfg.file_quality)
                if cfg.show_progress:
                    progress = ProgressBar(schedule.ticks, stream=self.progress_stream)

                self.state = "Looping"
                timer = Timer()
                for idx in schedule.steps():
                    if self._cancelled(surface):
                        stats.cancelled = True
                        break
                    if schedule.is_frame(idx):
                        timer.reset()
                        self.scenario.advance(idx)
                        surface.flush()
                        work = timer.tick()

                        if sink is not None:
                            sink.append_frame(surface.grab_frame())
                        elif work < cfg.frame_period:
                            time.sleep(cfg.frame_period - work)
                        stats.frames += 1

                    if progress is not None:
                        progress.update(idx)
                    stats.ticks += 1
        except Exception:
            logger.error(
                f"[Animation] Failed at tick {idx} "
                f"(t={schedule.time_of(max(idx, 1)):.4f}s, state {self.state})"
            )
            raise
        finally:
            self.state = "Finalizing"
            try:
                if progress is not None:
                    progress.close()
                surface.release()
            finally:
                if sink is not None:
                    sink.close()
                self.state = "Done"

        stats.elapsed = profiler.elapsed
        logger.info(
            f"[Animation] {stats.frames} frames / {stats.ticks} ticks "
            f"in {stats.elapsed:.2f}s{' (cancelled)' if stats.cancelled else ''}"
        )
        return stats
