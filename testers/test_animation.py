# -*- coding: utf-8 -*-
import io

import pytest

from conftest import MockSurface, MockVideoSink, RecordingCamera, RecordingNode, RecordingTrack
from vehicool import AnimationConfig, ConfigurationError, FrameSchedule, MissingCollaboratorError
from vehicool.scene import Scenario

FRAME_STEPS = list(range(1, 101, 3))   # t = 0, 0.03, ..., 0.99


# ----------------------------------------------------------------------
# Frame schedule
# ----------------------------------------------------------------------
def test_default_schedule():
    s = FrameSchedule(tf=1, frame_rate=30, sample_time=0.01)
    assert s.ticks == 101
    assert s.ticks_per_frame == 3
    assert s.frame_time == pytest.approx(0.03)
    assert s.frames == 34
    frames = [idx for idx in s.steps() if s.is_frame(idx)]
    assert frames == FRAME_STEPS
    assert [round(s.time_of(i), 2) for i in frames[:3]] == [0.0, 0.03, 0.06]
    assert round(s.time_of(frames[-1]), 2) == 0.99


@pytest.mark.parametrize("tf, frame_rate, sample_time, ticks, frames", [
    (1, 25, 0.01, 101, 26),
    (2, 100, 0.01, 201, 201),
    (0.5, 30, 1 / 30, 16, 16),
    (10, 30, 0.001, 10001, 304),
    (1.005, 30, 0.01, 101, 34),
])
def test_schedule_counts(tf, frame_rate, sample_time, ticks, frames):
    s = FrameSchedule(tf, frame_rate, sample_time)
    assert s.ticks == ticks
    assert s.frames == frames
    assert sum(s.is_frame(i) for i in s.steps()) == frames


def test_half_ticks_per_frame_round_up():
    # 1 / (40 * 0.01) = 2.5 ticks per frame -> a frame every 3 ticks
    s = FrameSchedule(tf=1, frame_rate=40, sample_time=0.01)
    assert s.ticks_per_frame == 3
    assert s.frame_time == pytest.approx(0.03)
    assert [i for i in s.steps() if s.is_frame(i)][:4] == [1, 4, 7, 10]


@pytest.mark.parametrize("tf, sample_time, ticks", [
    (20_000, 0.0001, 200_000_001),
    (1e6, 0.001, 1_000_000_001),
    (0.3, 0.1, 4),
])
def test_tick_count_tolerates_float_error(tf, sample_time, ticks):
    assert FrameSchedule(tf, 1 / sample_time, sample_time).ticks == ticks


# ----------------------------------------------------------------------
# Configuration
# ----------------------------------------------------------------------
@pytest.mark.parametrize("frame_rate", [1, 10, 24, 30, 60, 100])
@pytest.mark.parametrize("fraction", [1.0, 0.5, 0.1])
def test_valid_rates_are_accepted(frame_rate, fraction):
    AnimationConfig(tf=1, frame_rate=frame_rate, sample_time=fraction / frame_rate)


def test_too_coarse_sample_time_is_rejected(scenario, call_log, mock_surface, mock_sink):
    with pytest.raises(ConfigurationError, match="1 / frame_rate"):
        scenario.animate(1, surface=mock_surface, video_sink=mock_sink,
                         frame_rate=30, sample_time=0.05, save_video=True)
    assert mock_surface.calls == []
    assert mock_sink.calls == []
    assert call_log == []


def test_missing_collaborator_fails_before_allocation(call_log, mock_surface, mock_sink):
    sc = Scenario()
    sc.add_root_object(RecordingNode("R", call_log))
    with pytest.raises(MissingCollaboratorError):
        sc.animate(1, surface=mock_surface, video_sink=mock_sink, save_video=True)
    assert mock_surface.calls == []
    assert mock_sink.calls == []


def test_unknown_option(scenario, mock_surface):
    with pytest.raises(TypeError, match="frame_rte"):
        scenario.animate(1, surface=mock_surface, frame_rte=30)


def test_unknown_file_format_fails_before_the_surface_opens(scenario, call_log, mock_surface):
    with pytest.raises(ConfigurationError, match="Archival"):
        scenario.animate(1, surface=mock_surface, save_video=True, file_format="Archival")
    assert mock_surface.calls == []
    assert call_log == []


def test_custom_sink_decides_its_own_formats(scenario, mock_surface, mock_sink):
    scenario.animate(0.1, surface=mock_surface, video_sink=mock_sink,
                     save_video=True, file_format="Archival")
    assert mock_sink.args_of("open") == [("VehiCool", "Archival")]


# ----------------------------------------------------------------------
# Loop
# ----------------------------------------------------------------------
def test_capture_appends_one_frame_per_rendered_tick(scenario, mock_surface, mock_sink, sleeps):
    stats = scenario.animate(1, surface=mock_surface, video_sink=mock_sink,
                             save_video=True, file_name="clip", file_quality=80)

    assert stats.ticks == 101
    assert stats.frames == 34
    assert not stats.cancelled
    assert mock_sink.args_of("open") == [("clip", "MPEG-4")]
    assert mock_sink.args_of("set") == [(30, 80)]
    assert mock_sink.count("append_frame") == 34
    assert mock_sink.count("close") == 1
    assert mock_surface.count("flush") == 34
    assert mock_surface.count("grab_frame") == 34
    assert mock_surface.count("release") == 1
    assert sleeps == []    # no pacing while capturing
    assert scenario.camera.steps == FRAME_STEPS


def test_initial_render_happens_before_the_loop(scenario, call_log, mock_surface, sleeps):
    scenario.animate(0.1, surface=mock_surface)
    assert mock_surface.calls[0][0] == "begin"
    renders = [entry for entry in call_log if entry[1] == "render"]
    assert [n for n, _, _ in renders] == ["track", "camera", "R", "C1", "G1", "C2", "S"]
    assert all(step == 1 for name, _, step in renders if name != "track")
    assert call_log.index(("R", "update", 1)) > call_log.index(("S", "render", 1))


def test_node_failure_still_closes_the_sink(call_log, mock_surface, mock_sink, sleeps):
    sc = Scenario()
    sc.set_track(RecordingTrack(call_log))
    sc.add_camera(RecordingCamera(call_log))
    root = RecordingNode("R", call_log)
    root.add_child(RecordingNode("bad", call_log, fail_at=10))
    sc.add_root_object(root)

    with pytest.raises(RuntimeError, match="bad failed at tick 10"):
        sc.animate(1, surface=mock_surface, video_sink=mock_sink, save_video=True)

    assert mock_sink.count("append_frame") == 3    # ticks 1, 4, 7
    assert mock_sink.count("close") == 1
    assert mock_surface.count("release") == 1
    # the lock is gone after the failure
    sc.add_root_object(RecordingNode("later", call_log))


def test_sink_that_failed_to_open_is_not_closed(scenario, mock_surface, sleeps):
    sink = MockVideoSink(fail_on_open=True)
    with pytest.raises(OSError):
        scenario.animate(1, surface=mock_surface, video_sink=sink, save_video=True)
    assert not sink.called("close")
    assert mock_surface.count("release") == 1


def test_realtime_pacing(scenario, mock_surface, mock_sink, sleeps):
    stats = scenario.animate(1, surface=mock_surface, video_sink=mock_sink)
    assert stats.frames == 34
    assert not mock_sink.calls              # capture disabled
    assert not mock_surface.called("grab_frame")
    assert 0 < len(sleeps) <= 34
    assert all(0 < d <= 1 / 30 for d in sleeps)


def test_late_frames_are_not_caught_up(scenario, mock_surface, sleeps, monkeypatch):
    from vehicool.core import timer as timer_module
    clock = iter(range(0, 10_000))
    # every perf_counter call moves 1 s forward: each frame is late
    monkeypatch.setattr(timer_module.time, "perf_counter", lambda: float(next(clock)))
    stats = scenario.animate(0.1, surface=mock_surface)
    assert stats.frames == 4
    assert sleeps == []


def test_closing_the_surface_cancels(scenario, sleeps):
    surface = MockSurface(close_after=5)
    stats = scenario.animate(1, surface=surface)
    assert stats.cancelled
    assert stats.frames == 5
    assert surface.count("release") == 1


def test_cancel_callback(scenario, mock_surface, mock_sink, sleeps):
    polls = []

    def cancel():
        polls.append(1)
        return len(polls) > 4     # stop at tick 5

    stats = scenario.animate(1, surface=mock_surface, video_sink=mock_sink,
                             save_video=True, cancel=cancel)
    assert stats.cancelled
    assert len(polls) == 5        # once per tick, frame or not
    assert stats.ticks == 4
    assert stats.frames == 2      # ticks 1 and 4
    assert mock_sink.count("append_frame") == 2
    assert mock_sink.count("close") == 1


def test_progress_is_reported_per_tick(scenario, mock_surface, sleeps):
    stream = io.StringIO()
    scenario.animate(0.1, surface=mock_surface, show_progress=True, progress_stream=stream)
    out = stream.getvalue()
    assert out.count("\r") == 11       # 11 ticks, one redraw each
    assert "100.0% (11/11)" in out
    assert out.endswith("\n")


def test_scenario_records_timing(scenario, mock_surface, sleeps):
    scenario.animate(0.1, surface=mock_surface, frame_rate=25, sample_time=0.02)
    assert scenario.frame_rate == 25
    assert scenario.sample_time == 0.02
