import numpy as np

import vehicool as vc
from vehicool.utils import logger


if __name__ == "__main__":
    t = np.arange(0.0, 5.005, 0.005)
    states = np.column_stack([10.0 * t, np.zeros_like(t), np.zeros_like(t),
                              np.zeros_like(t), np.zeros_like(t), np.zeros_like(t)])

    scenario = vc.Scenario()
    scenario.set_track(vc.PolylineTrack([[-10.0, 0.0], [70.0, 0.0]], width=7.0))
    scenario.add_root_object(vc.TrajectoryObject(states, name="Car"))
    scenario.add_camera(vc.FixedCamera(eye=(25.0, -40.0, 25.0), target=(25.0, 0.0, 0.0)))

    # off-screen capture, runs as fast as rendering allows
    stats = scenario.animate(
        5.0,
        sample_time=0.005,
        frame_rate=50,
        show_figure=False,
        save_video=True,
        file_name="straight_line",
    )
    logger.info(f"Recorded {stats.frames} frames")
