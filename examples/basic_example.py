import numpy as np

import vehicool as vc
from vehicool.utils import logger


def oval(n=400, a=60.0, b=30.0):
    """Elliptic centre line."""
    theta = np.linspace(0.0, 2.0 * np.pi, n)
    return np.column_stack([a * np.cos(theta), b * np.sin(theta)])


def lap_states(tf=10.0, sample_time=0.01, a=60.0, b=30.0):
    """One lap around the oval, one pose per tick."""
    t = np.arange(0.0, tf + sample_time / 2.0, sample_time)
    theta = 2.0 * np.pi * t / tf
    x, y = a * np.cos(theta), b * np.sin(theta)
    yaw = np.unwrap(np.arctan2(b * np.cos(theta), -a * np.sin(theta)))
    zeros = np.zeros_like(t)
    return np.column_stack([x, y, zeros, zeros, zeros, yaw])


if __name__ == "__main__":
    logger.info("Starting basic example...")

    scenario = vc.Scenario()
    scenario.set_track(vc.PolylineTrack(oval(), width=8.0))

    car = vc.TrajectoryObject(lap_states(), name="Car")
    car.add_child(vc.AttachedObject(offset=(0.5, 0.0, 1.9), name="Lidar"))
    scenario.add_root_object(car)

    scenario.add_camera(vc.ChaseCamera(car, distance=12.0, height=5.0))

    stats = scenario.animate(10.0, show_progress=True)
    logger.info(f"Done: {stats}")
