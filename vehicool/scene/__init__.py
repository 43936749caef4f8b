"""
Scene package – object nodes, cameras, tracks and the scenario.
"""

from vehicool.scene.node import ObjectNode
from vehicool.scene.camera import Camera, FixedCamera, ChaseCamera
from vehicool.scene.track import Track, PolylineTrack
from vehicool.scene.objects import TrajectoryObject, AttachedObject
from vehicool.scene.scenario import Scenario

__all__ = ["ObjectNode", "Camera", "FixedCamera", "ChaseCamera", "Track",
           "PolylineTrack", "TrajectoryObject", "AttachedObject", "Scenario"]
