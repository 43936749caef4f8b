"""
Core helpers shared by the animation loop.
"""

from vehicool.core.timer import Timer

__all__ = ["Timer"]
