"""
Math sub-package: Mat4.
"""

from vehicool.math.mat4 import Mat4

__all__ = ["Mat4"]
