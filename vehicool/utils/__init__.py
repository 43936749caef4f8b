# vehicool/utils/__init__.py
"""
Utility package.

Exports:
    * logger          – ready logging.Logger (level INFO)
    * gl_check_error  – logs pending OpenGL errors
    * AnimationConfig – validated animation options
    * Profiler, ProgressBar
"""

from .logger import logger, gl_check_error
from .config import AnimationConfig, DEFAULT_CONFIG, load_config, save_config
from .profiler import Profiler
from .progress import ProgressBar

__all__ = [
    "logger",
    "gl_check_error",
    "AnimationConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "save_config",
    "Profiler",
    "ProgressBar",
]
