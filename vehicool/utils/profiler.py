"""
Profiling context manager – measures how long a block of code takes.
"""

import time
from vehicool.utils.logger import logger

class Profiler:
    """Context manager measuring the wall time of a block."""
    def __init__(self, name: str):
        self.name = name
        self._start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed = time.perf_counter() - self._start
        logger.debug(f"[Profiler] {self.name}: {self.elapsed * 1000.0:.2f} ms")
