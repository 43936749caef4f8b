"""
High resolution timer (perf_counter based).
"""

import time

class Timer:
    """High resolution timer used to pace rendered frames."""
    def __init__(self):
        self._last = time.perf_counter()
        self.delta = 0.0

    def reset(self):
        self._last = time.perf_counter()
        self.delta = 0.0

    def tick(self) -> float:
        """Update the timer and return the seconds since the last tick."""
        now = time.perf_counter()
        self.delta = now - self._last
        self._last = now
        return self.delta
