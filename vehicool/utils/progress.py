"""
Single-line text progress bar, updated once per simulated tick.
"""

import sys


class ProgressBar:
    """Text progress bar written to ``stream`` (stdout by default)."""
    def __init__(self, total: int, width: int = 40, label: str = "Animating", stream=None):
        self.total = max(int(total), 1)
        self.width = width
        self.label = label
        self.stream = stream if stream is not None else sys.stdout
        self._last = None

    def update(self, count: int):
        fraction = min(max(count / self.total, 0.0), 1.0)
        filled = int(round(fraction * self.width))
        percent = round(fraction * 100.0, 1)
        # redraw only when the visible text changes
        if (filled, percent) == self._last:
            return
        self._last = (filled, percent)
        bar = "#" * filled + "-" * (self.width - filled)
        self.stream.write(f"\r{self.label} |{bar}| {percent:5.1f}% ({count}/{self.total})")
        self.stream.flush()

    def close(self):
        if self._last is not None:
            self.stream.write("\n")
            self.stream.flush()
