"""
Animation options: defaults, validation and an optional JSON override file.
A missing file simply yields the defaults.
"""

import json
import math
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from vehicool.errors import ConfigurationError
from vehicool.utils.logger import logger

DEFAULT_CONFIG = {
    "frame_rate": 30,
    "sample_time": 0.01,
    "fig_size": [960, 540],
    "show_progress": False,
    "show_figure": True,
    "save_video": False,
    "file_name": "VehiCool",
    "file_format": "MPEG-4",
    "file_quality": 100,
}


@dataclass
class AnimationConfig:
    """Validated options of :meth:`Scenario.animate`."""
    tf: float
    frame_rate: float = DEFAULT_CONFIG["frame_rate"]
    sample_time: float = DEFAULT_CONFIG["sample_time"]
    fig_size: Tuple[int, int] = field(
        default_factory=lambda: tuple(DEFAULT_CONFIG["fig_size"])
    )
    show_progress: bool = DEFAULT_CONFIG["show_progress"]
    show_figure: bool = DEFAULT_CONFIG["show_figure"]
    save_video: bool = DEFAULT_CONFIG["save_video"]
    file_name: str = DEFAULT_CONFIG["file_name"]
    file_format: str = DEFAULT_CONFIG["file_format"]
    file_quality: int = DEFAULT_CONFIG["file_quality"]

    def __post_init__(self):
        self.fig_size = tuple(int(v) for v in self.fig_size)
        self.validate()

    # -----------------------------------------------------------------
    def validate(self):
        for name in ("tf", "frame_rate", "sample_time"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ConfigurationError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value) or value <= 0:
                raise ConfigurationError(f"{name} must be > 0, got {value!r}")

        # the simulation must sample at least as finely as the frames
        if self.sample_time > 1.0 / self.frame_rate:
            raise ConfigurationError(
                f"sample_time ({self.sample_time}) > 1 / frame_rate "
                f"({1.0 / self.frame_rate:.6g})"
            )

        if len(self.fig_size) != 2 or min(self.fig_size) <= 0:
            raise ConfigurationError(f"fig_size must be (width, height), got {self.fig_size!r}")
        if not 0 <= self.file_quality <= 100:
            raise ConfigurationError(
                f"file_quality must be within [0, 100], got {self.file_quality!r}"
            )
        if not self.file_name:
            raise ConfigurationError("file_name must not be empty")

    @property
    def frame_period(self) -> float:
        return 1.0 / self.frame_rate

    # -----------------------------------------------------------------
    @classmethod
    def from_options(cls, tf, config_file=None, **options) -> "AnimationConfig":
        """Merge the JSON file (if any) with explicit keyword options."""
        known = {f.name for f in fields(cls)} - {"tf"}
        unknown = set(options) - known
        if unknown:
            raise TypeError(f"Unknown animation option(s): {', '.join(sorted(unknown))}")

        values: Dict[str, Any] = {}
        if config_file is not None:
            values.update(load_config(config_file))
        values.update(options)
        return cls(tf=tf, **values)


def load_config(path) -> Dict[str, Any]:
    """Read animation option overrides from a JSON file."""
    path = Path(path)
    if not path.is_file():
        logger.info(f"[Config] No config file at {path} – using defaults.")
        return {}

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Malformed config file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must hold a JSON object")

    unknown = set(data) - set(DEFAULT_CONFIG)
    if unknown:
        raise ConfigurationError(
            f"Unknown option(s) in {path}: {', '.join(sorted(unknown))}"
        )
    logger.info(f"[Config] Loaded configuration from {path}.")
    return data


def save_config(path, overrides: Optional[Dict[str, Any]] = None):
    """Write the defaults (plus ``overrides``) to ``path``."""
    data = dict(DEFAULT_CONFIG)
    data.update(overrides or {})
    path = Path(path)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=4)
    logger.info(f"[Config] Configuration saved to {path}.")
