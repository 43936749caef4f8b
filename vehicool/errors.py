# vehicool/errors.py
"""
Exceptions raised by the scenario engine.
"""


class VehiCoolError(Exception):
    """Base class for every error raised by vehicool."""


class ConfigurationError(VehiCoolError, ValueError):
    """Invalid animation options (e.g. ``sample_time > 1 / frame_rate``)."""


class MissingCollaboratorError(VehiCoolError, RuntimeError):
    """The scenario has no track or no camera."""


class ScenarioLockedError(VehiCoolError, RuntimeError):
    """The object tree was modified while the scenario is animating."""
