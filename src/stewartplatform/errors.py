"""
Exceptions raised while building platforms and trajectories.

Per-leg kinematic infeasibility is reported as data in the solver output and
never raised.
"""


class StewartPlatformError(Exception):
    """Base class of all errors raised by this package."""


class ConfigurationError(StewartPlatformError, ValueError):
    """Infeasible or invalid platform / trajectory configuration."""


class UnknownTrajectoryError(ConfigurationError):
    """Requested animation name or alias is not registered."""

    def __init__(self, name):
        super().__init__(f"Unknown trajectory '{name}'")
        self.name = name


class PathSegmentError(StewartPlatformError, ValueError):
    """A path segment has an unrecognized kind or is malformed."""


__all__ = [
    'StewartPlatformError',
    'ConfigurationError',
    'UnknownTrajectoryError',
    'PathSegmentError',
]
