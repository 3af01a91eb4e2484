# errors.py
"""
Exception types raised by the physics core.

Empty neighbourhoods are not represented here: a flocking term with no
neighbours is simply the zero vector.
"""


class ConfigurationError(ValueError):
    """Raised when a session is configured with values the model cannot use,
    e.g. a non-positive mass or a negative neighbour count."""


class UnimplementedSurfaceError(NotImplementedError):
    """Raised when a Surface without a height or gradient is evaluated."""
