"""Exception types raised by yapround."""

from __future__ import annotations


class YapRoundError(Exception):
    """Base class for all yapround errors."""


class PlaneError(YapRoundError, ValueError):
    """Raised when an extrusion plane identifier is not one of the six
    recognized planes.  Nothing is built when this is raised."""


class PointError(YapRoundError, ValueError):
    """Raised by strict normalization for a malformed radius point."""


class GeometryError(YapRoundError, ValueError):
    """Raised by an engine for degenerate input it cannot build."""


class EngineError(YapRoundError, LookupError):
    """Raised when an engine name is not registered."""


__all__ = [
    'YapRoundError',
    'PlaneError',
    'PointError',
    'GeometryError',
    'EngineError',
]
