# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("yapround")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

from yapround.errors import (EngineError, GeometryError, PlaneError,
                             PointError, YapRoundError)
from yapround.radiuspoint import RadiusPoint, mirror, normalize, transform
from yapround.plane import Plane, Transform, resolve_plane
from yapround.solid import Region, Solid
from yapround.engine import BeamMode, GeometryEngine, RoundMode, get_engine
from yapround.extrude import (extrude_beam, extrude_profile, extrude_shell,
                              extrude_solid)

__all__ = [
    'YapRoundError', 'PlaneError', 'PointError', 'GeometryError', 'EngineError',
    'RadiusPoint', 'normalize', 'transform', 'mirror',
    'Plane', 'Transform', 'resolve_plane',
    'Region', 'Solid',
    'BeamMode', 'GeometryEngine', 'RoundMode', 'get_engine',
    'extrude_solid', 'extrude_shell', 'extrude_beam', 'extrude_profile',
]
