"""Geometry engines used by the yapround extruders."""

from __future__ import annotations

import logging

from yapround.engine.base import BeamMode, GeometryEngine, RoundMode
from yapround.errors import EngineError

from . import native as native

logger = logging.getLogger(__name__)

ENGINE_REGISTRY = {'native': native.NativeEngine()}


def register_engine(name: str, engine: GeometryEngine) -> None:
    if not isinstance(engine, GeometryEngine):
        raise TypeError('engine must be a GeometryEngine, got {!r}'.format(engine))
    ENGINE_REGISTRY[name] = engine
    logger.debug('registered geometry engine %r', name)


def get_engine(engine=None) -> GeometryEngine:
    """Return ``engine`` itself if it is an engine instance, the
    registered engine of that name if it is a string, or the configured
    default engine if it is ``None``."""

    if isinstance(engine, GeometryEngine):
        return engine
    if engine is None:
        from yapround import settings
        engine = settings.get().engine
    try:
        return ENGINE_REGISTRY[engine]
    except (KeyError, TypeError):
        raise EngineError('no geometry engine registered as {!r}'.format(engine)) from None


__all__ = [
    'BeamMode',
    'GeometryEngine',
    'RoundMode',
    'ENGINE_REGISTRY',
    'register_engine',
    'get_engine',
    'native',
]
