"""Environment-driven configuration for yapround.

Values are read once at import; call ``reload_from_env()`` after
changing the environment.  Unset or unparseable variables fall back to
their defaults.

- ``YAPROUND_ENGINE``: default engine name (``native``)
- ``YAPROUND_RESOLUTION``: default fillet resolution (10, at least 1)
- ``YAPROUND_CONVEXITY``: default renderer convexity hint (10, at least 1)
- ``YAPROUND_STRICT_POINTS``: validate profiles in the extruders (off)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


def env_int(name: str, default: Optional[int] = None, *,
            min_value: Optional[int] = None) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = int(raw)
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_bool(name: str, default: bool = False) -> bool:
    """Boolean variable; accepts 0/1, true/false, yes/no, on/off."""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    s = raw.strip().lower()
    if s in ('1', 'true', 'yes', 'on'):
        return True
    if s in ('0', 'false', 'no', 'off', ''):
        return False
    return bool(default)


@dataclass
class _Settings:
    engine: str = 'native'
    resolution: int = 10
    convexity: int = 10
    strict_points: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    _settings.engine = os.getenv('YAPROUND_ENGINE') or 'native'
    _settings.resolution = env_int('YAPROUND_RESOLUTION', 10, min_value=1)
    _settings.convexity = env_int('YAPROUND_CONVEXITY', 10, min_value=1)
    _settings.strict_points = env_bool('YAPROUND_STRICT_POINTS', False)


def get() -> _Settings:
    """Return the current settings snapshot."""
    return _settings


reload_from_env()


__all__ = ['get', 'reload_from_env', 'env_int', 'env_bool']
