## extrusion plane selection for yapround

## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Placement of XY-plane profiles into one of six extrusion planes.

Profiles are always authored flat in the XY plane and swept along +Z
by an engine.  ``resolve_plane()`` returns the rotation (Euler degrees,
X then Y then Z) and the translation that carry that sweep so it runs
along the requested axis and sign.

Two centering conventions exist.  Point-sweep extrusions ask the
engine to center along the sweep itself (``precentered=True``), so a
centered placement never translates.  Shell and beam extrusions are
swept uncentered, and for ``-X`` and ``-Z`` a centered placement
shifts back by half the length instead of the full length.  Both are
kept as they are; see ``PlaneRule``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NamedTuple, Tuple

from yapround.errors import PlaneError

Vec3 = Tuple[float, float, float]


class Plane(enum.Enum):
    POS_X = '+X'
    NEG_X = '-X'
    POS_Y = '+Y'
    NEG_Y = '-Y'
    POS_Z = '+Z'
    NEG_Z = '-Z'

    @classmethod
    def lookup(cls, value) -> "Plane":
        """Return the ``Plane`` for a member or its exact string value."""

        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            raise PlaneError('invalid extrusion plane {!r}, expected one of {}'.format(
                value, ', '.join(p.value for p in cls))) from None


class Transform(NamedTuple):
    translation: Vec3
    rotation: Vec3


@dataclass(frozen=True)
class PlaneRule:
    """How one plane is reached from the +Z sweep.

    ``axis`` is the world axis the translation acts on.  When not
    centered the translation is ``offset * length`` along it; when
    centered it is zero for precentered sweeps and
    ``centered_offset * length`` otherwise.
    """

    rotation: Vec3
    axis: int = 0
    offset: float = 0.0
    centered_offset: float = 0.0

    def translation(self, length, center, precentered=True) -> Vec3:
        if not center:
            factor = self.offset
        elif precentered:
            factor = 0.0
        else:
            factor = self.centered_offset
        t = [0.0, 0.0, 0.0]
        if factor:
            t[self.axis] = factor*length
        return (t[0], t[1], t[2])


PLANE_RULES = {
    Plane.POS_X: PlaneRule((90, 0, 90)),
    Plane.NEG_X: PlaneRule((90, 0, 90), axis=0, offset=-1.0, centered_offset=-0.5),
    Plane.POS_Y: PlaneRule((90, 0, 0), axis=1, offset=1.0),
    Plane.NEG_Y: PlaneRule((90, 0, 0)),
    Plane.POS_Z: PlaneRule((0, 0, 0)),
    Plane.NEG_Z: PlaneRule((0, 0, 0), axis=2, offset=-1.0, centered_offset=-0.5),
}


def resolve_plane(plane, length, center=False, precentered=True) -> Transform:
    """Return the ``Transform`` placing a +Z sweep of ``length`` into
    ``plane``.  Raises ``PlaneError`` for an unknown plane."""

    rule = PLANE_RULES[Plane.lookup(plane)]
    return Transform(rule.translation(length, center, precentered), rule.rotation)


def point_sweep_transform(plane, length, center=False) -> Transform:
    return resolve_plane(plane, length, center, precentered=True)


def shell_transform(plane, length, center=False) -> Transform:
    return resolve_plane(plane, length, center, precentered=False)


__all__ = [
    'Plane',
    'Transform',
    'PlaneRule',
    'PLANE_RULES',
    'resolve_plane',
    'point_sweep_transform',
    'shell_transform',
]
