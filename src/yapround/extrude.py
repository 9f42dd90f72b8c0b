## plane-aware solid, shell, beam and profile extrusion for yapround

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

"""
================================
Extruding profiles into solids
================================

Each function here follows the same steps: normalize the radius
point profile, resolve the placement for the requested plane, let the
engine build the body along +Z, and have the engine rotate and
translate it into place.  An invalid plane raises ``PlaneError``
before the engine is touched.

``extrude_solid()`` asks the engine to center the sweep itself, so its
centered placements never translate.  ``extrude_shell()`` and
``extrude_beam()`` sweep uncentered and use the half-length shift for
``-X`` and ``-Z`` (see ``yapround.plane``).

The engine defaults to the one named in ``yapround.settings``; pass
``engine=`` a registry name or a ``GeometryEngine`` to override it.
"""

from __future__ import annotations

import logging

from yapround import settings
from yapround.engine import BeamMode, RoundMode, get_engine
from yapround.plane import point_sweep_transform, shell_transform
from yapround.radiuspoint import normalize

logger = logging.getLogger(__name__)


def _profile(points):
    return normalize(points, strict=settings.get().strict_points)


def _defaults(resolution, convexity):
    cfg = settings.get()
    if resolution is None:
        resolution = cfg.resolution
    if convexity is None:
        convexity = cfg.convexity
    return resolution, convexity


def extrude_solid(points, length, plane='+Z', center=False, r1=0, r2=0,
                  resolution=None, convexity=None, *, twist=0, slices=None,
                  engine=None):
    """Round the radius point profile ``points`` and sweep it ``length``
    along ``plane``, filleting the start face by ``r1`` and the terminal
    face by ``r2``.  ``twist`` and ``slices`` are passed to the engine."""

    eng = get_engine(engine)
    pts = _profile(points)
    xf = point_sweep_transform(plane, length, center)
    resolution, convexity = _defaults(resolution, convexity)
    logger.debug('extrude_solid plane=%s center=%s -> %s', plane, center, xf)

    outline = eng.round_points(pts, resolution, RoundMode.CLOSED)
    body = eng.extrude_with_radius(outline, length, r1, r2, resolution,
                                   convexity=convexity, twist=twist,
                                   slices=slices, center=center)
    return eng.place(body, xf.translation, xf.rotation)


def extrude_shell(points, inner_offset, outer_offset, length, plane='+Z',
                  center=False, r1=0, r2=0, min_outer_radius=0,
                  min_inner_radius=0, resolution=None, children=(), *,
                  engine=None):
    """Sweep the wall between the ``inner_offset`` and ``outer_offset``
    offsets of ``points``.  ``children`` are 2D regions added inside the
    shell before sweeping."""

    eng = get_engine(engine)
    pts = _profile(points)
    xf = shell_transform(plane, length, center)
    resolution, convexity = _defaults(resolution, None)
    logger.debug('extrude_shell plane=%s center=%s -> %s', plane, center, xf)

    region = eng.shell(pts, inner_offset, outer_offset, min_outer_radius,
                       min_inner_radius, children=tuple(children),
                       resolution=resolution)
    body = eng.extrude_with_radius(region, length, r1, r2, resolution,
                                   convexity=convexity)
    return eng.place(body, xf.translation, xf.rotation)


def extrude_beam(points, inner_offset, outer_offset, length, plane='+Z',
                 start_angle=None, end_angle=None, mode=BeamMode.FREE_ENDS,
                 center=False, r1=0, r2=0, resolution=None, convexity=None, *,
                 min_radius=0, engine=None):
    """Treat ``points`` as a centerline, offset it by ``inner_offset``
    and ``outer_offset`` into a closed outline and sweep that.

    ``mode`` is a ``BeamMode`` or one of ``"free-ends"``,
    ``"forward-path-only"`` and ``"absolute-angle-endpoints"``; end
    angles left as ``None`` take the mode's default.
    """

    eng = get_engine(engine)
    pts = _profile(points)
    mode = BeamMode.lookup(mode)
    xf = shell_transform(plane, length, center)
    resolution, convexity = _defaults(resolution, convexity)
    logger.debug('extrude_beam plane=%s center=%s mode=%s -> %s',
                 plane, center, mode.name, xf)

    outline_points = eng.beam_chain(pts, inner_offset, outer_offset, mode,
                                    start_angle, end_angle, min_radius)
    outline = eng.round_points(outline_points, resolution, RoundMode.CLOSED)
    body = eng.extrude_with_radius(outline, length, r1, r2, resolution,
                                   convexity=convexity)
    return eng.place(body, xf.translation, xf.rotation)


def extrude_profile(profile, length, plane='+Z', center=False, convexity=None,
                    *, engine=None):
    """Sweep a ready-made 2D outline or ``Region`` along ``plane`` with
    flat ends and no rounding."""

    eng = get_engine(engine)
    xf = point_sweep_transform(plane, length, center)
    _, convexity = _defaults(None, convexity)
    logger.debug('extrude_profile plane=%s center=%s -> %s', plane, center, xf)

    body = eng.linear_extrude(profile, length, center=center, convexity=convexity)
    return eng.place(body, xf.translation, xf.rotation)


__all__ = [
    'extrude_solid',
    'extrude_shell',
    'extrude_beam',
    'extrude_profile',
]
