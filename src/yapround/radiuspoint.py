## radius points: 2D profile vertices annotated with a fillet radius

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

"""radius point profiles for **yapround**

====================
OVERVIEW
====================

A radius point is a 2D vertex with an associated corner radius, i.e.
``(x, y, r)``.  A radius of zero means a sharp corner.  A profile is
an ordered list of radius points; the order is the winding order, and
for closed profiles the last point connects back to the first.

Callers may write profiles with two-component points, e.g. ::

   square = [[0,0],[10,0],[10,10,2],[0,10]]

``normalize()`` turns such a list into canonical ``RadiusPoint``
triples, giving every two-component point a radius of zero.  Radii are
not range checked here: a negative radius is carried through and its
meaning is up to whichever engine consumes the profile.

``transform()`` rotates a profile about the origin and then translates
it, leaving radii alone, and ``mirror()`` builds a symmetric profile
from one half.

"""

from __future__ import annotations

from numbers import Real
from typing import Iterable, List, NamedTuple, Sequence

import numpy as np

from yapround.errors import PointError
from yapround.xform import Rotation, Translation, apply


class RadiusPoint(NamedTuple):
    x: float
    y: float
    r: float = 0


def _check_point(index, pt):
    try:
        n = len(pt)
    except TypeError:
        raise PointError('point {} is not a sequence: {!r}'.format(index, pt)) from None
    if n < 2:
        raise PointError('point {} needs at least two components, got {}'.format(index, n))
    for c in pt[0:3]:
        if isinstance(c, bool) or not isinstance(c, Real):
            raise PointError('point {} has a non-numeric component: {!r}'.format(index, c))


def normalize(points: Iterable[Sequence[float]], strict: bool = False) -> List[RadiusPoint]:
    """Return ``points`` as a list of ``RadiusPoint``.

    Two-component points get radius 0, the third component of longer
    points is carried through unchanged and anything past it is
    ignored.  Order and length are preserved.  With ``strict=True``
    each point is checked for arity and numeric components and a
    ``PointError`` is raised for the first bad one; otherwise
    malformed points fail wherever they are first used.
    """

    result = []
    for i, pt in enumerate(points):
        if strict:
            _check_point(i, pt)
        if len(pt) > 2:
            result.append(RadiusPoint(pt[0], pt[1], pt[2]))
        else:
            result.append(RadiusPoint(pt[0], pt[1], 0))
    return result


def transform(points, translation=(0, 0), rotation=0) -> List[RadiusPoint]:
    """Rotate ``points`` about the origin by ``rotation`` degrees, then
    translate by the XY ``translation``.  Radii are unchanged."""

    pts = normalize(points)
    if not pts:
        return []
    M = Translation((translation[0], translation[1], 0)) @ Rotation((0, 0, 1), rotation)
    xy = apply(M, np.array([[p.x, p.y] for p in pts], dtype=float))
    return [RadiusPoint(float(q[0]), float(q[1]), p.r) for q, p in zip(xy, pts)]


def mirror(points, angle=0, end_attenuation=(0, 0)) -> List[RadiusPoint]:
    """Return ``points`` followed by their reflection across the line
    through the origin at ``angle`` degrees, in reverse order.

    ``end_attenuation`` drops that many points from the start and end
    of the reflected copy, which is how the points lying on the mirror
    line are kept from being doubled.
    """

    pts = normalize(points)
    skip_start, skip_end = end_attenuation
    aligned = transform(pts, (0, 0), -angle)
    half = aligned[skip_start:len(aligned) - skip_end]
    flipped = [RadiusPoint(p.x, -p.y, p.r) for p in half]
    back = transform(flipped, (0, 0), angle)
    return pts + list(reversed(back))


def signed_area(points) -> float:
    """Shoelace area of a closed profile, positive when counterclockwise."""

    pts = normalize(points)
    total = 0.0
    for i, p in enumerate(pts):
        q = pts[(i + 1) % len(pts)]
        total += p.x*q.y - q.x*p.y
    return total/2.0


__all__ = [
    'RadiusPoint',
    'normalize',
    'transform',
    'mirror',
    'signed_area',
]
