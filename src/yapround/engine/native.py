## native yapround geometry engine: radius point rounding, offsets,
## shells, beam chains and filleted extrusion as triangle meshes

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
=====================================
Native geometry engine for yapround
=====================================

A self-contained implementation of the engine contract in
``yapround.engine.base``, built on numpy for the vector math and on
``mapbox-earcut`` for cap triangulation.

Rounding replaces each corner with a circular fillet of the corner's
radius, tangent to both edges, sampled with ``resolution`` segments.
When the fillets at the two ends of an edge would need more than the
edge's length, both are shrunk in proportion.  Radii of zero or less
leave the corner sharp.

Offsets are mitred.  Offsetting a fillet of radius r by d away from
its center gives radius r+d, towards its center r-d, floored at zero;
sharp corners stay sharp unless a minimum radius is asked for.

Filleted extrusion sweeps a region along +Z as a stack of layers.
Each end face gets ``resolution`` quarter-circle layers inset from the
outline, a negative radius flaring outwards instead.  The result is a
closed mesh with outward winding.
"""

from __future__ import annotations

import logging
from math import atan2, cos, radians, sin, sqrt, tan, pi

import numpy as np

try:
    import mapbox_earcut as _earcut
except ImportError as exc:  # pragma: no cover - import guard
    raise ImportError(
        "mapbox-earcut must be installed to use the native yapround engine"
    ) from exc

from yapround.engine.base import BeamMode, GeometryEngine, RoundMode
from yapround.errors import GeometryError
from yapround.radiuspoint import RadiusPoint, normalize, signed_area
from yapround.solid import Region, Solid
from yapround.xform import EulerRotation, Rotation, Translation, apply, epsilon

logger = logging.getLogger(__name__)


## 2D helpers

def _unit(v):
    m = float(np.hypot(v[0], v[1]))
    if m < epsilon:
        raise GeometryError('zero-length segment in profile')
    return v/m


def _rot2(v, angle):
    a = radians(angle)
    c, s = cos(a), sin(a)
    return np.array([c*v[0] - s*v[1], s*v[0] + c*v[1]])


def _left(v):
    return np.array([-v[1], v[0]])


def _cross(a, b):
    return float(a[0]*b[1] - a[1]*b[0])


def _dedupe(pts, closed=True):
    """drop consecutive coincident points (and a closing duplicate)"""
    out = [pts[0]]
    for p in pts[1:]:
        if np.max(np.abs(p - out[-1])) > epsilon:
            out.append(p)
    if closed and len(out) > 1 and np.max(np.abs(out[0] - out[-1])) <= epsilon:
        out.pop()
    return np.array(out)


def _miter(n1, n2, d):
    """offset vector for a vertex joining edges with unit normals n1, n2"""
    denom = 1.0 + float(np.dot(n1, n2))
    if denom < epsilon:
        # the path doubles back on itself
        return n1*d
    return (n1 + n2)*(d/denom)


def offset_loop(loop, d):
    """Mitred offset of a closed loop by ``d`` along the right-hand
    normal of each edge.  For a counterclockwise outer loop or a
    clockwise hole that is away from the enclosed material."""

    pts = np.asarray(loop, dtype=float)
    if d == 0:
        return pts.copy()
    nxt = np.roll(pts, -1, axis=0)
    edges = nxt - pts
    lengths = np.hypot(edges[:, 0], edges[:, 1])
    if np.any(lengths < epsilon):
        raise GeometryError('zero-length edge in loop')
    edges = edges/lengths[:, None]
    normals = np.column_stack([edges[:, 1], -edges[:, 0]])
    prev_normals = np.roll(normals, 1, axis=0)
    denom = 1.0 + np.einsum('ij,ij->i', prev_normals, normals)
    out = np.empty_like(pts)
    for i in range(len(pts)):
        if denom[i] < epsilon:
            out[i] = pts[i] + normals[i]*d
        else:
            out[i] = pts[i] + (prev_normals[i] + normals[i])*(d/denom[i])
    return out


## radius point offsets

def _offset_radius(r, d, turn, min_convex=0.0, min_concave=0.0):
    """new corner radius after offsetting by ``d`` to the outside of a
    corner turning by ``turn`` (positive is convex)"""
    if r > 0:
        nr = r + d if turn > 0 else r - d
        nr = max(nr, 0.0)
    else:
        nr = 0.0
    if turn > 0:
        return max(nr, min_convex)
    if turn < 0:
        return max(nr, min_concave)
    return nr


def offset_radius_points(points, d, min_convex=0.0, min_concave=0.0):
    """Offset a closed radius point profile outward by ``d``.

    The profile is wound counterclockwise first.  Corner radii follow
    the offset, and are then raised to at least ``min_convex`` on
    convex corners and ``min_concave`` on concave corners.
    """

    pts = normalize(points)
    if len(pts) < 3:
        raise GeometryError('a closed profile needs at least 3 points, got {}'.format(len(pts)))
    if signed_area(pts) < 0:
        pts = list(reversed(pts))
    xy = np.array([[p.x, p.y] for p in pts], dtype=float)
    n = len(pts)
    result = []
    for i in range(n):
        e1 = _unit(xy[i] - xy[i - 1])
        e2 = _unit(xy[(i + 1) % n] - xy[i])
        n1 = -_left(e1)
        n2 = -_left(e2)
        q = xy[i] + _miter(n1, n2, d)
        turn = _cross(e1, e2)
        r = _offset_radius(pts[i].r, d, turn, min_convex, min_concave)
        result.append(RadiusPoint(float(q[0]), float(q[1]), r))
    return result


def _edges_flipped(points, ring):
    """true if offsetting reversed the direction of any edge"""
    pts = normalize(points)
    if signed_area(pts) < 0:
        pts = list(reversed(pts))
    a = np.array([[p.x, p.y] for p in pts], dtype=float)
    b = np.array([[p.x, p.y] for p in ring], dtype=float)
    ea = np.roll(a, -1, axis=0) - a
    eb = np.roll(b, -1, axis=0) - b
    return bool(np.any(np.einsum('ij,ij->i', ea, eb) < 0))


## rounding

def _corner(xy, i, n):
    p = xy[i]
    u = _unit(xy[i - 1] - p)
    v = _unit(xy[(i + 1) % n] - p)
    ang = float(np.arccos(np.clip(np.dot(u, v), -1.0, 1.0)))
    return p, u, v, ang


def round_radius_points(points, resolution=10, mode=RoundMode.CLOSED):
    """Return the outline of ``points`` with each corner filleted by its
    radius as an ``(N, 2)`` array.  In ``RoundMode.OPEN`` the path is
    not closed and its two endpoints stay sharp."""

    mode = RoundMode(mode)
    closed = mode is RoundMode.CLOSED
    pts = normalize(points)
    n = len(pts)
    if closed and n < 3:
        raise GeometryError('a closed profile needs at least 3 points, got {}'.format(n))
    if n < 2:
        raise GeometryError('a path needs at least 2 points, got {}'.format(n))
    steps = max(int(resolution), 1)
    xy = np.array([[p.x, p.y] for p in pts], dtype=float)

    tangents = np.zeros(n)
    for i in range(n):
        if not closed and (i == 0 or i == n - 1):
            continue
        r = pts[i].r
        if r <= 0:
            continue
        p, u, v, ang = _corner(xy, i, n)
        if ang < epsilon or pi - ang < epsilon:
            # straight through or doubling back, nothing to round
            continue
        tangents[i] = r/tan(ang/2.0)

    # shrink fillets that would overrun an edge
    scale = np.ones(n)
    for i in range(n if closed else n - 1):
        j = (i + 1) % n
        need = tangents[i] + tangents[j]
        length = float(np.hypot(*(xy[j] - xy[i])))
        if need > length > 0:
            f = length/need
            scale[i] = min(scale[i], f)
            scale[j] = min(scale[j], f)
    tangents = tangents*scale

    out = []
    for i in range(n):
        t = tangents[i]
        if t <= 0:
            out.append(xy[i])
            continue
        p, u, v, ang = _corner(xy, i, n)
        half = ang/2.0
        radius = t*tan(half)
        start = p + u*t
        end = p + v*t
        bis = u + v
        bis = bis/np.hypot(bis[0], bis[1])
        center = p + bis*(radius/sin(half))
        a0 = atan2(start[1] - center[1], start[0] - center[0])
        a1 = atan2(end[1] - center[1], end[0] - center[0])
        sweep = (a1 - a0 + pi) % (2.0*pi) - pi
        for k in range(steps + 1):
            a = a0 + sweep*k/steps
            out.append(center + radius*np.array([cos(a), sin(a)]))
    return _dedupe(np.array(out, dtype=float), closed=closed)


## beam chains

def _cap_point(p, seg_dir, cap_dir, d):
    nrm = _left(seg_dir)
    along = float(np.dot(cap_dir, nrm))
    if abs(along) < epsilon:
        raise GeometryError('beam end angle is parallel to the path')
    return p + cap_dir*(d/along)


def offset_path(points, d, start_dir, end_dir, min_radius=0.0):
    """Offset an open radius point path by ``d`` to its left.  The ends
    are cut along the unit directions ``start_dir`` and ``end_dir``."""

    pts = normalize(points)
    xy = np.array([[p.x, p.y] for p in pts], dtype=float)
    n = len(pts)
    segs = [_unit(xy[i + 1] - xy[i]) for i in range(n - 1)]
    result = []
    q = _cap_point(xy[0], segs[0], start_dir, d)
    result.append(RadiusPoint(float(q[0]), float(q[1]), pts[0].r))
    for i in range(1, n - 1):
        e1, e2 = segs[i - 1], segs[i]
        q = xy[i] + _miter(_left(e1), _left(e2), d)
        # a left turn puts the left side on the inside of the corner
        turn = -_cross(e1, e2)
        r = pts[i].r
        nr = _offset_radius(r, d, turn)
        if r > 0:
            nr = max(nr, min_radius)
        result.append(RadiusPoint(float(q[0]), float(q[1]), nr))
    q = _cap_point(xy[-1], segs[-1], end_dir, d)
    result.append(RadiusPoint(float(q[0]), float(q[1]), pts[-1].r))
    return result


def beam_chain(points, offset1, offset2, mode=BeamMode.FREE_ENDS,
               start_angle=None, end_angle=None, min_radius=0.0):
    """Outline of a beam following the path ``points``.

    ``offset1`` and ``offset2`` are measured to the left of the path.
    The result runs forward along the ``offset1`` side and back along
    the ``offset2`` side, except in ``BeamMode.FORWARD_PATH`` where only
    the open ``offset1`` side is returned.  End cut angles are relative
    to the end segments, or to the X axis in ``BeamMode.ABSOLUTE_ANGLES``.
    """

    mode = BeamMode.lookup(mode)
    pts = normalize(points)
    if len(pts) < 2:
        raise GeometryError('a beam path needs at least 2 points, got {}'.format(len(pts)))
    if start_angle is None:
        start_angle = mode.default_angle
    if end_angle is None:
        end_angle = mode.default_angle

    xy = np.array([[p.x, p.y] for p in pts], dtype=float)
    first = _unit(xy[1] - xy[0])
    last = _unit(xy[-1] - xy[-2])
    if mode is BeamMode.ABSOLUTE_ANGLES:
        start_dir = _rot2(np.array([1.0, 0.0]), start_angle)
        end_dir = _rot2(np.array([1.0, 0.0]), end_angle)
    else:
        start_dir = _rot2(first, start_angle)
        end_dir = _rot2(last, end_angle)

    side1 = offset_path(pts, offset1, start_dir, end_dir, min_radius)
    if mode is BeamMode.FORWARD_PATH:
        return side1
    side2 = offset_path(pts, offset2, start_dir, end_dir, min_radius)
    return side1 + list(reversed(side2))


## extrusion

def _layers(length, r1, r2, steps, twist, slices):
    """(z, inset) pairs from the start face to the terminal face"""
    a1, a2 = abs(r1), abs(r2)
    s1 = 1.0 if r1 >= 0 else -1.0
    s2 = 1.0 if r2 >= 0 else -1.0
    layers = []
    if a1 > 0:
        for k in range(steps):
            z = a1*k/steps
            layers.append((z, s1*(a1 - sqrt(max(a1*a1 - (a1 - z)**2, 0.0)))))
    z0, z1 = a1, length - a2
    if z1 - z0 <= epsilon:
        count = 0
    elif twist:
        count = int(slices) if slices else max(int(abs(twist)/5.0), 1)
    else:
        count = 1
    for k in range(count + 1):
        layers.append((z0 + (z1 - z0)*k/max(count, 1), 0.0))
    if a2 > 0:
        for k in range(1, steps + 1):
            dz = a2*k/steps
            layers.append((z1 + dz, s2*(a2 - sqrt(max(a2*a2 - dz*dz, 0.0)))))
    return layers


def _cap(base_vertices, loops_2d, top):
    ring_ends = np.cumsum([len(loop) for loop in loops_2d]).astype(np.uint32)
    flat = np.concatenate(loops_2d).astype(np.float64)
    indices = _earcut.triangulate_float64(flat, ring_ends)
    faces = []
    for i in range(0, len(indices), 3):
        a, b, c = int(indices[i]), int(indices[i + 1]), int(indices[i + 2])
        area = _cross(flat[b] - flat[a], flat[c] - flat[a])
        if (area > 0) != top:
            b, c = c, b
        faces.append([base_vertices[a], base_vertices[b], base_vertices[c]])
    return faces


def extrude_region(region, length, r1=0, r2=0, resolution=10, twist=0,
                   slices=None, center=False):
    """Sweep ``region`` along +Z into a closed triangle mesh."""

    region = Region.coerce(region)
    if length <= epsilon:
        raise GeometryError('bad length passed to extrude: {}'.format(length))
    if abs(r1) + abs(r2) > length + epsilon:
        raise GeometryError('end radii {} and {} exceed extrusion length {}'.format(r1, r2, length))
    for loop in region.loops():
        if len(loop) < 3:
            raise GeometryError('region loop has fewer than 3 points')

    steps = max(int(resolution), 1)
    layers = _layers(length, r1, r2, steps, twist, slices)
    zshift = -length/2.0 if center else 0.0

    vertices = []
    faces = []
    count = 0
    for outer, holes in region.components:
        loops = [outer] + list(holes)
        # starting vertex index of each loop at each layer
        starts = [[0]*len(layers) for _ in loops]
        for li, (z, inset) in enumerate(layers):
            angle = -twist*z/length if twist else 0.0
            for k, loop in enumerate(loops):
                ring = offset_loop(loop, -inset)
                if angle:
                    ring = apply(Rotation((0, 0, 1), angle), ring)[:, 0:2]
                starts[k][li] = count
                for x, y in ring:
                    vertices.append((x, y, z + zshift))
                count += len(ring)

        for k, loop in enumerate(loops):
            m = len(loop)
            for li in range(len(layers) - 1):
                a = starts[k][li]
                b = starts[k][li + 1]
                for i in range(m):
                    j = (i + 1) % m
                    faces.append([a + i, a + j, b + j])
                    faces.append([a + i, b + j, b + i])

        last = len(layers) - 1
        bottom = [starts[k][0] + i for k, loop in enumerate(loops) for i in range(len(loop))]
        top = [starts[k][last] + i for k, loop in enumerate(loops) for i in range(len(loop))]
        vs = np.array(vertices)
        faces += _cap(bottom, [vs[starts[k][0]:starts[k][0] + len(loop), 0:2]
                               for k, loop in enumerate(loops)], top=False)
        faces += _cap(top, [vs[starts[k][last]:starts[k][last] + len(loop), 0:2]
                            for k, loop in enumerate(loops)], top=True)

    return np.array(vertices, dtype=float), np.array(faces, dtype=np.int64)


class NativeEngine(GeometryEngine):
    """Mesh-building engine with no host renderer."""

    name = 'native'

    def round_points(self, points, resolution=10, mode=RoundMode.CLOSED):
        return round_radius_points(points, resolution, mode)

    def extrude_with_radius(self, outline, length, r1=0, r2=0, resolution=10,
                            convexity=10, twist=0, slices=None, center=False):
        vertices, faces = extrude_region(outline, length, r1, r2, resolution,
                                         twist, slices, center)
        call = (f"yapround.native.extrude_with_radius(length={length}, r1={r1}, r2={r2}, "
                f"resolution={resolution}, convexity={convexity}, twist={twist}, "
                f"slices={slices}, center={center})")
        logger.debug('extruded %d vertices, %d faces', len(vertices), len(faces))
        return Solid(vertices, faces, ['procedure', call])

    def shell(self, points, inner_offset, outer_offset, min_outer_radius=0,
              min_inner_radius=0, children=(), resolution=10):
        big = max(inner_offset, outer_offset)
        small = min(inner_offset, outer_offset)
        outer = offset_radius_points(points, big, min_outer_radius, min_outer_radius)
        inner = offset_radius_points(points, small, min_inner_radius, min_inner_radius)
        for ring, d in ((outer, big), (inner, small)):
            if _edges_flipped(points, ring):
                raise GeometryError('offset {} collapses the profile'.format(d))
        outer_loop = round_radius_points(outer, resolution)
        inner_loop = round_radius_points(inner, resolution)
        region = Region.from_loop(outer_loop, [inner_loop])
        for child in children:
            region = region.union(child)
        return region

    def beam_chain(self, points, offset1, offset2, mode=BeamMode.FREE_ENDS,
                   start_angle=None, end_angle=None, min_radius=0):
        return beam_chain(points, offset1, offset2, mode, start_angle,
                          end_angle, min_radius)

    def place(self, body, translation, rotation):
        M = Translation(translation) @ EulerRotation(rotation)
        call = f"yapround.native.place(translation={tuple(translation)}, rotation={tuple(rotation)})"
        return body.transformed(M, call)


__all__ = [
    'NativeEngine',
    'round_radius_points',
    'offset_loop',
    'offset_radius_points',
    'offset_path',
    'beam_chain',
    'extrude_region',
]
