"""Region and solid value types produced by yapround engines.

A ``Region`` is a planar area made of one or more components, each an
outer loop with zero or more hole loops.  Loops are ``(N, 2)`` float
arrays without a repeated closing point; outer loops are kept
counterclockwise and holes clockwise.

A ``Solid`` is a closed triangle mesh: ``vertices`` is an ``(N, 3)``
float array, ``faces`` an ``(M, 3)`` integer array with outward
(counterclockwise) winding, and ``construction`` records how the solid
was made as a ``['procedure', call]`` list.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from yapround.xform import apply, epsilon

Loop = np.ndarray


def loop_area(loop: Sequence[Sequence[float]]) -> float:
    """Signed shoelace area of a closed loop, positive when counterclockwise."""

    pts = np.asarray(loop, dtype=float)
    if len(pts) < 3:
        return 0.0
    x = pts[:, 0]
    y = pts[:, 1]
    return float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))/2.0


def prepare_loop(points, *, want_ccw: bool = True) -> Loop:
    """Return ``points`` as an ``(N, 2)`` loop with consecutive
    duplicates and any closing duplicate removed, wound as requested."""

    pts = np.asarray(points, dtype=float)
    if pts.size == 0:
        return np.zeros((0, 2))
    pts = pts[:, 0:2]
    keep = [0]
    for i in range(1, len(pts)):
        if np.max(np.abs(pts[i] - pts[keep[-1]])) > epsilon:
            keep.append(i)
    loop = pts[keep]
    if len(loop) > 1 and np.max(np.abs(loop[0] - loop[-1])) <= epsilon:
        loop = loop[:-1]
    if len(loop) >= 3:
        area = loop_area(loop)
        if (want_ccw and area < 0) or (not want_ccw and area > 0):
            loop = loop[::-1]
    return np.ascontiguousarray(loop)


@dataclass
class Region:
    components: List[Tuple[Loop, List[Loop]]] = field(default_factory=list)

    @classmethod
    def from_loop(cls, outer, holes: Iterable = ()) -> "Region":
        return cls([(prepare_loop(outer, want_ccw=True),
                     [prepare_loop(h, want_ccw=False) for h in holes])])

    @classmethod
    def coerce(cls, value) -> "Region":
        """Accept a ``Region`` or a single array-like outer loop."""

        if isinstance(value, Region):
            return value
        return cls.from_loop(value)

    def union(self, other) -> "Region":
        """Append the components of ``other``.  Components are assumed
        not to overlap; no boolean union is computed."""

        return Region(list(self.components) + list(Region.coerce(other).components))

    def loops(self) -> Iterator[Loop]:
        for outer, holes in self.components:
            yield outer
            for hole in holes:
                yield hole

    def area(self) -> float:
        return sum(loop_area(loop) for loop in self.loops())

    def bbox(self):
        pts = np.concatenate([loop for loop in self.loops()])
        return [pts.min(axis=0).tolist(), pts.max(axis=0).tolist()]


@dataclass
class Solid:
    vertices: np.ndarray
    faces: np.ndarray
    construction: list = field(default_factory=list)

    def bbox(self):
        """Return ``[[xmin, ymin, zmin], [xmax, ymax, zmax]]``."""

        return [self.vertices.min(axis=0).tolist(),
                self.vertices.max(axis=0).tolist()]

    def volume(self) -> float:
        """Enclosed volume by the divergence theorem; positive for an
        outward-wound closed mesh."""

        v0 = self.vertices[self.faces[:, 0]]
        v1 = self.vertices[self.faces[:, 1]]
        v2 = self.vertices[self.faces[:, 2]]
        return float(np.einsum('ij,ij->i', v0, np.cross(v1, v2)).sum()/6.0)

    def transformed(self, matrix, call=None) -> "Solid":
        construction = list(self.construction)
        if call is not None:
            construction = ['procedure', call, construction]
        return Solid(apply(matrix, self.vertices), self.faces.copy(), construction)


@dataclass
class CheckResult:
    ok: bool
    warnings: List[str]

    def __bool__(self) -> bool:
        return self.ok


def solid_watertight(sld: Solid) -> CheckResult:
    """Every undirected edge must be shared by exactly two faces."""

    edges = Counter()
    for a, b, c in sld.faces.tolist():
        edges[_edge_key(a, b)] += 1
        edges[_edge_key(b, c)] += 1
        edges[_edge_key(c, a)] += 1

    boundary = [edge for edge, count in edges.items() if count == 1]
    invalid = [edge for edge, count in edges.items() if count > 2]

    warnings: List[str] = []
    if boundary:
        warnings.append(f'{len(boundary)} boundary edges detected')
    if invalid:
        warnings.append(f'edges with multiplicity >2: {invalid}')
    return CheckResult(not warnings, warnings)


def solid_oriented(sld: Solid) -> CheckResult:
    """Every directed edge must appear once, with its reverse used by
    the neighbouring face, and the enclosed volume must be positive."""

    directed = Counter()
    for a, b, c in sld.faces.tolist():
        directed[(a, b)] += 1
        directed[(b, c)] += 1
        directed[(c, a)] += 1

    warnings: List[str] = []
    repeated = [edge for edge, count in directed.items() if count > 1]
    if repeated:
        warnings.append(f'{len(repeated)} directed edges used more than once')
    if sld.volume() <= 0:
        warnings.append('mesh encloses non-positive volume')
    return CheckResult(not warnings, warnings)


def _edge_key(a: int, b: int) -> Tuple[int, int]:
    return (a, b) if a < b else (b, a)


__all__ = [
    'Region',
    'Solid',
    'CheckResult',
    'loop_area',
    'prepare_loop',
    'solid_watertight',
    'solid_oriented',
]
