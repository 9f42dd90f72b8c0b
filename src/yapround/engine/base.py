"""Contract between the yapround extruders and a geometry engine.

The extruders never build geometry themselves.  They normalize the
profile, work out the plane placement and then hand everything to an
engine through the methods below.  An engine may be a full renderer
binding or, as with ``yapround.engine.native``, a self-contained mesh
builder.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence


class RoundMode(enum.IntEnum):
    CLOSED = 0
    OPEN = 1


class BeamMode(enum.IntEnum):
    FREE_ENDS = 1
    FORWARD_PATH = 2
    ABSOLUTE_ANGLES = 3

    @classmethod
    def lookup(cls, value) -> "BeamMode":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return _BEAM_MODE_NAMES[value.strip().lower()]
            except KeyError:
                raise ValueError('unknown beam mode: {!r}'.format(value)) from None
        try:
            return cls(value)
        except ValueError:
            raise ValueError('unknown beam mode: {!r}'.format(value)) from None

    @property
    def default_angle(self) -> float:
        # relative modes default to square ends, absolute to the X axis
        return 0.0 if self is BeamMode.ABSOLUTE_ANGLES else 90.0


_BEAM_MODE_NAMES = {
    'free-ends': BeamMode.FREE_ENDS,
    'forward-path-only': BeamMode.FORWARD_PATH,
    'absolute-angle-endpoints': BeamMode.ABSOLUTE_ANGLES,
}


class GeometryEngine(ABC):
    """Rounding, extrusion, shell and beam-chain services."""

    name = 'abstract'

    @abstractmethod
    def round_points(self, points, resolution, mode=RoundMode.CLOSED):
        """Return the rounded outline of radius ``points`` as an
        ``(N, 2)`` array.  A radius of 0 leaves the corner sharp."""

    @abstractmethod
    def extrude_with_radius(self, outline, length, r1=0, r2=0, resolution=10,
                            convexity=10, twist=0, slices: Optional[int] = None,
                            center=False):
        """Sweep ``outline`` (a loop or ``Region``) along +Z by
        ``length``.  ``r1`` fillets the start face at z=0 and ``r2``
        the terminal face; ``center`` moves the sweep to straddle z=0."""

    def linear_extrude(self, profile, length, center=False, convexity=10):
        """Plain sweep of ``profile`` with flat end faces."""

        return self.extrude_with_radius(profile, length, 0, 0, 1,
                                        convexity=convexity, center=center)

    @abstractmethod
    def shell(self, points, inner_offset, outer_offset, min_outer_radius=0,
              min_inner_radius=0, children: Sequence = (), resolution=10):
        """Return the region between the ``inner_offset`` and
        ``outer_offset`` offsets of the profile, plus ``children``."""

    @abstractmethod
    def beam_chain(self, points, offset1, offset2, mode=BeamMode.FREE_ENDS,
                   start_angle=None, end_angle=None, min_radius=0) -> List:
        """Return radius points outlining the path ``points`` offset by
        ``offset1`` on one side and ``offset2`` on the other."""

    @abstractmethod
    def place(self, body, translation, rotation):
        """Rotate ``body`` by Euler degrees (X, then Y, then Z) and then
        translate it."""


__all__ = ['GeometryEngine', 'RoundMode', 'BeamMode']
