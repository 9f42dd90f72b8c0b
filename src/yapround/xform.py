## homogeneous matrix transformations for yapround profiles and solids

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

from math import cos, sin, pi

import numpy as np

## A matrix is a 4x4 numpy array acting on column vectors of
## homogeneous coordinates, so that transforms compose right to left:
## ``Translation(t) @ Rotation(axis, a)`` rotates first, then
## translates.  Points are carried as (N,2) or (N,3) arrays and lifted
## into the w=1 hyperplane by ``apply()``.

epsilon = 5e-6
pi2 = 2.0*pi


# return the generalized 4x4 arbitrary axis rotation matrix, angle in
# degrees, right-handed about ``axis``
def Rotation(axis, angle, inverse=False):
    u = np.asarray(axis, dtype=float)[:3]
    m = float(np.linalg.norm(u))
    if m < epsilon:
        raise ValueError('zero-length rotation axis not allowed')
    u = u/m

    if inverse:
        angle *= -1.0
    rad = (angle % 360.0)*pi2/360.0

    ux, uy, uz = u
    cang = cos(rad)
    cmin = 1.0-cang
    sang = sin(rad)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin-uz*sang, ux*uz*cmin+uy*sang, 0],
         [uy*ux*cmin+uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang, 0],
         [uz*ux*cmin-uy*sang, uz*uy*cmin+ux*sang, cang+uz*uz*cmin, 0],
         [0, 0, 0, 1]]

    return np.array(R, dtype=float)


def Translation(delta, inverse=False):
    d = [float(c) for c in delta]
    while len(d) < 3:
        d.append(0.0)
    if inverse:
        d = [-c for c in d]
    T = np.identity(4)
    T[0:3, 3] = d[0:3]
    return T


def EulerRotation(angles, inverse=False):
    """Rotation by ``angles`` = (rx, ry, rz) degrees, applied about the
    X axis first, then Y, then Z."""

    rx, ry, rz = (list(angles) + [0, 0, 0])[:3]
    R = Rotation((0, 0, 1), rz) @ Rotation((0, 1, 0), ry) @ Rotation((1, 0, 0), rx)
    if inverse:
        # rotation matrices are orthonormal
        R = R.T.copy()
    return R


def apply(matrix, points):
    """Transform an (N,2) or (N,3) array of coordinates by ``matrix``
    and return an (N,3) array.  Two-component points lie in z=0."""

    pts = np.asarray(points, dtype=float)
    if pts.size == 0:
        return np.zeros((0, 3))
    if pts.ndim != 2 or pts.shape[1] < 2:
        raise ValueError('bad point array passed to apply: shape {}'.format(pts.shape))
    homo = np.zeros((pts.shape[0], 4))
    ncol = min(pts.shape[1], 3)
    homo[:, 0:ncol] = pts[:, 0:ncol]
    homo[:, 3] = 1.0
    out = homo @ np.asarray(matrix, dtype=float).T
    return out[:, 0:3]/out[:, 3:4]
