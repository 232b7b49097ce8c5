## affine transformations of 3D points and vectors for brepkernel

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

from brepkernel import geom

## A transform wraps a 4x4 matrix of homogeneous coordinates, stored
## as a list of four rows.  Points are treated as column vectors with
## w=1, so they pick up the translation column; vectors are treated as
## column vectors with w=0, so they don't.

## Transforms are never mutated by the geometry code.  Composition
## with mul() returns a new Transform.


class Transform:
    """4x4 homogeneous transformation of 3D points and vectors"""

    def __init__(self, a=None):
        self.m = [[1.0, 0.0, 0.0, 0.0],
                  [0.0, 1.0, 0.0, 0.0],
                  [0.0, 0.0, 1.0, 0.0],
                  [0.0, 0.0, 0.0, 1.0]]

        if isinstance(a, Transform):
            self.m = [list(row) for row in a.m]
        elif isinstance(a, (tuple, list)):
            if len(a) != 4 or any(len(row) != 4 for row in a):
                raise ValueError('transform must be initialized from 4 rows of 4: {}'.format(a))
            for i in range(4):
                for j in range(4):
                    x = a[i][j]
                    if isinstance(x, bool) or not isinstance(x, (int, float)):
                        raise ValueError('bad element in transform initialization: {}'.format(x))
                    self.m[i][j] = float(x)
        elif a is not None:
            raise ValueError('bad thing used in attempt to initialize transform: {}'.format(a))

    def __repr__(self):
        return "Transform({},{},{},{})".format(*self.m)

    def __eq__(self, other):
        if not isinstance(other, Transform):
            return NotImplemented
        return self.m == other.m

    # compose two transforms.  The result applies x first, then self.
    def mul(self, x):
        if not isinstance(x, Transform):
            raise ValueError('bad thing passed to mul(): {}'.format(x))
        rows = []
        for i in range(4):
            row = self.m[i]
            rows.append([sum(row[k] * x.m[k][j] for k in range(4))
                         for j in range(4)])
        return Transform(rows)

    def _apply(self, v, w):
        x, y, z = v[0], v[1], v[2]
        out = []
        for i in range(3):
            row = self.m[i]
            out.append(row[0] * x + row[1] * y + row[2] * z + row[3] * w)
        return (out[0], out[1], out[2])

    def transform_point(self, p):
        """Apply the full affine transform to a point"""
        return self._apply(p, 1.0)

    def transform_vector(self, v):
        """Apply the linear part of the transform to a vector"""
        return self._apply(v, 0.0)


def Translation(delta, inverse=False):
    if inverse:
        delta = geom.scale(delta, -1.0)
    dx, dy, dz = delta[0], delta[1], delta[2]
    T = [[1, 0, 0, dx],
         [0, 1, 0, dy],
         [0, 0, 1, dz],
         [0, 0, 0, 1]]
    return Transform(T)


# return the generalized 4x4 arbitrary axis rotation, angle in degrees
def Rotation(axis, angle, inverse=False):
    u = geom.normalize(axis)

    if inverse:
        angle *= -1.0
    rad = (angle % 360.0) * 2.0 * pi / 360.0

    ux, uy, uz = u

    cang = cos(rad)
    cmin = 1.0 - cang
    sang = sin(rad)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin - uz*sang, ux*uz*cmin + uy*sang, 0],
         [uy*ux*cmin + uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang, 0],
         [uz*ux*cmin - uy*sang, uz*uy*cmin + ux*sang, cang + uz*uz*cmin, 0],
         [0, 0, 0, 1]]

    return Transform(R)


def Scale(x, y=None, z=None, inverse=False):
    if isinstance(x, (tuple, list)):
        sx, sy, sz = x[0], x[1], x[2]
    elif y is not None and z is not None:
        sx, sy, sz = x, y, z
    else:
        sx = sy = sz = x

    if sx == 0 or sy == 0 or sz == 0:
        raise ValueError('zero scale factor not allowed')

    if inverse:
        sx = 1.0 / sx
        sy = 1.0 / sy
        sz = 1.0 / sz

    S = [[sx, 0, 0, 0],
         [0, sy, 0, 0],
         [0, 0, sz, 0],
         [0, 0, 0, 1]]
    return Transform(S)
