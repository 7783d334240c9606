## generalized matrix transformation operations for 3D homogeneous
## coordinates in sweepcad

## Copyright (c) 2026 sweepcad contributors
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

import logging
from functools import reduce
from math import cos, sin, pi

import sweepcad.geom as geom

logger = logging.getLogger(__name__)

## a matrix is represented as a list of four four-element rows.  In a
## matrix, vectors represent rows unless the transpose property is
## true.  Points are column vectors, so M.mul(p) computes Mp.  Two and
## three component points are lifted to homogeneous coordinates with
## w=1 before multiplication and projected back afterwards.

## The builder functions below (Translation, RotationX, Align, ...)
## return plain affine matrices.  Compose them with mul(), or with the
## ``@`` operator, in translate * rotate * scale order.

ZAXIS = [0.0,0.0,1.0]


class Matrix:
    """4x4 transformation matrix class for transforming homogeneous 3D coordinates"""

    def __init__(self,a=False,trans=False):
        self.m = [[1,0,0,0],
                  [0,1,0,0],
                  [0,0,1,0],
                  [0,0,0,1]]
        self.trans=False

        if isinstance(a,Matrix):
            for i in range(4):
                self.setrow(i,list(a.getrow(i)))

        elif isinstance(a,(tuple,list)):
            if len(a) == 4:
                if not all(isinstance(r,(tuple,list)) and len(r) == 4 for r in a):
                    raise ValueError('bad rows in matrix initialization: {}'.format(a))
                for i in range(4):
                    for j in range(4):
                        self.set(i,j,a[i][j])
            elif len(a)==16:
                for i in range(4):
                    for j in range(4):
                        self.set(i,j,a[i*4+j])
            else:
                raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
        elif a is not False and a is not None:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
        self.trans=trans

    def __repr__(self):
        return "Matrix({},{},{},{},{})".format(self.getrow(0),self.getrow(1),
                                               self.getrow(2),self.getrow(3),False)

    def __matmul__(self,x):
        return self.mul(x)

    #return value indexed by i,j
    def get(self,i,j):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to get: {},{}'.format(i,j))
        if self.trans:
            return self.m[j][i]
        else:
            return self.m[i][j]

    #set value indexed by i,j
    def set(self,i,j,x):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to set: {},{}'.format(i,j))
        if geom.isgoodnum(x):
            if self.trans:
                self.m[j][i]=x
            else:
                self.m[i][j]=x
        else:
            raise ValueError('bad value passed to set: {}'.format(x))

    def getrow(self,i):
        if i < 0 or i > 3:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        if self.trans:
            return [self.m[0][i],
                    self.m[1][i],
                    self.m[2][i],
                    self.m[3][i]]
        else:
            return list(self.m[i])

    def getcol(self,j):
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        if not self.trans:
            return [self.m[0][j],
                    self.m[1][j],
                    self.m[2][j],
                    self.m[3][j]]
        else:
            return list(self.m[j])

    def setrow(self,i,x):
        if not (isinstance(x,(list,tuple)) and len(x) == 4):
            raise ValueError('bad non-vector passed to setrow: {}'.format(x))
        if i < 0 or i > 3:
            raise ValueError('bad row index passed to setrow: {}'.format(i))
        for j in range(4):
            self.set(i,j,x[j])

    def setcol(self,j,x):
        if not (isinstance(x,(list,tuple)) and len(x) == 4):
            raise ValueError('bad non-vector passed to setcol: {}'.format(x))
        if j < 0 or j > 3:
            raise ValueError('bad column index passed to setcol: {}'.format(j))
        for i in range(4):
            self.set(i,j,x[i])

    def rows(self):
        """return the matrix as a fresh list of four row lists"""
        return [self.getrow(i) for i in range(4)]

    def block(self):
        """return the upper-left 3x3 rotation/scale block as nested lists"""
        return [self.getrow(i)[:3] for i in range(3)]

    def translation(self):
        """return the translation column as a 3 vector"""
        return self.getcol(3)[:3]

    def transpose(self):
        return Matrix(self.rows(),True)

    def isclose(self,x,tol=1e-9):
        """element-wise comparison with another matrix to within ``tol``"""
        if not isinstance(x,Matrix):
            return False
        return all(abs(self.get(i,j)-x.get(i,j)) <= tol
                   for i in range(4) for j in range(4))

    # element-wise sum, used when assembling rotation formulas
    def add(self,x):
        if not isinstance(x,Matrix):
            x = Matrix(x)
        result = Matrix()
        for i in range(4):
            for j in range(4):
                result.set(i,j,self.get(i,j)+x.get(i,j))
        return result

    # matrix multiply.  If x is a matrix, compute MX.  If X is a
    # point, compute Mx. If x is a scalar, compute xM. If x isn't any
    # of these, raise ValueError.  Respects transpose flag.

    def mul(self,x):
        if isinstance(x,Matrix):
            result = Matrix()
            for i in range(4):
                row = self.getrow(i)
                for j in range(4):
                    result.set(i,j,
                               sum(a*b for a,b in zip(row,x.getcol(j))))
            return result
        elif geom.isgoodnum(x):
            result = Matrix()
            for i in range(4):
                result.setrow(i,geom.scale(self.getrow(i),x))
            return result
        elif isinstance(x,(list,tuple)) and len(x) in (2,3,4):
            return _mulpoint(self,x)

        raise ValueError('bad thing passed to mul(): {}'.format(x))


def _mulpoint(m,p):
    h = geom.vec3(p) + [p[3] if len(p) == 4 else 1.0]
    r = [sum(a*b for a,b in zip(m.getrow(i),h)) for i in range(4)]
    w = r[3]
    if w == 0 or w == 1:
        return r[:3]
    return [r[0]/w,r[1]/w,r[2]/w]


## apply a single matrix to a single point, or to a list of points.
## These are kept separate so there is never any guessing about
## nesting depth.
def apply_one(m,p):
    """transform point ``p`` by matrix ``m``, returning a 3 vector"""
    return m.mul(p)

def apply_many(m,points):
    """transform each point in ``points`` by matrix ``m``"""
    return [m.mul(p) for p in points]


def compose(*matrices):
    """multiply matrices left to right, ``compose(A,B,C) == A.mul(B).mul(C)``.
    With no arguments the identity is returned."""
    if not matrices:
        return Matrix()
    return reduce(lambda a,b: a.mul(b),matrices)


# return the generalized 4x4 arbitrary axis rotation matrix
def Rotation(axis,angle,inverse=False):
    m = geom.norm(axis)
    if m < geom.epsilon:
        raise ValueError('zero-length rotation axis not allowed')
    u = geom.scale(geom.vec3(axis),1.0/m)

    if inverse:
        angle *= -1.0
    rad = (angle%360.0)*geom.pi2/360.0

    ux = u[0]
    uy = u[1]
    uz = u[2]

    cang = cos(rad)
    cmin = 1.0-cang
    sang = sin(rad)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin-uz*sang, ux*uz*cmin+uy*sang,0],
         [uy*ux*cmin+uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang,0],
         [uz*ux*cmin-uy*sang, uz*uy*cmin+ux*sang, cang+uz*uz*cmin,0],
         [0,0,0,1]]

    return Matrix(R)

def _cossin(angle):
    rad = (angle%360.0)*pi/180.0
    return cos(rad),sin(rad)

## principal axis rotations, right handed, angles in degrees
def RotationX(angle,inverse=False):
    c,s = _cossin(-angle if inverse else angle)
    return Matrix([[1,0,0,0],
                   [0,c,-s,0],
                   [0,s,c,0],
                   [0,0,0,1]])

def RotationY(angle,inverse=False):
    c,s = _cossin(-angle if inverse else angle)
    return Matrix([[c,0,s,0],
                   [0,1,0,0],
                   [-s,0,c,0],
                   [0,0,0,1]])

def RotationZ(angle,inverse=False):
    c,s = _cossin(-angle if inverse else angle)
    return Matrix([[c,-s,0,0],
                   [s,c,0,0],
                   [0,0,1,0],
                   [0,0,0,1]])

def RotationXYZ(angles,inverse=False):
    """rotate about X, then Y, then Z by the three angles in ``angles``"""
    ax,ay,az = geom.vec3(angles)
    if inverse:
        return compose(RotationX(ax,True),RotationY(ay,True),RotationZ(az,True))
    return compose(RotationZ(az),RotationY(ay),RotationX(ax))

def Translation(delta,y=False,z=False,inverse=False):
    if geom.isgoodnum(delta):
        delta = [delta,
                 y if geom.isgoodnum(y) else 0.0,
                 z if geom.isgoodnum(z) else 0.0]
    dx,dy,dz = geom.vec3(delta)
    if inverse:
        dx,dy,dz = -dx,-dy,-dz
    T = [[1,0,0,dx],
         [0,1,0,dy],
         [0,0,1,dz],
         [0,0,0,1]]
    return Matrix(T)

def Scale(x,y=False,z=False,inverse=False):
    sx = sy = sz = 1.0
    if geom.isgoodnum(x):
        sx = x
        if geom.isgoodnum(y) and geom.isgoodnum(z):
            sy = y
            sz = z
        else:
            sy = sz = x
    elif isinstance(x,(list,tuple)) and len(x) == 2:
        sx = x[0]
        sy = x[1]
    elif isinstance(x,(list,tuple)) and len(x) == 3:
        sx = x[0]
        sy = x[1]
        sz = x[2]
    else:
        raise ValueError('bad scaling values passed to Scale: {}'.format(x))

    if inverse:
        sx = 1.0/sx
        sy = 1.0/sy
        sz = 1.0/sz

    S = [[sx,0,0,0],
         [0,sy,0,0],
         [0,0,sz,0],
         [0,0,0,1.0]]
    return Matrix(S)

def _perpendicular(v):
    # any axis orthogonal to unit vector v
    trial = [1.0,0.0,0.0] if abs(v[0]) < 0.9 else [0.0,1.0,0.0]
    return geom.normalize(geom.cross(v,trial))

def Align(to,frm=ZAXIS,antiparallel='rotate'):
    """Return the rotation matrix that turns direction ``frm`` (default
    +Z) onto direction ``to``, using Rodrigues' formula

        R = I + K + K^2 * (1 - to.frm) / (c.c),  c = frm x to,  K = skew(c)

    Only a zero-length ``to`` or ``frm`` (shorter than ``geom.tiny``)
    has no direction to align with, and the identity is returned; short
    but non-zero vectors are aligned like any other.  When the unit
    directions are parallel to within ``epsilon`` the identity is
    returned.  When they are anti-parallel the result is a 180 degree
    rotation about an axis perpendicular to ``frm``, unless
    ``antiparallel='identity'``, which returns the identity instead.
    """
    if antiparallel not in ('rotate','identity'):
        raise ValueError('antiparallel must be "rotate" or "identity", got {}'.format(antiparallel))
    nt = geom.norm(to)
    nf = geom.norm(frm)
    if nt < geom.tiny or nf < geom.tiny:
        logger.debug("Align: zero-length direction %s or %s, using identity",to,frm)
        return Matrix()
    t = geom.scale(geom.vec3(to),1.0/nt)
    f = geom.scale(geom.vec3(frm),1.0/nf)
    c = geom.cross(f,t)
    d = geom.dot(f,t)
    if geom.norm(c) < geom.epsilon:
        if d > 0 or antiparallel == 'identity':
            return Matrix()
        logger.debug("Align: anti-parallel directions %s and %s",to,frm)
        return Rotation(_perpendicular(f),180.0)
    K = Matrix(geom.skew(c))
    K2 = K.mul(K).mul((1.0-d)/geom.dot(c,c))
    R = Matrix().add(K).add(K2)
    return R

def Center(size,flags=True):
    """Return the translation that places a corner-anchored box of extent
    ``size`` according to per-axis centering ``flags``.

    The box is assumed to be built with non-negative extent ``abs(size)``
    starting at the origin.  On an axis where ``size`` is negative the
    box is first moved by the negated extent so it spans ``[size, 0]``.
    On an axis whose flag is true the box is centered on the origin
    instead.  ``flags`` may be a single boolean or one per axis.
    """
    s = geom.vec3(size)
    if isinstance(flags,bool):
        flags = [flags]*3
    elif isinstance(flags,(list,tuple)) and len(flags) in (2,3):
        flags = list(flags) + [False]*(3-len(flags))
    else:
        raise ValueError('bad centering flags passed to Center: {}'.format(flags))
    delta = []
    for extent,centered in zip(s,flags):
        if centered:
            delta.append(-abs(extent)/2.0)
        else:
            delta.append(min(extent,0.0))
    return Translation(delta)
