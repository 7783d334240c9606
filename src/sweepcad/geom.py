## foundational vector algebra for sweepcad
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

"""foundational vector algebra for **sweepcad**

====================
OVERVIEW
====================

The sweepcad.geom module provides the scalar and vector operations
that every other **sweepcad** module is built on.

constants
=========

sweepcad.geom provides the "constants" ``epsilon`` and ``pi2`` (2*pi).
``epsilon`` is the degeneracy threshold used when deciding that a
vector has no usable direction.  It is deliberately coarse (0.01),
matching the overlap margin used when solids are placed against each
other.

points and vectors
==================

Points and vectors are ordinary Python lists (or tuples) of two or
three numbers, *e.g.* ``[1.0, 2.0]`` or ``[0, 0, 5]``.  Component-wise
operations such as ``add()``, ``sub()``, ``scale()`` and ``lerp()``
preserve the dimension of their operands, and also accept plain
scalars, so that the same curve code can resample a list of numbers
and a list of points.  When a 2D and a 3D operand are mixed the 2D one
is treated as lying in the z=0 plane.

Operations that are only meaningful in three dimensions, such as
``cross()`` and ``skew()``, promote 2D operands with ``z = 0`` and
always return 3D results.

"""

from math import *
from numbers import Real

from sweepcad.config import DEFAULTS
from sweepcad.errors import DegenerateInputError

## constants
epsilon = DEFAULTS.epsilon
## lengths below tiny are treated as exactly zero
tiny = 1e-12
pi2 = 2.0*pi

## operations on scalars
## -----------------------

## booleans are ints to python, but never a coordinate
def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n,bool)) and isinstance(n,Real)

def close(a,b,tol=epsilon):
    """ are two scalars the same within ``tol``
    """
    return abs(a-b) < tol


## operations on vectors
## ------------------------

def isvect(x):
    """
    check to see if argument is a 2 or 3 component vector of good numbers
    """
    return isinstance(x,(list,tuple)) and len(x) in (2,3) and \
        all(isgoodnum(c) for c in x)

def vec3(a):
    """promote a 2 or 3 component vector (or a homogeneous 4 vector
    with ``w == 1``) to a three element list.  Any sized sequence,
    such as a numpy array, is accepted"""
    if not isgoodnum(a) and hasattr(a,"__len__"):
        if len(a) == 2:
            return [a[0],a[1],0.0]
        if len(a) in (3,4):
            return [a[0],a[1],a[2]]
    raise ValueError('cannot interpret {} as a 3 vector'.format(a))

def _pad(a,n):
    return list(a) + [0.0]*(n-len(a))

def _zip2(f,a,b):
    if isgoodnum(a) and isgoodnum(b):
        return f(a,b)
    if isgoodnum(a) or isgoodnum(b):
        raise ValueError('cannot combine scalar and vector: {}, {}'.format(a,b))
    n = max(len(a),len(b))
    return [f(x,y) for x,y in zip(_pad(a,n),_pad(b,n))]

def add(a,b):
    """ component-wise `a + b` for scalars or vectors"""
    return _zip2(lambda x,y: x+y,a,b)

def sub(a,b):
    """ component-wise `a - b` for scalars or vectors"""
    return _zip2(lambda x,y: x-y,a,b)

def scale(a,c):
    """ vector (or scalar) ``a`` times scalar ``c``"""
    if isgoodnum(a):
        return a*c
    return [x*c for x in a]

def lerp(t,a,b):
    """linear interpolation `a + t*(b-a)`; ``t == 0`` returns ``a`` and
    ``t == 1`` returns ``b``"""
    return add(a,scale(sub(b,a),t))

def dot(a,b):
    """ ``a`` dot ``b`` """
    if isgoodnum(a) and isgoodnum(b):
        return a*b
    n = max(len(a),len(b))
    return sum(x*y for x,y in zip(_pad(a,n),_pad(b,n)))

## cross product is only defined in 3D; 2D operands lie in z=0
def cross(a,b):
    """ compute the 3D cross product `a x b`"""
    if not (isinstance(a,(list,tuple)) and isinstance(b,(list,tuple))) or \
       len(a) not in (2,3) or len(b) not in (2,3):
        raise ValueError('cross product needs 2 or 3 component vectors: {}, {}'.format(a,b))
    a = vec3(a)
    b = vec3(b)
    return [ a[1]*b[2] - a[2]*b[1],
             a[2]*b[0] - a[0]*b[2],
             a[0]*b[1] - a[1]*b[0] ]

def norm(a):
    """ compute the euclidean length of ``a``"""
    return sqrt(dot(a,a))

def normalize(a):
    """return ``a`` scaled to unit length.  Raises
    ``DegenerateInputError`` if the length of ``a`` is below
    ``epsilon``"""
    m = norm(a)
    if m < epsilon:
        raise DegenerateInputError(
            'cannot normalize vector {}: length {} is below epsilon {}'.format(a,m,epsilon))
    return scale(a,1.0/m)

def dist(a,b):
    """ euclidean distance between points ``a`` and ``b``"""
    return norm(sub(a,b))

## determine if two vectors are the same, to within tol
def vclose(a,b,tol=epsilon):
    return dist(a,b) < tol

## skew-symmetric cross product matrix, in homogeneous 4x4 form so it
## composes directly with sweepcad.xform matrices
def skew(v):
    """return the homogeneous skew-symmetric matrix of ``v``, such that
    the upper 3x3 block times ``x`` is ``cross(v,x)``.  The fourth row
    and column are zero."""
    x,y,z = vec3(v)
    return [[ 0, -z,  y, 0],
            [ z,  0, -x, 0],
            [-y,  x,  0, 0],
            [ 0,  0,  0, 0]]
