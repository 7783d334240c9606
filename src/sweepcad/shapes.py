## primitive and placement wrappers for sweepcad
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

"""
======================================
Primitive solids and placement helpers
======================================

Thin wrappers around the shape engine primitives that fill in defaults
and handle centering, plus axis-aligned translate/rotate/scale helpers
and color tagging.  Every function takes an optional ``engine``
(a name or an engine module, see :func:`sweepcad.engine.get_engine`).
"""

from sweepcad.config import DEFAULTS, resolve
from sweepcad.engine import get_engine
from sweepcad.geom import isgoodnum, vec3
from sweepcad.xform import Center, Rotation, RotationXYZ, Scale, Translation


def _place(eng, shape, m):
    if m.isclose(Translation([0,0,0])):
        return shape
    return eng.apply_transform(m, shape)

def box(size, center=False, engine=None):
    """Box of extent ``size`` (a number or a 3 vector).  The box spans
    ``[0, size]`` on each axis unless ``center`` (one flag or one per
    axis) asks for that axis to be centered.  Negative extents grow the
    box towards negative coordinates."""
    if isgoodnum(size):
        size = [size,size,size]
    size = vec3(size)
    eng = get_engine(engine)
    shape = eng.emit_primitive('box',size=[abs(s) for s in size])
    return _place(eng,shape,Center(size,center))

def cylinder(h, r=1.0, r1=None, r2=None, center=False, segments=None, engine=None):
    """Cylinder (or cone frustum) of height ``h`` standing on the XY
    plane, with bottom radius ``r1`` and top radius ``r2`` defaulting to
    ``r``."""
    eng = get_engine(engine)
    shape = eng.emit_primitive('cylinder',h=abs(h),
                               r1=resolve(r1,default=r),
                               r2=resolve(r2,default=r),
                               segments=resolve(segments,default=DEFAULTS.segments))
    return _place(eng,shape,Center([0,0,h],[False,False,bool(center)]))

def sphere(r=1.0, segments=None, engine=None):
    eng = get_engine(engine)
    return eng.emit_primitive('sphere',r=r,
                              segments=resolve(segments,default=DEFAULTS.segments))

def polyhedron(points, faces=None, engine=None):
    return get_engine(engine).emit_primitive('polyhedron',points=points,faces=faces or [])

def translate(shape, delta, engine=None):
    return get_engine(engine).apply_transform(Translation(delta),shape)

def rotate(shape, angles, axis=None, engine=None):
    """Rotate by ``angles`` about X, then Y, then Z, or by a single angle
    about ``axis`` when one is given."""
    if axis is not None:
        m = Rotation(axis,angles)
    else:
        if isgoodnum(angles):
            angles = [0,0,angles]
        m = RotationXYZ(angles)
    return get_engine(engine).apply_transform(m,shape)

def scale(shape, s, engine=None):
    return get_engine(engine).apply_transform(Scale(s),shape)

def color(shape, name, engine=None):
    return get_engine(engine).color(shape,name)
