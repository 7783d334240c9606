## native CSG tree shape engine for sweepcad
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

"""Native shape engine: a deferred CSG tree.

Shapes are tagged lists ``['shape', op, params, children]``.  Building a
shape never computes geometry; the tree records what was asked for, the
way a CSG modeller records a script.  :func:`vertices` evaluates the
vertex cloud of primitives, transforms, hulls and unions, which is
enough to measure and test the placements produced by
:mod:`sweepcad.frames`.
"""

from __future__ import annotations

import logging
import math
from typing import List

from sweepcad.config import DEFAULTS
from sweepcad.errors import EngineError
from sweepcad.xform import Matrix

logger = logging.getLogger(__name__)

ENGINE_NAME = 'native'

PRIMITIVES = ('box', 'cylinder', 'sphere', 'polyhedron')
OPERATIONS = ('multmatrix', 'hull', 'union', 'difference', 'intersection', 'color')


def is_available() -> bool:
    return True


def isshape(x) -> bool:
    """Return ``True`` if ``x`` is a native shape node."""

    return isinstance(x, list) and len(x) == 4 and x[0] == 'shape' \
        and x[1] in PRIMITIVES + OPERATIONS and isinstance(x[2], dict) and isinstance(x[3], list)


def _node(op, params, children):
    for c in children:
        if not isshape(c):
            raise ValueError(f'bad shape passed to {op}: {c!r}')
    return ['shape', op, params, list(children)]


def _positive(name, value):
    if not isinstance(value, (int, float)) or isinstance(value, bool) or value < 0:
        raise ValueError(f'{name} must be a non-negative number, got {value!r}')
    return value


def emit_primitive(kind: str, **params):
    """Create a primitive shape node.

    ``box(size=[x, y, z])`` spans ``[0, size]`` on each axis.
    ``cylinder(h=, r1=, r2=, segments=)`` stands on the XY plane.
    ``sphere(r=, segments=)`` is centered on the origin.
    ``polyhedron(points=, faces=)`` is taken as given.
    """

    segments = params.get('segments') or DEFAULTS.segments
    if kind == 'box':
        size = [float(_positive('box size', s)) for s in params['size']]
        if len(size) != 3:
            raise ValueError(f'box size needs three components, got {size}')
        return _node('box', {'size': size}, [])
    if kind == 'cylinder':
        return _node('cylinder', {'h': _positive('height', params['h']),
                                  'r1': _positive('radius', params['r1']),
                                  'r2': _positive('radius', params['r2']),
                                  'segments': max(3, int(segments))}, [])
    if kind == 'sphere':
        return _node('sphere', {'r': _positive('radius', params['r']),
                                'segments': max(3, int(segments))}, [])
    if kind == 'polyhedron':
        points = [list(p) for p in params['points']]
        faces = [list(f) for f in params.get('faces', [])]
        for f in faces:
            if any(i < 0 or i >= len(points) for i in f):
                raise ValueError(f'polyhedron face {f} refers to a missing point')
        return _node('polyhedron', {'points': points, 'faces': faces}, [])
    raise ValueError(f'unknown primitive {kind!r}, expected one of {PRIMITIVES}')


def apply_transform(m: Matrix, shape):
    if not isinstance(m, Matrix):
        raise ValueError(f'apply_transform needs a Matrix, got {m!r}')
    return _node('multmatrix', {'matrix': Matrix(m)}, [shape])


def convex_hull(*shapes):
    return _node('hull', {}, shapes)


def union(*shapes):
    return _node('union', {}, shapes)


def difference(*shapes):
    return _node('difference', {}, shapes)


def intersection(*shapes):
    return _node('intersection', {}, shapes)


def color(shape, name):
    return _node('color', {'color': name}, [shape])


def _ring(r, z, segments):
    if r == 0:
        return [[0.0, 0.0, z]]
    return [[r * math.cos(2 * math.pi * i / segments), r * math.sin(2 * math.pi * i / segments), z]
            for i in range(segments)]


def _sphere_points(r, segments):
    rings = max(1, segments // 2)
    pts = [[0.0, 0.0, -r]]
    for j in range(1, rings):
        lat = math.pi * j / rings - math.pi / 2
        pts.extend(_ring(r * math.cos(lat), r * math.sin(lat), segments))
    pts.append([0.0, 0.0, r])
    return pts


def vertices(shape) -> List[list]:
    """Evaluate the vertex cloud of ``shape``.

    Hulls and unions contribute the vertices of all their children, so
    the convex hull of the result is the convex hull of the shape.
    Differences and intersections can not be evaluated natively.
    """

    if not isshape(shape):
        raise ValueError(f'bad shape passed to vertices: {shape!r}')
    _, op, params, children = shape
    if op == 'box':
        sx, sy, sz = params['size']
        return [[x, y, z] for x in (0.0, sx) for y in (0.0, sy) for z in (0.0, sz)]
    if op == 'cylinder':
        return _ring(params['r1'], 0.0, params['segments']) + \
            _ring(params['r2'], float(params['h']), params['segments'])
    if op == 'sphere':
        return _sphere_points(params['r'], params['segments'])
    if op == 'polyhedron':
        return [list(p) + [0.0] * (3 - len(p)) for p in params['points']]
    if op == 'multmatrix':
        m = params['matrix']
        return [m.mul(p) for p in vertices(children[0])]
    if op in ('hull', 'union', 'color'):
        pts = []
        for c in children:
            pts.extend(vertices(c))
        return pts
    raise EngineError(f'native engine cannot evaluate vertices of a {op}')


def bbox(shape) -> List[list]:
    """Return ``[[xmin, ymin, zmin], [xmax, ymax, zmax]]`` of ``shape``."""

    pts = vertices(shape)
    if not pts:
        raise EngineError('shape has no vertices')
    return [[min(p[k] for p in pts) for k in range(3)],
            [max(p[k] for p in pts) for k in range(3)]]


def count(shape, op: str) -> int:
    """Count the nodes of type ``op`` in the tree rooted at ``shape``."""

    own = 1 if shape[1] == op else 0
    return own + sum(count(c, op) for c in shape[3])


__all__ = [
    'ENGINE_NAME',
    'PRIMITIVES',
    'is_available',
    'isshape',
    'emit_primitive',
    'apply_transform',
    'convex_hull',
    'union',
    'difference',
    'intersection',
    'color',
    'vertices',
    'bbox',
    'count',
]
