## trimesh shape engine for sweepcad
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

"""Trimesh-backed shape engine for sweepcad.

This engine is optional.  Shapes are ``trimesh.Trimesh`` instances,
transforms are applied with numpy, hulls come from
:func:`trimesh.convex.convex_hull` and booleans are dispatched via
:mod:`trimesh.boolean`.

Hulls need ``scipy``; booleans need at least one boolean backend
supported by ``trimesh`` (e.g. manifold3d, Blender, OpenSCAD).
"""

from __future__ import annotations

import logging
import math

import numpy as np

try:
    import trimesh
except ImportError:  # pragma: no cover - optional dependency
    trimesh = None  # type: ignore[assignment]

from sweepcad.config import DEFAULTS
from sweepcad.errors import EngineError
from sweepcad.xform import Matrix

logger = logging.getLogger(__name__)

ENGINE_NAME = "trimesh"

PRIMITIVES = ('box', 'cylinder', 'sphere', 'polyhedron')


def engines_available() -> set[str]:
    """Return the set of trimesh boolean backends that are operational."""

    if trimesh is None:  # pragma: no cover - optional dependency
        return set()
    return set(trimesh.boolean.engines_available)


def is_available(backend: str | None = None) -> bool:
    """Check whether shapes can be built, and optionally whether a
    boolean ``backend`` is present."""

    if trimesh is None:  # pragma: no cover - optional dependency
        return False
    if backend is None:
        return True
    return backend in engines_available()


def _require():
    if trimesh is None:  # pragma: no cover - optional dependency
        raise EngineError("trimesh is not installed; install trimesh to enable this engine")


def _hull_of(points) -> "trimesh.Trimesh":
    pts = np.asarray(points, dtype=float)
    try:
        return trimesh.convex.convex_hull(pts)
    except Exception as exc:
        raise EngineError(f"trimesh convex hull failed: {exc}") from exc


def _ring(r, z, segments):
    if r == 0:
        return [[0.0, 0.0, z]]
    return [[r * math.cos(2 * math.pi * i / segments), r * math.sin(2 * math.pi * i / segments), z]
            for i in range(segments)]


def emit_primitive(kind: str, **params) -> "trimesh.Trimesh":
    """Create a primitive mesh with the same placement conventions as the
    native engine: boxes span ``[0, size]``, cylinders stand on the XY
    plane and spheres are centered on the origin."""

    _require()
    segments = max(3, int(params.get('segments') or DEFAULTS.segments))
    if kind == 'box':
        size = np.asarray(params['size'], dtype=float)
        mesh = trimesh.creation.box(extents=size)
        mesh.apply_translation(size / 2.0)
        return mesh
    if kind == 'cylinder':
        h = float(params['h'])
        return _hull_of(_ring(params['r1'], 0.0, segments) + _ring(params['r2'], h, segments))
    if kind == 'sphere':
        return trimesh.creation.uv_sphere(radius=float(params['r']), count=[segments, segments])
    if kind == 'polyhedron':
        points = [list(p) + [0.0] * (3 - len(p)) for p in params['points']]
        faces = params.get('faces') or []
        if not faces:
            return _hull_of(points)
        return trimesh.Trimesh(vertices=np.asarray(points, dtype=float),
                               faces=np.asarray(faces, dtype=np.int64), process=True)
    raise ValueError(f"unknown primitive {kind!r}, expected one of {PRIMITIVES}")


def apply_transform(m: Matrix, shape) -> "trimesh.Trimesh":
    _require()
    mesh = shape.copy()
    mesh.apply_transform(np.asarray(m.rows(), dtype=float))
    return mesh


def convex_hull(*shapes) -> "trimesh.Trimesh":
    _require()
    if not shapes:
        raise ValueError("convex_hull needs at least one shape")
    return _hull_of(np.vstack([np.asarray(s.vertices) for s in shapes]))


def _boolean(operation, shapes, backend=None):
    _require()
    if len(shapes) == 1:
        return shapes[0].copy()
    available = engines_available()
    if backend is not None and backend not in available:
        raise EngineError(
            f"trimesh backend '{backend}' is not available; install the appropriate binary (available: {available})"
        )
    if not available:
        raise EngineError(
            "no trimesh boolean backends are available; install manifold3d, Blender, OpenSCAD or another supported engine"
        )
    op = getattr(trimesh.boolean, operation)
    try:
        result = op(list(shapes), engine=backend, check_volume=False)
    except Exception as exc:  # pragma: no cover - depends on external binaries
        raise EngineError(f"trimesh {operation} failed: {exc}") from exc
    logger.debug("trimesh %s of %d meshes -> %d faces", operation, len(shapes), len(result.faces))
    return result


def union(*shapes, backend: str | None = None):
    return _boolean('union', shapes, backend)


def difference(*shapes, backend: str | None = None):
    return _boolean('difference', shapes, backend)


def intersection(*shapes, backend: str | None = None):
    return _boolean('intersection', shapes, backend)


def color(shape, name):
    _require()
    mesh = shape.copy()
    mesh.metadata['color'] = name
    return mesh


def vertices(shape) -> list:
    return np.asarray(shape.vertices, dtype=float).tolist()


def bbox(shape) -> list:
    return np.asarray(shape.bounds, dtype=float).tolist()


__all__ = [
    'ENGINE_NAME',
    'PRIMITIVES',
    'engines_available',
    'is_available',
    'emit_primitive',
    'apply_transform',
    'convex_hull',
    'union',
    'difference',
    'intersection',
    'color',
    'vertices',
    'bbox',
]
