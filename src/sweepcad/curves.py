## path resampling, Bezier curves and corner rounding for sweepcad
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

"""Curve helpers for sweepcad.

Provides piecewise-linear resampling of paths, quadratic and cubic
Bezier evaluation and chaining, synthesis of smooth cubic control
points from a polyline, and corner rounding.

Every sampler shares endpoints between consecutive pieces, so a path
of ``k`` pieces sampled with ``segments`` steps per piece always has
``segments * k + 1`` points.  Points may be scalars, 2D or 3D; the
output has the same dimension as the input.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from sweepcad.config import DEFAULTS, resolve
from sweepcad.errors import CurveDefinitionError, DegenerateInputError
from sweepcad.geom import add, isgoodnum, lerp, normalize, scale, sub
from sweepcad.indexrange import index_range

logger = logging.getLogger(__name__)


def _copy(p):
    return p if isgoodnum(p) else list(p)


def _segments(segments: Optional[int]) -> int:
    count = resolve(segments, default=DEFAULTS.segments)
    if count < 1:
        raise ValueError('segments must be >= 1')
    return count


def linear_cut(path: Sequence, segments: Optional[int] = None) -> List:
    """Resample every edge of ``path`` into ``segments`` evenly spaced
    steps.

    >>> linear_cut([0, 1, 5], 2)
    [0.0, 0.5, 1.0, 3.0, 5]
    """

    if len(path) == 0:
        raise DegenerateInputError('path must contain at least one point to resample')
    count = _segments(segments)
    samples: List = []
    for i in index_range(path, 0, -1):
        for step in range(count):
            samples.append(lerp(step / count, path[i], path[i + 1]))
    samples.append(_copy(path[-1]))
    return samples


def bezier_quadratic(p0, p1, p2, t: float):
    """Evaluate the quadratic Bezier ``(1-t)^2 p0 + 2t(1-t) p1 + t^2 p2``."""

    u = 1.0 - t
    return add(add(scale(p0, u * u), scale(p1, 2.0 * t * u)), scale(p2, t * t))


def bezier_cubic(p0, p1, p2, p3, t: float):
    """Evaluate the cubic Bezier with control points ``p0``..``p3``."""

    u = 1.0 - t
    return add(add(scale(p0, u * u * u), scale(p1, 3.0 * t * u * u)),
               add(scale(p2, 3.0 * t * t * u), scale(p3, t * t * t)))


def _chain(path: Sequence, order: int, segments: Optional[int], evaluate) -> List:
    n = len(path)
    if n < order + 1 or (n - 1) % order != 0:
        raise CurveDefinitionError(
            f'a degree {order} Bezier chain needs {order}k+1 points (k >= 1), got {n}')
    count = _segments(segments)
    samples: List = []
    for i in index_range(path, 0, -1, order):
        ctrl = path[i:i + order + 1]
        for step in range(count):
            samples.append(evaluate(*ctrl, step / count))
    samples.append(_copy(path[-1]))
    return samples


def bezier_quadratic_chain(path: Sequence, segments: Optional[int] = None) -> List:
    """Sample consecutive quadratic Beziers.

    ``path`` is read as ``[start, control, end, control, end, ...]``: each
    group of three points shares its first point with the end of the
    previous group.
    """

    return _chain(path, 2, segments, bezier_quadratic)


def bezier_cubic_chain(path: Sequence, segments: Optional[int] = None) -> List:
    """Sample consecutive cubic Beziers, four points per curve with the
    end point of one curve starting the next."""

    return _chain(path, 3, segments, bezier_cubic)


def synthesize_control_points(path: Sequence, weight: Optional[float] = None) -> List:
    """Insert a pair of cubic control points around every interior point
    of ``path``.

    The controls sit on either side of the point along the local chord
    ``(next - previous) / 2 * weight``, which makes the resulting Bezier
    chain G1-continuous.  End points act as their own controls.  The
    result has ``3 * (len(path) - 1) + 1`` points and can be passed
    straight to :func:`bezier_cubic_chain`.  ``weight == 0`` keeps every
    curve straight.
    """

    n = len(path)
    if n < 2:
        raise DegenerateInputError('path must contain at least two points to synthesize control points')
    w = resolve(weight, default=DEFAULTS.control_weight)

    def handle(i):
        if i == 0 or i == n - 1:
            return scale(sub(path[i], path[i]), 0.0)
        return scale(sub(path[i + 1], path[i - 1]), 0.5 * w)

    ctrl = [_copy(path[0])]
    for i in index_range(path, 0, -1):
        ctrl.append(add(path[i], handle(i)))
        ctrl.append(sub(path[i + 1], handle(i + 1)))
        ctrl.append(_copy(path[i + 1]))
    return ctrl


def smooth_path(path: Sequence, segments: Optional[int] = None, weight: Optional[float] = None) -> List:
    """Sample a smooth cubic curve through every point of ``path``."""

    return bezier_cubic_chain(synthesize_control_points(path, weight), segments)


def straight_chamfer(before, corner, after) -> List:
    """Cut the corner off: keep the two cut points and drop ``corner``."""

    return [_copy(before), _copy(after)]


def bezier_fillet(before, corner, after, segments: Optional[int] = None) -> List:
    """Replace ``corner`` by a quadratic Bezier from ``before`` to
    ``after`` that uses the corner as its control point."""

    count = _segments(segments)
    return [bezier_quadratic(before, corner, after, step / count) for step in range(count + 1)]


def _radius_pair(radius):
    if isgoodnum(radius):
        return radius, radius
    if isinstance(radius, (list, tuple)) and len(radius) == 2:
        return radius[0], radius[1]
    raise ValueError(f'corner radius must be a number or a [before, after] pair, got {radius}')


def round_corner(prev, corner, nxt, radius, mode: str = 'bezier', segments: Optional[int] = None) -> List:
    """Round the corner at ``corner`` between ``prev`` and ``nxt``.

    The corner is cut at distance ``radius`` along each adjacent edge.
    ``radius`` may be one number or a ``[before, after]`` pair.  With
    ``mode='chamfer'`` the two cut points replace the corner; with
    ``mode='bezier'`` a quadratic fillet through the cut points does.  A
    zero radius returns the corner unchanged.  Radii longer than the
    adjacent edges are not checked.
    """

    if mode not in ('bezier', 'chamfer'):
        raise ValueError(f'unknown corner rounding mode {mode!r}')
    r_before, r_after = _radius_pair(radius)
    if r_before == 0 and r_after == 0:
        return [_copy(corner)]
    before = add(corner, scale(normalize(sub(prev, corner)), r_before))
    after = add(corner, scale(normalize(sub(nxt, corner)), r_after))
    if mode == 'chamfer':
        return straight_chamfer(before, corner, after)
    return bezier_fillet(before, corner, after, segments)


def round_corners(path: Sequence, radii, mode: str = 'bezier', segments: Optional[int] = None) -> List:
    """Round every interior corner of ``path``.

    ``radii`` is one radius for every corner, or a list with one entry
    per path point; entries for the two end points are ignored and a
    zero entry leaves that corner untouched.
    """

    n = len(path)
    if n < 2:
        raise DegenerateInputError('path must contain at least two points to round corners')
    if isgoodnum(radii):
        radii = [radii] * n
    elif len(radii) != n:
        raise ValueError(f'expected {n} corner radii, got {len(radii)}')

    rounded = [_copy(path[0])]
    for i in index_range(path, 1, -1):
        rounded.extend(round_corner(path[i - 1], path[i], path[i + 1], radii[i], mode, segments))
    rounded.append(_copy(path[-1]))
    logger.debug("Rounded %d corners: %d -> %d points", n - 2, n, len(rounded))
    return rounded


__all__ = [
    'linear_cut',
    'bezier_quadratic',
    'bezier_cubic',
    'bezier_quadratic_chain',
    'bezier_cubic_chain',
    'synthesize_control_points',
    'smooth_path',
    'straight_chamfer',
    'bezier_fillet',
    'round_corner',
    'round_corners',
]
