## frame sequence generation for sweepcad
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
=============================================
Frame sequences: placing a shape along a path
=============================================

A frame is a :class:`~sweepcad.xform.Matrix` that moves a template
shape, built around the origin and pointing along +Z, to one place on a
path.  Every path frame is composed as ::

    Translation(point) * Align(direction) * RotationZ(twist) * Scale(s)

so the template is scaled first, then twisted about its own axis, then
turned to face ``direction`` and finally moved to ``point``.

The orientation policy decides ``direction``:

``Orientation.SIMPLE``
    always +Z, only the position follows the path.
``Orientation.DIRECT``
    the edge leaving the point; the last point reuses the last edge.
``Orientation.MIDDLE``
    the sum of the incoming and outgoing edges, a smoother averaged
    tangent.  End points use their single edge.
``Orientation.DUPLICATED``
    two frames per edge, one at each end, both facing along that edge.

Scale and twist schedules are either one value for every frame or a
list that is stretched over the frames with linear interpolation, see
:func:`schedule_at`.  A one element list is the way to give a single
vector scale, *e.g.* ``scale=[[1, 2, 1]]``.
"""

from __future__ import annotations

import logging
from enum import Enum
from math import floor
from typing import List, Optional, Sequence

from sweepcad.config import FrameOptions
from sweepcad.curves import bezier_cubic_chain, bezier_quadratic_chain, linear_cut, smooth_path
from sweepcad.errors import DegenerateInputError
from sweepcad.geom import add, isgoodnum, lerp, sub, vec3
from sweepcad.indexrange import index_range
from sweepcad.xform import Align, Matrix, RotationZ, Scale, Translation, compose

logger = logging.getLogger(__name__)


class Orientation(Enum):
    """Which direction each path frame points along."""

    SIMPLE = 'simple'
    DIRECT = 'direct'
    MIDDLE = 'middle'
    DUPLICATED = 'duplicated'


def schedule_at(schedule, i: int, count: int):
    """Look up a scale or twist schedule at frame ``i`` of ``count``.

    A scalar is returned as is.  A list is stretched over the frames:
    frame ``i`` sits at position ``(len(schedule) - 1) * i / (count - 1)``
    and the value is interpolated between the two neighbouring entries.
    Positions outside the list clamp to its first or last entry.
    """

    if isgoodnum(schedule):
        return schedule
    if not isinstance(schedule, (list, tuple)) or len(schedule) == 0:
        raise ValueError(f'schedule must be a number or a non-empty list, got {schedule!r}')
    last = len(schedule) - 1
    if last == 0 or count <= 1:
        return schedule[0]
    pos = last * i / (count - 1)
    if pos < 0 or pos > last:
        logger.debug("Schedule position %s outside [0, %d], clamping", pos, last)
        pos = min(max(pos, 0), last)
    lo = int(floor(pos))
    if lo >= last:
        return schedule[last]
    return lerp(pos - lo, schedule[lo], schedule[lo + 1])


def frame(point, direction, twist=0.0, scale=1.0) -> Matrix:
    """Build one placement matrix."""

    return compose(Translation(vec3(point)), Align(direction), RotationZ(twist), Scale(scale))


def _check_path(path: Sequence, what: str) -> None:
    if len(path) < 2:
        raise DegenerateInputError(f'path must contain at least two points for {what} frame sequencing')


def _edge(path, i):
    return sub(vec3(path[i + 1]), vec3(path[i]))


def _frames(path, directions, scale, twist) -> List[Matrix]:
    n = len(path)
    return [frame(path[i], directions[i], schedule_at(twist, i, n), schedule_at(scale, i, n))
            for i in range(n)]


def simple_frames(path: Sequence, scale=1.0, twist=0.0) -> List[Matrix]:
    """Frames that follow the path position but keep facing +Z."""

    _check_path(path, 'simple')
    return _frames(path, [[0.0, 0.0, 1.0]] * len(path), scale, twist)


def direct_frames(path: Sequence, scale=1.0, twist=0.0) -> List[Matrix]:
    """Frames that face along the edge leaving each point."""

    _check_path(path, 'direct')
    directions = [_edge(path, i) for i in index_range(path, 0, -1)]
    directions.append(directions[-1])
    return _frames(path, directions, scale, twist)


def middle_frames(path: Sequence, scale=1.0, twist=0.0) -> List[Matrix]:
    """Frames that face along the sum of the incoming and outgoing edges."""

    _check_path(path, 'middle')
    n = len(path)
    directions = [_edge(path, 0)]
    for i in index_range(path, 1, -1):
        directions.append(add(_edge(path, i - 1), _edge(path, i)))
    directions.append(_edge(path, n - 2))
    return _frames(path, directions, scale, twist)


def duplicated_frames(path: Sequence, scale=1.0, twist=0.0) -> List[Matrix]:
    """Two frames per edge, one at each end, both facing along the edge.

    The result has ``2 * (len(path) - 1)`` frames; frames ``2i`` and
    ``2i + 1`` bound edge ``i``.
    """

    _check_path(path, 'duplicated')
    n = len(path)
    frames = []
    for i in index_range(path, 0, -1):
        d = _edge(path, i)
        for j in (i, i + 1):
            frames.append(frame(path[j], d, schedule_at(twist, j, n), schedule_at(scale, j, n)))
    return frames


_POLICIES = {
    Orientation.SIMPLE: simple_frames,
    Orientation.DIRECT: direct_frames,
    Orientation.MIDDLE: middle_frames,
    Orientation.DUPLICATED: duplicated_frames,
}

_CURVES = {
    'linear': linear_cut,
    'smooth': smooth_path,
    'quadratic': bezier_quadratic_chain,
    'cubic': bezier_cubic_chain,
}


def resample(path: Sequence, curve: str, segments: Optional[int] = None) -> List:
    """Resample ``path`` with one of the curve samplers.

    ``curve`` is ``'linear'`` (straight edges), ``'smooth'`` (a cubic
    curve through every point), ``'quadratic'`` or ``'cubic'`` (``path``
    holds Bezier control points).
    """

    try:
        sampler = _CURVES[curve]
    except KeyError:
        raise ValueError(f'unknown curve type {curve!r}, expected one of {sorted(_CURVES)}') from None
    return sampler(path, segments)


def path_frames(path: Sequence, orientation=Orientation.DIRECT, scale=None, twist=None,
                segments: Optional[int] = None, curve: Optional[str] = None,
                options: Optional[FrameOptions] = None) -> List[Matrix]:
    """Generate the frames for ``path`` under an orientation policy.

    Keyword arguments take precedence over ``options``; anything still
    unset falls back to the library defaults.  When a ``curve`` is given
    the path is resampled first and one frame is produced per resampled
    point.
    """

    opts = options or FrameOptions()
    opts = FrameOptions(
        scale=scale if scale is not None else opts.scale,
        twist=twist if twist is not None else opts.twist,
        segments=segments if segments is not None else opts.segments,
        curve=curve if curve is not None else opts.curve,
    ).resolved()

    policy = Orientation(orientation)
    _check_path(path, policy.value)
    points = path
    if opts.curve is not None:
        points = resample(path, opts.curve, opts.segments)
    frames = _POLICIES[policy](points, opts.scale, opts.twist)
    logger.debug("Generated %d %s frames from %d path points", len(frames), policy.value, len(path))
    return frames


def revolve_frames(n: int, angle: float = 360.0, radius: float = 0.0, height: float = 0.0,
                   orientation: Optional[Matrix] = None, scale=1.0) -> List[Matrix]:
    """Frames evenly spaced around the Z axis.

    Produces ``n + 1`` frames; frame ``i`` is ::

        RotationZ(i*angle/n) * Translation(radius, 0, height*i/n) * orientation * Scale(s_i)

    ``radius`` offsets the template along X before it is swept around,
    ``height`` is the total rise over the sweep (a helix when non-zero)
    and ``orientation`` is applied to the template before it is placed.
    ``scale`` is a schedule as in :func:`schedule_at`.
    """

    if n < 1:
        raise ValueError('revolve needs at least one step')
    base = orientation if orientation is not None else Matrix()
    frames = []
    for i in range(n + 1):
        frames.append(compose(RotationZ(i * angle / n),
                              Translation([radius, 0.0, height * i / n]),
                              base,
                              Scale(schedule_at(scale, i, n + 1))))
    logger.debug("Generated %d revolve frames over %s degrees", len(frames), angle)
    return frames


def symmetric_frames(orientation: Optional[Matrix] = None, radius: float = 0.0) -> List[Matrix]:
    """The identity and its half turn about Z, for mirrored pairs."""

    return revolve_frames(1, angle=180.0, radius=radius, orientation=orientation)


__all__ = [
    'Orientation',
    'schedule_at',
    'frame',
    'simple_frames',
    'direct_frames',
    'middle_frames',
    'duplicated_frames',
    'resample',
    'path_frames',
    'revolve_frames',
    'symmetric_frames',
]
