## sweeping and duplicating shapes along frame sequences in sweepcad
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

"""Turn frame lists into geometry.

``duplicate`` places one copy of a template at every frame.  ``sweep``
builds a continuous solid by hulling the template between consecutive
frames.  Both hand all geometry work to a shape engine, see
:mod:`sweepcad.engine`.
"""

import logging

from sweepcad.engine import get_engine
from sweepcad.errors import DegenerateInputError
from sweepcad.frames import Orientation, path_frames
from sweepcad.indexrange import index_range

logger = logging.getLogger(__name__)


def apply_one(m, shape, engine=None):
    """transform ``shape`` by a single matrix ``m``"""
    return get_engine(engine).apply_transform(m, shape)


def apply_many(frames, shape, engine=None):
    """return one transformed copy of ``shape`` per matrix in ``frames``"""
    eng = get_engine(engine)
    return [eng.apply_transform(m, shape) for m in frames]


def duplicate(frames, template, engine=None, union=True):
    """Place ``template`` at every frame.

    With ``union`` (the default) the copies are combined into one
    shape, otherwise the list of copies is returned.
    """
    if not frames:
        raise DegenerateInputError('duplicate needs at least one frame')
    eng = get_engine(engine)
    copies = apply_many(frames, template, eng)
    if not union:
        return copies
    return eng.union(*copies)


def sweep(frames, template, chamfer=True, engine=None):
    """Hull ``template`` between consecutive frames.

    With ``chamfer`` every consecutive pair ``(i, i+1)`` is hulled, which
    blends the corners of the path.  Without it only the pairs
    ``(0,1), (2,3), ...`` are hulled, the layout produced by
    :func:`sweepcad.frames.duplicated_frames`, giving separate segments
    with hard corners.
    """
    if len(frames) < 2:
        raise DegenerateInputError('sweep needs at least two frames')
    eng = get_engine(engine)
    copies = apply_many(frames, template, eng)
    stride = 1 if chamfer else 2
    hulls = [eng.convex_hull(copies[i], copies[i+1])
             for i in index_range(frames, 0, -1, stride)]
    logger.debug("Sweeping %d frames into %d hulls", len(frames), len(hulls))
    return eng.union(*hulls)


def path_sweep(path, template, orientation=Orientation.MIDDLE, scale=None,
               twist=None, segments=None, curve=None, chamfer=None, engine=None):
    """Generate frames along ``path`` and sweep ``template`` through them.

    Duplicated frames come in edge pairs, so unless ``chamfer`` is given
    they are swept pairwise; every other policy is swept continuously.
    """
    policy = Orientation(orientation)
    frames = path_frames(path, policy, scale=scale, twist=twist,
                         segments=segments, curve=curve)
    if chamfer is None:
        chamfer = policy is not Orientation.DUPLICATED
    return sweep(frames, template, chamfer=chamfer, engine=engine)
