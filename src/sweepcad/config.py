## library-wide defaults for sweepcad
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

"""Default resolution for **sweepcad**.

Numeric defaults live in a single frozen :class:`Defaults` instance,
``DEFAULTS``.  Functions that take optional arguments resolve them with
:func:`resolve`, which returns the first candidate that is not
``None``.  The environment variables ``SWEEPCAD_ENGINE`` and
``SWEEPCAD_SEGMENTS`` override the built-in values when
:meth:`Defaults.from_env` is used.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Optional

logger = logging.getLogger(__name__)

ENGINE_ENV = 'SWEEPCAD_ENGINE'
SEGMENTS_ENV = 'SWEEPCAD_SEGMENTS'


@dataclass(frozen=True)
class Defaults:
    """Library-wide defaults."""

    epsilon: float = 0.01
    segments: int = 10
    engine: str = 'native'
    control_weight: float = 1.0 / 3.0

    @classmethod
    def from_env(cls, environ=None) -> "Defaults":
        """Build defaults, overriding engine and segment count from the
        environment.  A segment count that is not a positive integer is
        logged and ignored, so a bad environment never breaks import."""

        env = os.environ if environ is None else environ
        base = cls()
        engine = env.get(ENGINE_ENV)
        segments = env.get(SEGMENTS_ENV)
        if engine:
            base = replace(base, engine=engine)
        if segments:
            try:
                count = int(segments)
            except ValueError:
                count = 0
            if count < 1:
                logger.warning("Ignoring %s=%r: expected an integer >= 1, using %d",
                               SEGMENTS_ENV, segments, base.segments)
            else:
                base = replace(base, segments=count)
        logger.debug("Resolved defaults: %s", base)
        return base


DEFAULTS = Defaults.from_env()


def resolve(*candidates: Any, default: Any = None) -> Any:
    """Return the first candidate that is not ``None``, else ``default``."""

    for value in candidates:
        if value is not None:
            return value
    return default


@dataclass(frozen=True)
class FrameOptions:
    """Optional knobs for frame generation.

    Any field left as ``None`` is filled from ``DEFAULTS`` (or the
    built-in value) by :meth:`resolved`.  ``curve`` selects resampling of
    the path before frames are built; when it stays ``None`` the path is
    used as given and ``segments`` is ignored.
    """

    scale: Optional[Any] = None
    twist: Optional[Any] = None
    segments: Optional[int] = None
    curve: Optional[str] = None

    def resolved(self, defaults: Optional[Defaults] = None) -> "FrameOptions":
        base = defaults or DEFAULTS
        return FrameOptions(
            scale=resolve(self.scale, default=1.0),
            twist=resolve(self.twist, default=0.0),
            segments=resolve(self.segments, default=base.segments),
            curve=self.curve,
        )


__all__ = ['Defaults', 'DEFAULTS', 'FrameOptions', 'resolve', 'ENGINE_ENV', 'SEGMENTS_ENV']
