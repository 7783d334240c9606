## shape engine registry for sweepcad
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

"""Shape engines.

A shape engine is a module providing ``emit_primitive``,
``apply_transform``, ``convex_hull``, ``union``, ``difference``,
``intersection``, ``color``, ``vertices`` and ``bbox``.  The core of
sweepcad only ever hands engines :class:`~sweepcad.xform.Matrix`
values; it never builds geometry itself.
"""

import logging

from sweepcad.config import DEFAULTS, resolve
from sweepcad.errors import EngineError

from . import native as native

logger = logging.getLogger(__name__)

__all__ = ['native']

try:
    from . import trimesh_engine as trimesh
except ImportError:  # optional dependency
    trimesh = None
else:
    __all__.append('trimesh')

ENGINE_REGISTRY = {'native': native}
if trimesh is not None:
    ENGINE_REGISTRY['trimesh'] = trimesh


def get_engine(name=None):
    """Return the engine registered as ``name`` (default: the configured
    engine).  An engine module passed in is returned unchanged."""

    if name is not None and not isinstance(name, str):
        return name
    key = resolve(name, default=DEFAULTS.engine)
    engine = ENGINE_REGISTRY.get(key)
    if engine is None:
        raise EngineError(f"unknown shape engine '{key}' (available: {sorted(ENGINE_REGISTRY)})")
    if not engine.is_available():
        raise EngineError(f"shape engine '{key}' is installed but not usable")
    logger.debug("Using shape engine %s", key)
    return engine


__all__.extend(['ENGINE_REGISTRY', 'get_engine'])
