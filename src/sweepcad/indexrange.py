## index sequence generation for sweepcad
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

"""Index sequences with stride, replication and trimming.

``index_range`` is how the curve and frame code picks sub-ranges of a
path: every other point, every point twice, all but the last point,
and so on.
"""

from __future__ import annotations

from typing import List, Sequence, TypeVar, Union

T = TypeVar('T')


def _limit(end: int, size: int) -> int:
    limit = end if end > 0 else size + end
    return max(0, min(limit, size))


def index_range(n: Union[int, Sequence], start: int = 0, end: int = 0, stride: int = 1) -> List[int]:
    """Return the indices to visit in a sequence of length ``n``.

    ``n`` may be a length or a sized sequence.  With a positive
    ``stride`` every ``stride``-th index from ``start`` is returned.  A
    positive ``end`` is an exclusive count from the front; zero or a
    negative ``end`` trims ``-end`` indices from the back.

    A negative ``stride`` is a replication factor: every index is
    repeated ``-stride`` times, and ``start``/``end`` then trim the
    expanded sequence.  ``start`` is clamped at zero.
    """

    if not isinstance(n, int) or isinstance(n, bool):
        n = len(n)
    if stride == 0:
        raise ValueError('stride must be non-zero')
    if n <= 0:
        return []
    start = max(0, start)

    if stride > 0:
        return list(range(start, _limit(end, n), stride))

    expanded = [i for i in range(n) for _ in range(-stride)]
    return expanded[start:_limit(end, len(expanded))]


def select(seq: Sequence[T], start: int = 0, end: int = 0, stride: int = 1) -> List[T]:
    """Return the elements of ``seq`` at ``index_range(seq, start, end, stride)``."""

    return [seq[i] for i in index_range(seq, start, end, stride)]


__all__ = ['index_range', 'select']
