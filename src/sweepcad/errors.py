## exception types for sweepcad
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

"""Exceptions raised by **sweepcad**.

All geometric precondition failures derive from :class:`SweepCADError`,
which is itself a :class:`ValueError` so callers that already guard
against ``ValueError`` keep working.
"""


class SweepCADError(ValueError):
    """Base class for sweepcad precondition failures."""


class DegenerateInputError(SweepCADError, ZeroDivisionError):
    """Raised for zero-length vectors and paths too short to define a
    direction."""


class CurveDefinitionError(SweepCADError):
    """Raised when a control-point list does not fit a Bezier chain
    layout."""


class EngineError(RuntimeError):
    """Raised when a shape engine is unknown or its backend is missing."""


__all__ = [
    'SweepCADError',
    'DegenerateInputError',
    'CurveDefinitionError',
    'EngineError',
]
