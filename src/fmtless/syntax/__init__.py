"""fmtless syntax package.

Provides the directive scanner and its cursor. Separate from runtime so the
grammar (what counts as a directive) stays independent of the conversion
policy (how a value renders under a directive).

Python 3.13+.
"""

from .cursor import Cursor
from .scanner import Directive, Segment, match_directive, scan

__all__ = [
    "Cursor",
    "Directive",
    "Segment",
    "match_directive",
    "scan",
]
