"""Text block utilities.

Exports:
    LineArray: Immutable block of lines with trim and alignment
    lines_of: Build a LineArray from positional lines
    TrimResult, Unchanged, Changed: Tagged outcome of LineArray.try_trim()

Python 3.13+. Zero external dependencies.
"""

from textbundle.enums import Alignment

from .lines import Changed, LineArray, TrimResult, Unchanged, lines_of

__all__ = [
    "Alignment",
    "Changed",
    "LineArray",
    "TrimResult",
    "Unchanged",
    "lines_of",
]
