"""Error types for textbundle.

Python 3.13+. Zero external dependencies.
"""

from .errors import PropertiesSyntaxError, TextBundleError

__all__ = [
    "PropertiesSyntaxError",
    "TextBundleError",
]
