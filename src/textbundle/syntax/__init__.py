"""Property file syntax.

Exports:
    parse_properties: Parse .properties source into a dict

Python 3.13+. Zero external dependencies.
"""

from .properties import parse_properties

__all__ = ["parse_properties"]
