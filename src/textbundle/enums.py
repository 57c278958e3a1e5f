"""Enumerations for textbundle type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Alignment(StrEnum):
    """Horizontal alignment of a block of lines.

    StrEnum provides automatic string conversion: str(Alignment.LEFT) == "left"
    """

    LEFT = "left"
    """Padding appended after each line."""

    RIGHT = "right"
    """Padding prepended before each line."""

    CENTRE = "centre"
    """Padding split around each line, odd space on the left."""


class SearchOrder(StrEnum):
    """Order in which candidate bundle names are tried.

    StrEnum provides automatic string conversion:
    str(SearchOrder.GENERAL_FIRST) == "general_first"
    """

    GENERAL_FIRST = "general_first"
    """Base bundle first: messages, messages_de, messages_de_DE, ..."""

    SPECIFIC_FIRST = "specific_first"
    """Most specific bundle first: ..., messages_de_DE, messages_de, messages"""


class BundleStatus(StrEnum):
    """Outcome of opening a single bundle.

    StrEnum provides automatic string conversion: str(BundleStatus.LOADED) == "loaded"
    """

    LOADED = "loaded"
    """Store opened and parsed."""

    NOT_FOUND = "not_found"
    """No backing store exists for the bundle name."""

    ERROR = "error"
    """Backing store exists but could not be read or parsed."""


__all__ = [
    "Alignment",
    "BundleStatus",
    "SearchOrder",
]
