"""Hypothesis strategies for textbundle property-based testing.

Strategies are organized by domain:

- localization: locale parts, LocaleId values, bundle names, in-memory loaders
- text: line lists with and without surrounding whitespace

Usage:
    from tests.strategies.localization import locale_ids, DictStoreLoader
    from tests.strategies.text import line_lists
"""

from .localization import (
    CountingStoreLoader,
    DictStoreLoader,
    FailingStoreLoader,
    bundle_names,
    locale_ids,
    locale_parts,
)
from .text import line_lists, padded_line_lists, trimmed_line_lists

__all__ = [
    "CountingStoreLoader",
    "DictStoreLoader",
    "FailingStoreLoader",
    "bundle_names",
    "line_lists",
    "locale_ids",
    "locale_parts",
    "padded_line_lists",
    "trimmed_line_lists",
]
