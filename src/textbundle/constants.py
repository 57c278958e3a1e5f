"""Shared constants for textbundle.

Centralized configuration constants used across the localization and text
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Bundle naming: how candidate bundle names are composed
- Property files: file extension and encoding of the default loader
- Text layout: padding used by line alignment

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Bundle naming
    "NAME_SEPARATOR",
    "ROOT_LOCALE_ALIASES",
    "LOCALE_ENV_VARS",
    # Property files
    "PROPERTIES_EXTENSION",
    "DEFAULT_ENCODING",
    # Text layout
    "PAD_CHAR",
]

# ============================================================================
# BUNDLE NAMING
# ============================================================================

# Joins base name, language, country and variant: messages_de_DE_rpl
NAME_SEPARATOR = "_"

# Pseudo-locales that mean "no locale" when parsing locale codes
ROOT_LOCALE_ALIASES = frozenset({"C", "POSIX"})

# Environment variables naming the message locale, highest precedence first
LOCALE_ENV_VARS = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")

# ============================================================================
# PROPERTY FILES
# ============================================================================

PROPERTIES_EXTENSION = ".properties"

DEFAULT_ENCODING = "utf-8"

# ============================================================================
# TEXT LAYOUT
# ============================================================================

PAD_CHAR = " "
