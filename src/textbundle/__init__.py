"""textbundle - Locale-aware text bundles and text block alignment.

Resolves message keys against a family of locale-specific .properties
bundles (messages, messages_de, messages_de_DE, messages_de_DE_rpl) and
formats blocks of text lines into left, right or centre aligned columns.

Public API:
    TextBundleResolver - Key lookup across a bundle family
    PathPropertiesLoader - Loads <root>/<bundle>.properties files
    BundleCache - Memo of opened bundles, injectable and shareable
    ResolverConfig - Resolver configuration (search order)
    LocaleId - (language, country, variant) locale triple
    LocaleNameGenerator - Candidate bundle names for a locale
    LineArray - Immutable block of lines with trim and alignment
    lines_of - Build a LineArray from positional lines

Exceptions:
    TextBundleError - Base exception class
    PropertiesSyntaxError - Malformed .properties source

Submodules:
    textbundle.localization - Resolver, loaders, cache and name generation
    textbundle.text - LineArray and trim results
    textbundle.syntax - .properties parser
    textbundle.locale_utils - LocaleId and default locale detection
"""

from .diagnostics import PropertiesSyntaxError, TextBundleError
from .enums import Alignment, SearchOrder
from .locale_utils import LocaleId, get_default_locale
from .localization import (
    BundleCache,
    LocaleNameGenerator,
    PathPropertiesLoader,
    ResolverConfig,
    TextBundleResolver,
)
from .text import LineArray, lines_of

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("textbundle")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Alignment",
    "BundleCache",
    "LineArray",
    "LocaleId",
    "LocaleNameGenerator",
    "PathPropertiesLoader",
    "PropertiesSyntaxError",
    "ResolverConfig",
    "SearchOrder",
    "TextBundleError",
    "TextBundleResolver",
    "__version__",
    "get_default_locale",
    "lines_of",
]
