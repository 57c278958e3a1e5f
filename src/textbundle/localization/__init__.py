"""Locale-aware text lookup over property bundle families.

Provides the full localization stack: type aliases, candidate name
generation, store loading, the bundle cache and the resolver.

Submodules:
    types    - PEP 695 type aliases (BundleName, MessageKey, CandidateNames)
    names    - LocaleNameGenerator, generate_from
    loading  - PropertyStore, StoreLoader protocol, PathPropertiesLoader
    cache    - BundleCache (memo of opened bundles)
    config   - ResolverConfig
    resolver - TextBundleResolver

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from textbundle.enums import BundleStatus, SearchOrder
from textbundle.localization.cache import BundleCache
from textbundle.localization.config import ResolverConfig
from textbundle.localization.loading import PathPropertiesLoader, PropertyStore, StoreLoader
from textbundle.localization.names import LocaleNameGenerator, generate_from
from textbundle.localization.resolver import TextBundleResolver
from textbundle.localization.types import BundleName, CandidateNames, MessageKey

__all__ = [
    # Resolver
    "TextBundleResolver",
    "ResolverConfig",
    "SearchOrder",
    # Candidate names
    "LocaleNameGenerator",
    "generate_from",
    # Loading and caching
    "StoreLoader",
    "PathPropertiesLoader",
    "PropertyStore",
    "BundleCache",
    "BundleStatus",
    # Type aliases for user code type annotations
    "BundleName",
    "CandidateNames",
    "MessageKey",
]
