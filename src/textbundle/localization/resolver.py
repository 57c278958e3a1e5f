"""Locale-aware text lookup over a family of property bundles.

TextBundleResolver turns (base name, key, locale) into a text by trying the
candidate bundles produced by LocaleNameGenerator:

    messages -> messages_de -> messages_de_DE -> messages_de_DE_rpl

Not finding something is never an error. A missing bundle, an unreadable
or malformed bundle, a missing key and an exhausted candidate list all
produce None, so partially translated bundle families degrade gracefully.
Only argument errors raise.

Opened bundles are memoized in an injected BundleCache. A bundle that failed
to open is remembered as absent and never retried.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Final

from textbundle.diagnostics import PropertiesSyntaxError
from textbundle.enums import BundleStatus, SearchOrder
from textbundle.locale_utils import LocaleId
from textbundle.localization.cache import BundleCache
from textbundle.localization.config import ResolverConfig
from textbundle.localization.loading import PropertyStore, StoreLoader
from textbundle.localization.names import LocaleNameGenerator
from textbundle.localization.types import BundleName, MessageKey

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["TextBundleResolver"]

logger = logging.getLogger(__name__)


class _Omitted(Enum):
    """Marker for an omitted locale argument (distinct from an explicit None)."""

    TOKEN = 0


_OMITTED: Final = _Omitted.TOKEN

type LocaleLike = LocaleId | str | Locale
"""Accepted locale forms: LocaleId, locale code string, or babel.Locale."""


class TextBundleResolver:
    """Resolves texts from a locale-specific chain of property bundles.

    Example:
        >>> loader = PathPropertiesLoader("i18n")
        >>> resolver = TextBundleResolver(loader)
        >>> resolver.resolve("messages", "button.ok", LocaleId("de", "DE"))
        # Tries i18n/messages.properties, then messages_de, then messages_de_DE

    Example - Shared cache:
        >>> cache = BundleCache()
        >>> ui = TextBundleResolver(loader, cache=cache)
        >>> errors = TextBundleResolver(loader, cache=cache)
        # Both resolvers open each bundle file at most once
    """

    __slots__ = ("_cache", "_config", "_default_locale", "_loader")

    def __init__(
        self,
        loader: StoreLoader,
        *,
        cache: BundleCache | None = None,
        config: ResolverConfig | None = None,
        default_locale: Callable[[], LocaleId] | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            loader: Opens the property store behind a bundle name
            cache: Memo of opened bundles. A private cache is created when
                omitted; pass the same cache to several resolvers to share it.
            config: Resolver configuration (default: ResolverConfig())
            default_locale: Zero-argument callable supplying the locale when
                resolve() is called without one (default: LocaleId.default)

        Raises:
            TypeError: If loader is None
        """
        if loader is None:
            msg = "loader is required"
            raise TypeError(msg)
        self._loader = loader
        self._cache = cache if cache is not None else BundleCache()
        self._config = config if config is not None else ResolverConfig()
        self._default_locale = default_locale if default_locale is not None else LocaleId.default

    @property
    def cache(self) -> BundleCache:
        """The bundle cache used by this resolver."""
        return self._cache

    @property
    def config(self) -> ResolverConfig:
        """The resolver configuration."""
        return self._config

    def resolve_from_single(self, bundle_name: BundleName, key: MessageKey | None) -> str | None:
        """Look up key in exactly one bundle.

        The bundle is opened on first use and memoized, as absent if opening
        fails. A None key returns None without touching the cache.

        Args:
            bundle_name: Composed bundle name, without extension
            key: Key to look up, or None

        Returns:
            The text, or None if the key or the bundle is missing

        Raises:
            TypeError: If bundle_name is not a str
            ValueError: If the loader rejects bundle_name (path traversal)
        """
        if key is None:
            return None
        if not isinstance(bundle_name, str):
            msg = f"bundle_name must be str, got {type(bundle_name).__name__}"
            raise TypeError(msg)

        store = self._cache.get_or_open(bundle_name, self._open_store)
        if store is None:
            return None
        return store.get(key)

    def resolve(
        self,
        base_name: BundleName | None,
        key: MessageKey | None,
        locale: LocaleLike | None | _Omitted = _OMITTED,
    ) -> str | None:
        """Look up key across the bundle family of base_name.

        Candidates are tried in the configured search order; the first
        bundle containing the key wins.

        Args:
            base_name: Base bundle name without locale suffix or extension
            key: Key to look up
            locale: LocaleId, locale code ("de_DE") or babel.Locale. When
                omitted, the default locale supplier is queried.

        Returns:
            The first text found, or None if no candidate bundle has the key

        Raises:
            TypeError: If locale is explicitly None or of an unsupported type
        """
        locale_id = self._default_locale() if locale is _OMITTED else _coerce_locale(locale)

        for bundle_name in self.candidate_names(base_name, locale_id):
            text = self.resolve_from_single(bundle_name, key)
            if text is not None:
                logger.debug("Resolved %r from bundle %r", key, bundle_name)
                return text

        logger.debug("No bundle of %r defines %r for locale %r", base_name, key, str(locale_id))
        return None

    def candidate_names(
        self, base_name: BundleName | None, locale: LocaleLike
    ) -> tuple[BundleName, ...]:
        """Return the bundle names resolve() would try, in search order.

        Absent candidates are left out.

        Raises:
            TypeError: If locale is None or of an unsupported type
        """
        names = LocaleNameGenerator(_coerce_locale(locale)).names_starting_with(base_name)
        present = [name for name in names if name is not None]
        if self._config.search_order is SearchOrder.SPECIFIC_FIRST:
            present.reverse()
        return tuple(present)

    def _open_store(self, bundle_name: BundleName) -> PropertyStore | None:
        """Open a bundle for the cache, converting load failures to None."""
        try:
            store = self._loader.open(bundle_name)
        except FileNotFoundError:
            logger.debug("Bundle %r %s", bundle_name, BundleStatus.NOT_FOUND)
            return None
        except (OSError, UnicodeDecodeError, PropertiesSyntaxError) as e:
            logger.debug(
                "Bundle %r %s (%s): %s",
                bundle_name,
                BundleStatus.ERROR,
                self._loader.describe_path(bundle_name),
                e,
            )
            return None

        logger.debug("Bundle %r %s with %d entries", bundle_name, BundleStatus.LOADED, len(store))
        return store

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"TextBundleResolver(loader={self._loader!r}, "
            f"search_order={self._config.search_order}, "
            f"cached_bundles={len(self._cache)})"
        )


def _coerce_locale(locale: object) -> LocaleId:
    """Convert an explicitly passed locale to LocaleId.

    Raises:
        TypeError: If locale is None or of an unsupported type
    """
    match locale:
        case None:
            msg = "locale must not be None; omit it to use the default locale"
            raise TypeError(msg)
        case LocaleId():
            return locale
        case str():
            return LocaleId.parse(locale)

    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    if isinstance(locale, Locale):
        return LocaleId.from_babel(locale)

    msg = f"locale must be LocaleId, str or babel.Locale, got {type(locale).__name__}"
    raise TypeError(msg)
