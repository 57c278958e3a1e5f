"""Thread-safe memo of opened bundles.

Maps composed bundle names to their PropertyStore, or to None when opening
failed. An entry, once present, is never re-queried, overwritten or evicted,
so a failed open is permanent for the lifetime of the cache. Callers that
need fresh data create a new BundleCache.

Architecture:
    - Thread-safe using threading.RLock (reentrant lock)
    - Check-and-insert under one lock: each name is opened at most once
    - Insertion-ordered dict, grows monotonically

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from threading import RLock

from textbundle.localization.loading import PropertyStore
from textbundle.localization.types import BundleName

__all__ = ["BundleCache"]


class BundleCache:
    """Memoizing map from bundle name to opened store.

    Share one instance between resolvers to share opened bundles; give each
    test its own instance for isolation.

    Example:
        >>> cache = BundleCache()
        >>> cache.get_or_open("messages", lambda name: None)
        >>> "messages" in cache
        True
    """

    __slots__ = ("_absent", "_entries", "_hits", "_lock", "_misses")

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._entries: dict[BundleName, PropertyStore | None] = {}
        self._lock = RLock()
        self._hits = 0
        self._misses = 0
        self._absent = 0

    def get_or_open(
        self,
        bundle_name: BundleName,
        opener: Callable[[BundleName], PropertyStore | None],
    ) -> PropertyStore | None:
        """Return the cached entry, opening the bundle on first request.

        Thread-safe. The opener runs under the cache lock, so concurrent
        requests for the same name observe a single opener call.

        Args:
            bundle_name: Composed bundle name
            opener: Called once with bundle_name on a miss; returns the store,
                or None to record the bundle as absent

        Returns:
            The cached store, or None if the bundle is absent
        """
        with self._lock:
            if bundle_name in self._entries:
                self._hits += 1
                return self._entries[bundle_name]

            self._misses += 1
            store = opener(bundle_name)
            self._entries[bundle_name] = store
            if store is None:
                self._absent += 1
            return store

    def get(self, bundle_name: BundleName) -> PropertyStore | None:
        """Return the cached entry without opening; None if absent or not cached."""
        with self._lock:
            return self._entries.get(bundle_name)

    def names(self) -> tuple[BundleName, ...]:
        """Return cached bundle names in the order they were first requested."""
        with self._lock:
            return tuple(self._entries)

    def get_stats(self) -> dict[str, int]:
        """Get cache statistics.

        Thread-safe. Returns current metrics.

        Returns:
            Dict with keys:
            - size (int): Number of cached names, absent ones included
            - absent (int): Number of names cached as absent
            - hits (int): Lookups answered from the cache
            - misses (int): Lookups that invoked the opener
        """
        with self._lock:
            return {
                "size": len(self._entries),
                "absent": self._absent,
                "hits": self._hits,
                "misses": self._misses,
            }

    def __contains__(self, bundle_name: object) -> bool:
        """Check if a name has been cached, as a store or as absent."""
        with self._lock:
            return bundle_name in self._entries

    def __len__(self) -> int:
        """Get current cache size.

        Thread-safe.
        """
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"BundleCache(size={len(self)}, absent={self._absent})"
