"""Resolver configuration.

Provides a single frozen dataclass that encapsulates the tunable behaviour
of TextBundleResolver.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from textbundle.enums import SearchOrder

__all__ = ["ResolverConfig"]


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Immutable configuration for TextBundleResolver.

    Constructing ``ResolverConfig()`` with no arguments reproduces the
    classic lookup: the base bundle is consulted first, so a key defined in
    ``messages.properties`` shadows the same key in ``messages_de.properties``.

    Attributes:
        search_order: Order in which candidate bundles are tried
            (default: SearchOrder.GENERAL_FIRST). Use
            SearchOrder.SPECIFIC_FIRST to let locale bundles override the
            base bundle.

    Example:
        >>> config = ResolverConfig(search_order=SearchOrder.SPECIFIC_FIRST)
        >>> resolver = TextBundleResolver(loader, config=config)
    """

    search_order: SearchOrder = SearchOrder.GENERAL_FIRST

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            TypeError: If search_order is not a SearchOrder
        """
        if not isinstance(self.search_order, SearchOrder):
            msg = f"search_order must be a SearchOrder, got {type(self.search_order).__name__}"
            raise TypeError(msg)
