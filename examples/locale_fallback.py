"""TextBundleResolver Example - Bundle Families and Locale Fallback.

Demonstrates key lookup across a family of .properties bundles:

1. Base bundle first (default search order)
2. Most specific bundle first (SearchOrder.SPECIFIC_FIRST)
3. Sharing one BundleCache between resolvers
4. Custom in-memory StoreLoader

Python 3.13+.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from textbundle import (
    BundleCache,
    LocaleId,
    LocaleNameGenerator,
    PathPropertiesLoader,
    ResolverConfig,
    SearchOrder,
    TextBundleResolver,
)
from textbundle.localization import PropertyStore


def _write_family(root: Path) -> None:
    (root / "messages.properties").write_text(
        "greeting = Hello\nfarewell = Goodbye\ntitle = Report\n", encoding="utf-8"
    )
    (root / "messages_de.properties").write_text(
        "greeting = Hallo\nfarewell = Auf Wiedersehen\n", encoding="utf-8"
    )
    (root / "messages_de_AT.properties").write_text("greeting = Servus\n", encoding="utf-8")


def example_1_general_first(root: Path) -> None:
    """Example 1: Base bundle wins when it defines the key."""
    print("=" * 60)
    print("Example 1: Default search order (base bundle first)")
    print("=" * 60)

    resolver = TextBundleResolver(PathPropertiesLoader(root))
    locale = LocaleId("de", "AT")

    print(f"Candidates: {resolver.candidate_names('messages', locale)}")
    for key in ("greeting", "farewell", "title", "missing"):
        print(f"  {key:10} -> {resolver.resolve('messages', key, locale)!r}")


def example_2_specific_first(root: Path) -> None:
    """Example 2: Locale bundles override the base bundle."""
    print("\n" + "=" * 60)
    print("Example 2: SearchOrder.SPECIFIC_FIRST")
    print("=" * 60)

    config = ResolverConfig(search_order=SearchOrder.SPECIFIC_FIRST)
    resolver = TextBundleResolver(PathPropertiesLoader(root), config=config)

    for code in ("de_AT", "de-DE", "fr"):
        value = resolver.resolve("messages", "greeting", code)
        print(f"  {code:6} greeting -> {value!r}")


def example_3_shared_cache(root: Path) -> None:
    """Example 3: Two resolvers reading through one cache."""
    print("\n" + "=" * 60)
    print("Example 3: Shared BundleCache")
    print("=" * 60)

    cache = BundleCache()
    loader = PathPropertiesLoader(root)
    first = TextBundleResolver(loader, cache=cache)
    second = TextBundleResolver(
        loader, cache=cache, config=ResolverConfig(search_order=SearchOrder.SPECIFIC_FIRST)
    )

    first.resolve("messages", "greeting", "de_DE")
    second.resolve("messages", "greeting", "de_DE")

    print(f"  {cache!r}")
    print(f"  stats: {cache.get_stats()}")


class InMemoryLoader:
    """StoreLoader over a dict of bundle name to entries."""

    def __init__(self, bundles: dict[str, dict[str, str]]) -> None:
        self._bundles = bundles

    def open(self, bundle_name: str) -> PropertyStore:
        try:
            return PropertyStore(self._bundles[bundle_name])
        except KeyError:
            raise FileNotFoundError(bundle_name) from None

    def describe_path(self, bundle_name: str) -> str:
        return f"memory:{bundle_name}"


def example_4_custom_loader() -> None:
    """Example 4: Any object with open() and describe_path() is a loader."""
    print("\n" + "=" * 60)
    print("Example 4: Custom loader")
    print("=" * 60)

    loader = InMemoryLoader(
        {
            "labels": {"ok": "OK"},
            "labels_lv": {"ok": "Labi", "cancel": "Atcelt"},
        }
    )
    locale = LocaleId("lv", "LV")
    resolver = TextBundleResolver(loader, default_locale=lambda: locale)

    print(f"  names: {LocaleNameGenerator(locale).names_starting_with('labels')}")
    print(f"  ok     -> {resolver.resolve('labels', 'ok')!r}")
    print(f"  cancel -> {resolver.resolve('labels', 'cancel')!r}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    with tempfile.TemporaryDirectory() as tmp_dir:
        bundle_root = Path(tmp_dir)
        _write_family(bundle_root)
        example_1_general_first(bundle_root)
        example_2_specific_first(bundle_root)
        example_3_shared_cache(bundle_root)

    example_4_custom_loader()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
