"""Candidate bundle names derived from a locale.

Mirrors the resource-bundle family naming scheme: a base name followed by
the locale's language, country and variant, each joined with an underscore.

    messages
    messages_de
    messages_de_DE
    messages_de_DE_rpl

A missing locale part truncates the chain. For LocaleId("de", "", "rpl")
only "messages" and "messages_de" are produced; the variant is never
appended without a country.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from textbundle.constants import NAME_SEPARATOR
from textbundle.locale_utils import LocaleId
from textbundle.localization.types import BundleName, CandidateNames

__all__ = ["LocaleNameGenerator", "generate_from"]


class LocaleNameGenerator:
    """Generates the candidate bundle names for one locale.

    Stateless apart from the wrapped LocaleId; equality and hashing are
    derived from it alone.

    Example:
        >>> generator = LocaleNameGenerator(LocaleId("de", "DE"))
        >>> generator.names_starting_with("messages")
        ('messages', 'messages_de', 'messages_de_DE', None)
    """

    __slots__ = ("_locale",)

    def __init__(self, locale: LocaleId) -> None:
        """Initialize the generator.

        Args:
            locale: Locale whose parts are appended to the prefix

        Raises:
            TypeError: If locale is None or not a LocaleId
        """
        if not isinstance(locale, LocaleId):
            msg = f"locale must be a LocaleId, got {type(locale).__name__}"
            raise TypeError(msg)
        self._locale = locale

    @property
    def locale(self) -> LocaleId:
        """The wrapped locale."""
        return self._locale

    def names_starting_with(self, prefix: BundleName | None) -> CandidateNames:
        """Build the four candidate names for a prefix.

        Args:
            prefix: Base bundle name, or None for no prefix

        Returns:
            (base, base_lang, base_lang_COUNTRY, base_lang_COUNTRY_variant),
            with None for every entry after the first empty locale part.
            All four entries are None when prefix is None.
        """
        if prefix is None:
            return (None, None, None, None)

        names: list[BundleName | None] = [prefix]
        current: BundleName | None = prefix
        for part in (self._locale.language, self._locale.country, self._locale.variant):
            if current is not None and part:
                current = f"{current}{NAME_SEPARATOR}{part}"
            else:
                current = None
            names.append(current)
        return (names[0], names[1], names[2], names[3])

    def __eq__(self, other: object) -> bool:
        """Compare by wrapped locale."""
        if not isinstance(other, LocaleNameGenerator):
            return NotImplemented
        return self._locale == other._locale

    def __hash__(self) -> int:
        """Hash the wrapped locale."""
        return hash(self._locale)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"LocaleNameGenerator({self._locale!r})"


def generate_from(locale: LocaleId) -> LocaleNameGenerator:
    """Return a LocaleNameGenerator for locale.

    Raises:
        TypeError: If locale is None or not a LocaleId
    """
    return LocaleNameGenerator(locale)
