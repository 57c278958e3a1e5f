"""Locale utilities: the LocaleId value type and process default locale.

Centralizes locale code normalization and parsing used throughout the
codebase. LocaleId is the single locale representation accepted by the
name generator and the resolver; locale codes and Babel locales are
converted at the system boundary.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from textbundle.constants import LOCALE_ENV_VARS, NAME_SEPARATOR, ROOT_LOCALE_ALIASES

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "LocaleId",
    "get_default_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to POSIX separators.

    BCP-47 uses hyphens (en-US), while POSIX and bundle names use
    underscores (en_US). Case is left untouched.

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "en-US", "pt_BR")

    Returns:
        Locale code with underscores (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@dataclass(frozen=True, slots=True)
class LocaleId:
    """Immutable (language, country, variant) triple.

    Each part may be empty. The root locale is LocaleId() with all three
    parts empty. Parts are stored exactly as given; LocaleId.parse() applies
    case conventions (lower-case language, upper-case country).

    Example:
        >>> LocaleId("de", "DE")
        LocaleId(language='de', country='DE', variant='')
        >>> str(LocaleId.parse("de-DE"))
        'de_DE'

    Attributes:
        language: Language code (e.g., 'de'), possibly empty
        country: Country code (e.g., 'DE'), possibly empty
        variant: Free-form variant (e.g., 'rpl'), possibly empty
    """

    language: str = ""
    country: str = ""
    variant: str = ""

    def __post_init__(self) -> None:
        """Reject non-string parts.

        Raises:
            TypeError: If language, country or variant is not a str
        """
        for name in ("language", "country", "variant"):
            value = getattr(self, name)
            if not isinstance(value, str):
                msg = f"LocaleId.{name} must be str, got {type(value).__name__}"
                raise TypeError(msg)

    def __str__(self) -> str:
        """Return the parts joined with underscores, stopping at the first empty part."""
        parts: list[str] = []
        for part in (self.language, self.country, self.variant):
            if not part:
                break
            parts.append(part)
        return NAME_SEPARATOR.join(parts)

    @property
    def is_root(self) -> bool:
        """Check if all three parts are empty."""
        return not (self.language or self.country or self.variant)

    @classmethod
    def parse(cls, locale_code: str) -> LocaleId:
        """Parse a BCP-47 or POSIX locale code.

        Hyphens are treated as underscores. An encoding suffix (".UTF-8") and
        a modifier ("@euro") are dropped. A four-letter script subtag
        directly after the language ("zh_Hans_CN") is not modelled and is
        skipped. Everything after the country is kept as the variant.

        Args:
            locale_code: Locale code (e.g., "de", "de-DE", "de_DE_rpl", "de_DE.UTF-8")

        Returns:
            Parsed LocaleId. Empty codes, "C" and "POSIX" give the root locale.

        Raises:
            TypeError: If locale_code is not a str

        Example:
            >>> LocaleId.parse("de_de_rpl")
            LocaleId(language='de', country='DE', variant='rpl')
        """
        if not isinstance(locale_code, str):
            msg = f"locale_code must be str, got {type(locale_code).__name__}"
            raise TypeError(msg)

        code = locale_code.strip().split("@", 1)[0].split(".", 1)[0]
        if not code or code in ROOT_LOCALE_ALIASES:
            return cls()

        language, *rest = normalize_locale(code).split(NAME_SEPARATOR)
        if rest and len(rest[0]) == 4 and rest[0].isalpha():
            rest = rest[1:]
        country = rest[0] if rest else ""
        variant = NAME_SEPARATOR.join(rest[1:])
        return cls(language.lower(), country.upper(), variant)

    @classmethod
    def from_babel(cls, locale: Locale) -> LocaleId:
        """Convert a babel.Locale, mapping territory to country.

        Args:
            locale: Babel locale object

        Returns:
            LocaleId with missing Babel parts as empty strings
        """
        return cls(locale.language or "", locale.territory or "", locale.variant or "")

    @classmethod
    def default(cls) -> LocaleId:
        """Return the process default locale. See get_default_locale()."""
        return get_default_locale()


def _environment_locale() -> str | None:
    """Return the first locale environment value, in Babel's precedence order.

    LANGUAGE may hold a colon-separated preference list; its first entry wins.
    """
    for var in LOCALE_ENV_VARS:
        value = os.environ.get(var)
        if value:
            if var == "LANGUAGE":
                value = value.split(":", 1)[0]
            return value
    return None


def get_default_locale() -> LocaleId:
    """Detect the process default locale.

    Detection order:
    1. The LANGUAGE, LC_ALL, LC_MESSAGES and LANG environment variables,
       parsed by Babel's default_locale() without alias expansion. "C" and
       "POSIX" give the root locale.
    2. Python locale.getlocale() (OS-level locale), ignoring "C" and "POSIX"
    3. The root locale LocaleId()

    The environment is reported as found: LANG=de gives LocaleId("de"),
    never a country Babel would guess for it.

    Returns:
        Detected LocaleId (root locale if nothing could be determined)

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_default_locale()
        LocaleId(language='de', country='DE', variant='')
    """
    env_value = _environment_locale()
    if env_value is not None and LocaleId.parse(env_value).is_root:
        logger.debug("Locale environment is %r; using root locale", env_value)
        return LocaleId()

    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import default_locale  # noqa: PLC0415

    code = default_locale("LC_MESSAGES", aliases=None)
    if code:
        return LocaleId.parse(code)

    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except ValueError:
        system_locale = None
    if system_locale and system_locale not in ROOT_LOCALE_ALIASES:
        return LocaleId.parse(system_locale)

    logger.debug("No default locale configured; using root locale")
    return LocaleId()
