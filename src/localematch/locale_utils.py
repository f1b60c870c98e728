"""Locale utilities at the system boundary.

Converts POSIX locale names reported by the operating environment into
BCP-47 tags, detects the user's ordered locale preferences, and bridges
negotiated tags to Babel for CLDR data.

All locale strings should be converted to BCP-47 at the system boundary
(entry point) using these functions, then handed to negotiation as plain
ordered lists.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from localematch.constants import MAX_LOCALE_CACHE_SIZE
from localematch.core.babel_compat import get_locale_class, get_unknown_locale_error
from localematch.tags.parser import parse_tag
from localematch.tags.tag import LanguageTag

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_display_name",
    "get_system_locales",
    "posix_to_bcp47",
]

logger = logging.getLogger(__name__)

# Environment variables consulted for the message locale, highest priority first.
# LANGUAGE holds a colon-separated priority list (GNU gettext extension).
_LOCALE_ENV_VARS: tuple[str, ...] = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")

_PSEUDO_LOCALES: frozenset[str] = frozenset({"", "C", "POSIX"})

# glibc @modifier names that correspond to BCP-47 script subtags
_SCRIPT_MODIFIERS: dict[str, str] = {
    "latin": "Latn",
    "cyrillic": "Cyrl",
    "devanagari": "Deva",
}

# glibc @modifier names that correspond to BCP-47 variant subtags
_VARIANT_MODIFIERS: frozenset[str] = frozenset({"valencia"})


def posix_to_bcp47(value: str) -> str | None:
    """Convert a POSIX locale name to a BCP-47 tag.

    Strips the encoding suffix, maps known ``@modifier`` values to script or
    variant subtags, and replaces underscores with hyphens. Modifiers without
    a BCP-47 counterpart (``@euro``) are dropped.

    Args:
        value: POSIX locale such as ``"de_DE.UTF-8"`` or ``"sr_RS@latin"``

    Returns:
        Canonical BCP-47 tag, or None for pseudo-locales (``C``, ``POSIX``) and values
        that do not convert to a well-formed tag

    Example:
        >>> posix_to_bcp47("de_DE.UTF-8")
        'de-DE'
        >>> posix_to_bcp47("sr_RS@latin")
        'sr-Latn-RS'
        >>> posix_to_bcp47("C.UTF-8") is None
        True
    """
    name, _, modifier = value.strip().partition("@")
    name = name.split(".", 1)[0]
    if name in _PSEUDO_LOCALES:
        return None

    parts = name.replace("_", "-").split("-")
    modifier = modifier.lower()
    if modifier in _SCRIPT_MODIFIERS:
        parts.insert(1, _SCRIPT_MODIFIERS[modifier])
    elif modifier in _VARIANT_MODIFIERS:
        parts.append(modifier)

    tag, _ = parse_tag("-".join(parts))
    return str(tag) if tag is not None else None


def get_system_locales() -> list[str]:
    """Detect the user's locale preferences from the environment.

    Detection order:
    1. LANGUAGE environment variable (colon-separated priority list)
    2. LC_ALL environment variable (overrides all categories)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)
    5. Python locale.getlocale() (OS-level locale)

    Values are converted with ``posix_to_bcp47``; pseudo-locales and
    unconvertible values are skipped, duplicates keep their first position.

    Returns:
        BCP-47 tags in priority order; empty when nothing is configured

    Example:
        >>> import os
        >>> os.environ["LANGUAGE"] = "pt_BR:pt:en"
        >>> get_system_locales()[:3]
        ['pt-BR', 'pt', 'en']
    """
    import locale as locale_module  # noqa: PLC0415

    raw_values: list[str] = []
    for var in _LOCALE_ENV_VARS:
        value = os.environ.get(var)
        if not value:
            continue
        if var == "LANGUAGE":
            raw_values.extend(value.split(":"))
        else:
            raw_values.append(value)

    try:
        system_locale, _ = locale_module.getlocale()
    except ValueError:
        system_locale = None
    if system_locale:
        raw_values.append(system_locale)

    converted = (posix_to_bcp47(raw) for raw in raw_values)
    # dict.fromkeys() removes duplicates while maintaining insertion order
    return list(dict.fromkeys(tag for tag in converted if tag is not None))


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str | LanguageTag) -> Locale:
    """Get a Babel Locale object for a negotiated tag, with caching.

    Extended language, extension and private-use subtags have no CLDR
    counterpart and are ignored (see ``LanguageTag.posix_identifier``).

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: BCP-47 tag string or parsed LanguageTag

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        LanguageTagError: If locale_code is not a well-formed tag
        babel.core.UnknownLocaleError: If CLDR has no data for the locale
        ValueError: If Babel cannot parse the identifier (all-digit variants)

    Example:
        >>> locale = get_babel_locale("pt-BR")
        >>> locale.language, locale.territory
        ('pt', 'BR')
    """
    locale_class = get_locale_class()
    tag = locale_code if isinstance(locale_code, LanguageTag) else LanguageTag.parse(locale_code)
    return locale_class.parse(tag.posix_identifier)


def get_display_name(locale_code: str | LanguageTag, display_locale: str | None = None) -> str:
    """Human-readable name of a locale, for menus and CLI output.

    Args:
        locale_code: Tag to describe
        display_locale: Language to describe it in; defaults to the locale itself

    Returns:
        CLDR display name such as ``"português (Brasil)"``. Falls back to the
        canonical tag when CLDR has no data for either locale or Babel
        cannot represent it.

    Raises:
        BabelImportError: If Babel is not installed
        LanguageTagError: If either argument is not a well-formed tag
    """
    unknown_locale_error = get_unknown_locale_error()
    tag = locale_code if isinstance(locale_code, LanguageTag) else LanguageTag.parse(locale_code)
    display_tag = LanguageTag.parse(display_locale) if display_locale is not None else tag
    try:
        locale = get_babel_locale(tag)
        target = get_babel_locale(display_tag)
    except (unknown_locale_error, ValueError) as e:
        # Babel rejects some well-formed tags, such as all-digit variants (de-12345)
        logger.warning("Unknown locale '%s': %s. Using tag as display name", tag, e)
        return str(tag)

    name = locale.get_display_name(target)
    return name if name else str(tag)


def clear_locale_cache() -> None:
    """Clear the Babel Locale cache."""
    get_babel_locale.cache_clear()
