"""Locale resolution across a priority-ordered user locale list.

Resolution walks the user locales in priority order:

    START
      -> TRY_NEXT_USER_LOCALE
           PARSE_FAIL        -> TRY_NEXT_USER_LOCALE
           PARSE_OK          -> FILTER_AND_SCORE
                                  MATCH_FOUND -> return selected tag (terminal)
                                  NO_MATCH    -> TRY_NEXT_USER_LOCALE
      -> user locales exhausted -> no match (terminal)

Only the first user locale with at least one candidate is consulted; a lower
priority user locale is never used once a higher one matched, even if it
would score higher against some candidate.

Malformed tags in either list are skipped without logging: inserting a
malformed string anywhere never changes the result compared to removing it.
Empty lists are valid input and simply produce no match.

Design:
    The resolver returns a value and retains nothing. Callers thread the
    resolved locale into their message lookups explicitly; there is no
    process-wide "current locale".

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from localematch.constants import DEFAULT_LOCALE
from localematch.locale_utils import get_system_locales
from localematch.negotiation.matching import filter_candidates, score_candidates, select_best
from localematch.negotiation.types import Candidate, LocaleCode
from localematch.tags.parser import parse_tag
from localematch.tags.tag import LanguageTag

__all__ = [
    "best_matching_locale",
    "negotiate_locale",
    "resolve",
    "resolve_tag",
]

logger = logging.getLogger(__name__)


def _parse_available(available: Iterable[LocaleCode]) -> list[Candidate]:
    """Parse available locales, keeping original indices of valid entries."""
    candidates: list[Candidate] = []
    for index, raw in enumerate(available):
        tag, _ = parse_tag(raw)
        if tag is not None:
            candidates.append((index, tag))
    return candidates


def resolve_tag(
    available: Iterable[LocaleCode], user: Iterable[LocaleCode]
) -> LanguageTag | None:
    """Select the best available tag for the highest-priority matching user locale.

    Args:
        available: Supported locales, earlier entries preferred on ties
        user: Requested locales, earlier entries preferred

    Returns:
        Selected available tag, or None if no user locale shares a primary
        language with any available locale
    """
    candidates = _parse_available(available)
    if not candidates:
        return None

    for raw in user:
        user_tag, _ = parse_tag(raw)
        if user_tag is None:
            continue
        matching = filter_candidates(user_tag, candidates)
        if not matching:
            continue
        return select_best(score_candidates(user_tag, matching))

    return None


def resolve(available: Iterable[LocaleCode], user: Iterable[LocaleCode]) -> str | None:
    """Negotiate the best supported locale for a user's preferences.

    Args:
        available: Supported locales in the program's preference order
        user: The user's locales in priority order

    Returns:
        Canonical form of the chosen available locale, or None

    Example:
        >>> resolve(["en-US", "ru-RU"], ["ru", "en"])
        'ru-RU'
        >>> resolve(["en", "pt-BR", "pt-PT", "es"], ["pt", "en"])
        'pt-BR'
        >>> resolve([], ["en"]) is None
        True
    """
    tag = resolve_tag(available, user)
    return str(tag) if tag is not None else None


best_matching_locale = resolve


def negotiate_locale(
    available: Iterable[LocaleCode],
    user: Iterable[LocaleCode] | None = None,
    *,
    default: LocaleCode = DEFAULT_LOCALE,
) -> LocaleCode:
    """Negotiate a locale, falling back to a default when nothing matches.

    This is the caller-side contract around ``resolve``: the result is always
    usable as a key into a translation table.

    Args:
        available: Supported locales in the program's preference order
        user: The user's locales in priority order. None detects them from
            the environment with ``get_system_locales()``.
        default: Locale returned when no user locale matches (not validated;
            returned as given)

    Returns:
        Canonical form of the chosen available locale, or ``default``

    Example:
        >>> negotiate_locale(["en", "ru"], ["de-DE"])
        'en'
        >>> negotiate_locale(["en", "ru"], ["ru-UA", "en"])
        'ru'
    """
    if user is None:
        user = get_system_locales()
        logger.debug("Detected system locales: %s", user)

    user_list = list(user)
    resolved = resolve(available, user_list)
    if resolved is None:
        logger.debug("No locale matched %s; using default %s", user_list, default)
        return default

    logger.debug("Negotiated locale %s for %s", resolved, user_list)
    return resolved
