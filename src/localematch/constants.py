"""Shared constants for localematch.

This module provides centralized configuration constants used across
the tags, negotiation and configuration packages. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Fallback: Default locale applied by caller-side helpers
- Input limits: DoS prevention via size constraints
- Cache limits: Memory bounds for caching subsystems
- Scoring: Field weights used by the match scorer

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

from localematch.enums import TagField

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Fallback
    "DEFAULT_LOCALE",
    # Input limits
    "MAX_TAG_LENGTH",
    "MAX_SUBTAG_LENGTH",
    # Cache limits
    "MAX_TAG_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    # Scoring
    "FIELD_WEIGHTS",
    "MAX_SCORE",
    # Configuration
    "CONFIG_TABLE",
    "TRANSLATION_SUFFIXES",
    "MAX_DISCOVERED_LANGUAGE_LENGTH",
]

# ============================================================================
# FALLBACK
# ============================================================================

# Locale used by negotiate_locale() when no user locale matches.
# Plain "en" avoids committing to any region, script or variant.
DEFAULT_LOCALE: str = "en"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum raw tag length accepted by the parser.
# Real tags rarely exceed 35 characters; anything near this bound is junk.
MAX_TAG_LENGTH: int = 256

# BCP-47 subtags are 1 to 8 characters long.
MAX_SUBTAG_LENGTH: int = 8

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum memoized parse results. Negotiation inputs are small, repeated
# lists of tags, so a few hundred entries cover any realistic process.
MAX_TAG_CACHE_SIZE: int = 512

# Maximum cached Babel Locale instances.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# SCORING
# ============================================================================

# Weight of each optional field when both tags define it with equal values.
# Powers of two in order of decreasing significance: a match on a more
# significant field always outranks any combination of less significant ones.
FIELD_WEIGHTS: MappingProxyType[TagField, int] = MappingProxyType(
    {
        TagField.EXTENDED_LANGUAGE: 32,
        TagField.SCRIPT: 16,
        TagField.REGION: 8,
        TagField.VARIANT: 4,
        TagField.EXTENSION: 2,
        TagField.PRIVATE_USE: 1,
    }
)

MAX_SCORE: int = sum(FIELD_WEIGHTS.values())

# ============================================================================
# CONFIGURATION
# ============================================================================

# pyproject.toml table holding locale metadata: [tool.localematch]
CONFIG_TABLE: str = "localematch"

# File suffixes counted as translation resources when discovering locales
# from a directory (i18n/en.yml, locales/ru.ftl). Sub-directories always count.
TRANSLATION_SUFFIXES: frozenset[str] = frozenset(
    {".ftl", ".json", ".mo", ".po", ".toml", ".yaml", ".yml"}
)

# Longest primary language accepted from a file or directory name. ISO 639
# codes are 2-3 letters; longer registered languages read like ordinary words
# (messages.po, backup/) and are not treated as locales during discovery.
MAX_DISCOVERED_LANGUAGE_LENGTH: int = 3
