"""localematch - BCP-47 locale negotiation.

Selects the single best supported locale for a user's priority-ordered
locale preferences by comparing BCP-47 tag structure: primary language
first, then weighted overlap of extended language, script, region, variant,
extension and private-use subtags.

Public API:
    resolve - Best supported locale (canonical string) or None
    resolve_tag - Same resolution, returning the parsed LanguageTag
    negotiate_locale - resolve() with a default locale applied on no match
    LanguageTag - Immutable parsed tag with canonical casing
    parse_tag - Validated construction returning (tag, error)
    LocaleConfig - Supported locales from pyproject.toml or a directory
    get_system_locales - User locales from the environment, in priority order

Exceptions:
    LocaleMatchError - Base exception class
    LanguageTagError - Malformed tag (strict parsing and construction only)
    ConfigError - Invalid or missing locale configuration

Submodules:
    localematch.tags - Tag grammar, LanguageTag, parser
    localematch.negotiation - Filter, scorer, selector, resolver
    localematch.locale_utils - POSIX conversion, system locales, Babel bridge
    localematch.config - LocaleConfig and translation directory discovery
"""

from .config import LocaleConfig, discover_locales
from .constants import DEFAULT_LOCALE
from .enums import TagErrorCode, TagField
from .errors import ConfigError, LanguageTagError, LocaleMatchError
from .locale_utils import get_system_locales, posix_to_bcp47
from .negotiation import best_matching_locale, negotiate_locale, resolve, resolve_tag
from .tags import LanguageTag, is_valid_tag, parse_tag

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localematch")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_LOCALE",
    "ConfigError",
    "LanguageTag",
    "LanguageTagError",
    "LocaleConfig",
    "LocaleMatchError",
    "TagErrorCode",
    "TagField",
    "__version__",
    "best_matching_locale",
    "discover_locales",
    "get_system_locales",
    "is_valid_tag",
    "negotiate_locale",
    "parse_tag",
    "posix_to_bcp47",
    "resolve",
    "resolve_tag",
]
