"""localematch exception hierarchy.

Negotiation itself never raises on string input: malformed tags are filtered
out. These exceptions surface only at the outer edges of the library, where a
caller explicitly asks for strict behavior (``LanguageTag.parse``, direct
``LanguageTag`` construction, ``LocaleConfig`` loading).

Python 3.13+. Zero external dependencies.
"""

from localematch.enums import TagErrorCode

__all__ = [
    "ConfigError",
    "LanguageTagError",
    "LocaleMatchError",
]


class LocaleMatchError(Exception):
    """Base exception for all localematch errors."""


class LanguageTagError(LocaleMatchError, ValueError):
    """String or field value does not satisfy the BCP-47 tag grammar.

    Subclasses ValueError so callers validating user input can catch the
    generic exception type.

    Attributes:
        code: Machine-readable failure reason
        raw: The offending input (whole tag or single field value)

    Example:
        >>> tag, error = parse_tag("ru--")
        >>> error.code
        <TagErrorCode.EMPTY_SUBTAG: 'empty-subtag'>
    """

    def __init__(self, message: str, *, code: TagErrorCode, raw: str = "") -> None:
        """Initialize LanguageTagError.

        Args:
            message: Human-readable description
            code: Failure reason
            raw: The offending input
        """
        super().__init__(message)
        self.code = code
        self.raw = raw


class ConfigError(LocaleMatchError):
    """Locale configuration cannot be loaded or is invalid."""
