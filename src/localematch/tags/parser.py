"""Validated construction of LanguageTag values from raw strings.

Parses the RFC 5646 ``langtag`` production:

    language ["-" extlang] ["-" script] ["-" region] *("-" variant)
    *("-" extension) ["-" privateuse]

Subtags are consumed left to right, each slot at most once and in order; a
subtag that fits no remaining slot makes the whole tag malformed. Irregular
grandfathered tags (``i-klingon``) and private-use-only tags (``x-whatever``)
have no valid primary language and are rejected.

Malformed input is a filtering signal, not an exceptional condition:
``parse_tag`` returns the error instead of raising it. Use
``LanguageTag.parse`` for strict parsing.

Results are memoized: negotiation runs repeatedly over the same short lists
of tags, and both LanguageTag values and returned errors are never mutated.

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Callable
from typing import TypeAlias

from localematch.constants import MAX_SUBTAG_LENGTH, MAX_TAG_CACHE_SIZE, MAX_TAG_LENGTH
from localematch.enums import TagErrorCode
from localematch.errors import LanguageTagError
from localematch.tags.grammar import (
    PRIVATE_USE_SINGLETON,
    is_extended_language,
    is_extension_subtag,
    is_primary_language,
    is_private_use_subtag,
    is_region,
    is_script,
    is_singleton,
    is_variant,
)
from localematch.tags.tag import LanguageTag

__all__ = [
    "clear_tag_cache",
    "is_valid_tag",
    "parse_tag",
]

ParseResult: TypeAlias = tuple[LanguageTag | None, LanguageTagError | None]
"""Exactly one side is None: (tag, None) on success, (None, error) on failure."""

_TAG_CHARACTERS: re.Pattern[str] = re.compile(r"[A-Za-z0-9-]+")


class _SubtagCursor:
    """Left-to-right position over the subtags of one tag."""

    __slots__ = ("_pos", "_subtags")

    def __init__(self, subtags: list[str]) -> None:
        self._subtags = subtags
        self._pos = 0

    def peek(self) -> str | None:
        if self._pos < len(self._subtags):
            return self._subtags[self._pos]
        return None

    def advance(self) -> str:
        subtag = self._subtags[self._pos]
        self._pos += 1
        return subtag

    def take_while(self, predicate: Callable[[str], bool], limit: int | None = None) -> list[str]:
        """Consume consecutive subtags accepted by predicate (at most limit)."""
        taken: list[str] = []
        while (subtag := self.peek()) is not None and predicate(subtag):
            if limit is not None and len(taken) >= limit:
                break
            taken.append(self.advance())
        return taken


def _error(raw: str, code: TagErrorCode, detail: str) -> LanguageTagError:
    return LanguageTagError(f"Invalid language tag {raw!r}: {detail}", code=code, raw=raw)


def _split_subtags(raw: str) -> list[str]:
    """Check character-level structure and split on hyphens."""
    if not raw:
        raise _error(raw, TagErrorCode.EMPTY_TAG, "tag is empty")
    if len(raw) > MAX_TAG_LENGTH:
        raise _error(raw, TagErrorCode.TAG_TOO_LONG, f"longer than {MAX_TAG_LENGTH} characters")
    if _TAG_CHARACTERS.fullmatch(raw) is None:
        raise _error(
            raw,
            TagErrorCode.INVALID_CHARACTER,
            "only ASCII letters, digits and '-' are allowed",
        )

    subtags = raw.split("-")
    for subtag in subtags:
        if not subtag:
            raise _error(raw, TagErrorCode.EMPTY_SUBTAG, "empty subtag between hyphens")
        if len(subtag) > MAX_SUBTAG_LENGTH:
            raise _error(
                raw,
                TagErrorCode.SUBTAG_TOO_LONG,
                f"subtag {subtag!r} exceeds {MAX_SUBTAG_LENGTH} characters",
            )
    return subtags


def _parse_extensions(raw: str, cursor: _SubtagCursor) -> str | None:
    sequences: list[str] = []
    seen: set[str] = set()
    while (subtag := cursor.peek()) is not None and is_singleton(subtag):
        singleton = cursor.advance().lower()
        if singleton in seen:
            raise _error(
                raw,
                TagErrorCode.DUPLICATE_SINGLETON,
                f"extension singleton {singleton!r} appears twice",
            )
        seen.add(singleton)
        body = cursor.take_while(is_extension_subtag)
        if not body:
            raise _error(
                raw,
                TagErrorCode.INCOMPLETE_EXTENSION,
                f"singleton {singleton!r} must be followed by a 2-8 character subtag",
            )
        sequences.append("-".join([singleton, *body]))
    return "-".join(sequences) if sequences else None


def _parse_private_use(raw: str, cursor: _SubtagCursor) -> str | None:
    subtag = cursor.peek()
    if subtag is None or subtag.lower() != PRIVATE_USE_SINGLETON:
        return None
    cursor.advance()
    body = cursor.take_while(is_private_use_subtag)
    if not body:
        raise _error(
            raw,
            TagErrorCode.INCOMPLETE_EXTENSION,
            "private-use singleton 'x' must be followed by a subtag",
        )
    return "-".join(body)


def _parse(raw: str) -> LanguageTag:
    cursor = _SubtagCursor(_split_subtags(raw))

    primary = cursor.advance()
    if not is_primary_language(primary):
        raise _error(
            raw,
            TagErrorCode.INVALID_PRIMARY_LANGUAGE,
            f"{primary!r} is not a 2-3 or 5-8 letter language code",
        )

    # Extended language subtags only refine 2-3 letter language codes
    extended = cursor.take_while(is_extended_language, limit=3) if len(primary) <= 3 else []
    script = cursor.take_while(is_script, limit=1)
    region = cursor.take_while(is_region, limit=1)

    variants = cursor.take_while(is_variant)
    folded = [v.lower() for v in variants]
    if len(set(folded)) != len(folded):
        raise _error(raw, TagErrorCode.DUPLICATE_VARIANT, "variant subtag appears twice")

    extension = _parse_extensions(raw, cursor)
    private_use = _parse_private_use(raw, cursor)

    if (leftover := cursor.peek()) is not None:
        raise _error(
            raw,
            TagErrorCode.UNEXPECTED_SUBTAG,
            f"subtag {leftover!r} is out of place or fits no subtag category",
        )

    return LanguageTag(
        primary,
        extended_language="-".join(extended) or None,
        script=script[0] if script else None,
        region=region[0] if region else None,
        variant="-".join(variants) or None,
        extension=extension,
        private_use=private_use,
    )


@functools.lru_cache(maxsize=MAX_TAG_CACHE_SIZE)
def parse_tag(raw: str) -> ParseResult:
    """Parse a raw locale string into a LanguageTag.

    Never raises for string input. Exactly one element of the returned pair
    is None.

    Thread-safe via lru_cache internal locking.

    Args:
        raw: Hyphen-delimited BCP-47 tag (``"zh-Hant-TW"``)

    Returns:
        ``(tag, None)`` on success, ``(None, error)`` on failure

    Example:
        >>> tag, error = parse_tag("EN-us")
        >>> str(tag), error
        ('en-US', None)
        >>> tag, error = parse_tag("ru--")
        >>> tag is None, error.code
        (True, <TagErrorCode.EMPTY_SUBTAG: 'empty-subtag'>)
    """
    if not isinstance(raw, str):
        return None, LanguageTagError(
            f"Language tag must be str, got {type(raw).__name__}",
            code=TagErrorCode.INVALID_CHARACTER,
        )
    try:
        return _parse(raw), None
    except LanguageTagError as error:
        return None, error


def is_valid_tag(raw: str) -> bool:
    """Check whether raw is a well-formed language tag.

    Example:
        >>> is_valid_tag("sr-Latn-RS")
        True
        >>> is_valid_tag("en_US")
        False
    """
    tag, _ = parse_tag(raw)
    return tag is not None


def clear_tag_cache() -> None:
    """Clear the memoized parse results."""
    parse_tag.cache_clear()
