"""BCP-47 subtag grammar and canonical casing.

This module is the single source of truth for the RFC 5646 ``langtag``
grammar rules, shared by the parser (which classifies subtags of a raw
string) and by ``LanguageTag`` construction (which validates complete field
values).

Subtag Grammar (RFC 5646 section 2.1):
    language   = 2*3ALPHA / 5*8ALPHA          (4ALPHA is reserved)
    extlang    = 3ALPHA *2("-" 3ALPHA)         (only after a 2-3 letter language)
    script     = 4ALPHA
    region     = 2ALPHA / 3DIGIT
    variant    = 5*8alphanum / (DIGIT 3alphanum)
    extension  = singleton 1*("-" (2*8alphanum))   singleton: any alphanum but "x"
    privateuse = "x" 1*("-" (1*8alphanum))

Canonical casing (RFC 5646 section 2.1.1):
    language, extlang, variant, extension, private use: lowercase
    script: titlecase (Hans)
    region: uppercase (BR, 419)

Character classes are spelled out as ASCII ranges. Python's ``str.isalpha()``
accepts any Unicode letter and ``re.IGNORECASE`` folds characters such as
U+212A KELVIN SIGN onto ``k``; neither is acceptable for tag validation.

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from localematch.enums import TagErrorCode, TagField
from localematch.errors import LanguageTagError

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Subtag predicates
    "is_alphanumeric",
    "is_primary_language",
    "is_extended_language",
    "is_script",
    "is_region",
    "is_variant",
    "is_singleton",
    "is_extension_subtag",
    "is_private_use_subtag",
    "PRIVATE_USE_SINGLETON",
    # Field canonicalization
    "canonicalize_primary_language",
    "canonicalize_field",
]

PRIVATE_USE_SINGLETON = "x"

_ALPHANUMERIC: re.Pattern[str] = re.compile(r"[A-Za-z0-9]+")
_PRIMARY_LANGUAGE: re.Pattern[str] = re.compile(r"[A-Za-z]{2,3}|[A-Za-z]{5,8}")
_EXTENDED_LANGUAGE: re.Pattern[str] = re.compile(r"[A-Za-z]{3}")
_SCRIPT: re.Pattern[str] = re.compile(r"[A-Za-z]{4}")
_REGION: re.Pattern[str] = re.compile(r"[A-Za-z]{2}|[0-9]{3}")
_VARIANT: re.Pattern[str] = re.compile(r"[A-Za-z0-9]{5,8}|[0-9][A-Za-z0-9]{3}")
_SINGLETON: re.Pattern[str] = re.compile(r"[A-Wa-wYZyz0-9]")
_EXTENSION_SUBTAG: re.Pattern[str] = re.compile(r"[A-Za-z0-9]{2,8}")
_PRIVATE_USE_SUBTAG: re.Pattern[str] = re.compile(r"[A-Za-z0-9]{1,8}")


# ============================================================================
# SUBTAG PREDICATES
# ============================================================================


def is_alphanumeric(text: str) -> bool:
    """Check that text is non-empty and made of ASCII letters and digits only.

    Example:
        >>> is_alphanumeric("Hans")
        True
        >>> is_alphanumeric("ru_RU")
        False
        >>> is_alphanumeric("")
        False
    """
    return _ALPHANUMERIC.fullmatch(text) is not None


def is_primary_language(subtag: str) -> bool:
    """Check primary language subtag: 2-3 or 5-8 ASCII letters.

    Four-letter codes are reserved by RFC 5646 and rejected.

    Example:
        >>> is_primary_language("en")
        True
        >>> is_primary_language("abcd")
        False
    """
    return _PRIMARY_LANGUAGE.fullmatch(subtag) is not None


def is_extended_language(subtag: str) -> bool:
    """Check a single extended language subtag: exactly 3 ASCII letters."""
    return _EXTENDED_LANGUAGE.fullmatch(subtag) is not None


def is_script(subtag: str) -> bool:
    """Check script subtag: exactly 4 ASCII letters."""
    return _SCRIPT.fullmatch(subtag) is not None


def is_region(subtag: str) -> bool:
    """Check region subtag: 2 ASCII letters or 3 ASCII digits."""
    return _REGION.fullmatch(subtag) is not None


def is_variant(subtag: str) -> bool:
    """Check a single variant subtag: 5-8 alphanumerics, or a digit plus 3.

    Example:
        >>> is_variant("1901")
        True
        >>> is_variant("valencia")
        True
        >>> is_variant("abcd")
        False
    """
    return _VARIANT.fullmatch(subtag) is not None


def is_singleton(subtag: str) -> bool:
    """Check extension singleton: one alphanumeric other than ``x``."""
    return _SINGLETON.fullmatch(subtag) is not None


def is_extension_subtag(subtag: str) -> bool:
    """Check subtag following an extension singleton: 2-8 alphanumerics."""
    return _EXTENSION_SUBTAG.fullmatch(subtag) is not None


def is_private_use_subtag(subtag: str) -> bool:
    """Check subtag following the private-use singleton: 1-8 alphanumerics."""
    return _PRIVATE_USE_SUBTAG.fullmatch(subtag) is not None


# ============================================================================
# FIELD CANONICALIZATION
# ============================================================================


def _invalid(field: str, value: str) -> LanguageTagError:
    return LanguageTagError(
        f"Invalid {field} value: {value!r}",
        code=TagErrorCode.INVALID_FIELD,
        raw=value,
    )


def _split(field: str, value: str) -> list[str]:
    """Split a field value into subtags, rejecting empty pieces."""
    subtags = value.split("-")
    if not all(subtags):
        raise _invalid(field, value)
    return subtags


def canonicalize_primary_language(value: str) -> str:
    """Validate a primary language subtag and return it lowercased.

    Raises:
        LanguageTagError: If value is not a 2-3 or 5-8 letter code
    """
    if not is_primary_language(value):
        raise _invalid("primary_language", value)
    return value.lower()


def _canonicalize_extended_language(value: str) -> str:
    subtags = _split(TagField.EXTENDED_LANGUAGE, value)
    if len(subtags) > 3 or not all(is_extended_language(s) for s in subtags):
        raise _invalid(TagField.EXTENDED_LANGUAGE, value)
    return value.lower()


def _canonicalize_script(value: str) -> str:
    if not is_script(value):
        raise _invalid(TagField.SCRIPT, value)
    return value.title()


def _canonicalize_region(value: str) -> str:
    if not is_region(value):
        raise _invalid(TagField.REGION, value)
    return value.upper()


def _canonicalize_variant(value: str) -> str:
    subtags = [s.lower() for s in _split(TagField.VARIANT, value)]
    if not all(is_variant(s) for s in subtags):
        raise _invalid(TagField.VARIANT, value)
    if len(set(subtags)) != len(subtags):
        msg = f"Duplicate variant subtag in {value!r}"
        raise LanguageTagError(msg, code=TagErrorCode.DUPLICATE_VARIANT, raw=value)
    return "-".join(subtags)


def _canonicalize_extension(value: str) -> str:
    """Validate extension sequences and order them by singleton.

    RFC 5646 section 4.5 canonical form sorts extension sequences by their
    singleton; subtags inside a sequence keep their order.
    """
    subtags = [s.lower() for s in _split(TagField.EXTENSION, value)]
    if not is_singleton(subtags[0]):
        raise _invalid(TagField.EXTENSION, value)

    sequences: dict[str, list[str]] = {}
    current: list[str] = []
    for subtag in subtags:
        if len(subtag) == 1:
            if not is_singleton(subtag):
                raise _invalid(TagField.EXTENSION, value)
            if subtag in sequences:
                msg = f"Duplicate extension singleton {subtag!r} in {value!r}"
                raise LanguageTagError(msg, code=TagErrorCode.DUPLICATE_SINGLETON, raw=value)
            current = sequences[subtag] = []
        elif is_extension_subtag(subtag):
            current.append(subtag)
        else:
            raise _invalid(TagField.EXTENSION, value)

    for singleton, body in sequences.items():
        if not body:
            msg = f"Extension singleton {singleton!r} is not followed by a subtag"
            raise LanguageTagError(msg, code=TagErrorCode.INCOMPLETE_EXTENSION, raw=value)

    return "-".join(
        "-".join([singleton, *sequences[singleton]]) for singleton in sorted(sequences)
    )


def _canonicalize_private_use(value: str) -> str:
    subtags = _split(TagField.PRIVATE_USE, value)
    if not all(is_private_use_subtag(s) for s in subtags):
        raise _invalid(TagField.PRIVATE_USE, value)
    return value.lower()


_FIELD_CANONICALIZERS: dict[TagField, Callable[[str], str]] = {
    TagField.EXTENDED_LANGUAGE: _canonicalize_extended_language,
    TagField.SCRIPT: _canonicalize_script,
    TagField.REGION: _canonicalize_region,
    TagField.VARIANT: _canonicalize_variant,
    TagField.EXTENSION: _canonicalize_extension,
    TagField.PRIVATE_USE: _canonicalize_private_use,
}


def canonicalize_field(field: TagField, value: str) -> str:
    """Validate a complete optional field value and return its canonical form.

    Multi-subtag fields (extended language, variant, extension, private use)
    take their subtags joined with ``-``. Private use is given without the
    leading ``x`` singleton.

    Args:
        field: Which optional field the value belongs to
        value: Field value in any casing

    Returns:
        Canonically cased (and, for extensions, canonically ordered) value

    Raises:
        LanguageTagError: If the value violates the field grammar

    Example:
        >>> canonicalize_field(TagField.SCRIPT, "hANS")
        'Hans'
        >>> canonicalize_field(TagField.REGION, "br")
        'BR'
        >>> canonicalize_field(TagField.EXTENSION, "u-ca-buddhist-a-foo")
        'a-foo-u-ca-buddhist'
    """
    return _FIELD_CANONICALIZERS[field](value)
