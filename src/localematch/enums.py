"""Enumerations for localematch type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TagField(StrEnum):
    """Optional field of a parsed language tag.

    Values are the LanguageTag attribute names, so ``getattr(tag, field)``
    reads the field. Members are declared in tag order, which is also the
    order of decreasing match significance.
    """

    EXTENDED_LANGUAGE = "extended_language"
    """Extended language subtags: zh-[cmn]-Hans"""

    SCRIPT = "script"
    """Writing system: sr-[Latn]"""

    REGION = "region"
    """Country or area: pt-[BR], es-[419]"""

    VARIANT = "variant"
    """Orthography or dialect variant: de-DE-[1901]"""

    EXTENSION = "extension"
    """Extension sequences: en-[u-ca-buddhist]"""

    PRIVATE_USE = "private_use"
    """Private-use sequence: en-x-[pirate]"""


class TagErrorCode(StrEnum):
    """Reason a raw string or field value is not a valid language tag.

    StrEnum provides automatic string conversion: str(TagErrorCode.EMPTY_TAG) == "empty-tag"
    """

    EMPTY_TAG = "empty-tag"
    TAG_TOO_LONG = "tag-too-long"
    INVALID_CHARACTER = "invalid-character"
    EMPTY_SUBTAG = "empty-subtag"
    SUBTAG_TOO_LONG = "subtag-too-long"
    INVALID_PRIMARY_LANGUAGE = "invalid-primary-language"
    UNEXPECTED_SUBTAG = "unexpected-subtag"
    DUPLICATE_VARIANT = "duplicate-variant"
    DUPLICATE_SINGLETON = "duplicate-singleton"
    INCOMPLETE_EXTENSION = "incomplete-extension"
    INVALID_FIELD = "invalid-field"


__all__ = [
    "TagErrorCode",
    "TagField",
]
