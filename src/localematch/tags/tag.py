"""Structured BCP-47 language tag value type.

A LanguageTag is either fully valid or never constructed: construction
validates every field against the subtag grammar and stores canonical casing,
so two tags describing the same locale compare equal regardless of how the
input was cased.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from localematch.enums import TagErrorCode, TagField
from localematch.errors import LanguageTagError
from localematch.tags.grammar import (
    PRIVATE_USE_SINGLETON,
    canonicalize_field,
    canonicalize_primary_language,
)

__all__ = ["LanguageTag"]


@dataclass(frozen=True, slots=True)
class LanguageTag:
    """Immutable decomposition of a BCP-47 language tag.

    Multi-subtag fields hold their subtags joined with ``-``. ``private_use``
    is stored without its leading ``x`` singleton. Undefined fields are None.

    Example:
        >>> tag = LanguageTag("zh", extended_language="CMN", script="hans")
        >>> str(tag)
        'zh-cmn-Hans'
        >>> tag.script
        'Hans'
        >>> LanguageTag.parse("pt-br") == LanguageTag("pt", region="BR")
        True

    Attributes:
        primary_language: Required base language (``en``, ``zh``)
        extended_language: Extended language subtags (``cmn``)
        script: Writing system (``Hans``)
        region: Country or area (``BR``, ``419``)
        variant: Variant subtags (``1901``, ``valencia``)
        extension: Extension sequences (``u-ca-buddhist``)
        private_use: Private-use subtags without ``x-`` (``pirate``)
    """

    primary_language: str
    extended_language: str | None = None
    script: str | None = None
    region: str | None = None
    variant: str | None = None
    extension: str | None = None
    private_use: str | None = None

    def __post_init__(self) -> None:
        """Validate all fields and store their canonical forms.

        Raises:
            LanguageTagError: If any field violates the tag grammar, or an
                extended language follows a 5-8 letter primary language
        """
        if not isinstance(self.primary_language, str):
            msg = f"primary_language must be str, got {type(self.primary_language).__name__}"
            raise LanguageTagError(msg, code=TagErrorCode.INVALID_FIELD)
        object.__setattr__(
            self, "primary_language", canonicalize_primary_language(self.primary_language)
        )

        for tag_field in TagField:
            value = getattr(self, tag_field)
            if value is None:
                continue
            if not isinstance(value, str):
                msg = f"{tag_field} must be str or None, got {type(value).__name__}"
                raise LanguageTagError(msg, code=TagErrorCode.INVALID_FIELD)
            object.__setattr__(self, tag_field, canonicalize_field(tag_field, value))

        if self.extended_language is not None and len(self.primary_language) > 3:
            msg = (
                f"Extended language {self.extended_language!r} requires a 2-3 letter "
                f"primary language, got {self.primary_language!r}"
            )
            raise LanguageTagError(
                msg, code=TagErrorCode.INVALID_FIELD, raw=self.extended_language
            )

    @classmethod
    def parse(cls, raw: str) -> LanguageTag:
        """Parse a raw tag string, raising on malformed input.

        Strict counterpart of ``parse_tag``.

        Args:
            raw: Hyphen-delimited tag such as ``"zh-Hant-TW"``

        Returns:
            Parsed tag

        Raises:
            LanguageTagError: If raw is not a well-formed tag
        """
        # Lazy import: the parser module constructs LanguageTag instances
        from localematch.tags.parser import parse_tag  # noqa: PLC0415

        tag, error = parse_tag(raw)
        if error is not None:
            # parse_tag results are cached; raise a fresh instance
            raise LanguageTagError(str(error), code=error.code, raw=error.raw)
        assert tag is not None
        return tag

    def get(self, tag_field: TagField) -> str | None:
        """Return the canonical value of an optional field, or None."""
        value: str | None = getattr(self, tag_field)
        return value

    @property
    def defined_fields(self) -> frozenset[TagField]:
        """Optional fields this tag defines."""
        return frozenset(f for f in TagField if getattr(self, f) is not None)

    @property
    def posix_identifier(self) -> str:
        """POSIX/Babel style identifier: ``language[_Script][_REGION][_VARIANT]``.

        Extended language, extension and private-use subtags have no POSIX
        counterpart and are dropped. Only the first variant is kept.

        Example:
            >>> LanguageTag.parse("zh-Hant-TW").posix_identifier
            'zh_Hant_TW'
        """
        parts = [self.primary_language]
        if self.script is not None:
            parts.append(self.script)
        if self.region is not None:
            parts.append(self.region)
        if self.variant is not None:
            parts.append(self.variant.split("-")[0].upper())
        return "_".join(parts)

    def __str__(self) -> str:
        """Canonical serialization of the tag."""
        parts = [self.primary_language]
        parts.extend(
            value
            for value in (
                self.extended_language,
                self.script,
                self.region,
                self.variant,
                self.extension,
            )
            if value is not None
        )
        if self.private_use is not None:
            parts.extend((PRIVATE_USE_SINGLETON, self.private_use))
        return "-".join(parts)

