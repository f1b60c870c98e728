"""Hypothesis strategies for localematch property-based testing.

Strategies are organized by domain:

- tags: BCP-47 tag components, canonical and raw tag strings, malformed
  strings, and locale lists for negotiation

Usage:
    from tests.strategies import raw_tags, locale_lists
    from tests.strategies.tags import tag_components, canonical_string
"""

from .tags import (
    MALFORMED_TAGS,
    canonical_string,
    canonical_tags,
    extensions,
    locale_lists,
    malformed_tags,
    primary_languages,
    raw_tags,
    regions,
    scripts,
    tag_components,
    variant_subtags,
)

__all__ = [
    "MALFORMED_TAGS",
    "canonical_string",
    "canonical_tags",
    "extensions",
    "locale_lists",
    "malformed_tags",
    "primary_languages",
    "raw_tags",
    "regions",
    "scripts",
    "tag_components",
    "variant_subtags",
]
