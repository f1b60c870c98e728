"""BCP-47 language tag parsing and canonicalization.

Submodules:
    grammar - Subtag predicates and per-field canonical casing
    tag     - LanguageTag immutable value type
    parser  - parse_tag validated construction (returns errors, never raises)

Python 3.13+. Zero external dependencies.
"""

from localematch.tags.grammar import canonicalize_field
from localematch.tags.parser import clear_tag_cache, is_valid_tag, parse_tag
from localematch.tags.tag import LanguageTag

__all__ = [
    "LanguageTag",
    "canonicalize_field",
    "clear_tag_cache",
    "is_valid_tag",
    "parse_tag",
]
