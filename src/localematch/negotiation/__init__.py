"""Locale negotiation: pick the best supported locale for a user.

Submodules:
    types    - PEP 695 type aliases (LocaleCode, Candidate, ScoredCandidate)
    matching - Candidate filter, match scorer, best-candidate selector
    resolver - resolve / negotiate_locale across the user's priority list

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localematch.negotiation.matching import (
    field_score,
    filter_candidates,
    score_candidates,
    score_match,
    select_best,
)
from localematch.negotiation.resolver import (
    best_matching_locale,
    negotiate_locale,
    resolve,
    resolve_tag,
)
from localematch.negotiation.types import Candidate, LocaleCode, ScoredCandidate

__all__ = [
    # Resolution
    "resolve",
    "resolve_tag",
    "best_matching_locale",
    "negotiate_locale",
    # Building blocks
    "filter_candidates",
    "field_score",
    "score_match",
    "score_candidates",
    "select_best",
    # Type aliases for user code type annotations
    "Candidate",
    "LocaleCode",
    "ScoredCandidate",
]
