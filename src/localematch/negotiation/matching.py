"""Candidate filtering, scoring and selection for one user tag.

Scoring model:
    Every optional field carries a fixed weight (FIELD_WEIGHTS):

        extended_language 32, script 16, region 8,
        variant 4, extension 2, private_use 1

    A field adds its weight only when BOTH tags define it with equal canonical
    values. A field left undefined on either side adds nothing: an available
    tag that is merely less specific than the request is neither rewarded nor
    penalized on that field. Scores range over 0..MAX_SCORE (63).

    Powers of two make the ranking lexicographic over fields: one match on a
    more significant field beats every combination of less significant ones.

Selection:
    Highest score wins. Ties go to the candidate listed earliest in the
    available locale list (the supporting program's own preference order).

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable

from localematch.constants import FIELD_WEIGHTS
from localematch.enums import TagField
from localematch.negotiation.types import Candidate, ScoredCandidate
from localematch.tags.tag import LanguageTag

__all__ = [
    "field_score",
    "filter_candidates",
    "score_candidates",
    "score_match",
    "select_best",
]


def filter_candidates(user_tag: LanguageTag, available: Iterable[Candidate]) -> list[Candidate]:
    """Keep the available tags sharing the user tag's primary language.

    Args:
        user_tag: Parsed user locale
        available: (index, tag) pairs in available-list order

    Returns:
        Matching pairs in their original relative order. Empty when the user
        locale has no candidate.
    """
    language = user_tag.primary_language
    return [(index, tag) for index, tag in available if tag.primary_language == language]


def field_score(first: LanguageTag, second: LanguageTag, tag_field: TagField) -> int:
    """Weight contributed by one field; symmetric in its two tag arguments.

    Example:
        >>> field_score(LanguageTag("sr", script="Latn"), LanguageTag("sr", script="latn"),
        ...             TagField.SCRIPT)
        16
        >>> field_score(LanguageTag("sr"), LanguageTag("sr", script="Latn"), TagField.SCRIPT)
        0
    """
    value = first.get(tag_field)
    if value is not None and value == second.get(tag_field):
        return FIELD_WEIGHTS[tag_field]
    return 0


def score_match(candidate: LanguageTag, user_tag: LanguageTag) -> int:
    """Affinity between a candidate and a user tag sharing its primary language.

    Example:
        >>> score_match(LanguageTag.parse("zh-cmn-Hans"), LanguageTag.parse("zh-Hans"))
        16
        >>> score_match(LanguageTag.parse("pt-BR"), LanguageTag.parse("pt"))
        0
    """
    return sum(field_score(candidate, user_tag, tag_field) for tag_field in TagField)


def score_candidates(
    user_tag: LanguageTag, candidates: Iterable[Candidate]
) -> list[ScoredCandidate]:
    """Score each (index, tag) candidate against the user tag."""
    return [(score_match(tag, user_tag), index, tag) for index, tag in candidates]


def select_best(scored: Iterable[ScoredCandidate]) -> LanguageTag | None:
    """Pick the highest-scoring candidate, earliest index winning ties.

    Returns:
        Winning tag, or None when there are no candidates
    """
    best: ScoredCandidate | None = None
    for entry in scored:
        score, index, _ = entry
        if best is None or score > best[0] or (score == best[0] and index < best[1]):
            best = entry
    return best[2] if best is not None else None
