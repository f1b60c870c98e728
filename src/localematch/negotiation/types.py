"""Type aliases for the negotiation domain.

Provides semantic type aliases used throughout the negotiation package
and by user code when annotating negotiation call sites.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

from localematch.tags.tag import LanguageTag

__all__ = [
    "Candidate",
    "LocaleCode",
    "ScoredCandidate",
]

LocaleCode: TypeAlias = str
"""Raw BCP-47 locale string (e.g., 'en', 'pt-BR', 'zh-Hans-CN')."""

Candidate: TypeAlias = tuple[int, LanguageTag]
"""Available tag paired with its index in the available locale list."""

ScoredCandidate: TypeAlias = tuple[int, int, LanguageTag]
"""(score, index in the available locale list, tag)."""
