"""Property-based tests for locale resolution.

Properties:
- Determinism: equal inputs give equal results
- Membership: a result is the canonical form of some available entry
- Priority: the result shares its primary language with the first user
  locale that has any candidate
- Tie-break: among equally scored candidates the earliest listed wins
- Malformed exclusion: inserting a malformed string anywhere never changes
  the result

Python 3.13+.
"""

from hypothesis import assume, event, given
from hypothesis import strategies as st

from localematch.negotiation import resolve, resolve_tag, score_match
from localematch.tags import LanguageTag, parse_tag
from tests.strategies import locale_lists, malformed_tags, primary_languages


def _valid(codes: list[str]) -> list[LanguageTag]:
    return [tag for code in codes if (tag := parse_tag(code)[0]) is not None]


class TestResolveProperties:
    """Resolution invariants over generated locale lists."""

    @given(available=locale_lists(), user=locale_lists())
    def test_deterministic(self, available: list[str], user: list[str]) -> None:
        assert resolve(available, user) == resolve(list(available), list(user))

    @given(available=locale_lists(), user=locale_lists())
    def test_result_is_an_available_locale(self, available: list[str], user: list[str]) -> None:
        result = resolve(available, user)
        event(f"matched={result is not None}")
        if result is not None:
            assert result in {str(tag) for tag in _valid(available)}

    @given(available=locale_lists(), user=locale_lists())
    def test_first_user_locale_with_candidates_decides(
        self, available: list[str], user: list[str]
    ) -> None:
        languages = {tag.primary_language for tag in _valid(available)}
        deciding = next(
            (tag for tag in _valid(user) if tag.primary_language in languages), None
        )
        result = resolve_tag(available, user)
        if deciding is None:
            assert result is None
        else:
            assert result is not None
            assert result.primary_language == deciding.primary_language

    @given(available=locale_lists(), user=locale_lists())
    def test_result_has_maximal_score(self, available: list[str], user: list[str]) -> None:
        result = resolve_tag(available, user)
        assume(result is not None)
        assert result is not None
        languages = {tag.primary_language for tag in _valid(available)}
        user_tag = next(tag for tag in _valid(user) if tag.primary_language in languages)
        candidates = [
            tag for tag in _valid(available) if tag.primary_language == user_tag.primary_language
        ]
        best = max(score_match(tag, user_tag) for tag in candidates)
        assert score_match(result, user_tag) == best
        # Earliest candidate with the best score
        assert result == next(tag for tag in candidates if score_match(tag, user_tag) == best)

    @given(language=primary_languages(), regions=st.lists(st.sampled_from(["US", "GB", "BR"])))
    def test_language_only_request_picks_first_candidate(
        self, language: str, regions: list[str]
    ) -> None:
        available = [f"{language}-{region}" for region in regions]
        expected = str(LanguageTag.parse(available[0])) if available else None
        assert resolve(available, [language]) == expected


class TestMalformedExclusion:
    """Malformed strings never influence the result."""

    @given(
        available=locale_lists(),
        user=locale_lists(),
        junk=malformed_tags(),
        position=st.integers(min_value=0, max_value=10),
    )
    def test_insert_into_available(
        self, available: list[str], user: list[str], junk: str, position: int
    ) -> None:
        polluted = list(available)
        polluted.insert(position, junk)
        assert resolve(polluted, user) == resolve(available, user)

    @given(
        available=locale_lists(),
        user=locale_lists(),
        junk=malformed_tags(),
        position=st.integers(min_value=0, max_value=10),
    )
    def test_insert_into_user(
        self, available: list[str], user: list[str], junk: str, position: int
    ) -> None:
        polluted = list(user)
        polluted.insert(position, junk)
        assert resolve(available, polluted) == resolve(available, user)
