"""Property-based tests for tag parsing and canonical serialization.

Properties:
- Any casing of a well-formed tag parses to its canonical form
- Serialization is idempotent: parse(str(tag)) == tag
- Malformed strings are always reported, never raised

Python 3.13+.
"""

from hypothesis import event, given
from hypothesis import strategies as st

from localematch.tags import LanguageTag, parse_tag
from tests.strategies import canonical_string, malformed_tags, raw_tags, tag_components


class TestParseProperties:
    """Parsing invariants over generated tags."""

    @given(components=tag_components())
    def test_components_round_trip(self, components: dict[str, str]) -> None:
        """Parsing a canonical string recovers exactly its components."""
        tag, error = parse_tag(canonical_string(components))
        assert error is None
        assert tag == LanguageTag(**components)

    @given(raw=raw_tags())
    def test_any_casing_parses_to_canonical(self, raw: str) -> None:
        tag, error = parse_tag(raw)
        assert error is None
        assert tag is not None
        assert str(tag).lower() == raw.lower()

    @given(raw=raw_tags())
    def test_serialization_idempotent(self, raw: str) -> None:
        tag, _ = parse_tag(raw)
        assert tag is not None
        reparsed, error = parse_tag(str(tag))
        assert error is None
        assert reparsed == tag
        assert str(reparsed) == str(tag)

    @given(raw=malformed_tags())
    def test_malformed_reported(self, raw: str) -> None:
        tag, error = parse_tag(raw)
        assert tag is None
        assert error is not None
        event(f"error_code={error.code}")

    @given(raw=st.text(max_size=20))
    def test_arbitrary_text_never_raises(self, raw: str) -> None:
        tag, error = parse_tag(raw)
        assert (tag is None) != (error is None)
        event(f"outcome={'tag' if tag is not None else 'error'}")
