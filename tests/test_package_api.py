"""Tests for the public package surface: exports, version, exception hierarchy.

Python 3.13+.
"""

import pytest

import localematch
from localematch import ConfigError, LanguageTagError, LocaleMatchError, TagErrorCode, TagField


class TestPackageExports:
    """Top-level names."""

    @pytest.mark.parametrize("name", localematch.__all__)
    def test_all_names_importable(self, name: str) -> None:
        assert hasattr(localematch, name)

    def test_version_is_string(self) -> None:
        assert isinstance(localematch.__version__, str)
        assert localematch.__version__

    def test_default_locale(self) -> None:
        assert localematch.DEFAULT_LOCALE == "en"


class TestExceptionHierarchy:
    """All library errors share one base class."""

    def test_language_tag_error(self) -> None:
        assert issubclass(LanguageTagError, LocaleMatchError)
        assert issubclass(LanguageTagError, ValueError)

    def test_config_error(self) -> None:
        assert issubclass(ConfigError, LocaleMatchError)
        assert not issubclass(ConfigError, ValueError)

    def test_language_tag_error_attributes(self) -> None:
        error = LanguageTagError("bad", code=TagErrorCode.EMPTY_TAG, raw="")
        assert str(error) == "bad"
        assert error.code is TagErrorCode.EMPTY_TAG
        assert error.raw == ""


class TestEnums:
    """Enum values are stable identifiers."""

    def test_tag_field_order_and_values(self) -> None:
        assert [f.value for f in TagField] == [
            "extended_language",
            "script",
            "region",
            "variant",
            "extension",
            "private_use",
        ]

    def test_error_codes_are_kebab_case(self) -> None:
        for code in TagErrorCode:
            assert code.value == code.name.lower().replace("_", "-")
