"""Tests for config.py: LocaleConfig loading and translation directory discovery.

Python 3.13+.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from localematch.config import LocaleConfig, discover_locales
from localematch.errors import ConfigError


def _write_pyproject(directory: Path, body: str) -> Path:
    path = directory / "pyproject.toml"
    path.write_text(body, encoding="utf-8")
    return path


class TestDiscoverLocales:
    """Locale names from translation directory layout."""

    def test_files(self, tmp_path: Path) -> None:
        for name in ("en.yml", "ru.yml", "pt-BR.json"):
            (tmp_path / name).write_text("", encoding="utf-8")
        assert discover_locales(tmp_path) == ("en", "pt-BR", "ru")

    def test_directories(self, tmp_path: Path) -> None:
        for name in ("en", "zh-hant-tw"):
            (tmp_path / name).mkdir()
        assert discover_locales(tmp_path) == ("en", "zh-Hant-TW")

    def test_non_locale_entries_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "en.ftl").write_text("", encoding="utf-8")
        (tmp_path / "README").write_text("", encoding="utf-8")
        (tmp_path / "notes.txt").write_text("", encoding="utf-8")
        (tmp_path / "app.config.yml").write_text("", encoding="utf-8")
        (tmp_path / "en_US.yml").write_text("", encoding="utf-8")
        (tmp_path / "__pycache__").mkdir()
        (tmp_path / ".git").mkdir()
        assert discover_locales(tmp_path) == ("en",)

    def test_word_like_names_ignored(self, tmp_path: Path) -> None:
        for name in ("messages.po", "strings.json", "config.toml", "fil.po", "de.po"):
            (tmp_path / name).write_text("", encoding="utf-8")
        (tmp_path / "backup").mkdir()
        (tmp_path / "yue-hk").mkdir()
        assert discover_locales(tmp_path) == ("de", "fil", "yue-HK")

    def test_duplicates_merged(self, tmp_path: Path) -> None:
        (tmp_path / "ru").mkdir()
        (tmp_path / "ru.po").write_text("", encoding="utf-8")
        (tmp_path / "RU.mo").write_text("", encoding="utf-8")
        assert discover_locales(tmp_path) == ("ru",)

    def test_custom_suffixes(self, tmp_path: Path) -> None:
        (tmp_path / "en.txt").write_text("", encoding="utf-8")
        (tmp_path / "ru.yml").write_text("", encoding="utf-8")
        assert discover_locales(tmp_path, suffixes={".TXT"}) == ("en",)

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert discover_locales(tmp_path) == ()

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Locale directory not found"):
            discover_locales(tmp_path / "missing")

    def test_file_instead_of_directory(self, tmp_path: Path) -> None:
        path = tmp_path / "en.yml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ConfigError):
            discover_locales(path)


class TestLocaleConfig:
    """Direct construction and negotiation."""

    def test_defaults(self) -> None:
        config = LocaleConfig(["en", "ru"])  # type: ignore[arg-type]
        assert config.available == ("en", "ru")
        assert config.default == "en"
        assert config.load_path is None

    def test_bare_string_rejected(self) -> None:
        with pytest.raises(ConfigError, match="not a string"):
            LocaleConfig("en")  # type: ignore[arg-type]

    def test_malformed_default_rejected(self) -> None:
        with pytest.raises(ConfigError, match="Default locale"):
            LocaleConfig(("en",), default="en_US")

    def test_malformed_available_kept(self) -> None:
        config = LocaleConfig(("ru--", "ru-RU"))
        assert config.available == ("ru--", "ru-RU")
        assert config.negotiate(["ru"]) == "ru-RU"

    def test_negotiate(self) -> None:
        config = LocaleConfig(("en", "ru"), default="ru")
        assert config.negotiate(["en-GB"]) == "en"
        assert config.negotiate(["de"]) == "ru"

    def test_negotiate_system_locales(self) -> None:
        config = LocaleConfig(("en", "ru"))
        with patch("localematch.negotiation.resolver.get_system_locales", return_value=["ru-UA"]):
            assert config.negotiate() == "ru"

    def test_from_directory(self, tmp_path: Path) -> None:
        (tmp_path / "en.yml").write_text("", encoding="utf-8")
        (tmp_path / "ru.yml").write_text("", encoding="utf-8")
        config = LocaleConfig.from_directory(tmp_path, default="ru")
        assert config == LocaleConfig(("en", "ru"), default="ru", load_path=tmp_path)


class TestFromPyproject:
    """[tool.localematch] table loading."""

    def test_available_locales(self, tmp_path: Path) -> None:
        path = _write_pyproject(
            tmp_path,
            '[tool.localematch]\navailable-locales = ["en", "ru"]\ndefault-locale = "ru"\n',
        )
        config = LocaleConfig.from_pyproject(path)
        assert config.available == ("en", "ru")
        assert config.default == "ru"
        assert config.load_path is None

    def test_default_locale_optional(self, tmp_path: Path) -> None:
        path = _write_pyproject(tmp_path, '[tool.localematch]\navailable-locales = ["ru"]\n')
        assert LocaleConfig.from_pyproject(path).default == "en"

    def test_load_path_discovery(self, tmp_path: Path) -> None:
        i18n = tmp_path / "i18n"
        i18n.mkdir()
        (i18n / "en.yml").write_text("", encoding="utf-8")
        (i18n / "ru.yml").write_text("", encoding="utf-8")
        path = _write_pyproject(tmp_path, '[tool.localematch]\nload-path = "i18n"\n')

        config = LocaleConfig.from_pyproject(path)
        assert config.available == ("en", "ru")
        assert config.load_path == i18n

    def test_explicit_locales_win_over_discovery(self, tmp_path: Path) -> None:
        (tmp_path / "i18n").mkdir()
        (tmp_path / "i18n" / "de.yml").write_text("", encoding="utf-8")
        path = _write_pyproject(
            tmp_path,
            '[tool.localematch]\navailable-locales = ["en"]\nload-path = "i18n"\n',
        )
        assert LocaleConfig.from_pyproject(path).available == ("en",)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            LocaleConfig.from_pyproject(tmp_path / "pyproject.toml")

    def test_unreadable_path(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read configuration file"):
            LocaleConfig.from_pyproject(tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = _write_pyproject(tmp_path, "[tool.localematch\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            LocaleConfig.from_pyproject(path)

    def test_missing_table(self, tmp_path: Path) -> None:
        path = _write_pyproject(tmp_path, '[project]\nname = "app"\n')
        with pytest.raises(ConfigError, match=r"No \[tool.localematch\] table"):
            LocaleConfig.from_pyproject(path)

    @pytest.mark.parametrize("body", ['tool = "x"\n', "tool = [1]\n", '[tool]\nlocalematch = 1\n'])
    def test_tool_not_a_table(self, tmp_path: Path, body: str) -> None:
        path = _write_pyproject(tmp_path, body)
        with pytest.raises(ConfigError, match=r"No \[tool.localematch\] table"):
            LocaleConfig.from_pyproject(path)

    def test_no_locale_source(self, tmp_path: Path) -> None:
        path = _write_pyproject(tmp_path, '[tool.localematch]\ndefault-locale = "en"\n')
        with pytest.raises(ConfigError, match="needs 'available-locales' or 'load-path'"):
            LocaleConfig.from_pyproject(path)

    @pytest.mark.parametrize(
        "body",
        [
            '[tool.localematch]\navailable-locales = "en"\n',
            "[tool.localematch]\navailable-locales = [1, 2]\n",
            '[tool.localematch]\navailable-locales = ["en"]\ndefault-locale = 1\n',
            "[tool.localematch]\nload-path = 1\n",
        ],
    )
    def test_wrong_types(self, tmp_path: Path, body: str) -> None:
        path = _write_pyproject(tmp_path, body)
        with pytest.raises(ConfigError, match="must be"):
            LocaleConfig.from_pyproject(path)

    def test_malformed_default(self, tmp_path: Path) -> None:
        path = _write_pyproject(
            tmp_path, '[tool.localematch]\navailable-locales = ["en"]\ndefault-locale = "en_US"\n'
        )
        with pytest.raises(ConfigError, match="Default locale"):
            LocaleConfig.from_pyproject(path)

    def test_missing_load_path(self, tmp_path: Path) -> None:
        path = _write_pyproject(tmp_path, '[tool.localematch]\nload-path = "nowhere"\n')
        with pytest.raises(ConfigError, match="Locale directory not found"):
            LocaleConfig.from_pyproject(path)
