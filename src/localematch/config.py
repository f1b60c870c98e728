"""Locale configuration: which locales a program ships and its default.

A program declares its translations either explicitly in ``pyproject.toml``::

    [tool.localematch]
    available-locales = ["en", "ru"]
    default-locale = "en"
    load-path = "i18n"

or implicitly through the layout of its translation directory
(``i18n/en.yml``, ``i18n/ru.yml``, or ``locales/en/``, ``locales/ru/``). When
``available-locales`` is omitted, locales are discovered from ``load-path``.

Python 3.13+.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from localematch.constants import (
    CONFIG_TABLE,
    DEFAULT_LOCALE,
    MAX_DISCOVERED_LANGUAGE_LENGTH,
    TRANSLATION_SUFFIXES,
)
from localematch.errors import ConfigError
from localematch.negotiation.resolver import negotiate_locale
from localematch.negotiation.types import LocaleCode
from localematch.tags.parser import is_valid_tag, parse_tag

__all__ = ["LocaleConfig", "discover_locales"]

logger = logging.getLogger(__name__)


def discover_locales(
    directory: str | Path, *, suffixes: Iterable[str] = TRANSLATION_SUFFIXES
) -> tuple[LocaleCode, ...]:
    """List the locales present in a translation directory.

    Each sub-directory name, and each stem of a file with a translation
    suffix, that is a well-formed tag with a 2-3 letter primary language counts
    as one locale. Hidden entries are skipped; other names (``messages.po``,
    ``backup/``) are ignored.

    Args:
        directory: Translation directory (``i18n``, ``locales``)
        suffixes: File suffixes treated as translation resources

    Returns:
        Canonical tags, sorted and de-duplicated

    Raises:
        ConfigError: If directory does not exist or is not a directory

    Example:
        >>> discover_locales("i18n")  # i18n/en.yml, i18n/ru.yml
        ('en', 'ru')
    """
    root = Path(directory)
    if not root.is_dir():
        msg = f"Locale directory not found: '{root}'"
        raise ConfigError(msg)

    allowed = {suffix.lower() for suffix in suffixes}
    found: set[str] = set()
    for entry in root.iterdir():
        if entry.name.startswith("."):
            continue
        if entry.is_dir():
            name = entry.name
        elif entry.suffix.lower() in allowed:
            name = entry.stem
        else:
            continue
        tag, _ = parse_tag(name)
        if tag is None or len(tag.primary_language) > MAX_DISCOVERED_LANGUAGE_LENGTH:
            logger.debug("Skipping non-locale entry: %s", entry)
            continue
        found.add(str(tag))
    return tuple(sorted(found))


def _string_list(value: Any, key: str, source: Path) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        msg = f"'{key}' in {source} must be a list of strings"
        raise ConfigError(msg)
    return tuple(value)


def _string(value: Any, key: str, source: Path) -> str:
    if not isinstance(value, str):
        msg = f"'{key}' in {source} must be a string"
        raise ConfigError(msg)
    return value


@dataclass(frozen=True, slots=True)
class LocaleConfig:
    """Immutable description of the locales a program supports.

    Uses Python 3.13 frozen dataclass with slots for low memory overhead.

    Example:
        >>> config = LocaleConfig(("en", "ru"))
        >>> config.negotiate(["ru-RU", "en"])
        'ru'
        >>> config.negotiate(["de"])
        'en'

    Attributes:
        available: Supported locales in the program's preference order.
            Malformed entries are kept as given; negotiation ignores them.
        default: Locale used when negotiation finds no match
        load_path: Translation directory the locales were read from, if any
    """

    available: tuple[LocaleCode, ...]
    default: LocaleCode = DEFAULT_LOCALE
    load_path: Path | None = None

    def __post_init__(self) -> None:
        """Normalize available to a tuple and validate the default locale.

        Raises:
            ConfigError: If available is a bare string or default is malformed
        """
        if isinstance(self.available, str):
            msg = f"available must be a sequence of locale codes, not a string: '{self.available}'"
            raise ConfigError(msg)
        object.__setattr__(self, "available", tuple(self.available))

        if not is_valid_tag(self.default):
            msg = f"Default locale is not a valid language tag: '{self.default}'"
            raise ConfigError(msg)

    @classmethod
    def from_directory(
        cls, directory: str | Path, *, default: LocaleCode = DEFAULT_LOCALE
    ) -> LocaleConfig:
        """Build a config from the locales found in a translation directory.

        Raises:
            ConfigError: If directory does not exist or default is malformed
        """
        path = Path(directory)
        return cls(discover_locales(path), default=default, load_path=path)

    @classmethod
    def from_pyproject(cls, path: str | Path = "pyproject.toml") -> LocaleConfig:
        """Load the ``[tool.localematch]`` table of a pyproject.toml file.

        Keys:
            available-locales: list of locale codes
            default-locale: fallback locale (default ``"en"``)
            load-path: translation directory, relative to the pyproject file

        At least one of ``available-locales`` and ``load-path`` is required.

        Raises:
            ConfigError: If the file is missing, unreadable or invalid TOML,
                the table is absent, or a key has the wrong type
        """
        source = Path(path)
        try:
            with source.open("rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError as e:
            msg = f"Configuration file not found: '{source}'"
            raise ConfigError(msg) from e
        except OSError as e:
            msg = f"Cannot read configuration file '{source}': {e}"
            raise ConfigError(msg) from e
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in '{source}': {e}"
            raise ConfigError(msg) from e

        tool = data.get("tool")
        table = tool.get(CONFIG_TABLE) if isinstance(tool, dict) else None
        if not isinstance(table, dict):
            msg = f"No [tool.{CONFIG_TABLE}] table in '{source}'"
            raise ConfigError(msg)

        default = _string(table.get("default-locale", DEFAULT_LOCALE), "default-locale", source)

        load_path: Path | None = None
        if "load-path" in table:
            load_path = source.parent / _string(table["load-path"], "load-path", source)

        if "available-locales" in table:
            available = _string_list(table["available-locales"], "available-locales", source)
        elif load_path is not None:
            available = discover_locales(load_path)
        else:
            msg = f"[tool.{CONFIG_TABLE}] in '{source}' needs 'available-locales' or 'load-path'"
            raise ConfigError(msg)

        logger.debug("Loaded locale config from %s: %s (default %s)", source, available, default)
        return cls(available, default=default, load_path=load_path)

    def negotiate(self, user: Iterable[LocaleCode] | None = None) -> LocaleCode:
        """Negotiate against this config's locales, falling back to its default.

        Args:
            user: The user's locales in priority order; None detects them
                from the environment
        """
        return negotiate_locale(self.available, user, default=self.default)
