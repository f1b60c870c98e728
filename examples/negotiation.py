"""localematch Example - Picking a Locale for Each Request.

Demonstrates real-world usage of locale negotiation:

Scenarios covered:
1. Negotiating against explicit locale lists
2. Tie-breaking and specificity
3. Threading the negotiated locale into message lookups
4. Discovering supported locales from a translation directory
5. Display names for a language menu (requires Babel)

Note on Malformed Input:
    Malformed tags in either list are skipped silently. resolve() returns
    None when nothing matches; negotiate_locale() applies a default instead.

Python 3.13+.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from localematch import LocaleConfig, negotiate_locale, resolve
from localematch.core import is_babel_available
from localematch.locale_utils import get_display_name

MESSAGES: dict[str, dict[str, str]] = {
    "en": {"greeting": "Hello, {name}!", "cart": "Cart"},
    "ru": {"greeting": "Привет, {name}!", "cart": "Корзина"},
    "pt-BR": {"greeting": "Olá, {name}!", "cart": "Carrinho"},
}


def example_1_basic_negotiation() -> None:
    """Example 1: First user locale with a candidate decides."""
    print("=" * 60)
    print("Example 1: Basic Negotiation")
    print("=" * 60)

    available = ["en-US", "en-GB", "ru-UA", "fr-FR", "it"]
    user = ["ru-RU", "ru", "en-US", "en"]
    print(f"\nAvailable: {available}")
    print(f"User:      {user}")
    print(f"  -> {resolve(available, user)}")

    print("\nNo shared language:")
    print(f"  resolve(['en', 'ru'], ['de-DE']) -> {resolve(['en', 'ru'], ['de-DE'])}")
    print(f"  negotiate_locale(...)           -> {negotiate_locale(['en', 'ru'], ['de-DE'])}")


def example_2_specificity() -> None:
    """Example 2: Scoring by shared subtags, earliest candidate on ties."""
    print("\n" + "=" * 60)
    print("Example 2: Specificity and Ties")
    print("=" * 60)

    cases = [
        (["en", "pt-BR", "pt-PT", "es"], ["pt", "en"]),
        (["pt-BR", "pt-PT"], ["pt-PT"]),
        (["zh", "zh-cmn", "zh-cmn-Hans"], ["zh-Hans"]),
        (["sr-Cyrl-RS", "sr-Latn-RS"], ["sr-Latn"]),
        (["ru--", "ru-RU"], ["ru"]),
    ]
    for available, user in cases:
        print(f"  {user} against {available} -> {resolve(available, user)}")


def translate(locale: str, key: str, **args: str) -> str:
    """Message lookup that takes the locale explicitly."""
    return MESSAGES[locale][key].format(**args)


def example_3_explicit_locale() -> None:
    """Example 3: Each request carries its own locale; nothing global is set."""
    print("\n" + "=" * 60)
    print("Example 3: Threading the Locale Through Lookups")
    print("=" * 60)

    requests = {
        "anna": ["ru-RU", "en"],
        "joão": ["pt-BR", "pt"],
        "kai": ["de-DE"],
    }
    for name, preferences in requests.items():
        locale = negotiate_locale(MESSAGES, preferences)
        print(f"\n  {name} {preferences} -> {locale}")
        print(f"    {translate(locale, 'greeting', name=name)}")
        print(f"    {translate(locale, 'cart')}")


def example_4_directory_discovery(tmp_dir: Path) -> None:
    """Example 4: Supported locales from i18n/<locale>.yml files."""
    print("\n" + "=" * 60)
    print("Example 4: Translation Directory Discovery")
    print("=" * 60)

    for name in ("en.yml", "lv.yml", "lt.yml", "README.md"):
        (tmp_dir / name).write_text("", encoding="utf-8")

    config = LocaleConfig.from_directory(tmp_dir, default="en")
    print(f"\nDiscovered: {config.available}")
    print(f"  ['lv-LV', 'en'] -> {config.negotiate(['lv-LV', 'en'])}")
    print(f"  ['et']          -> {config.negotiate(['et'])}")


def example_5_display_names() -> None:
    """Example 5: Language menu labels from CLDR."""
    print("\n" + "=" * 60)
    print("Example 5: Display Names")
    print("=" * 60)

    if not is_babel_available():
        print("\n[SKIP] Install Babel: pip install localematch[babel]")
        return

    for locale in MESSAGES:
        print(f"  {locale:6} {get_display_name(locale)}")


# Main execution
if __name__ == "__main__":
    example_1_basic_negotiation()
    example_2_specificity()
    example_3_explicit_locale()

    with tempfile.TemporaryDirectory() as tmp_dir_main:
        example_4_directory_discovery(Path(tmp_dir_main))

    example_5_display_names()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
