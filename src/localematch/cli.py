"""Command-line locale negotiation.

Prints the locale a program should use for the current user, given the
locales it ships. Shell scripts and build steps use it to pick translation
files without embedding negotiation logic.

Exit Codes:
    0: Locale negotiated (or default applied)
    1: No match and --strict given
    2: Configuration or usage error

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from localematch.config import LocaleConfig
from localematch.constants import DEFAULT_LOCALE
from localematch.core.babel_compat import BabelImportError
from localematch.errors import LocaleMatchError
from localematch.locale_utils import get_display_name, get_system_locales
from localematch.negotiation.resolver import resolve

__all__ = ["main"]

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="localematch",
        description="Pick the best supported locale for the user's locale preferences.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Negotiate against explicit locales, user locales from the environment:
  localematch --available en ru pt-BR

  # Explicit user preferences, highest priority first:
  localematch --available en-US ru-RU -- ru en
  # -> ru-RU

  # Locales from [tool.localematch] in pyproject.toml:
  localematch --config pyproject.toml

  # Locales from a translation directory (i18n/en.yml, i18n/ru.yml):
  localematch --locale-dir i18n
""",
    )
    parser.add_argument(
        "user",
        nargs="*",
        metavar="USER_LOCALE",
        help="User locales in priority order (default: detected from the environment)",
    )
    parser.add_argument(
        "--available",
        "-a",
        nargs="+",
        action="extend",
        metavar="LOCALE",
        help="Supported locales in preference order",
    )
    parser.add_argument(
        "--locale-dir",
        type=Path,
        help="Discover supported locales from a translation directory",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("pyproject.toml"),
        help="pyproject.toml with a [tool.localematch] table (default: %(default)s)",
    )
    parser.add_argument(
        "--default",
        help=f"Locale used when nothing matches (default: config or {DEFAULT_LOCALE!r})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 instead of applying the default locale",
    )
    parser.add_argument(
        "--describe",
        action="store_true",
        help="Also print the locale's display name (requires Babel)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log negotiation decisions to stderr",
    )
    return parser


def _load_config(args: argparse.Namespace) -> LocaleConfig:
    """Build the config from the most specific source given on the command line."""
    if args.available:
        config = LocaleConfig(tuple(args.available))
    elif args.locale_dir is not None:
        config = LocaleConfig.from_directory(args.locale_dir)
    else:
        config = LocaleConfig.from_pyproject(args.config)

    if args.default is not None:
        config = LocaleConfig(config.available, default=args.default, load_path=config.load_path)
    return config


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = _load_config(args)
    except LocaleMatchError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    user = args.user or get_system_locales()
    logger.debug("User locales: %s", user)

    resolved = resolve(config.available, user)
    if resolved is None:
        if args.strict:
            print(f"[ERROR] No supported locale matches {user}", file=sys.stderr)
            return 1
        resolved = config.default

    if not args.describe:
        print(resolved)
        return 0

    try:
        print(f"{resolved}\t{get_display_name(resolved)}")
    except (BabelImportError, LocaleMatchError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
