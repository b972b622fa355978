"""Command-line interface.

Usage:
    htmlgettext extract MODULE... [--locale TAG]... [--config FILE]
    htmlgettext compile MODULE... [--locale TAG]... [--domain NAME=DIR]...

Exit codes: 0 success, 1 errors were logged, 2 configuration error.

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

from htmlgettext import __version__
from htmlgettext.config import RunConfig
from htmlgettext.constants import DEFAULT_LOCALE
from htmlgettext.diagnostics import ConfigurationError, RunLog
from htmlgettext.enums import Severity
from htmlgettext.locale_utils import LocaleConfig
from htmlgettext.project import run_compile, run_extract

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ["build_config", "main", "parse_args"]


def _domain(value: str) -> tuple[str, Path]:
    name, sep, directory = value.partition("=")
    if not sep or not name.strip() or not directory.strip():
        msg = f"expected NAME=DIR, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return name.strip(), Path(directory.strip())


def parse_args(args: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="htmlgettext",
        description="Extract and compile gettext catalogs for annotated HTML",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        choices=("extract", "compile"),
        help="extract: update catalog templates and locale catalogs; "
        "compile: build .mo files, translated HTML and browser catalogs",
    )
    parser.add_argument(
        "modules",
        type=Path,
        nargs="+",
        help="Module directories (each with a locale/ subdirectory)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="TOML file with an [htmlgettext] table",
    )
    parser.add_argument(
        "-l",
        "--locale",
        action="append",
        default=[],
        help="Supported locale, e.g. cs_CZ or de-DE (can be repeated; overrides the config file)",
    )
    parser.add_argument(
        "--default-locale",
        default=None,
        help=f"Locale source documents are written in (default: {DEFAULT_LOCALE})",
    )
    parser.add_argument(
        "-d",
        "--domain",
        type=_domain,
        action="append",
        default=[],
        help="Extra text domain for translation lookup as NAME=DIR (can be repeated)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Also log every external command",
    )
    return parser.parse_args(args)


def build_config(parsed: argparse.Namespace) -> RunConfig:
    """Merge the config file (if any) with command-line overrides.

    Raises:
        ConfigurationError: If the file or any locale is invalid
    """
    config = RunConfig.from_toml(parsed.config) if parsed.config else RunConfig()
    if parsed.locale or parsed.default_locale:
        default = parsed.default_locale or config.locales.default.posix
        tags = parsed.locale or list(config.locales.posix_codes)
        config = replace(config, locales=LocaleConfig.from_tags([*tags, default], default=default))
    if parsed.domain:
        domains = {**config.domains, **{name: path.resolve() for name, path in parsed.domain}}
        config = replace(config, domains=domains)
    return config


def main(args: Sequence[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command line arguments (None uses sys.argv)

    Returns:
        Exit code: 0 success, 1 errors logged, 2 configuration error
    """
    parsed = parse_args(args)
    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.INFO,
        format="%(levelname)-7s %(message)s",
        stream=sys.stderr,
    )

    try:
        config = build_config(parsed)
    except ConfigurationError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    log = RunLog(root=Path.cwd())
    if parsed.command == "extract":
        run_extract(parsed.modules, config, log)
    else:
        run_compile(parsed.modules, config, log)

    errors = len(log.errors)
    warnings = sum(1 for e in log if e.severity is Severity.WARNING)
    print(f"Done: {errors} error(s), {warnings} warning(s)")
    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())
