"""Command line interface for the Textbringer plugin generator."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Sequence

from . import __version__
from .errors import IOFailure
from .generator import PluginGenerator
from .io.adapters.git import GitIdentityProvider
from .log import configure_logging
from .options import LicenseKind, TestFramework

PROGRAM_NAME = "textbringer-plugin-generator"
_PLUGIN_NAME = re.compile(r"[A-Za-z0-9_-]+")


def _choices(enum_type: type[LicenseKind] | type[TestFramework]) -> str:
    return ", ".join(member.value for member in enum_type)


def _plugin_name(value: str) -> str:
    if not value.strip():
        raise argparse.ArgumentTypeError("NAME must not be empty")
    if not _PLUGIN_NAME.fullmatch(value):
        raise argparse.ArgumentTypeError("NAME may only contain letters, digits, '-' and '_'")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROGRAM_NAME, description="Generate Textbringer plugin packages")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("version", help="show version")

    new_parser = subparsers.add_parser("new", help="generate a new Textbringer plugin")
    new_parser.add_argument("name", type=_plugin_name, help="Plugin name, e.g. my-lang")
    # Unknown tokens are accepted here and fall back to the default later on.
    new_parser.add_argument(
        "--license",
        default=None,
        help=f"License ({_choices(LicenseKind)}; default: wtfpl)",
    )
    new_parser.add_argument(
        "--test_framework",
        "--test-framework",
        dest="test_framework",
        default=None,
        help=f"Test framework ({_choices(TestFramework)}; default: test-unit)",
    )
    new_parser.add_argument("--author", help="Author name (default: git config user.name)")
    new_parser.add_argument("--email", help="Author email (default: git config user.email)")
    new_parser.add_argument(
        "--github-user",
        dest="github_user",
        help="GitHub account for homepage URLs (default: git config github.user)",
    )
    new_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Directory the package is created in (default: current directory)",
    )
    new_parser.add_argument("-v", "--verbose", action="store_true", help="Log every generation step")

    return parser


def _handle_version(args: argparse.Namespace) -> int:
    print(f"{PROGRAM_NAME} {__version__}")
    return 0


def _handle_new(args: argparse.Namespace) -> int:
    configure_logging(verbose=args.verbose)
    raw_options = {
        "license": args.license,
        "test_framework": args.test_framework,
        "author": args.author,
        "email": args.email,
        "github_user": args.github_user,
    }
    generator = PluginGenerator(GitIdentityProvider())
    try:
        result = generator.generate(args.name, raw_options, target_dir=args.directory)
    except IOFailure as exc:
        print(f"{PROGRAM_NAME}: error: {exc}", file=sys.stderr)
        return 1
    print(result.message)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "version":
        return _handle_version(args)
    if args.command == "new":
        return _handle_new(args)
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
