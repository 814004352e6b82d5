"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from ghresolve.contracts.config import DEFAULT_API_BASE


def _package_version() -> str:
    try:
        return version("ghresolve")
    except PackageNotFoundError:
        return "0.0.0"


def _user_id(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid user id: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"user id must be non-negative: {value!r}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ghresolve")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument(
        "--api-base",
        default=DEFAULT_API_BASE,
        help=f"GitHub API base URL (default: {DEFAULT_API_BASE})",
    )
    parser.add_argument("--timeout", type=float, default=30.0, help="Request timeout in seconds")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    user_parser = subparsers.add_parser("user", help="Look up a user by login")
    user_parser.add_argument("login", help="GitHub login, e.g. octocat")

    usernames_parser = subparsers.add_parser(
        "usernames", help="Resolve numeric user ids to logins (needs GITHUB_TOKEN)"
    )
    usernames_parser.add_argument("ids", nargs="+", type=_user_id, metavar="ID", help="Numeric user id")

    return parser


__all__ = ["build_parser"]
