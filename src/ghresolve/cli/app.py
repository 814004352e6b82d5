"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from ghresolve.cli.parser import build_parser
from ghresolve.contracts.config import ClientConfig
from ghresolve.contracts.exceptions import ConfigError, GhResolveError, HeaderValueError, ProviderError
from ghresolve.github.client import GitHubApi


def _build_config(args: argparse.Namespace) -> ClientConfig:
    try:
        return ClientConfig.from_env(api_base=args.api_base, timeout=args.timeout)
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc


def _run(args: argparse.Namespace) -> None:
    with GitHubApi(_build_config(args)) as api:
        if args.command == "user":
            print(api.user(args.login).model_dump_json(indent=2))
        elif args.command == "usernames":
            resolved = api.usernames(args.ids)
            print(json.dumps({str(key): value for key, value in sorted(resolved.items())}, indent=2))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        _run(args)
        return 0
    except (ConfigError, HeaderValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except ProviderError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except (GhResolveError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
