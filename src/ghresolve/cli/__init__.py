"""Command-line interface for ghresolve."""

from ghresolve.cli.app import main
from ghresolve.cli.parser import build_parser

__all__ = ["build_parser", "main"]
