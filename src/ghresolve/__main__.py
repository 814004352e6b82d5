"""Module entrypoint for ``python -m ghresolve``."""

from ghresolve.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
