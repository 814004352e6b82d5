"""Environment token resolver."""

from __future__ import annotations

import os
from dataclasses import dataclass

from ghresolve.auth.base import TokenResolver

TOKEN_VAR = "GITHUB_TOKEN"


@dataclass(frozen=True)
class EnvTokenResolver(TokenResolver):
    var: str = TOKEN_VAR

    def resolve(self) -> str | None:
        # A missing token is not fatal here; authenticated calls fail later.
        token = (os.getenv(self.var) or "").strip()
        return token or None
