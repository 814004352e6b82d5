"""Auth module public exports."""

from ghresolve.auth.base import TokenResolver
from ghresolve.auth.resolvers.env import TOKEN_VAR, EnvTokenResolver

__all__ = ["TOKEN_VAR", "EnvTokenResolver", "TokenResolver"]
