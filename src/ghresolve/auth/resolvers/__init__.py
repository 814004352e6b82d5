"""Token resolver implementations."""

from ghresolve.auth.resolvers.env import TOKEN_VAR, EnvTokenResolver

__all__ = ["TOKEN_VAR", "EnvTokenResolver"]
