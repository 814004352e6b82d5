"""Public API surface for ghresolve."""

__version__ = "0.3.0"

from ghresolve.auth import TOKEN_VAR, EnvTokenResolver, TokenResolver
from ghresolve.contracts.config import DEFAULT_API_BASE, ClientConfig
from ghresolve.contracts.exceptions import (
    ConfigError,
    GhResolveError,
    GraphQLError,
    HeaderValueError,
    MissingDataError,
    ProviderError,
    ResponseDecodeError,
    TransportError,
)
from ghresolve.contracts.user import User, UserLogin
from ghresolve.github import USERNAMES_BATCH_SIZE, GitHubApi, chunked, user_node_id

__all__ = [
    "DEFAULT_API_BASE",
    "TOKEN_VAR",
    "USERNAMES_BATCH_SIZE",
    "ClientConfig",
    "ConfigError",
    "EnvTokenResolver",
    "GhResolveError",
    "GitHubApi",
    "GraphQLError",
    "HeaderValueError",
    "MissingDataError",
    "ProviderError",
    "ResponseDecodeError",
    "TokenResolver",
    "TransportError",
    "User",
    "UserLogin",
    "__version__",
    "chunked",
    "user_node_id",
]
