"""Public contracts for ghresolve."""

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

__all__ = [
    "DEFAULT_API_BASE",
    "ClientConfig",
    "ConfigError",
    "GhResolveError",
    "GraphQLError",
    "HeaderValueError",
    "MissingDataError",
    "ProviderError",
    "ResponseDecodeError",
    "TransportError",
    "User",
    "UserLogin",
]
