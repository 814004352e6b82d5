"""Exception hierarchy for ghresolve.

All ghresolve exceptions inherit from :class:`GhResolveError`, so callers can
catch any library failure with a single ``except`` clause while still being
able to tell a missing credential apart from a failing API call.
"""

from __future__ import annotations


class GhResolveError(Exception):
    """Base exception for all ghresolve errors."""


class ConfigError(GhResolveError):
    """Configuration is missing or invalid (e.g. no credential for an authenticated call)."""


class HeaderValueError(GhResolveError):
    """A value cannot be sent as an HTTP header."""


class ProviderError(GhResolveError):
    """Base failure of a GitHub API call."""


class TransportError(ProviderError):
    """Network failure or non-success HTTP status.

    Attributes:
        status_code: HTTP status of the response, or None when no response was received.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GraphQLError(ProviderError):
    """GitHub answered a GraphQL query with a non-empty ``errors`` list.

    Attributes:
        message: Message of the first reported error.
    """

    def __init__(self, message: str) -> None:
        super().__init__(f"graphql error: {message}")
        self.message = message


class MissingDataError(ProviderError):
    """GraphQL response carried neither data nor errors."""


class ResponseDecodeError(ProviderError):
    """Response body is not JSON or does not have the expected shape."""
