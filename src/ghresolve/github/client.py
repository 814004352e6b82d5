"""GitHub API client: single REST lookups and batched GraphQL queries."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import TracebackType
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from ghresolve.contracts.config import ClientConfig
from ghresolve.contracts.exceptions import (
    ConfigError,
    GraphQLError,
    HeaderValueError,
    MissingDataError,
    ResponseDecodeError,
    TransportError,
)
from ghresolve.contracts.user import User
from ghresolve.github.batching import chunked
from ghresolve.github.graphql import GraphQLRequest, GraphQLResponse, UserNodes, UsernamesVariables
from ghresolve.github.node_ids import user_node_id
from ghresolve.github.queries import USERNAMES, USERNAMES_BATCH_SIZE

_LOG = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")
ModelT = TypeVar("ModelT", bound=BaseModel)


def _authorization_header(token: str) -> str:
    value = f"token {token}"
    # Header values may only hold horizontal tabs and visible ASCII/space.
    if any(not (char == "\t" or " " <= char <= "~") for char in value):
        raise HeaderValueError("credential contains characters that are not valid in an HTTP header")
    return value


class GitHubApi:
    """Synchronous GitHub API client.

    The credential is taken from ``config`` once, at construction, and never
    changes afterwards. When no config is given it is read from the
    environment via :meth:`ClientConfig.from_env`.

    A missing credential is not an error until an operation that requires
    authentication is called.
    """

    def __init__(self, config: ClientConfig | None = None, *, http_client: httpx.Client | None = None) -> None:
        self._config = config if config is not None else ClientConfig.from_env()
        self._token = self._config.token
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(
            timeout=httpx.Timeout(self._config.timeout),
            follow_redirects=True,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    def __enter__(self) -> GitHubApi:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_client:
            self._http.close()

    def require_auth(self) -> None:
        """Raise :class:`ConfigError` when no credential is configured."""
        if self._token is None:
            raise ConfigError(f"missing environment variable {self._config.token_var}")

    def prepare(
        self,
        require_auth: bool,
        method: str,
        url: str,
        *,
        json: Any = None,
    ) -> httpx.Request:
        """Build an unsent request.

        Args:
            require_auth: Fail with :class:`ConfigError` when no credential is configured.
            method: HTTP method.
            url: Absolute ``https://`` URL, or a path relative to the API base.
            json: Optional JSON body.

        Returns:
            The request, carrying the credential whenever one is configured.

        Raises:
            ConfigError: If ``require_auth`` is set and there is no credential.
            HeaderValueError: If the credential cannot be sent as a header.
        """
        target = url if url.startswith("https://") else f"{self._config.api_base}{url.lstrip('/')}"
        if require_auth:
            self.require_auth()

        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": self._config.user_agent,
        }
        if self._token is not None:
            headers["Authorization"] = _authorization_header(self._token)
        return self._http.build_request(method, target, headers=headers, json=json)

    def graphql(
        self,
        query: str,
        variables: BaseModel | Mapping[str, Any],
        result_type: type[ResultT],
    ) -> ResultT:
        """Run a GraphQL operation and return its decoded ``data``.

        The envelope is checked before ``data`` is decoded: the first entry of
        a non-empty ``errors`` list wins over any ``data`` sent alongside it,
        whatever shape that ``data`` has.

        Raises:
            ConfigError: If no credential is configured.
            TransportError: On network failure or a non-success HTTP status.
            GraphQLError: If the response reports errors.
            MissingDataError: If the response has neither errors nor data.
            ResponseDecodeError: If the body is not an envelope, or ``data`` does not match ``result_type``.
        """
        if isinstance(variables, BaseModel):
            encoded = variables.model_dump(mode="json", by_alias=True)
        else:
            encoded = dict(variables)
        body = GraphQLRequest(query=query, variables=encoded)

        request = self.prepare(True, "POST", "graphql", json=body.model_dump(mode="json"))
        response = self._send(request)
        envelope = self._decode(response, GraphQLResponse[Any])

        if envelope.errors:
            _LOG.warning("GraphQL returned errors", extra={"count": len(envelope.errors)})
            raise GraphQLError(envelope.errors[0].message)
        if envelope.data is None:
            raise MissingDataError("missing graphql data")

        try:
            return TypeAdapter(result_type).validate_python(envelope.data)
        except ValidationError as exc:
            raise ResponseDecodeError(f"unexpected graphql data from {response.request.url}: {exc}") from exc

    def user(self, login: str) -> User:
        """Fetch a single user by login through the REST API."""
        cleaned = login.strip()
        if not cleaned:
            raise ValueError("login must be a non-empty string.")
        request = self.prepare(False, "GET", f"users/{quote(cleaned, safe='')}")
        return self._decode(self._send(request), User)

    def usernames(self, ids: Iterable[int]) -> dict[int, str]:
        """Resolve numeric user ids to logins, 100 ids per GraphQL query.

        Ids that do not name a user are left out of the result. A failing
        chunk fails the whole call; results of earlier chunks are dropped.

        Raises:
            ValueError: If any id is negative; raised before any request is sent.
        """
        node_ids = [user_node_id(database_id) for database_id in ids]
        # An empty input still costs exactly one (empty) query.
        chunks = list(chunked(node_ids, USERNAMES_BATCH_SIZE)) or [[]]

        result: dict[int, str] = {}
        for index, chunk in enumerate(chunks, start=1):
            _LOG.debug("Resolving usernames chunk %d/%d (%d ids)", index, len(chunks), len(chunk))
            res = self.graphql(USERNAMES, UsernamesVariables(ids=chunk), UserNodes)
            for node in res.nodes:
                if node is None:
                    continue
                result[node.database_id] = node.login
        return result

    def _send(self, request: httpx.Request) -> httpx.Response:
        _LOG.debug("Sending: %s %s", request.method, request.url)
        try:
            response = self._http.send(request)
        except httpx.RequestError as exc:
            raise TransportError(f"{request.method} {request.url} failed: {exc}") from exc

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            _LOG.warning(
                "GitHub responded with error",
                extra={"method": request.method, "url": str(request.url), "status_code": response.status_code},
            )
            raise TransportError(str(exc), status_code=response.status_code) from exc
        return response

    @staticmethod
    def _decode(response: httpx.Response, model: type[ModelT]) -> ModelT:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            raise ResponseDecodeError(f"unexpected response body from {response.request.url}: {exc}") from exc
