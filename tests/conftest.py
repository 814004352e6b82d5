"""Shared test fixtures for ghresolve tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from ghresolve.contracts.config import ClientConfig
from ghresolve.github.client import GitHubApi

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    def graphql_payloads(self) -> list[dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(token="tok_123")


@pytest.fixture
def make_api(config: ClientConfig) -> Callable[..., tuple[GitHubApi, RecordingTransport]]:
    """Build a GitHubApi wired to a recording mock transport."""

    def _make(handler: Handler, *, api_config: ClientConfig | None = None) -> tuple[GitHubApi, RecordingTransport]:
        transport = RecordingTransport(handler)
        api = GitHubApi(
            api_config if api_config is not None else config,
            http_client=httpx.Client(transport=transport),
        )
        return api, transport

    return _make
