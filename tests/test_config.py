"""Tests for client configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ghresolve import __version__
from ghresolve.contracts.config import DEFAULT_API_BASE, ClientConfig


def test_defaults() -> None:
    config = ClientConfig()
    assert config.api_base == DEFAULT_API_BASE == "https://api.github.com/"
    assert config.token is None
    assert config.timeout == 30.0
    assert config.user_agent == f"ghresolve/{__version__}"


def test_api_base_gets_trailing_slash() -> None:
    assert ClientConfig(api_base="https://ghe.example.com/api/v3").api_base == "https://ghe.example.com/api/v3/"


def test_relative_api_base_rejected() -> None:
    with pytest.raises(ValidationError):
        ClientConfig(api_base="api.github.com")


def test_non_positive_timeout_rejected() -> None:
    with pytest.raises(ValidationError):
        ClientConfig(timeout=0)


def test_config_is_frozen() -> None:
    config = ClientConfig(token="tok")
    with pytest.raises(ValidationError):
        config.token = "other"  # type: ignore[misc]


def test_token_hidden_from_repr() -> None:
    assert "secret-token" not in repr(ClientConfig(token="secret-token"))


def test_from_env_reads_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "tok_123")
    assert ClientConfig.from_env().token == "tok_123"


def test_from_env_without_token_is_not_fatal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    assert ClientConfig.from_env().token is None


def test_from_env_reads_once(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "first")
    config = ClientConfig.from_env()
    monkeypatch.setenv("GITHUB_TOKEN", "second")
    assert config.token == "first"


def test_from_env_passes_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    config = ClientConfig.from_env(api_base="https://ghe.example.com/api/v3/", timeout=5.0)
    assert config.api_base == "https://ghe.example.com/api/v3/"
    assert config.timeout == 5.0
