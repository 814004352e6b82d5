"""Client configuration contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from ghresolve import __version__
from ghresolve.auth.resolvers.env import TOKEN_VAR, EnvTokenResolver

DEFAULT_API_BASE = "https://api.github.com/"


class ClientConfig(BaseModel):
    api_base: str = DEFAULT_API_BASE
    token: str | None = Field(default=None, repr=False)
    timeout: float = Field(default=30.0, gt=0)
    user_agent: str = f"ghresolve/{__version__}"
    token_var: str = TOKEN_VAR

    model_config = {"frozen": True}

    @field_validator("api_base")
    @classmethod
    def normalize_api_base(cls, value: str) -> str:
        base = value.strip()
        if not base.startswith(("https://", "http://")):
            raise ValueError("api_base must be an absolute http(s) URL")
        return base if base.endswith("/") else f"{base}/"

    @field_validator("token")
    @classmethod
    def blank_token_is_absent(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value

    @classmethod
    def from_env(cls, *, api_base: str = DEFAULT_API_BASE, timeout: float = 30.0) -> ClientConfig:
        """Build a config whose credential is read once from the environment."""
        return cls(api_base=api_base, token=EnvTokenResolver().resolve(), timeout=timeout)
