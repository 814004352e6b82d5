"""User models decoded from GitHub responses."""

from __future__ import annotations

from pydantic import BaseModel, Field


class User(BaseModel):
    """A GitHub account as returned by ``GET /users/{login}``."""

    id: int
    login: str
    name: str | None = None
    email: str | None = None


class UserLogin(BaseModel):
    """``databaseId``/``login`` pair selected from a ``User`` node."""

    database_id: int = Field(alias="databaseId")
    login: str

    model_config = {"populate_by_name": True, "frozen": True}
