"""GraphQL request/response envelopes."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, field_validator

from ghresolve.contracts.user import UserLogin

DataT = TypeVar("DataT")


class GraphQLRequest(BaseModel):
    query: str
    variables: dict[str, Any] = Field(default_factory=dict)


class GraphQLErrorEntry(BaseModel):
    message: str


class GraphQLResponse(BaseModel, Generic[DataT]):
    """Response envelope parameterised over the payload type.

    Non-empty ``errors`` make ``data`` unusable even when it is present.
    """

    data: DataT | None = None
    errors: list[GraphQLErrorEntry] = Field(default_factory=list)

    @field_validator("errors", mode="before")
    @classmethod
    def null_errors_are_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class UsernamesVariables(BaseModel):
    ids: list[str]


class UserNodes(BaseModel):
    """``nodes`` result aligned with the requested ids.

    Unknown ids come back as ``null``; nodes of another type match no
    fragment and come back as ``{}``. Both decode to None.
    """

    nodes: list[UserLogin | None]

    @field_validator("nodes", mode="before")
    @classmethod
    def empty_nodes_are_absent(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return [None if node == {} else node for node in value]
