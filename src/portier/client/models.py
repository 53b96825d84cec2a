"""Data carried by the client session."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class UserSnapshot(BaseModel):
    """Client-side copy of the public user record."""

    id: UUID
    name: str
    email: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class SessionData(BaseModel):
    """A session token together with the user it was issued for.

    This is both the shape of the register/login response body and what
    gets persisted between runs.
    """

    token: str
    user: UserSnapshot

    model_config = ConfigDict(extra="ignore", frozen=True)

    @classmethod
    def parse(cls, data: "SessionData | dict[str, Any]") -> "SessionData":
        if isinstance(data, SessionData):
            return data
        return cls.model_validate(data)
