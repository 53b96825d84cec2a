"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from portier_auth import TokenPayload


@dataclass(frozen=True)
class UserContext:
    """
    Immutable context for the current authenticated user.

    Built by the access guard from a verified session token. It carries the
    user id only; the user record itself is loaded by the services that
    need it.
    """

    user_id: UUID

    @classmethod
    def from_payload(cls, payload: TokenPayload) -> UserContext:
        return cls(user_id=payload.user_id)

    def __str__(self) -> str:
        return f"UserContext({self.user_id})"
