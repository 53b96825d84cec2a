"""Value types shared by the portier_auth services."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """What a verified session token says about its bearer."""

    user_id: UUID
    issued_at: datetime
    exp: datetime
