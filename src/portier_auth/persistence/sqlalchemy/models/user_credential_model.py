"""``user_credentials`` table."""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from portier.domain.shared.time import utc_now
from portier_auth.persistence.sqlalchemy.base import AuthBase


def _timestamp(**kwargs) -> Mapped[datetime]:
    return mapped_column(DateTime(timezone=True), **kwargs)


class UserCredentialModel(AuthBase):
    """One password hash per user.

    ``user_id`` refers to ``users.id`` by value only; the credential store
    does not depend on the user tables.
    """

    __tablename__ = "user_credentials"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    user_id: Mapped[str] = mapped_column(String(36), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))

    created_at: Mapped[datetime] = _timestamp(default=utc_now)
    updated_at: Mapped[datetime] = _timestamp(default=utc_now, onupdate=utc_now)
    last_login_at: Mapped[datetime | None] = _timestamp(nullable=True)

    def __repr__(self) -> str:
        return f"<UserCredentialModel user_id={self.user_id}>"
