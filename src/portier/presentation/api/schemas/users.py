"""User schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from portier.domain.user import User


class UserResponse(BaseModel):
    """Response schema for user data. Never carries the password hash."""

    id: UUID
    name: str
    email: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UpdateProfileRequest(BaseModel):
    """Request schema for a partial profile update.

    Omitted (or null) fields are left unchanged.
    """

    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = None
    password: str | None = Field(
        default=None,
        min_length=6,
        description="New password (at least 6 characters)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ada Lovelace",
            },
        },
    )
