"""Authentication schemas for request/response models."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from portier.presentation.api.schemas.users import UserResponse


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=6,
        description="Password (at least 6 characters)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "password": "analytical",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login.

    The email is a plain string: a malformed address is just another
    failed login.
    """

    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "ada@example.com",
                "password": "analytical",
            },
        },
    )


class AuthResponse(BaseModel):
    """Response schema for register and login."""

    token: str
    user: UserResponse
