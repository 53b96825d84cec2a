from portier.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
)
from portier.presentation.api.schemas.users import (
    UpdateProfileRequest,
    UserResponse,
)

__all__ = [
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    "UpdateProfileRequest",
    "UserResponse",
]
