from portier.application.services.access_guard import authenticate_token
from portier.application.services.authentication_service import (
    AuthenticationService,
)
from portier.application.services.profile_service import ProfileService

__all__ = [
    "AuthenticationService",
    "ProfileService",
    "authenticate_token",
]
