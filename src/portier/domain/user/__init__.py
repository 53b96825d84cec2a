"""User domain manages user identity.

This domain handles:
- User aggregate (identity: id, name, email)
- Email and display name validation
- The repository port for user persistence
"""

from portier.domain.user.aggregates import User
from portier.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidNameError,
    UserNotFoundError,
)
from portier.domain.user.repositories import UserRepository
from portier.domain.user.value_objects import (
    Email,
    UserName,
)

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidNameError",
    "User",
    "UserName",
    "UserNotFoundError",
    "UserRepository",
]
