"""Errors raised by the user domain."""

from portier.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    default_code = ErrorCode.INVALID_EMAIL


class InvalidNameError(ValidationError):
    """Display name is blank or longer than allowed."""

    default_code = ErrorCode.INVALID_NAME


class EmailAlreadyExistsError(ValidationError):
    """Another account already uses this address."""

    default_code = ErrorCode.EMAIL_ALREADY_REGISTERED

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "Email address is already registered",
            details={"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    default_code = ErrorCode.USER_NOT_FOUND

    def __init__(self, user_id: object) -> None:
        self.user_id = user_id
        super().__init__("User not found", details={"user_id": str(user_id)})
