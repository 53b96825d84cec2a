"""Errors raised by portier_auth.

The API maps these to responses in ``exception_handlers``; nothing here
knows about HTTP.
"""


class AuthError(Exception):
    """Root of the portier_auth errors."""

    default_message = "Authentication error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Session token missing, malformed, forged or expired."""

    default_message = "Invalid or expired token"


class WeakPasswordError(AuthError):
    default_message = "Password does not meet requirements"


class InvalidCredentialsError(AuthError):
    """Login failed.

    Unknown email and wrong password share this error and its message.
    """

    default_message = "Invalid email or password"
