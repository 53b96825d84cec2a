"""Client-side exceptions."""


class ClientError(Exception):
    """Base exception for the Portier client."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SessionStorageError(ClientError):
    """Raised when the session cannot be written or removed."""


class NotLoggedInError(ClientError):
    """Raised when a protected call is made without a session."""

    def __init__(self, message: str = "Not logged in"):
        super().__init__(message)


class ApiError(ClientError):
    """Raised for any non-2xx response or transport failure.

    Attributes
    ----------
    status_code
        HTTP status, or None if the server could not be reached
    message
        The server's user-facing ``detail`` message
    code
        The server's machine-readable error code, if any
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.code = code

    def __repr__(self) -> str:
        return (
            f"ApiError(status_code={self.status_code!r}, "
            f"code={self.code!r}, message={self.message!r})"
        )
