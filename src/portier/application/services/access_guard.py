"""Token check guarding every protected operation."""

from portier.application.context import UserContext
from portier_auth import InvalidTokenError, JWTService


def authenticate_token(token: str | None, jwt_service: JWTService) -> UserContext:
    """Resolve a bearer token to the identity it was issued for.

    Pure: no I/O and no side effects. The caller decides what to do with
    the resulting context.

    Raises
    ------
    InvalidTokenError
        If the token is missing, empty, malformed, tampered with or expired
    """
    if not token or not token.strip():
        msg = "Missing token"
        raise InvalidTokenError(msg)

    payload = jwt_service.verify_token(token.strip())
    return UserContext.from_payload(payload)
