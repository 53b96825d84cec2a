"""Session tokens for Portier.

A session token is an HS256 JWT whose claims are limited to the user id
(``sub``) plus issue and expiry times. Profile data never goes into it.
"""

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import jwt

from portier_auth.exceptions import InvalidTokenError
from portier_auth.schemas import TokenPayload


def _from_epoch(seconds: Any) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


class JWTService:
    """Issue and verify session tokens.

    There are no refresh tokens. When a token expires the client logs in
    again.

    Examples
    --------
    >>> tokens = JWTService(secret_key="s3cret")
    >>> token = tokens.create_access_token(user.id)
    >>> tokens.verify_token(token).user_id == user.id
    True
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 24
    ALGORITHM = "HS256"
    REQUIRED_CLAIMS = ("sub", "exp")

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._lifetime = timedelta(hours=access_token_expire_hours)

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._lifetime

    def create_access_token(
        self,
        user_id: UUID,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Sign a token for ``user_id``.

        ``expires_delta`` replaces the configured lifetime; a negative value
        yields a token that is already expired.
        """
        issued_at = datetime.now(tz=timezone.utc)
        claims = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + (expires_delta or self._lifetime),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Check the signature and expiry of ``token`` and decode it.

        Raises
        ------
        InvalidTokenError
            For any token that is expired, badly signed, structurally
            broken or whose subject is not a user id
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": list(self.REQUIRED_CLAIMS)},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        try:
            expires = _from_epoch(claims["exp"])
            return TokenPayload(
                user_id=UUID(claims["sub"]),
                issued_at=_from_epoch(claims.get("iat", claims["exp"])),
                exp=expires,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
