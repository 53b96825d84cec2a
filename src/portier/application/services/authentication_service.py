"""Authentication service for user registration and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from portier.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
)
from portier_auth import (
    InvalidCredentialsError,
    JWTService,
    PasswordHashingService,
)
from portier_auth.repositories import UserCredentialRepository

if TYPE_CHECKING:
    from portier.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates portier_auth infrastructure (password hashing, JWT tokens)
    with the User domain to provide:
    - User registration
    - Login with password

    Both operations return the user together with a freshly issued
    session token.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    def _issue_token(self, user: User) -> str:
        return self._jwt_service.create_access_token(user_id=user.id)

    async def register(
        self,
        name: str,
        email: str,
        password: str,
    ) -> tuple[User, str]:
        # Validate before touching the store so bad input never hits the DB
        user = User.create(name=name, email=email)
        password_hash = self._password_service.hash(password)

        if await self._user_repo.exists_by_email(user.email_obj):
            raise EmailAlreadyExistsError(user.email)

        # save() raises EmailAlreadyExistsError if a concurrent request
        # registered the same address first
        await self._user_repo.save(user)
        await self._credential_repo.save(user_id=user.id, password_hash=password_hash)

        logger.info("User registered: %s", user.email)
        return user, self._issue_token(user)

    async def login(
        self,
        email: str,
        password: str,
    ) -> tuple[User, str]:
        try:
            normalized = Email(email)
        except InvalidEmailError:
            raise InvalidCredentialsError from None

        user = await self._user_repo.find_by_email(normalized)
        if user is None:
            logger.debug("Login failed: unknown email")
            raise InvalidCredentialsError

        credential = await self._credential_repo.find_by_user_id(user.id)
        if credential is None:
            logger.warning("Login failed: no credentials stored for %s", user.id)
            raise InvalidCredentialsError

        if not self._password_service.verify(password, credential.password_hash):
            logger.debug("Login failed: wrong password for %s", user.id)
            raise InvalidCredentialsError

        if self._password_service.needs_rehash(credential.password_hash):
            new_hash = self._password_service.hash(password)
            await self._credential_repo.save(user_id=user.id, password_hash=new_hash)
            logger.info("Rehashed password for user: %s", user.id)

        await self._credential_repo.update_last_login(user.id)

        logger.info("User logged in: %s", user.email)
        return user, self._issue_token(user)
