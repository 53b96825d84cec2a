"""Profile service for reading and updating user profiles."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from portier.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserName,
    UserNotFoundError,
)
from portier_auth import PasswordHashingService
from portier_auth.repositories import UserCredentialRepository

if TYPE_CHECKING:
    from portier.domain.user import UserRepository

logger = logging.getLogger(__name__)


class ProfileService:
    """
    Application service for the authenticated user's profile.

    Updates are partial: a field passed as ``None`` is left untouched.
    Every provided field is validated before anything is written, so a
    rejected update leaves the stored profile unchanged.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._password_service = password_service

    async def get_profile(self, user_id: UUID) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    async def update_profile(
        self,
        user_id: UUID,
        name: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> User:
        """Apply a partial update to a user's profile.

        Parameters
        ----------
        user_id
            Id of the user being updated
        name
            New display name, or None to keep the current one
        email
            New email address, or None to keep the current one
        password
            New plaintext password, or None to keep the current one

        Returns
        -------
        The updated user

        Raises
        ------
        UserNotFoundError
            If the user no longer exists
        EmailAlreadyExistsError
            If another user already holds the new email
        InvalidNameError, InvalidEmailError, WeakPasswordError
            If a provided field is invalid
        """
        user = await self.get_profile(user_id)

        new_name = UserName(name) if name is not None else None
        new_email = Email(email) if email is not None else None
        new_hash = (
            self._password_service.hash(password) if password is not None else None
        )

        if new_email is not None and new_email.value != user.email:
            if await self._user_repo.exists_by_email(
                new_email,
                exclude_user_id=user.id,
            ):
                raise EmailAlreadyExistsError(new_email.value)
            user.change_email(new_email)

        if new_name is not None and new_name.value != user.name:
            user.rename(new_name)

        if new_hash is not None:
            await self._credential_repo.save(user_id=user.id, password_hash=new_hash)
            user.touch()

        await self._user_repo.save(user)

        logger.info("Profile updated for user: %s", user.id)
        return user

    async def list_users(self) -> list[User]:
        return await self._user_repo.list_all()
