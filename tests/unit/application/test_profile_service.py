"""Unit tests for ProfileService."""

from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

from portier.application.services import ProfileService
from portier.domain.user import (
    EmailAlreadyExistsError,
    InvalidNameError,
    User,
    UserNotFoundError,
)
from portier_auth import PasswordHashingService, WeakPasswordError


class TestProfileService:
    """Tests for reading and updating profiles."""

    def setup_method(self):
        """Set up test fixtures."""
        self.user_repo = AsyncMock()
        self.credential_repo = AsyncMock()
        self.password_service = Mock(spec=PasswordHashingService)
        self.service = ProfileService(
            user_repository=self.user_repo,
            credential_repository=self.credential_repo,
            password_service=self.password_service,
        )
        self.user = User.create("Ada", "ada@example.com")
        self.user_repo.find_by_id.return_value = self.user
        self.user_repo.exists_by_email.return_value = False

    @pytest.mark.asyncio
    async def test_get_profile_returns_user(self):
        user = await self.service.get_profile(self.user.id)

        assert user == self.user

    @pytest.mark.asyncio
    async def test_get_profile_missing_user_raises(self):
        """A token for a deleted user resolves to not-found."""
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.service.get_profile(uuid4())

    @pytest.mark.asyncio
    async def test_update_name_only_leaves_email_and_password(self):
        """Only the provided field changes."""
        updated = await self.service.update_profile(self.user.id, name="Ada Lovelace")

        assert updated.name == "Ada Lovelace"
        assert updated.email == "ada@example.com"
        self.password_service.hash.assert_not_called()
        self.credential_repo.save.assert_not_called()
        self.user_repo.exists_by_email.assert_not_called()
        self.user_repo.save.assert_called_once_with(self.user)

    @pytest.mark.asyncio
    async def test_update_email_checks_uniqueness_excluding_self(self):
        updated = await self.service.update_profile(
            self.user.id,
            email="Lovelace@Example.com",
        )

        assert updated.email == "lovelace@example.com"
        self.user_repo.exists_by_email.assert_called_once()
        assert (
            self.user_repo.exists_by_email.call_args.kwargs["exclude_user_id"]
            == self.user.id
        )

    @pytest.mark.asyncio
    async def test_update_to_own_email_is_not_a_conflict(self):
        """Re-submitting the current email is a no-op, not a duplicate."""
        self.user_repo.exists_by_email.return_value = True

        updated = await self.service.update_profile(
            self.user.id,
            email="ADA@example.com",
        )

        assert updated.email == "ada@example.com"
        self.user_repo.exists_by_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_email_taken_by_other_user_raises(self):
        self.user_repo.exists_by_email.return_value = True

        with pytest.raises(EmailAlreadyExistsError):
            await self.service.update_profile(self.user.id, email="taken@example.com")

        assert self.user.email == "ada@example.com"
        self.user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_password_rehashes_into_credentials(self):
        self.password_service.hash.return_value = "new_hash"

        updated = await self.service.update_profile(self.user.id, password="n3w-pass")

        self.password_service.hash.assert_called_once_with("n3w-pass")
        self.credential_repo.save.assert_called_once_with(
            user_id=self.user.id,
            password_hash="new_hash",
        )
        assert updated.name == "Ada"

    @pytest.mark.asyncio
    async def test_invalid_field_rejects_whole_update(self):
        """A bad password leaves a valid name change unapplied."""
        self.password_service.hash.side_effect = WeakPasswordError("Too short")

        with pytest.raises(WeakPasswordError):
            await self.service.update_profile(
                self.user.id,
                name="Ada Lovelace",
                password="abc",
            )

        assert self.user.name == "Ada"
        self.user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self):
        with pytest.raises(InvalidNameError):
            await self.service.update_profile(self.user.id, name="   ")

    @pytest.mark.asyncio
    async def test_update_missing_user_raises(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.service.update_profile(uuid4(), name="Ghost")

    @pytest.mark.asyncio
    async def test_list_users(self):
        other = User.create("Grace", "grace@example.com")
        self.user_repo.list_all.return_value = [self.user, other]

        users = await self.service.list_users()

        assert users == [self.user, other]
