"""Credential store backed by the ``user_credentials`` table."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portier.domain.shared.time import utc_now
from portier_auth.persistence.sqlalchemy.models import UserCredentialModel
from portier_auth.repositories import UserCredentialData, UserCredentialRepository

logger = logging.getLogger(__name__)


class UserCredentialRepositorySQLAlchemy(UserCredentialRepository):
    """Keeps one password hash row per user id.

    Writes are flushed but never committed; the caller owns the
    transaction so that a user and its credentials land together.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(
        self,
        user_id: UUID,
        password_hash: str,
    ) -> UserCredentialData:
        row = await self._row_for(user_id)

        if row is None:
            row = UserCredentialModel(user_id=str(user_id), password_hash=password_hash)
            self._session.add(row)
            logger.info("Stored credentials for user %s", user_id)
        else:
            row.password_hash = password_hash
            row.updated_at = utc_now()
            logger.debug("Replaced password hash for user %s", user_id)

        await self._session.flush()
        return _as_data(row)

    async def find_by_user_id(self, user_id: UUID) -> UserCredentialData | None:
        row = await self._row_for(user_id)
        return None if row is None else _as_data(row)

    async def update_last_login(self, user_id: UUID) -> None:
        row = await self._row_for(user_id)
        if row is None:
            return
        row.last_login_at = row.updated_at = utc_now()
        await self._session.flush()

    async def delete(self, user_id: UUID) -> bool:
        row = await self._row_for(user_id)
        if row is None:
            return False
        await self._session.delete(row)
        await self._session.flush()
        logger.info("Removed credentials for user %s", user_id)
        return True

    async def _row_for(self, user_id: UUID) -> UserCredentialModel | None:
        result = await self._session.execute(
            select(UserCredentialModel).where(
                UserCredentialModel.user_id == str(user_id),
            ),
        )
        return result.scalar_one_or_none()


def _as_data(row: UserCredentialModel) -> UserCredentialData:
    return UserCredentialData(
        user_id=row.user_id,
        password_hash=row.password_hash,
        last_login_at=row.last_login_at,
    )
