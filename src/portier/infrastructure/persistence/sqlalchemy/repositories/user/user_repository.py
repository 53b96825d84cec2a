"""User store backed by the ``users`` table."""

import logging
from typing import Union
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from portier.domain.shared.time import ensure_tz_aware
from portier.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserRepository,
)
from portier.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


def _normalized(email: Union[str, Email]) -> str:
    return email.value if isinstance(email, Email) else Email(email).value


class UserRepositorySQLAlchemy(UserRepository):
    """Persists :class:`User` aggregates.

    The unique index on ``users.email`` is the final word on duplicates:
    a violation surfacing at flush time becomes ``EmailAlreadyExistsError``
    even when the service's own pre-check raced with another request.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        row = await self._session.get(UserModel, user_id)
        return None if row is None else self._to_user(row)

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        result = await self._session.execute(
            select(UserModel).where(UserModel.email == _normalized(email)),
        )
        row = result.scalar_one_or_none()
        return None if row is None else self._to_user(row)

    async def exists_by_email(
        self,
        email: Union[str, Email],
        exclude_user_id: UUID | None = None,
    ) -> bool:
        stmt = select(UserModel.id).where(UserModel.email == _normalized(email))
        if exclude_user_id is not None:
            stmt = stmt.where(UserModel.id != exclude_user_id)
        result = await self._session.execute(stmt.limit(1))
        return result.first() is not None

    async def save(self, user: User) -> None:
        row = await self._session.get(UserModel, user.id)
        if row is None:
            self._session.add(
                UserModel(
                    id=user.id,
                    name=user.name,
                    email=user.email,
                    created_at=user.created_at,
                    updated_at=user.updated_at,
                ),
            )
        else:
            row.name = user.name
            row.email = user.email
            row.updated_at = user.updated_at

        try:
            await self._session.flush()
        except IntegrityError as e:
            if "unique" not in str(e.orig).lower():
                raise
            raise EmailAlreadyExistsError(user.email) from e

        logger.debug("Saved user %s", user.id)

    async def delete(self, user_id: UUID) -> None:
        row = await self._session.get(UserModel, user_id)
        if row is None:
            return
        await self._session.delete(row)
        await self._session.flush()
        logger.info("Deleted user %s", user_id)

    async def count(self) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(UserModel),
        )
        return result.scalar_one()

    async def list_all(self) -> list[User]:
        result = await self._session.execute(
            select(UserModel).order_by(UserModel.created_at, UserModel.id),
        )
        return [self._to_user(row) for row in result.scalars()]

    @staticmethod
    def _to_user(row: UserModel) -> User:
        # SQLite hands back naive datetimes
        return User.reconstitute(
            id=row.id,
            name=row.name,
            email=row.email,
            created_at=ensure_tz_aware(row.created_at),
            updated_at=ensure_tz_aware(row.updated_at),
        )
