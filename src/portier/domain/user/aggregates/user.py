"""User aggregate."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from portier.domain.shared.time import utc_now
from portier.domain.user.value_objects import Email, UserName


class User:
    """
    User aggregate root.

    Holds identity data only. The password hash is owned by the credential
    store (portier_auth) and is never part of this object.
    """

    def __init__(
        self,
        name: Union[str, UserName],
        email: Union[str, Email],
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._name = name if isinstance(name, UserName) else UserName(name)
        self._email = email if isinstance(email, Email) else Email(email)
        self._id = id or uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name.value

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def rename(self, name: Union[str, UserName]) -> None:
        self._name = name if isinstance(name, UserName) else UserName(name)
        self._updated_at = utc_now()

    def change_email(self, email: Union[str, Email]) -> None:
        self._email = email if isinstance(email, Email) else Email(email)
        self._updated_at = utc_now()

    def touch(self) -> None:
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        name: Union[str, UserName],
        email: Union[str, Email],
    ) -> "User":
        return cls(name=name, email=email)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        name: Union[str, UserName],
        email: Union[str, Email],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
