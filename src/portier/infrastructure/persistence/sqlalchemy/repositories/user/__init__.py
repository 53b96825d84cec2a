from portier.infrastructure.persistence.sqlalchemy.repositories.user.user_repository import (  # noqa: E501
    UserRepositorySQLAlchemy,
)

__all__ = ["UserRepositorySQLAlchemy"]
