from portier_auth.persistence.sqlalchemy.repositories.user_credential_repository import (  # noqa: E501
    UserCredentialRepositorySQLAlchemy,
)

__all__ = ["UserCredentialRepositorySQLAlchemy"]
