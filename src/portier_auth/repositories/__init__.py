"""Repository interfaces for portier_auth.

The SQLAlchemy implementation lives in portier_auth.persistence.sqlalchemy.
"""

from portier_auth.repositories.user_credential_repository import (
    UserCredentialData,
    UserCredentialRepository,
)

__all__ = ["UserCredentialData", "UserCredentialRepository"]
