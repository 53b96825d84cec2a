"""SQLAlchemy-backed credential store."""

from portier_auth.persistence.sqlalchemy.base import AuthBase
from portier_auth.persistence.sqlalchemy.models import UserCredentialModel
from portier_auth.persistence.sqlalchemy.repositories import (
    UserCredentialRepositorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "UserCredentialModel",
    "UserCredentialRepositorySQLAlchemy",
]
