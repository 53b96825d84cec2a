"""Declarative base for the credential tables.

Separate from the user models' ``Base``; both metadata objects must be
created at startup.
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    pass
