"""Persistence implementations for portier_auth.

Usage:
    from portier_auth.persistence.sqlalchemy import (
        AuthBase,
        UserCredentialModel,
        UserCredentialRepositorySQLAlchemy,
    )
"""
