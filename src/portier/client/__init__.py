"""Python client for the Portier API.

The :class:`SessionManager` owns the session token and user snapshot;
:class:`PortierClient` talks to the API and keeps the session up to date.
"""

from portier.client.api_client import PortierClient
from portier.client.exceptions import (
    ApiError,
    ClientError,
    NotLoggedInError,
    SessionStorageError,
)
from portier.client.models import SessionData, UserSnapshot
from portier.client.session import SessionManager
from portier.client.storage import (
    FileSessionStorage,
    MemorySessionStorage,
    SessionStorage,
)

__all__ = [
    "ApiError",
    "ClientError",
    "FileSessionStorage",
    "MemorySessionStorage",
    "NotLoggedInError",
    "PortierClient",
    "SessionData",
    "SessionManager",
    "SessionStorage",
    "UserSnapshot",
]
