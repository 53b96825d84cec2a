"""Client session manager.

Single owner of the client's authentication state: the session token and
the snapshot of the logged-in user. Every change goes through one of its
methods, which keep memory and durable storage in step.
"""

import logging
from typing import Any

from portier.client.exceptions import NotLoggedInError
from portier.client.models import SessionData, UserSnapshot
from portier.client.storage import SessionStorage

logger = logging.getLogger(__name__)


class SessionManager:
    """Holds the current session and mirrors it to storage.

    Starts in the ``loading`` state until :meth:`hydrate` has read the
    persisted session once.

    Examples
    --------
    >>> manager = SessionManager(MemorySessionStorage())
    >>> manager.hydrate()
    >>> manager.is_authenticated
    False
    """

    def __init__(self, storage: SessionStorage) -> None:
        self._storage = storage
        self._token: str | None = None
        self._user: UserSnapshot | None = None
        self._loading = True

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def current_user(self) -> UserSnapshot | None:
        return self._user

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None and self._user is not None

    def hydrate(self) -> None:
        """Load the persisted session. Only the first call has an effect."""
        if not self._loading:
            return

        data = self._storage.load()
        if data is not None:
            self._token = data.token
            self._user = data.user
            logger.debug("Restored session for %s", data.user.email)

        self._loading = False

    def login(self, data: SessionData | dict[str, Any]) -> None:
        """Adopt a freshly issued session and persist it."""
        session = SessionData.parse(data)
        self._storage.save(session)
        self._token = session.token
        self._user = session.user
        self._loading = False
        logger.info("Logged in as %s", session.user.email)

    def logout(self) -> None:
        """Forget the session in memory and in storage."""
        self._storage.clear()
        self._token = None
        self._user = None
        logger.info("Logged out")

    def update_user(self, user: UserSnapshot | dict[str, Any]) -> None:
        """Replace the user snapshot, keeping the current token.

        Raises
        ------
        NotLoggedInError
            If there is no session to update
        """
        if self._token is None:
            raise NotLoggedInError

        snapshot = UserSnapshot.model_validate(user)

        self._storage.save(SessionData(token=self._token, user=snapshot))
        self._user = snapshot
