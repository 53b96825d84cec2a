"""Durable storage for the client session."""

import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import ValidationError

from portier.client.exceptions import SessionStorageError
from portier.client.models import SessionData

logger = logging.getLogger(__name__)


class SessionStorage(ABC):
    """Port for persisting the session between client runs."""

    @abstractmethod
    def load(self) -> SessionData | None:
        """Return the stored session, or None if there is none."""

    @abstractmethod
    def save(self, data: SessionData) -> None:
        """Replace the stored session."""

    @abstractmethod
    def clear(self) -> None:
        """Remove the stored session. No-op if nothing is stored."""


class MemorySessionStorage(SessionStorage):
    """Keeps the session in process memory only."""

    def __init__(self, data: SessionData | None = None) -> None:
        self._data = data

    def load(self) -> SessionData | None:
        return self._data

    def save(self, data: SessionData) -> None:
        self._data = data

    def clear(self) -> None:
        self._data = None


class FileSessionStorage(SessionStorage):
    """Stores the session as a JSON file readable by its owner only.

    A file that cannot be read or parsed is treated as no session: the
    user simply has to log in again.
    """

    FILE_MODE = 0o600

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()
        logger.debug("FileSessionStorage: path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> SessionData | None:
        if not self._path.exists():
            return None

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            return SessionData.model_validate(raw)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.warning(
                "Ignoring unreadable session file %s: %s",
                self._path,
                e,
            )
            return None

    def save(self, data: SessionData) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            # Create with owner-only permissions before writing the token
            fd = os.open(
                self._path,
                os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
                self.FILE_MODE,
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data.model_dump_json(indent=2))
            os.chmod(self._path, self.FILE_MODE)
        except OSError as e:
            raise SessionStorageError(
                f"Failed to write session file: {self._path}",
            ) from e

        logger.debug("FileSessionStorage: saved session path=%s", self._path)

    def clear(self) -> None:
        try:
            self._path.unlink()
            logger.debug("FileSessionStorage: removed path=%s", self._path)
        except FileNotFoundError:
            return
        except OSError as e:
            raise SessionStorageError(
                f"Failed to remove session file: {self._path}",
            ) from e
