"""Portier configuration.

Values come from, highest priority first:

1. process environment
2. the file named by ``PORTIER_ENV_FILE`` (relative paths resolve against
   the project root)
3. ``config/.env.dev``, then ``config/.env``
4. the defaults below

Server and client settings are separate classes so the CLI never needs
the server's JWT secret.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ROOT_MARKERS = ("config", "pyproject.toml")


def _find_project_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def get_config_dir() -> Path:
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    explicit = os.environ.get("PORTIER_ENV_FILE")
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.is_file():
            return path

    for name in (".env.dev", ".env"):
        path = get_config_dir() / name
        if path.is_file():
            return path
    return None


_ENV_FILE = _resolve_env_file_path()


class Settings(BaseSettings):
    """Server settings (API, token issuing, password hashing, database)."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Required; there is no safe default for a signing key
    jwt_secret_key: SecretStr
    jwt_access_token_expire_hours: int = 24

    # bcrypt cost factor
    password_hash_rounds: int = 12

    app_name: str = "Portier"

    database_url: str = "sqlite+aiosqlite:///./data/portier.db"
    database_echo: bool = False

    api_host: str = "0.0.0.0"
    api_port: int = 5000
    # Also exposes /docs and /openapi.json
    api_debug: bool = False
    # Comma-separated; empty disables CORS
    api_cors_origins: str = ""

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, v: Any) -> str:
        if isinstance(v, (list, tuple)):
            return ",".join(v)
        return str(v) if v else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]


class ClientSettings(BaseSettings):
    """Command-line client settings, read from ``CLIENT_*`` variables."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix="CLIENT_",
        extra="ignore",
    )

    base_url: str = "http://localhost:5000"
    session_file: Path = Path.home() / ".config" / "portier" / "session.json"
    timeout: float = 10.0


@lru_cache()
def get_settings() -> Settings:
    """Server settings, built once per process.

    Raises pydantic's ``ValidationError`` when ``JWT_SECRET_KEY`` is unset.
    """
    return Settings()  # type: ignore[call-arg]


@lru_cache()
def get_client_settings() -> ClientSettings:
    return ClientSettings()


def clear_settings_cache() -> None:
    get_settings.cache_clear()
    get_client_settings.cache_clear()
