"""Request-scoped wiring for the Portier API.

One engine and sessionmaker per configured database; one database session, one pair of
repositories and one service instance per request. Protected routes take
:data:`CurrentUser`, which runs the access guard.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from fastapi.dependencies.models import Dependant
from fastapi.routing import APIRoute
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from fastapi.security.utils import get_authorization_scheme_param
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from portier.application.context import UserContext
from portier.application.services import (
    AuthenticationService,
    ProfileService,
    authenticate_token,
)
from portier.infrastructure.persistence.sqlalchemy.models import Base
from portier.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from portier.presentation.api.config import get_api_settings
from portier_auth import InvalidTokenError, JWTService, PasswordHashingService
from portier_auth.persistence.sqlalchemy import (
    AuthBase,
    UserCredentialRepositorySQLAlchemy,
)
from portier_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# auto_error=False so a missing header reaches the guard and gets the
# same 401 body as a bad token
bearer_scheme = HTTPBearer(auto_error=False)


def get_database_url(settings: Settings | None = None) -> str:
    return (settings or get_settings()).database_url


@lru_cache()
def _engine_for(url: str, echo: bool) -> AsyncEngine:
    # One engine (and pool) per distinct database
    if url.startswith("sqlite") and ":memory:" not in url:
        Path(url.split("///", 1)[-1]).parent.mkdir(parents=True, exist_ok=True)
    return create_async_engine(url, echo=echo, pool_pre_ping=True)


@lru_cache()
def _session_maker_for(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


def get_engine(settings: Settings | None = None) -> AsyncEngine:
    """Shared engine for ``settings`` (the environment's when omitted).

    SQLite files get their parent folder created on first use.
    """
    settings = settings or get_settings()
    return _engine_for(get_database_url(settings), settings.database_echo)


def get_session_maker(
    settings: Settings | None = None,
) -> async_sessionmaker[AsyncSession]:
    return _session_maker_for(get_engine(settings))


def reset_database_state() -> None:
    """Drop the cached engines and sessionmakers.

    Call after changing settings. Disposing an engine that was already
    handed out is up to the caller.
    """
    _engine_for.cache_clear()
    _session_maker_for.cache_clear()


async def get_db_session(
    settings: Settings = Depends(get_api_settings),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session for one request, bound to the app's database.

    Routes commit explicitly; whatever they leave uncommitted is rolled
    back when the session closes.
    """
    async with get_session_maker(settings)() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """Create the user and credential tables if they are missing.

    The two live on separate metadata objects, so both are created.
    """
    engine = engine or get_engine()
    async with engine.begin() as conn:
        for metadata in (Base.metadata, AuthBase.metadata):
            await conn.run_sync(metadata.create_all)
    logger.info("Database tables ready")


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service(
    settings: Settings = Depends(get_api_settings),
) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.password_hash_rounds)


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        credential_repository=UserCredentialRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


async def get_profile_service(
    session: DBSession,
    password_service: PasswordHashingService = Depends(get_password_service),
) -> ProfileService:
    return ProfileService(
        user_repository=UserRepositorySQLAlchemy(session),
        credential_repository=UserCredentialRepositorySQLAlchemy(session),
        password_service=password_service,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]
ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> UserContext:
    """Access guard for protected routes.

    Verifies the bearer token and records the caller's id on
    ``request.state.user_id``. It does not look the user up; a token
    for a deleted account passes here and the service reports the
    missing user.

    Raises
    ------
    InvalidTokenError
        Missing, malformed, tampered or expired token
    """
    token = credentials.credentials if credentials else None

    try:
        user_context = authenticate_token(token, jwt_service)
    except InvalidTokenError as e:
        logger.warning(
            "Token rejected for %s %s: %s",
            request.method,
            request.url.path,
            e.message,
        )
        raise

    request.state.user_id = user_context.user_id
    return user_context


CurrentUser = Annotated[UserContext, Depends(get_current_user)]


def _depends_on_guard(dependant: Dependant) -> bool:
    return any(
        sub.call is get_current_user or _depends_on_guard(sub)
        for sub in dependant.dependencies
    )


def route_requires_user(request: Request) -> bool:
    """Tell whether the route that matched ``request`` is behind the guard."""
    route = request.scope.get("route")
    return isinstance(route, APIRoute) and _depends_on_guard(route.dependant)


def authenticate_request(request: Request) -> UserContext:
    """Run the access guard on a raw request, outside dependency injection.

    FastAPI parses the JSON body before any dependency runs, so a protected
    route with an unparseable body fails before :func:`get_current_user`
    is reached. The error handlers use this to check the token first.

    Raises
    ------
    InvalidTokenError
        Same conditions as :func:`get_current_user`
    """
    scheme, token = get_authorization_scheme_param(
        request.headers.get("Authorization"),
    )
    provide_settings = request.app.dependency_overrides.get(
        get_api_settings,
        get_api_settings,
    )
    jwt_service = get_jwt_service(provide_settings())
    return authenticate_token(
        token if scheme.lower() == "bearer" else None,
        jwt_service,
    )
