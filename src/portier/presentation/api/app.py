"""Portier API application factory.

Routers are mounted under ``/api``; ``/health`` stays at the root so load
balancers can probe it without knowing the prefix. Run it with::

    uvicorn portier.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portier.presentation.api.config import get_api_settings
from portier.presentation.api.dependencies import create_tables, get_engine
from portier.presentation.api.exception_handlers import setup_exception_handlers
from portier.presentation.api.routers import auth_router, users_router
from portier_config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_OWN_LOGGERS = ("portier", "portier_auth")
_CHATTY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite")


@lru_cache(maxsize=1)
def _configure_logging(level: str = "INFO") -> None:
    """Send log records to stdout; runs once per process and level."""
    resolved = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in _OWN_LOGGERS:
        logging.getLogger(name).setLevel(resolved)
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"
API_PREFIX = "/api"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Account registration and login.

- Passwords are hashed with bcrypt and never returned
- Login returns a signed JWT session token
- Send the token as `Authorization: Bearer <token>` on protected calls
""",
    },
    {
        "name": "Users",
        "description": "Profile of the authenticated user and the user directory.",
    },
    {
        "name": "Health",
        "description": "Liveness probe.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create missing tables on startup and close the pool on shutdown."""
    engine = get_engine(app.state.settings)
    logger.info("Portier API %s starting", API_VERSION)
    try:
        await create_tables(engine)
    except (ConnectionRefusedError, OSError) as e:
        logger.critical("Database unreachable: %s", e)
        raise SystemExit(1) from None

    yield

    await engine.dispose()
    logger.info("Portier API stopped")


def create_api_router() -> APIRouter:
    api_router = APIRouter()
    api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    api_router.include_router(users_router, prefix="/users", tags=["Users"])
    return api_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build a configured application.

    Parameters
    ----------
    settings
        Settings to use instead of the environment; tests pass their own.
    """
    settings = settings or get_settings()
    _configure_logging(settings.log_level)

    docs_enabled = settings.api_debug
    app = FastAPI(
        title=f"{settings.app_name} API",
        description="User registration, login and profile management.",
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings
    app.dependency_overrides[get_api_settings] = lambda: settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)
    app.include_router(create_api_router(), prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        return {"status": "healthy", "version": API_VERSION}

    return app
