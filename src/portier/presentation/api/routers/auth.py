"""Authentication router for user registration and login."""

import logging

from fastapi import APIRouter, status

from portier.presentation.api.dependencies import AuthService, DBSession
from portier.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
)
from portier.presentation.api.schemas.users import UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Invalid input or email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    """
    Create an account and return a session token for it.

    The response contains the new user's public profile, never the
    password or its hash.
    """
    user, token = await auth_service.register(
        name=request.name,
        email=request.email,
        password=request.password,
    )
    await session.commit()

    return AuthResponse(token=token, user=UserResponse.from_domain(user))


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    """
    Authenticate with email and password.

    Unknown email and wrong password produce the same 401 response.
    """
    user, token = await auth_service.login(
        email=request.email,
        password=request.password,
    )
    # Persist last-login timestamp and any password rehash
    await session.commit()

    return AuthResponse(token=token, user=UserResponse.from_domain(user))
