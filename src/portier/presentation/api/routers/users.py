"""User router: the caller's profile and the user directory."""

import logging

from fastapi import APIRouter

from portier.presentation.api.dependencies import (
    CurrentUser,
    DBSession,
    ProfileServiceDep,
)
from portier.presentation.api.schemas.users import (
    UpdateProfileRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/profile",
    summary="Get current user profile",
    responses={
        200: {"description": "Profile of the authenticated user"},
        401: {"description": "Not authenticated"},
        404: {"description": "User no longer exists"},
    },
)
async def get_profile(
    current_user: CurrentUser,
    profile_service: ProfileServiceDep,
) -> UserResponse:
    user = await profile_service.get_profile(current_user.user_id)
    return UserResponse.from_domain(user)


@router.put(
    "/profile",
    summary="Update current user profile",
    responses={
        200: {"description": "Profile updated"},
        400: {"description": "Invalid input or email already registered"},
        401: {"description": "Not authenticated"},
        404: {"description": "User no longer exists"},
    },
)
async def update_profile(
    request: UpdateProfileRequest,
    current_user: CurrentUser,
    profile_service: ProfileServiceDep,
    session: DBSession,
) -> UserResponse:
    """
    Update any subset of name, email and password.

    Fields left out of the body keep their current values.
    """
    user = await profile_service.update_profile(
        current_user.user_id,
        name=request.name,
        email=request.email,
        password=request.password,
    )
    await session.commit()

    return UserResponse.from_domain(user)


@router.get(
    "",
    summary="List users",
    responses={
        200: {"description": "All registered users"},
        401: {"description": "Not authenticated"},
    },
)
async def list_users(
    current_user: CurrentUser,
    profile_service: ProfileServiceDep,
) -> list[UserResponse]:
    users = await profile_service.list_users()
    logger.debug("Listed %d users for %s", len(users), current_user.user_id)
    return [UserResponse.from_domain(user) for user in users]
