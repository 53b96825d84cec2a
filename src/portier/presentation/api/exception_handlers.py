"""Translate exceptions raised inside request handlers into JSON errors.

Every error body has the same two keys::

    {"detail": "<message safe to show a user>", "code": "<ErrorCode value>"}

Register the handlers once on the app with :func:`setup_exception_handlers`.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from portier.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
)
from portier.presentation.api.dependencies import (
    authenticate_request,
    route_requires_user,
)
from portier_auth import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = "Not authorized"
_BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_NAME: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMAIL_ALREADY_REGISTERED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEAK_PASSWORD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _status_for(exc: DomainException) -> int:
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_400_BAD_REQUEST


def _error_body(
    status_code: int,
    detail: str,
    code: ErrorCode,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "code": code.value},
        headers=headers,
    )


def _unauthorized() -> JSONResponse:
    # Identical for missing, malformed, forged and expired tokens
    return _error_body(
        status.HTTP_401_UNAUTHORIZED,
        UNAUTHORIZED_MESSAGE,
        ErrorCode.UNAUTHENTICATED,
        headers=_BEARER_CHALLENGE,
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    """Summarize pydantic errors as one readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


def setup_exception_handlers(app: FastAPI) -> None:
    """Attach the Portier error handlers to ``app``.

    Parameters
    ----------
    app
        Application returned by ``create_app``
    """

    @app.exception_handler(DomainException)
    async def handle_domain_error(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        logger.warning(
            "%s %s rejected: %s [%s] %s",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )
        return _error_body(_status_for(exc), exc.message, exc.code)

    @app.exception_handler(AuthError)
    async def handle_auth_error(request: Request, exc: AuthError) -> JSONResponse:
        """Map portier_auth failures.

        Bad credentials get their own code so the login form can say so.
        Every other auth failure is reported as a plain 401.
        """
        if isinstance(exc, InvalidTokenError):
            return _unauthorized()

        logger.warning(
            "%s %s auth failure: %s",
            request.method,
            request.url.path,
            type(exc).__name__,
        )
        if isinstance(exc, InvalidCredentialsError):
            return _error_body(
                status.HTTP_401_UNAUTHORIZED,
                InvalidCredentialsError.default_message,
                ErrorCode.INVALID_CREDENTIALS,
            )
        if isinstance(exc, WeakPasswordError):
            return _error_body(
                status.HTTP_400_BAD_REQUEST,
                exc.message,
                ErrorCode.WEAK_PASSWORD,
            )
        return _unauthorized()

    @app.exception_handler(RequestValidationError)
    async def handle_bad_request(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Report a malformed request, unless the caller may not call at all.

        On guarded routes the token is checked first, so unauthenticated
        callers get the same 401 whatever they sent as a body.
        """
        if route_requires_user(request):
            try:
                authenticate_request(request)
            except InvalidTokenError:
                return _unauthorized()

        detail = _format_validation_errors(exc)
        logger.info(
            "%s %s invalid body: %s",
            request.method,
            request.url.path,
            detail,
        )
        return _error_body(
            status.HTTP_400_BAD_REQUEST,
            detail,
            ErrorCode.VALIDATION_ERROR,
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("%s %s crashed", request.method, request.url.path)
        return _error_body(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An internal error occurred",
            ErrorCode.INTERNAL_ERROR,
        )
