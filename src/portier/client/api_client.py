"""HTTP client for the Portier API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from portier.client.exceptions import ApiError, NotLoggedInError
from portier.client.models import SessionData, UserSnapshot
from portier.client.session import SessionManager

logger = logging.getLogger(__name__)


class PortierClient:
    """HTTP client wrapper for the Portier API.

    Register and login hand the returned session to the
    :class:`SessionManager`; protected calls attach its token as a bearer
    token. Errors surface as :class:`ApiError` carrying the server's
    message.

    Parameters
    ----------
    base_url
        Root URL of the API server, without the ``/api`` prefix
    session
        Session manager owning the token and user snapshot
    timeout
        Request timeout in seconds
    transport
        Optional httpx transport (used by tests)
    """

    API_PREFIX = "/api"

    def __init__(
        self,
        base_url: str,
        session: SessionManager,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._session = session
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def session(self) -> SessionManager:
        return self._session

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={"Content-Type": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> PortierClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def _auth_headers(self) -> dict[str, str]:
        self._session.hydrate()
        token = self._session.token
        if token is None:
            raise NotLoggedInError
        return {"Authorization": f"Bearer {token}"}

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        authenticated: bool = False,
    ) -> Any:
        headers = self._auth_headers() if authenticated else None
        client = await self._get_client()

        try:
            response = await client.request(
                method,
                f"{self.API_PREFIX}{path}",
                json=json,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            logger.warning("Request to %s timed out: %s", path, e)
            raise ApiError("The server did not respond in time") from e
        except httpx.TransportError as e:
            logger.warning("Request to %s failed: %s", path, e)
            raise ApiError(f"Could not reach the server at {self._base_url}") from e

        if response.is_success:
            return response.json()

        raise self._error_from_response(response)

    @staticmethod
    def _error_from_response(response: httpx.Response) -> ApiError:
        message = f"Request failed with status {response.status_code}"
        code = None
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            detail = body.get("detail")
            if isinstance(detail, str) and detail:
                message = detail
            code = body.get("code")

        logger.debug(
            "API error %d (%s): %s",
            response.status_code,
            code,
            message,
        )
        return ApiError(message, status_code=response.status_code, code=code)

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------

    async def register(self, name: str, email: str, password: str) -> UserSnapshot:
        body = await self._request(
            "POST",
            "/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        data = SessionData.model_validate(body)
        self._session.login(data)
        return data.user

    async def login(self, email: str, password: str) -> UserSnapshot:
        body = await self._request(
            "POST",
            "/auth/login",
            json={"email": email, "password": password},
        )
        data = SessionData.model_validate(body)
        self._session.login(data)
        return data.user

    def logout(self) -> None:
        self._session.logout()

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    async def get_profile(self) -> UserSnapshot:
        body = await self._request("GET", "/users/profile", authenticated=True)
        return UserSnapshot.model_validate(body)

    async def update_profile(
        self,
        name: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> UserSnapshot:
        """Send only the fields that were given and refresh the session user."""
        changes = {
            key: value
            for key, value in (("name", name), ("email", email), ("password", password))
            if value is not None
        }
        body = await self._request(
            "PUT",
            "/users/profile",
            json=changes,
            authenticated=True,
        )
        user = UserSnapshot.model_validate(body)
        self._session.update_user(user)
        return user

    async def list_users(self) -> list[UserSnapshot]:
        body = await self._request("GET", "/users", authenticated=True)
        return [UserSnapshot.model_validate(item) for item in body]
