"""Supabase Auth (GoTrue) REST client for sign-up, sign-in and session lookup."""

import logging
from typing import Any, Dict, Optional
import httpx

from ..config import settings
from ..exceptions import AuthRequiredError, IdentityProviderError
from ..models.auth import AuthSession, AuthUser

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response, default: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return default
    if not isinstance(body, dict):
        return default
    for key in ("error_description", "msg", "message", "error"):
        if body.get(key):
            return str(body[key])
    return default


def _json_object(response: httpx.Response) -> Dict[str, Any]:
    """Body of a successful response, which must be a JSON object."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        logger.error(f"Unexpected response from authentication service: {response.text[:200]}")
        raise IdentityProviderError("Unexpected response from authentication service")
    return body


def _parse_user(data: Any) -> AuthUser:
    if not isinstance(data, dict) or not data.get("id"):
        raise IdentityProviderError("Unexpected response from authentication service")
    return AuthUser(id=str(data["id"]), email=data.get("email"))


class SupabaseAuthClient:
    """Thin wrapper over the Supabase Auth endpoints the app needs."""

    def __init__(
        self,
        url: Optional[str] = None,
        anon_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = (url or settings.supabase_url or "").rstrip("/")
        self.anon_key = anon_key if anon_key is not None else settings.supabase_anon_key
        self.timeout = timeout if timeout is not None else settings.auth_timeout_seconds
        self.transport = transport

    @property
    def auth_url(self) -> str:
        return f"{self.url}/auth/v1"

    def _headers(self, access_token: Optional[str] = None) -> Dict[str, str]:
        headers = {"apikey": self.anon_key or "", "Content-Type": "application/json"}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        access_token: Optional[str] = None,
        **kwargs,
    ) -> httpx.Response:
        if not self.url or not self.anon_key:
            raise IdentityProviderError("Authentication service is not configured")
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                return await client.request(
                    method,
                    f"{self.auth_url}{path}",
                    headers=self._headers(access_token),
                    **kwargs,
                )
        except httpx.RequestError as e:
            logger.error(f"Auth request error: {str(e)}")
            raise IdentityProviderError("Failed to connect to authentication service")

    async def sign_up(self, email: str, password: str) -> AuthSession:
        """Create an account. The session is empty when email confirmation is required."""
        response = await self._request(
            "POST", "/signup", json={"email": email, "password": password}
        )
        if not response.is_success:
            message = _error_message(response, "Failed to create account")
            logger.error(f"Sign-up failed with status {response.status_code}: {message}")
            raise IdentityProviderError(message, status_code=response.status_code)

        data = _json_object(response)
        # Without email confirmation the body is a session, otherwise a bare user
        user_data = data.get("user") or (data if "id" in data else None)
        return AuthSession(
            access_token=data.get("access_token"),
            refresh_token=data.get("refresh_token"),
            expires_in=data.get("expires_in"),
            user=_parse_user(user_data) if user_data else None,
        )

    async def sign_in(self, email: str, password: str) -> AuthSession:
        """Exchange email and password for a session."""
        response = await self._request(
            "POST",
            "/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        if not response.is_success:
            message = _error_message(response, "Invalid login credentials")
            logger.warning(f"Sign-in failed with status {response.status_code}")
            raise IdentityProviderError(message, status_code=response.status_code)

        data = _json_object(response)
        return AuthSession(
            access_token=data.get("access_token"),
            refresh_token=data.get("refresh_token"),
            token_type=data.get("token_type", "bearer"),
            expires_in=data.get("expires_in"),
            user=_parse_user(data["user"]) if data.get("user") else None,
        )

    async def sign_out(self, access_token: str) -> None:
        """Revoke the session behind ``access_token``."""
        response = await self._request("POST", "/logout", access_token=access_token)
        if not response.is_success:
            message = _error_message(response, "Failed to sign out")
            logger.error(f"Sign-out failed with status {response.status_code}: {message}")
            raise IdentityProviderError(message, status_code=response.status_code)

    async def get_user(self, access_token: str) -> AuthUser:
        """Resolve an access token to its user, or raise AuthRequiredError."""
        response = await self._request("GET", "/user", access_token=access_token)
        if response.status_code in (401, 403):
            raise AuthRequiredError("Session expired or invalid, please sign in again")
        if not response.is_success:
            message = _error_message(response, "Failed to verify session")
            raise IdentityProviderError(message, status_code=response.status_code)
        return _parse_user(_json_object(response))
