"""Tests for the Supabase Auth client."""

import httpx
import pytest
import respx

from prompt_engineer.exceptions import AuthRequiredError, IdentityProviderError
from prompt_engineer.integrations.supabase_auth import SupabaseAuthClient

AUTH_URL = "https://auth.test/auth/v1"


@pytest.fixture
def client():
    return SupabaseAuthClient(url="https://auth.test/", anon_key="anon-key")


@respx.mock
async def test_sign_in(client):
    route = respx.post(f"{AUTH_URL}/token", params={"grant_type": "password"}).mock(
        return_value=httpx.Response(
            200,
            json={
                "access_token": "access-123",
                "refresh_token": "refresh-123",
                "token_type": "bearer",
                "expires_in": 3600,
                "user": {"id": "user-1", "email": "a@example.com"},
            },
        )
    )

    session = await client.sign_in("a@example.com", "secret1")

    assert session.access_token == "access-123"
    assert session.user.id == "user-1"
    assert route.calls.last.request.headers["apikey"] == "anon-key"


@respx.mock
async def test_sign_in_rejected(client):
    respx.post(f"{AUTH_URL}/token").mock(
        return_value=httpx.Response(400, json={"error_description": "Invalid login credentials"})
    )

    with pytest.raises(IdentityProviderError, match="Invalid login credentials") as exc_info:
        await client.sign_in("a@example.com", "wrong")

    assert exc_info.value.status_code == 400


@respx.mock
async def test_sign_up_requiring_confirmation(client):
    respx.post(f"{AUTH_URL}/signup").mock(
        return_value=httpx.Response(200, json={"id": "user-2", "email": "b@example.com"})
    )

    session = await client.sign_up("b@example.com", "secret1")

    assert session.access_token is None
    assert session.user.id == "user-2"


@respx.mock
async def test_sign_up_rejected(client):
    respx.post(f"{AUTH_URL}/signup").mock(
        return_value=httpx.Response(422, json={"msg": "User already registered"})
    )

    with pytest.raises(IdentityProviderError, match="User already registered"):
        await client.sign_up("b@example.com", "secret1")


@respx.mock
async def test_get_user(client):
    route = respx.get(f"{AUTH_URL}/user").mock(
        return_value=httpx.Response(200, json={"id": "user-1", "email": "a@example.com"})
    )

    user = await client.get_user("access-123")

    assert user.id == "user-1"
    assert route.calls.last.request.headers["Authorization"] == "Bearer access-123"


@respx.mock
async def test_get_user_with_expired_token(client):
    respx.get(f"{AUTH_URL}/user").mock(return_value=httpx.Response(401, json={"msg": "expired"}))

    with pytest.raises(AuthRequiredError):
        await client.get_user("stale")


@respx.mock
async def test_sign_out(client):
    route = respx.post(f"{AUTH_URL}/logout").mock(return_value=httpx.Response(204))

    await client.sign_out("access-123")

    assert route.called


@respx.mock
async def test_unreachable_provider(client):
    respx.post(f"{AUTH_URL}/token").mock(side_effect=httpx.ConnectError("down"))

    with pytest.raises(IdentityProviderError, match="Failed to connect"):
        await client.sign_in("a@example.com", "secret1")


async def test_not_configured():
    client = SupabaseAuthClient(url="https://auth.test", anon_key="")

    with pytest.raises(IdentityProviderError, match="not configured"):
        await client.get_user("token")


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, content=b"not json"),
        httpx.Response(200, json=["user-1"]),
        httpx.Response(200, json={"email": "a@example.com"}),
    ],
)
@respx.mock
async def test_get_user_unexpected_body(client, response):
    respx.get(f"{AUTH_URL}/user").mock(return_value=response)

    with pytest.raises(IdentityProviderError, match="Unexpected response"):
        await client.get_user("access-123")


@respx.mock
async def test_sign_in_unexpected_body(client):
    respx.post(f"{AUTH_URL}/token").mock(return_value=httpx.Response(200, content=b"\x80\x81"))

    with pytest.raises(IdentityProviderError, match="Unexpected response"):
        await client.sign_in("a@example.com", "secret1")
