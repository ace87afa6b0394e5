"""End-to-end tests for the HTTP API."""

import httpx
import pytest

from prompt_engineer.api.dependencies import (
    get_current_user,
    get_generation_service,
    get_library_service,
)
from prompt_engineer.integrations.openrouter import OpenRouterClient
from prompt_engineer.services.generation_service import API_FAILED_NOTICE, GenerationService


def model_transport(status_code=200, content="## Enhanced prompt\n- with **detail**"):
    """Stand-in for the model endpoint answering every request the same way."""

    def handler(request: httpx.Request) -> httpx.Response:
        if status_code != 200:
            return httpx.Response(status_code, text="unavailable")
        return httpx.Response(200, json={"choices": [{"message": {"content": content}}]})

    return httpx.MockTransport(handler)


def use_generation_service(app, transport):
    client = OpenRouterClient(
        api_key="test-key", base_url="https://openrouter.test/api/v1", transport=transport
    )
    service = GenerationService(client=client)
    app.dependency_overrides[get_generation_service] = lambda: service
    return service


@pytest.fixture
def signed_in(app, library_service, test_user):
    app.dependency_overrides[get_library_service] = lambda: library_service
    app.dependency_overrides[get_current_user] = lambda: test_user
    return test_user


async def test_health(async_client):
    response = await async_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


async def test_render_markdown(async_client):
    response = await async_client.post(
        "/api/markdown/render", json={"markdown": "# Title\n<script>"}
    )

    assert response.status_code == 200
    html = response.json()["html"]
    assert "<h1" in html
    assert "&lt;script&gt;" in html
    assert "<script>" not in html


async def test_fallback_endpoint(async_client):
    response = await async_client.post(
        "/api/prompts/fallback",
        json={"user_input": "Build me a mobile app for tracking workouts"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["used_fallback"] is True
    assert data["classification"] == "app_dev"
    assert data["enhanced_prompt"].startswith("# APP DEVELOPMENT PROMPT")
    assert data["html"]


async def test_generate_rejects_blank_input(app, async_client):
    use_generation_service(app, model_transport())

    response = await async_client.post("/api/prompts/generate", json={"user_input": "  "})

    assert response.status_code == 400
    assert response.json()["detail"] == "Please enter some text to generate a prompt"


async def test_generate_with_model(app, async_client):
    service = use_generation_service(app, model_transport())

    response = await async_client.post(
        "/api/prompts/generate",
        json={"user_input": "A cooking blog", "prompt_type": "creative"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["used_fallback"] is False
    assert data["enhanced_prompt"] == "## Enhanced prompt\n- with **detail**"
    assert "<strong" in data["html"]
    assert data["api_status"]["working"] is True
    assert service.api_status.tested is True


async def test_generate_falls_back_when_model_fails(app, async_client):
    service = use_generation_service(app, model_transport())
    await service.test_connection()
    service.client.transport = model_transport(status_code=503)

    response = await async_client.post(
        "/api/prompts/generate", json={"user_input": "A cooking blog"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["used_fallback"] is True
    assert data["notice"] == API_FAILED_NOTICE
    assert data["api_status"]["working"] is False


async def test_llm_diagnostics(app, async_client):
    use_generation_service(app, model_transport(status_code=401))

    response = await async_client.get("/api/diagnostics/llm")

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["status_code"] == 401


async def test_library_requires_sign_in(async_client):
    response = await async_client.get("/api/library/prompts")

    assert response.status_code == 401


async def test_library_crud(async_client, signed_in):
    created = await async_client.post(
        "/api/library/prompts",
        json={
            "original_text": "Portfolio site for a photographer",
            "enhanced_prompt": "# WEB DEVELOPMENT PROMPT",
            "prompt_type": "general",
        },
    )
    assert created.status_code == 201
    prompt = created.json()
    assert prompt["user_id"] == signed_in.id
    assert prompt["title"] == "Portfolio site for a photographer"

    listing = await async_client.get("/api/library/prompts", params={"search": "PHOTO"})
    assert listing.status_code == 200
    assert listing.json()["total"] == 1
    assert listing.json()["search"] == "PHOTO"

    updated = await async_client.patch(
        f"/api/library/prompts/{prompt['id']}", json={"enhanced_prompt": "edited"}
    )
    assert updated.status_code == 200
    assert updated.json()["enhanced_prompt"] == "edited"

    deleted = await async_client.delete(f"/api/library/prompts/{prompt['id']}")
    assert deleted.status_code == 204

    missing = await async_client.get(f"/api/library/prompts/{prompt['id']}")
    assert missing.status_code == 404


async def test_save_blank_prompt(async_client, signed_in):
    response = await async_client.post(
        "/api/library/prompts",
        json={"original_text": "idea", "enhanced_prompt": ""},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "No prompt to save"


async def test_me(async_client, signed_in):
    response = await async_client.get("/api/auth/me")

    assert response.status_code == 200
    assert response.json()["id"] == signed_in.id


async def test_logout_without_token(async_client):
    response = await async_client.post("/api/auth/logout")

    assert response.status_code == 401
