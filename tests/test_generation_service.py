"""Tests for generation with offline fallback."""

from unittest.mock import AsyncMock

import httpx
import pytest

from prompt_engineer.exceptions import (
    EmptyResultError,
    HttpStatusError,
    MalformedResponseError,
    TransportError,
    ValidationError,
)
from prompt_engineer.integrations.openrouter import OpenRouterClient
from prompt_engineer.models.generation import ApiStatus, ConnectionCheck
from prompt_engineer.prompting import Classification
from prompt_engineer.services.generation_service import (
    API_FAILED_NOTICE,
    OFFLINE_NOTICE,
    GenerationService,
    build_instruction,
)

WORKOUT_IDEA = "Build me a mobile app for tracking workouts"


@pytest.fixture
def client():
    mock_client = AsyncMock(spec=OpenRouterClient)
    mock_client.test_connection.return_value = ConnectionCheck(
        success=True, message="API connection successful", status_code=200
    )
    mock_client.generate.return_value = "## Enhanced\n- step one"
    return mock_client


@pytest.fixture
def service(client):
    return GenerationService(client=client)


def test_instruction_embeds_type_and_idea():
    instruction = build_instruction("a cat cafe", "marketing")

    assert instruction.startswith('As a prompt engineer, enhance and structure this marketing idea: "a cat cafe".')


async def test_remote_success(service, client):
    result = await service.generate(WORKOUT_IDEA, "technical")

    assert result.used_fallback is False
    assert result.enhanced_prompt == "## Enhanced\n- step one"
    assert "<h2" in result.html and "<li" in result.html
    assert result.classification is None
    assert result.api_status.working is True
    client.generate.assert_awaited_once_with(build_instruction(WORKOUT_IDEA, "technical"), "technical")


async def test_connection_is_tested_only_once(service, client):
    await service.generate("first idea")
    await service.generate("second idea")

    assert client.test_connection.await_count == 1
    assert client.generate.await_count == 2


async def test_failed_connection_test_goes_offline(service, client):
    client.test_connection.return_value = ConnectionCheck(success=False, message="Connection error: down")

    result = await service.generate(WORKOUT_IDEA, "general")

    client.generate.assert_not_awaited()
    assert result.used_fallback is True
    assert result.notice == OFFLINE_NOTICE
    assert result.classification == Classification.APP_DEV
    assert result.enhanced_prompt.startswith("# APP DEVELOPMENT PROMPT")
    assert result.api_status.working is False
    assert result.api_status.message == "Connection error: down"


@pytest.mark.parametrize(
    "error",
    [
        TransportError("Connection error: reset"),
        HttpStatusError(500, "boom"),
        MalformedResponseError("Unexpected response format from API"),
        EmptyResultError("Received empty response"),
    ],
)
async def test_remote_failure_falls_back(service, client, error):
    client.generate.side_effect = error

    result = await service.generate("a story about the sea", "creative")

    assert result.used_fallback is True
    assert result.notice == API_FAILED_NOTICE
    assert result.classification == Classification.NONE
    assert "• Use vivid descriptive language and imagery" in result.enhanced_prompt
    assert result.api_status.tested is True
    assert result.api_status.working is False
    assert result.api_status.message == "API request failed"


async def test_blank_input_is_rejected(service, client):
    with pytest.raises(ValidationError, match="Please enter some text"):
        await service.generate("   ")

    client.test_connection.assert_not_awaited()


async def test_explicit_connection_test_updates_status(service, client):
    check = await service.test_connection()

    assert check.success is True
    assert service.api_status.tested is True
    assert service.api_status.message == "API connection successful"


def test_offline_only(service, client):
    result = service.fallback("Redesign our checkout UI", "general")

    assert result.used_fallback is True
    assert result.notice is None
    assert result.classification == Classification.UI_UX
    assert result.html.startswith("<h1")


async def test_undecodable_model_reply_falls_back():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b"\x80\x81 not json"))
    client = OpenRouterClient(api_key="test-key", base_url="https://openrouter.test/api/v1", transport=transport)
    service = GenerationService(client=client)
    service.api_status = ApiStatus(tested=True, working=True, message="API connection successful")

    result = await service.generate("Build me a mobile app")

    assert result.used_fallback is True
    assert result.notice == API_FAILED_NOTICE
    assert result.classification == Classification.APP_DEV
