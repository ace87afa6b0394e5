"""OpenRouter chat-completions client used for remote prompt generation."""

import logging
from typing import Any, Dict, List, Optional
import httpx

from ..config import settings
from ..exceptions import (
    EmptyResultError,
    HttpStatusError,
    MalformedResponseError,
    TransportError,
)
from ..models.generation import ConnectionCheck

logger = logging.getLogger(__name__)

BASE_SYSTEM_PROMPT = (
    "You are a highly skilled prompt engineer. Your job is to take user inputs and "
    "transform them into effective, well-structured prompts for AI systems. Provide "
    "clear, detailed, and enhanced versions of user requests."
)

UI_UX_SYSTEM_SECTION = """
Your specialty is crafting detailed UI/UX improvement prompts.

When generating UI/UX prompts, always include:
1. Clear analysis of current UI issues
2. Detailed recommendations structured by component (navigation, forms, layout, etc.)
3. Specific color schemes with hex codes
4. Typography suggestions with font pairings
5. Accessibility considerations
6. Responsive design recommendations
7. User journey/flow improvements
8. Visual hierarchy enhancements
9. Interactive element design (buttons, forms, etc.)
10. Micro-interactions and animation suggestions

Include this standard UI evaluation criteria in all UI/UX prompts:
"The Current User interface is basic, not user-friendly and has a poor combination.
It needs more significant improvements to make it more professional, engaging, and visually appealing.
Please enhance the UI/UX across all the screens with a more attractive design, using a well-thought-out
colour scheme, that is both professional and visually striking. The goal is to create a user-friendly interface
that is both aesthetically pleasing and functional."

Format your UI/UX prompts with clear headers, bullet points, and numbered lists for readability."""

APP_DEV_SYSTEM_SECTION = """
When generating app development prompts, always include:
1. Tech stack recommendations (frameworks, libraries)
2. Architecture suggestions
3. Feature prioritization
4. Development roadmap
5. Potential challenges and solutions
6. Performance considerations
7. Security best practices
8. Testing approaches
9. Deployment strategies
10. Maintenance considerations

Format app development prompts with clear technical specifications, code examples where relevant, and implementation guidelines."""

WEB_DEV_SYSTEM_SECTION = """
When generating web development prompts, always include:
1. Frontend tech stack options (framework recommendations)
2. Backend architecture suggestions
3. Database considerations
4. API design principles
5. Responsive design guidelines
6. Performance optimization strategies
7. SEO considerations
8. Accessibility requirements (WCAG guidelines)
9. Security best practices
10. Hosting and deployment options

Format web development prompts with technical specifications, structured development approaches, and prioritized implementation steps."""

FORMATTING_SYSTEM_SECTION = """
Always create prompts that are immediately usable, comprehensive, and structured with:
- Clear sections with headers
- Numbered lists for steps/instructions
- Bullet points for options/considerations
- Specific examples that illustrate key points
- Priority indicators for implementation order
- Success criteria for evaluation

Make your prompts detailed enough that anyone could use them without needing additional clarification."""

# Each section is appended on its own; a prompt may pick up several.
SYSTEM_SECTIONS = [
    (("ui", "ux", "user interface", "design"), UI_UX_SYSTEM_SECTION),
    (("app", "application", "mobile", "development"), APP_DEV_SYSTEM_SECTION),
    (("web", "website", "frontend", "backend"), WEB_DEV_SYSTEM_SECTION),
]

CONNECTION_TEST_MESSAGE = "Hi, this is a test message. Please respond with 'API is working'."


def build_system_prompt(prompt: str) -> str:
    """Assemble the system instruction for ``prompt``."""
    lowered = prompt.lower()
    system_prompt = BASE_SYSTEM_PROMPT
    for keywords, section in SYSTEM_SECTIONS:
        if any(keyword in lowered for keyword in keywords):
            system_prompt += section
    return system_prompt + FORMATTING_SYSTEM_SECTION


def extract_content(data: Any) -> str:
    """Return ``choices[0].message.content`` or raise MalformedResponseError."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        raise MalformedResponseError("Unexpected response format from API")
    if not isinstance(content, str):
        raise MalformedResponseError("Unexpected response format from API")
    return content


class OpenRouterClient:
    """Single-shot client for the OpenRouter chat completions endpoint."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.openrouter_api_key
        self.base_url = (base_url or settings.openrouter_base_url).rstrip("/")
        self.model = model or settings.openrouter_model
        self.timeout = timeout if timeout is not None else settings.llm_timeout_seconds
        self.transport = transport

    @property
    def completions_url(self) -> str:
        return f"{self.base_url}/chat/completions"

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "HTTP-Referer": settings.site_url,
            "X-Title": settings.site_name,
            "Content-Type": "application/json",
        }

    async def _post(self, messages: List[Dict[str, str]]) -> httpx.Response:
        if not self.api_key:
            raise TransportError("OpenRouter API key is not configured")

        payload = {"model": self.model, "messages": messages}
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                return await client.post(
                    self.completions_url, json=payload, headers=self._headers()
                )
        except httpx.TimeoutException:
            logger.error(f"Request to {self.completions_url} timed out after {self.timeout}s")
            raise TransportError("Request to the model API timed out")
        except httpx.RequestError as e:
            logger.error(f"Request error: {str(e)}")
            raise TransportError(f"Connection error: {str(e)}")

    async def generate(self, prompt: str, prompt_type: str = "general") -> str:
        """Send ``prompt`` with the generated system instruction and return the completion text."""
        logger.info(f"Sending {prompt_type} prompt to {self.completions_url} with model {self.model}")

        response = await self._post(
            [
                {"role": "system", "content": build_system_prompt(prompt)},
                {"role": "user", "content": prompt},
            ]
        )

        if not response.is_success:
            logger.error(f"API call failed with status {response.status_code}: {response.text}")
            raise HttpStatusError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError:
            logger.error(f"Failed to parse response as JSON: {response.text}")
            raise MalformedResponseError("Invalid JSON response from API")

        content = extract_content(data)
        if not content.strip():
            raise EmptyResultError("Received empty response")

        logger.info("Successfully received response from OpenRouter API")
        return content

    async def test_connection(self) -> ConnectionCheck:
        """Probe the endpoint with a short message. Never raises."""
        logger.info("Testing API connection...")
        try:
            response = await self._post(
                [{"role": "user", "content": CONNECTION_TEST_MESSAGE}]
            )
        except TransportError as e:
            return ConnectionCheck(success=False, message=str(e))

        if not response.is_success:
            logger.error(f"API test failed: {response.text}")
            return ConnectionCheck(
                success=False,
                status_code=response.status_code,
                message=f"API test failed with status {response.status_code}: {response.text}",
            )

        try:
            response.json()
        except ValueError:
            return ConnectionCheck(
                success=False,
                status_code=response.status_code,
                message="API responded but returned invalid JSON",
            )

        return ConnectionCheck(
            success=True,
            status_code=response.status_code,
            message="API connection successful",
        )
