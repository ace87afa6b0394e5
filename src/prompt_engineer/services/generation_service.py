"""Prompt generation with offline fallback."""

import logging
from typing import Optional

from ..exceptions import GenerationError, ValidationError
from ..integrations.openrouter import OpenRouterClient
from ..models.generation import ApiStatus, ConnectionCheck, GenerationResult
from ..prompting import classify, generate_fallback_prompt, render_markdown

logger = logging.getLogger(__name__)

INSTRUCTION_TEMPLATE = (
    'As a prompt engineer, enhance and structure this {prompt_type} idea: "{user_input}". \n'
    "Create a well-formatted, detailed prompt that includes specific requirements, "
    "context, and clear instructions.\n"
    "Focus on making it comprehensive yet concise, ready to use with AI systems."
)

OFFLINE_NOTICE = "Using offline mode (API unavailable)"
API_FAILED_NOTICE = "API is currently unavailable. Using offline mode."


def build_instruction(user_input: str, prompt_type: str) -> str:
    """Wrap the user's idea in the instruction sent to the model."""
    return INSTRUCTION_TEMPLATE.format(prompt_type=prompt_type, user_input=user_input)


class GenerationService:
    """Turns ideas into prompts, remotely when possible and offline otherwise.

    The connection is probed once, before the first generation. After that
    every request goes straight to the model and falls back on failure.
    """

    def __init__(self, client: Optional[OpenRouterClient] = None):
        self.client = client or OpenRouterClient()
        self.api_status = ApiStatus()

    async def test_connection(self) -> ConnectionCheck:
        """Probe the model endpoint and remember the outcome."""
        self.api_status = ApiStatus(tested=True, working=None, message="Testing API connection...")
        check = await self.client.test_connection()
        self.api_status = ApiStatus(
            tested=True,
            working=check.success,
            message="API connection successful" if check.success else check.message or "API test failed",
        )
        return check

    async def generate(self, user_input: str, prompt_type: str = "general") -> GenerationResult:
        """Generate a prompt, falling back to the offline templates on any remote failure."""
        if not user_input.strip():
            raise ValidationError("Please enter some text to generate a prompt")

        if not self.api_status.tested:
            logger.info("Testing API connection first...")
            check = await self.test_connection()
            if not check.success:
                logger.warning("API test failed, using fallback generator")
                return self.fallback(user_input, prompt_type, notice=OFFLINE_NOTICE)

        instruction = build_instruction(user_input, prompt_type)
        try:
            enhanced_prompt = await self.client.generate(instruction, prompt_type)
        except GenerationError as e:
            logger.warning(f"API request failed, using fallback generator: {e}")
            self.api_status = ApiStatus(tested=True, working=False, message="API request failed")
            return self.fallback(user_input, prompt_type, notice=API_FAILED_NOTICE)

        return GenerationResult(
            enhanced_prompt=enhanced_prompt,
            html=render_markdown(enhanced_prompt),
            prompt_type=prompt_type,
            used_fallback=False,
            api_status=self.api_status,
        )

    def fallback(
        self, user_input: str, prompt_type: str = "general", notice: Optional[str] = None
    ) -> GenerationResult:
        """Build the result with the offline generator only."""
        if not user_input.strip():
            raise ValidationError("Please enter some text to generate a prompt")

        enhanced_prompt = generate_fallback_prompt(user_input, prompt_type)
        return GenerationResult(
            enhanced_prompt=enhanced_prompt,
            html=render_markdown(enhanced_prompt),
            prompt_type=prompt_type,
            used_fallback=True,
            classification=classify(user_input.strip()),
            notice=notice,
            api_status=self.api_status,
        )
