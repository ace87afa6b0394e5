"""Exception hierarchy for Prompt Engineer Pro."""

from typing import Optional


class PromptEngineerError(Exception):
    """Base class for all application errors."""


class GenerationError(PromptEngineerError):
    """The remote model could not produce a usable completion."""


class TransportError(GenerationError):
    """The request never got an HTTP response (network, timeout, no API key)."""


class HttpStatusError(GenerationError):
    """The model endpoint answered with a non-success status."""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API request failed: {status_code} - {body}")


class MalformedResponseError(GenerationError):
    """The response body is not the expected completion envelope."""


class EmptyResultError(GenerationError):
    """The completion envelope was valid but carried no text."""


class ValidationError(PromptEngineerError):
    """User input was rejected before any work was attempted."""


class PersistenceError(PromptEngineerError):
    """The prompt store rejected a read or write."""


class PromptNotFoundError(PersistenceError):
    """No saved prompt with that id belongs to the current user."""

    def __init__(self, prompt_id: int, message: Optional[str] = None):
        self.prompt_id = prompt_id
        super().__init__(message or f"Prompt {prompt_id} not found")


class AuthRequiredError(PromptEngineerError):
    """The action needs a signed-in user."""


class IdentityProviderError(PromptEngineerError):
    """The identity provider refused a sign-in, sign-up or sign-out."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
