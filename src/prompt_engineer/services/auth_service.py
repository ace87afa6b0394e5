"""Account registration, sign-in and session lookup."""

from typing import Optional

from ..exceptions import AuthRequiredError, ValidationError
from ..integrations.supabase_auth import SupabaseAuthClient
from ..models.auth import AuthSession, AuthUser, LoginRequest, RegisterRequest

MIN_PASSWORD_LENGTH = 6


class AuthService:
    """Validates auth forms and delegates to the identity provider."""

    def __init__(self, client: Optional[SupabaseAuthClient] = None):
        self.client = client or SupabaseAuthClient()

    async def register(self, request: RegisterRequest) -> AuthSession:
        if not request.email or not request.password or not request.confirm_password:
            raise ValidationError("Please fill in all fields")
        if request.password != request.confirm_password:
            raise ValidationError("Passwords do not match")
        if len(request.password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        return await self.client.sign_up(request.email, request.password)

    async def login(self, request: LoginRequest) -> AuthSession:
        if not request.email or not request.password:
            raise ValidationError("Please enter both email and password")
        return await self.client.sign_in(request.email, request.password)

    async def logout(self, access_token: Optional[str]) -> None:
        if not access_token:
            raise AuthRequiredError("Not signed in")
        await self.client.sign_out(access_token)

    async def current_user(self, access_token: Optional[str]) -> AuthUser:
        if not access_token:
            raise AuthRequiredError("You must be logged in to save prompts")
        return await self.client.get_user(access_token)
