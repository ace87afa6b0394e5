"""Authentication models."""

from typing import Optional
from pydantic import BaseModel, Field


class AuthUser(BaseModel):
    """The signed-in user as reported by the identity provider."""

    id: str
    email: Optional[str] = None


class LoginRequest(BaseModel):
    """Email and password sign-in."""

    email: str = ""
    password: str = ""


class RegisterRequest(BaseModel):
    """Account creation form."""

    email: str = ""
    password: str = ""
    confirm_password: str = Field("", description="Must equal password")


class AuthSession(BaseModel):
    """Tokens issued by the identity provider."""

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    token_type: str = "bearer"
    expires_in: Optional[int] = None
    user: Optional[AuthUser] = None
