"""Authentication endpoints backed by the identity provider."""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Response
import logging

from ..exceptions import AuthRequiredError, IdentityProviderError, ValidationError
from ..models.auth import AuthSession, AuthUser, LoginRequest, RegisterRequest
from ..services.auth_service import AuthService
from .dependencies import get_access_token, get_auth_service, get_current_user

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth")


@router.post("/register", response_model=AuthSession, status_code=201)
async def register(
    request: RegisterRequest, service: AuthService = Depends(get_auth_service)
):
    try:
        return await service.register(request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except IdentityProviderError as e:
        logger.error(f"Signup error: {e}")
        raise HTTPException(status_code=400, detail=str(e) or "Failed to create account")


@router.post("/login", response_model=AuthSession)
async def login(request: LoginRequest, service: AuthService = Depends(get_auth_service)):
    try:
        return await service.login(request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except IdentityProviderError as e:
        raise HTTPException(status_code=401, detail=str(e))


@router.post("/logout", status_code=204)
async def logout(
    access_token: Optional[str] = Depends(get_access_token),
    service: AuthService = Depends(get_auth_service),
):
    try:
        await service.logout(access_token)
    except AuthRequiredError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except IdentityProviderError as e:
        logger.error(f"Error logging out: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    return Response(status_code=204)


@router.get("/me", response_model=AuthUser)
async def me(user: AuthUser = Depends(get_current_user)):
    return user
