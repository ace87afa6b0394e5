"""FastAPI dependencies: shared services and the current user."""

from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..exceptions import AuthRequiredError, IdentityProviderError
from ..models.auth import AuthUser
from ..services.auth_service import AuthService
from ..services.generation_service import GenerationService
from ..services.library_service import LibraryService

bearer_scheme = HTTPBearer(auto_error=False)

# Created on first use; the generation service keeps the API status between requests
generation_service = None
library_service = None
auth_service = None


def get_generation_service() -> GenerationService:
    global generation_service
    if generation_service is None:
        generation_service = GenerationService()
    return generation_service


def get_library_service() -> LibraryService:
    global library_service
    if library_service is None:
        library_service = LibraryService()
    return library_service


def get_auth_service() -> AuthService:
    global auth_service
    if auth_service is None:
        auth_service = AuthService()
    return auth_service


def get_access_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    return credentials.credentials if credentials else None


async def get_current_user(
    access_token: Optional[str] = Depends(get_access_token),
    auth: AuthService = Depends(get_auth_service),
) -> AuthUser:
    """Resolve the bearer token to a user or answer 401."""
    try:
        return await auth.current_user(access_token)
    except AuthRequiredError as e:
        raise HTTPException(
            status_code=401, detail=str(e), headers={"WWW-Authenticate": "Bearer"}
        )
    except IdentityProviderError as e:
        raise HTTPException(status_code=503, detail=str(e))
