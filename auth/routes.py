"""
Auth API routes — register, login, logout, verify-token.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Response, status

from api.dependencies import get_settings, get_user_repository
from api.schemas import LoginRequest, LoginResponse, MessageResponse, RegisterRequest
from auth.dependencies import get_current_user, get_issuer
from auth.issuer import CredentialIssuer
from config.settings import Settings
from database.models import User
from database.users import UserRepository
from utils.profile import project_profile

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _cookie_kwargs(settings: Settings) -> Dict[str, Any]:
    return {
        "httponly": True,
        "secure": settings.cookie_secure,
        "samesite": settings.auth_cookie_samesite.lower(),
        "domain": settings.auth_cookie_domain,
        "path": settings.auth_cookie_path,
    }


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    req: Optional[RegisterRequest] = Body(None),
    issuer: CredentialIssuer = Depends(get_issuer),
    repo: UserRepository = Depends(get_user_repository),
) -> Dict[str, Any]:
    """Register a new user on the default tier."""
    await issuer.register(repo, req or RegisterRequest())
    return {"message": "Usuário registrado com sucesso."}


@router.post("/login", response_model=LoginResponse)
async def login(
    response: Response,
    req: Optional[LoginRequest] = Body(None),
    issuer: CredentialIssuer = Depends(get_issuer),
    repo: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """
    Login with email + password.

    The token is returned in the body and also set as an httpOnly cookie
    whose max-age matches the token's own expiry.
    """
    result = await issuer.login(repo, req or LoginRequest())
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=result.token,
        max_age=result.expires_in,
        **_cookie_kwargs(settings),
    )
    return {"token": result.token, "userType": result.user_type}


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    response.delete_cookie(key=settings.auth_cookie_name, **_cookie_kwargs(settings))
    logger.debug("Cleared %s cookie", settings.auth_cookie_name)
    return {"message": "Logout realizado com sucesso!"}


@router.post("/verify-token")
async def verify_token(
    user: User = Depends(get_current_user),
) -> Dict[str, Any]:
    """Check the caller's token and echo back who it belongs to."""
    return {
        "message": "Acesso permitido",
        "userId": str(user.user_id),
        "userProfile": project_profile(user),
    }
