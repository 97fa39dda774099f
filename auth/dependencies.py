"""
FastAPI dependencies for authentication.

``get_current_user`` guards every protected route; the issuer and verifier
are built once in ``main.create_app`` and read back from ``app.state``.
"""

from __future__ import annotations

from fastapi import Depends, Request

from api.dependencies import get_user_repository
from auth.issuer import CredentialIssuer
from auth.middleware import TokenVerifier
from database.models import User
from database.users import UserRepository


def get_issuer(request: Request) -> CredentialIssuer:
    return request.app.state.issuer


def get_token_verifier(request: Request) -> TokenVerifier:
    return request.app.state.token_verifier


async def get_current_user(
    request: Request,
    verifier: TokenVerifier = Depends(get_token_verifier),
    repo: UserRepository = Depends(get_user_repository),
) -> User:
    """Authenticate the request and return the stored ``User``."""
    return await verifier.authenticate(request, repo)
