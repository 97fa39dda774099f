"""
Bearer-token verification for protected routes.

A request passes through, in order:

1. extract   — ``Authorization`` header, else the auth cookie
2. format    — the header must read ``Bearer <token>``
3. verify    — signature against the configured secret, ``exp`` with no leeway
4. resolve   — the ``userId`` claim must name an existing user
5. augment   — the user is stored on ``request.state.user``

The first failing step ends the request: token problems are 401, a missing
user is 404 and a datastore failure is 500. ``userType`` and every other
profile field come from the freshly loaded record, never from the claims.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Request

from auth.tokens import decode_token, subject_of
from config.settings import Settings
from database.models import User
from database.users import UserRepository
from utils.errors import (
    MalformedTokenError,
    MissingTokenError,
    PersistenceError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class TokenVerifier:
    def __init__(self, settings: Settings):
        self.settings = settings

    def extract_token(
        self,
        authorization: Optional[str],
        cookie_token: Optional[str],
    ) -> str:
        if authorization:
            if not authorization.startswith(BEARER_PREFIX):
                raise MalformedTokenError()
            token = authorization[len(BEARER_PREFIX):].strip()
            if not token:
                raise MalformedTokenError()
            return token
        if cookie_token:
            return cookie_token
        raise MissingTokenError()

    async def resolve_user(self, repo: UserRepository, token: str) -> User:
        claims = decode_token(self.settings, token)
        user_id = subject_of(claims)

        try:
            user = await repo.get_by_id(user_id)
        except PersistenceError as exc:
            raise PersistenceError("Erro interno ao buscar usuário.") from exc

        if user is None:
            raise UserNotFoundError()
        return user

    async def authenticate(self, request: Request, repo: UserRepository) -> User:
        """Run the full pipeline and attach the user to ``request.state``."""
        token = self.extract_token(
            request.headers.get("Authorization"),
            request.cookies.get(self.settings.auth_cookie_name),
        )
        user = await self.resolve_user(repo, token)
        request.state.user = user
        logger.debug("Authenticated %s for %s", user.user_id, request.url.path)
        return user
