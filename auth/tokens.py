"""
JWT creation and verification.

Tokens are HS256-signed JWTs carrying ``userId`` and ``userType`` claims plus
``iat`` / ``exp``. The secret and lifetime come from the ``Settings`` object
passed in by the caller; nothing here reads the environment.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt

from config.settings import Settings
from utils.errors import InvalidTokenError

USER_ID_CLAIM = "userId"
USER_TYPE_CLAIM = "userType"


def create_token(settings: Settings, user_id: str, user_type: str | None = None) -> str:
    """Sign a token for ``user_id`` that expires after ``jwt_expiry_seconds``."""
    now = datetime.now(timezone.utc)
    payload: Dict[str, Any] = {
        USER_ID_CLAIM: str(user_id),
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=settings.jwt_expiry_seconds)).timestamp()),
    }
    if user_type:
        payload[USER_TYPE_CLAIM] = user_type
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(settings: Settings, token: str) -> Dict[str, Any]:
    """
    Verify signature and expiry, returning the claims.

    Raises ``InvalidTokenError`` for any token that is not signed with the
    configured secret, is past its ``exp`` (no leeway), or has no ``exp``.
    """
    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
            leeway=0,
        )
    except jwt.InvalidTokenError as exc:
        # ExpiredSignatureError, InvalidSignatureError, DecodeError, ...
        raise InvalidTokenError() from exc


def subject_of(claims: Dict[str, Any]) -> uuid.UUID:
    """Return the ``userId`` claim as a UUID, or raise ``InvalidTokenError``."""
    raw = claims.get(USER_ID_CLAIM)
    if not raw:
        raise InvalidTokenError()
    try:
        return uuid.UUID(str(raw))
    except ValueError as exc:
        raise InvalidTokenError() from exc
