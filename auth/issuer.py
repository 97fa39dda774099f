"""
Credential / token issuer — registration and login.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from api.schemas import LoginRequest, RegisterRequest
from auth.password import ahash_password, averify_password
from auth.tokens import create_token
from config.settings import Settings
from database.users import UserRepository
from utils.errors import AuthenticationError, PersistenceError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    token: str
    user_type: str
    user_id: str
    expires_in: int


class CredentialIssuer:
    """Hashes and stores new users, and signs tokens for valid credentials."""

    def __init__(self, settings: Settings):
        self.settings = settings

    async def register(self, repo: UserRepository, req: RegisterRequest) -> str:
        """Create a user with the default tier. Returns the new ``user_id``."""
        if req.missing_fields(*RegisterRequest.REQUIRED):
            raise ValidationError("Todos os campos são obrigatórios.")

        profile = req.stripped("first_name", "last_name", "phone", "city_state", "email")
        password_hash = await ahash_password(req.password, self.settings.bcrypt_rounds)

        try:
            user = await repo.create(
                **profile,
                password_hash=password_hash,
                user_type=self.settings.default_user_type,
            )
        except PersistenceError as exc:
            raise PersistenceError("Erro ao registrar usuário.") from exc

        logger.info("Registered user %s", user.user_id)
        return str(user.user_id)

    async def login(self, repo: UserRepository, req: LoginRequest) -> LoginResult:
        if req.missing_fields("email", "password"):
            raise ValidationError("E-mail e senha são obrigatórios.")

        try:
            user = await repo.get_by_email(req.email.strip())
        except PersistenceError as exc:
            raise PersistenceError("Erro ao fazer login.") from exc

        if user is None:
            raise AuthenticationError("Usuário não encontrado.")
        if not await averify_password(req.password, user.password_hash):
            raise AuthenticationError("Senha incorreta.")

        token = create_token(self.settings, str(user.user_id), user.user_type)
        logger.info("Login: %s", user.user_id)
        return LoginResult(
            token=token,
            user_type=user.user_type,
            user_id=str(user.user_id),
            expires_in=self.settings.jwt_expiry_seconds,
        )
