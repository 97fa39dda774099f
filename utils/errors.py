"""
Application error taxonomy.

Every error carries the HTTP status it maps to and a human-readable message
that is returned to the client as ``{"message": ...}``.
"""

from __future__ import annotations

from typing import Dict, Optional


class AppError(Exception):
    """Base class for application errors."""

    status_code: int = 500
    default_message: str = "Erro interno do servidor."

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return None


class ValidationError(AppError):
    """Missing or malformed request input."""

    status_code = 400
    default_message = "Requisição inválida."


class AuthenticationError(AppError):
    """Credentials did not match a stored user."""

    status_code = 400
    default_message = "Credenciais inválidas."


class TokenError(AppError):
    """Any failure to authenticate a bearer token."""

    status_code = 401
    default_message = "Token inválido ou expirado."

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return {"WWW-Authenticate": "Bearer"}


class MissingTokenError(TokenError):
    default_message = "Token não fornecido."


class MalformedTokenError(TokenError):
    default_message = "Token mal formatado."


class InvalidTokenError(TokenError):
    default_message = "Token inválido ou expirado."


class UserNotFoundError(AppError):
    status_code = 404
    default_message = "Usuário não encontrado."


class PersistenceError(AppError):
    """The user store failed (connection, constraint, ...)."""

    status_code = 500
    default_message = "Erro ao acessar o banco de dados."


class UpstreamServiceError(AppError):
    """The external LLM completion service failed."""

    status_code = 500
    default_message = "Erro ao gerar o relatório. Tente novamente mais tarde."
