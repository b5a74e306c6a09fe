"""
Domain errors raised by the authentication core.

Each carries the HTTP status and the client-facing message; the handlers in
``api.errors`` turn them into ``{"message": ...}`` responses.
"""

from __future__ import annotations

from fastapi import status


class AuthError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Requisição inválida"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AuthError):
    """Missing or malformed input."""

    message = "Dados inválidos"


class DuplicateEmail(AuthError):
    message = "Email já cadastrado no sistema"


class RegistrationFailed(AuthError):
    """Storage failure while creating an account (not a duplicate)."""

    message = "Erro ao criar o usuário"


class AccountNotFound(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Usuário não encontrado"


class InvalidCredentials(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Senha incorreta"


class InvalidToken(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Token inválido ou expirado"


class StorageUnavailable(AuthError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = "Banco de dados indisponível"
