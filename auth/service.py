"""
Registration and login orchestration.

Each step either succeeds or raises an ``AuthError``; nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import SQLAlchemyError

from auth.errors import (
    AccountNotFound,
    DuplicateEmail,
    InvalidCredentials,
    RegistrationFailed,
    ValidationError,
)
from auth.jwt import TokenIssuer
from auth.password import BCRYPT_ROUNDS, MAX_PASSWORD_BYTES, hash_password, verify_password
from auth.schemas import AccountSummary, LoginResult
from auth.store import CredentialStore
from database.models import User

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 100


def _summary(user: User) -> AccountSummary:
    return AccountSummary(id=str(user.id), name=user.name, email=user.email)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _utf8(value: str, field: str) -> bytes:
    try:
        return value.encode()
    except UnicodeEncodeError as exc:
        raise ValidationError(f"{field} contém caracteres inválidos") from exc


def _check_password_length(password: str) -> None:
    if len(_utf8(password, "password")) > MAX_PASSWORD_BYTES:
        raise ValidationError(
            f"password deve ter no máximo {MAX_PASSWORD_BYTES} bytes"
        )


class AuthService:
    def __init__(
        self,
        store: CredentialStore,
        issuer: TokenIssuer,
        *,
        bcrypt_rounds: int = BCRYPT_ROUNDS,
    ) -> None:
        self._store = store
        self._issuer = issuer
        self._bcrypt_rounds = bcrypt_rounds

    async def register(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> AccountSummary:
        """Create an account and return its public summary."""
        if _is_blank(name) or _is_blank(email) or not password:
            raise ValidationError("name, email e password são obrigatórios")
        if len(name) > MAX_NAME_LENGTH:
            raise ValidationError(f"name deve ter no máximo {MAX_NAME_LENGTH} caracteres")
        if len(email) > MAX_EMAIL_LENGTH:
            raise ValidationError(f"email deve ter no máximo {MAX_EMAIL_LENGTH} caracteres")
        _utf8(name, "name")
        _utf8(email, "email")
        _check_password_length(password)

        try:
            # Advisory only: two concurrent requests can both get past this,
            # the unique constraint in insert() settles it.
            if await self._store.find_by_email(email) is not None:
                raise DuplicateEmail()

            password_hash = await run_in_threadpool(
                hash_password, password, self._bcrypt_rounds
            )
            user = await self._store.insert(name, email, password_hash)
        except SQLAlchemyError as exc:
            logger.exception("Failed to create user %s", email)
            raise RegistrationFailed() from exc

        logger.info("Registered user %s (%s)", user.email, user.id)
        return _summary(user)

    async def login(self, email: Optional[str], password: Optional[str]) -> LoginResult:
        """Check credentials and mint a token for the account."""
        if _is_blank(email) or not password:
            raise ValidationError("email e password são obrigatórios")
        _utf8(email, "email")
        _utf8(password, "password")

        user = await self._store.find_by_email(email)
        if user is None:
            raise AccountNotFound()

        if not await run_in_threadpool(verify_password, password, user.password):
            logger.info("Wrong password for %s", user.id)
            raise InvalidCredentials()

        summary = _summary(user)
        token = self._issuer.issue(summary.model_dump())
        logger.info("Login: %s (%s)", user.email, user.id)
        return LoginResult(token=token, user=summary)
