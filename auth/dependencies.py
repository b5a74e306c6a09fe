"""
FastAPI dependencies for authentication.

Provides ``get_auth_service`` for the auth routes and
``get_current_claims`` for token-protected routes.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from auth.errors import InvalidToken
from auth.jwt import TokenIssuer
from auth.schemas import TokenClaims
from auth.service import AuthService
from auth.store import CredentialStore
from database.session import get_db_session

_bearer_scheme = HTTPBearer(auto_error=False)


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


async def get_auth_service(
    request: Request,
    session: AsyncSession = Depends(get_db_session),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    return AuthService(
        CredentialStore(session),
        issuer,
        bcrypt_rounds=request.app.state.settings.bcrypt_rounds,
    )


async def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> TokenClaims:
    """
    Extract and verify the Bearer token, returning its claims.
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise InvalidToken("Token de autenticação ausente")
    return issuer.verify(credentials.credentials)
