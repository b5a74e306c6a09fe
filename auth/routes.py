"""
Auth API routes — register, login, me.

Route prefix: /api/auth
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from auth.dependencies import get_auth_service, get_current_claims
from auth.schemas import (
    LoginRequest,
    LoginResponse,
    MeResponse,
    RegisterRequest,
    RegisterResponse,
    TokenClaims,
)
from auth.service import AuthService

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    req: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> RegisterResponse:
    """Register a new user."""
    user = await service.register(req.name, req.email, req.password)
    return RegisterResponse(message="Usuário criado com sucesso", user=user)


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Login with email + password."""
    result = await service.login(req.email, req.password)
    return LoginResponse(
        message="Login realizado com sucesso",
        token=result.token,
        user=result.user,
    )


@router.get("/me", response_model=MeResponse)
async def me(claims: TokenClaims = Depends(get_current_claims)) -> MeResponse:
    """Return the account identified by the Bearer token."""
    return MeResponse(user=claims.to_summary())
