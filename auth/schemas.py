"""
Request / response schemas for the auth routes and token claims.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    # Presence and length are checked by AuthService so that missing
    # fields map to a 400 with the same message as blank ones.
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class AccountSummary(BaseModel):
    id: str
    name: str
    email: str


class TokenClaims(BaseModel):
    id: str
    name: str
    email: str
    iat: int
    exp: int

    def to_summary(self) -> AccountSummary:
        return AccountSummary(id=self.id, name=self.name, email=self.email)


class LoginResult(BaseModel):
    token: str
    user: AccountSummary


class RegisterResponse(BaseModel):
    message: str
    user: AccountSummary


class LoginResponse(BaseModel):
    message: str
    token: str
    user: AccountSummary


class MeResponse(BaseModel):
    user: AccountSummary
