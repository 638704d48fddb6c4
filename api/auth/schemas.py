"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=200)
    password: str = Field(..., min_length=1, max_length=128)


class TokenResponse(BaseModel):
    token: str


@dataclass(frozen=True)
class AdminClaims:
    id: int
    username: str
