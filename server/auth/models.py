"""Pydantic models for authentication."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    email: str
    password: str = Field(min_length=8, max_length=128)


class LoginRequest(BaseModel):
    email: str
    password: str


class ChangePasswordRequest(BaseModel):
    email: str
    current_password: str
    new_password: str = Field(min_length=8, max_length=128)


class UserInfo(BaseModel):
    id: str
    email: str
    created_at: Optional[str] = None
    last_login_at: Optional[str] = None
