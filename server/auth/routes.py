"""Authentication API routes."""

from __future__ import annotations

import asyncio
import logging
import uuid

from fastapi import APIRouter, HTTPException

from scryptauth.exceptions import DerivationFailed, InvalidHashFormat
from server.auth import database as db
from server.auth.models import ChangePasswordRequest, LoginRequest, RegisterRequest, UserInfo
from server.auth.passwords import hash_password, verify_missing_user, verify_password

log = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/auth", tags=["auth"])


async def _check_password(user: dict | None, password: str) -> bool:
    """Verify *password* for *user*, mapping system faults to 5xx."""
    user_id = user["id"] if user else None
    try:
        if not user:
            return await verify_missing_user(password)
        return await verify_password(password, user["password_hash"])
    except InvalidHashFormat:
        log.error("Corrupt password hash for user %s", user_id)
        raise HTTPException(500, "Stored credential is corrupt")
    except DerivationFailed:
        log.exception("Key derivation failed for user %s", user_id)
        raise HTTPException(500, "Password verification unavailable")
    except asyncio.TimeoutError:
        log.warning("Key derivation timed out for user %s", user_id)
        raise HTTPException(504, "Password verification timed out")


async def _new_hash(password: str) -> str:
    try:
        return await hash_password(password)
    except DerivationFailed:
        log.exception("Key derivation failed while hashing")
        raise HTTPException(500, "Password hashing unavailable")
    except asyncio.TimeoutError:
        log.warning("Key derivation timed out while hashing")
        raise HTTPException(504, "Password hashing timed out")


@router.post("/register", response_model=UserInfo)
async def register(body: RegisterRequest):
    existing = await asyncio.to_thread(db.get_user_by_email, body.email)
    if existing:
        raise HTTPException(409, "Email already registered")

    user_id = str(uuid.uuid4())
    pw_hash = await _new_hash(body.password)
    user = await asyncio.to_thread(db.create_user, user_id, body.email, pw_hash)
    log.info("Registered user %s", user_id)
    return UserInfo(**user)


@router.post("/login", response_model=UserInfo)
async def login(body: LoginRequest):
    user = await asyncio.to_thread(db.get_user_by_email, body.email)
    if not await _check_password(user, body.password):
        log.info("Failed login for %s", body.email)
        raise HTTPException(401, "Invalid email or password")

    await asyncio.to_thread(db.update_last_login, user["id"])
    return UserInfo(**await asyncio.to_thread(db.get_user_by_id, user["id"]))


@router.post("/password", response_model=UserInfo)
async def change_password(body: ChangePasswordRequest):
    user = await asyncio.to_thread(db.get_user_by_email, body.email)
    if not await _check_password(user, body.current_password):
        raise HTTPException(401, "Invalid email or password")

    pw_hash = await _new_hash(body.new_password)
    await asyncio.to_thread(db.replace_password_hash, user["id"], pw_hash)
    log.info("Password changed for user %s", user["id"])
    return UserInfo(**await asyncio.to_thread(db.get_user_by_id, user["id"]))
