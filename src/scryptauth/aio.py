"""Async wrappers that run scrypt off the event loop.

Each call runs its derivation in a worker thread via ``asyncio.to_thread`` so
concurrent requests never serialize on the loop. Parsing happens before any
work is scheduled; *timeout* bounds only the derivation step.
"""

from __future__ import annotations

import asyncio

from scryptauth.core.types import StoredCredential
from scryptauth.hasher import PasswordHasher, _default_hasher


async def _derive(
    hasher: PasswordHasher, password: str, salt: bytes, timeout: float | None
) -> bytes:
    work = asyncio.to_thread(hasher.derive, password, salt)
    if timeout is None:
        return await work
    return await asyncio.wait_for(work, timeout)


async def hash_password_async(
    password: str,
    *,
    hasher: PasswordHasher | None = None,
    timeout: float | None = None,
) -> str:
    """Async counterpart of ``hash_password``."""
    hasher = hasher or _default_hasher
    salt = hasher.new_salt()
    key = await _derive(hasher, password, salt, timeout)
    return StoredCredential(salt=salt, key=key).to_string()


async def verify_password_async(
    password: str,
    stored: str,
    *,
    hasher: PasswordHasher | None = None,
    timeout: float | None = None,
) -> bool:
    """Async counterpart of ``verify_password``.

    Raises ``InvalidHashFormat`` before scheduling any work if *stored* is
    malformed, and ``TimeoutError`` if derivation exceeds *timeout* seconds.
    """
    hasher = hasher or _default_hasher
    credential = hasher.parse(stored)
    key = await _derive(hasher, password, credential.salt, timeout)
    return hasher.matches(key, credential)
