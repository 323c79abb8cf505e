"""Password hashing for the auth routes, backed by scryptauth."""

from __future__ import annotations

import os

from scryptauth import PasswordHasher, ScryptConfig, hash_password_async, verify_password_async
from scryptauth.exceptions import ConfigError

_hasher = PasswordHasher(ScryptConfig.from_env())
# Verified against when the user does not exist, so unknown emails cost one derivation too.
_dummy_hash: str | None = None


def _timeout_from_env(environ: dict[str, str] | None = None) -> float | None:
    env = os.environ if environ is None else environ
    raw = env.get("SCRYPTAUTH_DERIVE_TIMEOUT", "")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"SCRYPTAUTH_DERIVE_TIMEOUT must be a number, got {raw!r}") from exc


_TIMEOUT = _timeout_from_env()


def set_hasher(hasher: PasswordHasher) -> None:
    global _hasher, _dummy_hash
    _hasher = hasher
    _dummy_hash = None


async def hash_password(password: str) -> str:
    """Hash a password off the event loop. Returns 'salt_hex:key_hex'."""
    return await hash_password_async(password, hasher=_hasher, timeout=_TIMEOUT)


async def verify_password(password: str, stored: str) -> bool:
    """Verify a password off the event loop. Raises InvalidHashFormat on corrupt data."""
    return await verify_password_async(password, stored, hasher=_hasher, timeout=_TIMEOUT)


async def verify_missing_user(password: str) -> bool:
    """Run a full verification against a throwaway credential. Always False."""
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = await hash_password(os.urandom(16).hex())
    await verify_password(password, _dummy_hash)
    return False
