"""scryptauth: scrypt password hashing with constant-time verification."""

from scryptauth.aio import hash_password_async, verify_password_async
from scryptauth.config import ScryptConfig
from scryptauth.core.types import StoredCredential
from scryptauth.exceptions import (
    ConfigError,
    DerivationFailed,
    InvalidHashFormat,
    InvalidHexString,
    ScryptAuthError,
)
from scryptauth.hasher import PasswordHasher, hash_password, verify_password

__version__ = "0.1.0"
__all__ = [
    "ConfigError",
    "DerivationFailed",
    "InvalidHashFormat",
    "InvalidHexString",
    "PasswordHasher",
    "ScryptAuthError",
    "ScryptConfig",
    "StoredCredential",
    "hash_password",
    "hash_password_async",
    "verify_password",
    "verify_password_async",
]
