"""scrypt key derivation with fixed parameters."""

from __future__ import annotations

import hashlib
import unicodedata

from scryptauth.config import DEFAULT_CONFIG, ScryptConfig
from scryptauth.exceptions import DerivationFailed


def normalize_password(password: str) -> bytes:
    """NFKC-normalize *password* and encode it as UTF-8."""
    return unicodedata.normalize("NFKC", password).encode("utf-8")


def derive(password: str, salt: bytes, config: ScryptConfig | None = None) -> bytes:
    """Derive a ``config.dklen``-byte key from *password* and *salt*.

    Raises ``DerivationFailed`` when scrypt rejects the parameters or exceeds
    ``config.maxmem``.
    """
    cfg = config or DEFAULT_CONFIG
    if cfg.legacy_text_salt:
        salt = salt.hex().encode("ascii")
    try:
        return hashlib.scrypt(
            normalize_password(password),
            salt=salt,
            n=cfg.n,
            r=cfg.r,
            p=cfg.p,
            maxmem=cfg.maxmem,
            dklen=cfg.dklen,
        )
    except (ValueError, MemoryError) as exc:
        raise DerivationFailed(
            f"scrypt failed (n={cfg.n}, r={cfg.r}, p={cfg.p}, maxmem={cfg.maxmem}): {exc}"
        ) from exc
