"""Stored credential model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from scryptauth.core import hexcodec
from scryptauth.exceptions import InvalidHashFormat, InvalidHexString

SEPARATOR = ":"


class StoredCredential(BaseModel):
    """A persisted ``<salt_hex>:<key_hex>`` password hash."""

    model_config = ConfigDict(frozen=True)

    salt: bytes
    key: bytes

    @classmethod
    def parse(cls, text: str) -> StoredCredential:
        """Split *text* on the first ``:`` and decode both halves.

        Raises ``InvalidHashFormat`` for a missing separator, an empty half or
        malformed hex.
        """
        salt_hex, sep, key_hex = text.partition(SEPARATOR)
        if not sep:
            raise InvalidHashFormat("missing ':' separator")
        if not salt_hex or not key_hex:
            raise InvalidHashFormat("empty salt or key")
        try:
            salt = hexcodec.decode(salt_hex)
            key = hexcodec.decode(key_hex)
        except InvalidHexString as exc:
            raise InvalidHashFormat(exc.reason) from exc
        return cls(salt=salt, key=key)

    def to_string(self) -> str:
        return f"{hexcodec.encode(self.salt)}{SEPARATOR}{hexcodec.encode(self.key)}"

    def __str__(self) -> str:
        return self.to_string()
