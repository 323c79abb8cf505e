"""Lowercase hexadecimal encoding of byte strings."""

from __future__ import annotations

import re

from scryptauth.exceptions import InvalidHexString

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def encode(data: bytes | bytearray | memoryview) -> str:
    """Return *data* as lowercase hex, two digits per byte."""
    return bytes(data).hex()


def decode(text: str) -> bytes:
    """Parse hex *text* into bytes.

    Raises ``InvalidHexString`` on odd length or any non-hex character.
    ``bytes.fromhex`` alone would also accept embedded whitespace.
    """
    if len(text) % 2:
        raise InvalidHexString(f"odd length {len(text)}")
    if not _HEX_RE.fullmatch(text):
        raise InvalidHexString("non-hex character")
    return bytes.fromhex(text)
